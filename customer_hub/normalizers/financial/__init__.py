"""Financial domain normalizers."""

from customer_hub.normalizers.financial.account import AccountNormalizer
from customer_hub.normalizers.financial.branch import BranchNormalizer
from customer_hub.normalizers.financial.customer import CustomerNormalizer

__all__ = [
    "AccountNormalizer",
    "BranchNormalizer",
    "CustomerNormalizer",
]
