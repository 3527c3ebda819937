"""Financial domain models."""

from customer_hub.models.financial.account import Account
from customer_hub.models.financial.branch import Branch
from customer_hub.models.financial.composite import CompositeCustomer
from customer_hub.models.financial.customer import Customer
from customer_hub.models.financial.enums import AccountType

__all__ = [
    "Account",
    "AccountType",
    "Branch",
    "CompositeCustomer",
    "Customer",
]
