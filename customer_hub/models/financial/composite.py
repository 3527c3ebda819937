"""Customer joined with its accounts and branch."""

from dataclasses import dataclass

from customer_hub.models.financial.account import Account
from customer_hub.models.financial.branch import Branch
from customer_hub.models.financial.customer import Customer


@dataclass(frozen=True)
class CompositeCustomer:
    """A customer merged with its resolved accounts and branch.

    ``accounts`` is None when no account matched the customer's document,
    never an empty tuple. ``branch`` is None when no branch carries the
    customer's branch code.
    """

    customer: Customer
    accounts: tuple[Account, ...] | None = None
    branch: Branch | None = None

    @property
    def customer_id(self) -> str:
        return self.customer.customer_id

    @property
    def name(self) -> str:
        return self.customer.name

    @property
    def document(self) -> str:
        return self.customer.document
