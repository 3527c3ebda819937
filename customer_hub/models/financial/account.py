"""Account model for financial domain."""

from dataclasses import dataclass

from customer_hub.models.financial.enums import AccountType


@dataclass(frozen=True)
class Account:
    """Bank account entity.

    ``account_type`` is an :class:`AccountType` for the known kinds
    (corrente, poupanca). Any other value from the sheet is kept as the
    literal string.
    """

    account_id: str
    owner_document: str
    account_type: AccountType | str
    balance: float = 0
    credit_limit: float = 0
    available_credit: float = 0
