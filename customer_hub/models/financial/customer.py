"""Customer model for financial domain."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Customer:
    """Bank customer as read from the customers sheet."""

    customer_id: str
    document: str  # CPF or CNPJ, formatted or digits-only
    name: str
    email: str
    address: str
    annual_income: float
    net_worth: float
    marital_status: str
    branch_code: int
    birth_date: date | None = None  # None when missing or unparseable
    national_id: str | None = None  # RG
    social_name: str | None = None
