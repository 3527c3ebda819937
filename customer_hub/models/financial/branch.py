"""Branch model for financial domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Branch:
    """Bank branch (agência)."""

    branch_id: str
    code: int  # join key for Customer.branch_code
    name: str
    address: str = ""
