"""Account normalizer for financial domain."""

from __future__ import annotations

from customer_hub.models.base import RawRow
from customer_hub.models.financial import Account, AccountType
from customer_hub.normalizers.base import BaseNormalizer
from customer_hub.normalizers.coercion import to_document, to_number, to_text


class AccountNormalizer(BaseNormalizer[Account]):
    """Normalize rows of the ``contas`` sheet.

    Columns: id, cpfCnpjCliente, tipo, saldo, limiteCredito,
    creditoDisponivel. A missing ``tipo`` means a checking account.
    """

    identity_columns = ("id", "cpfCnpjCliente")

    def build(self, row: RawRow) -> Account:
        return Account(
            account_id=self.record_id(row),
            owner_document=to_document(row.get("cpfCnpjCliente")),
            account_type=parse_account_type(row.get("tipo")),
            balance=to_number(row.get("saldo"), 0),
            credit_limit=to_number(row.get("limiteCredito"), 0),
            available_credit=to_number(row.get("creditoDisponivel"), 0),
        )


def parse_account_type(value: object) -> AccountType | str:
    """Map a sheet value to AccountType, keeping unknown kinds verbatim."""
    text = to_text(value, AccountType.CHECKING.value)
    try:
        return AccountType(text)
    except ValueError:
        return text
