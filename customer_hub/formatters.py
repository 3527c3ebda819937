"""Display formatting for documents, money, dates and account fields.

All formatters take canonical values (numbers, dates, raw documents) and
return Brazilian Portuguese display strings.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from customer_hub.models.financial import AccountType
from customer_hub.normalizers.coercion import to_date

NOT_AVAILABLE = "N/A"

ACCOUNT_TYPE_LABELS = {
    AccountType.CHECKING.value: "Conta Corrente",
    AccountType.SAVINGS.value: "Conta Poupança",
}


def format_document(value: str | None) -> str:
    """Format a CPF (11 digits) or CNPJ (14 digits).

    Anything with another digit count is returned unchanged.
    """
    if not value:
        return NOT_AVAILABLE

    digits = re.sub(r"\D", "", value)
    if len(digits) == 11:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"
    if len(digits) == 14:
        return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
    return value


def format_currency(value: float | Decimal | None) -> str:
    """Format an amount in reais, e.g. ``R$ 1.234,56``."""
    if value is None:
        return "R$ 0,00"

    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    # 1,234.56 -> 1.234,56
    grouped = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {grouped}"


def format_date(value: date | str | None) -> str:
    """Format a date as DD/MM/YYYY.

    Strings are read the way sheet cells are (ISO year-first, anything
    else day-first). Strings that cannot be parsed are returned as they are.
    """
    if not value:
        return NOT_AVAILABLE

    parsed = to_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime("%d/%m/%Y")


def format_account_type(value: Any) -> str:
    """Return the display label for an account kind."""
    if not value:
        return "Tipo não especificado"

    raw = value.value if isinstance(value, AccountType) else value
    return ACCOUNT_TYPE_LABELS.get(raw, raw)


def format_marital_status(value: str | None) -> str:
    """Capitalize the first letter of a marital status."""
    if not value:
        return "Não informado"
    return value[0].upper() + value[1:]
