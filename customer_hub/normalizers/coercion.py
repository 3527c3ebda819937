"""Coercion of untyped sheet values into typed fields.

Sheet cells arrive as int, float, bool, str or None (see
:mod:`customer_hub.ingest.decoder`). These helpers never raise: malformed
input resolves to a default.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

NON_NUMERIC = re.compile(r"[^\d.,]")
NON_DIGIT = re.compile(r"\D")
LEADING_FLOAT = re.compile(r"\d+(?:\.\d*)?|\.\d+")
ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")

CPF_LENGTH = 11
CNPJ_LENGTH = 14


def is_blank(value: Any) -> bool:
    """Return True for values a sheet treats as "not filled in".

    Mirrors the truthiness rules of the spreadsheet consumer: None, empty
    strings, False and zero all count as blank.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def to_text(value: Any, default: str = "") -> str:
    """Convert a cell to a string, or ``default`` when blank."""
    if is_blank(value):
        return default
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, bool):
        return "true"
    return str(value)


def to_optional_text(value: Any) -> str | None:
    """Convert a cell to a string, or None when blank."""
    text = to_text(value)
    return text or None


def to_number(value: Any, default: float = 0) -> float:
    """Convert a cell to a number.

    Numbers pass through unchanged. Anything else is stringified, stripped
    of every character except digits, commas and periods, and the first
    comma becomes the decimal point. Brazilian grouping such as
    ``"1.234,56"`` drops the thousands separators first.

    Parameters
    ----------
    value : Any
        Cell value.
    default : float
        Returned for missing or unparseable input.

    Returns
    -------
    float
        Parsed number, or ``default``.
    """
    if value is None:
        return default

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value

    cleaned = NON_NUMERIC.sub("", str(value))
    if "," in cleaned and "." in cleaned and cleaned.rfind(",") > cleaned.rfind("."):
        cleaned = cleaned.replace(".", "")
    cleaned = cleaned.replace(",", ".", 1)

    match = LEADING_FLOAT.match(cleaned)
    if match is None:
        return default
    return float(match.group())


def to_int(value: Any, default: int = 0) -> int:
    """Convert a cell to an integer code (branch codes)."""
    return int(to_number(value, default))


def to_date(value: Any) -> date | None:
    """Convert a cell to a date.

    Missing or unparseable values yield None instead of a made-up date.
    ISO strings (``1980-05-15``) are read as year-first, everything else
    as day-first (``15/05/1980``).
    """
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        return date_parser.parse(text, dayfirst=not ISO_DATE.match(text)).date()
    except (ValueError, OverflowError) as exc:
        logger.debug("Unparseable date %r: %s", value, exc)
        return None


def to_document(value: Any) -> str:
    """Convert a CPF/CNPJ cell to text, restoring leading zeros.

    An unpunctuated document such as ``01234567890`` reaches the
    normalizer as the int ``1234567890``. Integers are zero-padded back to
    11 digits, or to 14 when they are longer than a CPF.
    """
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        digits = str(value)
        width = CPF_LENGTH if len(digits) <= CPF_LENGTH else CNPJ_LENGTH
        return digits.zfill(width)
    return to_text(value)


def normalize_document(value: Any) -> str:
    """Strip every non-digit character from a CPF/CNPJ."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return NON_DIGIT.sub("", str(value))
