"""CSV decoding for spreadsheet exports.

The sheets are exported as loosely formatted CSV: a header row followed by
comma-delimited rows whose fields may be wrapped in double quotes. Decoding
is tolerant: blank lines are ignored and rows whose column count does not
match the header are skipped with a warning instead of aborting the batch.

Field values are coerced from text in a fixed order::

    ""                -> None
    "123"             -> 123
    "12.5"            -> 12.5
    "true" / "FALSE"  -> True / False
    anything else     -> the string itself
"""

from __future__ import annotations

import logging
import re

from customer_hub.models.base import RawRow, RawValue

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\n|\r")
INTEGER = re.compile(r"^[0-9]+$")
DECIMAL = re.compile(r"^[0-9]+\.[0-9]+$")


def decode(text: str) -> list[RawRow]:
    """Decode CSV text into a list of untyped rows.

    Parameters
    ----------
    text : str
        Raw CSV text with a header line.

    Returns
    -------
    list[RawRow]
        One mapping per valid data line, keyed by header column.
        Empty when the text contains no non-blank lines.
    """
    lines = [line for line in LINE_BREAK.split(text) if line.strip()]

    if not lines:
        logger.warning("CSV contains no non-blank lines")
        return []

    headers = [header.strip() for header in split_line(lines[0])]
    logger.debug("CSV headers: %s", headers)

    rows: list[RawRow] = []
    for line_number, line in enumerate(lines[1:], start=2):
        values = split_line(line)

        if len(values) != len(headers):
            logger.warning(
                "Skipping line %d: column count mismatch (expected %d, got %d)",
                line_number,
                len(headers),
                len(values),
            )
            continue

        row: RawRow = {}
        for header, value in zip(headers, values):
            if not header:
                continue
            row[header] = coerce_value(value)

        if row:
            rows.append(row)

    logger.debug("Decoded %d rows from CSV", len(rows))
    return rows


def split_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields, honoring double quotes.

    A doubled quote inside a quoted field yields a literal quote and
    commas inside quotes do not end the field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def coerce_value(value: str) -> RawValue:
    """Convert a decoded field to int, float, bool, None or str."""
    if value == "":
        return None
    if INTEGER.match(value):
        return int(value)
    if DECIMAL.match(value):
        return float(value)

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value
