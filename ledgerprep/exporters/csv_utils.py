"""Shared CSV primitives for the dialect encoders."""

import csv
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
CSV_SPECIAL_CHARS = (",", '"', "\r", "\n")

# Row separators. Account exports and transaction exports differ; downstream
# importers were validated against both.
ACCOUNT_ROW_SEPARATOR = "\n"
TRANSACTION_ROW_SEPARATOR = "\r\n"


def escape_csv_field(value: object) -> str:
    """Quote a field only when it contains a comma, quote, CR or LF."""
    if value is None:
        return ""
    text = str(value)
    if any(ch in text for ch in CSV_SPECIAL_CHARS):
        return '"' + text.replace('"', '""') + '"'
    return text


def unescape_csv_field(field: str) -> str:
    """Inverse of :func:`escape_csv_field` for a single field."""
    if not field:
        return ""
    reader = csv.reader([field], strict=True)
    return next(reader)[0]


def format_amount(value: Decimal | int | float | str) -> str:
    """Two decimal places, rounding half up.

    Floats go through ``str`` first so ``12.345`` rounds as written.
    """
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if not rounded:
        rounded = abs(rounded)  # no "-0.00"
    return str(rounded)


def encode_row(fields: Iterable[object]) -> str:
    return ",".join(escape_csv_field(f) for f in fields)


def join_rows(rows: Iterable[str], separator: str) -> str:
    return separator.join(rows)
