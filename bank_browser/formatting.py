"""Display formatting for Brazilian currency, dates and tax IDs."""

from __future__ import annotations

import re
from datetime import date
from decimal import ROUND_HALF_UP, Context, Decimal

CURRENCY_SYMBOL = "R$"
NBSP = "\u00a0"
INVALID_DATE = "Invalid Date"

_NON_DIGITS = re.compile(r"\D")
_CENTS = Decimal("0.01")


def format_currency(value: Decimal | float) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,56``.

    The symbol is followed by a non-breaking space. Negative amounts get
    a leading minus sign (``-R$ 10,00``) and NaN renders as ``R$ NaN``.
    """
    value = Decimal(str(value)) if not isinstance(value, Decimal) else value
    if value.is_nan():
        return f"{CURRENCY_SYMBOL}{NBSP}NaN"

    # Precision must cover every integer digit plus the cents.
    context = Context(prec=max(28, value.adjusted() + 3))
    rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP, context=context)
    sign = "-" if rounded < 0 else ""
    # 1,234.56 -> 1.234,56
    body = f"{rounded.copy_abs():,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL}{NBSP}{body}"


def format_date(value: date | None) -> str:
    """Format a date as ``DD/MM/YYYY``; a missing date renders as ``Invalid Date``."""
    if value is None:
        return INVALID_DATE
    return value.strftime("%d/%m/%Y")


def format_tax_id(tax_id: str) -> str:
    """Punctuate a CPF (11 digits) or CNPJ (14 digits).

    Examples
    --------
    >>> format_tax_id("12345678901")
    '123.456.789-01'
    >>> format_tax_id("12345678000199")
    '12.345.678/0001-99'

    Any other number of digits returns the input unchanged.
    """
    digits = _NON_DIGITS.sub("", tax_id)
    if len(digits) == 11:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"
    if len(digits) == 14:
        return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
    return tax_id
