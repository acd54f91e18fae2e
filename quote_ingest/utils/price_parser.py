"""
Price Parser
============

Coerces spreadsheet price cells into a ``Decimal`` amount.

Example inputs:
- "150,50" → 150.50
- "R$ 1.234,56" → 1234.56 (thousands dot, decimal comma)
- "150,00/ha" → 150.00 (unit suffix dropped)
- "85.00" → 85.00
- 120 → 120
- "abc" → 0

Unparseable, empty and non-finite values coerce to zero; callers decide
what a zero price means (the row extractor drops the row).
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Final

ZERO: Final[Decimal] = Decimal("0")

# Currency markers removed before parsing (case-insensitive)
CURRENCY_MARKERS: Final[re.Pattern[str]] = re.compile(r"rs\$|r\$|usd|brl", re.IGNORECASE)

# Anything left that cannot belong to a number ("/ha", "reais", "/L")
NON_NUMERIC: Final[re.Pattern[str]] = re.compile(r"[^0-9,.\-]")


def parse_price(value: str | int | float | Decimal | None) -> Decimal:
    """
    Parse a price value into a Decimal, defaulting to zero.

    Args:
        value: Cell value as decoded from the spreadsheet

    Returns:
        Parsed amount, or Decimal("0") when the value is empty,
        unparseable, NaN or infinite

    Examples:
        >>> parse_price("150,50")
        Decimal('150.50')
        >>> parse_price("1.234,56")
        Decimal('1234.56')
        >>> parse_price("abc")
        Decimal('0')
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return ZERO
        return Decimal(str(value))

    cleaned = CURRENCY_MARKERS.sub("", str(value))
    cleaned = NON_NUMERIC.sub("", cleaned)
    if not cleaned:
        return ZERO

    if "," in cleaned and "." in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    else:
        cleaned = cleaned.replace(",", ".")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return ZERO

    return amount if amount.is_finite() else ZERO


def looks_numeric(value: str | int | float | Decimal | None) -> bool:
    """Return True if the value reads as a number (zero included)."""
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    text = str(value).strip()
    if not text:
        return False
    return parse_price(text) != ZERO or re.fullmatch(r"[\s0.,]+", text) is not None
