from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Coerce a DB/JSON value to Decimal. None -> 0; floats go through str()."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def format_money(value: Optional[Decimal]) -> str:
    """Render a monetary amount as a display string with exactly 2 decimals."""
    return str(to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))
