"""Zero-guarded arithmetic shared by every aggregate.

An empty input is a normal state for these reports (a hotel without rooms,
competitors or ledger entries), so the helpers return zero instead of raising.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Union

Number = Union[int, float, Decimal]

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value: Any) -> Optional[Decimal]:
    """Coerce store values (str, int, float, Decimal) into a finite Decimal."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            # str() keeps 4.8 as 4.8 instead of its binary float expansion.
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None
    if not result.is_finite():
        return None
    return result


def safe_divide(numerator: Number, denominator: Number) -> float:
    if not denominator:
        return 0.0
    return float(numerator) / float(denominator)


def safe_average(values: Iterable[Decimal]) -> Decimal:
    items = list(values)
    if not items:
        return ZERO
    return sum(items, ZERO) / Decimal(len(items))


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
