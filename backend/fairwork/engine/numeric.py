"""Decimal helpers shared by the scoring components."""
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

ZERO = Decimal(0)
ONE_PLACE = Decimal("0.1")


def to_decimal(value: Any) -> Decimal:
    """Coerce a numeric field to Decimal; missing values count as zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_one(value: Decimal) -> Decimal:
    """Round to one decimal place for display and score output."""
    return value.quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator, or zero when the denominator is not positive."""
    if denominator <= 0:
        return ZERO
    return numerator / denominator
