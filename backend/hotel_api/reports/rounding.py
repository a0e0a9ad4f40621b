"""Presentation rounding; engine internals accumulate unrounded Decimals."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
UNIT = Decimal("1")
MONEY_PLACES = Decimal("0.01")


def to_money(value: Decimal | int) -> Decimal:
    return Decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def to_unit(value: Decimal | int) -> Decimal:
    return Decimal(value).quantize(UNIT, rounding=ROUND_HALF_UP)


def ratio_percent(numerator: int | Decimal, denominator: int | Decimal) -> Decimal:
    """Return ``numerator / denominator * 100`` unrounded, or zero for an empty base."""
    if denominator <= 0:
        return ZERO
    return Decimal(numerator) * 100 / Decimal(denominator)
