"""Utility helpers for calculator modules."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")
_BASIS_POINT = Decimal("0.0001")


def _quantize(value: float, step: Decimal) -> float:
    if not math.isfinite(value):
        return float(value)
    # ``repr`` gives the shortest decimal that round-trips, so 757.2925 is
    # rounded as written rather than as its binary approximation.
    return float(Decimal(repr(float(value))).quantize(step, rounding=ROUND_HALF_UP))


def round_currency(value: float) -> float:
    """Round monetary amounts to cents, halves away from zero."""

    return _quantize(value, _CENT)


def round_rate(value: float) -> float:
    """Round rate values to four decimals."""

    return _quantize(value, _BASIS_POINT)


def format_percentage(value: float) -> str:
    """Return a human-readable percentage label for ``value``."""

    percentage = round(value * 100, 6)
    if float(int(percentage)) == percentage:
        return f"{int(percentage)}%"
    return f"{percentage:.2f}%"


__all__ = ["format_percentage", "round_currency", "round_rate"]
