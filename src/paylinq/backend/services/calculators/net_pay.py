"""Net pay after withholding and deductions."""

from __future__ import annotations

from collections.abc import Iterable

from .utils import round_currency


def calculate_net_pay(
    gross_pay: float, tax_amount: float, deductions: Iterable[float] = ()
) -> float:
    """Return take-home pay, never below zero.

    Inputs are combined unrounded and the result is rounded once. A shortfall
    (deductions exceeding what is left after tax) yields exactly ``0.0``;
    recovering the remainder is left to the payroll run.
    """

    net = gross_pay - tax_amount - sum(deductions)
    if net < 0:
        return 0.0
    return round_currency(net)


__all__ = ["calculate_net_pay"]
