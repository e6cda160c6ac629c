"""Gross pay for salaried and hourly workers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, Literal

from .utils import round_currency

PayFrequency = Literal["weekly", "bi-weekly", "semi-monthly", "monthly"]

PERIODS_PER_YEAR: Final[Mapping[str, int]] = MappingProxyType(
    {
        "weekly": 52,
        "bi-weekly": 26,
        "semi-monthly": 24,
        "monthly": 12,
    }
)

DEFAULT_OVERTIME_MULTIPLIER: Final = 1.5


def periods_per_year(
    pay_frequency: str, table: Mapping[str, int] = PERIODS_PER_YEAR
) -> int:
    """Return the number of pay periods in a year for ``pay_frequency``."""

    try:
        return table[pay_frequency]
    except KeyError:
        allowed = ", ".join(table)
        raise ValueError(
            f"Unsupported pay frequency: {pay_frequency!r} (expected one of {allowed})"
        ) from None


def calculate_salary_pay(
    annual_amount: float,
    pay_frequency: PayFrequency | str,
    *,
    table: Mapping[str, int] = PERIODS_PER_YEAR,
) -> float:
    """Return the per-period share of ``annual_amount`` for ``pay_frequency``.

    ``table`` maps frequency names to periods per year and defaults to the
    standard weekly, bi-weekly, semi-monthly and monthly calendar.
    """

    return round_currency(annual_amount / periods_per_year(pay_frequency, table))


def calculate_hourly_pay(
    hourly_rate: float,
    regular_hours: float,
    overtime_hours: float,
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER,
) -> float:
    """Return regular plus premium-rated overtime earnings for one period."""

    regular_pay = regular_hours * hourly_rate
    overtime_pay = overtime_hours * hourly_rate * overtime_multiplier
    return round_currency(regular_pay + overtime_pay)


__all__ = [
    "DEFAULT_OVERTIME_MULTIPLIER",
    "PERIODS_PER_YEAR",
    "PayFrequency",
    "calculate_hourly_pay",
    "calculate_salary_pay",
    "periods_per_year",
]
