"""Compose the payroll calculators into a single payslip computation.

The calculators are deliberately ignorant of configuration: they take rates,
brackets and frequencies as arguments. This module validates the incoming
record, resolves those arguments from the payroll year configuration (or
per-request overrides), and assembles the payslip summary returned by the
API. Profiling hooks live here as well so ``calculate_payroll`` remains the
one entry point callers need.
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from contextlib import contextmanager
from time import perf_counter
from typing import Any

from pydantic import ValidationError

from paylinq.backend.config.year_config import (
    YearConfiguration,
    default_year,
    load_year_configuration,
)
from paylinq.backend.models import (
    PayrollCalculationOptions,
    PayrollCalculationResponse,
    PayrollData,
    PayrollInput,
    format_validation_error,
)

from .calculators import (
    calculate_hourly_pay,
    calculate_net_pay,
    calculate_salary_pay,
    calculate_social_contributions,
    calculate_tax_withholding,
    periods_per_year,
    round_currency,
    round_rate,
)
from .validation import PayrollValidationError, validate_payroll_data

COMPENSATION_TYPE_REQUIRED = "Compensation type must be 'salary' or 'hourly'"
PAY_OUT_OF_RANGE = "Calculated pay is too large to represent"

_LOGGER = logging.getLogger(__name__)


def _profiling_enabled() -> bool:
    """Return ``True`` when calculation profiling should be captured."""

    flag = os.getenv("PAYLINQ_PROFILE_CALCULATIONS", "")
    return flag.strip().lower() in {"1", "true", "yes", "on"}


@contextmanager
def _profile_section(name: str, store: dict[str, float] | None):
    if store is None:
        yield
        return

    start = perf_counter()
    try:
        yield
    finally:
        store[name] = perf_counter() - start


def _parse_payload(
    payload: Mapping[str, Any],
) -> tuple[PayrollData, PayrollCalculationOptions]:
    result = validate_payroll_data(payload)
    if not result.is_valid:
        raise PayrollValidationError(result.errors)

    record = PayrollData.model_validate(dict(payload))
    if record.compensation_type is None:
        raise PayrollValidationError([COMPENSATION_TYPE_REQUIRED])

    try:
        options = PayrollCalculationOptions.model_validate(dict(payload))
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc

    return record, options


def _normalise_payload(
    record: PayrollData,
    options: PayrollCalculationOptions,
    config: YearConfiguration,
) -> PayrollInput:
    frequencies = config.pay_frequencies
    pay_frequency = options.pay_frequency or frequencies.default
    periods = periods_per_year(pay_frequency, frequencies.periods_per_year)

    multiplier = options.overtime_multiplier or config.overtime.default_multiplier

    custom_brackets = bool(options.tax_brackets)
    brackets = tuple(options.tax_brackets or config.wage_tax)

    contributions = config.social_contributions
    aov_rate = contributions.aov.rate if options.aov_rate is None else options.aov_rate
    aww_rate = contributions.aww.rate if options.aww_rate is None else options.aww_rate

    # ``validate_payroll_data`` guarantees these are present for hourly workers.
    regular_hours = record.regular_hours or 0.0
    overtime_hours = record.overtime_hours or 0.0

    return PayrollInput(
        worker_id=(record.worker_id or "").strip(),
        compensation_type=record.compensation_type or "salary",
        compensation_amount=float(record.compensation_amount or 0.0),
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
        deductions=tuple(record.deductions),
        year=config.year,
        pay_frequency=pay_frequency,
        periods_per_year=periods,
        overtime_multiplier=multiplier,
        brackets=brackets,
        custom_brackets=custom_brackets,
        aov_rate=aov_rate,
        aww_rate=aww_rate,
        aov_annual_cap=contributions.aov.annual_cap,
        aww_annual_cap=contributions.aww.annual_cap,
    )


def _gross_pay(normalised: PayrollInput, config: YearConfiguration) -> float:
    if normalised.is_hourly:
        return calculate_hourly_pay(
            normalised.compensation_amount,
            normalised.regular_hours,
            normalised.overtime_hours,
            normalised.overtime_multiplier,
        )
    return calculate_salary_pay(
        normalised.compensation_amount,
        normalised.pay_frequency,
        table=config.pay_frequencies.periods_per_year,
    )


def _period_cap(annual_cap: float | None, periods: int) -> float | None:
    if annual_cap is None:
        return None
    return round_currency(annual_cap / periods)


def calculate_payroll(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Compute one worker's payslip for the pay period described by ``payload``.

    Wage tax is withheld on an annualised basis: gross pay is projected over
    the year's periods, taxed with the year's brackets, and the result is
    spread back evenly across the periods.
    """

    if not isinstance(payload, Mapping):
        raise ValueError("Payload must be a mapping")

    timings: dict[str, float] | None = {} if _profiling_enabled() else None
    overall_start = perf_counter() if timings is not None else None

    with _profile_section("validate", timings):
        record, options = _parse_payload(payload)

    year = options.year if options.year is not None else default_year()
    config = load_year_configuration(year)

    with _profile_section("normalise_payload", timings):
        normalised = _normalise_payload(record, options, config)

    periods = normalised.periods_per_year

    with _profile_section("gross_pay", timings):
        gross_pay = _gross_pay(normalised, config)

    with _profile_section("tax_withholding", timings):
        annual_income = gross_pay * periods
        annual_tax = calculate_tax_withholding(annual_income, normalised.brackets)
        tax_withholding = round_currency(annual_tax / periods)

    if not (math.isfinite(gross_pay) and math.isfinite(annual_income)):
        raise ValueError(PAY_OUT_OF_RANGE)

    with _profile_section("social_contributions", timings):
        contributions = calculate_social_contributions(
            gross_pay,
            normalised.aov_rate,
            normalised.aww_rate,
            aov_cap=_period_cap(normalised.aov_annual_cap, periods),
            aww_cap=_period_cap(normalised.aww_annual_cap, periods),
        )

    with _profile_section("net_pay", timings):
        net_pay = calculate_net_pay(
            gross_pay,
            tax_withholding,
            [contributions.total, *normalised.deductions],
        )

    other_deductions = round_currency(normalised.other_deductions)
    total_deductions = round_currency(
        tax_withholding + contributions.total + normalised.other_deductions
    )
    effective_tax_rate = tax_withholding / gross_pay if gross_pay > 0 else 0.0

    if timings is not None and overall_start is not None:
        timings["total"] = perf_counter() - overall_start
        _LOGGER.debug(
            "calculate_payroll timings (ms): %s",
            {name: round(duration * 1000, 3) for name, duration in timings.items()},
        )

    _LOGGER.debug(
        "Calculated payslip for worker %s (%s, %s): gross=%.2f net=%.2f",
        normalised.worker_id,
        normalised.compensation_type,
        normalised.pay_frequency,
        gross_pay,
        net_pay,
    )

    response_model = PayrollCalculationResponse.model_validate(
        {
            "summary": {
                "gross_pay": gross_pay,
                "taxable_annual_income": round_currency(annual_income),
                "tax_withholding": tax_withholding,
                "social_contributions": contributions.as_dict(),
                "other_deductions": other_deductions,
                "total_deductions": total_deductions,
                "net_pay": net_pay,
                "effective_tax_rate": round_rate(effective_tax_rate),
            },
            "meta": {
                "worker_id": normalised.worker_id,
                "compensation_type": normalised.compensation_type,
                "year": normalised.year,
                "pay_frequency": normalised.pay_frequency,
                "periods_per_year": periods,
                "overtime_multiplier": (
                    normalised.overtime_multiplier if normalised.is_hourly else None
                ),
                "custom_brackets": normalised.custom_brackets,
            },
        }
    )

    return response_model.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["COMPENSATION_TYPE_REQUIRED", "PAY_OUT_OF_RANGE", "calculate_payroll"]
