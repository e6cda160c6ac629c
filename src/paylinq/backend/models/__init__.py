"""Typed request/response models shared across the payroll services.

Requests are parsed into the Pydantic models from :mod:`.api`; the service
layer then resolves them against the year configuration into a frozen
:class:`PayrollInput`, which is all the calculators ever see.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from paylinq.backend.config.schema import TaxBracket

from .api import (
    CompensationType,
    HourlyPayRequest,
    NetPayRequest,
    PayrollCalculationOptions,
    PayrollCalculationResponse,
    PayrollData,
    PayslipMeta,
    PayslipSummary,
    SalaryPayRequest,
    SocialContributionsModel,
    SocialContributionsRequest,
    TaxWithholdingRequest,
    ValidationResponse,
    format_validation_error,
)

__all__ = [
    "CompensationType",
    "HourlyPayRequest",
    "NetPayRequest",
    "PayrollCalculationOptions",
    "PayrollCalculationResponse",
    "PayrollData",
    "PayrollInput",
    "PayslipMeta",
    "PayslipSummary",
    "SalaryPayRequest",
    "SocialContributionsModel",
    "SocialContributionsRequest",
    "TaxWithholdingRequest",
    "ValidationResponse",
    "format_validation_error",
]


@dataclass(frozen=True, slots=True)
class PayrollInput:
    """Validated payroll record merged with the year's statutory settings."""

    worker_id: str
    compensation_type: CompensationType
    compensation_amount: float
    regular_hours: float
    overtime_hours: float
    deductions: tuple[float, ...]
    year: int
    pay_frequency: str
    periods_per_year: int
    overtime_multiplier: float
    brackets: Sequence[TaxBracket]
    custom_brackets: bool
    aov_rate: float
    aww_rate: float
    aov_annual_cap: float | None = None
    aww_annual_cap: float | None = None

    @property
    def is_hourly(self) -> bool:
        return self.compensation_type == "hourly"

    @property
    def other_deductions(self) -> float:
        return sum(self.deductions)
