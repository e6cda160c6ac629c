"""Pydantic models describing the public API surface."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from paylinq.backend.config.schema import TaxBracket

__all__ = [
    "CompensationType",
    "PayrollData",
    "PayrollCalculationOptions",
    "SalaryPayRequest",
    "HourlyPayRequest",
    "TaxWithholdingRequest",
    "NetPayRequest",
    "SocialContributionsRequest",
    "SocialContributionsModel",
    "PayslipSummary",
    "PayslipMeta",
    "PayrollCalculationResponse",
    "ValidationResponse",
    "format_validation_error",
]

CompensationType = Literal["salary", "hourly"]


class ApiModel(BaseModel):
    """Base for request and response bodies exchanged in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        allow_inf_nan=False,
    )


class PayrollData(ApiModel):
    """One worker's compensation inputs for a single pay-period calculation.

    Every field is optional so that incomplete records can still be handed to
    the validator, which reports what is missing instead of failing to parse.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    worker_id: str | None = None
    compensation_type: CompensationType | None = None
    compensation_amount: float | None = None
    regular_hours: float | None = None
    overtime_hours: float | None = None
    deductions: list[float] = Field(default_factory=list)

    @field_validator("deductions", mode="before")
    @classmethod
    def _default_deductions(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class PayrollCalculationOptions(ApiModel):
    """Calculation settings that accompany a payroll record."""

    model_config = ConfigDict(extra="ignore")

    year: int | None = None
    pay_frequency: str | None = None
    overtime_multiplier: float | None = Field(default=None, gt=0)
    tax_brackets: list[TaxBracket] | None = Field(default=None, min_length=1)
    aov_rate: float | None = Field(default=None, ge=0, le=1)
    aww_rate: float | None = Field(default=None, ge=0, le=1)


class SalaryPayRequest(ApiModel):
    annual_amount: float = Field(..., ge=0)
    pay_frequency: str


class HourlyPayRequest(ApiModel):
    hourly_rate: float
    regular_hours: float
    overtime_hours: float = 0.0
    overtime_multiplier: float | None = Field(default=None, gt=0)


class TaxWithholdingRequest(ApiModel):
    """Income plus either explicit brackets or the year whose table applies."""

    income: float
    brackets: list[TaxBracket] | None = Field(default=None, min_length=1)
    year: int | None = None


class NetPayRequest(ApiModel):
    gross_pay: float
    tax_amount: float
    deductions: list[float] = Field(default_factory=list)


class SocialContributionsRequest(ApiModel):
    gross_pay: float
    aov_rate: float | None = Field(default=None, ge=0, le=1)
    aww_rate: float | None = Field(default=None, ge=0, le=1)


class SocialContributionsModel(ApiModel):
    aov: float
    aww: float
    total: float


class PayslipSummary(ApiModel):
    """Monetary results for one worker and pay period."""

    gross_pay: float
    taxable_annual_income: float
    tax_withholding: float
    social_contributions: SocialContributionsModel
    other_deductions: float
    total_deductions: float
    net_pay: float
    effective_tax_rate: float


class PayslipMeta(ApiModel):
    worker_id: str
    compensation_type: CompensationType
    year: int
    pay_frequency: str
    periods_per_year: int
    overtime_multiplier: float | None = None
    custom_brackets: bool = False


class PayrollCalculationResponse(ApiModel):
    summary: PayslipSummary
    meta: PayslipMeta


class ValidationResponse(ApiModel):
    is_valid: bool
    errors: list[str]


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if "greater than or equal to 0" in message.lower():
            message = "value cannot be negative"
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid payroll payload: {details}"
