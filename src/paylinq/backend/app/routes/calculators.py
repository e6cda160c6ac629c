"""Direct access to the individual payroll calculators.

Each endpoint wraps exactly one calculator so that forms can preview a single
figure (for example a bi-weekly salary) without submitting a full payroll
record.
"""

from __future__ import annotations

from typing import Any, TypeVar

from flask import Blueprint, request
from pydantic import BaseModel, ValidationError

from paylinq.backend.config.year_config import load_year_configuration
from paylinq.backend.models import (
    HourlyPayRequest,
    NetPayRequest,
    SalaryPayRequest,
    SocialContributionsModel,
    SocialContributionsRequest,
    TaxWithholdingRequest,
    format_validation_error,
)
from paylinq.backend.services import build_calculation_response, parse_json_payload
from paylinq.backend.services.calculators import (
    DEFAULT_AOV_RATE,
    DEFAULT_AWW_RATE,
    DEFAULT_OVERTIME_MULTIPLIER,
    SURINAME_TAX_BRACKETS,
    calculate_hourly_pay,
    calculate_net_pay,
    calculate_salary_pay,
    calculate_social_contributions,
    calculate_tax_withholding,
)

blueprint = Blueprint("calculators", __name__, url_prefix="/api/v1/calculators")

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def _load_request(model: type[RequestModel]) -> RequestModel:
    payload = parse_json_payload(request)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc


@blueprint.post("/salary")
def salary_pay() -> tuple[Any, int]:
    body = _load_request(SalaryPayRequest)
    amount = calculate_salary_pay(body.annual_amount, body.pay_frequency)
    return build_calculation_response({"amount": amount})


@blueprint.post("/hourly")
def hourly_pay() -> tuple[Any, int]:
    body = _load_request(HourlyPayRequest)
    amount = calculate_hourly_pay(
        body.hourly_rate,
        body.regular_hours,
        body.overtime_hours,
        body.overtime_multiplier or DEFAULT_OVERTIME_MULTIPLIER,
    )
    return build_calculation_response({"amount": amount})


@blueprint.post("/tax")
def tax_withholding() -> tuple[Any, int]:
    """Apply explicit brackets, the given year's table, or the national default."""

    body = _load_request(TaxWithholdingRequest)
    if body.brackets:
        brackets = body.brackets
    elif body.year is not None:
        brackets = load_year_configuration(body.year).wage_tax
    else:
        brackets = SURINAME_TAX_BRACKETS

    amount = calculate_tax_withholding(body.income, brackets)
    return build_calculation_response({"amount": amount})


@blueprint.post("/net-pay")
def net_pay() -> tuple[Any, int]:
    body = _load_request(NetPayRequest)
    amount = calculate_net_pay(body.gross_pay, body.tax_amount, body.deductions)
    return build_calculation_response({"amount": amount})


@blueprint.post("/social-contributions")
def social_contributions() -> tuple[Any, int]:
    body = _load_request(SocialContributionsRequest)
    result = calculate_social_contributions(
        body.gross_pay,
        DEFAULT_AOV_RATE if body.aov_rate is None else body.aov_rate,
        DEFAULT_AWW_RATE if body.aww_rate is None else body.aww_rate,
    )
    return build_calculation_response(SocialContributionsModel(**result.as_dict()))
