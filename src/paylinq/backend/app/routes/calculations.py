"""REST endpoints for payslip calculations and payroll record validation."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from paylinq.backend.services import (
    build_calculation_response,
    calculate_payroll,
    parse_json_payload,
    validate_payroll_data,
)

blueprint = Blueprint("calculations", __name__, url_prefix="/api/v1/payroll")


@blueprint.post("/calculations")
def create_calculation() -> tuple[Any, int]:
    """Calculate a payslip for the submitted payroll record."""

    payload = parse_json_payload(request)
    result = calculate_payroll(payload)

    return build_calculation_response(result)


@blueprint.post("/validations")
def validate_record() -> tuple[Any, int]:
    """Report problems with a payroll record without calculating anything."""

    payload = parse_json_payload(request)
    result = validate_payroll_data(payload)

    return build_calculation_response(result.as_dict())
