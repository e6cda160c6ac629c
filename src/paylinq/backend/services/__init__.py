"""Service-layer helpers for the PayLinq backend."""

from .calculation_service import calculate_payroll
from .request_parser import parse_json_payload
from .response_builder import build_calculation_response
from .validation import PayrollValidationError, ValidationResult, validate_payroll_data

__all__ = [
    "PayrollValidationError",
    "ValidationResult",
    "build_calculation_response",
    "calculate_payroll",
    "parse_json_payload",
    "validate_payroll_data",
]
