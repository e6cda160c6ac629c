"""Structural checks for payroll records prior to calculation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from paylinq.backend.models import PayrollData

WORKER_ID_REQUIRED = "Worker ID is required"
COMPENSATION_NOT_POSITIVE = "Compensation amount must be positive"
REGULAR_HOURS_INVALID = "Regular hours must be specified and non-negative"
OVERTIME_HOURS_NEGATIVE = "Overtime hours cannot be negative"
DEDUCTIONS_NEGATIVE = "Deductions cannot be negative"

# Order in which per-field problems are reported.
_FIELD_ORDER = (
    "worker_id",
    "compensation_type",
    "compensation_amount",
    "regular_hours",
    "overtime_hours",
    "deductions",
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`validate_payroll_data`."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict[str, Any]:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


class PayrollValidationError(ValueError):
    """Raised by the calculation service when a payroll record is invalid."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors) or "Invalid payroll data")
        self.errors = list(errors)


def _field_lookup() -> dict[str, str]:
    lookup: dict[str, str] = {}
    for name, info in PayrollData.model_fields.items():
        lookup[name] = name
        if info.alias:
            lookup[info.alias] = name
    return lookup


_FIELD_BY_KEY = _field_lookup()


def _parse(data: Any) -> tuple[PayrollData, dict[str, str]]:
    """Parse ``data`` leniently, returning type problems keyed by field name.

    Fields that fail to parse are dropped and parsing is retried, so the
    remaining fields can still be checked against the payroll rules. Only
    the offending entries of ``deductions`` are dropped, which keeps the
    negative-amount check meaningful for the rest of the list.
    """

    if isinstance(data, PayrollData):
        return data, {}

    if not isinstance(data, Mapping):
        return PayrollData(), {"__root__": "Payroll data must be an object"}

    try:
        return PayrollData.model_validate(dict(data)), {}
    except ValidationError as exc:
        problems: dict[str, str] = {}
        bad_entries: set[int] = set()
        for issue in exc.errors():
            location = issue.get("loc", ())
            key = str(location[0]) if location else "__root__"
            name = _FIELD_BY_KEY.get(key, key)
            problems.setdefault(name, issue.get("msg", "Invalid value"))
            if name == "deductions" and len(location) > 1 and isinstance(location[1], int):
                bad_entries.add(location[1])

    cleaned: dict[Any, Any] = {}
    for key, value in data.items():
        name = _FIELD_BY_KEY.get(str(key), str(key))
        if name == "deductions" and bad_entries and isinstance(value, list):
            cleaned[key] = [
                item for index, item in enumerate(value) if index not in bad_entries
            ]
        elif name not in problems:
            cleaned[key] = value

    try:
        return PayrollData.model_validate(cleaned), problems
    except ValidationError:
        return PayrollData(), problems


def _label(name: str) -> str:
    info = PayrollData.model_fields.get(name)
    if info is not None and info.alias:
        return info.alias
    return name


def validate_payroll_data(data: PayrollData | Mapping[str, Any]) -> ValidationResult:
    """Check ``data`` and collect every problem found, in field order.

    Nothing is raised: malformed input is described in the returned errors.
    Hours are only checked for hourly workers, and negative deductions are
    reported once regardless of how many entries are negative.
    """

    record, problems = _parse(data)
    errors: list[str] = []

    if "__root__" in problems:
        errors.append(problems.pop("__root__"))

    def _problem(name: str) -> bool:
        if name in problems:
            errors.append(f"{_label(name)}: {problems[name]}")
            return True
        return False

    for name in _FIELD_ORDER:
        if _problem(name) and name != "deductions":
            continue

        if name == "worker_id":
            if not record.worker_id or not record.worker_id.strip():
                errors.append(WORKER_ID_REQUIRED)

        elif name == "compensation_amount":
            amount = record.compensation_amount
            if amount is None or not amount > 0:
                errors.append(COMPENSATION_NOT_POSITIVE)

        elif name == "regular_hours":
            if record.compensation_type == "hourly":
                hours = record.regular_hours
                if hours is None or not hours >= 0:
                    errors.append(REGULAR_HOURS_INVALID)

        elif name == "overtime_hours":
            if record.compensation_type == "hourly":
                overtime = record.overtime_hours
                if overtime is not None and overtime < 0:
                    errors.append(OVERTIME_HOURS_NEGATIVE)

        elif name == "deductions":
            if any(amount < 0 for amount in record.deductions):
                errors.append(DEDUCTIONS_NEGATIVE)

    for name, message in problems.items():
        if name not in _FIELD_ORDER:
            errors.append(f"{name}: {message}")

    return ValidationResult(errors=errors)


__all__ = [
    "COMPENSATION_NOT_POSITIVE",
    "DEDUCTIONS_NEGATIVE",
    "OVERTIME_HOURS_NEGATIVE",
    "PayrollValidationError",
    "REGULAR_HOURS_INVALID",
    "ValidationResult",
    "WORKER_ID_REQUIRED",
    "validate_payroll_data",
]
