"""Unit tests for progressive wage-tax withholding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from paylinq.backend.config.schema import TaxBracket
from paylinq.backend.services.calculators import (
    SURINAME_TAX_BRACKETS,
    calculate_flat_rate_tax,
    calculate_tax_withholding,
)


@pytest.mark.parametrize(
    ("income", "expected"),
    [
        (0, 0.0),
        (-500, 0.0),
        (10_000, 0.0),
        (15_000, 0.0),
        (30_000, 1200.0),
        (40_000, 2700.0),
        (50_000, 4200.0),
        (60_000, 6700.0),
    ],
)
def test_default_brackets(income: float, expected: float) -> None:
    assert calculate_tax_withholding(income, SURINAME_TAX_BRACKETS) == expected


def test_brackets_default_to_national_table() -> None:
    assert calculate_tax_withholding(40_000) == 2700.0


def test_boundary_income_stays_in_lower_bracket() -> None:
    assert calculate_tax_withholding(15_000, SURINAME_TAX_BRACKETS) == 0.0
    assert calculate_tax_withholding(15_000.10, SURINAME_TAX_BRACKETS) == 0.01


def test_tax_is_monotonic_in_income() -> None:
    incomes = [step * 2_500 for step in range(0, 41)]
    taxes = [calculate_tax_withholding(income) for income in incomes]

    assert taxes == sorted(taxes)


def test_custom_bracket_table() -> None:
    brackets = (
        TaxBracket(min=0, max=10_000, rate=0.1),
        TaxBracket(min=10_000, max=None, rate=0.2),
    )

    assert calculate_tax_withholding(25_000, brackets) == 4000.0


def test_fixed_amount_applies_once_income_reaches_bracket() -> None:
    brackets = (
        TaxBracket(min=0, max=1_000, rate=0.0),
        TaxBracket(min=1_000, max=None, rate=0.1, fixed_amount=50),
    )

    assert calculate_tax_withholding(1_000, brackets) == 0.0
    assert calculate_tax_withholding(2_000, brackets) == 150.0


def test_bracket_aliases_match_stored_column_names() -> None:
    bracket = TaxBracket.model_validate({"income_min": 100, "income_max": 200, "rate": 0.1})

    assert (bracket.min, bracket.max) == (100, 200)


def test_default_table_is_immutable() -> None:
    assert isinstance(SURINAME_TAX_BRACKETS, tuple)
    with pytest.raises(ValidationError):
        SURINAME_TAX_BRACKETS[0].rate = 0.5  # type: ignore[misc]


def test_flat_rate_tax_without_cap() -> None:
    assert calculate_flat_rate_tax(1_000, 0.08) == 80.0


def test_flat_rate_tax_respects_cap() -> None:
    assert calculate_flat_rate_tax(100_000, 0.08, cap=1_600) == 1600.0
    assert calculate_flat_rate_tax(10_000, 0.08, cap=1_600) == 800.0
