"""Tests for the payroll configuration validator and its CLI."""

from __future__ import annotations

import pytest

from paylinq.backend.config.schema import TaxBracket
from paylinq.backend.config.validator import (
    main,
    validate_all_years,
    validate_bracket_table,
    validate_year_configuration,
)
from paylinq.backend.config.year_config import load_year_configuration


def test_current_configurations_are_valid() -> None:
    results = validate_all_years()
    assert all(not issues for issues in results.values()), results


def test_bracket_gap_is_reported() -> None:
    brackets = (
        TaxBracket(min=0, max=10_000, rate=0.0),
        TaxBracket(min=12_000, max=None, rate=0.1),
    )

    errors = validate_bracket_table("wage_tax", brackets)

    assert len(errors) == 1
    assert errors[0].startswith("wage_tax: gap between")


def test_bracket_overlap_is_reported() -> None:
    brackets = (
        TaxBracket(min=0, max=10_000, rate=0.0),
        TaxBracket(min=8_000, max=None, rate=0.1),
    )

    assert any("overlaps" in error for error in validate_bracket_table("wage_tax", brackets))


def test_bounded_last_bracket_is_reported() -> None:
    brackets = (TaxBracket(min=0, max=10_000, rate=0.1),)

    assert validate_bracket_table("wage_tax", brackets) == [
        "wage_tax: last bracket must be unbounded"
    ]


def test_unbounded_middle_bracket_is_reported() -> None:
    brackets = (
        TaxBracket(min=0, max=None, rate=0.1),
        TaxBracket(min=10_000, max=None, rate=0.2),
    )

    assert any("not last" in error for error in validate_bracket_table("wage_tax", brackets))


def test_first_bracket_must_start_at_zero() -> None:
    brackets = (TaxBracket(min=100, max=None, rate=0.1),)

    assert validate_bracket_table("wage_tax", brackets) == [
        "wage_tax: first bracket must start at 0"
    ]


def test_rate_above_one_is_reported() -> None:
    brackets = (TaxBracket(min=0, max=None, rate=1.5),)

    assert any("between 0 and 1" in error for error in validate_bracket_table("x", brackets))


def test_validator_flags_invalid_contribution_rate() -> None:
    config = load_year_configuration(2025)
    contributions = config.social_contributions.model_copy(
        update={"aww": config.social_contributions.aww.model_copy(update={"rate": 1.5})}
    )
    broken = config.model_copy(update={"social_contributions": contributions})

    errors = validate_year_configuration(broken)

    assert any(
        "social_contributions.aww" in error and "between 0 and 1" in error
        for error in errors
    )


def test_validator_flags_overtime_below_regular_rate() -> None:
    config = load_year_configuration(2025)
    broken = config.model_copy(
        update={"overtime": config.overtime.model_copy(update={"default_multiplier": 0.5})}
    )

    assert any(error.startswith("overtime:") for error in validate_year_configuration(broken))


def test_cli_reports_success(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["2025"]) == 0
    assert "[2025] OK" in capsys.readouterr().out


def test_cli_reports_missing_year(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1999"]) == 1
    assert "failed to load configuration" in capsys.readouterr().out
