"""Utilities for validating payroll year configuration and surfacing issues."""

from __future__ import annotations

import argparse
from typing import Sequence

from .year_config import (
    FlatRateContribution,
    OvertimeConfig,
    PayFrequencyConfig,
    TaxBracket,
    YearConfiguration,
    available_years,
    load_year_configuration,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def validate_bracket_table(scope: str, brackets: Sequence[TaxBracket]) -> list[str]:
    """Report ordering problems in a marginal bracket table.

    The calculators trust their bracket tables blindly, so this is the one
    place where gaps, overlaps or a bounded top band are caught.
    """

    errors: list[str] = []

    if not brackets:
        return [_format_scope(scope, "no tax brackets defined")]

    first = brackets[0]
    if first.min != 0:
        errors.append(_format_scope(scope, "first bracket must start at 0"))

    for index, bracket in enumerate(brackets):
        if not 0 <= bracket.rate <= 1:
            errors.append(
                _format_scope(
                    scope,
                    f"bracket {index + 1} rate {bracket.rate} must be between 0 and 1",
                )
            )

        if index == len(brackets) - 1:
            if bracket.max is not None:
                errors.append(_format_scope(scope, "last bracket must be unbounded"))
            continue

        following = brackets[index + 1]
        if bracket.max is None:
            errors.append(
                _format_scope(scope, f"bracket {index + 1} is unbounded but not last")
            )
            continue

        if following.min > bracket.max:
            errors.append(
                _format_scope(
                    scope,
                    f"gap between {bracket.max} and {following.min} after bracket {index + 1}",
                )
            )
        elif following.min < bracket.max:
            errors.append(
                _format_scope(
                    scope,
                    f"bracket {index + 2} overlaps bracket {index + 1}",
                )
            )

    return errors


def _validate_contribution(scope: str, contribution: FlatRateContribution) -> list[str]:
    if 0 <= contribution.rate <= 1:
        return []
    return [
        _format_scope(
            scope, f"contribution rate {contribution.rate} must be between 0 and 1"
        )
    ]


def _validate_pay_frequencies(frequencies: PayFrequencyConfig) -> list[str]:
    errors: list[str] = []

    for name, periods in frequencies.periods_per_year.items():
        if periods <= 0:
            errors.append(
                _format_scope(
                    "pay_frequencies",
                    f"frequency '{name}' must have a positive number of periods",
                )
            )

    return errors


def _validate_overtime(overtime: OvertimeConfig) -> list[str]:
    if overtime.default_multiplier >= 1:
        return []
    return [
        _format_scope(
            "overtime",
            f"default multiplier {overtime.default_multiplier} pays less than regular time",
        )
    ]


def validate_year_configuration(config: YearConfiguration) -> list[str]:
    """Return a list of human-readable issues detected in ``config``."""

    errors: list[str] = []

    errors.extend(validate_bracket_table("wage_tax", config.wage_tax))
    errors.extend(
        _validate_contribution("social_contributions.aov", config.social_contributions.aov)
    )
    errors.extend(
        _validate_contribution("social_contributions.aww", config.social_contributions.aww)
    )
    errors.extend(_validate_pay_frequencies(config.pay_frequencies))
    errors.extend(_validate_overtime(config.overtime))

    return errors


def validate_all_years(years: Sequence[int] | None = None) -> dict[int, list[str]]:
    """Validate all configured years and return issues keyed by year."""

    targets = years or available_years()
    results: dict[int, list[str]] = {}

    for year in targets:
        config = load_year_configuration(year)
        results[int(year)] = validate_year_configuration(config)

    return results


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate configured payroll years and report issues."
    )
    parser.add_argument(
        "years",
        nargs="*",
        type=int,
        help="Specific years to validate (defaults to all configured years)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    years = args.years or available_years()

    if not years:
        parser.print_help()
        return 1

    exit_code = 0

    for year in years:
        try:
            config = load_year_configuration(year)
        except FileNotFoundError as error:
            print(f"[{year}] failed to load configuration: {error}")
            exit_code = 1
            continue

        issues = validate_year_configuration(config)
        if issues:
            exit_code = 1
            print(f"[{year}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{year}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
