"""Expose payroll year configuration consumed by the payroll front-end.

Forms use these endpoints to populate pay frequency pickers and to display
the wage-tax bands and contribution rates without duplicating statutory
tables in the client.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from flask import Blueprint, jsonify

from paylinq.backend.app.http import problem_response
from paylinq.backend.config.year_config import (
    TaxBracket,
    YearConfiguration,
    load_manifest,
    load_year_configuration,
)
from paylinq.backend.services.calculators import format_percentage
from paylinq.backend.version import get_project_version

blueprint = Blueprint("config", __name__, url_prefix="/api/v1/config")


def get_configuration_metadata() -> dict[str, Any]:
    """Expose runtime metadata derived from the configuration manifest."""

    manifest = load_manifest()
    supported_years = list(manifest.supported_years)
    default_year = supported_years[-1] if supported_years else None
    return {
        "version": get_project_version(),
        "supported_years": supported_years,
        "default_year": default_year,
    }


def _serialise_brackets(brackets: Sequence[TaxBracket]) -> list[dict[str, Any]]:
    return [
        {
            "min": bracket.min,
            "max": bracket.max,
            "rate": bracket.rate,
            "rate_label": format_percentage(bracket.rate),
            "fixed_amount": bracket.fixed_amount,
        }
        for bracket in brackets
    ]


def _serialise_year(config: YearConfiguration) -> dict[str, Any]:
    contributions = config.social_contributions
    return {
        "year": config.year,
        "meta": dict(config.meta),
        "pay_frequencies": {
            "default": config.pay_frequencies.default,
            "periods_per_year": dict(config.pay_frequencies.periods_per_year),
        },
        "overtime": {"default_multiplier": config.overtime.default_multiplier},
        "social_contributions": {
            "aov": contributions.aov.model_dump(mode="json"),
            "aww": contributions.aww.model_dump(mode="json"),
        },
        "wage_tax": {"brackets": _serialise_brackets(config.wage_tax)},
    }


@blueprint.get("/meta")
def get_meta() -> Any:
    return jsonify({"version": get_project_version()})


@blueprint.get("/years")
def list_years() -> Any:
    """List every configured payroll year with its statutory settings."""

    manifest = load_manifest()
    years = []
    for entry in manifest.years:
        payload = _serialise_year(load_year_configuration(entry.year))
        payload["status"] = entry.status
        years.append(payload)

    years.sort(key=lambda item: item["year"])
    default_year = years[-1]["year"] if years else None
    return jsonify({"years": years, "default_year": default_year})


@blueprint.get("/<int:year>/tax-brackets")
def get_tax_brackets(year: int) -> Any:
    try:
        config = load_year_configuration(year)
    except FileNotFoundError as exc:
        return problem_response("not_found", status=404, message=str(exc)).to_response()

    return jsonify({"year": year, "brackets": _serialise_brackets(config.wage_tax)})


@blueprint.get("/<int:year>/pay-frequencies")
def get_pay_frequencies(year: int) -> Any:
    try:
        config = load_year_configuration(year)
    except FileNotFoundError as exc:
        return problem_response("not_found", status=404, message=str(exc)).to_response()

    frequencies = config.pay_frequencies
    return jsonify(
        {
            "year": year,
            "default": frequencies.default,
            "frequencies": [
                {"id": name, "periods_per_year": periods}
                for name, periods in frequencies.periods_per_year.items()
            ],
        }
    )
