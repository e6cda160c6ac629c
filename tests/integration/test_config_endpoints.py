"""Integration coverage for configuration metadata endpoints."""

from http import HTTPStatus

import pytest
from flask.testing import FlaskClient

from paylinq.backend.version import get_project_version


def test_meta_endpoint(client: FlaskClient) -> None:
    response = client.get("/api/v1/config/meta")

    assert response.status_code == HTTPStatus.OK
    assert response.get_json() == {"version": get_project_version()}


def test_list_years_endpoint(client: FlaskClient) -> None:
    response = client.get("/api/v1/config/years")

    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    years = {entry["year"]: entry for entry in payload["years"]}
    assert set(years) == {2024, 2025}
    assert payload["default_year"] == 2025

    current = years[2025]
    assert current["status"] == "active"
    assert current["pay_frequencies"]["default"] == "monthly"
    assert current["pay_frequencies"]["periods_per_year"]["weekly"] == 52
    assert current["overtime"]["default_multiplier"] == pytest.approx(1.5)
    assert current["social_contributions"]["aov"]["rate"] == pytest.approx(0.08)
    assert current["social_contributions"]["aov"]["annual_cap"] is None
    assert current["social_contributions"]["aww"]["rate"] == pytest.approx(0.015)
    assert len(current["wage_tax"]["brackets"]) == 4

    assert years[2024]["status"] == "legacy"
    assert years[2024]["social_contributions"]["aov"]["rate"] == pytest.approx(0.04)


def test_tax_brackets_endpoint(client: FlaskClient) -> None:
    response = client.get("/api/v1/config/2025/tax-brackets")

    assert response.status_code == HTTPStatus.OK
    brackets = response.get_json()["brackets"]
    assert [bracket["rate_label"] for bracket in brackets] == ["0%", "8%", "15%", "25%"]
    assert brackets[0]["max"] == 15_000
    assert brackets[-1]["max"] is None


def test_pay_frequencies_endpoint(client: FlaskClient) -> None:
    response = client.get("/api/v1/config/2025/pay-frequencies")

    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["default"] == "monthly"
    assert payload["frequencies"] == [
        {"id": "weekly", "periods_per_year": 52},
        {"id": "bi-weekly", "periods_per_year": 26},
        {"id": "semi-monthly", "periods_per_year": 24},
        {"id": "monthly", "periods_per_year": 12},
    ]


@pytest.mark.parametrize("path", ["tax-brackets", "pay-frequencies"])
def test_unknown_year_returns_not_found(client: FlaskClient, path: str) -> None:
    response = client.get(f"/api/v1/config/1999/{path}")

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json()["error"] == "not_found"
