"""Unit tests for response formatting helpers."""

from __future__ import annotations

from flask import Flask

from paylinq.backend.models import SocialContributionsModel
from paylinq.backend.services.response_builder import build_calculation_response


def test_build_calculation_response_returns_json(app: Flask) -> None:
    with app.app_context():
        response, status = build_calculation_response({"amount": 12.5})

    assert status == 200
    assert response.get_json() == {"amount": 12.5}


def test_models_are_dumped_by_alias(app: Flask) -> None:
    with app.app_context():
        response, status = build_calculation_response(
            SocialContributionsModel(aov=400, aww=75, total=475), status=201
        )

    assert status == 201
    assert response.get_json() == {"aov": 400.0, "aww": 75.0, "total": 475.0}
