"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Make ``src`` importable when tests run without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from paylinq.backend.app import create_app  # noqa: E402


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def salaried_record() -> dict[str, object]:
    """A valid monthly salary record in the camelCase shape clients send."""

    return {
        "workerId": "W001",
        "compensationType": "salary",
        "compensationAmount": 60_000,
        "deductions": [],
    }


@pytest.fixture()
def hourly_record() -> dict[str, object]:
    """A valid hourly record with overtime and one voluntary deduction."""

    return {
        "workerId": "W002",
        "compensationType": "hourly",
        "compensationAmount": 20,
        "regularHours": 160,
        "overtimeHours": 10,
        "deductions": [100],
    }
