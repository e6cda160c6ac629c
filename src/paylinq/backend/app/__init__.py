"""Application factory for PayLinq payroll services."""

from __future__ import annotations

import logging
import os
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from paylinq.backend.services import PayrollValidationError

from .http import problem_response
from .routes import register_routes
from .routes.config import get_configuration_metadata

_LOGGER = logging.getLogger(__name__)


def _parse_allowed_origins(raw: str | None) -> set[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return set()

    return {origin.strip() for origin in raw.split(",") if origin.strip()}


def _configure_logging() -> None:
    level_name = os.getenv("PAYLINQ_LOG_LEVEL", "").strip().upper()
    if not level_name:
        return

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        warn(f"Ignoring unknown PAYLINQ_LOG_LEVEL value {level_name!r}", stacklevel=2)
        return

    logging.getLogger("paylinq").setLevel(level)


def create_app() -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    _configure_logging()

    allowed_origins = _parse_allowed_origins(os.getenv("PAYLINQ_ALLOWED_ORIGINS"))

    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST"],
        allow_headers=["Content-Type"],
    )

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {"status": "ok", **get_configuration_metadata()}
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(PayrollValidationError)
    def handle_payroll_validation_error(error: PayrollValidationError):
        """Report every problem found in a payroll record."""

        return problem_response(
            "invalid_payroll_data",
            status=422,
            message="Payroll data failed validation",
            errors=error.errors,
        ).to_response()

    @app.errorhandler(FileNotFoundError)
    def handle_missing_configuration(error: FileNotFoundError):
        """Unknown payroll years surface as 404 responses."""

        return problem_response("not_found", status=404, message=str(error)).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Gracefully surface domain validation errors to clients."""

        _LOGGER.info("Rejected request: %s", error)
        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app
