"""Utilities for serialising calculation responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Tuple

from flask import jsonify
from pydantic import BaseModel

ResponseTuple = Tuple[Any, int]


def build_calculation_response(
    payload: Mapping[str, Any] | BaseModel, status: int = 200
) -> ResponseTuple:
    """Return a Flask JSON response for ``payload``.

    Pydantic models are dumped with their camelCase aliases so every endpoint
    answers in the same key style.
    """

    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return jsonify(payload), status


__all__ = ["build_calculation_response"]
