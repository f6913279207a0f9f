"""Request validation for FizzBuzz parameters.

Validation runs before any core object is built. Constraints live on the
``ParameterSet`` model; this module turns pydantic's error list into one
short, human-readable message per field.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from .models import ParameterSet


class RequestValidationError(Exception):
    """Raised when request parameters fail validation."""

    def __init__(self, errors: list[tuple[str, str]]):
        super().__init__("Validation failed")
        self.errors: dict[str, str] = {}
        for field, message in errors:
            self.errors.setdefault(field, message)


def _message_for(error: dict) -> str:
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    if error_type == "missing" or error.get("input") is None:
        return "is required"
    if error_type == "int_type":
        return "must be an integer"
    if error_type == "string_type":
        return "must be a string"
    if error_type == "greater_than":
        return "must be positive"
    if error_type == "less_than_equal":
        return f"must be less than or equal to {ctx['le']}"
    if error_type == "string_too_short":
        return "is required"
    if error_type == "string_too_long":
        return f"must be at most {ctx['max_length']} characters"
    return error["msg"]


def _collect(exc: ValidationError) -> list[tuple[str, str]]:
    errors = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.append((field, _message_for(error)))
    return errors


def validate_parameters(data: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Return (field, message) pairs for every failed constraint. Empty means valid."""
    try:
        ParameterSet.model_validate(dict(data))
    except ValidationError as exc:
        return _collect(exc)
    return []


def parse_parameters(data: Mapping[str, Any]) -> ParameterSet:
    """Validate and build a ParameterSet, raising RequestValidationError on failure."""
    errors = validate_parameters(data)
    if errors:
        raise RequestValidationError(errors)
    return ParameterSet.model_validate(dict(data))
