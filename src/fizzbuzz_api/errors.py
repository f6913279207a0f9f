"""JSON error envelope for API routes.

Every exception raised under ``/api`` becomes
``{"status": "error", "message": ..., ["errors": ...], ["debug": ...]}``.
Other routes keep Flask's default error pages.
"""

from __future__ import annotations

import logging
import traceback
from typing import Optional

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException, InternalServerError

from .core.validation import RequestValidationError

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

DEFAULT_HTTP_MESSAGES = {
    404: "Resource not found",
    405: "Method not allowed",
}


def error_payload(message: str, errors: Optional[dict] = None, debug: Optional[dict] = None) -> dict:
    payload: dict = {"status": "error", "message": message}
    if errors is not None:
        payload["errors"] = errors
    if debug is not None:
        payload["debug"] = debug
    return payload


def http_error_message(exc: HTTPException) -> str:
    """The description given when raising, or a short default for the status code."""
    if exc.description and exc.description != type(exc).description:
        return exc.description
    return DEFAULT_HTTP_MESSAGES.get(exc.code or 500, "An error occurred")


def debug_info(exc: BaseException) -> dict:
    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return {
        "exception": f"{type(exc).__module__}.{type(exc).__qualname__}",
        "message": str(exc),
        "trace": trace.splitlines(),
    }


def to_json_response(exc: Exception, include_debug: bool) -> tuple[Response, int]:
    if isinstance(exc, RequestValidationError):
        return jsonify(error_payload("Validation failed", errors=exc.errors)), 400

    if isinstance(exc, HTTPException):
        code = exc.code or 500
        return jsonify(error_payload(http_error_message(exc))), code

    debug = debug_info(exc) if include_debug else None
    return jsonify(error_payload("Internal server error", debug=debug)), 500


def register_error_handlers(app: Flask, include_debug: bool) -> None:
    """Install the API exception handler on ``app``."""

    @app.errorhandler(Exception)
    def handle_exception(exc: Exception):
        # redirects raised by routing
        if isinstance(exc, HTTPException) and exc.code is not None and exc.code < 400:
            return exc
        if not request.path.startswith(API_PREFIX):
            if isinstance(exc, HTTPException):
                return exc
            logger.error("Unhandled exception on %s", request.path, exc_info=exc)
            return InternalServerError(original_exception=exc)

        if isinstance(exc, HTTPException):
            logger.warning("API request %s %s failed: %s", request.method, request.path, exc)
        elif not isinstance(exc, RequestValidationError):
            logger.error("API exception occurred on %s %s", request.method, request.path, exc_info=exc)

        return to_json_response(exc, include_debug)
