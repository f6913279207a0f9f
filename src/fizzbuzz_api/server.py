"""FizzBuzz HTTP API.

Flask application with two endpoints:

- ``POST /api/fizzbuzz`` generates a sequence from five parameters.
- ``GET /api/fizzbuzz/stats`` reports the most frequently requested parameters.

Run: fizzbuzz-api
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional

from flask import Blueprint, Flask, Request, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from .config import Settings
from .core.validation import parse_parameters
from .errors import API_PREFIX, register_error_handlers
from .repository import StatisticsRepository
from .services import GenerationService, StatisticsService

logger = logging.getLogger(__name__)

EXTENSION_KEY = "fizzbuzz_api"

api = Blueprint("api", __name__, url_prefix=API_PREFIX)


def decode_json_request(req: Request) -> dict:
    """Decode a JSON object body, raising BadRequest with a descriptive message."""
    if not req.is_json:
        raise BadRequest("Content-Type must be application/json.")

    body = req.get_data(as_text=True)
    if body == "":
        raise BadRequest("Empty request body.")

    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise BadRequest(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise BadRequest("Invalid JSON: maximum nesting depth exceeded") from exc

    if not isinstance(data, dict):
        raise BadRequest("JSON must represent an object.")
    return data


def _services() -> dict:
    return current_app.extensions[EXTENSION_KEY]


# ─── Generation ──────────────────────────────────────────────────────────────


@api.route("/fizzbuzz", methods=["POST"])
def fizzbuzz():
    data = decode_json_request(request)
    params = parse_parameters(data)

    generation: GenerationService = _services()["generation"]
    result = generation.process_parameters(params)
    return jsonify(result.to_response()), 200


# ─── Statistics ──────────────────────────────────────────────────────────────


@api.route("/fizzbuzz/stats", methods=["GET"])
def fizzbuzz_stats():
    statistics: StatisticsService = _services()["statistics"]
    entry = statistics.most_frequent_request()
    if entry is None:
        return "", 204
    return jsonify(entry.model_dump()), 200


def create_app(settings: Optional[Settings] = None, repository: Optional[StatisticsRepository] = None) -> Flask:
    """Build the Flask application and wire its services."""
    settings = settings or Settings.from_env()
    if repository is None:
        repository = StatisticsRepository.from_path(settings.stats_path, settings.cache_ttl_seconds)

    statistics = StatisticsService(repository)
    generation = GenerationService(statistics, record_statistics=settings.record_statistics)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[EXTENSION_KEY] = {
        "settings": settings,
        "statistics": statistics,
        "generation": generation,
    }
    app.register_blueprint(api)
    register_error_handlers(app, include_debug=not settings.is_production)

    logger.info(
        "FizzBuzz API configured (env=%s, stats=%s, cache_ttl=%ss, record_statistics=%s)",
        settings.environment,
        settings.stats_path,
        settings.cache_ttl_seconds,
        settings.record_statistics,
    )
    return app


def main():
    """Entry point for the CLI command."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app = create_app(settings)
    app.run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
        threaded=True,
    )


if __name__ == "__main__":
    main()
