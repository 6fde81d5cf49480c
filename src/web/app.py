"""Flask JSON API over the voting store."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

from flask import Flask, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from domain.config import AppConfig
from domain.engine import RatingUpdateEngine
from domain.errors import (
    InvalidArgumentError,
    InvalidReferenceError,
    NotEnoughItemsError,
    StoreFailureError,
    VotingError,
)
from domain.pairing import PairSelector
from domain.protocol import VotingStore
from web.serializers import (
    item_to_json,
    ranked_item_to_json,
    recent_outcome_to_json,
    recorded_outcome_to_json,
)

logger = logging.getLogger(__name__)

EXTENSION_KEY = "park_voting"
_CLIENT_ERRORS = (InvalidArgumentError, InvalidReferenceError, NotEnoughItemsError)


@dataclass(frozen=True)
class VotingServices:
    store: VotingStore
    engine: RatingUpdateEngine
    selector: PairSelector
    config: AppConfig


def create_app(
    store: VotingStore,
    config: AppConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> Flask:
    """Build the API around an already initialised store."""
    config = config or AppConfig()
    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = VotingServices(
        store=store,
        engine=RatingUpdateEngine(store),
        selector=PairSelector(store, rng=rng),
        config=config,
    )

    _register_routes(app)
    _register_error_handlers(app)
    app.after_request(_add_cors_headers)
    return app


def _services() -> VotingServices:
    return current_app.extensions[EXTENSION_KEY]


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _parse_limit(default: int | None) -> int | None:
    raw = request.args.get("limit")
    if raw is None or raw == "":
        return default
    try:
        limit = int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"limit must be an integer, got {raw!r}") from exc
    if limit <= 0:
        raise InvalidArgumentError(f"limit must be a positive integer, got {limit}")
    return limit


def _parse_item_id(payload: dict[str, Any], field: str) -> int:
    value = payload.get(field)
    if value is None or value == "":
        raise InvalidArgumentError("Winner ID and Loser ID are required")
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdecimal()):
            raise InvalidArgumentError(f"{field} must be an integer, got {value!r}")
        try:
            return int(text)
        except ValueError as exc:
            raise InvalidArgumentError(f"{field} is too large") from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field} must be an integer, got {value!r}")
    return value


def _register_routes(app: Flask) -> None:
    @app.get("/api/parks")
    def list_parks() -> Response:
        items = _services().store.list_items()
        return jsonify([item_to_json(item) for item in items])

    @app.get("/api/parks/pair")
    @app.get("/api/parks/random-pair")
    @app.get("/api/parks/random")
    def random_pair() -> Response:
        first, second = _services().selector.select_pair()
        return jsonify([item_to_json(first), item_to_json(second)])

    @app.get("/api/parks/<int:park_id>")
    def get_park(park_id: int) -> Response | tuple[Response, int]:
        item = _services().store.get_item(park_id)
        if item is None:
            return _error("Park not found", 404)
        return jsonify(item_to_json(item))

    @app.get("/api/rankings")
    def rankings() -> Response:
        services = _services()
        limit = _parse_limit(services.config.rankings_limit)
        items = services.store.list_ranked(limit)
        return jsonify(
            [ranked_item_to_json(item, rank) for rank, item in enumerate(items, start=1)]
        )

    @app.get("/api/recent-votes")
    def recent_votes() -> Response:
        services = _services()
        limit = _parse_limit(services.config.recent_votes_limit)
        outcomes = services.store.list_recent_outcomes(limit)
        return jsonify([recent_outcome_to_json(outcome) for outcome in outcomes])

    @app.post("/api/vote")
    @app.post("/api/votes")
    def vote() -> Response:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise InvalidArgumentError("Request body must be a JSON object")

        winner_id = _parse_item_id(payload, "winnerId")
        loser_id = _parse_item_id(payload, "loserId")
        recorded = _services().engine.record_outcome(winner_id, loser_id)
        return jsonify({"success": True, "result": recorded_outcome_to_json(recorded)})


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(VotingError)
    def handle_voting_error(error: VotingError) -> tuple[Response, int]:
        if isinstance(error, _CLIENT_ERRORS):
            logger.info("Rejected %s %s: %s", request.method, request.path, error.message)
            return _error(error.message, 400)
        if isinstance(error, StoreFailureError):
            logger.exception("Store failure on %s %s", request.method, request.path)
        else:
            logger.exception("Unhandled voting error on %s %s", request.method, request.path)
        return _error("Internal server error", 500)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException) -> tuple[Response, int]:
        status = error.code or 500
        if status == 404 and request.path.startswith("/api/"):
            return _error("API endpoint not found", 404)
        return _error(error.description or error.name, status)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception) -> tuple[Response, int]:
        logger.exception("Unexpected error on %s %s", request.method, request.path)
        return _error("Internal server error", 500)


def _add_cors_headers(response: Response) -> Response:
    if request.path.startswith("/api/"):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response
