"""Flask API application."""

import json
import logging

from flask import Flask, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from arena.api.match_config import MatchConfig
from arena.config import DEFAULT_API_DEBUG, DEFAULT_API_PORT, DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL
from arena.engine.match import Match
from arena.engine.narrator import narrate
from arena.engine.roster import Archetype, archetype_defaults
from arena.helpers.debug import log_call
from arena.models.levels import CharacterLevel
from arena.models.results import MatchResult

logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=DEFAULT_LOG_FORMAT)

app = Flask("flask.arena")


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


# Error handlers for API routes
@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    if request.path.startswith("/api/"):
        app.logger.error(f"Internal server error: {e}", exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500
    return "Internal Server Error", 500


@log_call
def _run_match(config: MatchConfig) -> MatchResult:
    """Build both characters, fight once and return the result."""
    challenger = config.challenger.build()
    opponent = config.opponent.build()
    match = Match(
        rounds=config.rounds,
        challenger=challenger,
        opponent=opponent,
        regenerate=config.regenerate,
    )
    match.fight()
    return match.result


@app.route("/api/levels", methods=["GET"])
def list_levels():
    """List level tiers and their point budgets."""
    return jsonify({"levels": [{"level": level.value, "points": level.points} for level in CharacterLevel]})


@app.route("/api/archetypes", methods=["GET"])
def list_archetypes():
    """List archetypes with their default stats."""
    return jsonify(
        {
            "archetypes": [
                {"archetype": archetype.value, "defaults": archetype_defaults(archetype)}
                for archetype in Archetype
            ]
        }
    )


@app.route("/api/matches", methods=["POST"])
def create_match():
    """Fight a match and return its outcome and narration."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        config = MatchConfig(**data)
        result = _run_match(config)
    except ValidationError as e:
        app.logger.warning(f"Rejected match request: {e}")
        return jsonify({"error": "Invalid match configuration", "details": json.loads(e.json())}), 400

    payload = result.model_dump(mode="json")
    payload["narration"] = narrate(result.events)
    return jsonify(payload)


if __name__ == "__main__":
    app.run(debug=DEFAULT_API_DEBUG, port=DEFAULT_API_PORT)
