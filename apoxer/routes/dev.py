"""
Dev Routes - database seeding, only served in development with dev.seed_enabled set
"""

from flask import Blueprint, abort, jsonify
import logging

from apoxer.auth import limiter
from apoxer.constants import DEFAULT_ENVIRONMENT
from apoxer.middleware.auth import current_identity
from apoxer.services.seed_service import SeedEventsResult, SeedGamesResult, seed_events, seed_games
from apoxer.settings import get_setting

logger = logging.getLogger("main")

dev_bp = Blueprint("dev", __name__, url_prefix="/api/dev")


def seeding_allowed():
    """Seeding needs both a development environment and the dev.seed_enabled flag"""
    environment = get_setting("app", "environment", DEFAULT_ENVIRONMENT)
    return environment == "development" and bool(get_setting("dev", "seed_enabled", False))


@dev_bp.before_request
def require_seed_enabled():
    # Behave as if the routes did not exist outside development
    if not seeding_allowed():
        abort(404)


@dev_bp.route("/seed", methods=["POST"])
@limiter.limit("10 per minute")
def seed():
    try:
        result = seed_games()
    except Exception as e:
        logger.error(f"Seeding games failed: {e}", exc_info=True)
        return jsonify(SeedGamesResult(errors=[str(e) or "Unknown error"]).to_dict()), 500
    return jsonify(result.to_dict())


@dev_bp.route("/seed-events", methods=["POST"])
@limiter.limit("10 per minute")
def seed_events_route():
    identity = current_identity()
    try:
        result = seed_events(created_by=identity.user_id if identity else None)
    except Exception as e:
        logger.error(f"Seeding events failed: {e}", exc_info=True)
        return jsonify(SeedEventsResult(errors=[str(e) or "Unknown error"]).to_dict()), 500
    return jsonify(result.to_dict())
