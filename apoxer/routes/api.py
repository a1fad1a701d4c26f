"""
API Routes - JSON endpoints for games, players, events, library and follows
"""

from flask import Blueprint, jsonify, request

from apoxer.api_responses import handle_api_errors, not_found_response
from apoxer.constants import BUILD_VERSION
from apoxer.middleware.auth import api_identity_required, current_identity
from apoxer.repositories.events_repository import EventsRepository
from apoxer.repositories.games_repository import GamesRepository
from apoxer.repositories.players_repository import PlayersRepository
from apoxer.repositories.usergames_repository import UserGamesRepository
from apoxer.services.events_service import create_event
from apoxer.services.games_service import list_games, parse_game_filters
from apoxer.services.profile_service import set_following
from apoxer.services.social_service import ensure_profile

api_bp = Blueprint("api", __name__, url_prefix="/api")


def _truthy(value):
    return (value or "").lower() in ("1", "true", "yes")


@api_bp.route("/health")
def health():
    return jsonify({"status": "healthy", "version": BUILD_VERSION})


@api_bp.route("/games")
@handle_api_errors
def get_games():
    """Filtered, paginated game list"""
    games = list_games(parse_game_filters(request.args))
    return jsonify([game.to_dict() for game in games])


@api_bp.route("/games/<slug>/players")
@handle_api_errors
def get_game_players(slug):
    game = GamesRepository.get_by_slug(slug)
    if game is None:
        return not_found_response("Game", slug)
    players = PlayersRepository.get_by_game(game.id, available_only=_truthy(request.args.get("available")))
    return jsonify([player.to_dict() for player in players])


@api_bp.route("/games/<slug>/events", methods=["POST"])
@api_identity_required
@handle_api_errors
def post_game_event(slug):
    event = create_event(slug, current_identity(), request.get_json(silent=True))
    return jsonify(event.to_dict()), 201


@api_bp.route("/events/<event_id>/participants", methods=["POST", "DELETE"])
@api_identity_required
@handle_api_errors
def event_participation(event_id):
    user_id = current_identity().user_id
    if request.method == "POST":
        event = EventsRepository.join(event_id, user_id)
    else:
        event = EventsRepository.leave(event_id, user_id)
    return jsonify(event.to_dict())


@api_bp.route("/library/<game_id>", methods=["POST", "DELETE"])
@api_identity_required
@handle_api_errors
def library(game_id):
    if GamesRepository.get_by_id(game_id) is None:
        return not_found_response("Game", game_id)
    user_id = current_identity().user_id
    if request.method == "POST":
        UserGamesRepository.add(user_id, game_id)
    else:
        UserGamesRepository.remove(user_id, game_id)
    return jsonify({"inLibrary": request.method == "POST"})


@api_bp.route("/profiles/<username>/follow", methods=["POST", "DELETE"])
@api_identity_required
@handle_api_errors
def follow(username):
    follower = ensure_profile(current_identity())
    following = set_following(follower, username, request.method == "POST")
    return jsonify({"following": following})
