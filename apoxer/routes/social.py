"""
Social Routes - activity feed, player directory and the status editor
"""

from flask import Blueprint, redirect, render_template, request, url_for

from apoxer.constants import PLATFORMS, PLAYER_STATUSES
from apoxer.exceptions import ValidationException
from apoxer.middleware.auth import current_identity, identity_required
from apoxer.repositories.games_repository import GamesRepository
from apoxer.repositories.players_repository import PlayersRepository
from apoxer.repositories.usergames_repository import UserGamesRepository
from apoxer.services.aggregation import gather_slices
from apoxer.services.social_service import get_feed
from apoxer.settings import get_setting

social_bp = Blueprint("social", __name__)


@social_bp.route("/feed")
@identity_required
def feed():
    """LFG posts of followed players"""
    return render_template("social/feed.html", title="Activity Feed", feed=get_feed(current_identity()))


@social_bp.route("/social")
def social():
    """Suggested players plus, when signed in, the user's library"""
    identity = current_identity()
    limit = int(get_setting("players", "suggested_limit", 20))
    user_id = identity.user_id if identity else None

    tasks = {"players": lambda: PlayersRepository.get_suggested(limit=limit, exclude_user_id=user_id)}
    if user_id:
        tasks["library"] = lambda: UserGamesRepository.get_games_for_user(user_id)
    return render_template("social/index.html", title="Social", sections=gather_slices(tasks))


def _render_edit(identity, error=None, status_code=200, form=None):
    return render_template(
        "social/edit.html",
        title="Edit status",
        games=GamesRepository.get_all_refs(),
        players=PlayersRepository.get_for_user(identity.user_id),
        statuses=PLAYER_STATUSES,
        platforms=PLATFORMS,
        error=error,
        form=form or {},
    ), status_code


@social_bp.route("/social/edit", methods=["GET", "POST"])
@identity_required
def edit_status():
    identity = current_identity()
    if request.method == "GET":
        return _render_edit(identity)

    game_id = request.form.get("game_id", "")
    status = request.form.get("status", "")
    platform = request.form.get("platform") or None

    try:
        if not game_id or GamesRepository.get_by_id(game_id) is None:
            raise ValidationException("Choose one of the listed games")
        if platform is not None and platform not in PLATFORMS:
            raise ValidationException(f"Unknown platform '{platform}'")
        PlayersRepository.upsert_status(identity.user_id, game_id, status, platform=platform)
    except ValidationException as e:
        return _render_edit(identity, error=e.message, status_code=400, form=request.form)

    return redirect(url_for("social.social"))
