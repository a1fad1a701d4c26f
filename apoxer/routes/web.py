"""
Web Routes - home page and the game directory
"""

from flask import Blueprint, render_template, request

from apoxer.middleware.auth import current_identity
from apoxer.repositories.games_repository import GamesRepository
from apoxer.services.game_detail_service import get_game_detail, get_play_guide
from apoxer.services.games_service import get_home, list_games, parse_game_filters

web_bp = Blueprint("web", __name__)


@web_bp.route("/")
def index():
    """Home page"""
    identity = current_identity()
    sections = get_home(identity.user_id if identity else None)
    return render_template("index.html", title="Home", sections=sections)


@web_bp.route("/games")
def games():
    """Game directory with search and genre/platform filters"""
    filters = parse_game_filters(request.args)
    genres, platforms = GamesRepository.get_facets()
    return render_template(
        "games/list.html",
        title="Games",
        games=list_games(filters),
        filters=filters,
        genres=genres,
        platforms=platforms,
    )


@web_bp.route("/games/<slug>")
def game_detail(slug):
    identity = current_identity()
    detail = get_game_detail(slug, user_id=identity.user_id if identity else None)
    if detail is None:
        return render_template("games/not_found.html", title="Game not found", slug=slug), 404
    return render_template("games/detail.html", title=detail.game.title, detail=detail)


@web_bp.route("/games/<slug>/guides/<guide_id>")
def play_guide(slug, guide_id):
    game, guide = get_play_guide(slug, guide_id)
    return render_template("games/guide.html", title=guide.title, game=game, guide=guide)
