"""
Game directory listing and the home page
"""

from dataclasses import dataclass

from apoxer.exceptions import ValidationException
from apoxer.repositories.events_repository import EventsRepository
from apoxer.repositories.games_repository import GamesRepository
from apoxer.repositories.usergames_repository import UserGamesRepository
from apoxer.services.aggregation import gather_slices
from apoxer.settings import get_setting
from apoxer.utils import now_utc, parse_non_negative_int


@dataclass
class GameFilters:
    q: str = None
    genre: str = None
    platform: str = None
    limit: int = 50
    offset: int = 0

    @property
    def applied(self):
        return any([self.q, self.genre, self.platform])


def _text(args, name):
    value = (args.get(name) or "").strip()
    return value or None


def parse_game_filters(args):
    """
    Read ``q``, ``genre``, ``platform``, ``limit`` and ``offset`` from a
    query string. Paging values must be non-negative integers; an offset
    above the configured maximum is rejected and a limit above
    the configured maximum is clamped.
    """
    default_limit = int(get_setting("games", "default_limit", 50))
    max_limit = int(get_setting("games", "max_limit", 100))
    max_offset = int(get_setting("games", "max_offset", 1000000))
    try:
        limit = parse_non_negative_int(args.get("limit"), "limit", default_limit)
        offset = parse_non_negative_int(args.get("offset"), "offset", 0, maximum=max_offset)
    except ValueError as e:
        raise ValidationException(str(e))

    return GameFilters(
        q=_text(args, "q"),
        genre=_text(args, "genre"),
        platform=_text(args, "platform"),
        limit=min(limit, max_limit),
        offset=offset,
    )


def list_games(filters):
    return GamesRepository.get_games(
        q=filters.q,
        genre=filters.genre,
        platform=filters.platform,
        limit=filters.limit,
        offset=filters.offset,
    )


def get_home(user_id=None):
    """Upcoming events, newest games and, for a signed-in user, their library"""
    upcoming_limit = int(get_setting("events", "upcoming_limit", 4))
    trending_limit = int(get_setting("games", "trending_limit", 8))
    now = now_utc()

    tasks = {
        "upcoming_events": lambda: EventsRepository.get_upcoming(now, limit=upcoming_limit),
        "trending_games": lambda: GamesRepository.get_newest(limit=trending_limit),
    }
    if user_id:
        tasks["my_games"] = lambda: UserGamesRepository.get_games_for_user(user_id)
    return gather_slices(tasks)
