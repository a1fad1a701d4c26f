"""
Event creation from the JSON API
"""

from datetime import datetime

import structlog

from apoxer.constants import EVENT_STATUS_ACTIVE, EVENT_STATUS_FULL
from apoxer.exceptions import NotFoundException, ValidationException
from apoxer.repositories.events_repository import EventsRepository, GameVersionsRepository
from apoxer.repositories.games_repository import GamesRepository

logger = structlog.get_logger("events")


def _int_field(payload, key, default, minimum):
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationException(f"'{key}' must be an integer")
    if value < minimum:
        raise ValidationException(f"'{key}' must be at least {minimum}")
    return value


def parse_start(start_date, start_time):
    """'2026-10-19' + '18:30' -> datetime(2026, 10, 19, 18, 30), interpreted as UTC"""
    if not start_date or not start_time:
        raise ValidationException("'startDate' and 'startTime' are required")
    try:
        return datetime.strptime(f"{start_date} {start_time}", "%Y-%m-%d %H:%M")
    except ValueError:
        raise ValidationException("'startDate' must be YYYY-MM-DD and 'startTime' HH:MM")


def create_event(slug, identity, payload):
    game = GamesRepository.get_by_slug(slug)
    if game is None:
        raise NotFoundException(f"Game '{slug}' not found")
    if not isinstance(payload, dict):
        raise ValidationException("Expected a JSON object")

    players_needed = _int_field(payload, "playersNeeded", 1, 1)
    players_have = _int_field(payload, "playersHave", 0, 0)
    start = parse_start(payload.get("startDate"), payload.get("startTime"))

    tags = payload.get("tags") or []
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise ValidationException("'tags' must be a list of strings")

    version_id = None
    version_name = (payload.get("versionName") or "").strip()
    if version_name:
        version = GameVersionsRepository.get_by_name(game.id, version_name)
        if version is None:
            raise ValidationException(f"Unknown version '{version_name}' for {game.title}")
        version_id = version.id

    event = EventsRepository.create(
        game_id=game.id,
        game_version_id=version_id,
        created_by=identity.user_id,
        description=(payload.get("description") or "").strip() or None,
        tags=tags,
        players_needed=players_needed,
        players_have=players_have,
        start_date=start.strftime("%Y-%m-%d"),
        start_time=start.strftime("%H:%M"),
        start_datetime=start,
        language=payload.get("language") or None,
        platform=payload.get("platform") or None,
        status=EVENT_STATUS_FULL if players_have >= players_needed else EVENT_STATUS_ACTIVE,
    )
    logger.info("event_created", event_id=event.id, game=slug, user_id=identity.user_id)
    return event
