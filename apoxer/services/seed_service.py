"""
Development seeders for the game catalogue, communities, versions and events.

Both seeders are idempotent: rows that already exist are skipped, and a write
rejected by the database is rolled back and reported in ``errors`` while the
run carries on with the next row.
"""

import random
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List

import structlog

from apoxer.constants import EVENT_STATUS_ACTIVE
from apoxer.exceptions import ApoxerException
from apoxer.metrics import seed_rows_inserted_total
from apoxer.repositories.communities_repository import CommunitiesRepository
from apoxer.repositories.events_repository import EventsRepository, GameVersionsRepository
from apoxer.repositories.games_repository import GamesRepository
from apoxer.seed_data import COMMUNITY_TEMPLATES, EVENT_TEMPLATES, SEED_GAMES, VERSION_TEMPLATES
from apoxer.utils import now_utc
from apoxer.viewmodels import ViewModel

logger = structlog.get_logger("seed")


@dataclass
class SeedGamesResult(ViewModel):
    games_inserted: int = 0
    communities_inserted: int = 0
    errors: List[str] = field(default_factory=list)


@dataclass
class SeedEventsResult(ViewModel):
    versions_created: int = 0
    events_created: int = 0
    errors: List[str] = field(default_factory=list)


def _seed_communities(game, result, rng):
    for i in range(rng.randint(1, 3)):
        template = COMMUNITY_TEMPLATES[i % len(COMMUNITY_TEMPLATES)]
        name = f"{game.title} - {template['name']}"
        try:
            if CommunitiesRepository.exists(game.id, name):
                continue
            CommunitiesRepository.create(
                game_id=game.id,
                name=name,
                invite_url=f"https://discord.gg/{game.slug}-{i + 1}",
                category=template["category"],
                language=template["language"],
                online_count=rng.randint(100, 2099),
            )
            result.communities_inserted += 1
        except ApoxerException as e:
            result.errors.append(f"Failed to insert community for {game.title}: {e.message}")


def seed_games(rng=None):
    """
    Insert the sample games missing from the catalogue, then 1-3
    communities for each game inserted by this run.
    """
    rng = rng or random.Random()
    result = SeedGamesResult()
    existing = GamesRepository.get_existing_slugs(game["slug"] for game in SEED_GAMES)

    for data in SEED_GAMES:
        if data["slug"] in existing:
            continue
        try:
            game = GamesRepository.create(**data)
        except ApoxerException as e:
            result.errors.append(f"Failed to insert game {data['title']}: {e.message}")
            continue
        result.games_inserted += 1
        _seed_communities(game, result, rng)

    seed_rows_inserted_total.labels(kind="games").inc(result.games_inserted)
    seed_rows_inserted_total.labels(kind="communities").inc(result.communities_inserted)
    logger.info(
        "seed_games_done",
        games_inserted=result.games_inserted,
        communities_inserted=result.communities_inserted,
        errors=len(result.errors),
    )
    return result


def seed_events(created_by=None, rng=None):
    """
    Insert the sample game versions and active events for the seeded games.

    Games that are not in the catalogue are skipped. Events start at a
    random hour within the next 24 hours.
    """
    rng = rng or random.Random()
    result = SeedEventsResult()
    now = now_utc().replace(second=0, microsecond=0)

    for slug, version_names in VERSION_TEMPLATES.items():
        game = GamesRepository.get_by_slug(slug)
        if game is None:
            continue
        for version_name in version_names:
            try:
                if GameVersionsRepository.get_by_name(game.id, version_name):
                    continue
                GameVersionsRepository.create(game_id=game.id, version_name=version_name, created_by=created_by)
                result.versions_created += 1
            except ApoxerException as e:
                result.errors.append(f"Failed to create version {version_name} for {game.title}: {e.message}")

    for slug, templates in EVENT_TEMPLATES.items():
        game = GamesRepository.get_by_slug(slug)
        if game is None:
            continue
        for template in templates:
            start = now + timedelta(hours=rng.randint(0, 23))
            try:
                if EventsRepository.active_exists(game.id, template["description"]):
                    continue
                EventsRepository.create(
                    game_id=game.id,
                    created_by=created_by,
                    start_date=start.strftime("%Y-%m-%d"),
                    start_time=start.strftime("%H:%M"),
                    start_datetime=start,
                    status=EVENT_STATUS_ACTIVE,
                    **template,
                )
                result.events_created += 1
            except ApoxerException as e:
                result.errors.append(f"Failed to create event for {game.title}: {e.message}")

    seed_rows_inserted_total.labels(kind="versions").inc(result.versions_created)
    seed_rows_inserted_total.labels(kind="events").inc(result.events_created)
    logger.info(
        "seed_events_done",
        versions_created=result.versions_created,
        events_created=result.events_created,
        errors=len(result.errors),
    )
    return result
