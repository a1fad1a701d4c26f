"""
Repository for Game database operations
"""

import json
import logging
import time

from sqlalchemy import String, cast, or_

from apoxer.db import db
from apoxer.models.game import Game
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_game, map_game_ref

logger = logging.getLogger("main")


def escape_like(value):
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def json_array_contains(column, value):
    """
    Case-insensitive match of one whole element of a JSON string array.

    The element is matched with its surrounding quotes, so "RPG" never
    matches an "Action RPG" element. Stored arrays escape non-ASCII letters
    as ``\\uXXXX``, which LIKE cannot fold, so the lower, upper, capitalized
    and title case spellings of the value are each tried as well.
    """
    value = value.strip()
    spellings = {value, value.lower(), value.upper(), value.capitalize(), value.title()}
    text = cast(column, String)
    return or_(*[
        text.ilike(f"%{escape_like(json.dumps(spelling))}%", escape="\\")
        for spelling in sorted(spellings)
    ])


class GamesRepository:
    """Repository for Game database operations"""

    @staticmethod
    @repository_query("games.list")
    def get_games(q=None, genre=None, platform=None, limit=None, offset=0):
        """
        One page of games matching every supplied filter.

        ``q`` is a case-insensitive title substring. Results are newest
        first with ``id`` breaking ties so paging is stable.
        """
        query = Game.query

        if q and q.strip():
            query = query.filter(Game.title.ilike(f"%{escape_like(q.strip())}%", escape="\\"))
        if genre and genre.strip():
            query = query.filter(json_array_contains(Game.genres, genre))
        if platform and platform.strip():
            query = query.filter(json_array_contains(Game.platforms, platform))

        query = query.order_by(Game.created_at.desc(), Game.id.asc())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        start = time.time()
        rows = query.all()
        duration = (time.time() - start) * 1000.0
        logger.debug(
            f"GamesRepository.get_games: q={q!r} genre={genre!r} platform={platform!r} "
            f"limit={limit} offset={offset} rows={len(rows)} duration_ms={duration:.1f}"
        )
        return [map_game(game) for game in rows]

    @staticmethod
    @repository_query("games.by_slug")
    def get_by_slug(slug):
        """Get Game by slug, None when unknown"""
        game = Game.query.filter_by(slug=slug).first()
        return map_game(game) if game else None

    @staticmethod
    @repository_query("games.by_id")
    def get_by_id(game_id):
        game = db.session.get(Game, game_id)
        return map_game(game) if game else None

    @staticmethod
    @repository_query("games.similar")
    def get_similar(game, limit=8):
        """
        Games sharing at least one genre with ``game``, newest first.

        A game without genres gets the newest other games instead.
        """
        query = Game.query.filter(Game.id != game.id)
        if game.genres:
            query = query.filter(or_(*[json_array_contains(Game.genres, genre) for genre in game.genres]))
        rows = query.order_by(Game.created_at.desc(), Game.id.asc()).limit(limit).all()
        return [map_game(row) for row in rows]

    @staticmethod
    @repository_query("games.newest")
    def get_newest(limit=8):
        rows = Game.query.order_by(Game.created_at.desc(), Game.id.asc()).limit(limit).all()
        return [map_game(row) for row in rows]

    @staticmethod
    @repository_query("games.refs")
    def get_all_refs():
        """Every game as a lightweight reference, alphabetical"""
        return [map_game_ref(row) for row in Game.query.order_by(Game.title.asc()).all()]

    @staticmethod
    @repository_query("games.facets")
    def get_facets():
        """Distinct genres and platforms across the catalogue, for the filter form"""
        genres, platforms = set(), set()
        for row_genres, row_platforms in db.session.query(Game.genres, Game.platforms).all():
            genres.update(row_genres or [])
            platforms.update(row_platforms or [])
        return sorted(genres, key=str.lower), sorted(platforms, key=str.lower)

    @staticmethod
    @repository_query("games.slugs")
    def get_existing_slugs(slugs):
        return {row.slug for row in Game.query.filter(Game.slug.in_(list(slugs))).all()}

    @staticmethod
    @repository_query("games.create")
    def create(**kwargs):
        """Create new Game record"""
        item = Game(**kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_game(item)

    @staticmethod
    @repository_query("games.incomplete")
    def get_incomplete(limit=None):
        """Games missing a description or cover art"""
        query = Game.query.filter(
            or_(Game.description.is_(None), Game.description == "", Game.cover_url.is_(None), Game.cover_url == "")
        ).order_by(Game.title.asc())
        if limit:
            query = query.limit(limit)
        return [map_game(row) for row in query.all()]

    @staticmethod
    @repository_query("games.update")
    def update(game_id, **kwargs):
        """Update Game record"""
        item = db.session.get(Game, game_id)
        if not item:
            return None

        for key, value in kwargs.items():
            if hasattr(item, key):
                setattr(item, key, value)

        db.session.commit()
        return map_game(item)

    @staticmethod
    @repository_query("games.count")
    def count():
        """Count total Game records"""
        return Game.query.count()
