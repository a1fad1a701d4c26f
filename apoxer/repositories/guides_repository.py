"""
Repository for Guide and PlayGuide database operations
"""

from sqlalchemy.orm import joinedload

from apoxer.db import db
from apoxer.models.guide import Guide
from apoxer.models.playguide import PlayGuide
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_guide, map_play_guide, map_profile_guide


class GuidesRepository:
    """Repository for Guide database operations"""

    @staticmethod
    @repository_query("guides.by_game")
    def get_by_game(game_id):
        """Guides of a game, newest first"""
        rows = Guide.query.filter_by(game_id=game_id).order_by(Guide.created_at.desc(), Guide.id.asc()).all()
        return [map_guide(row) for row in rows]

    @staticmethod
    @repository_query("guides.by_author")
    def get_by_author(user_id):
        rows = (
            Guide.query.options(joinedload(Guide.game))
            .filter_by(created_by=user_id)
            .order_by(Guide.created_at.desc())
            .all()
        )
        return [map_profile_guide(row) for row in rows]

    @staticmethod
    @repository_query("guides.create")
    def create(**kwargs):
        """Create new Guide record"""
        item = Guide(**kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_guide(item)


class PlayGuidesRepository:
    """Repository for PlayGuide database operations"""

    @staticmethod
    @repository_query("play_guides.by_game")
    def get_by_game(game_id):
        """Play guides of a game, most recently updated first"""
        rows = (
            PlayGuide.query.options(joinedload(PlayGuide.game_version))
            .filter_by(game_id=game_id)
            .order_by(PlayGuide.last_updated.desc(), PlayGuide.id.asc())
            .all()
        )
        return [map_play_guide(row) for row in rows]

    @staticmethod
    @repository_query("play_guides.get")
    def get_for_game(game_id, play_guide_id):
        """The play guide, only when it belongs to ``game_id``"""
        item = PlayGuide.query.filter_by(id=play_guide_id, game_id=game_id).first()
        return map_play_guide(item) if item else None

    @staticmethod
    @repository_query("play_guides.create")
    def create(**kwargs):
        """Create new PlayGuide record"""
        item = PlayGuide(**kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_play_guide(item)
