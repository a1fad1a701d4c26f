"""
Repository for Profile and PlayerGame database operations
"""

from sqlalchemy.orm import joinedload

from apoxer.db import db
from apoxer.models.playergame import PlayerGame
from apoxer.models.profile import Profile
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_profile, map_profile_game


class ProfilesRepository:
    """Repository for Profile database operations"""

    @staticmethod
    @repository_query("profiles.by_username")
    def get_by_username(username):
        """Get Profile by username, None when unknown"""
        item = Profile.query.filter_by(username=username).first()
        return map_profile(item) if item else None

    @staticmethod
    @repository_query("profiles.by_user")
    def get_by_user_id(user_id):
        item = Profile.query.filter_by(user_id=user_id).first()
        return map_profile(item) if item else None

    @staticmethod
    @repository_query("profiles.username_taken")
    def username_taken(username):
        return Profile.query.filter_by(username=username).first() is not None

    @staticmethod
    @repository_query("profiles.create")
    def create(user_id, username, display_name, **kwargs):
        """Create new Profile record"""
        item = Profile(user_id=user_id, username=username, display_name=display_name, **kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_profile(item)

    @staticmethod
    @repository_query("profiles.games")
    def get_player_games(profile_id):
        """Games on a profile, featured first"""
        rows = (
            PlayerGame.query.options(joinedload(PlayerGame.game))
            .filter_by(profile_id=profile_id)
            .order_by(PlayerGame.is_featured.desc(), PlayerGame.created_at.desc())
            .all()
        )
        return [map_profile_game(row) for row in rows]

    @staticmethod
    @repository_query("profiles.add_game")
    def add_player_game(profile_id, game_id, **kwargs):
        item = PlayerGame(profile_id=profile_id, game_id=game_id, **kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_profile_game(item)

    @staticmethod
    @repository_query("profiles.count")
    def count():
        """Count total Profile records"""
        return Profile.query.count()
