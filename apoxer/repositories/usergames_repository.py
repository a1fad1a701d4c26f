"""
Repository for UserGame (library) database operations
"""

from apoxer.db import db
from apoxer.models.game import Game
from apoxer.models.usergame import UserGame
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_game


class UserGamesRepository:
    """Repository for UserGame database operations"""

    @staticmethod
    @repository_query("library.contains")
    def in_library(user_id, game_id):
        return UserGame.query.filter_by(user_id=user_id, game_id=game_id).first() is not None

    @staticmethod
    @repository_query("library.games")
    def get_games_for_user(user_id):
        """Games in the user's library, most recently added first"""
        rows = (
            db.session.query(Game)
            .join(UserGame, UserGame.game_id == Game.id)
            .filter(UserGame.user_id == user_id)
            .order_by(UserGame.created_at.desc(), Game.id.asc())
            .all()
        )
        return [map_game(row) for row in rows]

    @staticmethod
    @repository_query("library.add")
    def add(user_id, game_id):
        """Returns False when the game was already in the library"""
        if UserGame.query.filter_by(user_id=user_id, game_id=game_id).first():
            return False
        db.session.add(UserGame(user_id=user_id, game_id=game_id))
        db.session.commit()
        return True

    @staticmethod
    @repository_query("library.remove")
    def remove(user_id, game_id):
        item = UserGame.query.filter_by(user_id=user_id, game_id=game_id).first()
        if not item:
            return False
        db.session.delete(item)
        db.session.commit()
        return True
