"""
Repository for Player database operations
"""

from sqlalchemy import case

from apoxer.constants import (
    PLAYER_STATUS_LOOKING,
    PLAYER_STATUS_ONLINE,
    PLAYER_STATUS_ORDER,
    PLAYER_STATUSES,
)
from apoxer.db import db
from apoxer.exceptions import ValidationException
from apoxer.models.game import Game
from apoxer.models.player import Player
from apoxer.models.user import User
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_player

status_rank = case(PLAYER_STATUS_ORDER, value=Player.status, else_=len(PLAYER_STATUS_ORDER))


def validate_status(status):
    if status not in PLAYER_STATUSES:
        raise ValidationException(f"Invalid player status '{status}', expected one of {', '.join(PLAYER_STATUSES)}")
    return status


class PlayersRepository:
    """Repository for Player database operations"""

    @staticmethod
    @repository_query("players.by_game")
    def get_by_game(game_id, available_only=False):
        """
        Players of a game: online, then looking, then offline, most recently
        updated first within each status.
        """
        query = (
            db.session.query(Player, User)
            .join(User, Player.user_id == User.id)
            .filter(Player.game_id == game_id)
        )
        if available_only:
            query = query.filter(Player.status.in_([PLAYER_STATUS_ONLINE, PLAYER_STATUS_LOOKING]))
        rows = query.order_by(status_rank, Player.updated_at.desc(), Player.id.asc()).all()
        return [map_player(player, user=user) for player, user in rows]

    @staticmethod
    @repository_query("players.suggested")
    def get_suggested(limit=20, exclude_user_id=None):
        """A bounded sample of players across all games, most recently active first"""
        query = (
            db.session.query(Player, User, Game)
            .join(User, Player.user_id == User.id)
            .join(Game, Player.game_id == Game.id)
        )
        if exclude_user_id:
            query = query.filter(Player.user_id != exclude_user_id)
        rows = query.order_by(Player.updated_at.desc(), Player.id.asc()).limit(limit).all()
        return [map_player(player, user=user, game=game) for player, user, game in rows]

    @staticmethod
    @repository_query("players.by_user")
    def get_for_user(user_id):
        rows = (
            db.session.query(Player, User, Game)
            .join(User, Player.user_id == User.id)
            .join(Game, Player.game_id == Game.id)
            .filter(Player.user_id == user_id)
            .order_by(Game.title.asc())
            .all()
        )
        return [map_player(player, user=user, game=game) for player, user, game in rows]

    @staticmethod
    @repository_query("players.upsert")
    def upsert_status(user_id, game_id, status, platform=None):
        """Create or update the (user, game) player row"""
        validate_status(status)
        item = Player.query.filter_by(user_id=user_id, game_id=game_id).first()
        if item:
            item.status = status
            item.platform = platform
        else:
            item = Player(user_id=user_id, game_id=game_id, status=status, platform=platform)
            db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_player(item, user=item.user, game=item.game)

    @staticmethod
    @repository_query("players.count")
    def count():
        """Count total Player records"""
        return Player.query.count()
