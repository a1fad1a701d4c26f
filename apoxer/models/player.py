"""
Model: Player
A user's presence for one game: platform plus online/looking/offline status.
"""

from apoxer.constants import PLAYER_STATUSES
from apoxer.db import db
from apoxer.utils import now_utc, new_id


class Player(db.Model):
    __tablename__ = "players"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    platform = db.Column(db.String(50))
    status = db.Column(
        db.Enum(*PLAYER_STATUSES, name="player_status", create_constraint=True, validate_strings=True),
        nullable=False,
        default="offline",
    )
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc, index=True)

    user = db.relationship("User")
    game = db.relationship("Game")

    __table_args__ = (db.UniqueConstraint("user_id", "game_id", name="uq_players_user_game"),)
