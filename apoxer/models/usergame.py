"""
Model: UserGame
The user's library: which games a user has added.
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class UserGame(db.Model):
    __tablename__ = "user_games"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False)
    created_at = db.Column(db.DateTime, default=now_utc)

    game = db.relationship("Game")

    __table_args__ = (db.UniqueConstraint("user_id", "game_id", name="uq_user_games_user_game"),)
