"""
Model: PlayerGame
Games listed on a profile, with play status and the featured flag.
"""

from apoxer.constants import PROFILE_GAME_STATUSES
from apoxer.db import db
from apoxer.utils import now_utc, new_id


class PlayerGame(db.Model):
    __tablename__ = "player_games"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    profile_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False)
    platform = db.Column(db.String(50))
    skill_level = db.Column(db.String(50))
    status = db.Column(
        db.Enum(*PROFILE_GAME_STATUSES, name="player_game_status", create_constraint=True, validate_strings=True),
        nullable=False,
        default="added",
    )
    hours_played = db.Column(db.Integer)
    is_featured = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=now_utc)

    game = db.relationship("Game")

    __table_args__ = (db.UniqueConstraint("profile_id", "game_id", name="uq_player_games_profile_game"),)
