"""
Model: PlayGuide
Cross-platform "how to play together" instructions for one game.
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class PlayGuide(db.Model):
    __tablename__ = "play_guides"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    game_version_id = db.Column(db.String(36), db.ForeignKey("game_versions.id", ondelete="SET NULL"))
    title = db.Column(db.String(255), nullable=False)
    summary = db.Column(db.Text, default="")
    from_platform = db.Column(db.String(50))
    to_platform = db.Column(db.String(50))
    platform = db.Column(db.String(50))
    steps = db.Column(db.Text, default="")  # One step per line
    last_updated = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)

    game_version = db.relationship("GameVersion")
