"""
Model: GameVersion
A named game release such as "Season 3" or "Update 2.0".
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class GameVersion(db.Model):
    __tablename__ = "game_versions"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    version_name = db.Column(db.String(100), nullable=False)
    created_by = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="SET NULL"))
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)

    __table_args__ = (db.UniqueConstraint("game_id", "version_name", name="uq_game_versions_game_name"),)
