"""
Model: Guide
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class Guide(db.Model):
    __tablename__ = "guides"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False, default="")
    created_by = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="SET NULL"), index=True)
    upvotes = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=now_utc)

    game = db.relationship("Game")
