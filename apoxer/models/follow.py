"""
Model: Follow
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class Follow(db.Model):
    __tablename__ = "player_follows"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    follower_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    followed_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=now_utc)

    __table_args__ = (
        db.UniqueConstraint("follower_id", "followed_id", name="uq_player_follows_pair"),
        db.CheckConstraint("follower_id <> followed_id", name="ck_player_follows_not_self"),
    )
