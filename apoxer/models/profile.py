"""
Model: Profile
Public social identity of a user (one per user, created lazily).
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    display_name = db.Column(db.String(100), nullable=False)
    bio = db.Column(db.Text)
    avatar_url = db.Column(db.String)
    banner_url = db.Column(db.String)
    timezone = db.Column(db.String(50))
    location = db.Column(db.String(100))
    website = db.Column(db.String)
    created_at = db.Column(db.DateTime, default=now_utc)
