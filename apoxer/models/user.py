"""
Model: User
The login identity. Profiles and per-game players hang off ``User.id``.
"""

from flask_login import UserMixin

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class User(UserMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    username = db.Column(db.String(100))
    display_name = db.Column(db.String(100))
    created_at = db.Column(db.DateTime, default=now_utc)
