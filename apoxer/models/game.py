"""
Model: Game
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class Game(db.Model):
    __tablename__ = "games"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    cover_url = db.Column(db.String)
    hero_url = db.Column(db.String)

    platforms = db.Column(db.JSON, default=list)  # ["PC", "Xbox"]
    genres = db.Column(db.JSON, default=list)  # ["FPS", "Tactical"]
    tags = db.Column(db.JSON, default=list)

    created_at = db.Column(db.DateTime, default=now_utc, index=True)
