"""
Model: LfgPost
"Looking for group" posts; these are the items of the social feed.
"""

from apoxer.db import db
from apoxer.utils import now_utc, new_id


class LfgPost(db.Model):
    __tablename__ = "player_lfg_posts"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    profile_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    platform = db.Column(db.String(50))
    scheduled_at = db.Column(db.DateTime)
    max_players = db.Column(db.Integer)
    current_players = db.Column(db.Integer)
    voice_required = db.Column(db.Boolean)
    external_link = db.Column(db.String)
    is_pinned = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=now_utc, index=True)

    profile = db.relationship("Profile")
    game = db.relationship("Game")
