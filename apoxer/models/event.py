"""
Model: Event, EventParticipant
"Looking for group" sessions scheduled for a game.
"""

from apoxer.constants import EVENT_STATUSES
from apoxer.db import db
from apoxer.utils import now_utc, new_id


class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    game_version_id = db.Column(db.String(36), db.ForeignKey("game_versions.id", ondelete="SET NULL"))
    created_by = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="SET NULL"), index=True)
    description = db.Column(db.Text)
    tags = db.Column(db.JSON, default=list)
    players_needed = db.Column(db.Integer, nullable=False, default=1)
    players_have = db.Column(db.Integer, nullable=False, default=0)
    start_date = db.Column(db.String(10))  # YYYY-MM-DD
    start_time = db.Column(db.String(5))  # HH:MM
    start_datetime = db.Column(db.DateTime, index=True)
    language = db.Column(db.String(50))
    platform = db.Column(db.String(50))
    status = db.Column(
        db.Enum(*EVENT_STATUSES, name="event_status", create_constraint=True, validate_strings=True),
        nullable=False,
        default="active",
        index=True,
    )
    created_at = db.Column(db.DateTime, default=now_utc)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)

    game = db.relationship("Game")
    game_version = db.relationship("GameVersion")
    participants = db.relationship(
        "EventParticipant", backref="event", cascade="all, delete-orphan", order_by="EventParticipant.joined_at"
    )


class EventParticipant(db.Model):
    __tablename__ = "event_participants"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    event_id = db.Column(db.String(36), db.ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    joined_at = db.Column(db.DateTime, default=now_utc)

    __table_args__ = (db.UniqueConstraint("event_id", "user_id", name="uq_event_participants_event_user"),)
