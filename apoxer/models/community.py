"""
Model: Community, CommunityMembership
"""

from apoxer.constants import COMMUNITY_ROLES
from apoxer.db import db
from apoxer.utils import now_utc, new_id


class Community(db.Model):
    __tablename__ = "communities"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    game_id = db.Column(db.String(36), db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    invite_url = db.Column(db.String, nullable=False)
    category = db.Column(db.String(50))
    language = db.Column(db.String(50))
    online_count = db.Column(db.Integer, nullable=False, default=0)

    description = db.Column(db.Text)
    tags = db.Column(db.JSON, default=list)
    member_count = db.Column(db.Integer, default=0)
    region = db.Column(db.String(50))
    voice_required = db.Column(db.Boolean, default=False)

    created_at = db.Column(db.DateTime, default=now_utc)

    game = db.relationship("Game", backref=db.backref("communities", lazy="dynamic", cascade="all, delete-orphan"))

    __table_args__ = (
        db.CheckConstraint("online_count >= 0", name="ck_communities_online_count_non_negative"),
        db.UniqueConstraint("game_id", "name", name="uq_communities_game_name"),
    )


class CommunityMembership(db.Model):
    __tablename__ = "community_memberships"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    profile_id = db.Column(db.String(36), db.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    community_id = db.Column(db.String(36), db.ForeignKey("communities.id", ondelete="CASCADE"), nullable=False)
    role = db.Column(
        db.Enum(*COMMUNITY_ROLES, name="community_role", create_constraint=True, validate_strings=True),
        nullable=False,
        default="member",
    )
    joined_at = db.Column(db.DateTime, default=now_utc)

    community = db.relationship("Community")

    __table_args__ = (db.UniqueConstraint("profile_id", "community_id", name="uq_memberships_profile_community"),)
