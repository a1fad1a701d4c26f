"""
Repository for Community database operations
"""

from apoxer.db import db
from apoxer.exceptions import ValidationException
from apoxer.models.community import Community, CommunityMembership
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_community, map_profile_community


class CommunitiesRepository:
    """Repository for Community database operations"""

    @staticmethod
    @repository_query("communities.by_game")
    def get_by_game(game_id):
        """Communities of a game, busiest first"""
        rows = (
            Community.query.filter_by(game_id=game_id)
            .order_by(Community.online_count.desc(), Community.name.asc())
            .all()
        )
        return [map_community(row) for row in rows]

    @staticmethod
    @repository_query("communities.exists")
    def exists(game_id, name):
        return Community.query.filter_by(game_id=game_id, name=name).first() is not None

    @staticmethod
    @repository_query("communities.create")
    def create(**kwargs):
        """Create new Community record"""
        online_count = kwargs.get("online_count", 0)
        if not isinstance(online_count, int) or online_count < 0:
            raise ValidationException(f"online_count must be a non-negative integer, got {online_count!r}")
        item = Community(**kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_community(item)

    @staticmethod
    @repository_query("communities.memberships")
    def get_memberships(profile_id):
        """Communities a profile belongs to, most recently joined first"""
        rows = (
            CommunityMembership.query.filter_by(profile_id=profile_id)
            .order_by(CommunityMembership.joined_at.desc())
            .all()
        )
        return [map_profile_community(row) for row in rows]

    @staticmethod
    @repository_query("communities.join")
    def add_membership(profile_id, community_id, role="member"):
        item = CommunityMembership(profile_id=profile_id, community_id=community_id, role=role)
        db.session.add(item)
        db.session.commit()
        return item.id
