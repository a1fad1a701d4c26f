"""
Repository for LfgPost database operations
"""

from sqlalchemy.orm import joinedload

from apoxer.db import db
from apoxer.models.lfgpost import LfgPost
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_feed_post


def _post_query():
    return LfgPost.query.options(joinedload(LfgPost.profile), joinedload(LfgPost.game))


class LfgPostsRepository:
    """Repository for LfgPost database operations"""

    @staticmethod
    @repository_query("lfg_posts.by_profiles")
    def get_by_profiles(profile_ids, limit=20):
        """Newest posts authored by any of ``profile_ids``"""
        if not profile_ids:
            return []
        rows = (
            _post_query()
            .filter(LfgPost.profile_id.in_(list(profile_ids)))
            .order_by(LfgPost.created_at.desc(), LfgPost.id.asc())
            .limit(limit)
            .all()
        )
        return [map_feed_post(row) for row in rows]

    @staticmethod
    @repository_query("lfg_posts.pinned")
    def get_pinned(profile_id):
        item = (
            _post_query()
            .filter(LfgPost.profile_id == profile_id, LfgPost.is_pinned.is_(True))
            .order_by(LfgPost.created_at.desc())
            .first()
        )
        return map_feed_post(item) if item else None

    @staticmethod
    @repository_query("lfg_posts.create")
    def create(**kwargs):
        """Create new LfgPost record"""
        item = LfgPost(**kwargs)
        db.session.add(item)
        db.session.commit()
        item = _post_query().filter(LfgPost.id == item.id).first()
        return map_feed_post(item)
