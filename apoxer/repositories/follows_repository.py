"""
Repository for Follow database operations
"""

from apoxer.db import db
from apoxer.exceptions import ValidationException
from apoxer.models.follow import Follow
from apoxer.models.profile import Profile
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_player_summary


class FollowsRepository:
    """Repository for Follow database operations"""

    @staticmethod
    @repository_query("follows.followed_ids")
    def get_followed_ids(profile_id):
        rows = db.session.query(Follow.followed_id).filter(Follow.follower_id == profile_id).all()
        return [row.followed_id for row in rows]

    @staticmethod
    @repository_query("follows.count_followers")
    def count_followers(profile_id):
        return Follow.query.filter_by(followed_id=profile_id).count()

    @staticmethod
    @repository_query("follows.count_following")
    def count_following(profile_id):
        return Follow.query.filter_by(follower_id=profile_id).count()

    @staticmethod
    @repository_query("follows.followers")
    def get_followers(profile_id):
        """Profiles following ``profile_id``, newest follow first"""
        rows = (
            db.session.query(Profile)
            .join(Follow, Follow.follower_id == Profile.id)
            .filter(Follow.followed_id == profile_id)
            .order_by(Follow.created_at.desc(), Follow.id.asc())
            .all()
        )
        return [map_player_summary(row) for row in rows]

    @staticmethod
    @repository_query("follows.following")
    def get_following(profile_id):
        """Profiles followed by ``profile_id``, newest follow first"""
        rows = (
            db.session.query(Profile)
            .join(Follow, Follow.followed_id == Profile.id)
            .filter(Follow.follower_id == profile_id)
            .order_by(Follow.created_at.desc(), Follow.id.asc())
            .all()
        )
        return [map_player_summary(row) for row in rows]

    @staticmethod
    @repository_query("follows.is_following")
    def is_following(follower_id, followed_id):
        return Follow.query.filter_by(follower_id=follower_id, followed_id=followed_id).first() is not None

    @staticmethod
    @repository_query("follows.follow")
    def follow(follower_id, followed_id):
        """Returns False when the follow already existed"""
        if follower_id == followed_id:
            raise ValidationException("You cannot follow yourself")
        if Follow.query.filter_by(follower_id=follower_id, followed_id=followed_id).first():
            return False
        db.session.add(Follow(follower_id=follower_id, followed_id=followed_id))
        db.session.commit()
        return True

    @staticmethod
    @repository_query("follows.unfollow")
    def unfollow(follower_id, followed_id):
        """Returns False when there was nothing to remove"""
        item = Follow.query.filter_by(follower_id=follower_id, followed_id=followed_id).first()
        if not item:
            return False
        db.session.delete(item)
        db.session.commit()
        return True
