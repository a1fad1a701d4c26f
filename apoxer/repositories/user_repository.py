"""
Repository for User database operations
"""

from apoxer.db import db
from apoxer.models.user import User
from apoxer.repositories import repository_query


class UserRepository:
    """Repository for User database operations; returns model rows for Flask-Login"""

    @staticmethod
    @repository_query("users.get")
    def get_by_id(id):
        """Get User by ID"""
        return db.session.get(User, id)

    @staticmethod
    @repository_query("users.by_email")
    def get_by_email(email):
        return User.query.filter(User.email == (email or "").strip().lower()).first()

    @staticmethod
    @repository_query("users.create")
    def create(**kwargs):
        """Create new User record"""
        item = User(**kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return item

    @staticmethod
    @repository_query("users.count")
    def count():
        """Count total User records"""
        return User.query.count()
