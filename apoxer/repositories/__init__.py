"""
Repositories package

Each repository encapsulates database operations for a model and returns
view models (see mappers.py), never ORM rows:
- games_repository.py
- players_repository.py
- etc.

Usage:
    from apoxer.repositories.games_repository import GamesRepository
    games = GamesRepository.get_games(genre="FPS", limit=20)
"""

from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from apoxer.db import db
from apoxer.exceptions import ConflictException, DatabaseException
from apoxer.metrics import track_db_query


def _driver_message(e):
    return str(getattr(e, "orig", None) or e)


def repository_query(operation):
    """
    Time the wrapped query and translate driver errors.

    Integrity violations become ``ConflictException``; any other
    ``SQLAlchemyError`` becomes ``DatabaseException`` carrying the driver
    message. The session is rolled back in both cases.
    """

    def decorator(func):
        @track_db_query(operation)
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except IntegrityError as e:
                db.session.rollback()
                raise ConflictException(f"{operation}: {_driver_message(e)}") from e
            except SQLAlchemyError as e:
                db.session.rollback()
                raise DatabaseException(f"{operation}: {_driver_message(e)}") from e

        return wrapper

    return decorator
