"""
Repository for Event, EventParticipant and GameVersion database operations
"""

import logging

from sqlalchemy import and_, case, delete, update
from sqlalchemy.orm import joinedload, selectinload

from apoxer.constants import EVENT_STATUS_ACTIVE, EVENT_STATUS_FULL
from apoxer.db import db
from apoxer.exceptions import ConflictException, NotFoundException
from apoxer.models.event import Event, EventParticipant
from apoxer.models.gameversion import GameVersion
from apoxer.repositories import repository_query
from apoxer.repositories.mappers import map_event, map_game_version, map_profile_event

logger = logging.getLogger("main")


def _event_query():
    return Event.query.options(
        joinedload(Event.game),
        joinedload(Event.game_version),
        selectinload(Event.participants),
    )


class EventsRepository:
    """Repository for Event database operations"""

    @staticmethod
    @repository_query("events.by_game")
    def get_active_by_game(game_id):
        """Active events of a game, soonest first"""
        rows = (
            _event_query()
            .filter(Event.game_id == game_id, Event.status == EVENT_STATUS_ACTIVE)
            .order_by(Event.start_datetime.asc(), Event.id.asc())
            .all()
        )
        return [map_event(row) for row in rows]

    @staticmethod
    @repository_query("events.upcoming")
    def get_upcoming(now, limit=4):
        """Active events starting at or after ``now`` across every game"""
        rows = (
            _event_query()
            .filter(Event.status == EVENT_STATUS_ACTIVE, Event.start_datetime >= now)
            .order_by(Event.start_datetime.asc(), Event.id.asc())
            .limit(limit)
            .all()
        )
        return [map_event(row) for row in rows]

    @staticmethod
    @repository_query("events.get")
    def get_by_id(event_id):
        item = _event_query().filter(Event.id == event_id).first()
        return map_event(item) if item else None

    @staticmethod
    @repository_query("events.by_creator")
    def get_by_creator(user_id):
        rows = (
            Event.query.options(joinedload(Event.game))
            .filter(Event.created_by == user_id)
            .order_by(Event.start_datetime.desc(), Event.id.asc())
            .all()
        )
        return [map_profile_event(row) for row in rows]

    @staticmethod
    @repository_query("events.active_exists")
    def active_exists(game_id, description):
        return (
            Event.query.filter_by(game_id=game_id, description=description, status=EVENT_STATUS_ACTIVE).first()
            is not None
        )

    @staticmethod
    @repository_query("events.count_active")
    def count_active():
        """Count events still open for joining"""
        return Event.query.filter(Event.status == EVENT_STATUS_ACTIVE).count()

    @staticmethod
    @repository_query("events.create")
    def create(**kwargs):
        """Create new Event record"""
        item = Event(**kwargs)
        db.session.add(item)
        db.session.commit()
        return EventsRepository.get_by_id(item.id)

    @staticmethod
    @repository_query("events.join")
    def join(event_id, user_id):
        """
        Add ``user_id`` to the event. The event turns ``full`` once
        players_have reaches players_needed.

        The counter and status are computed by the UPDATE itself, so joins
        committed by other requests in the meantime are never lost.
        """
        event = db.session.get(Event, event_id)
        if event is None:
            raise NotFoundException(f"Event '{event_id}' not found")
        if event.status != EVENT_STATUS_ACTIVE:
            raise ConflictException(f"Event is {event.status}")
        if EventParticipant.query.filter_by(event_id=event_id, user_id=user_id).first():
            raise ConflictException("Already joined this event")

        db.session.add(EventParticipant(event_id=event_id, user_id=user_id))
        db.session.flush()
        result = db.session.execute(
            update(Event)
            .where(Event.id == event_id, Event.status == EVENT_STATUS_ACTIVE)
            .values(
                players_have=Event.players_have + 1,
                status=case(
                    (Event.players_have + 1 >= Event.players_needed, EVENT_STATUS_FULL),
                    else_=Event.status,
                ),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.session.rollback()
            db.session.refresh(event)
            raise ConflictException(f"Event is {event.status}")
        db.session.commit()
        logger.info(f"User {user_id} joined event {event_id} ({event.players_have}/{event.players_needed})")
        return EventsRepository.get_by_id(event_id)

    @staticmethod
    @repository_query("events.leave")
    def leave(event_id, user_id):
        """Remove ``user_id`` from the event; leaving twice is a no-op"""
        if db.session.get(Event, event_id) is None:
            raise NotFoundException(f"Event '{event_id}' not found")

        removed = db.session.execute(
            delete(EventParticipant).where(EventParticipant.event_id == event_id, EventParticipant.user_id == user_id)
        ).rowcount
        if removed:
            db.session.execute(
                update(Event)
                .where(Event.id == event_id)
                .values(
                    players_have=case((Event.players_have > 0, Event.players_have - 1), else_=0),
                    status=case(
                        (
                            and_(Event.status == EVENT_STATUS_FULL, Event.players_have - 1 < Event.players_needed),
                            EVENT_STATUS_ACTIVE,
                        ),
                        else_=Event.status,
                    ),
                )
                .execution_options(synchronize_session=False)
            )
        db.session.commit()
        return EventsRepository.get_by_id(event_id)


class GameVersionsRepository:
    """Repository for GameVersion database operations"""

    @staticmethod
    @repository_query("versions.by_game")
    def get_by_game(game_id):
        rows = (
            GameVersion.query.filter_by(game_id=game_id)
            .order_by(GameVersion.created_at.desc(), GameVersion.version_name.asc())
            .all()
        )
        return [map_game_version(row) for row in rows]

    @staticmethod
    @repository_query("versions.by_name")
    def get_by_name(game_id, version_name):
        item = GameVersion.query.filter_by(game_id=game_id, version_name=version_name).first()
        return map_game_version(item)

    @staticmethod
    @repository_query("versions.create")
    def create(**kwargs):
        """Create new GameVersion record"""
        item = GameVersion(**kwargs)
        db.session.add(item)
        db.session.commit()
        db.session.refresh(item)
        return map_game_version(item)
