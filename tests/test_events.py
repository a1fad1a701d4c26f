"""
Tests for LFG events: creation, joining and leaving
"""
from datetime import datetime

import pytest

from apoxer.db import db
from apoxer.exceptions import ConflictException, NotFoundException, ValidationException
from apoxer.models.event import Event
from apoxer.repositories.events_repository import EventsRepository
from apoxer.services.events_service import create_event, parse_start

START = datetime(2030, 5, 1, 18, 30)


class TestParseStart:
    """Tests for parse_start"""

    def test_combines_date_and_time(self):
        assert parse_start('2030-05-01', '18:30') == START

    @pytest.mark.parametrize('date, time', [('', '18:30'), ('2030-05-01', None), ('01/05/2030', '18:30')])
    def test_invalid(self, date, time):
        with pytest.raises(ValidationException):
            parse_start(date, time)


class TestCreateEvent:
    """Tests for create_event"""

    def test_creates_active_event(self, app_ctx, factory):
        game = factory.game('valorant')
        factory.version(game.id, 'Episode 8')
        identity = factory.user()
        event = create_event('valorant', identity, {
            'playersNeeded': 4,
            'playersHave': 1,
            'startDate': '2030-05-01',
            'startTime': '18:30',
            'tags': ['Mic required'],
            'versionName': 'Episode 8',
            'description': '  Ranked grind  ',
            'platform': 'PC',
        })
        assert event.status == 'active'
        assert event.start_datetime == START
        assert event.description == 'Ranked grind'
        assert event.game_version.version_name == 'Episode 8'
        assert event.created_by == identity.user_id
        assert event.game.slug == 'valorant'

    def test_full_when_have_reaches_needed(self, app_ctx, factory):
        factory.game('valorant')
        event = create_event('valorant', factory.user(), {
            'playersNeeded': 2, 'playersHave': 2, 'startDate': '2030-05-01', 'startTime': '18:30',
        })
        assert event.status == 'full'

    @pytest.mark.parametrize('payload', [
        {'playersNeeded': 0},
        {'playersNeeded': 'four'},
        {'playersHave': -1},
        {'tags': 'not-a-list'},
        {'tags': [1, 2]},
        {'versionName': 'Season 99'},
    ])
    def test_validation(self, app_ctx, factory, payload):
        factory.game('valorant')
        body = {'startDate': '2030-05-01', 'startTime': '18:30', **payload}
        with pytest.raises(ValidationException):
            create_event('valorant', factory.user(), body)

    def test_unknown_game(self, app_ctx, factory):
        with pytest.raises(NotFoundException):
            create_event('nope', factory.user(), {})


class TestJoinLeave:
    """Tests for EventsRepository.join and leave"""

    @pytest.fixture
    def duo(self, factory):
        game = factory.game('valorant')
        return factory.event(game.id, START, players_needed=2, players_have=0)

    def test_join_until_full(self, app_ctx, duo, factory):
        first, second = factory.user('a@example.com'), factory.user('b@example.com')
        assert EventsRepository.join(duo.id, first.user_id).status == 'active'
        event = EventsRepository.join(duo.id, second.user_id)
        assert event.status == 'full'
        assert event.players_have == 2
        assert {p.user_id for p in event.participants} == {first.user_id, second.user_id}

    def test_cannot_join_twice(self, app_ctx, duo, factory):
        identity = factory.user()
        EventsRepository.join(duo.id, identity.user_id)
        with pytest.raises(ConflictException):
            EventsRepository.join(duo.id, identity.user_id)

    def test_cannot_join_full_event(self, app_ctx, duo, factory):
        EventsRepository.join(duo.id, factory.user('a@example.com').user_id)
        EventsRepository.join(duo.id, factory.user('b@example.com').user_id)
        with pytest.raises(ConflictException):
            EventsRepository.join(duo.id, factory.user('c@example.com').user_id)

    def test_leave_reopens_full_event(self, app_ctx, duo, factory):
        a, b = factory.user('a@example.com'), factory.user('b@example.com')
        EventsRepository.join(duo.id, a.user_id)
        EventsRepository.join(duo.id, b.user_id)
        event = EventsRepository.leave(duo.id, a.user_id)
        assert event.status == 'active'
        assert event.players_have == 1

    def test_leave_is_idempotent(self, app_ctx, duo, factory):
        identity = factory.user()
        event = EventsRepository.leave(duo.id, identity.user_id)
        assert event.players_have == 0

    def test_join_counts_joins_from_other_sessions(self, app, app_ctx, duo, factory):
        """Another request's join, committed after this session read the event, is kept"""
        first, second = factory.user('a@example.com'), factory.user('b@example.com')
        assert db.session.get(Event, duo.id).players_have == 0

        with app.app_context():
            EventsRepository.join(duo.id, first.user_id)
        event = EventsRepository.join(duo.id, second.user_id)

        assert event.players_have == 2
        assert event.status == 'full'

    def test_join_rejected_when_filled_elsewhere(self, app, app_ctx, duo, factory):
        """A session still seeing the event as active cannot overfill it"""
        a, b, c = (factory.user(f'{name}@example.com') for name in 'abc')
        assert db.session.get(Event, duo.id).status == 'active'

        with app.app_context():
            EventsRepository.join(duo.id, a.user_id)
            EventsRepository.join(duo.id, b.user_id)
        with pytest.raises(ConflictException, match='Event is full'):
            EventsRepository.join(duo.id, c.user_id)

        event = EventsRepository.get_by_id(duo.id)
        assert event.players_have == 2
        assert c.user_id not in {p.user_id for p in event.participants}

    def test_leave_counts_from_stored_value(self, app, app_ctx, duo, factory):
        a, b = factory.user('a@example.com'), factory.user('b@example.com')
        EventsRepository.join(duo.id, a.user_id)
        assert db.session.get(Event, duo.id).players_have == 1

        with app.app_context():
            EventsRepository.join(duo.id, b.user_id)
        event = EventsRepository.leave(duo.id, a.user_id)

        assert event.players_have == 1
        assert event.status == 'active'

    def test_unknown_event(self, app_ctx, factory):
        with pytest.raises(NotFoundException):
            EventsRepository.join('missing', factory.user().user_id)


class TestUpcoming:
    """Tests for EventsRepository.get_upcoming"""

    def test_only_future_active_soonest_first(self, app_ctx, factory):
        game = factory.game('valorant')
        factory.event(game.id, datetime(2030, 6, 1, 12), description='later')
        factory.event(game.id, datetime(2030, 5, 1, 12), description='sooner')
        factory.event(game.id, datetime(2020, 1, 1, 12), description='past')
        factory.event(game.id, datetime(2030, 4, 1, 12), description='cancelled', status='cancelled')
        events = EventsRepository.get_upcoming(datetime(2026, 10, 19), limit=4)
        assert [event.description for event in events] == ['sooner', 'later']
