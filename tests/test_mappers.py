"""
Tests for row to view model mapping and JSON serialization
"""
from dataclasses import fields
from datetime import datetime
from types import SimpleNamespace

from apoxer.repositories.mappers import map_community, map_game, map_player, map_profile_event
from apoxer.viewmodels import CommunityView, GameView, camel_case


def _game(**overrides):
    values = dict(
        id='g1', slug='valorant', title='Valorant', description=None, cover_url=None, hero_url=None,
        platforms=None, genres=['FPS'], tags=None, created_at=datetime(2026, 1, 1, 12),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestCamelCase:
    """Tests for camel_case"""

    def test_converts_snake_case(self):
        assert camel_case('similar_games') == 'similarGames'
        assert camel_case('id') == 'id'


class TestMapGame:
    """Tests for map_game"""

    def test_missing_lists_become_empty(self):
        game = map_game(_game())
        assert game.platforms == []
        assert game.tags == []
        assert game.cover_url == ''

    def test_every_field_is_serialized(self):
        data = map_game(_game()).to_dict()
        assert set(data) == {camel_case(f.name) for f in fields(GameView)}
        assert data['createdAt'] == '2026-01-01T12:00:00'


class TestMapCommunity:
    """Tests for map_community"""

    def test_defaults_for_missing_counters(self):
        row = SimpleNamespace(
            id='c1', game_id='g1', name='Lobby', invite_url='https://discord.gg/x', category=None, language=None,
            online_count=None, description=None, tags=None, member_count=None, region=None, voice_required=None,
            created_at=None,
        )
        community = map_community(row)
        assert (community.online_count, community.member_count, community.voice_required) == (0, 0, False)
        assert set(community.to_dict()) == {camel_case(f.name) for f in fields(CommunityView)}


class TestMapPlayer:
    """Tests for map_player"""

    def test_display_name_placeholder(self):
        row = SimpleNamespace(
            id='p1', user_id='0123456789abcdef', game_id='g1', platform=None, status='online',
            created_at=None, updated_at=None,
        )
        player = map_player(row)
        assert player.display_name == 'Player 01234567'
        assert player.to_dict()['displayName'] == 'Player 01234567'
        assert player.game is None


class TestMapProfileEvent:
    """Tests for map_profile_event"""

    def test_unscheduled_event(self):
        row = SimpleNamespace(
            id='e1', game=_game(), description=None, start_datetime=None, platform=None,
            players_needed=None, players_have=None, status='active',
        )
        event = map_profile_event(row)
        assert event.time_label == 'TBA'
        assert (event.slots_total, event.slots_taken) == (0, 0)
