"""
Tests for per-game player presence
"""
import pytest

from apoxer.exceptions import ValidationException
from apoxer.repositories.players_repository import PlayersRepository


@pytest.fixture
def lobby(factory):
    game = factory.game('valorant', 'Valorant')
    offline = factory.user('offline@example.com', username='sleepy')
    online = factory.user('online@example.com', username='ready')
    looking = factory.user('looking@example.com')
    factory.player(offline, game.id, 'offline')
    factory.player(online, game.id, 'online', platform='PC')
    factory.player(looking, game.id, 'looking')
    return game


class TestGetByGame:
    """Tests for PlayersRepository.get_by_game"""

    def test_status_order(self, app_ctx, lobby):
        """Online players come first, then looking, then offline"""
        statuses = [player.status for player in PlayersRepository.get_by_game(lobby.id)]
        assert statuses == ['online', 'looking', 'offline']

    def test_available_only(self, app_ctx, lobby):
        """Offline players are dropped when only available players are wanted"""
        players = PlayersRepository.get_by_game(lobby.id, available_only=True)
        assert [player.status for player in players] == ['online', 'looking']

    def test_display_names(self, app_ctx, lobby):
        """Display names fall back from username to email local part"""
        names = [player.display_name for player in PlayersRepository.get_by_game(lobby.id)]
        assert names == ['ready', 'looking', 'sleepy']

    def test_other_games_excluded(self, app_ctx, lobby, factory):
        other = factory.game('apex-legends')
        assert PlayersRepository.get_by_game(other.id) == []


class TestUpsertStatus:
    """Tests for PlayersRepository.upsert_status"""

    def test_updates_existing_row(self, app_ctx, factory):
        """A second update changes the same row"""
        game = factory.game('valorant')
        identity = factory.user()
        first = PlayersRepository.upsert_status(identity.user_id, game.id, 'looking', platform='PC')
        second = PlayersRepository.upsert_status(identity.user_id, game.id, 'online', platform='Xbox')
        assert first.id == second.id
        assert second.status == 'online'
        assert second.platform == 'Xbox'
        assert PlayersRepository.count() == 1

    def test_rejects_unknown_status(self, app_ctx, factory):
        game = factory.game('valorant')
        identity = factory.user()
        with pytest.raises(ValidationException):
            PlayersRepository.upsert_status(identity.user_id, game.id, 'away')

    def test_suggested_excludes_self(self, app_ctx, lobby, factory):
        """Suggested players leave out the signed-in user"""
        me = factory.user('me@example.com')
        factory.player(me, lobby.id, 'online')
        suggested = PlayersRepository.get_suggested(limit=10, exclude_user_id=me.user_id)
        assert len(suggested) == 3
        assert me.user_id not in [player.user_id for player in suggested]
        assert all(player.game.slug == 'valorant' for player in suggested)


class TestPlayersApi:
    """Tests for GET /api/games/<slug>/players"""

    def test_lists_players(self, client, lobby):
        response = client.get('/api/games/valorant/players')
        data = response.get_json()
        assert response.status_code == 200
        assert [player['status'] for player in data] == ['online', 'looking', 'offline']
        assert data[0]['displayName'] == 'ready'
        assert data[0]['userId']

    def test_available_filter(self, client, lobby):
        data = client.get('/api/games/valorant/players?available=true').get_json()
        assert len(data) == 2

    def test_unknown_game(self, client):
        response = client.get('/api/games/nope/players')
        assert response.status_code == 404
        assert response.get_json()['code'] == 'NOT_FOUND'


class TestStatusEditor:
    """Tests for the /social/edit page"""

    def test_requires_login(self, client):
        """Anonymous visitors are redirected before the form renders"""
        response = client.get('/social/edit')
        assert response.status_code == 302
        assert '/login?next=' in response.headers['Location']
        assert 'Edit status' not in response.get_data(as_text=True)

    def test_saves_status(self, client, factory, sign_in):
        game = factory.game('valorant')
        sign_in(factory.user())
        response = client.post('/social/edit', data={'game_id': game.id, 'status': 'looking', 'platform': 'PC'})
        assert response.status_code == 302
        assert client.get('/api/games/valorant/players').get_json()[0]['status'] == 'looking'

    def test_invalid_status_rerenders_form(self, client, factory, sign_in):
        game = factory.game('valorant')
        sign_in(factory.user())
        response = client.post('/social/edit', data={'game_id': game.id, 'status': 'away'})
        assert response.status_code == 400
        assert 'Invalid player status' in response.get_data(as_text=True)

    def test_unknown_game_rejected(self, client, factory, sign_in):
        sign_in(factory.user())
        response = client.post('/social/edit', data={'game_id': 'nope', 'status': 'online'})
        assert response.status_code == 400

    def test_social_page_lists_players(self, client, lobby):
        response = client.get('/social')
        assert response.status_code == 200
        assert 'ready' in response.get_data(as_text=True)
