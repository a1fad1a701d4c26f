"""
Tests for the development seeders and their routes
"""
import random
from unittest.mock import patch

from apoxer.exceptions import DatabaseException
from apoxer.repositories.communities_repository import CommunitiesRepository
from apoxer.repositories.games_repository import GamesRepository
from apoxer.seed_data import EVENT_TEMPLATES, SEED_GAMES, VERSION_TEMPLATES
from apoxer.services.rawg_service import EnrichResult
from apoxer.services.seed_service import SeedGamesResult, seed_events, seed_games

VERSION_COUNT = sum(len(names) for names in VERSION_TEMPLATES.values())
EVENT_COUNT = sum(len(templates) for templates in EVENT_TEMPLATES.values())


class TestSeedGames:
    """Tests for seed_games"""

    def test_inserts_catalogue_and_communities(self, app_ctx):
        result = seed_games(rng=random.Random(1))
        assert result.games_inserted == len(SEED_GAMES)
        assert len(SEED_GAMES) <= result.communities_inserted <= 3 * len(SEED_GAMES)
        assert result.errors == []

        valorant = GamesRepository.get_by_slug('valorant')
        communities = CommunitiesRepository.get_by_game(valorant.id)
        assert 1 <= len(communities) <= 3
        assert all(c.invite_url.startswith('https://discord.gg/valorant-') for c in communities)
        assert all(100 <= c.online_count <= 2099 for c in communities)

    def test_second_run_inserts_nothing(self, app_ctx):
        seed_games()
        result = seed_games()
        assert result.games_inserted == 0
        assert result.communities_inserted == 0
        assert GamesRepository.count() == len(SEED_GAMES)

    def test_row_errors_are_collected(self, app_ctx):
        """A failed insert is reported and the run continues"""
        original = GamesRepository.create

        def flaky(**data):
            if data['slug'] == 'valorant':
                raise DatabaseException('UNIQUE constraint failed')
            return original(**data)

        with patch.object(GamesRepository, 'create', side_effect=flaky):
            result = seed_games()

        assert result.games_inserted == len(SEED_GAMES) - 1
        assert result.errors == ['Failed to insert game Valorant: UNIQUE constraint failed']


class TestSeedEvents:
    """Tests for seed_events"""

    def test_requires_seeded_games(self, app_ctx):
        result = seed_events()
        assert (result.versions_created, result.events_created) == (0, 0)

    def test_inserts_versions_and_events_once(self, app_ctx, factory):
        seed_games()
        identity = factory.user()
        first = seed_events(created_by=identity.user_id)
        assert first.versions_created == VERSION_COUNT
        assert first.events_created == EVENT_COUNT
        second = seed_events(created_by=identity.user_id)
        assert (second.versions_created, second.events_created) == (0, 0)


class TestSeedRoutes:
    """Tests for /api/dev/seed and /api/dev/seed-events"""

    def test_seed_route(self, client):
        response = client.post('/api/dev/seed')
        data = response.get_json()
        assert response.status_code == 200
        assert data['gamesInserted'] == len(SEED_GAMES)
        assert data['errors'] == []

    def test_seed_events_route(self, client):
        client.post('/api/dev/seed')
        data = client.post('/api/dev/seed-events').get_json()
        assert data['eventsCreated'] == EVENT_COUNT

    def test_unexpected_failure_is_500_with_same_shape(self, client):
        with patch('apoxer.routes.dev.seed_games', side_effect=RuntimeError('boom')):
            response = client.post('/api/dev/seed')
        assert response.status_code == 500
        assert response.get_json() == {'gamesInserted': 0, 'communitiesInserted': 0, 'errors': ['boom']}

    def test_hidden_when_disabled(self, make_app):
        app = make_app(settings={'dev': {'seed_enabled': False}})
        with app.test_client() as client:
            assert client.post('/api/dev/seed').status_code == 404

    def test_hidden_outside_development(self, make_app):
        """The flag alone does not open the routes in production"""
        app = make_app(settings={'app': {'environment': 'production'}, 'dev': {'seed_enabled': True}})
        with app.test_client() as client:
            assert client.post('/api/dev/seed').status_code == 404
            assert client.post('/api/dev/seed-events').status_code == 404
        with app.app_context():
            assert GamesRepository.count() == 0


class TestSeedCommands:
    """Tests for the seed and seed-events CLI commands"""

    def test_seed_command(self, app):
        result = app.test_cli_runner().invoke(args=['seed'])
        assert result.exit_code == 0
        assert f"Games inserted: {len(SEED_GAMES)}" in result.output
        with app.app_context():
            assert GamesRepository.count() == len(SEED_GAMES)

    def test_seed_command_prints_errors(self, app):
        failed = SeedGamesResult(games_inserted=2, errors=['Failed to insert game Valorant: locked'])
        with patch('apoxer.services.seed_service.seed_games', return_value=failed):
            result = app.test_cli_runner().invoke(args=['seed'])
        assert result.exit_code == 0
        assert 'Games inserted: 2' in result.output
        assert '  - Failed to insert game Valorant: locked' in result.output

    def test_seed_events_command_with_creator(self, app, factory):
        factory.user('owner@example.com')
        runner = app.test_cli_runner()
        runner.invoke(args=['seed'])
        result = runner.invoke(args=['seed-events', '--email', 'owner@example.com'])
        assert result.exit_code == 0
        assert f"Events created: {EVENT_COUNT}" in result.output
        assert f"Game versions created: {VERSION_COUNT}" in result.output

    def test_seed_events_command_unknown_email(self, app):
        result = app.test_cli_runner().invoke(args=['seed-events', '--email', 'nobody@example.com'])
        assert result.exit_code == 1
        assert 'No account for nobody@example.com' in result.output

    def test_enrich_games_without_api_key(self, app):
        result = app.test_cli_runner().invoke(args=['enrich-games'])
        assert result.exit_code == 1
        assert 'No RAWG API key configured' in result.output

    def test_enrich_games_reports_counts(self, app):
        outcome = EnrichResult(updated=1, skipped=2, errors=['Valorant: rate limited'])
        with patch('apoxer.services.rawg_service.enrich_games', return_value=outcome) as enrich:
            result = app.test_cli_runner().invoke(args=['enrich-games', '--limit', '5'])
        assert result.exit_code == 0
        enrich.assert_called_once_with(limit=5)
        assert 'Updated: 1, skipped: 2' in result.output
        assert '  - Valorant: rate limited' in result.output
