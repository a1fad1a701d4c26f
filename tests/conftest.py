"""
Pytest fixtures and configuration for Apoxer tests
"""
import os
import tempfile

# Settings and secret key files must never land in the source tree
os.environ.setdefault('APOXER_CONFIG_DIR', tempfile.mkdtemp(prefix='apoxer-tests-'))

import pytest
from werkzeug.security import generate_password_hash

from apoxer.app import create_app
from apoxer.constants import DEFAULT_SETTINGS
from apoxer.middleware.auth import Identity, StaticIdentityResolver
from apoxer.repositories.communities_repository import CommunitiesRepository
from apoxer.repositories.events_repository import EventsRepository, GameVersionsRepository
from apoxer.repositories.follows_repository import FollowsRepository
from apoxer.repositories.games_repository import GamesRepository
from apoxer.repositories.guides_repository import GuidesRepository, PlayGuidesRepository
from apoxer.repositories.lfgposts_repository import LfgPostsRepository
from apoxer.repositories.players_repository import PlayersRepository
from apoxer.repositories.profiles_repository import ProfilesRepository
from apoxer.repositories.user_repository import UserRepository
from apoxer.settings import merge_settings

TEST_PASSWORD = 'correct-horse-battery'


class Factory:
    """Creates rows through the repositories, each call in its own app context"""

    def __init__(self, app):
        self.app = app

    def user(self, email='player@example.com', username=None, display_name=None):
        with self.app.app_context():
            user = UserRepository.create(
                email=email,
                password=generate_password_hash(TEST_PASSWORD, method='pbkdf2:sha256'),
                username=username,
                display_name=display_name,
            )
            return Identity(
                user_id=user.id, email=user.email, username=user.username, display_name=user.display_name
            )

    def game(self, slug, title=None, genres=('Action',), platforms=('PC',), **kwargs):
        with self.app.app_context():
            return GamesRepository.create(
                slug=slug,
                title=title or slug.replace('-', ' ').title(),
                genres=list(genres),
                platforms=list(platforms),
                **kwargs
            )

    def community(self, game_id, name, online_count=10, **kwargs):
        with self.app.app_context():
            return CommunitiesRepository.create(
                game_id=game_id,
                name=name,
                invite_url=f"https://discord.gg/{name.lower().replace(' ', '-')}",
                online_count=online_count,
                **kwargs
            )

    def profile(self, identity, username, display_name=None, **kwargs):
        with self.app.app_context():
            return ProfilesRepository.create(
                user_id=identity.user_id, username=username, display_name=display_name or username.title(), **kwargs
            )

    def player(self, identity, game_id, status, platform=None):
        with self.app.app_context():
            return PlayersRepository.upsert_status(identity.user_id, game_id, status, platform=platform)

    def event(self, game_id, start, created_by=None, players_needed=4, players_have=0, status='active', **kwargs):
        with self.app.app_context():
            return EventsRepository.create(
                game_id=game_id,
                created_by=created_by,
                players_needed=players_needed,
                players_have=players_have,
                start_date=start.strftime('%Y-%m-%d'),
                start_time=start.strftime('%H:%M'),
                start_datetime=start,
                status=status,
                **kwargs
            )

    def version(self, game_id, version_name):
        with self.app.app_context():
            return GameVersionsRepository.create(game_id=game_id, version_name=version_name)

    def post(self, profile_id, game_id, title, **kwargs):
        with self.app.app_context():
            return LfgPostsRepository.create(profile_id=profile_id, game_id=game_id, title=title, **kwargs)

    def follow(self, follower_id, followed_id):
        with self.app.app_context():
            return FollowsRepository.follow(follower_id, followed_id)

    def guide(self, game_id, title, content='Step one.', created_by=None, **kwargs):
        with self.app.app_context():
            return GuidesRepository.create(game_id=game_id, title=title, content=content, created_by=created_by, **kwargs)

    def play_guide(self, game_id, title, steps='', **kwargs):
        with self.app.app_context():
            return PlayGuidesRepository.create(game_id=game_id, title=title, steps=steps, **kwargs)

    def player_game(self, profile_id, game_id, **kwargs):
        with self.app.app_context():
            return ProfilesRepository.add_player_game(profile_id, game_id, **kwargs)


def build_settings(overrides=None):
    return merge_settings(DEFAULT_SETTINGS, {
        'app': {'environment': 'development'},
        'dev': {'seed_enabled': True},
        **(overrides or {}),
    })


@pytest.fixture
def make_app(tmp_path):
    """
    Build an app on its own SQLite file.

    By default identities come from a ``StaticIdentityResolver`` that starts
    anonymous; pass ``identity_resolver`` to use another one.
    """
    counter = {'n': 0}

    def _make(settings=None, identity_resolver=None, **config):
        counter['n'] += 1
        db_path = tmp_path / f"apoxer-{counter['n']}.db"
        base_config = {
            'TESTING': True,
            'SQLALCHEMY_DATABASE_URI': f"sqlite:///{db_path}",
            'SECRET_KEY': 'test-secret-key',
            'RATELIMIT_ENABLED': False,
            'STAMP_MIGRATIONS': False,
            'SETTINGS': build_settings(settings),
        }
        base_config.update(config)
        return create_app(config=base_config, identity_resolver=identity_resolver or StaticIdentityResolver())

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def factory(app):
    return Factory(app)


@pytest.fixture
def factory_for():
    """Factory for apps built with ``make_app``"""
    return Factory


@pytest.fixture
def sign_in(app):
    """Make every following request (and service call) act as ``identity``"""

    def _sign_in(identity):
        app.extensions['identity_resolver'].identity = identity
        return identity

    return _sign_in
