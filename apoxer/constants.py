import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.environ.get('APOXER_CONFIG_DIR', os.path.join(APP_DIR, 'config'))
DB_FILE = os.path.join(CONFIG_DIR, 'apoxer.db')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.yaml')
ALEMBIC_DIR = os.path.join(APP_DIR, 'migrations')
ALEMBIC_CONF = os.path.join(ALEMBIC_DIR, 'alembic.ini')

DEFAULT_ENVIRONMENT = 'production'
APOXER_DB = os.environ.get('APOXER_DATABASE_URL', 'sqlite:///' + DB_FILE)

BUILD_VERSION = '20261019_1200'

DEFAULT_SETTINGS = {
    "app": {
        "environment": DEFAULT_ENVIRONMENT,
        "login_view": "auth.login",
    },
    "dev": {
        # Seeding endpoints also require APOXER_ENV=development
        "seed_enabled": True,
    },
    "games": {
        "default_limit": 50,
        "max_limit": 100,
        "max_offset": 1000000,
        "similar_limit": 8,
        "trending_limit": 8,
    },
    "feed": {
        "page_size": 20,
    },
    "players": {
        "suggested_limit": 20,
    },
    "profiles": {
        "featured_limit": 6,
    },
    "events": {
        "upcoming_limit": 4,
    },
    "aggregation": {
        "timeout_seconds": 5.0,
        "max_workers": 8,
    },
    "apis": {
        "rawg_api_key": "",
    },
}

PLAYER_STATUS_ONLINE = 'online'
PLAYER_STATUS_LOOKING = 'looking'
PLAYER_STATUS_OFFLINE = 'offline'

PLAYER_STATUSES = [
    PLAYER_STATUS_ONLINE,
    PLAYER_STATUS_LOOKING,
    PLAYER_STATUS_OFFLINE,
]

# Sort priority used by the per-game player lists
PLAYER_STATUS_ORDER = {
    PLAYER_STATUS_ONLINE: 0,
    PLAYER_STATUS_LOOKING: 1,
    PLAYER_STATUS_OFFLINE: 2,
}

EVENT_STATUS_ACTIVE = 'active'
EVENT_STATUS_FULL = 'full'
EVENT_STATUS_CANCELLED = 'cancelled'
EVENT_STATUS_COMPLETED = 'completed'

EVENT_STATUSES = [
    EVENT_STATUS_ACTIVE,
    EVENT_STATUS_FULL,
    EVENT_STATUS_CANCELLED,
    EVENT_STATUS_COMPLETED,
]

PROFILE_GAME_STATUSES = ['playing', 'completed', 'wishlist', 'added']

COMMUNITY_ROLES = ['member', 'mod', 'owner']

PLATFORMS = [
    'PC',
    'PlayStation',
    'Xbox',
    'Nintendo Switch',
    'Mobile',
    'VR',
]
