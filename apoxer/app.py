import logging
import os
import sys
import warnings

# Suppress Flask-Limiter in-memory storage warning
warnings.filterwarnings("ignore", category=UserWarning, module="flask_limiter")

import structlog
from flask import Flask

from apoxer.auth import auth_blueprint, limiter, login_manager
from apoxer.commands import init_commands
from apoxer.constants import APOXER_DB, BUILD_VERSION, PLAYER_STATUS_LOOKING, PLAYER_STATUS_ONLINE
from apoxer.db import db, init_db, migrate
from apoxer.exceptions import register_exception_handlers
from apoxer.metrics import init_metrics
from apoxer.middleware.auth import current_identity, init_identity
from apoxer.routes.api import api_bp
from apoxer.routes.dev import dev_bp
from apoxer.routes.profile import profile_bp
from apoxer.routes.social import social_bp
from apoxer.routes.web import web_bp
from apoxer.settings import load_settings
from apoxer.utils import ColoredFormatter, FilterRemoveDateFromWerkzeugLogs, get_or_create_secret_key

# Logging configuration
formatter = ColoredFormatter(
    '[%(asctime)s.%(msecs)03d] %(levelname)s (%(module)s) %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(formatter)

logging.basicConfig(
    level=logging.INFO,
    handlers=[handler]
)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if os.environ.get('LOG_FORMAT') == 'json' else structlog.dev.ConsoleRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger('main')

# Apply filter to hide date from http access logs
logging.getLogger('werkzeug').addFilter(FilterRemoveDateFromWerkzeugLogs())
logging.getLogger('alembic.runtime.migration').setLevel(logging.WARNING)

STATUS_LABELS = {
    PLAYER_STATUS_ONLINE: 'Online',
    PLAYER_STATUS_LOOKING: 'Looking for group',
}


def status_label(status):
    return STATUS_LABELS.get(status, 'Offline')


def status_class(status):
    return f"status-{status}" if status in STATUS_LABELS else "status-offline"


def format_datetime(value, fmt='%d %b %Y, %H:%M'):
    if value is None:
        return ''
    return value.strftime(fmt)


def register_template_helpers(app):
    app.add_template_filter(status_label, 'status_label')
    app.add_template_filter(status_class, 'status_class')
    app.add_template_filter(format_datetime, 'datetime')

    @app.context_processor
    def inject_globals():
        return {'identity': current_identity(), 'build_version': BUILD_VERSION}


def create_app(config=None, identity_resolver=None):
    """Application factory"""
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = APOXER_DB
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config.update(config or {})
    if app.config["SQLALCHEMY_DATABASE_URI"].startswith('sqlite'):
        # Aggregation workers open their own connections
        app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', {'connect_args': {'check_same_thread': False}})

    if 'SECRET_KEY' not in app.config or not app.config['SECRET_KEY']:
        app.config['SECRET_KEY'] = get_or_create_secret_key()
    if 'SETTINGS' not in app.config:
        app.config['SETTINGS'] = load_settings()

    # Initialize components
    db.init_app(app)
    migrate.init_app(app, db, directory=os.path.join(os.path.dirname(__file__), 'migrations'))

    # Initialize login manager
    login_manager.init_app(app)
    login_manager.login_view = app.config['SETTINGS'].get('app', {}).get('login_view', 'auth.login')

    limiter.init_app(app)
    init_identity(app, identity_resolver)

    # Register exception handlers
    register_exception_handlers(app)
    register_template_helpers(app)

    # Register blueprints
    app.register_blueprint(auth_blueprint)
    app.register_blueprint(web_bp)
    app.register_blueprint(social_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(dev_bp)

    # Initialize metrics
    init_metrics(app)
    init_commands(app)

    # Initialize database
    init_db(app)

    logger.info("app_ready", version=BUILD_VERSION, environment=app.config['SETTINGS'].get('app', {}).get('environment'))
    return app
