from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy import event, inspect
from alembic.config import Config
from alembic import command
import logging

from apoxer.constants import ALEMBIC_DIR, ALEMBIC_CONF

# Retrieve main logger
logger = logging.getLogger("main")

db = SQLAlchemy()
migrate = Migrate()


# Alembic functions
def get_alembic_cfg():
    cfg = Config(ALEMBIC_CONF)
    cfg.set_main_option("script_location", ALEMBIC_DIR)
    return cfg


def init_db(app):
    with app.app_context():
        # Ensure foreign keys, WAL mode, and timeout are set when connection is opened
        @event.listens_for(db.engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            import sqlite3
            if not isinstance(dbapi_connection, sqlite3.Connection):
                return

            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON;")
            # Enable WAL mode for better concurrent access
            cursor.execute("PRAGMA journal_mode=WAL;")
            # Increase timeout to 30 seconds to handle contention
            cursor.execute("PRAGMA busy_timeout=30000;")
            cursor.close()

        # Register every table on the metadata
        import apoxer.models  # noqa: F401

        inspector = inspect(db.engine)
        if not inspector.has_table("games"):
            logger.info("Initializing database tables...")
            db.create_all()
            if app.config.get("STAMP_MIGRATIONS", True):
                command.stamp(get_alembic_cfg(), "head")
                logger.info("Database created and stamped to the latest migration version.")
        else:
            # Ensure new tables are created even if DB exists
            db.create_all()
