import logging
import os
import re
import uuid
from datetime import datetime, timezone


# Custom logging formatter to support colors
class ColoredFormatter(logging.Formatter):
    # Define color codes
    COLORS = {
        'DEBUG': '\033[94m',   # Blue
        'INFO': '\033[92m',    # Green
        'WARNING': '\033[93m', # Yellow
        'ERROR': '\033[91m',   # Red
        'CRITICAL': '\033[95m' # Magenta
    }
    RESET = '\033[0m'  # Reset color

    def format(self, record):
        # Add color to the log level name
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        return super().format(record)


# Filter to remove date from http access logs
class FilterRemoveDateFromWerkzeugLogs(logging.Filter):
    # '192.168.0.102 - - [30/Jun/2024 01:14:03] "%s" %s %s' -> '192.168.0.102 - "%s" %s %s'
    pattern: re.Pattern = re.compile(r' - - \[.+?] "')

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self.pattern.sub(' - "', record.msg)
        return True


def get_or_create_secret_key():
    """
    Generate or load a persistent secret key for Flask sessions.
    The key is stored in CONFIG_DIR/.secret_key with restricted permissions.

    Returns:
        str: 64-character hex secret key
    """
    import secrets
    from apoxer.constants import CONFIG_DIR

    logger = logging.getLogger('main')
    secret_key_file = os.path.join(CONFIG_DIR, '.secret_key')

    # Try to load existing key
    if os.path.exists(secret_key_file):
        try:
            with open(secret_key_file, 'r') as f:
                key = f.read().strip()
                if len(key) == 64:  # Validate key length
                    return key
                logger.warning("Invalid secret key found, generating new one")
        except OSError as e:
            logger.error(f"Error reading secret key: {e}")

    # Generate new key
    key = secrets.token_hex(32)  # 32 bytes = 64 hex chars

    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)

        with open(secret_key_file, 'w') as f:
            f.write(key)

        # Set file permissions to 600 (owner read/write only)
        os.chmod(secret_key_file, 0o600)

        logger.info("Generated new secret key and saved to disk")
    except OSError as e:
        logger.error(f"Error saving secret key: {e}")
        logger.warning("Using non-persistent secret key")

    return key


def now_utc():
    """Returns current datetime in UTC (aware)"""
    return datetime.now(timezone.utc)


def new_id():
    """Primary keys are UUID4 strings so user ids can be shortened for display."""
    return str(uuid.uuid4())


def username_from_email(email):
    """Lowercased email local part with everything but [a-z0-9] removed."""
    local_part = (email or '').split('@')[0]
    return re.sub(r'[^a-z0-9]', '', local_part.lower())


def player_display_name(user_id, username=None, email=None):
    """
    Name shown for a player card.

    Falls back from the account username to the email local part and finally
    to a placeholder built from the first 8 characters of the user id.
    """
    if username:
        return username
    if email:
        local_part = email.split('@')[0]
        if local_part:
            return local_part
    return f"Player {str(user_id or '')[:8]}"


def parse_non_negative_int(value, field, default, maximum=None):
    """
    Parse a paging query argument.

    Missing or blank values give ``default``; anything that is not a
    non-negative integer, or is above ``maximum`` when one is given, raises
    ``ValueError`` naming the field.
    """
    if value is None or str(value).strip() == '':
        return default
    text = str(value).strip()
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"'{field}' must be a non-negative integer, got '{value}'")
    number = int(text)
    if maximum is not None and number > maximum:
        raise ValueError(f"'{field}' must be at most {maximum}, got {number}")
    return number
