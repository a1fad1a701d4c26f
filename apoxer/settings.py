import copy
import os
import logging

import yaml

from apoxer.constants import CONFIG_DIR, CONFIG_FILE, DEFAULT_ENVIRONMENT, DEFAULT_SETTINGS

# Retrieve main logger
logger = logging.getLogger("main")


# Cache variable
_cached_settings = None


def merge_settings(defaults, overrides):
    """Deep merge ``overrides`` into a copy of ``defaults``, section by section."""
    merged_settings = copy.deepcopy(defaults)
    for section, values in (overrides or {}).items():
        if isinstance(values, dict) and section in merged_settings and isinstance(merged_settings[section], dict):
            merged_settings[section].update(values)
        else:
            merged_settings[section] = values
    return merged_settings


def current_environment():
    return os.environ.get("APOXER_ENV", DEFAULT_ENVIRONMENT)


def apply_environment(settings):
    """Overlay the process environment; it always wins over the settings file."""
    settings.setdefault("app", {})["environment"] = current_environment()
    return settings


def load_settings(force=False):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    if os.path.exists(CONFIG_FILE):
        logger.debug(f"Reading configuration file: {CONFIG_FILE}")
        with open(CONFIG_FILE, "r") as yaml_file:
            settings = yaml.safe_load(yaml_file) or {}

        # Deep merge with defaults to ensure new keys are present
        settings = merge_settings(DEFAULT_SETTINGS, settings)

    else:
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        # The environment comes from APOXER_ENV on every start, never from the file
        settings["app"].pop("environment", None)
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w") as yaml_file:
            yaml.dump(settings, yaml_file)

    _cached_settings = apply_environment(settings)
    return settings


def get_setting(section, key, default=None):
    """Read one setting from the running app, falling back to the settings file."""
    from flask import current_app, has_app_context

    if has_app_context() and "SETTINGS" in current_app.config:
        settings = current_app.config["SETTINGS"]
    else:
        settings = load_settings()
    return settings.get(section, {}).get(key, default)


def reload_conf():
    """Reload application settings cache"""
    global _cached_settings
    _cached_settings = None
    return load_settings(force=True)
