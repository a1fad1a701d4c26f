"""
Tests for settings loading and lookup
"""
import os
from unittest.mock import patch

import yaml

from apoxer import settings as settings_module
from apoxer.constants import DEFAULT_SETTINGS
from apoxer.settings import get_setting, merge_settings, reload_conf


class TestMergeSettings:
    """Tests for merge_settings"""

    def test_sections_are_merged_key_by_key(self):
        merged = merge_settings(DEFAULT_SETTINGS, {'games': {'max_limit': 10}})
        assert merged['games']['max_limit'] == 10
        assert merged['games']['default_limit'] == DEFAULT_SETTINGS['games']['default_limit']

    def test_defaults_are_not_mutated(self):
        merge_settings(DEFAULT_SETTINGS, {'feed': {'page_size': 3}})
        assert DEFAULT_SETTINGS['feed']['page_size'] == 20

    def test_unknown_sections_are_kept(self):
        assert merge_settings({}, {'extra': {'a': 1}}) == {'extra': {'a': 1}}


class TestLoadSettings:
    """Tests for the YAML settings file"""

    def test_missing_file_is_created_with_defaults(self, tmp_path):
        config_file = tmp_path / 'settings.yaml'
        with patch.object(settings_module, 'CONFIG_FILE', str(config_file)), \
                patch.object(settings_module, 'CONFIG_DIR', str(tmp_path)):
            loaded = reload_conf()
        assert os.path.exists(config_file)
        assert loaded['games'] == DEFAULT_SETTINGS['games']

    def test_file_values_override_defaults(self, tmp_path):
        config_file = tmp_path / 'settings.yaml'
        config_file.write_text(yaml.dump({'feed': {'page_size': 5}}))
        with patch.object(settings_module, 'CONFIG_FILE', str(config_file)):
            loaded = reload_conf()
        assert loaded['feed']['page_size'] == 5
        assert loaded['players'] == DEFAULT_SETTINGS['players']
        reload_conf()


class TestGetSetting:
    """Tests for get_setting"""

    def test_reads_app_settings(self, make_app):
        app = make_app(settings={'feed': {'page_size': 7}})
        with app.app_context():
            assert get_setting('feed', 'page_size') == 7
            assert get_setting('feed', 'missing', 'fallback') == 'fallback'
            assert get_setting('nope', 'missing') is None


class TestEnvironment:
    """The environment always comes from APOXER_ENV, never from settings.yaml"""

    def test_written_file_has_no_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv('APOXER_ENV', 'development')
        config_file = tmp_path / 'settings.yaml'
        with patch.object(settings_module, 'CONFIG_FILE', str(config_file)), \
                patch.object(settings_module, 'CONFIG_DIR', str(tmp_path)):
            loaded = reload_conf()
        assert loaded['app']['environment'] == 'development'
        assert 'environment' not in yaml.safe_load(config_file.read_text())['app']
        reload_conf()

    def test_development_file_loaded_in_production(self, tmp_path, monkeypatch, make_app):
        """A config dir created during development keeps seeding closed after a production restart"""
        config_file = tmp_path / 'settings.yaml'
        config_file.write_text(yaml.dump({
            'app': {'environment': 'development'},
            'dev': {'seed_enabled': True},
        }))
        monkeypatch.setenv('APOXER_ENV', 'production')
        with patch.object(settings_module, 'CONFIG_FILE', str(config_file)):
            loaded = reload_conf()
        assert loaded['app']['environment'] == 'production'

        app = make_app(settings=loaded)
        with app.test_client() as client:
            assert client.post('/api/dev/seed').status_code == 404
            assert client.post('/api/dev/seed-events').status_code == 404
        monkeypatch.delenv('APOXER_ENV')
        reload_conf()
