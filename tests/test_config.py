import json

import pytest

from markermap import config


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / 'config.json'
    monkeypatch.setattr(config, 'get_config_path', lambda: path)
    for env_key in config.ENV_KEYS.values():
        monkeypatch.delenv(env_key, raising=False)
    return path


def test_missing_config_uses_defaults(config_path):
    assert config.load_config() == {}
    assert config.get_port() == 8080
    assert config.get_setting('storage') == 'json'


def test_port_read_from_config_file(config_path):
    config_path.write_text(json.dumps({'port': 9000}), encoding='utf-8')
    assert config.load_config() == {'port': 9000}
    assert config.get_port() == 9000


def test_environment_wins_over_file(config_path, monkeypatch):
    config_path.write_text(json.dumps({'port': 9000, 'storage_secret': 'from-file'}), encoding='utf-8')
    monkeypatch.setenv('MARKER_MAP_PORT', '9100')

    assert config.get_port() == 9100
    assert config.get_storage_secret() == 'from-file'


def test_corrupt_config_is_ignored(config_path):
    config_path.write_text('{oops', encoding='utf-8')
    assert config.load_config() == {}
    assert config.get_port() == 8080


def test_bad_port_falls_back_to_default(config_path, monkeypatch):
    monkeypatch.setenv('MARKER_MAP_PORT', 'eighty')
    assert config.get_port() == 8080
