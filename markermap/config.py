"""
Configuration management for Marker Map.

Reads persistent configuration including:
- Server port and storage secret
- Which block store backs the editor

Priority for every setting: environment variable, then config.json, then the default.
Config is stored in config.json next to the executable/project root.
"""

import json
import os
from typing import Any, Optional

from markermap.paths import get_config_path

DEFAULTS = {
    "port": 8080,
    "storage_secret": "marker_map_secret_key",
    "storage": "json",
}

ENV_KEYS = {
    "port": "MARKER_MAP_PORT",
    "storage_secret": "MARKER_MAP_STORAGE_SECRET",
    "storage": "MARKER_MAP_STORAGE",
}


def load_config() -> dict:
    """Load configuration from config.json."""
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                return data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, IOError):
            return {}
    return {}


def get_setting(name: str, config: Optional[dict] = None) -> Any:
    """
    Resolve a single setting.

    Args:
        name: Setting key (one of DEFAULTS)
        config: Already loaded config.json contents, loaded on demand if omitted
    """
    env_key = ENV_KEYS.get(name)
    if env_key:
        env_val = os.environ.get(env_key)
        if env_val:
            return env_val

    if config is None:
        config = load_config()
    if name in config:
        return config[name]
    return DEFAULTS.get(name)


def get_port() -> int:
    try:
        return int(get_setting("port"))
    except (TypeError, ValueError):
        return DEFAULTS["port"]


def get_storage_secret() -> str:
    return str(get_setting("storage_secret"))
