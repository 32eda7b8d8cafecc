"""
Path utilities for Marker Map.

Handles path resolution for both development mode and frozen (PyInstaller) executables.
- In development: paths are relative to the project root
- When frozen: paths are relative to the executable location

External data (db/blocks, db/media, config.json) lives NEXT TO the executable, not bundled inside.
"""

import os
import sys
from pathlib import Path


def get_app_dir() -> Path:
    """
    Get the application directory.

    - In development: the project root (parent of markermap/)
    - When frozen: the directory containing the executable
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent.parent


def get_db_dir() -> Path:
    """Get the database directory (db/). MARKER_MAP_DB_DIR overrides the default."""
    override = os.environ.get("MARKER_MAP_DB_DIR")
    if override:
        return Path(override)
    return get_app_dir() / "db"


def get_blocks_dir() -> Path:
    """Directory holding one JSON file per marker-map block."""
    return get_db_dir() / "blocks"


def get_media_dir() -> Path:
    """Directory holding uploaded map images and marker icons."""
    return get_db_dir() / "media"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_app_dir() / "config.json"


def ensure_db_dirs() -> Path:
    """
    Ensure the db directory and its blocks/media folders exist.
    Returns the path to the db directory.
    """
    db_dir = get_db_dir()
    get_blocks_dir().mkdir(parents=True, exist_ok=True)
    get_media_dir().mkdir(parents=True, exist_ok=True)
    return db_dir
