"""
Store Factory for Marker Map.

Creates the block store named by configuration ('json' by default).
"""

import logging
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

from markermap.storage.json_store import JsonBlockStore
from markermap.storage.memory_store import MemoryBlockStore

if TYPE_CHECKING:
    from markermap.storage.protocol import BlockStore

logger = logging.getLogger(__name__)

# Default store type
DEFAULT_STORE = "json"


def get_store_type(config: Optional[dict] = None) -> str:
    """Resolve the store type from config (env var MARKER_MAP_STORAGE wins)."""
    from markermap.config import get_setting
    return str(get_setting("storage", config) or DEFAULT_STORE).lower()


def create_store(
    blocks_dir: Optional[Union[str, Path]] = None,
    config: Optional[dict] = None,
    force_store: Optional[str] = None,
) -> "BlockStore":
    """
    Create a block store instance.

    Args:
        blocks_dir: Directory for the json store (defaults to db/blocks)
        config: Loaded config.json contents
        force_store: Override the configured store type

    Returns:
        BlockStore instance (JsonBlockStore or MemoryBlockStore)
    """
    store_type = force_store or get_store_type(config)

    if store_type == "memory":
        return MemoryBlockStore()

    if store_type != DEFAULT_STORE:
        logger.warning(f"Unknown store type '{store_type}', falling back to {DEFAULT_STORE}")

    if blocks_dir is None:
        from markermap.paths import get_blocks_dir
        blocks_dir = get_blocks_dir()
    return JsonBlockStore(blocks_dir=str(blocks_dir))
