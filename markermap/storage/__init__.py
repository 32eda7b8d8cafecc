"""
Attribute storage for Marker Map.

Supports multiple stores:
- JsonBlockStore: one JSON file per block (default)
- MemoryBlockStore: process-local dict
"""

from markermap.storage.protocol import BlockStore, BlockNotFoundError
from markermap.storage.json_store import JsonBlockStore
from markermap.storage.memory_store import MemoryBlockStore
from markermap.storage.factory import create_store, get_store_type

__all__ = [
    'BlockStore',
    'BlockNotFoundError',
    'JsonBlockStore',
    'MemoryBlockStore',
    'create_store',
    'get_store_type',
]
