"""
In-memory Block Store.

Keeps attribute sets in a dict for the lifetime of the process. Useful for
demos and tests; nothing survives a restart.
"""

import copy
import uuid
from typing import Any, Dict, List

from markermap.block import default_attributes
from markermap.storage.protocol import BlockNotFoundError


class MemoryBlockStore:
    """Process-local attribute store."""

    def __init__(self):
        self._blocks: Dict[str, Dict[str, Any]] = {}

    @property
    def store_type(self) -> str:
        return "memory"

    def list_blocks(self) -> List[str]:
        return list(self._blocks)

    def block_exists(self, block_id: str) -> bool:
        return block_id in self._blocks

    def create_block(self) -> str:
        block_id = uuid.uuid4().hex[:12]
        self._blocks[block_id] = default_attributes()
        return block_id

    def load_attributes(self, block_id: str) -> Dict[str, Any]:
        if block_id not in self._blocks:
            raise BlockNotFoundError(block_id)
        # Stored verbatim; callers get their own copy
        return copy.deepcopy(self._blocks[block_id])

    def save_attributes(self, block_id: str, attributes: Dict[str, Any]) -> None:
        if not isinstance(attributes, dict):
            raise ValueError(f"Attributes for block {block_id} must be a dict")
        self._blocks[block_id] = copy.deepcopy(attributes)

    def delete_block(self, block_id: str) -> None:
        self._blocks.pop(block_id, None)
