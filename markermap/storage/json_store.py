"""
JSON file Block Store for Marker Map.

Implements the BlockStore protocol using one JSON file per block.
This is the default storage mechanism.
"""

import json
import logging
import re
import uuid
from pathlib import Path
from typing import Any, Dict, List

from markermap.block import default_attributes
from markermap.storage.protocol import BlockNotFoundError

logger = logging.getLogger(__name__)

_BLOCK_ID_RE = re.compile(r'^[A-Za-z0-9_-]+$')


class JsonBlockStore:
    """
    Local file-based attribute store.

    Structure:
    - {blocks_dir}/{block_id}.json: attribute set of one block
    """

    def __init__(self, blocks_dir: str):
        self.blocks_dir = Path(blocks_dir)
        self.blocks_dir.mkdir(parents=True, exist_ok=True)

    @property
    def store_type(self) -> str:
        return "json"

    def _path(self, block_id: str) -> Path:
        if not block_id or not _BLOCK_ID_RE.match(block_id):
            raise BlockNotFoundError(block_id)
        return self.blocks_dir / f"{block_id}.json"

    def list_blocks(self) -> List[str]:
        files = sorted(self.blocks_dir.glob("*.json"), key=lambda p: (p.stat().st_mtime_ns, p.stem))
        return [f.stem for f in files]

    def block_exists(self, block_id: str) -> bool:
        try:
            return self._path(block_id).exists()
        except BlockNotFoundError:
            return False

    def create_block(self) -> str:
        block_id = uuid.uuid4().hex[:12]
        self.save_attributes(block_id, default_attributes())
        logger.info(f"Created marker map block {block_id}")
        return block_id

    def load_attributes(self, block_id: str) -> Dict[str, Any]:
        path = self._path(block_id)
        if not path.exists():
            raise BlockNotFoundError(block_id)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Failed to load block file {path}: {e}")
            return default_attributes()

        if not isinstance(data, dict):
            logger.warning(f"Block file {path} does not hold an attribute set, using defaults")
            return default_attributes()
        return data

    def save_attributes(self, block_id: str, attributes: Dict[str, Any]) -> None:
        if not isinstance(attributes, dict):
            raise ValueError(f"Attributes for block {block_id} must be a dict")

        path = self._path(block_id)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(attributes, f, indent=2, ensure_ascii=False)

    def delete_block(self, block_id: str) -> None:
        try:
            path = self._path(block_id)
        except BlockNotFoundError:
            return
        if path.exists():
            path.unlink()
            logger.info(f"Deleted marker map block {block_id}")
