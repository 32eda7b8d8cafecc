"""
BlockStore Protocol Definition.

The host persists each marker map's attribute set verbatim and hands it back
to the editor and the renderer. Stores do not interpret the attributes.
"""

from typing import Any, Dict, List, Protocol, runtime_checkable


class BlockNotFoundError(KeyError):
    """Raised when a block id has no stored attribute set."""


@runtime_checkable
class BlockStore(Protocol):
    """
    Abstract protocol for attribute stores.
    """

    @property
    def store_type(self) -> str:
        """Return the store type identifier ('json' or 'memory')."""
        ...

    def list_blocks(self) -> List[str]:
        """Return the ids of all stored blocks, oldest first."""
        ...

    def block_exists(self, block_id: str) -> bool:
        ...

    def create_block(self) -> str:
        """
        Insert a new block with default attributes.

        Returns:
            The new block id
        """
        ...

    def load_attributes(self, block_id: str) -> Dict[str, Any]:
        """
        Load a block's attribute set.

        Raises:
            BlockNotFoundError: if the block does not exist
        """
        ...

    def save_attributes(self, block_id: str, attributes: Dict[str, Any]) -> None:
        """
        Replace a block's attribute set.

        Raises:
            ValueError: if attributes is not a dict
        """
        ...

    def delete_block(self, block_id: str) -> None:
        """Remove a block and its attributes. Unknown ids are ignored."""
        ...
