"""
Edit Controller - Single source of truth for one marker map being edited.

This controller owns:
- The transient editor state (add-marker-by-click toggle)
- The current attribute set, mirrored from the host
- The `set_attributes` hook that hands every change back to the host

Every mutation is a read-modify-write of the CURRENT attribute set under a
single lock. Handlers never work on a captured copy of `locations`, so two
edits can never clobber each other even if events arrive concurrently.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from markermap.block import get_locations, normalize_attributes
from markermap.edit import actions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorState:
    """Immutable snapshot of the editor's UI state."""
    add_marker_enabled: bool = False
    marker_count: int = 0


class MarkerMapController:
    """Applies editor operations to an attribute set and reports them to the host."""

    def __init__(self, attributes: Optional[Dict[str, Any]] = None,
                 set_attributes: Optional[Callable[[Dict[str, Any]], None]] = None):
        self._attributes = normalize_attributes(attributes)
        self._set_attributes = set_attributes
        self._add_marker_enabled = False
        self._lock = threading.RLock()
        self._on_change: Optional[Callable[[EditorState], None]] = None

    @property
    def attributes(self) -> Dict[str, Any]:
        return self._attributes

    @property
    def locations(self) -> List[Dict[str, Any]]:
        return get_locations(self._attributes)

    @property
    def state(self) -> EditorState:
        return EditorState(
            add_marker_enabled=self._add_marker_enabled,
            marker_count=len(self.locations),
        )

    def set_on_change(self, callback: Callable[[EditorState], None]):
        self._on_change = callback

    # --- Add-marker toggle (not persisted) ---

    def set_add_marker_enabled(self, enabled: bool) -> EditorState:
        self._add_marker_enabled = bool(enabled)
        self._notify_change()
        return self.state

    def toggle_add_marker(self) -> EditorState:
        return self.set_add_marker_enabled(not self._add_marker_enabled)

    # --- Media selection callbacks ---

    def set_map_image(self, media: Any) -> None:
        self._apply(actions.select_media('mapImageUrl', media))

    def set_marker_icon(self, media: Any) -> None:
        self._apply(actions.select_media('markerIconUrl', media))

    # --- Marker operations ---

    def handle_map_click(self, client_x: float, client_y: float,
                         rect: Optional[Mapping[str, float]]) -> Optional[Dict[str, Any]]:
        """
        Add a marker where the map container was clicked.

        Returns the new marker, or None when the click is ignored (toggle off,
        click outside the map container, zero-size container).
        """
        if not self._add_marker_enabled:
            return None
        if not rect:
            logger.debug("Ignoring click outside the map container")
            return None

        position = actions.compute_click_position(client_x, client_y, rect)
        if position is None:
            logger.debug(f"Ignoring click on zero-size map container: {dict(rect)}")
            return None

        top, left = position
        with self._lock:
            locations = actions.add_location(self.locations, top, left)
            self._apply({'locations': locations})
        return locations[-1]

    def update_location(self, index: int, key: str, value: Any) -> None:
        with self._lock:
            current = self.locations
            locations = actions.update_location(current, index, key, value)
            if locations is current:
                return
            self._apply({'locations': locations})

    def remove_location(self, index: int) -> None:
        with self._lock:
            if not 0 <= index < len(self.locations):
                logger.warning(f"Ignoring removal of marker {index}: only {len(self.locations)} markers")
                return
            self._apply({'locations': actions.remove_location(self.locations, index)})

    # --- Internals ---

    def _apply(self, patch: Dict[str, Any]) -> None:
        with self._lock:
            self._attributes = {**self._attributes, **patch}
            if self._set_attributes:
                self._set_attributes(patch)
        self._notify_change()

    def _notify_change(self):
        if self._on_change:
            self._on_change(self.state)
