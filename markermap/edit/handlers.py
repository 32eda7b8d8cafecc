"""
Edit Handlers - Event handlers for the marker map editor.

This module keeps the UI event plumbing out of app.py: it translates raw
NiceGUI events into MarkerMapController calls.
"""

import logging
from nicegui import ui
from typing import Any, Callable, Dict, Optional, Tuple

from markermap.edit.constants import IMAGE_TYPES
from markermap.edit.controller import MarkerMapController
from markermap.media.protocol import MediaLibrary

logger = logging.getLogger(__name__)


def normalize_click_payload(raw: Any) -> Optional[Tuple[float, float, Optional[Dict[str, float]]]]:
    """
    Normalize a map click payload into (client_x, client_y, rect).

    Accepts the dict emitted by the browser ({clientX, clientY, rect}) or an
    event object carrying it in `.args`. Returns None for anything unusable.
    """
    if hasattr(raw, 'args'):
        raw = raw.args
    if not isinstance(raw, dict):
        return None

    try:
        x = float(raw['clientX'])
        y = float(raw['clientY'])
    except (KeyError, TypeError, ValueError):
        return None

    rect = raw.get('rect')
    if not isinstance(rect, dict):
        rect = None
    return x, y, rect


def setup_editor_handlers(
    controller: MarkerMapController,
    media_library: MediaLibrary,
):
    """
    Set up all editor event handlers.

    Args:
        controller: MarkerMapController for the block being edited
        media_library: Media selection service used by the image pickers

    Returns:
        Dict with handler functions for binding to UI events
    """

    def _guarded(action: str, fn: Callable, *args):
        try:
            return fn(*args)
        except Exception as e:
            logger.error(f"{action} failed: {e}", exc_info=True)
            ui.notify(f'{action} failed: {e}', type='negative', position='bottom')
            return None

    def open_map_image():
        media_library.open(IMAGE_TYPES, lambda media: _guarded('Select map image', controller.set_map_image, media))

    def open_marker_icon():
        media_library.open(IMAGE_TYPES, lambda media: _guarded('Select marker icon', controller.set_marker_icon, media))

    def toggle_add_marker(e):
        enabled = e.value if hasattr(e, 'value') else bool(e)
        controller.set_add_marker_enabled(enabled)

    def handle_map_click(event):
        """Add a marker at the clicked position (no-op unless the toggle is on)."""
        payload = normalize_click_payload(event)
        if payload is None:
            return None
        return _guarded('Add marker', controller.handle_map_click, *payload)

    def update_location(index: int, key: str, value: Any):
        _guarded('Update marker', controller.update_location, index, key, value)

    def remove_location(index: int):
        _guarded('Remove marker', controller.remove_location, index)

    return {
        'open_map_image': open_map_image,
        'open_marker_icon': open_marker_icon,
        'toggle_add_marker': toggle_add_marker,
        'handle_map_click': handle_map_click,
        'update_location': update_location,
        'remove_location': remove_location,
    }
