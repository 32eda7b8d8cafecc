"""
Editing system for the marker map block.

This package provides the authoring surface:
- MarkerMapController: editor state and attribute mutations
- actions: pure locations/attribute transforms
- EditOverlay: live HTML preview and click forwarding
- setup_editor_handlers: event handlers for app.py integration

Usage:
    from markermap.edit import MarkerMapController, EditOverlay
    from markermap.edit.handlers import setup_editor_handlers
"""

from markermap.edit.constants import PERCENT_PRECISION, IMAGE_TYPES
from markermap.edit.controller import MarkerMapController, EditorState
from markermap.edit.overlay import EditOverlay, render_preview_html
from markermap.edit.handlers import setup_editor_handlers, normalize_click_payload

__all__ = [
    'MarkerMapController',
    'EditorState',
    'EditOverlay',
    'render_preview_html',
    'setup_editor_handlers',
    'normalize_click_payload',
    'PERCENT_PRECISION',
    'IMAGE_TYPES',
]
