"""
Edit Overlay - live preview of the marker map inside the editor.

The preview is plain HTML (same class names as the saved markup) so the
front-end stylesheet and the editor agree on layout. Markers are positioned
with inline styles and anchored on their centre.

IMPORTANT: the container rect is measured in the browser at click time, so
percentages stay correct whatever size the preview is rendered at.
"""

from html import escape
from typing import Any, Callable, Dict, Optional

from nicegui import ui

from markermap.block import (
    BLOCK_CLASS_NAME,
    get_locations,
    MAP_CONTAINER_CLASS,
    MARKER_CLASS,
    MARKER_SIZE,
    MARKERS_CLASS,
    TOOLTIP_CLASS,
)
from markermap.renderer import marker_background, style_declarations

# Runs in the browser: forward clicks that land inside the map container
# together with the container's bounding rect. Clicks elsewhere are dropped.
MAP_CLICK_JS = f'''(e) => {{
    const container = e.target.closest('.{MAP_CONTAINER_CLASS}');
    if (!container) return;
    const r = container.getBoundingClientRect();
    emit({{
        clientX: e.clientX,
        clientY: e.clientY,
        rect: {{top: r.top, left: r.left, width: r.width, height: r.height}},
    }});
}}'''


def render_preview_html(attributes: Optional[Dict[str, Any]]) -> str:
    """Render the editor preview: map image plus one centred marker per location."""
    attributes = attributes or {}
    image_url = attributes.get('mapImageUrl')
    icon_url = attributes.get('markerIconUrl')

    parts = [f'<div class="{MAP_CONTAINER_CLASS}" style="position:relative">']
    if image_url:
        parts.append(f'<img src="{escape(image_url, quote=True)}" alt="Map" style="width:100%"/>')
    parts.append(f'<div class="{MARKERS_CLASS}">')
    for location in get_locations(attributes):
        style = style_declarations([
            ('position', 'absolute'),
            ('top', location.get('top')),
            ('left', location.get('left')),
            ('background-image', marker_background(icon_url)),
            ('width', f'{MARKER_SIZE}px'),
            ('height', f'{MARKER_SIZE}px'),
            ('background-size', 'cover'),
            ('transform', 'translate(-50%, -50%)'),
        ])
        tooltip = escape(str(location.get('tooltip') or ''), quote=False)
        parts.append(
            f'<div class="{MARKER_CLASS}" style="{escape(style, quote=True)}">'
            f'<span class="{TOOLTIP_CLASS}">{tooltip}</span></div>'
        )
    parts.append('</div></div>')
    return ''.join(parts)


class EditOverlay:
    """
    Renders the live preview and forwards map clicks.

    Call setup() once inside the page layout, then update() after every
    attribute change.
    """

    def __init__(self):
        self._html: Optional[ui.html] = None
        self._wrapper: Optional[ui.element] = None
        self._is_setup = False

    def setup(self, attributes: Dict[str, Any], on_click: Callable[[Any], None]):
        """Create the preview elements. Call once per page."""
        if self._is_setup:
            return

        self._wrapper = ui.element('div').classes(f'{BLOCK_CLASS_NAME} w-full')
        self._wrapper.on('click', on_click, js_handler=MAP_CLICK_JS)
        with self._wrapper:
            self._html = ui.html(render_preview_html(attributes), sanitize=False).classes('w-full')
        self._is_setup = True

    def update(self, attributes: Dict[str, Any]):
        if not self._is_setup:
            return
        self._html.set_content(render_preview_html(attributes))

    def set_add_mode(self, enabled: bool):
        """Show a crosshair over the map while clicks add markers."""
        if not self._is_setup:
            return
        if enabled:
            self._wrapper.classes(add='cursor-crosshair')
        else:
            self._wrapper.classes(remove='cursor-crosshair')
