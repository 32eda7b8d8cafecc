"""
Display markup for a marker map.

`render_markup` is a pure function of the attribute set: no state, no side
effects, same input -> byte-identical output. The class names `map-container`,
`markers`, `marker` and `tooltip` are the styling contract shared with the
front-end stylesheet and the editor preview.
"""

from html import escape
from typing import Any, Dict, List, Optional

from markermap.block import (
    BLOCK_CLASS_NAME,
    FALLBACK_URL,
    get_locations,
    MAP_CONTAINER_CLASS,
    MARKER_CLASS,
    MARKER_LINK_REL,
    MARKER_LINK_TARGET,
    MARKERS_CLASS,
    TOOLTIP_CLASS,
)


def _attr(value: Any) -> str:
    return escape('' if value is None else str(value), quote=True)


def style_declarations(declarations: List[tuple]) -> str:
    """Serialize (property, value) pairs to an inline style, skipping unset values."""
    return ';'.join(f'{prop}:{value}' for prop, value in declarations if value not in (None, ''))


def marker_background(icon_url: Optional[str]) -> Optional[str]:
    """CSS background-image value for the shared marker icon."""
    if not icon_url:
        return None
    return f'url({icon_url})'


def render_marker(location: Dict[str, Any], icon_url: Optional[str]) -> str:
    """Render one marker as a link positioned at (top, left)."""
    href = location.get('url') or FALLBACK_URL
    style = style_declarations([
        ('top', location.get('top')),
        ('left', location.get('left')),
        ('background-image', marker_background(icon_url)),
    ])
    tooltip = escape(str(location.get('tooltip') or ''), quote=False)
    return (
        f'<a href="{_attr(href)}" class="{MARKER_CLASS}" style="{_attr(style)}" '
        f'target="{MARKER_LINK_TARGET}" rel="{MARKER_LINK_REL}">'
        f'<span class="{TOOLTIP_CLASS}">{tooltip}</span>'
        f'</a>'
    )


def render_markup(attributes: Optional[Dict[str, Any]]) -> str:
    """
    Render the saved markup for a marker map block.

    Args:
        attributes: {mapImageUrl, markerIconUrl, locations}; any of them may be absent

    Returns:
        HTML string for the block
    """
    attributes = attributes or {}
    image_url = attributes.get('mapImageUrl')
    icon_url = attributes.get('markerIconUrl')

    parts = [f'<div class="{BLOCK_CLASS_NAME}">', f'<div class="{MAP_CONTAINER_CLASS}">']
    if image_url:
        parts.append(f'<img src="{_attr(image_url)}" alt="Map"/>')
    parts.append(f'<div class="{MARKERS_CLASS}">')
    for location in get_locations(attributes):
        parts.append(render_marker(location, icon_url))
    parts.append('</div></div></div>')
    return ''.join(parts)
