"""
Block metadata and attribute schema for the marker map widget.

The attribute set is the only persisted entity:
- mapImageUrl: background image source (optional)
- markerIconUrl: icon applied to every marker (optional)
- locations: ordered list of flat marker dicts {top, left, url, tooltip}

Markers have no identifier; their index in `locations` is their identity.
"""

import copy
from typing import Any, Dict, List, Optional

BLOCK_NAME = 'marker-map/dynamic-marker-map'
BLOCK_TITLE = 'Dynamic Marker Map'

# Hosts derive the wrapper class from the block name: "ns/name" -> "wp-block-ns-name"
BLOCK_CLASS_NAME = 'wp-block-' + BLOCK_NAME.replace('/', '-')

MARKER_FIELDS = ('top', 'left', 'url', 'tooltip')

# Styling hooks shared by the saved markup, the editor preview and stylesheets
MAP_CONTAINER_CLASS = 'map-container'
MARKERS_CLASS = 'markers'
MARKER_CLASS = 'marker'
TOOLTIP_CLASS = 'tooltip'

# Marker box size in pixels
MARKER_SIZE = 24

# Front-end link behaviour
MARKER_LINK_TARGET = '_parent'
MARKER_LINK_REL = 'noopener noreferrer'
FALLBACK_URL = '#'

ATTRIBUTE_SCHEMA: Dict[str, Dict[str, Any]] = {
    'mapImageUrl': {'type': 'string'},
    'markerIconUrl': {'type': 'string'},
    'locations': {'type': 'array', 'default': []},
}


def default_attributes() -> Dict[str, Any]:
    """Attribute set for a freshly inserted block. Fields without a default stay absent."""
    return {
        key: copy.deepcopy(field['default'])
        for key, field in ATTRIBUTE_SCHEMA.items()
        if 'default' in field
    }


def _marker_list(locations: Any) -> List[Dict[str, Any]]:
    """Only a list of dicts is a usable `locations` value; other entries are dropped."""
    if isinstance(locations, tuple):
        locations = list(locations)
    if not isinstance(locations, list):
        return []
    if all(isinstance(location, dict) for location in locations):
        return locations
    return [location for location in locations if isinstance(location, dict)]


def normalize_attributes(raw: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Return a shallow copy of an attribute set with `locations` guaranteed to be a list of dicts.

    A missing or non-list `locations` becomes empty and non-dict entries are
    dropped. Marker values are never validated: malformed coordinates and URLs
    pass through. Unknown keys are preserved so the host can round-trip them.
    """
    attributes = dict(raw or {})
    attributes['locations'] = _marker_list(attributes.get('locations'))
    return attributes


def get_locations(attributes: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """The marker dicts of `locations`, empty when absent or malformed."""
    if not attributes:
        return []
    return _marker_list(attributes.get('locations'))


def new_marker(top: str, left: str) -> Dict[str, str]:
    """A marker at the given position with an empty link and tooltip."""
    return {'top': top, 'left': left, 'url': '', 'tooltip': ''}
