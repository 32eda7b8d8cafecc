"""
Edit Actions Module for the marker map editor.

Pure attribute mutations. Every function returns a NEW `locations` list (or a
new top-level patch) and leaves its input untouched, so the caller can hand
the result straight to `set_attributes` as a whole-value replacement.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple

from markermap.block import MARKER_FIELDS, new_marker
from markermap.edit.constants import PERCENT_PRECISION

logger = logging.getLogger(__name__)


def format_percent(value: float, precision: int = PERCENT_PRECISION) -> str:
    """
    Format a percentage with fixed decimals and a trailing '%' (25 -> '25.00%').

    Rounds the exact binary value of `value` half away from zero, so ties such
    as 0.125 give '0.13%' and tiny negatives keep their sign ('-0.00%').
    """
    if value == 0:
        value = 0.0  # -0.0 prints unsigned
    step = Decimal(1).scaleb(-precision)
    quantized = Decimal(value).quantize(step, rounding=ROUND_HALF_UP)
    return f"{quantized:f}%"


def compute_click_position(client_x: float, client_y: float,
                           rect: Mapping[str, float]) -> Optional[Tuple[str, str]]:
    """
    Convert a click in viewport pixels into container-relative percentages.

    Args:
        client_x, client_y: Click position in viewport coordinates
        rect: Bounding rect of the map container (top, left, width, height)

    Returns:
        (top, left) formatted percentages, or None for a zero-size container
    """
    width = float(rect.get('width') or 0)
    height = float(rect.get('height') or 0)
    if width <= 0 or height <= 0:
        return None

    top = (float(client_y) - float(rect.get('top', 0))) / height * 100
    left = (float(client_x) - float(rect.get('left', 0))) / width * 100
    return format_percent(top), format_percent(left)


def add_location(locations: List[Dict[str, Any]], top: str, left: str) -> List[Dict[str, Any]]:
    """Append a new marker at (top, left) with empty url and tooltip."""
    return [*locations, new_marker(top, left)]


def update_location(locations: List[Dict[str, Any]], index: int,
                    key: str, value: Any) -> List[Dict[str, Any]]:
    """
    Replace a single field of the marker at `index`.

    Only the edited marker is copied; every other entry keeps its identity.
    An out-of-range index or unknown field leaves the list unchanged.
    """
    if key not in MARKER_FIELDS:
        logger.warning(f"Ignoring update of unknown marker field '{key}'")
        return locations
    if not 0 <= index < len(locations):
        logger.warning(f"Ignoring update of marker {index}: only {len(locations)} markers")
        return locations

    updated = list(locations)
    updated[index] = {**locations[index], key: value}
    return updated


def remove_location(locations: List[Dict[str, Any]], index: int) -> List[Dict[str, Any]]:
    """Drop the marker at `index`; later markers shift down by one."""
    return [location for i, location in enumerate(locations) if i != index]


def select_media(field: str, media: Any) -> Dict[str, Any]:
    """
    Build the attribute patch for a media selection.

    Only the `url` of the selected resource is read; it is not validated.
    """
    if isinstance(media, Mapping):
        url = media.get('url')
    else:
        url = getattr(media, 'url', None)
    return {field: url}
