"""
Settings panel for the marker map editor.

Three panels:
- Map Settings: map image and marker icon pickers
- Add Marker by Click: the placement toggle
- Locations: one field card per marker, in order
"""

from nicegui import ui
from typing import Any, Callable, Dict

from markermap.block import get_locations
from .location_fields import render_location_fields
from .media_picker import render_media_picker


def render_inspector(attributes: Dict[str, Any], handlers: Dict[str, Callable]) -> dict:
    """
    Render the inspector panels.

    Args:
        attributes: Current attribute set
        handlers: Dict from setup_editor_handlers

    Returns:
        Dict with refresh callbacks ('refresh_media', 'refresh_locations')
    """
    with ui.expansion('Map Settings', value=True).classes('w-full'):
        map_picker = render_media_picker(
            'Select Map Image',
            attributes.get('mapImageUrl'),
            on_open=handlers['open_map_image'],
            preview_alt='Map Image',
        )
        ui.element('div').style('margin-top: 20px')
        icon_picker = render_media_picker(
            'Select Marker Image',
            attributes.get('markerIconUrl'),
            on_open=handlers['open_marker_icon'],
            preview_alt='Marker Image',
            preview_style='width: 24px; margin-left: 10px',
            inline=True,
        )

    with ui.expansion('Add Marker by Click', value=True).classes('w-full'):
        ui.switch('Enable Add Marker by Click', value=False, on_change=handlers['toggle_add_marker'])

    with ui.expansion('Locations', value=True).classes('w-full'):
        locations_container = ui.column().classes('w-full gap-0')

    def refresh_media(attrs: Dict[str, Any]):
        map_picker['set_value'](attrs.get('mapImageUrl'))
        icon_picker['set_value'](attrs.get('markerIconUrl'))

    def refresh_locations(attrs: Dict[str, Any]):
        """Rebuild the field cards; called when markers are added or removed."""
        locations_container.clear()
        with locations_container:
            locations = get_locations(attrs)
            for index, location in enumerate(locations):
                render_location_fields(
                    index,
                    location,
                    on_change=handlers['update_location'],
                    on_remove=handlers['remove_location'],
                )
            if not locations:
                ui.label('No markers yet').classes('text-gray-500 text-xs italic')

    refresh_locations(attributes)

    return {
        'refresh_media': refresh_media,
        'refresh_locations': refresh_locations,
    }
