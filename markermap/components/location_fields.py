"""
Location fields renderer.

One bordered card per marker: text inputs for each marker field plus a
destructive remove button.
"""

from nicegui import ui
from typing import Any, Callable, Dict

# (field key, input label) in display order
FIELD_LABELS = (
    ('top', 'Top Position (%)'),
    ('left', 'Left Position (%)'),
    ('url', 'URL'),
    ('tooltip', 'Tooltip'),
)


def make_change_handler(index: int, key: str, on_change: Callable[[int, str, Any], None]) -> Callable:
    """
    Create a value change handler bound to one marker field.

    Args:
        index: Marker position in `locations`
        key: Marker field to update
        on_change: Called with (index, key, new value)
    """
    def handler(e):
        on_change(index, key, e.value)
    return handler


def render_location_fields(
    index: int,
    location: Dict[str, Any],
    on_change: Callable[[int, str, Any], None],
    on_remove: Callable[[int], None],
) -> None:
    """Render the editable fields of the marker at `index`."""
    with ui.card().classes('w-full mt-3 p-3').style('border: 1px solid #ccc'):
        ui.label(f'Marker {index + 1}').classes('text-xs font-bold text-gray-400')
        for key, label in FIELD_LABELS:
            inp = ui.input(label, value=location.get(key, '')).classes('w-full')
            inp.props('outlined dense')
            inp.on_value_change(make_change_handler(index, key, on_change))

        ui.button('Remove Marker', on_click=lambda: on_remove(index)) \
            .props('flat color=negative').classes('mt-2')
