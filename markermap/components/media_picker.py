"""
Media Picker Component

A "Select ..." button that opens the media library, with a thumbnail of
the current selection when one is set.
"""

from nicegui import ui
from typing import Callable, Optional


def render_media_picker(
    label: str,
    value: Optional[str],
    on_open: Callable[[], None],
    preview_alt: str = '',
    preview_style: str = 'width: 100%; margin-top: 10px',
    inline: bool = False,
) -> dict:
    """
    Render a media selection button with preview.

    Args:
        label: Button text
        value: Currently selected URL, or None
        on_open: Called when the button is clicked (should open the media library)
        preview_alt: Alt text of the preview image
        preview_style: Inline style of the preview image
        inline: Put the preview next to the button instead of below it

    Returns:
        Dict with 'set_value' to swap the preview and the 'container' element
    """
    container = ui.row().classes('w-full items-center gap-2') if inline else ui.column().classes('w-full gap-1')

    with container:
        ui.button(label, on_click=on_open).props('color=primary')
        preview = ui.image(value or '').props(f'alt="{preview_alt}"').style(preview_style)
        preview.set_visibility(bool(value))

    def set_value(url: Optional[str]):
        preview.set_source(url or '')
        preview.set_visibility(bool(url))

    return {
        'set_value': set_value,
        'container': container,
    }
