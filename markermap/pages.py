"""
Pages for Marker Map.

- /                  list of marker map blocks
- /edit/{block_id}   authoring view (settings panel + live preview)
- /view/{block_id}   rendered display markup
- /api/blocks/{block_id}[/markup]  raw attributes / saved markup
"""

import logging
from typing import Any, Callable, Dict

from fastapi.responses import HTMLResponse, JSONResponse
from nicegui import app, ui

from markermap.block import BLOCK_TITLE, get_locations
from markermap.components import render_inspector
from markermap.edit import EditorState, EditOverlay, MarkerMapController, setup_editor_handlers
from markermap.media.protocol import MediaLibrary
from markermap.renderer import render_markup
from markermap.storage.protocol import BlockNotFoundError, BlockStore

logger = logging.getLogger(__name__)


def render_not_found(block_id: str):
    with ui.column().classes('items-center justify-center min-h-screen w-full'):
        ui.icon('error_outline').classes('text-6xl text-red-400')
        ui.label('Block Not Found').classes('text-2xl font-bold mt-4')
        ui.label(f'The marker map "{block_id}" does not exist.').classes('text-gray-400')
        ui.button('Go Home', on_click=lambda: ui.navigate.to('/')).classes('mt-4')


def make_editor_refresh(
    controller: MarkerMapController,
    overlay: EditOverlay,
    inspector: Dict[str, Callable],
) -> Callable[[EditorState], None]:
    """
    Build the on_change hook that re-renders the editor after a mutation.

    The preview and media pickers follow every change. Field edits keep their
    inputs (and focus); only adds and removals rebuild the field cards.
    """
    shown = {'marker_count': len(controller.locations)}

    def on_change(state: EditorState):
        attrs = controller.attributes
        overlay.update(attrs)
        overlay.set_add_mode(state.add_marker_enabled)
        inspector['refresh_media'](attrs)
        if state.marker_count != shown['marker_count']:
            shown['marker_count'] = state.marker_count
            inspector['refresh_locations'](attrs)

    return on_change


def create_editor(block_id: str, store: BlockStore, media_library: MediaLibrary) -> MarkerMapController:
    """
    Build the editor for one block and wire it to the store.

    Every attribute change is written back to the store as a whole attribute
    set, then the preview and settings panel are refreshed.
    """
    attributes = store.load_attributes(block_id)
    controller: MarkerMapController

    def set_attributes(patch: Dict[str, Any]):
        try:
            store.save_attributes(block_id, controller.attributes)
        except Exception as e:
            logger.error(f"Failed to save block {block_id}: {e}")
            ui.notify(f'Save failed: {e}', type='negative', position='bottom')

    controller = MarkerMapController(attributes, set_attributes)
    handlers = setup_editor_handlers(controller, media_library)
    overlay = EditOverlay()

    with ui.row().classes('w-full items-start gap-4 no-wrap'):
        with ui.card().classes('flex-1 min-w-0'):
            ui.label(BLOCK_TITLE).classes('text-lg font-bold')
            overlay.setup(controller.attributes, on_click=handlers['handle_map_click'])
        with ui.card().classes('w-96 shrink-0 max-h-[90vh] overflow-y-auto'):
            inspector = render_inspector(controller.attributes, handlers)

    controller.set_on_change(make_editor_refresh(controller, overlay, inspector))
    return controller


def create_pages(store: BlockStore, media_library: MediaLibrary):
    """
    Register all pages and API routes.

    Call this function once during app setup.
    """

    @ui.page('/')
    def index_page():
        ui.label('Marker Maps').classes('text-2xl font-bold')

        def do_create():
            block_id = store.create_block()
            ui.navigate.to(f'/edit/{block_id}')

        ui.button('New Marker Map', icon='add', on_click=do_create).props('color=primary')

        blocks_container = ui.column().classes('w-full gap-2 mt-4')

        def confirm_delete(block_id: str):
            with ui.dialog() as dialog, ui.card():
                ui.label(f'Delete marker map {block_id}?').classes('text-lg font-bold')
                with ui.row().classes('w-full justify-end gap-2 mt-4'):
                    ui.button('Cancel', on_click=dialog.close).props('flat')

                    def do_delete():
                        store.delete_block(block_id)
                        dialog.close()
                        refresh_blocks()
                    ui.button('Delete', on_click=do_delete).props('color=negative')
            dialog.open()

        def refresh_blocks():
            blocks_container.clear()
            with blocks_container:
                block_ids = store.list_blocks()
                if not block_ids:
                    ui.label('No marker maps yet.').classes('text-gray-400')
                for block_id in block_ids:
                    try:
                        count = len(get_locations(store.load_attributes(block_id)))
                    except BlockNotFoundError:
                        continue
                    with ui.card().classes('w-full'):
                        with ui.row().classes('w-full items-center gap-4'):
                            ui.label(block_id).classes('font-mono')
                            ui.label(f'{count} markers').classes('text-sm text-gray-400')
                            ui.space()
                            ui.button('Edit', on_click=lambda b=block_id: ui.navigate.to(f'/edit/{b}')).props('flat')
                            ui.button('View', on_click=lambda b=block_id: ui.navigate.to(f'/view/{b}')).props('flat')
                            ui.button(icon='delete', on_click=lambda b=block_id: confirm_delete(b)) \
                                .props('flat round color=negative')

        refresh_blocks()

    @ui.page('/edit/{block_id}')
    def edit_page(block_id: str):
        if not store.block_exists(block_id):
            render_not_found(block_id)
            return

        with ui.row().classes('w-full items-center gap-2'):
            ui.button(icon='arrow_back', on_click=lambda: ui.navigate.to('/')).props('flat round')
            ui.space()
            ui.button('View', icon='visibility', on_click=lambda: ui.navigate.to(f'/view/{block_id}')).props('outline')

        create_editor(block_id, store, media_library)

    @ui.page('/view/{block_id}')
    def view_page(block_id: str):
        try:
            attributes = store.load_attributes(block_id)
        except BlockNotFoundError:
            render_not_found(block_id)
            return
        ui.html(render_markup(attributes), sanitize=False).classes('w-full')

    @app.get('/api/blocks/{block_id}')
    def block_attributes(block_id: str):
        try:
            return JSONResponse(store.load_attributes(block_id))
        except BlockNotFoundError:
            return JSONResponse({'detail': 'Block not found'}, status_code=404)

    @app.get('/api/blocks/{block_id}/markup')
    def block_markup(block_id: str):
        try:
            return HTMLResponse(render_markup(store.load_attributes(block_id)))
        except BlockNotFoundError:
            return HTMLResponse('', status_code=404)
