"""
Main NiceGUI application for Marker Map.

Wires the block store and media library into the pages and starts the
server. Configuration comes from .env / environment variables and
config.json (see markermap.config).
"""

import logging
import sys

from dotenv import load_dotenv
load_dotenv()

from nicegui import ui

from markermap.config import get_port, get_storage_secret
from markermap.media import create_media_library
from markermap.pages import create_pages
from markermap.paths import ensure_db_dirs, get_blocks_dir
from markermap.storage import create_store
from markermap.styles import MARKER_MAP_CSS

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

# Ensure required directories exist on startup
ensure_db_dirs()

# Marker styling is shared by the editor preview and the render view
ui.add_css(MARKER_MAP_CSS, shared=True)

store = create_store(blocks_dir=get_blocks_dir())
media_library = create_media_library()
media_library.register_routes()

create_pages(store, media_library)
logger.info(f"Marker Map using {store.store_type} store")


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='Marker Map',
        port=get_port(),
        reload=not getattr(sys, 'frozen', False),
        storage_secret=get_storage_secret(),
    )
