"""
Upload-based media library.

Presents a NiceGUI dialog with an upload widget. Uploaded files are written
to the media directory under a unique name and served as static media, and
the selection callback receives the public URL.
"""

import logging
import mimetypes
import re
import uuid
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from nicegui import app, ui

from markermap.media.protocol import accept_attribute, is_allowed_type

logger = logging.getLogger(__name__)

DEFAULT_URL_PREFIX = '/media'


def safe_filename(name: str) -> str:
    """Strip directories and unusual characters from an uploaded file name."""
    base = Path(name or 'upload').name
    base = re.sub(r'[^A-Za-z0-9._-]', '_', base).strip('._')
    return base or 'upload'


class UploadMediaLibrary:
    """
    Local media library backed by a directory.

    Structure:
    - {media_dir}/{uuid}-{name}: uploaded files, served under {url_prefix}/
    """

    def __init__(self, media_dir: str, url_prefix: str = DEFAULT_URL_PREFIX):
        self.media_dir = Path(media_dir)
        self.url_prefix = url_prefix.rstrip('/')
        self.media_dir.mkdir(parents=True, exist_ok=True)

    def register_routes(self) -> None:
        """Serve the media directory. Call once at app start-up."""
        app.add_media_files(self.url_prefix, str(self.media_dir))

    def store(self, name: str, data: bytes, mime: str) -> Dict[str, Any]:
        """Write an uploaded file and describe it the way on_select expects."""
        filename = f"{uuid.uuid4().hex[:12]}-{safe_filename(name)}"
        path = self.media_dir / filename
        path.write_bytes(data)
        logger.info(f"Stored media '{name}' as {path} ({len(data)} bytes)")
        return {
            'url': f'{self.url_prefix}/{filename}',
            'name': name,
            'mime': mime,
        }

    def list_media(self, allowed_types: Optional[List[str]] = None) -> List[str]:
        """Public URLs of stored files matching the type filter, newest first."""
        files = sorted(self.media_dir.glob('*'), key=lambda p: p.stat().st_mtime, reverse=True)
        return [
            f'{self.url_prefix}/{p.name}'
            for p in files
            if p.is_file() and is_allowed_type(mimetypes.guess_type(p.name)[0] or '', allowed_types or [])
        ]

    def open(self, allowed_types: List[str], on_select: Callable[[Dict[str, Any]], None]) -> None:
        """Show the upload dialog; existing files can be picked again."""
        with ui.dialog() as dialog, ui.card().classes('min-w-96'):
            ui.label('Media Library').classes('text-lg font-bold')

            async def handle_upload(e):
                upload = e.file
                mime = upload.content_type or ''
                if not is_allowed_type(mime, allowed_types):
                    ui.notify(f'{upload.name}: unsupported file type {mime or "unknown"}', type='negative')
                    return
                data = await upload.read()
                media = self.store(upload.name, data, mime)
                dialog.close()
                on_select(media)

            ui.upload(label='Upload file', auto_upload=True, on_upload=handle_upload) \
                .props(f'accept="{accept_attribute(allowed_types)}"').classes('w-full')

            existing = self.list_media(allowed_types)
            if existing:
                ui.label('Or choose an existing file').classes('text-xs font-bold text-gray-400 mt-3')
                with ui.row().classes('w-full flex-wrap gap-2'):
                    for url in existing:
                        def pick(u):
                            dialog.close()
                            on_select({'url': u})
                        ui.image(url).classes('w-16 h-16 cursor-pointer').on('click', lambda e, u=url: pick(u))

            with ui.row().classes('w-full justify-end mt-4'):
                ui.button('Cancel', on_click=dialog.close).props('flat')

        dialog.open()


def create_media_library(media_dir: Optional[str] = None) -> UploadMediaLibrary:
    from markermap.paths import get_media_dir
    return UploadMediaLibrary(media_dir or str(get_media_dir()))
