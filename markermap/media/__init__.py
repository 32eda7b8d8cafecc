"""
Media selection for the marker map editor.

- MediaLibrary: protocol the editor talks to
- UploadMediaLibrary: local upload dialog serving files from db/media
"""

from markermap.media.protocol import MediaLibrary, is_allowed_type, accept_attribute
from markermap.media.upload_library import UploadMediaLibrary, create_media_library

__all__ = [
    'MediaLibrary',
    'UploadMediaLibrary',
    'create_media_library',
    'is_allowed_type',
    'accept_attribute',
]
