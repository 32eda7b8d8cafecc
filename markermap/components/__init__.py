"""
Reusable UI Components
"""

from .media_picker import render_media_picker
from .location_fields import render_location_fields, FIELD_LABELS
from .inspector import render_inspector

__all__ = ['render_media_picker', 'render_location_fields', 'FIELD_LABELS', 'render_inspector']
