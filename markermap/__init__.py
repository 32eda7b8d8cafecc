"""
Marker Map: an image with labeled, linked markers.

- markermap.edit: authoring view (controller, preview, handlers)
- markermap.renderer: saved display markup
- markermap.storage / markermap.media: host services
"""

__version__ = '0.1.0'
