"""
Constants for the marker map editor: click rounding and the media type
filter of the image pickers.
"""

# Decimal places kept when a click is converted to a percentage
PERCENT_PRECISION = 2

# Media types accepted by the image pickers
IMAGE_TYPES = ['image']
