"""
MediaLibrary Protocol Definition.

The editor never uploads or browses media itself: it asks a media library to
present a picker and receives the chosen resource through a callback. The
only field the editor reads from the result is `url`.
"""

from typing import Any, Callable, Dict, List, Protocol, runtime_checkable


@runtime_checkable
class MediaLibrary(Protocol):
    """
    Abstract protocol for media selection services.
    """

    def open(self, allowed_types: List[str], on_select: Callable[[Dict[str, Any]], None]) -> None:
        """
        Present a picker restricted to the allowed media types.

        Args:
            allowed_types: Top-level MIME types to accept (e.g. ['image'])
            on_select: Called once with {'url': ..., ...} when the user confirms
        """
        ...


def is_allowed_type(mime: str, allowed_types: List[str]) -> bool:
    """
    Check a MIME type against a filter of top-level types or full types.

    >>> is_allowed_type('image/png', ['image'])
    True
    """
    if not allowed_types:
        return True
    if not mime:
        return False
    mime = mime.lower()
    top_level = mime.split('/', 1)[0]
    return any(allowed.lower() in (mime, top_level) for allowed in allowed_types)


def accept_attribute(allowed_types: List[str]) -> str:
    """Translate a type filter into an <input accept=...> value."""
    return ','.join(t if '/' in t else f'{t}/*' for t in allowed_types)
