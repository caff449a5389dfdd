"""Content-Type inference from file extensions."""

import mimetypes
from pathlib import Path

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Text types the frontend relies on, pinned so they always carry a charset
# regardless of the platform's mime.types database.
_KNOWN_TYPES: dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".mjs": "application/javascript; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".map": "application/json; charset=utf-8",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".ico": "image/x-icon",
}


def content_type_for(path: str | Path) -> str:
    """Return the Content-Type for *path*, ``application/octet-stream`` if unknown."""
    ext = Path(path).suffix.lower()
    if ext in _KNOWN_TYPES:
        return _KNOWN_TYPES[ext]
    guessed, _ = mimetypes.guess_type(Path(path).name)
    return guessed or DEFAULT_CONTENT_TYPE
