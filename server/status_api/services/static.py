"""Static file lookup confined to a root directory."""

from pathlib import Path
from typing import Optional

CONTENT_TYPES = {
    ".html": "text/html",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}
DEFAULT_CONTENT_TYPE = "text/plain"


class BadStaticPath(ValueError):
    """Requested path cannot name a file under the static root."""


def content_type_for(path: str) -> str:
    """Get the content type from the file extension alone."""
    return CONTENT_TYPES.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


def resolve_static_path(root: Path, requested: str, max_length: int = 100) -> Path:
    """Map a request path onto a file path inside ``root``.

    Raises ``BadStaticPath`` for empty or over-long paths, NUL bytes, and
    anything that resolves outside ``root`` (e.g. ``../etc/passwd``).
    """
    relative = requested.lstrip("/")
    if not relative or len(relative) >= max_length or "\x00" in relative:
        raise BadStaticPath(requested)

    root = root.resolve()
    candidate = (root / relative).resolve()
    if candidate != root and root not in candidate.parents:
        raise BadStaticPath(requested)
    return candidate


def read_static_file(path: Path) -> Optional[bytes]:
    """Read a file's bytes, or None when it is missing or unreadable."""
    try:
        if not path.is_file():
            return None
        return path.read_bytes()
    except OSError:
        return None
