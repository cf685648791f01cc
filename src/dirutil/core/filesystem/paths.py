"""Path normalization."""

from __future__ import annotations

import os
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from dirutil.types.aliases import PathInput

_SEPARATORS: str = os.sep + (os.altsep or "")


def _from_file_uri(value: str) -> str:
    parsed = urlparse(value)
    local = url2pathname(unquote(parsed.path))
    if parsed.netloc and parsed.netloc != "localhost":
        # UNC share: file://server/share/dir
        return f"{os.sep}{os.sep}{parsed.netloc}{local}"
    return local


def normalize(path: PathInput) -> str:
    """Return the absolute form of ``path`` without trailing separators.

    ``.`` and ``..`` segments are collapsed lexically; symbolic links are not
    resolved. A filesystem root (``/``, ``C:\\``) keeps its separator.
    ``file://`` URIs are converted to local paths first.

    Args:
        path: Path or ``file://`` URI to normalize

    Returns:
        The canonical path string

    Raises:
        ValueError: If ``path`` is empty

    Examples:
        >>> normalize("/var/log/../tmp/")
        '/var/tmp'
        >>> normalize("/")
        '/'
    """
    value = os.fspath(path)
    if not value:
        raise ValueError("path must not be empty")

    if value.lower().startswith("file://"):
        value = _from_file_uri(value)

    full = os.path.abspath(value)
    drive, rest = os.path.splitdrive(full)
    stripped = rest.rstrip(_SEPARATORS)
    if not stripped:
        return drive + os.sep
    return drive + stripped
