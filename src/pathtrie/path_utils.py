"""Path segmentation utilities."""

from __future__ import annotations

import re

from pathtrie.config import models

_SEPARATOR_RUN = re.compile(r"/+")


def normalize_separators(path: str) -> str:
    """Produce the canonical separator form for a path.

    Canonical form:
    - POSIX separators (backslashes converted to forward slashes)
    - Runs of separators collapsed to one
    - A single leading and a single trailing separator stripped

    Unlike ``pathlib``, ``.`` and ``..`` are kept as ordinary segments.
    """
    posix_path = path.replace("\\", "/")
    collapsed = _SEPARATOR_RUN.sub("/", posix_path)
    return collapsed.removeprefix("/").removesuffix("/")


def is_special_token(path: str, marker: str = models.DEFAULT_MARKER) -> bool:
    """Return True if path is wrapped by marker (e.g. ``$home$``)."""
    return path.startswith(marker) and path.endswith(marker)


def split_path(path: str, marker: str = models.DEFAULT_MARKER) -> tuple[str, ...]:
    """Split a path into the segments used as trie keys.

    A special-token path is returned whole as a single segment. Anything else is
    normalized and split on ``/``; a path that normalizes to empty yields ``()``,
    which addresses the trie root.

    Example:
        >>> split_path("/a//b/")
        ('a', 'b')
        >>> split_path("\\\\a\\\\b\\\\")
        ('a', 'b')
        >>> split_path("$home$")
        ('$home$',)
    """
    if is_special_token(path, marker):
        return (path,)

    normalized = normalize_separators(path)
    if not normalized:
        return ()
    return tuple(normalized.split("/"))
