from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypedDict

from pygtrie import Trie

from pathtrie import path_utils
from pathtrie.config import models

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class PrefixExactMatch(TypedDict):
    """Result of a combined prefix/exact lookup."""

    starts_with: bool
    exact_match: bool


class PathTrie:
    """In-memory index of paths supporting exact and prefix membership queries.

    Paths are split into segments (see ``path_utils.split_path``) and stored in a
    trie keyed by segment tuples. A node is terminal when its path was inserted
    exactly; it may also have children when deeper paths were inserted below it.

    Not thread-safe: callers must serialize ``insert``/``clear`` against other calls.

    Example:
        >>> trie = PathTrie()
        >>> trie.insert("/project/data/raw")
        >>> trie.contains("project\\\\data\\\\raw")
        True
        >>> trie.has_prefix("/project/data/")
        True
        >>> trie.contains("/project/data")
        False
    """

    def __init__(self, config: models.SegmentationConfig | None = None) -> None:
        self._config = config if config is not None else models.SegmentationConfig()
        self._root: Trie[bool] = Trie()

    @property
    def config(self) -> models.SegmentationConfig:
        return self._config

    def segments(self, path: str) -> tuple[str, ...]:
        """Return the trie key for path under this trie's segmentation config."""
        return path_utils.split_path(path, self._config.marker)

    def insert(self, path: str) -> None:
        """Record path; inserting an already-recorded path is a no-op."""
        self._root[self.segments(path)] = True

    def insert_many(self, paths: Iterable[str]) -> None:
        before = len(self._root)
        for path in paths:
            self.insert(path)
        logger.debug(f"Indexed {len(self._root) - before} new paths ({len(self._root)} total)")

    def contains(self, path: str) -> bool:
        """Return True only if path itself was inserted (not merely a prefix of one)."""
        return self.segments(path) in self._root

    def has_prefix(self, path: str) -> bool:
        """Return True if path was inserted or is a directory-ancestor of an inserted path.

        The root (any path that segments to ``()``) always exists, so it matches
        even on an empty trie.
        """
        key = self.segments(path)
        if not key:
            return True
        return bool(self._root.has_node(key))

    def is_within(self, path: str) -> bool:
        """Return True if path was inserted or lies below an inserted path."""
        return bool(self._root.shortest_prefix(self.segments(path)))

    def check_prefix_and_exact_match(self, prefix: str, exact: str) -> PrefixExactMatch:
        """Answer ``has_prefix(prefix)`` and ``contains(exact)`` in one call."""
        return PrefixExactMatch(
            starts_with=self.has_prefix(prefix),
            exact_match=self.contains(exact),
        )

    def clear(self) -> None:
        """Discard every recorded path, leaving an empty root."""
        discarded = len(self._root)
        self._root = Trie()
        logger.debug(f"Cleared path trie ({discarded} paths discarded)")

    def paths(self) -> Iterator[str]:
        """Iterate recorded paths in canonical ``/``-joined form (root is ``""``).

        A multi-segment path whose join would read as a special token gets a
        leading ``/`` so that it segments back to the same key.
        """
        for key in self._root.keys():
            joined = "/".join(key)
            if len(key) > 1 and path_utils.is_special_token(joined, self._config.marker):
                joined = "/" + joined
            yield joined

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.contains(path)

    def __iter__(self) -> Iterator[str]:
        return self.paths()

    def __len__(self) -> int:
        return len(self._root)

    def __bool__(self) -> bool:
        return bool(self._root)

    def __repr__(self) -> str:
        return f"PathTrie(paths={len(self)}, marker={self._config.marker!r})"


def build_path_trie(
    paths: Iterable[str], config: models.SegmentationConfig | None = None
) -> PathTrie:
    """Build a trie populated with paths.

    Args:
        paths: Paths to record; duplicates and separator variants collapse.
        config: Segmentation config; defaults to ``$`` as the special-token marker.

    Returns:
        A new PathTrie owned by the caller.

    Example:
        >>> trie = build_path_trie(["/srv/www", "$home$"])
        >>> trie.check_prefix_and_exact_match("/srv", "$home$")
        {'starts_with': True, 'exact_match': True}
    """
    trie = PathTrie(config)
    trie.insert_many(paths)
    return trie
