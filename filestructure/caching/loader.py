"""
Caching loader for filesystem trees.

Scanning a large directory is the expensive part of working with
filestructure; traversing the resulting tree is cheap. Since built trees are
immutable they can be shared, so this loader keeps recently built trees in a
TTL cache and hands the same tree to every caller until it expires.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from cachetools import TTLCache

from ..adapters.filesystem import build_tree
from ..core.node import FileNode

logger = logging.getLogger(__name__)


class CachingTreeLoader:
    """
    Optional caching layer in front of build_tree.

    Example:
        loader = CachingTreeLoader(max_size=64, ttl=60.0)

        root = loader.load("~/.config")
        for path in root.paths():
            print(path)

        # Second call within the TTL returns the very same tree
        assert loader.load("~/.config") is root
    """

    def __init__(self, max_size: int = 128, ttl: float = 300.0):
        """
        Initialize the loader.

        Args:
            max_size: Maximum number of trees kept in the cache
            ttl: Time-to-live for cached trees in seconds
        """
        self._cache = TTLCache(maxsize=max_size, ttl=ttl)

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    def load(self, path: Union[str, Path], recursive: bool = True,
             follow_symlinks: bool = False) -> FileNode:
        """
        Return the tree for path, building it on a cache miss.

        Failures raised by build_tree (FsError subclasses) propagate and are
        never cached.
        """
        cache_key = self._get_cache_key(path, recursive, follow_symlinks)

        cached = self._cache.get(cache_key)
        if cached is not None:
            self.cache_hits += 1
            logger.debug("Tree cache hit for %s", cache_key[0])
            return cached

        self.cache_misses += 1
        tree = build_tree(os.path.expanduser(str(path)), recursive=recursive,
                          follow_symlinks=follow_symlinks)
        self._cache[cache_key] = tree
        return tree

    def invalidate(self, path: Optional[Union[str, Path]] = None) -> int:
        """
        Drop cached trees.

        Args:
            path: Drop only trees built from this path (any options).
                None drops everything.

        Returns:
            Number of entries removed
        """
        if path is None:
            removed = len(self._cache)
            self._cache.clear()
            return removed

        target = self._normalize(path)
        stale = [key for key in self._cache.keys() if key[0] == target]
        for key in stale:
            del self._cache[key]
        return len(stale)

    def get_stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        total = self.cache_hits + self.cache_misses
        return {
            'cache_size': len(self),
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses,
            'hit_rate': self.cache_hits / total if total else 0.0,
        }

    @staticmethod
    def _normalize(path: Union[str, Path]) -> str:
        return os.path.realpath(os.path.expanduser(str(path)))

    def _get_cache_key(self, path: Union[str, Path], recursive: bool,
                       follow_symlinks: bool) -> Tuple[Any, ...]:
        # The stored paths of a tree depend on the spelling of the anchor,
        # so the spelling is part of the key next to the resolved location
        return (self._normalize(path), str(path), recursive, follow_symlinks)

    def __len__(self) -> int:
        self._cache.expire()
        return len(self._cache)
