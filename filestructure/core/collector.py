"""Path projection for filestructure traversals.

PathsIter pulls nodes from a FilesIter and re-exposes their paths, in the
same order and with the same filters as the wrapped traversal.
"""

from pathlib import Path
from typing import Iterator, Optional

from .traverser import FilesIter, TraversalStartedError


class PathsIter:
    """Lazy iterator over the paths of the nodes a FilesIter emits.

    With show_full_relative_path (the default) each item is the node's
    stored path, unchanged. Without it, each item is the path seen from the
    traversal anchor: the anchor's own name followed by the names leading
    down to the node. Traversing ``.config/i3`` then yields ``i3/file1``
    rather than ``.config/i3/file1``.
    """

    def __init__(self, files: FilesIter, show_full_relative_path: bool = True):
        self._files = files
        self.show_full_relative_path = show_full_relative_path

    def with_show_full_relative_path(self, enabled: bool) -> 'PathsIter':
        """Return a copy that yields full stored paths or anchor-relative ones.

        Raises:
            TraversalStartedError: If iteration has already started
        """
        if self._files.started:
            raise TraversalStartedError(
                "Cannot reconfigure a traversal after iteration has started"
            )
        files = self._files.with_options(self._files.options)
        return PathsIter(files, show_full_relative_path=bool(enabled))

    @property
    def files(self) -> FilesIter:
        """The wrapped traversal."""
        return self._files

    def produce_next(self) -> Optional[Path]:
        """Produce the next path, or None once the traversal is exhausted."""
        entry = self._files.next_with_depth()
        if entry is None:
            return None

        node, depth = entry
        if self.show_full_relative_path:
            return node.path
        return self._anchor_relative(node.path, depth)

    @staticmethod
    def _anchor_relative(path: Path, depth: int) -> Path:
        # The stored path ends with the names of the node and its depth
        # ancestors, the last of which is the anchor
        return Path(*path.parts[-(depth + 1):])

    def __iter__(self) -> Iterator[Path]:
        return self

    def __next__(self) -> Path:
        path = self.produce_next()
        if path is None:
            raise StopIteration
        return path

    def __repr__(self) -> str:
        return (f"PathsIter(files={self._files!r}, "
                f"show_full_relative_path={self.show_full_relative_path})")
