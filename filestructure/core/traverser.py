"""Lazy tree traversal for filestructure.

FilesIter walks an immutable FileNode tree with a single double-ended work
list. Directories are pushed at the back and every other entry at the front,
so the same structure behaves like a stack for directories and a queue for
files. Which end is popped decides the visitation order.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, Optional, Tuple

from ..config import TraversalOptions, TraversalOrder
from .node import FileKind, FileNode

if TYPE_CHECKING:
    from .collector import PathsIter

logger = logging.getLogger(__name__)


class TraversalStartedError(RuntimeError):
    """Raised when a traverser is reconfigured after it has produced output."""
    pass


class FilesIter:
    """Lazy iterator over the nodes of a FileNode tree.

    The default order is a directory-prioritized depth-first walk: nested
    directories are drained from the back of the work list before the files
    waiting at the front are released. With files_before_directories the
    work list is always popped from the front, which gives a level-order
    walk where every file of a level precedes its nested directories.
    Sibling directories were pushed last-to-first, so in that mode they are
    reached in reverse scan order.

    Filters (kind and depth) only hide nodes. Every directory is expanded
    when it is popped, hidden or not, so no subtree is ever pruned.

    Configuration is builder-style: each ``with_*`` call returns a new
    FilesIter holding a copy of the unread work list and the updated
    options; the receiver is left untouched. Reconfiguring once iteration
    has started raises TraversalStartedError.

    Example:
        >>> for node in root.traverse().with_skip_dirs(True).with_max_depth(2):
        ...     print(node.path)
    """

    def __init__(self, root: FileNode, options: Optional[TraversalOptions] = None):
        """Initialize a traversal anchored at root (depth 0).

        Args:
            root: Anchor node of the traversal
            options: Emission filters and order (defaults to TraversalOptions())
        """
        self.root = root
        self.options = options if options is not None else TraversalOptions()
        self._work: Deque[Tuple[FileNode, int]] = deque([(root, 0)])
        self._started = False

    # -- configuration --

    def _with(self, options: TraversalOptions) -> 'FilesIter':
        if self._started:
            raise TraversalStartedError(
                "Cannot reconfigure a traversal after iteration has started"
            )
        clone = FilesIter(self.root, options)
        clone._work = deque(self._work)
        return clone

    def _reconfigured(self, **changes) -> 'FilesIter':
        return self.with_options(self.options.with_changes(**changes))

    def with_options(self, options: TraversalOptions) -> 'FilesIter':
        """Replace every option at once.

        An empty depth range (max_depth < min_depth) is accepted and simply
        emits nothing.

        Raises:
            ValueError: If the options fail validation (e.g. a negative depth)
        """
        errors = options.validate(allow_empty_range=True)
        if errors:
            raise ValueError(f"Invalid traversal options: {'; '.join(errors)}")
        return self._with(options)

    def with_order(self, order: TraversalOrder) -> 'FilesIter':
        if not isinstance(order, TraversalOrder):
            raise TypeError(f"order must be a TraversalOrder, got {order!r}")
        return self._reconfigured(order=order)

    def with_files_before_directories(self, enabled: bool) -> 'FilesIter':
        order = (TraversalOrder.FILES_BEFORE_DIRECTORIES if enabled
                 else TraversalOrder.DIRECTORIES_FIRST)
        return self._reconfigured(order=order)

    def with_skip_dirs(self, enabled: bool) -> 'FilesIter':
        return self._reconfigured(skip_dirs=bool(enabled))

    def with_skip_regular_files(self, enabled: bool) -> 'FilesIter':
        return self._reconfigured(skip_regular_files=bool(enabled))

    def with_skip_symlinks(self, enabled: bool) -> 'FilesIter':
        return self._reconfigured(skip_symlinks=bool(enabled))

    def with_min_depth(self, min_depth: int) -> 'FilesIter':
        """Hide nodes shallower than min_depth (inclusive bound).

        Raises:
            ValueError: If min_depth is negative
        """
        return self._reconfigured(min_depth=min_depth)

    def with_max_depth(self, max_depth: Optional[int]) -> 'FilesIter':
        """Hide nodes deeper than max_depth (inclusive bound, None = unbounded).

        Raises:
            ValueError: If max_depth is negative
        """
        return self._reconfigured(max_depth=max_depth)

    def paths(self) -> 'PathsIter':
        """Project this traversal onto node paths."""
        from .collector import PathsIter
        return PathsIter(self)

    # -- iteration --

    def next_with_depth(self) -> Optional[Tuple[FileNode, int]]:
        """Produce the next emitted node together with its depth.

        Returns:
            (node, depth) tuple, or None once the traversal is exhausted
        """
        if not self._started:
            self._started = True
            if self.options.has_empty_depth_range():
                logger.debug(
                    "Depth range [%d, %s] is empty, traversal of %s emits nothing",
                    self.options.min_depth, self.options.max_depth, self.root.path,
                )

        work = self._work
        files_first = self.options.files_before_directories

        while work:
            # Directories sit at the back. Drain them first unless the
            # level-order mode asks for the front every time.
            if files_first or not work[-1][0].is_dir():
                node, depth = work.popleft()
            else:
                node, depth = work.pop()

            self._expand(node, depth)

            if not self.options.depth_in_range(depth):
                continue
            if self._is_hidden(node):
                continue
            return node, depth

        return None

    def produce_next(self) -> Optional[FileNode]:
        """Produce the next emitted node, or None once exhausted."""
        entry = self.next_with_depth()
        if entry is None:
            return None
        return entry[0]

    def iter_with_depth(self) -> Iterator[Tuple[FileNode, int]]:
        """Yield (node, depth) tuples where depth is relative to the anchor."""
        while True:
            entry = self.next_with_depth()
            if entry is None:
                return
            yield entry

    def _expand(self, node: FileNode, depth: int) -> None:
        children = node.children()
        if not children:
            return
        # Reversed, so the first child ends up nearest to its end of the deque
        for child in reversed(children):
            if child.is_dir():
                self._work.append((child, depth + 1))
            else:
                self._work.appendleft((child, depth + 1))

    def _is_hidden(self, node: FileNode) -> bool:
        kind = node.kind
        if kind is FileKind.DIRECTORY:
            return self.options.skip_dirs
        if kind is FileKind.REGULAR:
            return self.options.skip_regular_files
        if kind is FileKind.SYMLINK:
            return self.options.skip_symlinks
        raise TypeError(f"Unhandled file kind: {kind!r}")

    @property
    def started(self) -> bool:
        return self._started

    def pending(self) -> int:
        """Number of (node, depth) entries still waiting in the work list."""
        return len(self._work)

    def __iter__(self) -> 'FilesIter':
        return self

    def __next__(self) -> FileNode:
        entry = self.next_with_depth()
        if entry is None:
            raise StopIteration
        return entry[0]

    def __repr__(self) -> str:
        return (f"FilesIter(root={str(self.root.path)!r}, "
                f"options={self.options!r}, pending={len(self._work)})")
