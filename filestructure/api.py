"""High-level API for filestructure.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the builder-style FilesIter API for ease of
use in simple cases.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional

from .config import TraversalOptions, TraversalOrder
from .core.collector import PathsIter
from .core.node import FileKind, FileNode
from .core.traverser import FilesIter


def walk_files(
    root: FileNode,
    files_before_directories: bool = False,
    skip_dirs: bool = False,
    skip_regular_files: bool = False,
    skip_symlinks: bool = False,
    min_depth: int = 0,
    max_depth: Optional[int] = None,
) -> FilesIter:
    """Simple interface for tree traversal.

    Args:
        root: Anchor node (depth 0)
        files_before_directories: Level-order walk instead of the default
            directory-prioritized depth-first walk
        skip_dirs: Hide directories
        skip_regular_files: Hide regular files
        skip_symlinks: Hide symlinks
        min_depth: Hide nodes shallower than this
        max_depth: Hide nodes deeper than this (None = unlimited)

    Returns:
        A lazy FilesIter yielding the matching nodes

    Example:
        >>> root = FileNode.from_path("/home/user/project")
        >>> for node in walk_files(root, skip_dirs=True, max_depth=2):
        ...     print(node.path)
    """
    order = (TraversalOrder.FILES_BEFORE_DIRECTORIES if files_before_directories
             else TraversalOrder.DIRECTORIES_FIRST)
    options = TraversalOptions(
        order=order,
        skip_dirs=skip_dirs,
        skip_regular_files=skip_regular_files,
        skip_symlinks=skip_symlinks,
        min_depth=min_depth,
        max_depth=max_depth,
    )
    return root.traverse().with_options(options)


def walk_paths(
    root: FileNode,
    show_full_relative_path: bool = True,
    **kwargs
) -> PathsIter:
    """Traverse the tree and yield paths instead of nodes.

    Args:
        root: Anchor node
        show_full_relative_path: Yield stored paths (True) or paths seen
            from the anchor (False)
        **kwargs: Traversal options (see walk_files)
    """
    return PathsIter(walk_files(root, **kwargs),
                     show_full_relative_path=show_full_relative_path)


def count_nodes(root: FileNode, **kwargs) -> int:
    """Count nodes that match criteria.

    Args:
        root: Anchor node
        **kwargs: Traversal options (see walk_files)

    Returns:
        Number of emitted nodes
    """
    return sum(1 for _ in walk_files(root, **kwargs))


def find_nodes(
    root: FileNode,
    predicate: Callable[[FileNode], bool],
    **kwargs
) -> Iterator[FileNode]:
    """Find nodes matching a predicate.

    Example:
        >>> markdown = list(find_nodes(root, lambda n: n.name.endswith(".md")))
    """
    for node in walk_files(root, **kwargs):
        if predicate(node):
            yield node


def find_by_path(root: FileNode, path: Path) -> Optional[FileNode]:
    """Return the node whose stored path equals path, or None."""
    target = Path(path)
    return next(find_nodes(root, lambda node: node.path == target), None)


def get_tree_stats(root: FileNode) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, directories, regular_files, symlinks
        and max_depth (deepest edge distance from root)
    """
    counts = {kind: 0 for kind in FileKind}
    deepest = 0

    for node, depth in root.traverse().iter_with_depth():
        counts[node.kind] += 1
        deepest = max(deepest, depth)

    return {
        'total_nodes': sum(counts.values()),
        'directories': counts[FileKind.DIRECTORY],
        'regular_files': counts[FileKind.REGULAR],
        'symlinks': counts[FileKind.SYMLINK],
        'max_depth': deepest,
    }
