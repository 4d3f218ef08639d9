"""filestructure - in-memory file trees with lazy, filterable traversal.

Build a tree once, then walk it as many times as needed:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from filestructure import FileNode

    root = FileNode.from_path("examples/")
    for node in root.traverse().with_skip_dirs(True).with_max_depth(2):
        print(node.path)

    for path in root.paths():
        print(path)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Traversals never perform I/O and never modify the tree; only the builder in
filestructure.adapters touches the filesystem.
"""

import logging

__version__ = "0.1.0"

from .config import TraversalOptions, TraversalOrder
from .core import (
    FileNode,
    FileKind,
    FileType,
    Regular,
    Symlink,
    Directory,
    FilesIter,
    PathsIter,
    TraversalStartedError,
)
from .adapters import (
    build_tree,
    FsError,
    NotFoundError,
    PermissionDeniedError,
    OtherIoError,
)
from .caching import CachingTreeLoader
from .api import (
    walk_files,
    walk_paths,
    count_nodes,
    find_nodes,
    find_by_path,
    get_tree_stats,
)

# Library logging: callers decide where records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Tree model
    "FileNode",
    "FileKind",
    "FileType",
    "Regular",
    "Symlink",
    "Directory",
    # Traversal
    "FilesIter",
    "PathsIter",
    "TraversalStartedError",
    "TraversalOptions",
    "TraversalOrder",
    # Building
    "build_tree",
    "FsError",
    "NotFoundError",
    "PermissionDeniedError",
    "OtherIoError",
    "CachingTreeLoader",
    # API
    "walk_files",
    "walk_paths",
    "count_nodes",
    "find_nodes",
    "find_by_path",
    "get_tree_stats",
]
