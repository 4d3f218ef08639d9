"""Core abstractions for filestructure.

This module contains the tree node model and the two lazy iterators that
walk it.
"""

from .node import FileNode, FileKind, FileType, Regular, Symlink, Directory, file_kind
from .traverser import FilesIter, TraversalStartedError
from .collector import PathsIter

__all__ = [
    "FileNode",
    "FileKind",
    "FileType",
    "Regular",
    "Symlink",
    "Directory",
    "file_kind",
    "FilesIter",
    "TraversalStartedError",
    "PathsIter",
]
