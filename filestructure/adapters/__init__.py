"""Tree builders for real filesystems.

Adapters turn an on-disk directory into an immutable FileNode tree that the
traversers can walk without further I/O.
"""

from .filesystem import (
    build_tree,
    FsError,
    NotFoundError,
    PermissionDeniedError,
    OtherIoError,
)

__all__ = [
    "build_tree",
    "FsError",
    "NotFoundError",
    "PermissionDeniedError",
    "OtherIoError",
]
