"""Filesystem adapter for filestructure.

Builds a fully materialized FileNode tree from a real directory. This is the
only part of the package that performs I/O; traversals run over the tree it
returns and never touch the disk.
"""

import logging
import os
from pathlib import Path
from typing import FrozenSet, List, Union

from ..core.node import Directory, FileNode, Regular, Symlink

logger = logging.getLogger(__name__)


class FsError(Exception):
    """Base class for failures while building a tree from the filesystem.

    Attributes:
        path: The path whose scan failed
    """

    def __init__(self, path: Union[str, Path], message: str):
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class NotFoundError(FsError):
    """The path does not exist."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, "No such file or directory")


class PermissionDeniedError(FsError):
    """The path exists but could not be read."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, "Permission denied")


class OtherIoError(FsError):
    """Any other I/O failure. The underlying OSError is chained as __cause__."""

    def __init__(self, path: Union[str, Path], error: OSError):
        super().__init__(path, error.strerror or str(error))
        self.errno = error.errno


def _translate(error: OSError, path: Path) -> FsError:
    if isinstance(error, FileNotFoundError):
        return NotFoundError(path)
    if isinstance(error, PermissionError):
        return PermissionDeniedError(path)
    return OtherIoError(path, error)


def build_tree(path: Union[str, Path],
               recursive: bool = True,
               follow_symlinks: bool = False) -> FileNode:
    """Scan ``path`` into an immutable FileNode tree.

    Children are sorted by name so repeated scans produce the same order.
    Stored paths are ``path`` joined with each entry's name, so a relative
    anchor yields relative paths.

    Args:
        path: File or directory to scan
        recursive: Scan subdirectories too. When False, subdirectories of
            the anchor are recorded as empty directories
        follow_symlinks: Treat links as their targets. Links to directories
            are scanned like directories (a link back into the current branch
            is kept as a Symlink leaf). Broken links stay Symlink leaves

    Returns:
        The anchor FileNode

    Raises:
        NotFoundError: If path (or an entry vanishing mid-scan) does not exist
        PermissionDeniedError: If a directory cannot be read
        OtherIoError: For any other OSError
    """
    root_path = Path(path)
    name = root_path.name or str(root_path)

    builder = _TreeBuilder(recursive=recursive, follow_symlinks=follow_symlinks)
    try:
        root = builder.build(name, root_path)
    except OSError as e:
        raise _translate(e, Path(e.filename) if e.filename else root_path) from e

    logger.info("Built tree for %s: %d nodes", root_path, builder.node_count)
    return root


class _PendingDir:
    """A scanned directory whose children are still being built."""

    def __init__(self, name: str, path: Path, branch: FrozenSet[str],
                 depth: int, names: List[str]):
        self.name = name
        self.path = path
        self.branch = branch
        self.depth = depth
        self.names = names
        self.children: List[FileNode] = []


class _TreeBuilder:
    """Scanner holding the options and a node counter.

    Directories are completed on an explicit stack, so nesting depth is
    limited by the filesystem, not by the interpreter's recursion limit.
    """

    def __init__(self, recursive: bool, follow_symlinks: bool):
        self.recursive = recursive
        self.follow_symlinks = follow_symlinks
        self.node_count = 0

    def build(self, name: str, path: Path) -> FileNode:
        entry = self.visit(name, path, frozenset(), depth=0)
        if isinstance(entry, FileNode):
            return entry

        stack = [entry]
        while True:
            top = stack[-1]
            if len(top.children) < len(top.names):
                child = top.names[len(top.children)]
                entry = self.visit(child, top.path / child, top.branch, top.depth + 1)
                if isinstance(entry, FileNode):
                    top.children.append(entry)
                else:
                    stack.append(entry)
                continue

            stack.pop()
            node = FileNode(top.name, top.path, Directory(top.children))
            if not stack:
                return node
            stack[-1].children.append(node)

    def visit(self, name: str, path: Path, branch: FrozenSet[str],
              depth: int) -> Union[FileNode, _PendingDir]:
        """Classify one entry. Directories to descend into are scanned and
        returned as a _PendingDir, everything else as a finished node."""
        self.node_count += 1

        if os.path.islink(path):
            if not self.follow_symlinks or not os.path.exists(path):
                return FileNode(name, path, Symlink())
            if not os.path.isdir(path):
                return FileNode(name, path, Regular())
        elif not os.path.isdir(path):
            # Raises FileNotFoundError for missing anchors
            os.lstat(path)
            return FileNode(name, path, Regular())

        real = os.path.realpath(path)
        if real in branch:
            logger.warning("Symlink cycle at %s (points back to %s), not followed",
                           path, real)
            return FileNode(name, path, Symlink())

        if depth > 0 and not self.recursive:
            return FileNode(name, path, Directory())

        return _PendingDir(name, path, branch | {real}, depth, self._scan(path))

    def _scan(self, path: Path) -> List[str]:
        logger.debug("Scanning directory %s", path)
        with os.scandir(path) as it:
            return sorted(entry.name for entry in it)
