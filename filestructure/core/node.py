"""FileNode abstraction for filestructure.

A FileNode is a plain, immutable data container: a name, a precomputed path
and a file type. Only directories carry a payload (their ordered children).
Navigation logic lives in the traversers, which read the tree but never
change it.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple, Union

if TYPE_CHECKING:
    from .collector import PathsIter
    from .traverser import FilesIter


class FileKind(Enum):
    """The closed set of entry kinds a tree can hold."""
    REGULAR = "regular"
    SYMLINK = "symlink"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Regular:
    """A regular file. Carries no payload."""


@dataclass(frozen=True)
class Symlink:
    """A symbolic link that was not followed. Carries no payload."""


@dataclass(frozen=True)
class Directory:
    """A directory owning an ordered sequence of child nodes.

    Child order is the scan order and is preserved by every traversal.
    Any iterable is accepted and frozen into a tuple.
    """
    children: Tuple['FileNode', ...] = ()

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, 'children', tuple(self.children))


FileType = Union[Regular, Symlink, Directory]


def file_kind(file_type: FileType) -> FileKind:
    """Map a file type value to its kind.

    Raises:
        TypeError: If file_type is not one of Regular, Symlink, Directory
    """
    if isinstance(file_type, Directory):
        return FileKind.DIRECTORY
    if isinstance(file_type, Regular):
        return FileKind.REGULAR
    if isinstance(file_type, Symlink):
        return FileKind.SYMLINK
    raise TypeError(f"Unknown file type: {file_type!r}")


@dataclass(frozen=True, eq=False)
class FileNode:
    """One entry of an in-memory file tree.

    Nodes are frozen and directory children are tuples, so a tree cannot be
    modified once built. Any number of traversers may read the same tree at
    the same time. Equality and hashing are by identity: two distinct nodes
    with the same path are different entries.

    Attributes:
        name: The entry's own name, without separators
        path: Full path from the anchor the tree was built from
        file_type: Regular(), Symlink() or Directory(children)
        extra: Optional user payload attached to this node
    """

    name: str
    path: Path
    file_type: FileType
    extra: Any = field(default=None, compare=False)

    def __post_init__(self):
        # Fails early on anything outside the closed kind set
        file_kind(self.file_type)
        if not isinstance(self.path, Path):
            object.__setattr__(self, 'path', Path(self.path))

    @classmethod
    def new(cls, name: str, file_type: FileType, extra: Any = None) -> 'FileNode':
        """Build a node anchored at ``Path(name)``.

        Children built separately (each anchored at its own name) are
        re-anchored under this node, so paths always match the chain of
        names from the top of the tree.

        Example:
            >>> root = FileNode.new("docs", Directory([
            ...     FileNode.new("readme.md", Regular()),
            ... ]))
            >>> root.children()[0].path
            PosixPath('docs/readme.md')
        """
        return cls(name, Path(name), file_type, extra)._anchored_at(Path(name))

    def _anchored_at(self, path: Path) -> 'FileNode':
        # Post-order rebuild on an explicit stack of
        # (node, new path, rebuilt children), so depth is not bounded by
        # the interpreter's recursion limit.
        stack: List[Tuple['FileNode', Path, List['FileNode']]] = [(self, path, [])]
        while True:
            node, target, rebuilt = stack[-1]
            children = node.children()
            if children is not None and len(rebuilt) < len(children):
                child = children[len(rebuilt)]
                stack.append((child, target / child.name, []))
                continue

            stack.pop()
            file_type = Directory(rebuilt) if children is not None else node.file_type
            anchored = FileNode(node.name, target, file_type, node.extra)
            if not stack:
                return anchored
            stack[-1][2].append(anchored)

    @classmethod
    def from_path(cls, path: Union[str, Path], recursive: bool = True,
                  follow_symlinks: bool = False) -> 'FileNode':
        """Scan a real directory into a tree.

        See filestructure.adapters.filesystem.build_tree.
        """
        from ..adapters.filesystem import build_tree
        return build_tree(path, recursive=recursive, follow_symlinks=follow_symlinks)

    @property
    def kind(self) -> FileKind:
        return file_kind(self.file_type)

    def is_dir(self) -> bool:
        return self.kind is FileKind.DIRECTORY

    def is_regular(self) -> bool:
        return self.kind is FileKind.REGULAR

    def is_symlink(self) -> bool:
        return self.kind is FileKind.SYMLINK

    def children(self) -> Optional[Tuple['FileNode', ...]]:
        """Return the ordered children of a directory, None for other kinds."""
        if isinstance(self.file_type, Directory):
            return self.file_type.children
        return None

    def iter_children(self) -> Iterable['FileNode']:
        return self.children() or ()

    def traverse(self) -> 'FilesIter':
        """Start a default-configured traversal anchored at this node."""
        from .traverser import FilesIter
        return FilesIter(self)

    def paths(self) -> 'PathsIter':
        """Shorthand for ``self.traverse().paths()``."""
        return self.traverse().paths()

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"FileNode(path={str(self.path)!r}, kind={self.kind.value})"
