"""Test fixtures for filestructure consumers.

These fixtures build small in-memory trees with a known shape so test suites
can assert exact traversal orders without touching the filesystem.
"""

from pathlib import Path
from typing import List

from ..core.node import Directory, FileNode, Regular, Symlink


def build_config_tree() -> FileNode:
    """Build the canonical ``.config`` tree.

    Structure:
    .config/
    ├── i3/
    │   ├── file1
    │   ├── file2
    │   ├── dir/
    │   │   ├── innerfile1
    │   │   └── innerfile2
    │   └── file3
    ├── outerfile1
    └── outerfile2
    """
    return FileNode.new(".config", Directory([
        FileNode.new("i3", Directory([
            FileNode.new("file1", Regular()),
            FileNode.new("file2", Regular()),
            FileNode.new("dir", Directory([
                FileNode.new("innerfile1", Regular()),
                FileNode.new("innerfile2", Regular()),
            ])),
            FileNode.new("file3", Regular()),
        ])),
        FileNode.new("outerfile1", Regular()),
        FileNode.new("outerfile2", Regular()),
    ]))


def config_tree_refs(root: FileNode) -> List[FileNode]:
    """Return the nodes of build_config_tree() in line order, top to bottom.

    Index: 0 .config, 1 i3, 2 file1, 3 file2, 4 dir, 5 innerfile1,
    6 innerfile2, 7 file3, 8 outerfile1, 9 outerfile2
    """
    def c(node: FileNode, index: int) -> FileNode:
        return node.children()[index]

    i3 = c(root, 0)
    inner = c(i3, 2)
    return [
        root,
        i3,
        c(i3, 0),
        c(i3, 1),
        inner,
        c(inner, 0),
        c(inner, 1),
        c(i3, 3),
        c(root, 1),
        c(root, 2),
    ]


def build_mixed_tree() -> FileNode:
    """Build a tree holding every kind, including symlinks at two depths.

    Structure:
    project/
    ├── README.md
    ├── latest -> (symlink)
    ├── src/
    │   ├── main.py
    │   ├── current -> (symlink)
    │   └── pkg/
    │       └── util.py
    └── docs/
        └── index.md
    """
    return FileNode.new("project", Directory([
        FileNode.new("README.md", Regular()),
        FileNode.new("latest", Symlink()),
        FileNode.new("src", Directory([
            FileNode.new("main.py", Regular()),
            FileNode.new("current", Symlink()),
            FileNode.new("pkg", Directory([
                FileNode.new("util.py", Regular()),
            ])),
        ])),
        FileNode.new("docs", Directory([
            FileNode.new("index.md", Regular()),
        ])),
    ]))


def build_wide_tree(width: int, depth: int) -> FileNode:
    """Build a synthetic tree: each directory holds ``width`` files and
    ``width`` subdirectories, down to ``depth`` levels of directories.

    Paths are assigned directly, so building very large trees stays linear.
    """
    def make_dir(name: str, path: Path, level: int) -> FileNode:
        children = [
            FileNode(f"f{i}", path / f"f{i}", Regular()) for i in range(width)
        ]
        if level < depth:
            children.extend(
                make_dir(f"d{i}", path / f"d{i}", level + 1) for i in range(width)
            )
        return FileNode(name, path, Directory(children))

    return make_dir("root", Path("root"), 1)
