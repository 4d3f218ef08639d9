#!/usr/bin/env python3
"""Walk a directory with filestructure.

Builds the tree for a directory once, then shows the different ways of
walking it: nodes, paths, filters and the two visitation orders.

Usage:
    python examples/iters.py [directory]
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from filestructure import FileNode, FsError, get_tree_stats


def main(argv):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    target = argv[1] if len(argv) > 1 else "examples/"

    try:
        root = FileNode.from_path(target)
    except FsError as e:
        print(f"Cannot scan {target}: {e}", file=sys.stderr)
        return 1

    print("\n=== Every node (directories first) ===")
    for node, depth in root.traverse().iter_with_depth():
        marker = "[D]" if node.is_dir() else "[L]" if node.is_symlink() else "[F]"
        print(f"{'  ' * depth}{marker} {node.name}")

    print("\n=== Files only, level order, two levels deep ===")
    files = (root.traverse()
             .with_files_before_directories(True)
             .with_skip_dirs(True)
             .with_max_depth(2))
    for path in files.paths():
        print(f"  {path}")

    print("\n=== Paths seen from the anchor ===")
    for path in root.paths().with_show_full_relative_path(False):
        print(f"  {path}")

    # Each directory's own children, without a traversal
    for child in root.iter_children():
        print(f"child: {child.path}")

    print("\n=== Stats ===")
    for key, value in get_tree_stats(root).items():
        print(f"  {key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
