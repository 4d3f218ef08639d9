"""Tests for the PathsIter projection."""

from pathlib import Path

import pytest

from filestructure import PathsIter
from filestructure.testing import build_config_tree, build_mixed_tree, config_tree_refs


@pytest.fixture
def root():
    return build_config_tree()


@pytest.mark.parametrize("configure", [
    lambda it: it,
    lambda it: it.with_files_before_directories(True),
    lambda it: it.with_skip_dirs(True),
    lambda it: it.with_min_depth(1).with_max_depth(2),
])
def test_paths_parallel_the_traversal(root, configure):
    nodes = list(configure(root.traverse()))
    paths = list(configure(root.traverse()).paths())

    assert len(paths) == len(nodes)
    assert paths == [node.path for node in nodes]


def test_full_paths_are_the_stored_values(root):
    refs = config_tree_refs(root)
    for node, path in zip(root.traverse(), root.paths()):
        assert path is node.path
    assert refs[5].path == Path(".config/i3/dir/innerfile1")


def test_produce_next_signals_exhaustion(root):
    paths = root.traverse().with_max_depth(0).paths()
    assert paths.produce_next() == Path(".config")
    assert paths.produce_next() is None
    assert paths.produce_next() is None


def test_show_full_relative_path_defaults_to_true(root):
    assert root.paths().show_full_relative_path is True


def test_anchor_relative_paths_from_root(root):
    """At the top of the tree both modes agree."""
    full = list(root.paths())
    relative = list(root.paths().with_show_full_relative_path(False))
    assert relative == full


def test_anchor_relative_paths_from_subtree(root):
    i3 = config_tree_refs(root)[1]
    relative = list(i3.paths().with_show_full_relative_path(False))

    assert relative == [
        Path("i3"),
        Path("i3/dir"),
        Path("i3/dir/innerfile1"),
        Path("i3/dir/innerfile2"),
        Path("i3/file1"),
        Path("i3/file2"),
        Path("i3/file3"),
    ]
    full = list(i3.paths())
    assert full[0] == Path(".config/i3")


def test_anchor_relative_paths_with_filters():
    project = build_mixed_tree()
    src = project.children()[2]
    relative = list(
        src.traverse().with_skip_dirs(True).with_files_before_directories(True)
        .paths().with_show_full_relative_path(False)
    )
    assert relative == [
        Path("src/main.py"),
        Path("src/current"),
        Path("src/pkg/util.py"),
    ]


def test_with_show_full_relative_path_returns_copy(root):
    base = root.paths()
    relative = base.with_show_full_relative_path(False)

    assert isinstance(relative, PathsIter)
    assert relative is not base
    assert base.show_full_relative_path is True
    assert relative.files.options == base.files.options
    assert len(list(base)) == len(list(relative)) == 10
