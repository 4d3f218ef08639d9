"""Testing utilities for filestructure consumers."""

from .fixtures import build_config_tree, build_mixed_tree, build_wide_tree, config_tree_refs

__all__ = ["build_config_tree", "build_mixed_tree", "build_wide_tree", "config_tree_refs"]
