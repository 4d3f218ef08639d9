"""Configuration system for filestructure traversals.

This module defines how users specify which nodes a traversal emits and in
which order. Options are immutable: every change produces a new value, so an
options object can be shared freely between traversers.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional


class TraversalOrder(Enum):
    """How the work list is drained.

    DIRECTORIES_FIRST pops directories from the back of the work list while
    any remain there, giving a directory-prioritized depth-first walk.
    FILES_BEFORE_DIRECTORIES always pops from the front, giving a level-order
    walk where every file of a level comes before its nested directories.
    """
    DIRECTORIES_FIRST = "directories_first"
    FILES_BEFORE_DIRECTORIES = "files_before_directories"


@dataclass(frozen=True)
class TraversalOptions:
    """Emission filters and ordering for a single traversal.

    Filters only hide nodes from the output. They never stop the traversal
    from expanding a directory, so descendants of a hidden directory are
    still visited.
    """

    # Ordering
    order: TraversalOrder = TraversalOrder.DIRECTORIES_FIRST

    # Kind filters
    skip_dirs: bool = False
    skip_regular_files: bool = False
    skip_symlinks: bool = False

    # Depth control (inclusive on both ends, None = unbounded)
    min_depth: int = 0
    max_depth: Optional[int] = None

    @property
    def files_before_directories(self) -> bool:
        return self.order is TraversalOrder.FILES_BEFORE_DIRECTORIES

    def with_changes(self, **changes) -> 'TraversalOptions':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def depth_in_range(self, depth: int) -> bool:
        """Check if nodes at this depth should be emitted.

        Args:
            depth: Edge distance from the traversal anchor

        Returns:
            True if min_depth <= depth <= max_depth
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def has_empty_depth_range(self) -> bool:
        return self.max_depth is not None and self.max_depth < self.min_depth

    # Convenience constructors for common configurations

    @classmethod
    def files_only(cls) -> 'TraversalOptions':
        """Options that emit regular files and symlinks, never directories."""
        return cls(skip_dirs=True)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalOptions':
        """Options for a shallow listing.

        Args:
            max_depth: How deep to emit (default 1 = anchor and its children)
        """
        return cls(max_depth=max_depth)

    def validate(self, allow_empty_range: bool = False) -> List[str]:
        """Validate options for consistency.

        Args:
            allow_empty_range: Accept max_depth < min_depth (such options
                emit nothing, which is legal for a traversal)

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if self.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.max_depth is not None:
            if self.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.max_depth < self.min_depth and not allow_empty_range:
                errors.append("max_depth cannot be less than min_depth")

        return errors
