"""Configuration system for orderedtree traversals.

This module defines how users specify their traversal requirements:
which order to walk in, which nodes to keep, what data to collect and
how errors raised by filters or collectors are treated.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Set


class DataRequirement(Enum):
    """Specifies what data is collected from each node."""
    VALUE = "value"                     # The node's value
    IDENTIFIER_ONLY = "identifier"      # Positional identifier
    METADATA = "metadata"               # node.metadata() dict
    CHILDREN_COUNT = "children_count"   # Number of immediate children
    FULL_NODE = "full"                  # The node object
    PATH = "path"                       # Values from the root down
    CUSTOM = "custom"                   # User-defined collector


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level
    CUSTOM = "custom"               # User-defined traverser


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    # Don't traverse below nodes that fail the filters
    prune_on_exclude: bool = False

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return bool(self.include_filter(node))

        return True

    def should_explore_children(self, node) -> bool:
        """Check if children of a node should be explored.

        Args:
            node: Node to check

        Returns:
            True if children should be explored
        """
        if not self.prune_on_exclude:
            return True
        return self.should_include(node)


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None            # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if self.specific_depths is not None:
            return depth in self.specific_depths

        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False

        return True

    def deepest_depth(self) -> Optional[int]:
        """Deepest depth a traversal has to reach (None = unlimited).

        With specific_depths set, nothing below the largest of them is
        explored.
        """
        if self.specific_depths:
            deepest = max(self.specific_depths)
            if self.max_depth is not None:
                return min(deepest, self.max_depth)
            return deepest
        return self.max_depth


@dataclass
class PerformanceConfig:
    """Limits applied while a traversal runs."""

    max_nodes: Optional[int] = None  # Stop after this many nodes

    def check_node_limit(self, node_count: int) -> bool:
        """Check if node limit exceeded.

        Args:
            node_count: Number of nodes processed

        Returns:
            True if within limits or no limit set
        """
        if self.max_nodes is None:
            return True
        return node_count <= self.max_nodes


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The ExecutionPlan validates this configuration and turns it into a
    traverser and a collector.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    custom_traverser: Optional[Any] = None

    depth: DepthConfig = field(default_factory=DepthConfig)

    filter: FilterConfig = field(default_factory=FilterConfig)

    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None

    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    # Error handling
    on_error: Optional[Callable[[Any, Exception], None]] = None
    skip_errors: bool = False  # Continue on errors vs fail fast

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for looking at the top of a tree only.

        Args:
            max_depth: How deep to scan (default 1 = immediate children only)

        Returns:
            TraversalConfig for shallow scanning
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    @classmethod
    def deep_scan(cls, data_requirement: DataRequirement = DataRequirement.METADATA) -> 'TraversalConfig':
        """Create config for bottom-up processing of a whole tree.

        Args:
            data_requirement: What data to collect

        Returns:
            TraversalConfig for deep scanning
        """
        return cls(
            strategy=TraversalStrategy.DEPTH_FIRST_POST,
            data_requirements=data_requirement,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.performance.max_nodes is not None and self.performance.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
