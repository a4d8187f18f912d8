"""High-level API for orderedtree.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the ExecutionPlan machinery for the
common cases, and add helpers to build and render whole trees.
"""

import logging
from collections import deque
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    PerformanceConfig,
    TraversalConfig,
    TraversalStrategy,
)
from .core.adapter import TreeAdapter
from .core.node import TreeNode
from .errors import InvalidArgumentError
from .planning import ExecutionPlan

logger = logging.getLogger(__name__)


def traverse_tree(
    root: TreeNode,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[TreeNode], bool]] = None,
    exclude_filter: Optional[Callable[[TreeNode], bool]] = None,
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> Iterator[TreeNode]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal; depths are relative to it
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        adapter: Tree adapter (defaults to OrderedTreeAdapter)
        **kwargs: Additional config options (max_nodes, on_error, ...)

    Yields:
        Nodes that match the criteria

    Example:
        >>> for node in traverse_tree(root, strategy='bfs', max_depth=1):
        ...     print(node.value)
    """
    kwargs.update(
        strategy=strategy,
        max_depth=max_depth,
        min_depth=min_depth,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
        data_requirement=DataRequirement.FULL_NODE,
    )
    config = _build_config_from_kwargs(**kwargs)

    plan = ExecutionPlan(config, adapter)
    for node, _ in plan.execute(root):
        yield node


def collect_tree_data(
    root: TreeNode,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> Iterator[Tuple[TreeNode, Any]]:
    """Traverse tree and collect specified data.

    Args:
        root: Starting node for traversal
        data_requirement: What data to collect
        adapter: Tree adapter (defaults to OrderedTreeAdapter)
        **kwargs: Additional traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)

    Example:
        >>> for node, path in collect_tree_data(root, DataRequirement.PATH):
        ...     print(" > ".join(path))
    """
    kwargs['data_requirement'] = data_requirement
    config = _build_config_from_kwargs(**kwargs)

    plan = ExecutionPlan(config, adapter)
    yield from plan.execute(root)


def count_nodes(root: TreeNode, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Without any criteria this equals ``root.size``.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: TreeNode,
    predicate: Callable[[TreeNode], bool],
    **kwargs
) -> Iterator[TreeNode]:
    """Find nodes that match a predicate, in traversal order.

    Unlike ``TreeNode.find``, the predicate receives the node rather than
    its value, and matches come out in the traversal order (pre-order by
    default) instead of insertion order.

    Args:
        root: Starting node for traversal
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_tree_paths(root: TreeNode, **kwargs) -> Iterator[List[Any]]:
    """Get value paths from the tree root to each node.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Lists of values, root first
    """
    for _, path in collect_tree_data(root, DataRequirement.PATH, **kwargs):
        yield path


def get_leaf_nodes(root: TreeNode, **kwargs) -> Iterator[TreeNode]:
    """Get all leaf nodes under root, in traversal order."""
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(root: TreeNode, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    # Children are counted only when the traversal visited them, so depth
    # limits and filters shape the branching figures too.
    visited = set()
    parents = []

    for node, depth in collect_tree_data(
        root,
        data_requirement=DataRequirement.CUSTOM,
        custom_collector=lambda n, d: d,
        **kwargs
    ):
        stats['total_nodes'] += 1
        visited.add(id(node))
        if node is not root and not node.is_root():
            parents.append(id(node.parent))

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    edges = [parent for parent in parents if parent in visited]
    stats['internal_nodes'] = len(set(edges))
    stats['leaf_nodes'] = stats['total_nodes'] - stats['internal_nodes']
    stats['average_branching'] = (
        len(edges) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


def build_tree(spec: Union[Tuple[Any, Sequence], List]) -> TreeNode:
    """Build a tree from a nested ``(value, [children...])`` structure.

    Each child is either another ``(value, [children...])`` pair or a bare
    value for a leaf. Children are added in the order given, level by
    level, so the result's subtree indexes follow a breadth-first order.

    Args:
        spec: ``(root_value, children)`` pair

    Returns:
        The root of the new tree

    Raises:
        InvalidArgumentError: If any value is None

    Example:
        >>> root = build_tree(("R", ["A", ("B", ["B1"])]))
        >>> [n.value for n in root]
        ['R', 'A', 'B', 'B1']
    """
    value, children = _split_spec(spec)
    root = TreeNode(value)

    pending = deque([(root, children)])
    while pending:
        parent, child_specs = pending.popleft()
        for child_spec in child_specs:
            child_value, grandchildren = _split_spec(child_spec)
            child = parent.add_child(child_value)
            if grandchildren:
                pending.append((child, grandchildren))

    logger.debug("Built tree with %d nodes", root.size)
    return root


def format_tree(root: TreeNode, indent: str = "  ") -> str:
    """Render the subtree under root as indented text, one node per line.

    Lines follow pre-order; each is indented once per level below root.

    Example:
        >>> print(format_tree(build_tree(("R", [("A", ["A1"]), "B"]))))
        R
          A
            A1
          B
    """
    lines = []
    for node, depth in collect_tree_data(
        root,
        data_requirement=DataRequirement.CUSTOM,
        custom_collector=lambda n, d: d,
    ):
        lines.append(f"{indent * depth}{node.value}")
    return "\n".join(lines)


# Helper functions

def _split_spec(spec: Any) -> Tuple[Any, Sequence]:
    if isinstance(spec, (tuple, list)) and len(spec) == 2 and isinstance(spec[1], (list, tuple)):
        return spec[0], spec[1]
    if spec is None:
        raise InvalidArgumentError("Tree values cannot be None.")
    return spec, ()


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'post_order': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig(
        depth=DepthConfig(),
        filter=FilterConfig(),
        performance=PerformanceConfig(),
    )

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if kwargs.get('max_depth') is not None:
        config.depth.max_depth = kwargs.pop('max_depth')
    kwargs.pop('max_depth', None)

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'specific_depths' in kwargs:
        config.depth.specific_depths = kwargs.pop('specific_depths')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'prune_on_exclude' in kwargs:
        config.filter.prune_on_exclude = kwargs.pop('prune_on_exclude')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    if 'max_nodes' in kwargs:
        config.performance.max_nodes = kwargs.pop('max_nodes')

    if 'on_error' in kwargs:
        config.on_error = kwargs.pop('on_error')
        config.skip_errors = config.on_error is not None

    # Remaining keys map straight onto TraversalConfig attributes
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise TypeError(f"Unknown traversal option: {key}")
        setattr(config, key, value)

    return config
