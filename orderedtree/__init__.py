"""orderedtree - Ordered rooted tree container.

orderedtree stores one value per node, keeps children in the order they were
added, and lets every node reach its parent and root. Any node can walk its
own subtree in pre-order or search it with a predicate:

    from orderedtree import TreeNode

    root = TreeNode("BALANCE")
    income = root.add_child("INCOME & EXPENSES").add_child("INCOME")
    income.add_child("Salary")

    [node.value for node in root]
    root.find(lambda value: value == "Salary")

The traversal helpers in ``orderedtree.api`` add breadth-first, post-order
and level-order walks, depth limits, filters and data collection on top.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeError,
    InvalidArgumentError,
    NoParentError,
    IteratorExhaustedError,
    ConfigurationError,
)
from .core.node import TreeNode
from .core.iterator import PreOrderIterator, IteratorState
from .core.adapter import TreeAdapter, OrderedTreeAdapter
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
)
from .core.collector import (
    DataCollector,
    ValueCollector,
    IdentifierCollector,
    MetadataCollector,
    FullNodeCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
    PerformanceConfig,
)
from .planning import ExecutionPlan
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
    build_tree,
    format_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    'TreeError',
    'InvalidArgumentError',
    'NoParentError',
    'IteratorExhaustedError',
    'ConfigurationError',
    # Core
    'TreeNode',
    'PreOrderIterator',
    'IteratorState',
    'TreeAdapter',
    'OrderedTreeAdapter',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'LevelOrderTraverser',
    'DataCollector',
    'ValueCollector',
    'IdentifierCollector',
    'MetadataCollector',
    'FullNodeCollector',
    'ChildCountCollector',
    'PathCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'PerformanceConfig',
    'ExecutionPlan',
    # API
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'find_nodes',
    'get_tree_paths',
    'get_leaf_nodes',
    'get_tree_stats',
    'build_tree',
    'format_tree',
]
