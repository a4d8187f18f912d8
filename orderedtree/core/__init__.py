"""Core components of orderedtree.

TreeNode and PreOrderIterator are the data structure itself; the adapter,
traverser and collector classes build the configurable traversal layer on
top of it.
"""

from .iterator import IteratorState, PreOrderIterator
from .node import TreeNode
from .adapter import TreeAdapter, OrderedTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import DataCollector

__all__ = [
    "TreeNode",
    "PreOrderIterator",
    "IteratorState",
    "TreeAdapter",
    "OrderedTreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
]
