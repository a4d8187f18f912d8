"""Data collection strategies for orderedtree.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce values, identifiers, metadata or
paths depending on what the caller asked for.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List
from weakref import WeakKeyDictionary

from .adapter import TreeAdapter
from .node import TreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass

    def reset(self) -> None:
        """Forget state kept from a previous traversal.

        Called by ExecutionPlan at the start of every execution.
        """
        pass


class ValueCollector(DataCollector):
    """Collects the value carried by each node."""

    def collect(self, node: TreeNode, depth: int) -> Any:
        return node.value


class IdentifierCollector(DataCollector):
    """Collects only positional node identifiers."""

    def collect(self, node: TreeNode, depth: int) -> str:
        return node.identifier()


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each node."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        return node.metadata()


class FullNodeCollector(DataCollector):
    """Collects the node objects themselves."""

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class ChildCountCollector(DataCollector):
    """Collects nodes with child count information.

    Children are counted through the adapter, so an adapter that hides
    branches is reflected in the count.
    """

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        child_count = 0
        if not node.is_leaf():
            for _ in self.adapter.get_children(node):
                child_count += 1

        return {
            'id': node.identifier(),
            'value': node.value,
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0,
        }


class PathCollector(DataCollector):
    """Collects the values on the path from the root to each node.

    Paths of visited nodes are cached so a child only adds its own value to
    its parent's path. The cache holds the nodes weakly and is cleared on
    reset(), so it never outlives the trees it describes.
    """

    def __init__(self, adapter: TreeAdapter):
        super().__init__(adapter)
        self._path_cache: "WeakKeyDictionary[TreeNode, List[Any]]" = WeakKeyDictionary()

    def reset(self) -> None:
        self._path_cache.clear()

    def collect(self, node: TreeNode, depth: int) -> List[Any]:
        if node in self._path_cache:
            return list(self._path_cache[node])

        path = [node.value]
        parent = self.adapter.get_parent(node)
        if parent is not None:
            parent_path = self._path_cache.get(parent)
            if parent_path is not None:
                path = parent_path + path
            else:
                current = parent
                while current is not None:
                    path.insert(0, current.value)
                    current = self.adapter.get_parent(current)

        self._path_cache[node] = path
        return list(path)


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function."""

    def __init__(self, adapter: TreeAdapter, collect_func: Callable[[TreeNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: TreeAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.collect_func(node, depth)
