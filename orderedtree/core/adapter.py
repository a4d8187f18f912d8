"""TreeAdapter abstraction for orderedtree.

Traversers and collectors never touch node internals directly; they ask an
adapter how to get from a node to its children and parent. The default
OrderedTreeAdapter reads TreeNode, and a subclass can narrow or reshape what
a traversal sees (for example hiding some branches) without touching the
tree itself.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .node import TreeNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree.

    The adapter knows HOW to move around the tree, while the traversers
    decide in which ORDER nodes are visited.
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes in insertion order
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is the root
        """
        pass

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get siblings of the given node (excluding the node itself).

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding sibling nodes in insertion order
        """
        parent = self.get_parent(node)
        if parent is None:
            return
        for child in self.get_children(parent):
            if child is not node:
                yield child

    def supports_full_data(self) -> bool:
        """Check if adapter can hand out the node objects themselves.

        Returns:
            True if full node access is supported
        """
        return True

    def estimated_size(self, node: TreeNode) -> Optional[int]:
        """Estimate the number of nodes in the subtree.

        Args:
            node: Root of subtree to estimate

        Returns:
            Estimated node count or None
        """
        return None


class OrderedTreeAdapter(TreeAdapter):
    """Adapter over TreeNode trees.

    Everything is answered from the node itself: children come from the
    child list, depth from the parent links and the subtree size from the
    subtree index, so estimated_size() is exact.
    """

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        return node.iter_children()

    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        if node.is_root():
            return None
        return node.parent

    def get_depth(self, node: TreeNode) -> int:
        return node.level

    def estimated_size(self, node: TreeNode) -> Optional[int]:
        return node.size
