"""TreeNode - the ordered tree container.

A TreeNode carries one value and an ordered list of children. Besides the
forward child links, every node keeps two things that make navigation and
search cheap:

- a back-reference to its parent, used to walk up to the root, and
- a subtree index: the node itself followed by every descendant in the order
  the descendants were added to the tree.

Nodes are only ever created, never removed or moved, so both of these stay
valid for the lifetime of the tree.
"""

from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple

from ..errors import InvalidArgumentError, NoParentError
from .iterator import PreOrderIterator, T


class TreeNode(Generic[T]):
    """A node in an ordered rooted tree.

    Constructing a TreeNode directly creates a new tree whose root carries
    ``value``. Further nodes are created with :meth:`add_child`.

    Example:
        >>> root = TreeNode("BALANCE")
        >>> assets = root.add_child("NET WORTH").add_child("ASSETS")
        >>> assets.level
        2
        >>> assets.root is root
        True
        >>> [n.value for n in root]
        ['BALANCE', 'NET WORTH', 'ASSETS']
    """

    def __init__(self, value: T):
        """Create a new root node.

        Args:
            value: Value carried by the node. Must not be None.

        Raises:
            InvalidArgumentError: If value is None
        """
        if value is None:
            raise InvalidArgumentError("Parameter 'value' cannot be None.")
        self._value = value
        self._children: List['TreeNode[T]'] = []
        self._parent: Optional['TreeNode[T]'] = None
        self._subtree_index: List['TreeNode[T]'] = [self]
        self._identifier = "/"
        # Tuple snapshots handed out by the properties; None once stale
        self._children_snapshot: Optional[Tuple['TreeNode[T]', ...]] = ()
        self._index_snapshot: Optional[Tuple['TreeNode[T]', ...]] = None

    def add_child(self, value: T) -> 'TreeNode[T]':
        """Append a new child carrying ``value`` to this node.

        The child is registered in the subtree index of this node and of
        every ancestor up to the root.

        Args:
            value: Value for the new child. Must not be None.

        Returns:
            The newly created child node

        Raises:
            InvalidArgumentError: If value is None (the tree is left untouched)
        """
        if value is None:
            raise InvalidArgumentError("Parameter 'value' cannot be None.")
        child = TreeNode(value)
        child._parent = self
        child._identifier = f"{self._identifier.rstrip('/')}/{len(self._children)}"
        self._children.append(child)
        self._children_snapshot = None
        self._register_descendant(child)
        return child

    def _register_descendant(self, node: 'TreeNode[T]') -> None:
        # Walk up from self so every ancestor sees the node appended last.
        current: Optional[TreeNode[T]] = self
        while current is not None:
            current._subtree_index.append(node)
            current._index_snapshot = None
            current = current._parent

    # Navigation

    @property
    def value(self) -> T:
        """The value carried by this node."""
        return self._value

    @property
    def children(self) -> Tuple['TreeNode[T]', ...]:
        """Children of this node in insertion order.

        The tuple is rebuilt only after a child has been added, so repeated
        reads are O(1).
        """
        if self._children_snapshot is None:
            self._children_snapshot = tuple(self._children)
        return self._children_snapshot

    @property
    def parent(self) -> 'TreeNode[T]':
        """The parent of this node.

        Raises:
            NoParentError: If this node is the root
        """
        if self._parent is None:
            raise NoParentError("This is the root node.")
        return self._parent

    @property
    def root(self) -> 'TreeNode[T]':
        """The root of the tree this node belongs to."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def level(self) -> int:
        """Number of edges between the root and this node (root is 0)."""
        level = 0
        node = self
        while node._parent is not None:
            level += 1
            node = node._parent
        return level

    @property
    def size(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return len(self._subtree_index)

    @property
    def subtree_index(self) -> Tuple['TreeNode[T]', ...]:
        """This node followed by its descendants in insertion order."""
        if self._index_snapshot is None:
            self._index_snapshot = tuple(self._subtree_index)
        return self._index_snapshot

    def iter_children(self) -> Iterator['TreeNode[T]']:
        """Iterate over the live list of children without copying it."""
        return iter(self._children)

    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self._parent is None

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self._children

    def ancestors(self) -> Iterator['TreeNode[T]']:
        """Yield the parent, grandparent and so on up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def path(self) -> List[T]:
        """Values from the root down to this node."""
        values = [self._value]
        values.extend(node._value for node in self.ancestors())
        values.reverse()
        return values

    def identifier(self) -> str:
        """Return the positional identifier of this node.

        The root is ``"/"``; every other node is its parent's identifier
        followed by its index among its siblings, e.g. ``"/0/2"`` for the
        third child of the root's first child. Identifiers never change
        because children are only ever appended.
        """
        return self._identifier

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        return {
            'value': self._value,
            'identifier': self._identifier,
            'level': self.level,
            'size': self.size,
            'child_count': len(self._children),
            'is_root': self.is_root(),
            'is_leaf': self.is_leaf(),
        }

    # Search

    def find(self, predicate: Callable[[T], bool]) -> Optional['TreeNode[T]']:
        """Find the first node in this subtree whose value satisfies predicate.

        Nodes are tested in insertion order (this node first), not in
        pre-order. Iterate the node and test explicitly if the pre-order
        first match is needed.

        Args:
            predicate: Function taking a value and returning True on a match

        Returns:
            The first matching node, or None if nothing matches

        Example:
            >>> fuel = root.find(lambda value: value == "Fuel")
        """
        for node in self._subtree_index:
            if predicate(node._value):
                return node
        return None

    def find_all(self, predicate: Callable[[T], bool]) -> Iterator['TreeNode[T]']:
        """Yield every node in this subtree whose value satisfies predicate.

        Matches come out in the same insertion order :meth:`find` uses.
        """
        for node in self._subtree_index:
            if predicate(node._value):
                yield node

    # Iteration

    def iter(self) -> 'PreOrderIterator[T]':
        """Return a pre-order iterator over the subtree rooted here."""
        return PreOrderIterator(self)

    def __iter__(self) -> 'PreOrderIterator[T]':
        return PreOrderIterator(self)

    def __len__(self) -> int:
        return len(self._subtree_index)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r}, children={len(self._children)})"
