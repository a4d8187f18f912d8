"""Pre-order iteration over a TreeNode subtree.

The iterator walks the tree with an explicit stack of child cursors instead
of recursion, so it works on arbitrarily deep trees and only does work when
the next node is requested.
"""

from enum import Enum
from typing import TYPE_CHECKING, Generic, List, Sequence, TypeVar

from ..errors import IteratorExhaustedError

if TYPE_CHECKING:
    from .node import TreeNode

T = TypeVar('T')


class IteratorState(Enum):
    """Where a PreOrderIterator is in its walk."""
    PRISTINE = "pristine"       # Start node not yielded yet
    DESCENDING = "descending"   # Walking the children of yielded nodes
    EXHAUSTED = "exhausted"     # Nothing left


class _ChildCursor:
    """Position within the children list of an already yielded node.

    Holds the node's live list, so children appended before the cursor
    reaches the end are still visited.
    """

    __slots__ = ('_children', '_position')

    def __init__(self, children: Sequence['TreeNode']):
        self._children = children
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._children)

    def advance(self) -> 'TreeNode':
        child = self._children[self._position]
        self._position += 1
        return child


class PreOrderIterator(Generic[T]):
    """Lazy depth-first pre-order walk of the subtree rooted at a node.

    A node is produced before its descendants, and siblings come out in the
    order they were added. The iterator produces exactly ``start.size``
    nodes and is single-pass.

    ``has_next()`` can be called any number of times without advancing;
    only ``next()`` moves the iterator forward. Calling ``next()`` once the
    walk is over raises IteratorExhaustedError; the builtin ``next(it)``
    raises StopIteration as usual.

    Example:
        >>> it = root.iter()
        >>> while it.has_next():
        ...     print(it.next().value)
    """

    def __init__(self, start: 'TreeNode[T]'):
        """Initialize the iterator.

        Args:
            start: Node whose subtree is walked; yielded first
        """
        self._start = start
        self._stack: List[_ChildCursor] = []
        self._state = IteratorState.PRISTINE

    @property
    def state(self) -> IteratorState:
        """Current state of the walk."""
        return self._state

    def _discard_spent_cursors(self) -> None:
        # Spent cursors carry no nodes, dropping them does not consume anything
        while self._stack and not self._stack[-1].has_next():
            self._stack.pop()

    def has_next(self) -> bool:
        """Check whether another node is available without consuming it."""
        if self._state is IteratorState.PRISTINE:
            return True
        if self._state is IteratorState.EXHAUSTED:
            return False
        self._discard_spent_cursors()
        return bool(self._stack)

    def __iter__(self) -> 'PreOrderIterator[T]':
        return self

    def __next__(self) -> 'TreeNode[T]':
        try:
            return self.next()
        except IteratorExhaustedError:
            raise StopIteration from None

    def next(self) -> 'TreeNode[T]':
        """Return the next node in pre-order.

        Raises:
            IteratorExhaustedError: If every node has already been returned
        """
        if self._state is IteratorState.PRISTINE:
            self._state = IteratorState.DESCENDING
            self._stack.append(_ChildCursor(self._start._children))
            return self._start

        if self._state is IteratorState.DESCENDING:
            while self._stack:
                cursor = self._stack.pop()
                if not cursor.has_next():
                    continue
                child = cursor.advance()
                if cursor.has_next():
                    self._stack.append(cursor)
                if child._children:
                    self._stack.append(_ChildCursor(child._children))
                return child
            self._state = IteratorState.EXHAUSTED

        raise IteratorExhaustedError("No more nodes in this subtree.")
