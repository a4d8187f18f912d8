"""Exception types for orderedtree.

Every error raised by the library derives from TreeError. The core errors
also derive from the matching built-in exception so callers can catch them
the way they would catch the standard library equivalent.
"""


class TreeError(Exception):
    """Base class for all orderedtree errors."""
    pass


class InvalidArgumentError(TreeError, ValueError):
    """Raised when a required value is None."""
    pass


class NoParentError(TreeError, LookupError):
    """Raised when the parent of a root node is requested.

    Callers are expected to check ``node.is_root()`` first.
    """
    pass


class IteratorExhaustedError(TreeError, LookupError):
    """Raised by ``PreOrderIterator.next()`` past the last node.

    The ``__next__`` protocol method raises a plain StopIteration instead,
    so ``for`` loops and ``list()`` stop normally.
    """
    pass


class ConfigurationError(TreeError):
    """Raised when a traversal configuration can't be executed."""
    pass
