"""
Custom exceptions for lazy-deletion trees.
"""

from typing import Any


class NotFoundError(LookupError):
    """
    Raised when a lookup has no value to return.

    Covers absent keys, keys hidden by a tombstone (soft lookups) and
    min/max queries on an empty or fully tombstoned tree.
    """

    def __init__(self, key: Any = None):
        """
        Initialize not-found error.

        Args:
            key: The key that was looked up, or None for min/max queries.
        """
        self.key = key
        if key is None:
            super().__init__("No matching entry in tree")
        else:
            super().__init__(f"Key not found: {key!r}")


class TreeModifiedError(RuntimeError):
    """
    Raised when the tree is mutated while a traversal is in progress.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call {operation}() while the tree is being traversed")
