"""
Binary search tree with lazy (tombstone-based) deletion.

This package provides an ordered in-memory index with:
- insert(key) - Insert or resurrect a key
- remove_soft(key) - Tombstone a key without restructuring
- remove_hard(key) - Physically remove a key
- collect_garbage() - Physically remove every tombstone
- Soft and hard variants of find, contains, min/max and traversal
"""

from lazytree.models.exceptions import NotFoundError, TreeModifiedError
from lazytree.models.lazy_search_tree import LazySearchTree

__all__ = ["LazySearchTree", "NotFoundError", "TreeModifiedError"]
