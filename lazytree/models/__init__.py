"""
Data models for lazy-deletion trees.
"""

from lazytree.models.exceptions import NotFoundError, TreeModifiedError
from lazytree.models.node import Node
from lazytree.models.lazy_search_tree import LazySearchTree

__all__ = [
    "LazySearchTree",
    "Node",
    "NotFoundError",
    "TreeModifiedError",
]
