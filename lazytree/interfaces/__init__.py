"""
Abstract base classes and protocols for lazy-deletion trees.
"""

from lazytree.interfaces.lazy_container import LazyContainer
from lazytree.interfaces.range_iterable import RangeIterable
from lazytree.interfaces.traverser import Traverser

__all__ = ["LazyContainer", "RangeIterable", "Traverser"]
