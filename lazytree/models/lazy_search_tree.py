"""
Binary search tree with lazy deletion.

Soft removal only tombstones a node; collect_garbage() later unlinks every
tombstone in one post-order pass. The tree is not rebalanced, so every walk
uses an explicit stack to stay safe on degenerate (linear) shapes.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from typing import Any

from lazytree.interfaces.lazy_container import LazyContainer
from lazytree.interfaces.traverser import Traverser
from lazytree.models.exceptions import NotFoundError, TreeModifiedError
from lazytree.models.node import Node

logger = logging.getLogger(__name__)


class LazySearchTree(LazyContainer):
    """
    Unbalanced binary search tree with tombstone-based deletion.

    Two sizes are tracked incrementally:
    1. soft size - nodes that are not tombstoned
    2. hard size - every node physically in the tree

    Keys are compared with < and >, or through ``key(datum)`` when a key
    function is given. Equal keys are the same logical entry.
    """

    def __init__(
        self,
        iterable: Iterable[Any] | None = None,
        *,
        key: Callable[[Any], Any] | None = None,
    ) -> None:
        """
        Initialize the tree.

        Args:
            iterable: Optional data to insert, in iteration order.
            key: Optional function mapping a datum to its comparison key.
        """
        self._root: Node | None = None
        self._size: int = 0
        self._size_hard: int = 0
        self._key = key
        self._traversals: int = 0

        if iterable is not None:
            for datum in iterable:
                self.insert(datum)

    # Sizes and shape

    def soft_size(self) -> int:
        return self._size

    def hard_size(self) -> int:
        return self._size_hard

    def tombstone_count(self) -> int:
        return self._size_hard - self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        """
        Return the number of edges on the longest root-to-leaf path.

        Tombstoned nodes count. An empty tree has height -1.
        """
        if self._root is None:
            return -1

        height = 0
        stack: list[tuple[Node, int]] = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            if depth > height:
                height = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return height

    # Lookups

    def find_soft(self, key: Any) -> Any:
        """Return the live datum equal to key. O(h)"""
        node = self._find_node(key)
        if node is None or node.deleted:
            raise NotFoundError(key)
        return node.datum

    def find_hard(self, key: Any) -> Any:
        """Return the datum equal to key, ignoring tombstones. O(h)"""
        node = self._find_node(key)
        if node is None:
            raise NotFoundError(key)
        return node.datum

    def contains_soft(self, key: Any) -> bool:
        node = self._find_node(key)
        return node is not None and not node.deleted

    def contains_hard(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def find_min_soft(self) -> Any:
        """Return the smallest live datum."""
        for node in self._inorder():
            if not node.deleted:
                return node.datum
        raise NotFoundError()

    def find_max_soft(self) -> Any:
        """Return the largest live datum."""
        for node in self._inorder(reverse=True):
            if not node.deleted:
                return node.datum
        raise NotFoundError()

    def find_min_hard(self) -> Any:
        if self._root is None:
            raise NotFoundError()
        return self._leftmost(self._root).datum

    def find_max_hard(self) -> Any:
        if self._root is None:
            raise NotFoundError()
        node = self._root
        while node.right is not None:
            node = node.right
        return node.datum

    # Mutations

    def insert(self, key: Any) -> bool:
        """
        Insert key, or resurrect it if it is tombstoned. O(h)

        A resurrected node takes the newly inserted datum, so payloads
        carried alongside the comparison key are refreshed.

        Returns:
            True if the soft size changed.
        """
        self._check_not_traversing("insert")

        parent = None
        current = self._root
        cmp = 0

        while current is not None:
            cmp = self._compare(key, current.datum)
            if cmp < 0:
                parent, current = current, current.left
            elif cmp > 0:
                parent, current = current, current.right
            elif current.deleted:
                current.datum = key
                current.deleted = False
                self._size += 1
                return True
            else:
                return False

        new_node = Node(datum=key)
        if parent is None:
            self._root = new_node
        elif cmp < 0:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._size_hard += 1
        return True

    def remove_soft(self, key: Any) -> bool:
        """
        Tombstone the live node holding key. O(h)

        The node stays where it is; no links change.

        Returns:
            True if the soft size changed.
        """
        self._check_not_traversing("remove_soft")

        node = self._find_node(key)
        if node is None or node.deleted:
            return False

        node.deleted = True
        self._size -= 1
        return True

    def remove_hard(self, key: Any) -> bool:
        """
        Physically remove the node holding key, tombstoned or not. O(h)

        Returns:
            True if the hard size changed.
        """
        self._check_not_traversing("remove_hard")

        parent = None
        current = self._root
        while current is not None:
            cmp = self._compare(key, current.datum)
            if cmp == 0:
                break
            parent = current
            current = current.left if cmp < 0 else current.right

        if current is None:
            return False

        if not current.deleted:
            self._size -= 1
        self._size_hard -= 1
        self._unlink(parent, current)
        return True

    def collect_garbage(self) -> bool:
        """
        Physically remove every tombstoned node.

        Children are collected before their parent, so a tombstoned node
        with two children always pulls up a live successor.

        Returns:
            True if any node was removed.
        """
        self._check_not_traversing("collect_garbage")

        removed = 0
        stack: list[tuple[Node | None, Node | None, bool]] = [(self._root, None, False)]

        while stack:
            node, parent, expanded = stack.pop()
            if node is None:
                continue
            if not expanded:
                stack.append((node, parent, True))
                stack.append((node.right, node, False))
                stack.append((node.left, node, False))
            elif node.deleted:
                self._unlink(parent, node)
                self._size_hard -= 1
                removed += 1

        if removed:
            logger.debug(
                f"Collected {removed} tombstoned nodes "
                f"(soft_size={self._size}, hard_size={self._size_hard})"
            )
        return removed > 0

    def clear(self) -> None:
        self._check_not_traversing("clear")

        logger.debug(f"Clearing tree with hard_size={self._size_hard}")
        self._root = None
        self._size = 0
        self._size_hard = 0

    def clone(self) -> "LazySearchTree":
        """
        Return a deep structural copy.

        Every node, tombstones included, is duplicated. Data objects are
        shared, nodes never are.
        """
        twin = LazySearchTree(key=self._key)
        twin._size = self._size
        twin._size_hard = self._size_hard

        if self._root is None:
            return twin

        twin._root = Node(datum=self._root.datum, deleted=self._root.deleted)
        stack = [(self._root, twin._root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = Node(datum=source.left.datum, deleted=source.left.deleted)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = Node(datum=source.right.datum, deleted=source.right.deleted)
                stack.append((source.right, target.right))

        logger.debug(f"Cloned tree with hard_size={self._size_hard}")
        return twin

    # Traversal and iteration

    def traverse_soft(self, func: Traverser) -> None:
        """Call func on every live datum in ascending order."""
        self._traverse(func, hard=False)

    def traverse_hard(self, func: Traverser) -> None:
        """Call func on every datum, tombstoned or not, in ascending order."""
        self._traverse(func, hard=True)

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(
        self, start: Any = None, end: Any = None, hard: bool = False
    ) -> Iterator[Any]:
        return _RangeIterator(self, start, end, hard)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any = None, end: Any = None, hard: bool = False
    ) -> AsyncIterator[Any]:
        return _AsyncRangeIterator(_RangeIterator(self, start, end, hard))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __contains__(self, key: Any) -> bool:
        return self.contains_soft(key)

    def __copy__(self) -> "LazySearchTree":
        return self.clone()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(soft_size={self._size}, "
            f"hard_size={self._size_hard})"
        )

    # Helpers

    def _compare(self, a: Any, b: Any) -> int:
        """Three-way comparison of two data under the tree's key order."""
        if self._key is not None:
            a, b = self._key(a), self._key(b)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def _check_not_traversing(self, operation: str) -> None:
        if self._traversals:
            raise TreeModifiedError(operation)

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key, ignoring tombstones."""
        current = self._root
        while current is not None:
            cmp = self._compare(key, current.datum)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return current
        return None

    @staticmethod
    def _leftmost(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _unlink(self, parent: Node | None, node: Node) -> None:
        """
        Physically remove node, a child of parent (or the root).

        With two children, node takes over the datum and tombstone flag of
        the leftmost node of its right subtree, which is spliced out instead.
        Size counters are the caller's job.
        """
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left

            node.datum = successor.datum
            node.deleted = successor.deleted
            self._replace_child(successor_parent, successor, successor.right)
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)

    def _replace_child(self, parent: Node | None, node: Node, child: Node | None) -> None:
        """Replace node with child in tree."""
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _inorder(self, reverse: bool = False) -> Iterator[Node]:
        """Yield every node in ascending (or descending) key order."""
        stack: list[Node] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            else:
                node = stack.pop()
                yield node
                node = node.left if reverse else node.right

    def _traverse(self, func: Traverser, hard: bool) -> None:
        self._traversals += 1
        try:
            for node in self._inorder():
                if hard or not node.deleted:
                    func(node.datum)
        finally:
            self._traversals -= 1


class _RangeIterator(Iterator[Any]):
    """
    In-order iterator over [start, end) on a LazySearchTree.

    Mutating the tree while an iterator is open is not supported.
    """

    def __init__(self, tree: LazySearchTree, start: Any, end: Any, hard: bool) -> None:
        self._stack: list[Node] = []
        self._compare = tree._compare
        self._end = end
        self._hard = hard

        # Initialize stack with nodes >= start
        self._push_left_path(tree._root, start)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        while self._stack:
            node = self._stack.pop()

            if self._end is not None and self._compare(node.datum, self._end) >= 0:
                self._stack.clear()
                raise StopIteration

            self._push_left_path(node.right, None)

            if self._hard or not node.deleted:
                return node.datum

        raise StopIteration

    def _push_left_path(self, node: Node | None, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node is not None:
            if start is not None and self._compare(node.datum, start) < 0:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async view of a _RangeIterator (in-memory, never suspends)."""

    def __init__(self, iterator: _RangeIterator) -> None:
        self._iterator = iterator

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration from None
