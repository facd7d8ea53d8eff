"""
Shared pytest fixtures for lazy search tree tests.
"""

import pytest

from lazytree import LazySearchTree


@pytest.fixture
def tree():
    """Provide a fresh, empty tree."""
    return LazySearchTree()


@pytest.fixture
def sample_tree():
    """Provide the tree built from 5, 3, 8, 1, 4."""
    return LazySearchTree([5, 3, 8, 1, 4])


@pytest.fixture
def sample_keys():
    """Provide a shuffled-looking key sequence with a balanced-ish shape."""
    return [50, 30, 70, 20, 40, 60, 80, 10, 25, 35, 45, 55, 65, 75, 90]


@pytest.fixture
def check_invariants():
    """
    Provide a checker that walks the whole tree and verifies:
    - both size counters match a full count
    - soft_size <= hard_size
    - BST ordering over every node, tombstoned or not
    """

    def _check(t: LazySearchTree) -> None:
        live = 0
        total = 0
        stack = [(t._root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue
            total += 1
            if not node.deleted:
                live += 1
            if low is not None:
                assert node.datum > low
            if high is not None:
                assert node.datum < high
            stack.append((node.left, low, node.datum))
            stack.append((node.right, node.datum, high))

        assert t.soft_size() == live
        assert t.hard_size() == total
        assert t.soft_size() <= t.hard_size()

    return _check
