"""
Node type for lazy-deletion search trees.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """
    Node in a LazySearchTree.

    Each link is owned by exactly one parent (or by the tree root). A node
    has no behaviour; the tree does all the work. Nodes compare by identity.

    Attributes:
        datum: The stored key.
        left: Subtree with strictly smaller keys.
        right: Subtree with strictly greater keys.
        deleted: Tombstone flag. Tombstoned nodes keep their place in the tree.
    """

    datum: Any
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)
    deleted: bool = False
