"""
LazyContainer abstract base class for sorted containers with lazy deletion.
"""

from abc import abstractmethod
from typing import Any

from lazytree.interfaces.range_iterable import RangeIterable
from lazytree.interfaces.traverser import Traverser


class LazyContainer(RangeIterable):
    """
    Abstract base class for sorted containers with tombstone-based deletion.

    Every entry is either live or tombstoned. "Soft" operations only see
    live entries; "hard" operations see every physically present entry.

    Implementations:
    - LazySearchTree: unbalanced binary search tree
    """

    @abstractmethod
    def insert(self, key: Any) -> bool:
        """
        Insert a key, or resurrect it if it is tombstoned.

        Args:
            key: The key to insert.

        Returns:
            True if the live size changed, False if the key was already live.
        """
        pass

    @abstractmethod
    def remove_soft(self, key: Any) -> bool:
        """
        Tombstone a live key without restructuring the container.

        Args:
            key: The key to remove.

        Returns:
            True if the key was live and is now tombstoned, False otherwise.
        """
        pass

    @abstractmethod
    def remove_hard(self, key: Any) -> bool:
        """
        Physically remove a key, live or tombstoned.

        Args:
            key: The key to remove.

        Returns:
            True if the key was physically present and removed.
        """
        pass

    @abstractmethod
    def collect_garbage(self) -> bool:
        """
        Physically remove every tombstoned entry.

        Returns:
            True if at least one entry was removed.
        """
        pass

    @abstractmethod
    def find_soft(self, key: Any) -> Any:
        """
        Return the live entry equal to key.

        Raises:
            NotFoundError: If the key is absent or tombstoned.
        """
        pass

    @abstractmethod
    def find_hard(self, key: Any) -> Any:
        """
        Return the entry equal to key, tombstoned or not.

        Raises:
            NotFoundError: If the key is absent.
        """
        pass

    @abstractmethod
    def contains_soft(self, key: Any) -> bool:
        pass

    @abstractmethod
    def contains_hard(self, key: Any) -> bool:
        pass

    @abstractmethod
    def soft_size(self) -> int:
        """
        Return the number of live entries.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def hard_size(self) -> int:
        """
        Return the number of physical entries, tombstones included.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def traverse_soft(self, func: Traverser) -> None:
        """Call func on every live entry in ascending order."""
        pass

    @abstractmethod
    def traverse_hard(self, func: Traverser) -> None:
        """Call func on every entry in ascending order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
