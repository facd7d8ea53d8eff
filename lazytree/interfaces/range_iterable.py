"""
RangeIterable protocol for trees that support in-order range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end, hard)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end, hard)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all live data in sorted order."""
        pass

    @abstractmethod
    def iterator(
        self, start: Any = None, end: Any = None, hard: bool = False
    ) -> Iterator[Any]:
        """
        Return an iterator over data in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.
            hard: Also yield tombstoned data.

        Returns:
            Iterator yielding data in ascending order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all live data in sorted order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: Any = None, end: Any = None, hard: bool = False
    ) -> AsyncIterator[Any]:
        """
        Return an async iterator over data in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.
            hard: Also yield tombstoned data.

        Returns:
            AsyncIterator yielding data in ascending order.
        """
        pass
