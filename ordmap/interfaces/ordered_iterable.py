"""
OrderedIterable protocol for data structures iterated in ascending key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that yield their mappings in ascending key order.

    Implementations must support:
    - Full iteration via __iter__
    - Async iteration via __aiter__
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all entries in ascending key order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        """Return an async iterator over all entries in ascending key order."""
        pass
