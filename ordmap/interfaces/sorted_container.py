"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from collections.abc import Callable
from typing import Any

from ordmap.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for sorted key-value containers.

    Provides O(log N) operations for put, get, and delete.
    Inherits ascending iteration from OrderedIterable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def put(self, key: Any, value: Any) -> Any | None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update. Must not be None.
            value: The value to associate with the key.

        Returns:
            The previous value if the key was mapped, None otherwise.

        Raises:
            InvalidKeyError: If key is None.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Any | None:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    @abstractmethod
    def update_values(self, fn: Callable[[Any, Any], Any]) -> None:
        """
        Replace every value in ascending key order with fn(key, value).

        Keys and the tree shape are left untouched.

        Time complexity: O(N)
        """
        pass
