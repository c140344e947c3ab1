"""
OrderedMap - key-value map with ascending key order, backed by a sorted container.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterable, Iterator, Mapping
from typing import Any

from ordmap.interfaces.ordered_iterable import OrderedIterable
from ordmap.interfaces.sorted_container import SortedContainer
from ordmap.models.entry import Entry
from ordmap.models.exceptions import InvalidKeyError
from ordmap.models.linked_list import LinkedList
from ordmap.models.sortedcontainers import RedBlackTree

logger = logging.getLogger(__name__)


class OrderedMap(OrderedIterable):
    """
    Ordered key-value map backed by a SortedContainer.

    Supports:
    - O(log N) put, get, remove, contains_key
    - compute/merge style conditional updates built on those primitives
    - Ascending views (entries, keys, values) materialized as LinkedLists
    - Equality and hashing over the ascending (key, value) sequence

    The hash changes whenever the map is mutated, so a map must not be
    modified while it is used as a dict key or set member.

    Absent keys are reported with None or False, never with an exception.
    A None key is rejected with InvalidKeyError by every operation that
    could create a mapping.
    """

    def __init__(
        self,
        container: SortedContainer | None = None,
        *,
        check_invariants: bool = False,
    ) -> None:
        """
        Initialize OrderedMap.

        Args:
            container: The backing sorted data structure. Defaults to a new
                       RedBlackTree.
            check_invariants: Verify the default tree after every mutation.
                              Cannot be combined with an explicit container.
        """
        if container is None:
            container = RedBlackTree(check_invariants=check_invariants)
        elif check_invariants:
            raise ValueError(
                "check_invariants only applies to the default container; "
                "configure the container directly instead"
            )

        if not isinstance(container, SortedContainer):
            raise TypeError(
                f"container must be a SortedContainer, got {type(container).__name__}"
            )

        self._container = container

    def put(self, key: Any, value: Any) -> Any | None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to store.

        Returns:
            The previous value, or None if the key was not mapped.

        Raises:
            InvalidKeyError: If key is None.
        """
        return self._container.put(key, value)

    def get(self, key: Any) -> Any | None:
        """
        Retrieve value by key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.
        """
        return self._container.get(key)

    def remove(self, key: Any) -> bool:
        """
        Remove the mapping for key.

        Args:
            key: The key to remove.

        Returns:
            True if a mapping was removed, False if the key was absent.
        """
        return self._container.delete(key)

    def contains_key(self, key: Any) -> bool:
        return self._container.has(key)

    def contains_value(self, value: Any) -> bool:
        """Linear scan of values in ascending key order. O(N)"""
        return any(existing == value for _, existing in self._container)

    def size(self) -> int:
        return self._container.size()

    def is_empty(self) -> bool:
        return self._container.size() == 0

    def clear(self) -> None:
        self._container.clear()

    def get_or_default(self, key: Any, default: Any = None) -> Any:
        if self._container.has(key):
            return self._container.get(key)
        return default

    def put_if_absent(self, key: Any, value: Any) -> Any | None:
        """
        Map key to value unless it is already mapped to a non-None value.

        Returns:
            The existing value, or None if value was stored.
        """
        self._require_key(key, "put_if_absent")
        current = self._container.get(key)
        if current is None:
            self._container.put(key, value)
        return current

    def replace(self, key: Any, value: Any) -> Any | None:
        """
        Replace the value of an existing mapping.

        Returns:
            The previous value, or None if key was not mapped (nothing stored).
        """
        if self._container.has(key):
            return self._container.put(key, value)
        return None

    def replace_mapping(self, key: Any, old_value: Any, new_value: Any) -> bool:
        """
        Replace the value of key only if it is currently mapped to old_value.

        Returns:
            True if the value was replaced.
        """
        if self._container.has(key) and self._container.get(key) == old_value:
            self._container.put(key, new_value)
            return True
        return False

    def replace_all(self, fn: Callable[[Any, Any], Any]) -> None:
        """
        Replace every value with fn(key, value) in ascending key order.

        Only values change; keys and tree shape are untouched.
        """
        logger.debug(f"Replacing all {self.size()} values")
        self._container.update_values(fn)

    def compute(self, key: Any, fn: Callable[[Any, Any], Any]) -> Any | None:
        """
        Recompute the mapping for key.

        fn receives the key and the current value (None if unmapped). A None
        result removes an existing mapping; any other result is stored.

        Returns:
            The new value, or None if the mapping is now absent.
        """
        self._require_key(key, "compute")
        old_value = self._container.get(key)
        new_value = fn(key, old_value)

        if new_value is None:
            if old_value is not None or self._container.has(key):
                self._container.delete(key)
            return None

        self._container.put(key, new_value)
        return new_value

    def compute_if_absent(self, key: Any, fn: Callable[[Any], Any]) -> Any | None:
        """
        Store fn(key) if key is unmapped (or mapped to None).

        A None result from fn stores nothing.

        Returns:
            The current value if present, otherwise the computed value.
        """
        self._require_key(key, "compute_if_absent")
        current = self._container.get(key)
        if current is not None:
            return current

        new_value = fn(key)
        if new_value is not None:
            self._container.put(key, new_value)
        return new_value

    def compute_if_present(
        self, key: Any, fn: Callable[[Any, Any], Any]
    ) -> Any | None:
        """
        Recompute the value of key only if it is mapped to a non-None value.

        A None result from fn removes the mapping.

        Returns:
            The new value, or None if nothing is mapped afterwards.
        """
        old_value = self._container.get(key)
        if old_value is None:
            return None

        new_value = fn(key, old_value)
        if new_value is None:
            self._container.delete(key)
        else:
            self._container.put(key, new_value)
        return new_value

    def merge(
        self, key: Any, value: Any, fn: Callable[[Any, Any], Any]
    ) -> Any | None:
        """
        Combine value into the mapping for key.

        Unmapped (or None-mapped) keys simply get value, exactly as put would
        store it, even when value is None. Otherwise the result of
        fn(old_value, value) is stored, or the mapping is removed if it is None.

        Returns:
            The new value, or None if the mapping was removed.
        """
        self._require_key(key, "merge")
        old_value = self._container.get(key)
        if old_value is None:
            self._container.put(key, value)
            return value

        new_value = fn(old_value, value)

        if new_value is None:
            self._container.delete(key)
        else:
            self._container.put(key, new_value)
        return new_value

    def put_all(
        self, other: "OrderedMap | Mapping[Any, Any] | Iterable[tuple[Any, Any]]"
    ) -> None:
        """
        Put every mapping of other into this map.

        Args:
            other: Another OrderedMap, a Mapping, or an iterable of pairs.

        Raises:
            InvalidKeyError: If any key is None. Nothing is stored in that case.
        """
        if isinstance(other, Mapping):
            pairs = list(other.items())
        else:
            pairs = list(other)

        for key, _ in pairs:
            self._require_key(key, "put_all")

        for key, value in pairs:
            self._container.put(key, value)
        logger.debug(f"put_all stored {len(pairs)} mappings")

    def clone(self) -> "OrderedMap":
        """
        Return an independent map with the same mappings.

        The copy is rebuilt by sequential puts, so its internal shape may
        differ from this map's; it always compares equal.
        """
        if isinstance(self._container, RedBlackTree):
            container = RedBlackTree(check_invariants=self._container.check_invariants)
        else:
            container = type(self._container)()

        cloned = OrderedMap(container)
        for key, value in self._container:
            container.put(key, value)

        logger.debug(f"Cloned map with {cloned.size()} entries")
        return cloned

    def __copy__(self) -> "OrderedMap":
        return self.clone()

    def get_entries(self) -> LinkedList:
        """Return all entries in ascending key order."""
        return LinkedList(self._container)

    def get_keys(self) -> LinkedList:
        """Return all keys in ascending order."""
        return LinkedList(key for key, _ in self._container)

    def get_values(self) -> LinkedList:
        """Return all values in ascending key order."""
        return LinkedList(value for _, value in self._container)

    def __iter__(self) -> Iterator[Entry]:
        # Snapshot, so the map may be modified while iterating
        return iter(self.get_entries())

    async def __aiter__(self) -> AsyncIterator[Entry]:
        for entry in self.get_entries():
            yield entry

    def __len__(self) -> int:
        return self._container.size()

    def __contains__(self, key: Any) -> bool:
        return self._container.has(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(a == b for a, b in zip(self._container, other._container))

    def __hash__(self) -> int:
        return hash(tuple(self._container))

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self._container)
        return f"OrderedMap({{{items}}})"

    @staticmethod
    def _require_key(key: Any, operation: str) -> None:
        if key is None:
            raise InvalidKeyError(operation)
