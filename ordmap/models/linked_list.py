"""
LinkedList - doubly-linked ordered sequence used to materialize map views.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Link:
    """Link in the LinkedList."""

    item: Any
    prev: "_Link | None" = None
    next: "_Link | None" = None


class LinkedList:
    """
    Doubly-linked sequence with O(1) append, add_first and poll.

    Items are iterated in insertion order (append adds at the end,
    add_first at the front).
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Link | None = None
        self._tail: _Link | None = None
        self._size: int = 0

        if items is not None:
            for item in items:
                self.append(item)

    def append(self, item: Any) -> None:
        """Add item at the end. O(1)"""
        link = _Link(item=item, prev=self._tail)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def add_first(self, item: Any) -> None:
        """Add item at the front. O(1)"""
        link = _Link(item=item, next=self._head)
        if self._head is None:
            self._tail = link
        else:
            self._head.prev = link
        self._head = link
        self._size += 1

    def poll(self) -> Any | None:
        """
        Remove and return the first item.

        Returns:
            The first item, or None if the list is empty.
        """
        link = self._head
        if link is None:
            return None

        self._head = link.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return link.item

    def first(self) -> Any | None:
        return self._head.item if self._head else None

    def last(self) -> Any | None:
        return self._tail.item if self._tail else None

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        current = self._head
        while current is not None:
            yield current.item
            current = current.next

    def __contains__(self, item: Any) -> bool:
        return any(existing == item for existing in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
