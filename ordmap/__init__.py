"""
Ordered key-value map backed by a red-black tree.

This package provides an in-memory map with:
- put(key, value) / get(key) / remove(key) - O(log N)
- compute, merge and conditional replace helpers built on those
- Ascending iteration over (key, value) entries, sync and async
- Content-based equality and hashing
"""

from ordmap.models.entry import Entry
from ordmap.models.exceptions import InvalidKeyError, InvariantViolationError
from ordmap.models.linked_list import LinkedList
from ordmap.models.ordered_map import OrderedMap
from ordmap.models.sortedcontainers import RedBlackTree

__all__ = [
    "Entry",
    "InvalidKeyError",
    "InvariantViolationError",
    "LinkedList",
    "OrderedMap",
    "RedBlackTree",
]
