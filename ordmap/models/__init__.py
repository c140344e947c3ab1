"""
Data models for the ordered map.
"""

from ordmap.models.entry import Entry
from ordmap.models.exceptions import InvalidKeyError, InvariantViolationError
from ordmap.models.linked_list import LinkedList
from ordmap.models.sortedcontainers import RedBlackTree
from ordmap.models.ordered_map import OrderedMap

__all__ = [
    "Entry",
    "InvalidKeyError",
    "InvariantViolationError",
    "LinkedList",
    "RedBlackTree",
    "OrderedMap",
]
