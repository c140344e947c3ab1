"""
Abstract base classes and protocols for ordered containers.
"""

from ordmap.interfaces.ordered_iterable import OrderedIterable
from ordmap.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
