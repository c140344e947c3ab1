"""
Entry - a single key-value mapping as exposed by iteration and views.
"""

from typing import Any, NamedTuple


class Entry(NamedTuple):
    """
    Immutable snapshot of one mapping.

    Unpacks like a (key, value) tuple. Mutating the map afterwards does not
    change an Entry that was already handed out.
    """

    key: Any
    value: Any
