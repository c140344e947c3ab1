"""
Custom exceptions for the ordered map.
"""

from typing import Any


class InvalidKeyError(ValueError):
    """
    Raised when None is used as a key in an operation that would create a mapping.

    The map is left unmodified.
    """

    def __init__(self, operation: str):
        """
        Initialize invalid key error.

        Args:
            operation: Name of the rejected operation.
        """
        self.operation = operation
        super().__init__(f"Cannot {operation} a None key into an OrderedMap")


class InvariantViolationError(AssertionError):
    """
    Raised when a red-black tree property is found broken.

    This always indicates a bug in the balancing code, never bad input.
    """

    def __init__(self, invariant: str, key: Any, detail: str = ""):
        """
        Initialize invariant violation error.

        Args:
            invariant: Short name of the violated property.
            key: Key of the node where the violation was detected.
            detail: Optional extra context.
        """
        self.invariant = invariant
        self.key = key
        message = f"Red-black invariant '{invariant}' violated at key {key!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
