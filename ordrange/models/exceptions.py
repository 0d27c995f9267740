"""
Custom exceptions for ordered ranges.
"""

from typing import Any


class OrderedRangeError(Exception):
    """Base class for errors raised while traversing an ordered range."""


class MissingConfigurationError(OrderedRangeError, ValueError):
    """
    Raised when a traversal is requested on a range that is not fully configured.

    Raised eagerly when the traversal starts, never on first element production.
    """

    def __init__(self, field: str, operation: str = "iterate"):
        """
        Initialize configuration error.

        Args:
            field: Name of the missing setting (start, end or successor).
            operation: Traversal that required the setting.
        """
        self.field = field
        self.operation = operation
        super().__init__(f"Cannot {operation} range: {field} is not set")


class InvalidSuccessorResultError(OrderedRangeError, RuntimeError):
    """
    Raised when the successor function returns None.

    A None result is a caller bug, not the end of the sequence, so the
    traversal is aborted.
    """

    def __init__(self, index: int, previous: Any):
        """
        Initialize successor error.

        Args:
            index: Count of elements produced before the failing step.
            previous: Element the successor was applied to.
        """
        self.index = index
        self.previous = previous
        super().__init__(
            f"Successor returned None at index {index} "
            f"(applied to {previous!r})"
        )
