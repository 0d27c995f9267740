"""
Successor and SuccessorType for computing the next element of a range.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Generic

from ordrange.models.comparable import C


class SuccessorType(IntEnum):
    """Calling convention of a successor function."""

    PLAIN = 0  # fn(current)
    INDEXED = 1  # fn(current, index)


@dataclass(frozen=True)
class Successor(Generic[C]):
    """
    Tagged successor function.

    Attributes:
        fn: The caller-supplied function.
        type: Whether fn also receives the 0-based count of produced elements.
    """

    fn: Callable[[C], C | None] | Callable[[C, int], C | None]
    type: SuccessorType = SuccessorType.PLAIN

    def __post_init__(self) -> None:
        if self.fn is None:
            raise ValueError("successor cannot be None")
        if not callable(self.fn):
            raise ValueError(f"successor must be callable, got {type(self.fn).__name__}")

    @classmethod
    def plain(cls, fn: Callable[[C], C | None]) -> "Successor[C]":
        return cls(fn=fn, type=SuccessorType.PLAIN)

    @classmethod
    def indexed(cls, fn: Callable[[C, int], C | None]) -> "Successor[C]":
        return cls(fn=fn, type=SuccessorType.INDEXED)

    def is_indexed(self) -> bool:
        return self.type == SuccessorType.INDEXED

    def advance(self, current: C, index: int) -> C | None:
        """
        Compute the element following current.

        Args:
            current: The element just produced.
            index: Count of elements already produced in this traversal.

        Returns:
            Whatever the wrapped function returns (may be None; the cursor checks).
        """
        if self.is_indexed():
            return self.fn(current, index)
        return self.fn(current)
