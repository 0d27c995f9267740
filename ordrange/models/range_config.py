"""
Immutable snapshot of a range's configuration.
"""

from dataclasses import dataclass
from typing import Generic

from ordrange.models.comparable import C, Comparable
from ordrange.models.successor import Successor


def compare(a: Comparable, b: Comparable) -> int:
    """
    Three-way comparison using the element type's total order.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b.
    """
    return (a > b) - (a < b)


@dataclass(frozen=True)
class RangeConfig(Generic[C]):
    """
    Configuration a cursor is built from.

    Taken when a traversal starts, so later changes to the range do not
    reach cursors that are already running.

    Attributes:
        start: First element (None if not configured yet).
        end: Bound of the range, None for an unbounded range.
        end_inclusive: Whether end itself is produced.
        successor: Active successor, None if not configured yet.
    """

    start: C | None = None
    end: C | None = None
    end_inclusive: bool = False
    successor: Successor[C] | None = None

    def is_bounded(self) -> bool:
        return self.end is not None
