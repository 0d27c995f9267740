"""
RangeCursor - per-traversal iteration state over an ordered range.
"""

import logging
from collections.abc import Iterator
from typing import Generic

from ordrange.models.comparable import C
from ordrange.models.exceptions import (
    InvalidSuccessorResultError,
    MissingConfigurationError,
)
from ordrange.models.range_config import RangeConfig, compare

logger = logging.getLogger(__name__)


class RangeCursor(Iterator[C], Generic[C]):
    """
    Produces the elements of one traversal of a range.

    Direction of travel is fixed once at construction by comparing start with
    end (the orientation). An element is produced while it is still strictly
    on the start side of end, or equal to end when end is inclusive:

        cmp = compare(current, end)
        has_next = cmp * orientation > 0 or (end_inclusive and cmp == 0)

    The same test serves ascending and descending ranges, and successors that
    do not move by a constant delta (e.g. stepping dates by month).
    An unbounded range (end is None) never runs out.
    """

    def __init__(self, config: RangeConfig[C]) -> None:
        """
        Initialize cursor at the configured start.

        Args:
            config: Snapshot of the range configuration.

        Raises:
            MissingConfigurationError: If start or successor is not set.
        """
        if config.start is None:
            raise MissingConfigurationError("start")
        if config.successor is None:
            raise MissingConfigurationError("successor")

        self._config = config
        self._cursor = 0
        self._current: C = config.start
        self._last: C | None = None

        # None: unbounded; 0: start == end; > 0: start > end; < 0: start < end
        self._orientation: int | None = None
        if config.is_bounded():
            self._orientation = compare(config.start, config.end)

        logger.debug(
            "Cursor created: start=%r end=%r inclusive=%s orientation=%s",
            config.start,
            config.end,
            config.end_inclusive,
            self._orientation,
        )

    @property
    def position(self) -> int:
        """Number of elements produced so far (index of the next one)."""
        return self._cursor

    @property
    def orientation(self) -> int | None:
        return self._orientation

    @property
    def last(self) -> C | None:
        """Most recently produced element, None before the first."""
        return self._last

    def has_next(self) -> bool:
        if self._orientation is None:
            return True

        cmp = compare(self._current, self._config.end)
        return cmp * self._orientation > 0 or (
            self._config.end_inclusive and cmp == 0
        )

    def __iter__(self) -> "RangeCursor[C]":
        return self

    def __next__(self) -> C:
        """
        Produce the next element and advance.

        Returns:
            The element at the current position.

        Raises:
            StopIteration: When the range is exhausted.
            InvalidSuccessorResultError: If the successor returned None.
        """
        if not self.has_next():
            raise StopIteration

        last = self._current
        self._last = last
        current = self._config.successor.advance(last, self._cursor)
        if current is None:
            logger.critical(
                "Successor returned None at index %d for element %r",
                self._cursor,
                last,
            )
            raise InvalidSuccessorResultError(self._cursor, last)

        self._current = current
        self._cursor += 1
        return last
