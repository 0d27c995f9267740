"""
OrderedRange - lazily generated sequence over a totally ordered type.
"""

import logging
from collections.abc import Callable
from typing import Any

from ordrange.engine.cursor import RangeCursor
from ordrange.interfaces.range_iterable import RangeIterable
from ordrange.models.comparable import C
from ordrange.models.exceptions import MissingConfigurationError
from ordrange.models.range_config import RangeConfig
from ordrange.models.successor import Successor

logger = logging.getLogger(__name__)


class OrderedRange(RangeIterable[C]):
    """
    Element generator built from a start point, an optional end point and a
    successor function.

    Provides:
    - starting_at(start): set the first element
    - to(end) / until(end): set an inclusive / exclusive end
    - step(fn) / step_indexed(fn): set the successor
    - iteration, for_each, take, take_while, to_seq, to_mutable_seq

    The range keeps only configuration. Each traversal works on a fresh
    RangeCursor built from a snapshot of it, so a range can be traversed any
    number of times, from several threads at once, and a range without an end
    can be iterated forever. to_seq / to_mutable_seq / for_each need an end.

    Example:
        >>> OrderedRange(1).to(5).step(lambda x: x + 1).to_mutable_seq()
        [1, 2, 3, 4, 5]
    """

    def __init__(
        self,
        start: C | None = None,
        end: C | None = None,
        successor: Callable[[C], C | None] | None = None,
    ) -> None:
        """
        Initialize the range.

        Args:
            start: First element. May be set later with starting_at().
            end: Inclusive end point. None leaves the range unbounded.
            successor: Single-argument successor. May be set later with step().
        """
        self._start: C | None = None
        self._end: C | None = None
        self._end_inclusive = False
        self._successor: Successor[C] | None = None

        if start is not None:
            self.starting_at(start)
        if end is not None:
            self.to(end)
        if successor is not None:
            self.step(successor)

    def starting_at(self, start: C) -> "OrderedRange[C]":
        """Set the start point."""
        if start is None:
            raise ValueError("start cannot be None")
        self._start = start
        return self

    def to(self, end: C) -> "OrderedRange[C]":
        """Set the end point. The end point is included in the range."""
        if end is None:
            raise ValueError("end cannot be None")
        self._end = end
        self._end_inclusive = True
        return self

    def until(self, end: C) -> "OrderedRange[C]":
        """Set the end point. The end point is excluded from the range."""
        if end is None:
            raise ValueError("end cannot be None")
        self._end = end
        self._end_inclusive = False
        return self

    def step(self, fn: Callable[[C], C | None]) -> "OrderedRange[C]":
        """
        Set the successor, called as fn(current).

        Replaces any successor set before, including an indexed one.
        """
        self._successor = Successor.plain(fn)
        return self

    def step_indexed(self, fn: Callable[[C, int], C | None]) -> "OrderedRange[C]":
        """
        Set the successor, called as fn(current, index).

        index is the number of elements already produced by the traversal.
        Replaces any successor set before, including a plain one.
        """
        self._successor = Successor.indexed(fn)
        return self

    @property
    def start(self) -> C | None:
        return self._start

    @property
    def end(self) -> C | None:
        return self._end

    @property
    def end_inclusive(self) -> bool:
        return self._end_inclusive

    @property
    def successor(self) -> Successor[C] | None:
        return self._successor

    @property
    def is_bounded(self) -> bool:
        return self._end is not None

    def snapshot(self) -> RangeConfig[C]:
        """Return the current configuration as an immutable RangeConfig."""
        return RangeConfig(
            start=self._start,
            end=self._end,
            end_inclusive=self._end_inclusive,
            successor=self._successor,
        )

    def cursor(self) -> RangeCursor[C]:
        """
        Return a fresh cursor positioned at start.

        Raises:
            MissingConfigurationError: If start or successor is not set.
        """
        return RangeCursor(self.snapshot())

    def __iter__(self) -> RangeCursor[C]:
        return self.cursor()

    def for_each(self, action: Callable[[C], object]) -> None:
        """
        Invoke action on each element of the range.

        Raises:
            ValueError: If action is None or not callable.
            MissingConfigurationError: If start, end or successor is not set.
        """
        _require_callable(action, "action")
        self.for_each_indexed(lambda element, index: action(element))

    def for_each_indexed(self, action: Callable[[C, int], object]) -> None:
        """
        Invoke action on each element of the range, with its 0-based index.

        Raises:
            ValueError: If action is None or not callable.
            MissingConfigurationError: If start, end or successor is not set.
        """
        _require_callable(action, "action")
        if self._end is None:
            raise MissingConfigurationError("end", operation="traverse")

        itr = self.cursor()
        while itr.has_next():
            index = itr.position
            action(next(itr), index)

    def to_seq(self) -> tuple[C, ...]:
        return tuple(self.to_mutable_seq())

    def to_mutable_seq(self) -> list[C]:
        seq: list[C] = []
        self.for_each(seq.append)
        return seq

    def take(self, n: int) -> list[C]:
        """
        Get the first n elements of the range.

        Safe on an unbounded range: the successor is applied at most n times.

        Raises:
            ValueError: If n < 0.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")

        itr = self.cursor()
        seq: list[C] = []
        while itr.position < n and itr.has_next():
            seq.append(next(itr))

        logger.debug("take(%d) stopped after %d elements", n, len(seq))
        return seq

    def take_while(self, predicate: Callable[[C], bool]) -> list[C]:
        """
        Get the elements at the front of the range which satisfy predicate.

        Stops at the first element failing predicate; that element is not
        included and nothing after it is evaluated.

        Raises:
            ValueError: If predicate is None or not callable.
        """
        _require_callable(predicate, "predicate")
        return self.take_while_indexed(lambda element, index: predicate(element))

    def take_while_indexed(self, predicate: Callable[[C, int], bool]) -> list[C]:
        """
        Similar to take_while, with the element's 0-based index passed as the
        second argument of predicate.

        Raises:
            ValueError: If predicate is None or not callable.
        """
        _require_callable(predicate, "predicate")

        itr = self.cursor()
        seq: list[C] = []
        while itr.has_next():
            index = itr.position
            candidate = next(itr)
            if not predicate(candidate, index):
                logger.debug("take_while stopped at index %d", index)
                break
            seq.append(candidate)

        return seq

    def __repr__(self) -> str:
        return (
            f"OrderedRange(start={self._start!r}, end={self._end!r}, "
            f"end_inclusive={self._end_inclusive})"
        )


def _require_callable(fn: Any, name: str) -> None:
    if fn is None:
        raise ValueError(f"{name} cannot be None")
    if not callable(fn):
        raise ValueError(f"{name} must be callable, got {type(fn).__name__}")
