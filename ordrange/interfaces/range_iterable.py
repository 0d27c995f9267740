"""
RangeIterable protocol for lazily generated ordered sequences.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Generic

from ordrange.models.comparable import C


class RangeIterable(ABC, Generic[C]):
    """
    Protocol for restartable sequences that are generated on demand.

    Implementations must support:
    - Pull-based iteration via __iter__, each call starting from scratch
    - Push-based traversal via for_each / for_each_indexed
    - Finite prefix extraction via take / take_while / take_while_indexed
    - Materialization via to_seq / to_mutable_seq
    """

    @abstractmethod
    def __iter__(self) -> Iterator[C]:
        """Return a fresh iterator positioned at the first element."""
        pass

    @abstractmethod
    def for_each(self, action: Callable[[C], object]) -> None:
        """
        Invoke action once per element, in production order.

        Args:
            action: Callback receiving the element.
        """
        pass

    @abstractmethod
    def for_each_indexed(self, action: Callable[[C, int], object]) -> None:
        """
        Invoke action once per element, in production order.

        Args:
            action: Callback receiving the element and its 0-based position.
        """
        pass

    @abstractmethod
    def take(self, n: int) -> list[C]:
        """
        Return the first n elements (fewer if the sequence ends first).

        Args:
            n: Maximum number of elements, must be >= 0.

        Returns:
            New list holding the prefix.
        """
        pass

    @abstractmethod
    def take_while(self, predicate: Callable[[C], bool]) -> list[C]:
        """
        Return the leading elements that satisfy predicate.

        Args:
            predicate: Condition tested on each element until it first fails.

        Returns:
            New list holding the prefix.
        """
        pass

    @abstractmethod
    def take_while_indexed(self, predicate: Callable[[C, int], bool]) -> list[C]:
        """
        Same as take_while, with the 0-based position passed to predicate.
        """
        pass

    @abstractmethod
    def to_seq(self) -> tuple[C, ...]:
        """Materialize every element into an immutable sequence."""
        pass

    @abstractmethod
    def to_mutable_seq(self) -> list[C]:
        """Materialize every element into a new list."""
        pass
