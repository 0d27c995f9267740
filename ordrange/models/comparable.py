"""
Element type protocol for ordered ranges.
"""

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """Type with a total order usable through < and >."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


C = TypeVar("C", bound=Comparable)
