"""
Data models for ordered ranges.
"""

from ordrange.models.comparable import C, Comparable
from ordrange.models.exceptions import (
    InvalidSuccessorResultError,
    MissingConfigurationError,
    OrderedRangeError,
)
from ordrange.models.range_config import RangeConfig, compare
from ordrange.models.successor import Successor, SuccessorType

__all__ = [
    "C",
    "Comparable",
    "InvalidSuccessorResultError",
    "MissingConfigurationError",
    "OrderedRangeError",
    "RangeConfig",
    "Successor",
    "SuccessorType",
    "compare",
]
