"""
Lazily evaluated ordered ranges.

This package provides a restartable sequence generator over any totally
ordered type:
- OrderedRange(start).to(end) / .until(end) - bounded, inclusive or exclusive
- OrderedRange(start) without an end - unbounded (use take / take_while)
- step(fn) / step_indexed(fn) - caller-supplied successor
- Ascending and descending ranges, inferred from start and end

Log records go to the "ordrange" logger; handlers are left to the application.
"""

import logging

from ordrange.engine.ordered_range import OrderedRange
from ordrange.models.exceptions import (
    InvalidSuccessorResultError,
    MissingConfigurationError,
    OrderedRangeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidSuccessorResultError",
    "MissingConfigurationError",
    "OrderedRange",
    "OrderedRangeError",
]
