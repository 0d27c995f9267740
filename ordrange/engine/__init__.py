"""
Iteration engine for ordered ranges.
"""

from ordrange.engine.cursor import RangeCursor
from ordrange.engine.ordered_range import OrderedRange

__all__ = ["OrderedRange", "RangeCursor"]
