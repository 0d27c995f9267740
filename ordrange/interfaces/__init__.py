"""
Abstract base classes and protocols for ordered ranges.
"""

from ordrange.interfaces.range_iterable import RangeIterable

__all__ = ["RangeIterable"]
