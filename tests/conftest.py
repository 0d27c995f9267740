"""
Shared pytest fixtures for ordered range tests.
"""

from datetime import date, timedelta

import pytest

from ordrange.engine.ordered_range import OrderedRange


class CountingSuccessor:
    """Successor wrapper that records how many times it was applied."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = 0

    def __call__(self, current):
        self.calls += 1
        return self.fn(current)


@pytest.fixture
def ascending_range():
    """Provide 1..5 inclusive, stepping by +1."""
    return OrderedRange(1).to(5).step(lambda x: x + 1)


@pytest.fixture
def descending_range():
    """Provide 5..1 inclusive, stepping by -1."""
    return OrderedRange(5).to(1).step(lambda x: x - 1)


@pytest.fixture
def naturals():
    """Provide the unbounded range 0, 1, 2, ..."""
    return OrderedRange(0).step(lambda x: x + 1)


@pytest.fixture
def weekly_dates():
    """Provide dates from 2024-01-01 stepping by a week, up to 2024-02-01."""
    return (
        OrderedRange(date(2024, 1, 1))
        .to(date(2024, 2, 1))
        .step(lambda d: d + timedelta(weeks=1))
    )


@pytest.fixture
def counting_successor():
    """Provide a factory for successors that count their invocations."""
    return CountingSuccessor
