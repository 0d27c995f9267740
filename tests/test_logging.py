"""
Tests for library logging: named loggers, no root configuration, lazy formatting.
"""

import logging
from dataclasses import dataclass, field

import pytest

from ordrange import InvalidSuccessorResultError, OrderedRange


@dataclass(order=True)
class Tick:
    """Ordered element that counts how often it is rendered with repr()."""

    value: int
    renders: list = field(default_factory=list, compare=False)

    def __repr__(self) -> str:
        self.renders.append(self.value)
        return f"Tick({self.value})"


class TestLibraryLogging:
    """Tests for how the package emits log records."""

    def test_root_logger_left_unconfigured(self):
        """Test traversals never attach handlers to the root logger."""
        root = logging.getLogger()
        saved = root.handlers[:]
        root.handlers.clear()
        try:
            OrderedRange(0).step(lambda x: x + 1).take(3)
            OrderedRange(1).to(5).step(lambda x: x + 1).to_mutable_seq()
            OrderedRange(1).step(lambda x: x + 1).take_while(lambda x: x < 3)
            with pytest.raises(InvalidSuccessorResultError):
                list(OrderedRange(1).to(5).step(lambda x: None))

            assert root.handlers == []
        finally:
            root.handlers[:] = saved

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("ordrange").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_debug_records_use_module_loggers(self, caplog):
        """Test cursor and range records come from their module loggers."""
        caplog.set_level(logging.DEBUG, logger="ordrange")
        OrderedRange(0).step(lambda x: x + 1).take(2)

        names = {record.name for record in caplog.records}
        assert "ordrange.engine.cursor" in names
        assert "ordrange.engine.ordered_range" in names
        assert "take(2) stopped after 2 elements" in caplog.messages

    def test_invalid_successor_logged_critical(self, caplog):
        caplog.set_level(logging.DEBUG, logger="ordrange")
        with pytest.raises(InvalidSuccessorResultError):
            OrderedRange(7).to(9).step(lambda x: None).take(3)

        critical = [r for r in caplog.records if r.levelno == logging.CRITICAL]
        assert len(critical) == 1
        assert critical[0].getMessage() == "Successor returned None at index 0 for element 7"

    def test_debug_arguments_not_rendered_when_disabled(self, caplog):
        """Test elements are not repr()'d when debug logging is off."""
        caplog.set_level(logging.WARNING, logger="ordrange")
        renders: list = []
        start = Tick(0, renders)
        end = Tick(10, renders)

        r = OrderedRange(start).to(end).step(lambda t: Tick(t.value + 1, renders))
        assert [t.value for t in r.take(3)] == [0, 1, 2]
        assert renders == []
