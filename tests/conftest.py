"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Callable

import pytest

from redwood.io.filters import VisibilityFilter


@pytest.fixture
def visibility() -> VisibilityFilter:
    """Create a fresh filter in its initial SHOW_ALL state."""
    return VisibilityFilter()


@pytest.fixture
def make_record() -> Callable[..., logging.LogRecord]:
    """Build records tagged with the given channels."""

    def _make(*channels, force: bool = False, msg: str = "hello") -> logging.LogRecord:
        record = logging.LogRecord(
            name="test", level=logging.INFO, pathname="", lineno=0, msg=msg, args=(), exc_info=None
        )
        record.channels = frozenset(channels)
        record.force = force
        return record

    return _make


class ListHandler(logging.Handler):
    """Collects handled records."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def sink() -> ListHandler:
    return ListHandler()
