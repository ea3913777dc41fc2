"""Channel visibility filtering."""

import logging
from collections.abc import Hashable, Sequence
from enum import Enum, auto
from typing import assert_never

from redwood.io.channels import DBG, channels_of, is_forced, tag
from redwood.io.handlers import EMPTY, RecordHandler

log = logging.getLogger("redwood.visibility")


class DefaultState(Enum):
    """Baseline policy for channels that are not in the delta set."""

    SHOW_ALL = auto()
    HIDE_ALL = auto()


class VisibilityFilter(RecordHandler, logging.Filter):
    """Select which channels are visible.

    Behaves as an "or" filter: under HIDE_ALL a record passes if any of its
    channels is shown, under SHOW_ALL it is dropped if any of its channels
    is hidden. Forced records always pass.

    The delta set holds the exceptions to the default state, so the same
    channel means "shown" under HIDE_ALL and "hidden" under SHOW_ALL.
    Switching the default state always clears it.
    """

    def __init__(self) -> None:
        super().__init__()
        self._state = DefaultState.SHOW_ALL
        self._delta: set[Hashable] = set()

    @property
    def state(self) -> DefaultState:
        return self._state

    @property
    def delta(self) -> frozenset[Hashable]:
        return frozenset(self._delta)

    def show_all(self) -> None:
        """Show all of the channels."""
        self._reset(DefaultState.SHOW_ALL)

    def hide_all(self) -> None:
        """Show none of the channels."""
        self._reset(DefaultState.HIDE_ALL)

    def also_show(self, channel: Hashable) -> bool:
        """Show the channels currently being shown, plus this one.

        Under HIDE_ALL, returns True if the channel was already shown.
        Under SHOW_ALL, returns True if the channel had been hidden.
        """
        match self._state:
            case DefaultState.HIDE_ALL:
                present = self._add(channel)
            case DefaultState.SHOW_ALL:
                present = self._discard(channel)
            case _:
                assert_never(self._state)
        log.debug("also showing %r", channel, extra=tag(DBG))
        return present

    def also_hide(self, channel: Hashable) -> bool:
        """Show the channels currently being shown, except this one.

        Returns True if the channel was already hidden.
        """
        match self._state:
            case DefaultState.HIDE_ALL:
                hidden = not self._discard(channel)
            case DefaultState.SHOW_ALL:
                hidden = self._add(channel)
            case _:
                assert_never(self._state)
        log.debug("also hiding %r", channel, extra=tag(DBG))
        return hidden

    def decide(self, record: logging.LogRecord) -> bool:
        """Whether the record continues down the chain."""
        if is_forced(record):
            return True
        matched = not self._delta.isdisjoint(channels_of(record))
        match self._state:
            case DefaultState.HIDE_ALL:
                return matched
            case DefaultState.SHOW_ALL:
                return not matched
            case _:
                assert_never(self._state)

    def handle(self, record: logging.LogRecord) -> Sequence[logging.LogRecord]:
        if self.decide(record):
            return [record]
        return EMPTY

    def filter(self, record: logging.LogRecord) -> bool:
        return self.decide(record)

    def signal_start_track(self, signal: logging.LogRecord) -> Sequence[logging.LogRecord]:
        return EMPTY

    def signal_end_track(self, new_depth: int, time_of_end: float) -> Sequence[logging.LogRecord]:
        return EMPTY

    def _reset(self, state: DefaultState) -> None:
        self._state = state
        self._delta.clear()
        log.debug("visibility reset to %s", state.name, extra=tag(DBG))

    def _add(self, channel: Hashable) -> bool:
        """Insert, returning whether the channel was already present."""
        present = channel in self._delta
        self._delta.add(channel)
        return present

    def _discard(self, channel: Hashable) -> bool:
        """Remove, returning whether the channel was present."""
        present = channel in self._delta
        self._delta.discard(channel)
        return present
