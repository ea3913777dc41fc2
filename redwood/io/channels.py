"""Channel constants and record tagging."""

import logging
from collections.abc import Hashable, Iterable

ERR = "ERROR"
WARN = "WARNING"
DBG = "DEBUG"
FORCE = "FORCE"

CHANNELS: set[str] = {ERR, WARN, DBG, FORCE}


def channels_of(record: logging.LogRecord) -> frozenset[Hashable]:
    """Channels a record is tagged with, falling back to its level name.

    A single channel need not be wrapped: anything other than a non-string
    iterable (an enum member, an int, a class) is one channel.
    """
    channels = getattr(record, "channels", None)
    if channels is None:
        return frozenset({record.levelname})
    if isinstance(channels, str | bytes) or not isinstance(channels, Iterable):
        return frozenset({channels})
    return frozenset(channels)


def is_forced(record: logging.LogRecord) -> bool:
    return bool(getattr(record, "force", False)) or FORCE in channels_of(record)


def tag(*channels: Hashable, force: bool = False) -> dict:
    """Build the ``extra`` mapping for a logger call.

    Usage:
        log.info("loaded", extra=tag("parser", DBG))
    """
    return {"channels": frozenset(channels), "force": force}
