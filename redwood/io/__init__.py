"""Channel-tagged log records routed through a filtering handler chain."""

from redwood.io.channels import CHANNELS, DBG, ERR, FORCE, WARN, channels_of, is_forced, tag
from redwood.io.filters import DefaultState, VisibilityFilter
from redwood.io.handlers import EMPTY, HandlerChain, RecordHandler
from redwood.io.setup import setup_logging

__all__ = [
    "CHANNELS",
    "ERR",
    "WARN",
    "DBG",
    "FORCE",
    "channels_of",
    "is_forced",
    "tag",
    "DefaultState",
    "VisibilityFilter",
    "EMPTY",
    "RecordHandler",
    "HandlerChain",
    "setup_logging",
]
