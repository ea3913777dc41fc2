"""Logger setup and wiring."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from redwood.config import VisibilityConfig
from redwood.io.filters import VisibilityFilter
from redwood.io.filters import log as policy_log
from redwood.io.handlers import HandlerChain


def setup_logging(
    config: VisibilityConfig | None = None,
    console: Console | None = None,
    name: str = "redwood",
) -> tuple[logging.Logger, VisibilityFilter]:
    """Configure a logger whose records pass through a visibility filter.

    Returns the logger and the filter, which stays live: policy calls on it
    take effect for the next record. The logger stops propagating, so
    dropped records do not reach ancestor handlers. Policy changes stay
    quiet unless a level was already set on their logger.
    """
    log = logging.getLogger(name)
    log.setLevel(logging.DEBUG)
    log.propagate = False

    if policy_log.level == logging.NOTSET:
        policy_log.setLevel(logging.INFO)

    # Replace the chain from a previous call instead of stacking another
    for handler in [h for h in log.handlers if isinstance(h, HandlerChain)]:
        log.removeHandler(handler)

    visibility = (config or VisibilityConfig()).apply(VisibilityFilter())
    # console=None falls back to rich's shared console
    sink = RichHandler(console=console, show_path=False)
    log.addHandler(HandlerChain([visibility], sink))

    return log, visibility
