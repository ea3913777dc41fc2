"""
Redwood - channel visibility for structured logging.

Log records carry a set of channels; a VisibilityFilter decides which of them
continue down the handler chain, with either everything shown except a
block-list or everything hidden except an allow-list.
"""

from redwood.io.filters import DefaultState, VisibilityFilter

__version__ = "0.1.0"
__all__ = ["DefaultState", "VisibilityFilter"]
