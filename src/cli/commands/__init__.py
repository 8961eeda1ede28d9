"""CLI command modules."""

from .analytics import analytics
from .clear import clear
from .history import history
from .log import log
from .moods import moods

__all__ = [
    "log",
    "history",
    "analytics",
    "clear",
    "moods",
]
