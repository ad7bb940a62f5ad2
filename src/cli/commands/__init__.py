"""CLI command modules."""

from .index import index, search
from .init import init
from .knowledge import add, ask, list_entries
from .stats import stats

__all__ = [
    "init",
    "index",
    "search",
    "ask",
    "add",
    "list_entries",
    "stats",
]
