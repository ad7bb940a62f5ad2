from .file_store import KnowledgeFileStore
from .models import (
    AskResult,
    EntryNotFoundError,
    KnowledgeEntry,
    KnowledgeError,
    Page,
    ValidationFailedError,
)
from .service import KnowledgeBase
from .store import EntryStore, SearchHistory

__all__ = [
    "AskResult",
    "EntryNotFoundError",
    "EntryStore",
    "KnowledgeBase",
    "KnowledgeEntry",
    "KnowledgeError",
    "KnowledgeFileStore",
    "Page",
    "SearchHistory",
    "ValidationFailedError",
]
