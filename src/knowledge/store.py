"""In-memory entry store and bounded search history.

Nothing here is persisted; both structures live for the lifetime of the
process. All mutations go through a single lock so concurrent request
threads cannot interleave a read-modify-write on the same entry.
"""

import threading
from collections import deque
from typing import Callable

import structlog

from .models import EntryNotFoundError, KnowledgeEntry

logger = structlog.get_logger()

SEARCH_HISTORY_LIMIT = 100


class EntryStore:
    """Entries keyed by id, iterated in insertion order."""

    def __init__(self):
        self._entries: dict[str, KnowledgeEntry] = {}
        self._lock = threading.RLock()

    def put(self, entry: KnowledgeEntry) -> KnowledgeEntry:
        """Insert or replace by id. A replaced entry keeps its position."""
        with self._lock:
            self._entries[entry.id] = entry
        return entry

    def get(self, entry_id: str) -> KnowledgeEntry:
        with self._lock:
            try:
                return self._entries[entry_id]
            except KeyError:
                raise EntryNotFoundError(entry_id) from None

    def update(
        self, entry_id: str, mutate: Callable[[KnowledgeEntry], KnowledgeEntry]
    ) -> KnowledgeEntry:
        """Apply mutate to the stored entry and store the result, atomically."""
        with self._lock:
            updated = mutate(self.get(entry_id))
            self._entries[entry_id] = updated
            return updated

    def delete(self, entry_id: str) -> None:
        with self._lock:
            if entry_id not in self._entries:
                raise EntryNotFoundError(entry_id)
            del self._entries[entry_id]

    def list(self) -> list[KnowledgeEntry]:
        with self._lock:
            return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


class SearchHistory:
    """Last N raw query strings, oldest evicted first."""

    def __init__(self, maxlen: int = SEARCH_HISTORY_LIMIT):
        self._queries: deque[str] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def record(self, query: str) -> None:
        with self._lock:
            self._queries.append(query)

    def __len__(self) -> int:
        return len(self._queries)
