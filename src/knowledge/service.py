"""KnowledgeBase: entry CRUD, search, ask and stats over the in-memory store."""

import uuid
from collections import Counter
from dataclasses import replace
from typing import Any, Optional

import structlog

from shared_types import KnowledgeEntryType

from . import ask as ask_responder
from . import query as query_engine
from .models import AskResult, KnowledgeEntry, Page, ValidationFailedError, utcnow
from .store import EntryStore, SearchHistory

logger = structlog.get_logger()

DEFAULT_SOURCE = "api"

# Falsy values fall back to the previous value for these fields
_STRING_FIELDS = ("type", "title", "content", "source", "source_path")
# Only None falls back for these; an explicit [] or {} replaces
_COLLECTION_FIELDS = ("tags", "metadata")


def _coerce_type(value: str) -> KnowledgeEntryType:
    try:
        return KnowledgeEntryType(value)
    except ValueError:
        raise ValidationFailedError(f"Invalid type: {value}") from None


class KnowledgeBase:
    """Owns one EntryStore and one SearchHistory for the process."""

    def __init__(
        self,
        store: Optional[EntryStore] = None,
        history: Optional[SearchHistory] = None,
    ):
        self.store = store or EntryStore()
        self.history = history or SearchHistory()

    def create(
        self,
        type: Optional[str],
        title: Optional[str],
        content: Optional[str],
        source: Optional[str] = None,
        source_path: Optional[str] = None,
        tags: Optional[list[str]] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> KnowledgeEntry:
        """Create and store a new entry.

        Raises:
            ValidationFailedError: If type, title or content is missing.
        """
        if not type or not title or not content:
            raise ValidationFailedError("type, title, and content are required")

        now = utcnow()
        entry = KnowledgeEntry(
            id=str(uuid.uuid4()),
            type=_coerce_type(type),
            title=title,
            content=content,
            source=source or DEFAULT_SOURCE,
            source_path=source_path,
            tags=list(tags) if tags is not None else [],
            created_at=now,
            updated_at=now,
            metadata=metadata,
        )
        self.store.put(entry)
        logger.info("entry.created", entry_id=entry.id, type=str(entry.type))
        return entry

    def get(self, entry_id: str) -> KnowledgeEntry:
        return self.store.get(entry_id)

    def update(self, entry_id: str, **changes: Any) -> KnowledgeEntry:
        """Merge changes into an existing entry; omitted fields keep their value."""
        unknown = set(changes) - set(_STRING_FIELDS) - set(_COLLECTION_FIELDS)
        if unknown:
            raise ValidationFailedError(f"Unknown fields: {', '.join(sorted(unknown))}")

        def merge(existing: KnowledgeEntry) -> KnowledgeEntry:
            merged: dict[str, Any] = {}
            for name in _STRING_FIELDS:
                value = changes.get(name)
                if value:
                    merged[name] = value
            for name in _COLLECTION_FIELDS:
                value = changes.get(name)
                if value is not None:
                    merged[name] = value
            if "type" in merged:
                merged["type"] = _coerce_type(merged["type"])
            if "tags" in merged:
                merged["tags"] = list(merged["tags"])
            merged["updated_at"] = max(utcnow(), existing.created_at)
            return replace(existing, **merged)

        entry = self.store.update(entry_id, merge)
        logger.info("entry.updated", entry_id=entry_id, fields=sorted(changes))
        return entry

    def delete(self, entry_id: str) -> None:
        self.store.delete(entry_id)
        logger.info("entry.deleted", entry_id=entry_id)

    def search(
        self,
        query: str,
        type_filter: Optional[str] = None,
        tags: Optional[str] = None,
        limit: int = query_engine.DEFAULT_SEARCH_LIMIT,
        offset: int = 0,
    ) -> Page:
        """Substring search; the raw query is recorded in search history."""
        if not query:
            raise ValidationFailedError("Search query is required")
        self.history.record(query)
        page = query_engine.search(
            self.store.list(),
            query,
            type_filter=type_filter,
            tag_filter=query_engine.parse_tag_filter(tags),
            limit=limit,
            offset=offset,
        )
        logger.debug("search.executed", query=query, total=page.total)
        return page

    def list_entries(
        self,
        type_filter: Optional[str] = None,
        tags: Optional[str] = None,
        limit: int = query_engine.DEFAULT_LIST_LIMIT,
        offset: int = 0,
    ) -> Page:
        return query_engine.filter_entries(
            self.store.list(),
            type_filter=type_filter,
            tag_filter=query_engine.parse_tag_filter(tags),
            limit=limit,
            offset=offset,
        )

    def ask(self, question: str) -> AskResult:
        if not question:
            raise ValidationFailedError("Question is required")
        return ask_responder.answer_question(question, self.store.list())

    def stats(self) -> dict:
        entries = self.store.list()
        by_type = Counter(str(e.type) for e in entries)
        distinct_tags = {tag for e in entries for tag in e.tags}
        return {
            "totalEntries": len(entries),
            "byType": dict(by_type),
            "totalTags": len(distinct_tags),
            "searchHistoryCount": len(self.history),
        }
