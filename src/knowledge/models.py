"""Data models for the knowledge base."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from shared_types import KnowledgeEntryType


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class KnowledgeEntry:
    id: str
    type: KnowledgeEntryType
    title: str
    content: str
    source: str = "api"
    source_path: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    metadata: Optional[dict[str, Any]] = None


@dataclass
class Page:
    """One page of filtered entries plus the pre-pagination match count."""

    items: list[KnowledgeEntry]
    total: int
    limit: int
    offset: int


@dataclass
class AskResult:
    answer: str
    sources: list[str] = field(default_factory=list)


class KnowledgeError(Exception):
    """Base error for knowledge base operations."""


class EntryNotFoundError(KnowledgeError):
    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__("Entry not found")


class ValidationFailedError(KnowledgeError):
    """Required fields missing or invalid."""
