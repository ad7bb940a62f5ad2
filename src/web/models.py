"""Pydantic request/response schemas for the web API."""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from knowledge.models import KnowledgeEntry
from shared_types import KnowledgeEntryType

T = TypeVar("T")


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Envelope ---


class Pagination(BaseModel):
    total: int
    limit: int
    offset: int


class APIResponse(BaseModel, Generic[T]):
    """Uniform envelope for every /api response."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    pagination: Optional[Pagination] = None


# --- Entries ---


class EntryOut(_CamelModel):
    id: str
    type: KnowledgeEntryType
    title: str
    content: str
    source: str
    source_path: Optional[str] = Field(None, alias="sourcePath")
    tags: list[str] = []
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    metadata: Optional[dict[str, Any]] = None

    @classmethod
    def from_entry(cls, entry: KnowledgeEntry) -> "EntryOut":
        return cls(
            id=entry.id,
            type=entry.type,
            title=entry.title,
            content=entry.content,
            source=entry.source,
            source_path=entry.source_path,
            tags=entry.tags,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
            metadata=entry.metadata,
        )


class EntryCreate(_CamelModel):
    """Create payload. Required fields are checked by the route for a single message."""

    type: Optional[KnowledgeEntryType] = None
    title: Optional[str] = None
    content: Optional[str] = None
    source: Optional[str] = None
    source_path: Optional[str] = Field(None, alias="sourcePath")
    tags: Optional[list[str]] = None
    metadata: Optional[dict[str, Any]] = None


class EntryUpdate(_CamelModel):
    type: Optional[KnowledgeEntryType] = None
    title: Optional[str] = None
    content: Optional[str] = None
    source: Optional[str] = None
    source_path: Optional[str] = Field(None, alias="sourcePath")
    tags: Optional[list[str]] = None
    metadata: Optional[dict[str, Any]] = None


# --- Ask / stats ---


class AskRequest(BaseModel):
    question: Optional[str] = None


class AskAnswer(BaseModel):
    answer: str
    sources: list[str]


class Stats(_CamelModel):
    total_entries: int = Field(alias="totalEntries")
    by_type: dict[str, int] = Field(alias="byType")
    total_tags: int = Field(alias="totalTags")
    search_history_count: int = Field(alias="searchHistoryCount")


class Health(BaseModel):
    status: str
    timestamp: datetime
