"""Substring matching, type/tag filtering and pagination over entries."""

from typing import Iterable, Optional, Sequence, TypeVar

from .models import KnowledgeEntry, Page

T = TypeVar("T")

DEFAULT_SEARCH_LIMIT = 10
DEFAULT_LIST_LIMIT = 50


def matches_query(entry: KnowledgeEntry, query: str) -> bool:
    """Case-insensitive substring match on title or content."""
    needle = query.lower()
    return needle in entry.title.lower() or needle in entry.content.lower()


def parse_tag_filter(raw: Optional[str]) -> Optional[set[str]]:
    """Split a comma-separated tag filter into trimmed tags.

    Returns None when there is nothing to filter on.
    """
    if not raw:
        return None
    tags = {t.strip() for t in raw.split(",") if t.strip()}
    return tags or None


def matches_filters(
    entry: KnowledgeEntry,
    type_filter: Optional[str] = None,
    tag_filter: Optional[set[str]] = None,
) -> bool:
    if type_filter and entry.type != type_filter:
        return False
    if tag_filter and not any(tag in tag_filter for tag in entry.tags):
        return False
    return True


def paginate(items: Sequence[T], limit: int, offset: int) -> tuple[list[T], int]:
    """Slice items; an offset past the end yields an empty page."""
    return list(items[offset : offset + limit]), len(items)


def search(
    entries: Iterable[KnowledgeEntry],
    query: str,
    type_filter: Optional[str] = None,
    tag_filter: Optional[set[str]] = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
    offset: int = 0,
) -> Page:
    """Entries matching query AND type AND tags, in store order."""
    matched = [
        e
        for e in entries
        if matches_query(e, query) and matches_filters(e, type_filter, tag_filter)
    ]
    items, total = paginate(matched, limit, offset)
    return Page(items=items, total=total, limit=limit, offset=offset)


def filter_entries(
    entries: Iterable[KnowledgeEntry],
    type_filter: Optional[str] = None,
    tag_filter: Optional[set[str]] = None,
    limit: int = DEFAULT_LIST_LIMIT,
    offset: int = 0,
) -> Page:
    matched = [e for e in entries if matches_filters(e, type_filter, tag_filter)]
    items, total = paginate(matched, limit, offset)
    return Page(items=items, total=total, limit=limit, offset=offset)
