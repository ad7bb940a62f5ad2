"""Substring search route."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from knowledge import KnowledgeBase
from knowledge.query import DEFAULT_SEARCH_LIMIT
from shared_types import KnowledgeEntryType
from web.deps import get_knowledge_base
from web.models import APIResponse, EntryOut, Pagination

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=APIResponse[list[EntryOut]], response_model_exclude_none=True)
async def search_entries(
    q: Optional[str] = None,
    entry_type: Optional[KnowledgeEntryType] = Query(None, alias="type"),
    tags: Optional[str] = None,
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=0),
    offset: int = Query(0, ge=0),
    kb: KnowledgeBase = Depends(get_knowledge_base),
):
    """Entries whose title or content contains q, case-insensitively.

    ``type`` and ``tags`` (comma-separated, any-of) narrow the matches;
    ``pagination.total`` counts every match before limit/offset apply.
    """
    page = kb.search(q or "", type_filter=entry_type, tags=tags, limit=limit, offset=offset)
    return APIResponse(
        success=True,
        data=[EntryOut.from_entry(e) for e in page.items],
        pagination=Pagination(total=page.total, limit=page.limit, offset=page.offset),
    )
