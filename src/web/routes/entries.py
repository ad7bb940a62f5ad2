"""Entry CRUD routes over the in-memory knowledge base."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from knowledge import KnowledgeBase
from knowledge.query import DEFAULT_LIST_LIMIT
from shared_types import KnowledgeEntryType
from web.deps import get_knowledge_base
from web.models import APIResponse, EntryCreate, EntryOut, EntryUpdate, Pagination

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get(
    "",
    response_model=APIResponse[list[EntryOut]],
    response_model_exclude_none=True,
)
async def list_entries(
    entry_type: Optional[KnowledgeEntryType] = Query(None, alias="type"),
    tags: Optional[str] = None,
    limit: int = Query(DEFAULT_LIST_LIMIT, ge=0),
    offset: int = Query(0, ge=0),
    kb: KnowledgeBase = Depends(get_knowledge_base),
):
    """List entries filtered by type and tags, newest insertions last."""
    page = kb.list_entries(type_filter=entry_type, tags=tags, limit=limit, offset=offset)
    return APIResponse(
        success=True,
        data=[EntryOut.from_entry(e) for e in page.items],
        pagination=Pagination(total=page.total, limit=page.limit, offset=page.offset),
    )


@router.get("/{entry_id}", response_model=APIResponse[EntryOut], response_model_exclude_none=True)
async def get_entry(entry_id: str, kb: KnowledgeBase = Depends(get_knowledge_base)):
    return APIResponse(success=True, data=EntryOut.from_entry(kb.get(entry_id)))


@router.post(
    "",
    response_model=APIResponse[EntryOut],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_entry(body: EntryCreate, kb: KnowledgeBase = Depends(get_knowledge_base)):
    if not body.type or not body.title or not body.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="type, title, and content are required",
        )
    entry = kb.create(
        type=body.type,
        title=body.title,
        content=body.content,
        source=body.source,
        source_path=body.source_path,
        tags=body.tags,
        metadata=body.metadata,
    )
    return APIResponse(success=True, data=EntryOut.from_entry(entry))


@router.put("/{entry_id}", response_model=APIResponse[EntryOut], response_model_exclude_none=True)
async def update_entry(
    entry_id: str,
    body: EntryUpdate,
    kb: KnowledgeBase = Depends(get_knowledge_base),
):
    """Merge-update: fields missing from the body keep their current value."""
    changes = body.model_dump(exclude_unset=True)
    entry = kb.update(entry_id, **changes)
    return APIResponse(success=True, data=EntryOut.from_entry(entry))


@router.delete("/{entry_id}", response_model=APIResponse[dict], response_model_exclude_none=True)
async def delete_entry(entry_id: str, kb: KnowledgeBase = Depends(get_knowledge_base)):
    kb.delete(entry_id)
    return APIResponse(success=True)
