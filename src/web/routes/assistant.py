"""Ask and stats routes."""

from fastapi import APIRouter, Depends

from knowledge import KnowledgeBase
from web.deps import get_knowledge_base
from web.models import APIResponse, AskAnswer, AskRequest, Stats

router = APIRouter(prefix="/api", tags=["assistant"])


@router.post("/ask", response_model=APIResponse[AskAnswer], response_model_exclude_none=True)
async def ask(body: AskRequest, kb: KnowledgeBase = Depends(get_knowledge_base)):
    """Templated answer from up to five matching entries (no model call)."""
    result = kb.ask(body.question or "")
    return APIResponse(success=True, data=AskAnswer(answer=result.answer, sources=result.sources))


@router.get("/stats", response_model=APIResponse[Stats], response_model_exclude_none=True)
async def stats(kb: KnowledgeBase = Depends(get_knowledge_base)):
    return APIResponse(success=True, data=Stats.model_validate(kb.stats()))
