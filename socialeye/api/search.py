"""
Purpose:
- Expose /api/v1/search/* endpoints backing the expansion + link generation service.
"""

from fastapi import APIRouter, Depends, HTTPException
import structlog

from ..core.settings import Settings
from ..search.platforms import PLATFORMS
from ..search.schema import SearchQuery, SearchResponse
from ..search.service import run_search
from ..services.exceptions import SearchValidationError
from ..services.expansion import QueryExpander
from .deps import get_expander, get_settings

router = APIRouter(prefix="/api/v1/search", tags=["search"])
log = structlog.get_logger(__name__)

@router.get("/status")
def search_status(cfg: Settings = Depends(get_settings)):
    return {
        "ok": True,
        "platforms": len(PLATFORMS),
        "ai_expansion_available": cfg.ai_expansion_available,
        "notes": f"{len(PLATFORMS)} platforms in catalog.",
    }

@router.post("/query", response_model=SearchResponse)
async def search_query(
    payload: SearchQuery,
    cfg: Settings = Depends(get_settings),
    expander: QueryExpander = Depends(get_expander),
):
    try:
        return await run_search(payload, expander=expander, settings=cfg)
    except SearchValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        log.error("search_failed", query=payload.query, exc_info=True)
        raise HTTPException(status_code=500, detail=f"Search failed: {e}") from e
