"""
Purpose:
- The "service" orchestrates validate -> AI expansion -> link generation -> notices.
- Links are always built from the original trimmed query; expansion only feeds the notices.
"""

from __future__ import annotations
from typing import List, Optional

import structlog

from ..core.settings import Settings
from ..services.exceptions import SearchValidationError
from ..services.expansion import QueryExpander, expand_search_query
from .links import generate_links
from .platforms import ALL_PLATFORM_IDS, select_platforms
from .schema import API_KEY_MISSING, ExpansionResult, Notice, SearchQuery, SearchResponse, SearchResultItem

log = structlog.get_logger(__name__)

def validate_request(payload: SearchQuery) -> tuple[str, List[str]]:
    """Return (trimmed query, selected ids) or raise SearchValidationError."""
    query = (payload.query or "").strip()
    if not query:
        raise SearchValidationError("Please enter a name or username to search.")

    selected = ALL_PLATFORM_IDS if payload.platforms is None else list(dict.fromkeys(payload.platforms))
    if not selected:
        raise SearchValidationError("Please select at least one platform to search.")
    unknown = [p for p in selected if p not in ALL_PLATFORM_IDS]
    if unknown:
        raise SearchValidationError(f"Unknown platform(s): {', '.join(unknown)}")
    return query, selected

def expansion_notice(expansion: ExpansionResult, query: str) -> Notice:
    extra = len(expansion.expanded_queries) - 1
    if expansion.ai_expansion_performed and extra > 0:
        return Notice(
            title="AI Query Expansion Successful!",
            description=(
                f"AI found {extra} potential variations. "
                f'Now searching with your original term: "{query}".'
            ),
        )
    if not expansion.ai_expansion_performed and expansion.ai_expansion_skipped_reason == API_KEY_MISSING:
        return Notice(
            title="AI Query Expansion Skipped",
            description=(
                "AI features are unavailable (API key not configured). "
                f'Proceeding with original term: "{query}".'
            ),
        )
    if not expansion.ai_expansion_performed:
        return Notice(
            title="AI Query Expansion Notice",
            description=(
                "AI query expansion could not be performed. "
                f'Proceeding with original term: "{query}".'
            ),
        )
    return Notice(
        title="AI Query Expansion Complete",
        description=f'No additional variations found by AI. Searching with your original term: "{query}".',
    )

def completion_notice(results: List[SearchResultItem]) -> Notice:
    if not results or all(not r.links for r in results):
        return Notice(title="Search Complete", description="No direct links found. Try refining your search.")
    return Notice(title="Search Complete!", description="Results are displayed below.")

async def run_search(
    payload: SearchQuery,
    *,
    expander: QueryExpander,
    settings: Optional[Settings] = None,
) -> SearchResponse:
    query, selected = validate_request(payload)

    expansion = await expand_search_query(query, expander=expander, settings=settings)
    results = generate_links(query, select_platforms(selected))

    log.info(
        "search_done",
        query=query,
        platforms=len(selected),
        results=len(results),
        ai_expansion_performed=expansion.ai_expansion_performed,
    )
    return SearchResponse(
        ok=True,
        query=query,
        expansion=expansion,
        results=results,
        notices=[expansion_notice(expansion, query), completion_notice(results)],
    )
