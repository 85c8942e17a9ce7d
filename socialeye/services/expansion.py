"""
Purpose:
- Wrap the AI expansion call behind a credential check and an error boundary.
- Every outcome (ok, no key, failure, empty answer) becomes one ExpansionResult; nothing is raised.

Design:
- No key -> skip before any network attempt (API_KEY_MISSING, warning log).
- Expander raises or returns garbage -> FLOW_EXECUTION_ERROR (error log), original query only.
- Expander returns None / [] -> still counts as performed, original query only.
- The result is informational: link generation never reads expanded_queries.
"""

from __future__ import annotations
from typing import Awaitable, Callable, List, Optional, Sequence

import structlog

from ..core.settings import Settings, settings as default_settings
from ..search.schema import API_KEY_MISSING, FLOW_EXECUTION_ERROR, ExpansionResult

log = structlog.get_logger(__name__)

QueryExpander = Callable[[str], Awaitable[Optional[Sequence[str]]]]

def merge_queries(query: str, suggestions: Optional[Sequence[str]]) -> List[str]:
    """Original first, then suggestions; exact duplicates dropped, first occurrence kept."""
    return list(dict.fromkeys([query, *(suggestions or [])]))

def _skipped(query: str, reason: str) -> ExpansionResult:
    return ExpansionResult(
        expanded_queries=[query],
        ai_expansion_performed=False,
        ai_expansion_skipped_reason=reason,
    )

async def expand_search_query(
    query: str,
    *,
    expander: QueryExpander,
    settings: Optional[Settings] = None,
) -> ExpansionResult:
    cfg = settings or default_settings
    if not cfg.ai_expansion_available:
        log.warning(
            "ai_expansion_skipped",
            reason=API_KEY_MISSING,
            hint="Set GOOGLE_API_KEY in the environment to enable AI query expansion.",
        )
        return _skipped(query, API_KEY_MISSING)

    try:
        suggestions = await expander(query)
        if suggestions is not None and not (
            isinstance(suggestions, (list, tuple)) and all(isinstance(s, str) for s in suggestions)
        ):
            raise TypeError(f"expander returned {type(suggestions).__name__}, expected a list of strings")
        merged = merge_queries(query, suggestions)
    except Exception:
        log.error("ai_expansion_failed", query=query, reason=FLOW_EXECUTION_ERROR, exc_info=True)
        return _skipped(query, FLOW_EXECUTION_ERROR)

    log.info("ai_expansion_done", query=query, variations=len(merged) - 1)
    return ExpansionResult(expanded_queries=merged, ai_expansion_performed=True)
