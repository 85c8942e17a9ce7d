"""
Purpose:
- Ask Gemini (generateContent REST endpoint) for variations of a name/username.
- Returns the raw suggestion list; merging with the original query happens in expansion.py.

Notes:
- Requires: settings.google_api_key (or GOOGLE_API_KEY in env). The caller checks this first.
- One request per call, JSON response mode, no local retry.
- Anything unusable in the response raises ExpansionError; a null/empty list is a valid answer.
"""

from __future__ import annotations
import json
from typing import Any, Dict, List, Optional

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from ..core.settings import Settings, settings as default_settings
from .exceptions import ExpansionError

log = structlog.get_logger(__name__)

PROMPT_TEMPLATE = """You are an expert in generating search queries.

Given the original search query: {query},
generate an array of expanded search queries that include variations, aliases, and common misspellings of the name.
The expanded queries should help in finding the user across various social media platforms.
Return a JSON object of the form {{"expandedQueries": ["...", "..."]}}.
Do not include the original query in the expanded queries.
Limit the number of expanded queries to 10.
"""

class AIExpandedQueries(BaseModel):
    expandedQueries: Optional[List[str]] = None

def build_prompt(query: str) -> str:
    return PROMPT_TEMPLATE.format(query=query)

def _request_body(query: str) -> Dict[str, Any]:
    return {
        "contents": [{"role": "user", "parts": [{"text": build_prompt(query)}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "temperature": 0.4,
        },
    }

def _candidate_text(data: Any) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
        return "".join(p.get("text", "") for p in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise ExpansionError(f"Gemini response has no candidate text: {e!r}") from e

def parse_suggestions(text: str) -> List[str]:
    """
    Accepts {"expandedQueries": [...]}, a bare [...] array, or null.
    null / missing / empty list -> [] (the model had nothing to add).
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ExpansionError(f"Gemini returned non-JSON text: {text[:120]!r}") from e

    if payload is None:
        return []
    if isinstance(payload, list):
        payload = {"expandedQueries": payload}
    try:
        parsed = AIExpandedQueries.model_validate(payload)
    except ValidationError as e:
        raise ExpansionError(f"Gemini output does not match the expected shape: {e}") from e
    return [q.strip() for q in (parsed.expandedQueries or []) if q and q.strip()]

class GeminiQueryExpander:
    """Awaitable `query -> list[str]` backed by one Gemini generateContent request."""

    def __init__(self, client: httpx.AsyncClient, settings: Optional[Settings] = None) -> None:
        self._client = client
        self._settings = settings or default_settings

    def _endpoint(self) -> str:
        base = self._settings.gemini_base_url.rstrip("/")
        return f"{base}/models/{self._settings.gemini_model}:generateContent"

    async def __call__(self, query: str) -> List[str]:
        return await self.expand(query)

    async def expand(self, query: str) -> List[str]:
        api_key = self._settings.resolved_google_api_key()
        if not api_key:
            raise ExpansionError("GOOGLE_API_KEY is not configured")

        try:
            r = await self._client.post(
                self._endpoint(),
                params={"key": api_key},
                json=_request_body(query),
                timeout=self._settings.gemini_timeout_seconds,
            )
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPStatusError as e:
            raise ExpansionError(f"Gemini request failed with HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise ExpansionError(f"Gemini request failed: {e!r}") from e

        suggestions = parse_suggestions(_candidate_text(data))
        log.debug("gemini_expansion_response", query=query, suggestions=len(suggestions))
        return suggestions
