"""
Purpose:
- Pydantic models for search in/out so the API is self-documenting and stable.
"""

from __future__ import annotations
from pydantic import BaseModel, Field, computed_field
from typing import List, Literal, Optional

API_KEY_MISSING = "API_KEY_MISSING"
FLOW_EXECUTION_ERROR = "FLOW_EXECUTION_ERROR"

class SearchQuery(BaseModel):
    query: str = Field(..., description="Name or username to search for (trimmed server-side)")
    # None = every platform in the catalog; [] is rejected by the service
    platforms: Optional[List[str]] = Field(None, description="Selected platform ids")

class ExpansionResult(BaseModel):
    expanded_queries: List[str]
    ai_expansion_performed: bool
    ai_expansion_skipped_reason: Optional[str] = None

class SearchLink(BaseModel):
    url: str
    query_text: str
    is_direct_attempt: bool

    @computed_field
    @property
    def label(self) -> str:
        prefix = "Direct profile attempt for" if self.is_direct_attempt else "Search for"
        return f"{prefix}: {self.query_text}"

class PlatformInfo(BaseModel):
    id: str
    name: str
    icon: str
    template_kinds: List[str] = []

class SearchResultItem(BaseModel):
    platform: PlatformInfo
    links: List[SearchLink] = []

class Notice(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"

class SearchResponse(BaseModel):
    ok: bool = True
    query: str
    expansion: ExpansionResult
    results: List[SearchResultItem] = []
    notices: List[Notice] = []

class PlatformCatalog(BaseModel):
    platforms: List[PlatformInfo]
    all_ids: List[str]
