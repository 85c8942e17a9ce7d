"""
Purpose:
- Turn one trimmed query + selected platforms into per-platform outbound links.
- Pure string templating: nothing is fetched or validated.

Rules:
- Platforms come out in the order given (callers pass catalog order).
- Links keep template order; duplicates by URL are dropped (first one wins).
- A link is a "direct attempt" when its URL contains "/<encoded query without whitespace>".
- Platforms with no links are left out.
"""

from __future__ import annotations
from typing import Dict, Iterable, List

from .platforms import Platform, encode_uri_component, strip_whitespace
from .schema import PlatformInfo, SearchLink, SearchResultItem

def direct_attempt_marker(query: str) -> str:
    return "/" + encode_uri_component(strip_whitespace(query))

def is_direct_attempt(url: str, query: str) -> bool:
    return direct_attempt_marker(query) in url

def platform_info(platform: Platform) -> PlatformInfo:
    return PlatformInfo(
        id=platform.id,
        name=platform.name,
        icon=platform.icon,
        template_kinds=[t.kind.value for t in platform.templates],
    )

def links_for_platform(query: str, platform: Platform) -> List[SearchLink]:
    unique: Dict[str, SearchLink] = {}
    for tpl in platform.templates:
        url = tpl.render(query)
        if url in unique:
            continue
        unique[url] = SearchLink(url=url, query_text=query, is_direct_attempt=is_direct_attempt(url, query))
    return list(unique.values())

def generate_links(query: str, platforms: Iterable[Platform]) -> List[SearchResultItem]:
    results: List[SearchResultItem] = []
    for platform in platforms:
        links = links_for_platform(query, platform)
        if links:
            results.append(SearchResultItem(platform=platform_info(platform), links=links))
    return results
