"""
Purpose:
- Static catalog of social platforms we build deep links for.
- Each platform lists URL templates as plain data: a template kind + a pattern with one {q} slot.
- The kind decides how the query is encoded before substitution (see TEMPLATE_ENCODERS).

Notes:
- Order matters: results are returned in catalog order, links in template order.
- Nothing here is fetched; these are only string templates.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple
from urllib.parse import quote
import re

# encodeURIComponent leaves these unescaped (besides ASCII letters/digits)
_URI_COMPONENT_SAFE = "-_.!~*'()"
_WHITESPACE_RUN = re.compile(r"\s+")

def encode_uri_component(value: str) -> str:
    """Percent-encode like JavaScript's encodeURIComponent (UTF-8)."""
    return quote(value, safe=_URI_COMPONENT_SAFE)

def strip_whitespace(value: str) -> str:
    return _WHITESPACE_RUN.sub("", value)

class TemplateKind(str, Enum):
    QUERY_ENCODE = "query-encode"     # generic search page: ?q=<query>
    HANDLE_ENCODE = "handle-encode"   # profile/handle path: /<query-without-spaces>

TEMPLATE_ENCODERS: Dict[TemplateKind, Callable[[str], str]] = {
    TemplateKind.QUERY_ENCODE: encode_uri_component,
    TemplateKind.HANDLE_ENCODE: lambda q: encode_uri_component(strip_whitespace(q)),
}

@dataclass(frozen=True)
class UrlTemplate:
    kind: TemplateKind
    pattern: str

    def render(self, query: str) -> str:
        return self.pattern.format(q=TEMPLATE_ENCODERS[self.kind](query))

@dataclass(frozen=True)
class Platform:
    id: str
    name: str
    icon: str                      # opaque asset name for clients
    templates: Tuple[UrlTemplate, ...]

def _q(pattern: str) -> UrlTemplate:
    return UrlTemplate(TemplateKind.QUERY_ENCODE, pattern)

def _h(pattern: str) -> UrlTemplate:
    return UrlTemplate(TemplateKind.HANDLE_ENCODE, pattern)

PLATFORMS: Tuple[Platform, ...] = (
    Platform("instagram", "Instagram", "instagram", (
        _q("https://www.instagram.com/explore/search/keyword/?q={q}"),
        _h("https://www.instagram.com/{q}/"),
    )),
    Platform("facebook", "Facebook", "facebook", (
        _q("https://www.facebook.com/search/people/?q={q}"),
    )),
    Platform("x-twitter", "X (Twitter)", "twitter", (
        _q("https://x.com/search?q={q}&f=user"),
    )),
    Platform("youtube", "YouTube", "youtube", (
        _q("https://www.youtube.com/results?search_query={q}"),
        _h("https://www.youtube.com/@{q}"),
    )),
    Platform("tiktok", "TikTok", "tiktok", (
        _q("https://www.tiktok.com/search/user?q={q}"),
        _h("https://www.tiktok.com/@{q}"),
    )),
    Platform("linkedin", "LinkedIn", "linkedin", (
        _q("https://www.linkedin.com/search/results/people/?keywords={q}"),
    )),
    Platform("pinterest", "Pinterest", "globe", (
        _q("https://www.pinterest.com/search/users/?q={q}"),
    )),
    Platform("reddit", "Reddit (User Search)", "globe", (
        _q("https://www.reddit.com/search/?q={q}&type=user"),
        _h("https://www.reddit.com/user/{q}/"),
    )),
    Platform("threads", "Threads", "search", (
        _h("https://www.threads.net/{q}"),
    )),
    Platform("snapchat", "Snapchat", "search", (
        _h("https://www.snapchat.com/add/{q}"),
    )),
)

ALL_PLATFORM_IDS: List[str] = [p.id for p in PLATFORMS]

_BY_ID: Dict[str, Platform] = {p.id: p for p in PLATFORMS}

def get_platform(platform_id: str) -> Platform:
    """Lookup by id; KeyError for ids outside the catalog."""
    return _BY_ID[platform_id]

def select_platforms(selected_ids) -> List[Platform]:
    """Catalog entries whose id is in selected_ids, in catalog order (not selection order)."""
    wanted = set(selected_ids)
    return [p for p in PLATFORMS if p.id in wanted]
