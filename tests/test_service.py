"""Tests for search orchestration: validation, notices, and link independence from AI."""

from __future__ import annotations

import pytest

from socialeye.search.platforms import ALL_PLATFORM_IDS
from socialeye.search.schema import ExpansionResult, SearchQuery
from socialeye.search.service import completion_notice, expansion_notice, run_search, validate_request
from socialeye.services.exceptions import SearchValidationError


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, message",
    [
        (SearchQuery(query="   "), "Please enter a name or username to search."),
        (SearchQuery(query="john", platforms=[]), "Please select at least one platform to search."),
        (SearchQuery(query="john", platforms=["instagram", "myspace"]), "Unknown platform(s): myspace"),
    ],
)
async def test_validation_errors_skip_expansion(key_settings, fake_expander_factory, payload, message):
    expander = fake_expander_factory(answer=["x"])
    with pytest.raises(SearchValidationError) as exc_info:
        await run_search(payload, expander=expander, settings=key_settings)
    assert str(exc_info.value) == message
    assert expander.calls == []


def test_validate_request_defaults_to_all_platforms():
    query, selected = validate_request(SearchQuery(query="  jane doe  "))
    assert query == "jane doe"
    assert selected == ALL_PLATFORM_IDS


@pytest.mark.asyncio
async def test_search_uses_trimmed_original_query_only(key_settings, fake_expander_factory):
    expander = fake_expander_factory(answer=["jon doe", "johnd"])
    response = await run_search(
        SearchQuery(query="  john doe ", platforms=["tiktok", "instagram"]),
        expander=expander,
        settings=key_settings,
    )

    assert expander.calls == ["john doe"]
    assert response.ok is True
    assert response.query == "john doe"
    assert response.expansion.expanded_queries == ["john doe", "jon doe", "johnd"]
    assert [item.platform.id for item in response.results] == ["instagram", "tiktok"]
    urls = [link.url for item in response.results for link in item.links]
    assert all("jon%20doe" not in url for url in urls)
    assert all(link.query_text == "john doe" for item in response.results for link in item.links)
    assert response.notices[0].title == "AI Query Expansion Successful!"
    assert "AI found 2 potential variations" in response.notices[0].description
    assert response.notices[1].title == "Search Complete!"


@pytest.mark.asyncio
async def test_links_identical_whatever_the_expansion_outcome(
    key_settings, no_key_settings, fake_expander_factory
):
    payload = SearchQuery(query="jane doe", platforms=["reddit", "youtube"])
    ok = await run_search(payload, expander=fake_expander_factory(answer=["jd"]), settings=key_settings)
    failed = await run_search(
        payload, expander=fake_expander_factory(error=RuntimeError("down")), settings=key_settings
    )
    skipped = await run_search(payload, expander=fake_expander_factory(answer=["jd"]), settings=no_key_settings)

    dumps = [[r.model_dump() for r in resp.results] for resp in (ok, failed, skipped)]
    assert dumps[0] == dumps[1] == dumps[2]
    assert failed.expansion.ai_expansion_skipped_reason == "FLOW_EXECUTION_ERROR"
    assert skipped.expansion.ai_expansion_skipped_reason == "API_KEY_MISSING"


@pytest.mark.parametrize(
    "expansion, title",
    [
        (ExpansionResult(expanded_queries=["q", "q2"], ai_expansion_performed=True), "AI Query Expansion Successful!"),
        (
            ExpansionResult(
                expanded_queries=["q"], ai_expansion_performed=False, ai_expansion_skipped_reason="API_KEY_MISSING"
            ),
            "AI Query Expansion Skipped",
        ),
        (
            ExpansionResult(
                expanded_queries=["q"], ai_expansion_performed=False, ai_expansion_skipped_reason="FLOW_EXECUTION_ERROR"
            ),
            "AI Query Expansion Notice",
        ),
        (ExpansionResult(expanded_queries=["q"], ai_expansion_performed=True), "AI Query Expansion Complete"),
    ],
)
def test_expansion_notice_variants(expansion, title):
    notice = expansion_notice(expansion, "q")
    assert notice.title == title
    assert '"q"' in notice.description


def test_completion_notice_without_results():
    notice = completion_notice([])
    assert notice.title == "Search Complete"
    assert notice.description == "No direct links found. Try refining your search."
