"""Tests for TagDiscoveryService."""

from unittest.mock import AsyncMock

import pytest

from tagfeed.application.use_cases.tag_discovery import TagDiscoveryService
from tagfeed.core.constants import TAG_NAME_MISSING
from tagfeed.domain.entities import SearchHit
from tagfeed.domain.exceptions import SearchException


async def test_discover_tags_builds_scoped_query_without_sort() -> None:
    engine = AsyncMock()
    engine.search.return_value = []
    svc = TagDiscoveryService(engine, "sakai/tag")

    assert await svc.discover_tags("/tags/sports/soccer") == []

    engine.search.assert_awaited_once_with(
        "path:\\/tags\\/sports\\/soccer AND resourceType:sakai\\/tag"
    )


async def test_discover_tags_preserves_engine_order() -> None:
    engine = AsyncMock()
    engine.search.return_value = [
        SearchHit({"tagname": "zeta"}),
        SearchHit({"tagname": ["alpha", "beta"]}),
    ]
    tags = await TagDiscoveryService(engine, "sakai/tag").discover_tags("/c")
    assert tags == ["zeta", "alpha"]


async def test_missing_tag_name_maps_to_sentinel() -> None:
    engine = AsyncMock()
    engine.search.return_value = [SearchHit({"id": "x"}), SearchHit({"tagname": "t"})]
    tags = await TagDiscoveryService(engine, "sakai/tag").discover_tags("/c")
    assert tags == [TAG_NAME_MISSING, "t"]


async def test_search_failure_propagates() -> None:
    engine = AsyncMock()
    engine.search.side_effect = SearchException("q", "down")
    with pytest.raises(SearchException) as exc_info:
        await TagDiscoveryService(engine, "sakai/tag").discover_tags("/c")
    assert exc_info.value.error_code == "SEARCH_ERROR"


async def test_category_path_with_operators_is_escaped() -> None:
    engine = AsyncMock()
    engine.search.return_value = []
    await TagDiscoveryService(engine, "sakai/tag").discover_tags("/a AND (b)")
    query = engine.search.await_args.args[0]
    assert query == "path:\\/a\\ AND\\ \\(b\\) AND resourceType:sakai\\/tag"
