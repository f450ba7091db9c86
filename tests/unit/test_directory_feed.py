"""Tests for DirectoryFeedService (feed assembly across categories)."""

import json

import pytest

from tagfeed.application.dtos.feed import FeedOptions
from tagfeed.domain.exceptions import ResourceNotFoundException, SearchException
from tests.conftest import (
    POOLED_TYPE,
    FakeContentStore,
    FakeSearchEngine,
    build_feed_service,
    failing_responder,
)


async def test_feed_selects_last_item_and_empty_content(
    sports_store: FakeContentStore, sports_engine: FakeSearchEngine
) -> None:
    svc = build_feed_service(sports_store, sports_engine)

    feed = json.loads(await svc.build_feed("/tags/sports"))

    assert list(feed) == ["soccer", "empty-cat"]
    assert feed["soccer"]["title"] == "Soccer"
    assert feed["soccer"]["content"]["id"] == "C"
    assert feed["soccer"]["content"]["tag"] == ["t1", "t2"]
    assert feed["empty-cat"] == {"title": "Empty", "content": {}}


async def test_category_without_tags_issues_one_query(
    sports_store: FakeContentStore, sports_engine: FakeSearchEngine
) -> None:
    svc = build_feed_service(sports_store, sports_engine)
    await svc.build_feed("/tags/sports")
    queries = [q for q, _, _ in sports_engine.calls]
    assert len(queries) == 3
    assert sum(q.startswith("path:\\/tags\\/sports\\/empty\\-cat") for q in queries) == 1
    assert sum(q.startswith("tag:(") for q in queries) == 1


async def test_tag_discovery_failure_aborts_feed(sports_store: FakeContentStore) -> None:
    svc = build_feed_service(sports_store, FakeSearchEngine(failing_responder))
    with pytest.raises(SearchException):
        await svc.build_feed("/tags/sports")


async def test_missing_directory_gives_empty_feed(sports_engine: FakeSearchEngine) -> None:
    svc = build_feed_service(FakeContentStore({}), sports_engine)
    assert await svc.build_feed("/nowhere") == "{}"
    assert sports_engine.calls == []


async def test_non_directory_node_rejected(sports_store: FakeContentStore, sports_engine) -> None:
    svc = build_feed_service(sports_store, sports_engine)
    with pytest.raises(ResourceNotFoundException):
        await svc.build_feed("/tags/sports/soccer")


async def test_nested_metadata_kept_at_default_depth(sports_engine: FakeSearchEngine) -> None:
    store = FakeContentStore(
        {
            "/d": {"sling:resourceType": "sakai/directory"},
            "/d/c": {"title": "C", "layout": {"columns": 2}},
        }
    )
    feed = json.loads(await build_feed_service(store, sports_engine).build_feed("/d"))
    assert feed["c"] == {"title": "C", "layout": {"columns": 2}, "content": {}}


async def test_depth_trims_item_properties_only() -> None:
    def responder(query: str):
        if query.startswith("path:"):
            return [{"id": "tag-9", "tagname": "t9"}]
        return [
            {"id": "X", "resourceType": POOLED_TYPE, "tag": ["t9"], "meta": {"size": {"bytes": 1}}}
        ]

    store = FakeContentStore(
        {
            "/d": {"sling:resourceType": "sakai/directory"},
            "/d/c": {"layout": {"columns": {"count": 2}}},
        }
    )
    svc = build_feed_service(store, FakeSearchEngine(responder))

    shallow = json.loads(await svc.build_feed("/d", FeedOptions(depth=0)))
    one = json.loads(await svc.build_feed("/d", FeedOptions(depth=1)))
    full = json.loads(await svc.build_feed("/d", FeedOptions(depth=-1)))

    for feed in (shallow, one, full):
        assert feed["c"]["layout"] == {"columns": {"count": 2}}
    assert "meta" not in shallow["c"]["content"]
    assert one["c"]["content"]["meta"] == {}
    assert full["c"]["content"]["meta"] == {"size": {"bytes": 1}}


async def test_content_key_in_metadata_is_replaced(sports_engine: FakeSearchEngine) -> None:
    store = FakeContentStore(
        {
            "/d": {"sling:resourceType": "sakai/directory"},
            "/d/c": {"content": "stale"},
        }
    )
    feed = json.loads(await build_feed_service(store, sports_engine).build_feed("/d"))
    assert feed["c"]["content"] == {}


async def test_tidy_output_matches_indented_json(
    sports_store: FakeContentStore, sports_engine: FakeSearchEngine
) -> None:
    svc = build_feed_service(sports_store, sports_engine)
    text = await svc.build_feed("/tags/sports", FeedOptions(tidy=True))
    assert text == json.dumps(json.loads(text), indent=2, ensure_ascii=False)
