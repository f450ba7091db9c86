"""Tests for LocalContentStore (filesystem tree with JSON sidecars)."""

import json
from pathlib import Path

import pytest

from tagfeed.domain.exceptions import StoreUnavailableException, ValidationException
from tagfeed.infrastructure.content import LocalContentStore


def _node(root: Path, rel: str, props: dict | None = None) -> None:
    path = root / rel
    path.mkdir(parents=True, exist_ok=True)
    if props is not None:
        (path / ".content.json").write_text(json.dumps(props), encoding="utf-8")


@pytest.fixture
def store(tmp_path: Path) -> LocalContentStore:
    _node(tmp_path, "tags/sports", {"sling:resourceType": "sakai/directory"})
    _node(tmp_path, "tags/sports/tennis", {"title": "Tennis"})
    _node(tmp_path, "tags/sports/soccer", {"title": "Soccer"})
    _node(tmp_path, "tags/sports/bare")
    (tmp_path / "tags/sports/readme.txt").write_text("not a node")
    return LocalContentStore(str(tmp_path))


async def test_get_node_reads_properties(store: LocalContentStore) -> None:
    node = await store.get_node("/tags/sports")
    assert node is not None
    assert node.path == "/tags/sports"
    assert node.resource_type == "sakai/directory"


async def test_get_node_missing(store: LocalContentStore) -> None:
    assert await store.get_node("/tags/nothing") is None


async def test_list_children_sorted_directories_only(store: LocalContentStore) -> None:
    children = await store.list_children("/tags/sports")
    assert [c.path for c in children] == [
        "/tags/sports/bare",
        "/tags/sports/soccer",
        "/tags/sports/tennis",
    ]
    assert children[0].properties == {}
    assert await store.get_metadata(children[1]) == {"title": "Soccer"}


async def test_list_children_of_missing_path_is_empty(store: LocalContentStore) -> None:
    assert await store.list_children("/missing") == []


async def test_path_traversal_rejected(store: LocalContentStore) -> None:
    with pytest.raises(ValidationException):
        await store.list_children("/../../etc")


async def test_invalid_metadata_is_store_failure(tmp_path: Path) -> None:
    _node(tmp_path, "d")
    (tmp_path / "d" / ".content.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreUnavailableException) as exc_info:
        await LocalContentStore(str(tmp_path)).get_node("/d")
    assert exc_info.value.details["path"] == "/d"
