"""Pytest configuration and fixtures for tagfeed.

Provides in-memory fakes of the content store and search engine ports and
an HTTP client against tagfeed.main:app with the feed dependencies replaced.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Mapping
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from tagfeed.api.v1.dependencies import get_directory_feed_service, get_search_engine
from tagfeed.application.use_cases import (
    DirectoryFeedService,
    RepresentativeItemSelector,
    TagDiscoveryService,
)
from tagfeed.domain.entities import ContentNode, SearchHit
from tagfeed.domain.exceptions import SearchException
from tagfeed.main import app

TAG_TYPE = "sakai/tag"
POOLED_TYPE = "sakai/pooled-content"
DIRECTORY_TYPE = "sakai/directory"


class FakeContentStore:
    """In-memory content store: path -> properties, children by path prefix."""

    def __init__(self, nodes: Mapping[str, Mapping[str, Any]]) -> None:
        self.nodes = dict(nodes)
        self.listed: list[str] = []

    async def get_node(self, path: str) -> ContentNode | None:
        if path not in self.nodes:
            return None
        return ContentNode(path, self.nodes[path])

    async def list_children(self, path: str) -> list[ContentNode]:
        self.listed.append(path)
        prefix = path.rstrip("/") + "/"
        return [
            ContentNode(p, props)
            for p, props in self.nodes.items()
            if p.startswith(prefix) and "/" not in p[len(prefix):]
        ]

    async def get_metadata(self, node: ContentNode) -> Mapping[str, Any]:
        return dict(node.properties)


class FakeSearchEngine:
    """Answers queries from a responder and records every call."""

    def __init__(self, responder: Callable[[str], list[dict[str, Any]]]) -> None:
        self.responder = responder
        self.calls: list[tuple[str, str | None, int | None]] = []

    async def search(
        self, query: str, sort: str | None = None, limit: int | None = None
    ) -> list[SearchHit]:
        self.calls.append((query, sort, limit))
        docs = self.responder(query)
        if limit is not None:
            docs = docs[:limit]
        return [SearchHit(d) for d in docs]

    async def ping(self) -> bool:
        return True


def failing_responder(query: str) -> list[dict[str, Any]]:
    raise SearchException(query, "Solr is down")


def build_feed_service(
    store: FakeContentStore,
    engine: FakeSearchEngine,
    seed: int = 7,
) -> DirectoryFeedService:
    return DirectoryFeedService(
        content_store=store,
        tag_discovery=TagDiscoveryService(engine, TAG_TYPE),
        selector=RepresentativeItemSelector(engine, POOLED_TYPE, rng=random.Random(seed)),
        directory_resource_type=DIRECTORY_TYPE,
    )


@pytest.fixture
def sports_store() -> FakeContentStore:
    """Directory /tags/sports with categories soccer and empty-cat."""
    return FakeContentStore(
        {
            "/tags/sports": {"sling:resourceType": DIRECTORY_TYPE, "title": "Sports"},
            "/tags/sports/soccer": {"title": "Soccer", "sakai:tag-count": 2},
            "/tags/sports/empty-cat": {"title": "Empty"},
        }
    )


@pytest.fixture
def sports_engine() -> FakeSearchEngine:
    """Tags t1, t2 under soccer; three pooled items A, B, C without descriptions."""

    def responder(query: str) -> list[dict[str, Any]]:
        if query.startswith("path:\\/tags\\/sports\\/soccer AND"):
            return [{"id": "tag-1", "tagname": "t1"}, {"id": "tag-2", "tagname": ["t2"]}]
        if query.startswith("path:"):
            return []
        if query.startswith("tag:(t1 t2)"):
            return [
                {"id": "A", "resourceType": POOLED_TYPE, "tag": ["t1"]},
                {"id": "B", "resourceType": POOLED_TYPE, "tag": ["t2"]},
                {"id": "C", "resourceType": POOLED_TYPE, "tag": ["t1", "t2"]},
            ]
        return []

    return FakeSearchEngine(responder)


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI). Clears overrides afterwards."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def override_feed() -> Callable[[FakeContentStore, FakeSearchEngine], None]:
    """Install fake collaborators for the directory feed endpoint."""

    def install(store: FakeContentStore, engine: FakeSearchEngine) -> None:
        app.dependency_overrides[get_directory_feed_service] = lambda: build_feed_service(
            store, engine
        )
        app.dependency_overrides[get_search_engine] = lambda: engine

    return install
