"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the search engine, content store, and feed
use case. Routes depend only on these dependencies, not on infra directly;
tests replace them through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from tagfeed.application.use_cases import (
    DirectoryFeedService,
    RepresentativeItemSelector,
    TagDiscoveryService,
)
from tagfeed.core.config import Settings, get_settings
from tagfeed.infrastructure.content import LocalContentStore
from tagfeed.infrastructure.search import SolrSearchEngine


def get_app_settings() -> Settings:
    return get_settings()


async def get_search_engine(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> SolrSearchEngine:
    """Solr client sharing the lifespan-owned HTTP client."""
    return SolrSearchEngine(
        request.app.state.search_http_client,
        settings.solr_url,
        page_size=settings.solr_page_size,
    )


async def get_content_store(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LocalContentStore:
    return LocalContentStore(
        settings.content_root, metadata_filename=settings.content_metadata_filename
    )


async def get_directory_feed_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
    search_engine: Annotated[SolrSearchEngine, Depends(get_search_engine)],
    content_store: Annotated[LocalContentStore, Depends(get_content_store)],
) -> DirectoryFeedService:
    """Feed use case wired with tag discovery and item selection for one request."""
    return DirectoryFeedService(
        content_store=content_store,
        tag_discovery=TagDiscoveryService(search_engine, settings.tag_resource_type),
        selector=RepresentativeItemSelector(
            search_engine,
            settings.pooled_content_resource_type,
            sort_field_prefix=settings.random_sort_field_prefix,
            sort_bound=settings.random_sort_bound,
            candidate_limit=settings.selection_candidate_limit,
        ),
        directory_resource_type=settings.directory_resource_type,
    )
