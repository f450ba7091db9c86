"""Directory feed assembly: one preview entry per category of a directory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

from tagfeed.application.dtos.feed import FeedOptions
from tagfeed.application.services.feed_writer import FeedWriter, trim_to_depth
from tagfeed.core.constants import FEED_CONTENT_KEY
from tagfeed.domain.exceptions import ResourceNotFoundException
from tagfeed.shared.telemetry.tracing import TracedOperation, add_span_attributes

if TYPE_CHECKING:
    from tagfeed.application.interfaces.repositories import IContentStore
    from tagfeed.application.use_cases.representative_item import (
        RepresentativeItemSelector,
    )
    from tagfeed.application.use_cases.tag_discovery import TagDiscoveryService

logger = logging.getLogger(__name__)


class DirectoryFeedService:
    """Walks the categories of a directory and renders the tag feed.

    Categories are processed one after another in store order. Any
    collaborator error aborts the whole feed; nothing is returned for
    categories processed before the failure.
    """

    def __init__(
        self,
        content_store: "IContentStore",
        tag_discovery: "TagDiscoveryService",
        selector: "RepresentativeItemSelector",
        directory_resource_type: str | None = None,
    ) -> None:
        self.content_store = content_store
        self.tag_discovery = tag_discovery
        self.selector = selector
        self.directory_resource_type = directory_resource_type

    async def iter_entries(
        self, directory_path: str, options: FeedOptions | None = None
    ) -> AsyncIterator[tuple[str, dict[str, Any]]]:
        """Yield (category name, entry) pairs for the directory.

        A missing directory yields nothing. A node of another resource type
        raises ResourceNotFoundException.
        """
        options = options or FeedOptions()
        directory = await self.content_store.get_node(directory_path)
        if directory is None:
            logger.info("Directory %s not found; empty feed", directory_path)
            return
        if (
            self.directory_resource_type is not None
            and directory.resource_type != self.directory_resource_type
        ):
            raise ResourceNotFoundException("directory", directory_path)

        for category in await self.content_store.list_children(directory.path):
            metadata = await self.content_store.get_metadata(category)
            tags = await self.tag_discovery.discover_tags(category.path)
            selection = await self.selector.select_representative(tags)
            content: dict[str, Any] = {}
            if selection.has_next():
                content = trim_to_depth(selection.take().to_dict(), options.depth)
            entry = dict(metadata)
            entry[FEED_CONTENT_KEY] = content
            yield category.name, entry

    async def build_feed(
        self, directory_path: str, options: FeedOptions | None = None
    ) -> str:
        """Render the complete feed document as JSON text."""
        options = options or FeedOptions()
        writer = FeedWriter(tidy=options.tidy)
        count = 0
        with TracedOperation("feed.build", {"feed.directory": directory_path}):
            async for name, entry in self.iter_entries(directory_path, options):
                writer.write_entry(name, entry)
                count += 1
            add_span_attributes(**{"feed.categories": count})
        logger.info("Built tag feed for %s with %d categories", directory_path, count)
        return writer.close()
