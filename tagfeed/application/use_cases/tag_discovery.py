"""Tag discovery: find the tags structurally scoped to a category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tagfeed.application.services.query_builder import QueryBuilder
from tagfeed.core.constants import (
    FIELD_PATH,
    FIELD_RESOURCE_TYPE,
    FIELD_TAG_NAME,
    TAG_NAME_MISSING,
)

if TYPE_CHECKING:
    from tagfeed.application.interfaces.services import ISearchEngine

logger = logging.getLogger(__name__)


class TagDiscoveryService:
    """Lists tag names whose path equals a category path."""

    def __init__(self, search_engine: "ISearchEngine", tag_resource_type: str) -> None:
        self.search_engine = search_engine
        self.tag_resource_type = tag_resource_type

    def build_query(self, category_path: str) -> str:
        return (
            QueryBuilder()
            .where(FIELD_PATH, category_path)
            .where(FIELD_RESOURCE_TYPE, self.tag_resource_type)
            .build()
        )

    async def discover_tags(self, category_path: str) -> list[str]:
        """Return tag names in engine order; [] when none.

        A hit without a tag name contributes TAG_NAME_MISSING. SearchException
        from the engine propagates unchanged.
        """
        hits = await self.search_engine.search(self.build_query(category_path))
        tags = []
        for hit in hits:
            name = hit.get(FIELD_TAG_NAME)
            tags.append(TAG_NAME_MISSING if name is None else str(name))
        logger.debug("Found %d tags under %s", len(tags), category_path)
        return tags
