"""Representative item selection for a set of tags.

Asks the search engine for pooled content carrying any of the tags, in a
random order that changes on every call, and picks one item: the first hit
with a description, or else the last hit scanned.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tagfeed.application.dtos.selection import SelectionResult
from tagfeed.application.services.query_builder import QueryBuilder, random_sort_spec
from tagfeed.core.constants import (
    FIELD_DESCRIPTION,
    FIELD_RESOURCE_TYPE,
    FIELD_TAG,
    TAG_NAME_MISSING,
)
from tagfeed.domain.entities import ContentItem, SearchHit

if TYPE_CHECKING:
    from tagfeed.application.interfaces.services import ISearchEngine

logger = logging.getLogger(__name__)


def has_non_empty_description(hit: SearchHit) -> bool:
    """Selection heuristic: prefer items that carry a description."""
    description = hit.get(FIELD_DESCRIPTION)
    return description is not None and str(description) != ""


def select_one_result(hits: Iterable[SearchHit]) -> SearchHit | None:
    """Scan hits in order and stop at the first one with a description.

    When no hit qualifies, the last hit scanned is returned (not the first).
    Returns None for no hits.
    """
    best = None
    for hit in hits:
        best = hit
        if has_non_empty_description(hit):
            break
    return best


class RepresentativeItemSelector:
    """Selects one pooled content item tagged with any of a category's tags."""

    def __init__(
        self,
        search_engine: "ISearchEngine",
        pooled_content_resource_type: str,
        rng: random.Random | None = None,
        sort_field_prefix: str = "random_",
        sort_bound: int = 10000,
        candidate_limit: int | None = 25,
    ) -> None:
        self.search_engine = search_engine
        self.pooled_content_resource_type = pooled_content_resource_type
        self.rng = rng or random.Random()
        self.sort_field_prefix = sort_field_prefix
        self.sort_bound = sort_bound
        self.candidate_limit = candidate_limit

    def build_query(self, tags: list[str]) -> str:
        return (
            QueryBuilder()
            .where_any(FIELD_TAG, tags)
            .where(FIELD_RESOURCE_TYPE, self.pooled_content_resource_type)
            .build()
        )

    async def select_representative(self, tags: list[str]) -> SelectionResult:
        """Return the representative item for tags, or an empty result.

        No query is issued when there are no usable tag names.
        """
        usable = [t for t in tags if t != TAG_NAME_MISSING]
        if not usable:
            return SelectionResult.empty()

        # New sort key per call so repeated calls do not favor the same item.
        sort = random_sort_spec(self.rng, self.sort_field_prefix, self.sort_bound)
        hits = await self.search_engine.search(
            self.build_query(usable), sort=sort, limit=self.candidate_limit
        )
        chosen = select_one_result(hits)
        if chosen is None:
            logger.debug("No pooled content for %d tags", len(usable))
            return SelectionResult.empty()
        return SelectionResult(ContentItem.from_hit(chosen, self.sort_field_prefix))
