"""Application use cases: tag discovery, item selection, feed assembly."""

from tagfeed.application.use_cases.directory_feed import DirectoryFeedService
from tagfeed.application.use_cases.representative_item import (
    RepresentativeItemSelector,
    has_non_empty_description,
    select_one_result,
)
from tagfeed.application.use_cases.tag_discovery import TagDiscoveryService

__all__ = [
    "DirectoryFeedService",
    "RepresentativeItemSelector",
    "TagDiscoveryService",
    "has_non_empty_description",
    "select_one_result",
]
