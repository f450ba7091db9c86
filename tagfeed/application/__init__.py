"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (content store, search engine).
"""

from tagfeed.application.interfaces import IContentStore, ISearchEngine
from tagfeed.application.use_cases import (
    DirectoryFeedService,
    RepresentativeItemSelector,
    TagDiscoveryService,
)

__all__ = [
    "DirectoryFeedService",
    "IContentStore",
    "ISearchEngine",
    "RepresentativeItemSelector",
    "TagDiscoveryService",
]
