"""Domain layer: entities and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tagfeed.domain.entities import ContentItem, ContentNode, SearchHit
from tagfeed.domain.exceptions import (
    ExhaustedCursorException,
    ResourceNotFoundException,
    SearchException,
    StoreUnavailableException,
    TagFeedException,
    ValidationException,
)

__all__ = [
    "ContentItem",
    "ContentNode",
    "ExhaustedCursorException",
    "ResourceNotFoundException",
    "SearchException",
    "SearchHit",
    "StoreUnavailableException",
    "TagFeedException",
    "ValidationException",
]
