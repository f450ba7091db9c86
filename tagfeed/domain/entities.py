"""Domain entities: content nodes, search hits, and content items."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tagfeed.core.constants import FIELD_TAG

# Fields the search engine adds to every document; never surfaced in the feed.
ENGINE_INTERNAL_FIELDS = frozenset({"_version_", "score"})

# Hit fields mapped onto ContentItem attributes instead of properties.
_ITEM_FIELDS = frozenset({"id", "resourceType", "description", FIELD_TAG})


def last_element(path: str) -> str:
    """Return the last segment of a slash-separated path ("" for the root)."""
    stripped = path.rstrip("/")
    return stripped.rsplit("/", 1)[-1] if stripped else ""


@dataclass(frozen=True)
class ContentNode:
    """A node in the content store (directory or category)."""

    path: str
    properties: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Leaf path segment; used as the category key in the feed."""
        return last_element(self.path)

    @property
    def resource_type(self) -> str | None:
        value = self.properties.get("sling:resourceType")
        return str(value) if value is not None else None


@dataclass(frozen=True)
class SearchHit:
    """A single search engine document (field name -> value or list of values)."""

    fields: Mapping[str, Any]

    def get(self, name: str) -> Any:
        """Return the first value of a field, or None when absent or empty."""
        value = self.fields.get(name)
        if isinstance(value, (list, tuple)):
            return value[0] if value else None
        return value

    def get_all(self, name: str) -> list[Any]:
        """Return all values of a field as a list (empty when absent)."""
        value = self.fields.get(name)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]


@dataclass(frozen=True)
class ContentItem:
    """A pooled content document eligible to represent a category."""

    id: str
    resource_type: str | None
    description: str | None
    tags: tuple[str, ...] = ()
    properties: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_hit(cls, hit: SearchHit, ignored_prefix: str | None = None) -> ContentItem:
        """Build an item from a hit, dropping engine-internal and sort fields."""
        properties = {
            key: value
            for key, value in hit.fields.items()
            if key not in _ITEM_FIELDS
            and key not in ENGINE_INTERNAL_FIELDS
            and not (ignored_prefix and key.startswith(ignored_prefix))
        }
        item_id = hit.get("id")
        description = hit.get("description")
        resource_type = hit.get("resourceType")
        return cls(
            id="" if item_id is None else str(item_id),
            resource_type=None if resource_type is None else str(resource_type),
            description=None if description is None else str(description),
            tags=tuple(str(t) for t in hit.get_all(FIELD_TAG)),
            properties=properties,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "resourceType": self.resource_type,
            "description": self.description,
            FIELD_TAG: list(self.tags),
            **self.properties,
        }
