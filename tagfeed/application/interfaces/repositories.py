"""Content store interface (port) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from tagfeed.domain.entities import ContentNode


class IContentStore(Protocol):
    """Protocol for the hierarchical content store (directories and categories)."""

    async def get_node(self, path: str) -> ContentNode | None:
        """Return the node at path, or None when it does not exist."""

    async def list_children(self, path: str) -> list[ContentNode]:
        """Return immediate children of path in store traversal order.

        Raises StoreUnavailableException on backend failure.
        """

    async def get_metadata(self, node: ContentNode) -> Mapping[str, Any]:
        """Return the node's properties (surfaced verbatim in the feed)."""
