"""Search engine interface (port) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tagfeed.domain.entities import SearchHit


class ISearchEngine(Protocol):
    """Protocol for the structured/full-text search collaborator."""

    async def search(
        self,
        query: str,
        sort: str | None = None,
        limit: int | None = None,
    ) -> list[SearchHit]:
        """Run query and return hits in engine order.

        sort is passed through verbatim (e.g. "random_42 asc"). limit caps the
        number of hits; None means every hit. Raises SearchException on
        malformed query or backend failure.
        """

    async def ping(self) -> bool:
        """Return True when the engine answers a health request."""
