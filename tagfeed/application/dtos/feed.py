"""DTOs for feed rendering options (no dependency on HTTP)."""

from dataclasses import dataclass

UNBOUNDED_DEPTH = -1


@dataclass(frozen=True)
class FeedOptions:
    """Presentation flags for one feed request.

    tidy: pretty-print the JSON document.
    depth: how many nested levels of node properties to serialize
        (-1 for unbounded). Never affects tag discovery or selection.
    """

    tidy: bool = False
    depth: int = 0
