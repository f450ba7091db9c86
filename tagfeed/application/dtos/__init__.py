"""Application DTOs."""

from tagfeed.application.dtos.feed import UNBOUNDED_DEPTH, FeedOptions
from tagfeed.application.dtos.selection import SelectionResult

__all__ = ["FeedOptions", "SelectionResult", "UNBOUNDED_DEPTH"]
