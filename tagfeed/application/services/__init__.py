"""Application services: query construction and feed rendering."""

from tagfeed.application.services.feed_writer import FeedWriter, trim_to_depth
from tagfeed.application.services.query_builder import (
    QueryBuilder,
    escape_query_chars,
    random_sort_spec,
)

__all__ = [
    "FeedWriter",
    "QueryBuilder",
    "escape_query_chars",
    "random_sort_spec",
    "trim_to_depth",
]
