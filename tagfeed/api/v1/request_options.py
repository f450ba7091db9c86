"""Request option parsing for selector-style resource paths.

A feed request addresses a resource as "<path>.<selector>...<extension>",
e.g. "tags/sports.tagged.tidy.2.json". Selectors carry presentation flags
only; they never change what the feed selects.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tagfeed.application.dtos.feed import UNBOUNDED_DEPTH, FeedOptions
from tagfeed.core.constants import SELECTOR_INFINITY, SELECTOR_TIDY


@dataclass(frozen=True)
class ResourcePath:
    """A resource path split into content path, selectors, and extension."""

    path: str
    selectors: tuple[str, ...]
    extension: str | None


def parse_resource_path(resource: str) -> ResourcePath:
    """Split "a/b.sel1.sel2.ext" into ("/a/b", ("sel1", "sel2"), "ext").

    Dots in parent segments belong to the path; only the last segment is
    split. A last segment without dots has no selectors and no extension.
    """
    resource = "/" + resource.strip("/")
    parent, _, leaf = resource.rpartition("/")
    name, *rest = leaf.split(".")
    extension = rest.pop() if rest else None
    path = f"{parent}/{name}"
    return ResourcePath(path=path, selectors=tuple(s for s in rest if s), extension=extension)


def parse_selectors(selectors: Sequence[str]) -> FeedOptions:
    """Decode tidy and depth from selectors.

    "tidy" turns on pretty printing, "infinity" means unbounded depth and an
    integer selector sets the depth; later selectors win. Anything else is
    ignored.
    """
    tidy = False
    depth = 0
    for selector in selectors:
        if selector == SELECTOR_TIDY:
            tidy = True
        elif selector == SELECTOR_INFINITY:
            depth = UNBOUNDED_DEPTH
        else:
            try:
                depth = int(selector)
            except ValueError:
                continue
    return FeedOptions(tidy=tidy, depth=depth)
