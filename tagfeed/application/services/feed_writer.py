"""Incremental JSON rendering of the feed document.

Entries are rendered one category at a time into a text buffer. With tidy
output the text matches json.dumps(..., indent=2) of the whole document.
"""

from __future__ import annotations

import io
import json
from collections.abc import Mapping
from typing import Any

from tagfeed.application.dtos.feed import UNBOUNDED_DEPTH


def trim_to_depth(properties: Mapping[str, Any], depth: int) -> dict[str, Any]:
    """Return a copy of properties with nested mappings kept down to depth levels.

    depth 0 keeps only non-mapping values; UNBOUNDED_DEPTH keeps everything.
    """
    out: dict[str, Any] = {}
    for key, value in properties.items():
        if isinstance(value, Mapping):
            if depth == UNBOUNDED_DEPTH:
                out[key] = trim_to_depth(value, UNBOUNDED_DEPTH)
            elif depth > 0:
                out[key] = trim_to_depth(value, depth - 1)
        else:
            out[key] = value
    return out


class FeedWriter:
    """Writes a top-level JSON object one key at a time."""

    def __init__(self, tidy: bool = False) -> None:
        self.tidy = tidy
        self._buffer = io.StringIO()
        self._count = 0
        self._closed = False
        self._buffer.write("{")

    def write_entry(self, key: str, value: Any) -> None:
        if self._closed:
            raise RuntimeError("FeedWriter is closed")
        if self._count:
            self._buffer.write(",")
        if self.tidy:
            body = json.dumps(value, indent=2, ensure_ascii=False).replace("\n", "\n  ")
            self._buffer.write(f"\n  {json.dumps(key, ensure_ascii=False)}: {body}")
        else:
            body = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
            self._buffer.write(f"{json.dumps(key, ensure_ascii=False)}:{body}")
        self._count += 1

    def close(self) -> str:
        """Finish the object and return the full document text."""
        if not self._closed:
            if self.tidy and self._count:
                self._buffer.write("\n")
            self._buffer.write("}")
            self._closed = True
        return self._buffer.getvalue()
