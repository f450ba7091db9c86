"""Local filesystem content store with path validation.

A node is a directory under content_root. Its properties live in a JSON
sidecar file inside that directory (missing sidecar means no properties).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from tagfeed.domain.entities import ContentNode
from tagfeed.domain.exceptions import StoreUnavailableException, ValidationException
from tagfeed.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


class LocalContentStore:
    """IContentStore implementation reading a directory tree.

    Children are listed sorted by name, which is the store's traversal order.
    """

    def __init__(self, content_root: str, metadata_filename: str = ".content.json") -> None:
        self.content_root = Path(content_root).resolve()
        self.metadata_filename = metadata_filename

    def _get_full_path(self, path: str) -> Path:
        """Resolve a content path under content_root. Raises ValidationException on traversal."""
        full_path = (self.content_root / path.strip("/")).resolve()
        try:
            full_path.relative_to(self.content_root)
        except ValueError as e:
            raise ValidationException(f"Path escapes content root: {path}", field="path") from e
        return full_path

    def _content_path(self, full_path: Path) -> str:
        relative = full_path.relative_to(self.content_root).as_posix()
        return "/" if relative == "." else f"/{relative}"

    async def _read_properties(self, full_path: Path, path: str) -> dict[str, Any]:
        meta_path = full_path / self.metadata_filename
        try:
            if not await aiofiles.os.path.exists(meta_path):
                return {}
            async with aiofiles.open(meta_path, "r", encoding="utf-8") as f:
                content = await f.read()
        except OSError as e:
            raise StoreUnavailableException(path, str(e)) from e
        try:
            result = json.loads(content)
        except json.JSONDecodeError as e:
            raise StoreUnavailableException(path, f"invalid metadata JSON: {e}") from e
        if not isinstance(result, dict):
            raise StoreUnavailableException(path, "metadata is not a JSON object")
        return result

    @traced("content.get_node")
    async def get_node(self, path: str) -> ContentNode | None:
        full_path = self._get_full_path(path)
        try:
            if not await aiofiles.os.path.isdir(full_path):
                return None
        except OSError as e:
            raise StoreUnavailableException(path, str(e)) from e
        node_path = self._content_path(full_path)
        return ContentNode(node_path, await self._read_properties(full_path, node_path))

    @traced("content.list_children")
    async def list_children(self, path: str) -> list[ContentNode]:
        """Return child nodes sorted by name; [] when path does not exist."""
        full_path = self._get_full_path(path)
        try:
            if not await aiofiles.os.path.isdir(full_path):
                return []
            names = sorted(await aiofiles.os.listdir(full_path))
        except OSError as e:
            logger.warning("Listing %s failed: %s", path, e)
            raise StoreUnavailableException(path, str(e)) from e
        children = []
        for name in names:
            child = full_path / name
            if name == self.metadata_filename or not await aiofiles.os.path.isdir(child):
                continue
            child_path = self._content_path(child)
            children.append(ContentNode(child_path, await self._read_properties(child, child_path)))
        return children

    async def get_metadata(self, node: ContentNode) -> Mapping[str, Any]:
        return dict(node.properties)
