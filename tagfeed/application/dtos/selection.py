"""Single-shot selection result for the representative item of a category."""

from __future__ import annotations

from tagfeed.domain.entities import ContentItem
from tagfeed.domain.exceptions import ExhaustedCursorException


class SelectionResult:
    """Either one ContentItem or "none found", retrievable exactly once.

    Behaves like a non-restartable sequence of length <= 1: has_next() is
    True until take() has returned the item; any further take() (or a take()
    on an empty result) raises ExhaustedCursorException.
    """

    __slots__ = ("_item", "_retrieved")

    def __init__(self, item: ContentItem | None = None) -> None:
        self._item = item
        self._retrieved = item is None

    @classmethod
    def empty(cls) -> SelectionResult:
        return cls(None)

    @property
    def found(self) -> bool:
        """True when an item was selected (independent of retrieval)."""
        return self._item is not None

    def has_next(self) -> bool:
        return not self._retrieved

    def take(self) -> ContentItem:
        if self._retrieved or self._item is None:
            raise ExhaustedCursorException()
        self._retrieved = True
        return self._item

    def __repr__(self) -> str:
        state = "none" if self._item is None else self._item.id
        return f"SelectionResult({state}, retrieved={self._retrieved})"
