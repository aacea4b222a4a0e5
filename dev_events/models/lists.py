"""Value objects for the two dynamic list fields of an event."""

from __future__ import annotations

import json
from typing import Iterable, Iterator, List


class _OrderedEntries:
    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: List[str] = []
        for item in items:
            self.add(item)

    def add(self, text: str) -> bool:  # pragma: no cover - overridden
        raise NotImplementedError

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[str]:
        return list(self._items)

    def to_json(self) -> str:
        """Lossless textual encoding used in the multipart payload."""
        return json.dumps(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class TagSet(_OrderedEntries):
    """Ordered set of tags; entries are unique (case-sensitive)."""

    __slots__ = ()

    def add(self, text: str) -> bool:
        """Append the trimmed *text* unless it is empty or already present."""
        tag = text.strip()
        if not tag or tag in self._items:
            return False
        self._items.append(tag)
        return True

    def remove(self, value: str) -> None:
        """Remove every entry equal to *value*; unknown values are ignored."""
        self._items = [tag for tag in self._items if tag != value]

    def __contains__(self, value: object) -> bool:
        return value in self._items


class AgendaList(_OrderedEntries):
    """Chronological agenda; duplicates allowed, removal is by position."""

    __slots__ = ()

    def add(self, text: str) -> bool:
        """Append the trimmed *text* unless it is empty."""
        item = text.strip()
        if not item:
            return False
        self._items.append(item)
        return True

    def remove(self, index: int) -> str:
        """Remove and return the entry at *index*.

        Later entries shift down by one. Raises ``IndexError`` when *index*
        is outside ``0 <= index < len(self)``.
        """
        if not 0 <= index < len(self._items):
            raise IndexError(f"agenda index {index} out of range")
        return self._items.pop(index)

__all__ = ["TagSet", "AgendaList"]
