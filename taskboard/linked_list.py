"""Ordered sequence with a movable cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class LinkedList:
    """Ordered sequence whose cursor is moved by :meth:`first` and :meth:`next`.

    The cursor marks the "current" element used by :meth:`push_current`
    and :meth:`pop_current`. Iterating over the list never moves it.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []
        self._cursor: int | None = None

    def first(self) -> Any:
        """Move the cursor to the first element and return it, or None if empty."""
        if not self._items:
            return None
        self._cursor = 0
        return self._items[0]

    def next(self) -> Any:
        """Advance the cursor and return the element, or None at the end.

        At the end the cursor stays where it was.
        """
        if self._cursor is None or self._cursor + 1 >= len(self._items):
            return None
        self._cursor += 1
        return self._items[self._cursor]

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the start; the cursor keeps its element."""
        self._items.insert(0, data)
        if self._cursor is not None:
            self._cursor += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the end."""
        self._items.append(data)

    def push_current(self, data: Any) -> None:
        """Insert ``data`` right after the current element."""
        if self._cursor is None:
            raise IndexError("no current element")
        self._items.insert(self._cursor + 1, data)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("pop from empty list")
        data = self._items.pop(0)
        if self._cursor is not None:
            self._cursor = None if self._cursor == 0 else self._cursor - 1
        return data

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty list")
        data = self._items.pop()
        if self._cursor is not None and self._cursor >= len(self._items):
            self._cursor = None
        return data

    def pop_current(self) -> Any:
        """Remove and return the current element.

        The cursor moves to the element that followed it, or is cleared
        when the removed element was the last one.
        """
        if self._cursor is None:
            raise IndexError("no current element")
        data = self._items.pop(self._cursor)
        if self._cursor >= len(self._items):
            self._cursor = None
        return data

    def clean(self) -> None:
        """Remove every element and clear the cursor."""
        self._items.clear()
        self._cursor = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"