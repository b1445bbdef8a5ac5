"""Queue and stack built on :class:`LinkedList`."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from taskboard.linked_list import LinkedList


class Queue:
    """First-in first-out queue that can also be walked in place."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def insert(self, data: Any) -> None:
        """Add ``data`` at the back."""
        self._list.push_back(data)

    def remove(self) -> Any:
        """Remove and return the front element; raise IndexError when empty."""
        return self._list.pop_front()

    def front(self) -> Any:
        """Return the front element (or None) and start a walk there."""
        return self._list.first()

    def next(self) -> Any:
        """Continue a walk started by :meth:`front`; None at the end."""
        return self._list.next()

    def clean(self) -> None:
        """Remove every element."""
        self._list.clean()

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._list)


class Stack:
    """Last-in first-out stack."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        self._list.push_front(data)

    def top(self) -> Any:
        """Return the top element, or None when empty."""
        return self._list.first()

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError when empty."""
        return self._list.pop_front()

    def clean(self) -> None:
        """Remove every element."""
        self._list.clean()

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return iter(self._list)