"""Max-priority queue."""

from __future__ import annotations

import heapq
import itertools
from typing import Any


class Heap:
    """Priority queue whose top is the element with the highest priority."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int, Any]] = []
        self._counter = itertools.count()

    def top(self) -> Any:
        """Return the element with the highest priority, or None when empty."""
        if not self._entries:
            return None
        return self._entries[0][2]

    def push(self, data: Any, priority: int) -> None:
        """Add ``data`` with the given integer priority."""
        heapq.heappush(self._entries, (-priority, next(self._counter), data))

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError when empty."""
        if not self._entries:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._entries)[2]

    def __len__(self) -> int:
        return len(self._entries)