"""Association lists: maps, multimaps and sets, optionally kept sorted."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from taskboard.linked_list import LinkedList

Predicate = Callable[[Any, Any], bool]


@dataclass
class MapPair:
    """A key with its associated value."""

    key: Any
    value: Any


class Map:
    """Map of unique keys.

    With ``lower_than`` the pairs are kept sorted by key and two keys are
    equal when neither is lower than the other. With ``is_equal`` the
    pairs keep insertion order. With neither, keys are compared with ``==``.
    """

    def __init__(
        self,
        is_equal: Predicate | None = None,
        lower_than: Predicate | None = None,
    ) -> None:
        if is_equal is None and lower_than is None:
            is_equal = operator.eq
        self._is_equal = is_equal
        self._lower_than = lower_than
        self._pairs = LinkedList()

    def _matches(self, pair: MapPair, key: Any) -> bool:
        if self._is_equal is not None and self._is_equal(pair.key, key):
            return True
        lt = self._lower_than
        return lt is not None and not lt(pair.key, key) and not lt(key, pair.key)

    def _add(self, key: Any, value: Any) -> None:
        pair = MapPair(key, value)
        lt = self._lower_than
        if lt is None:
            self._pairs.push_back(pair)
            return
        index = next(
            (i for i, existing in enumerate(self._pairs) if lt(key, existing.key)),
            len(self._pairs),
        )
        if index == 0:
            self._pairs.push_front(pair)
            return
        self._pairs.first()
        for _ in range(index - 1):
            self._pairs.next()
        self._pairs.push_current(pair)

    def insert(self, key: Any, value: Any) -> None:
        """Add the pair unless an equal key is already present."""
        if self.search(key) is None:
            self._add(key, value)

    def remove(self, key: Any) -> MapPair:
        """Remove and return the first pair whose key equals ``key``."""
        pair = self.search(key)
        if pair is None:
            raise KeyError(key)
        self._pairs.pop_current()
        return pair

    def search(self, key: Any) -> MapPair | None:
        """Return the first pair whose key equals ``key``, or None."""
        pair = self._pairs.first()
        while pair is not None:
            if self._matches(pair, key):
                return pair
            pair = self._pairs.next()
        return None

    def first(self) -> MapPair | None:
        """Start a walk over the pairs and return the first, or None."""
        return self._pairs.first()

    def next(self) -> MapPair | None:
        """Continue a walk; None at the end."""
        return self._pairs.next()

    def clean(self) -> None:
        """Remove every pair."""
        self._pairs.clean()

    def __iter__(self) -> Iterator[MapPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class MultiMap(Map):
    """Map that accepts several pairs with equal keys."""

    def insert(self, key: Any, value: Any) -> None:
        """Add the pair; among equal sorted keys it goes after the others."""
        self._add(key, value)


class Set:
    """Collection of unique values."""

    def __init__(
        self,
        is_equal: Predicate | None = None,
        lower_than: Predicate | None = None,
    ) -> None:
        self._map = Map(is_equal=is_equal, lower_than=lower_than)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless an equal one is present."""
        self._map.insert(value, value)

    def remove(self, value: Any) -> Any:
        """Remove and return the stored value equal to ``value``."""
        return self._map.remove(value).value

    def search(self, value: Any) -> Any:
        """Return the stored value equal to ``value``, or None."""
        pair = self._map.search(value)
        return None if pair is None else pair.value

    def clean(self) -> None:
        """Remove every value."""
        self._map.clean()

    def __contains__(self, value: Any) -> bool:
        return self._map.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return (pair.value for pair in self._map)

    def __len__(self) -> int:
        return len(self._map)