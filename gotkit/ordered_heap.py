"""Heap routines for lists of naturally ordered values."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

_Before = Callable[[Any, Any], bool]


def _lt(a: Any, b: Any) -> bool:
    return a < b


def _gt(a: Any, b: Any) -> bool:
    return a > b


def _up(items: List[Any], i: int, before: _Before) -> None:
    while i > 0:
        parent = (i - 1) // 2
        if not before(items[i], items[parent]):
            break
        items[parent], items[i] = items[i], items[parent]
        i = parent


def _down(items: List[Any], i: int, before: _Before) -> bool:
    start = i
    n = len(items)
    while True:
        left = 2 * i + 1
        if left >= n:
            break
        best = i if not before(items[left], items[i]) else left
        right = left + 1
        if right < n and before(items[right], items[best]):
            best = right
        if best == i:
            break
        items[i], items[best] = items[best], items[i]
        i = best
    return i != start


def _init(items: List[Any], before: _Before) -> None:
    for i in range(len(items) // 2 - 1, -1, -1):
        _down(items, i, before)


def _pop(items: List[Any], before: _Before) -> Optional[Any]:
    if not items:
        return None
    top = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _down(items, 0, before)
    return top


def init_minheap(items: List[Any]) -> None:
    """Arrange ``items`` in place into min-heap order."""
    _init(items, _lt)


def push_minheap(items: List[Any], item: Any) -> None:
    """Add ``item`` to the min-heap ``items``."""
    items.append(item)
    _up(items, len(items) - 1, _lt)


def pop_minheap(items: List[Any]) -> Optional[Any]:
    """Remove and return the least item, or None if ``items`` is empty."""
    return _pop(items, _lt)


def top_heap(items: List[Any]) -> Optional[Any]:
    """The first item of a heap, or None if it is empty."""
    return items[0] if items else None


def slice_is_minheap(items: List[Any]) -> bool:
    """True if no parent in ``items`` is greater than its children."""
    n = len(items)
    for i in range(n // 2):
        left, right = 2 * i + 1, 2 * i + 2
        if left >= n:
            break
        if items[i] > items[left] or (right < n and items[i] > items[right]):
            return False
    return True


class OrderedHeap:
    """A min- or max-heap working in place on the list it is given."""

    def __init__(self, items: List[Any], max_heap: bool = False) -> None:
        self.items = items
        self._before: _Before = _gt if max_heap else _lt
        _init(self.items, self._before)

    def __len__(self) -> int:
        return len(self.items)

    def push(self, item: Any) -> None:
        """Add an item."""
        self.items.append(item)
        _up(self.items, len(self.items) - 1, self._before)

    def pop(self) -> Optional[Any]:
        """Remove and return the top item, or None if empty."""
        return _pop(self.items, self._before)

    def top(self) -> Optional[Any]:
        """The top item, or None if empty."""
        return top_heap(self.items)