"""A binary heap ordered by caller-supplied ``less`` and ``equal`` functions."""

from __future__ import annotations

import functools
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")

CompareFunction = Callable[[T, T], bool]


class Heap(Generic[T]):
    """A binary heap over a list.

    The element for which ``less`` holds against all others sits on top, so
    ``less = a < b`` gives a min-heap and ``less = a > b`` a max-heap. The
    heap works on ``items`` in place.
    """

    def __init__(
        self,
        items: List[T],
        less: CompareFunction[T],
        equal: CompareFunction[T],
    ) -> None:
        self.items = items
        self.less = less
        self.equal = equal

    def __len__(self) -> int:
        return len(self.items)

    def init(self) -> None:
        """Arrange the items into heap order."""
        for i in range(len(self.items) // 2 - 1, -1, -1):
            self._down(i)

    def swap(self, i: int, j: int) -> None:
        """Swap the items at positions ``i`` and ``j``."""
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def empty(self) -> bool:
        """True if the heap holds no items."""
        return not self.items

    def is_heap(self) -> bool:
        """True if every parent is not greater than its children."""
        n = len(self.items)
        for i in range(n // 2):
            left, right = 2 * i + 1, 2 * i + 2
            if left >= n:
                break
            if self._gt(i, left) or (right < n and self._gt(i, right)):
                return False
        return True

    def push(self, item: T) -> None:
        """Add an item."""
        self.items.append(item)
        self._up(len(self.items) - 1)

    def pop(self) -> Optional[T]:
        """Remove and return the top item, or None if the heap is empty."""
        if not self.items:
            return None
        top = self.items[0]
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            self._down(0)
        return top

    def replace(self, item: T, index: int) -> Optional[T]:
        """Put ``item`` at ``index`` and return what was there.

        Returns None when ``index`` is past the end.
        """
        if index < 0:
            raise IndexError("heap index must not be negative")
        if index >= len(self.items):
            return None
        replaced = self.items[index]
        self.items[index] = item
        if not self._down(index):
            self._up(index)
        return replaced

    def top(self) -> Optional[T]:
        """The top item, or None if the heap is empty."""
        return self.items[0] if self.items else None

    def _up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._gt(parent, i):
                break
            self.swap(parent, i)
            i = parent

    def _down(self, i: int) -> bool:
        start = i
        n = len(self.items)
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            right = left + 1
            smallest = self._min2(i, left)
            if right < n:
                smallest = self._min2(smallest, right)
            if smallest == i:
                break
            self.swap(i, smallest)
            i = smallest
        return i != start

    def _min2(self, i: int, j: int) -> int:
        return i if self._lt_eq(i, j) else j

    def _gt(self, i: int, j: int) -> bool:
        a, b = self.items[i], self.items[j]
        return not self.less(a, b) and not self.equal(a, b)

    def _lt_eq(self, i: int, j: int) -> bool:
        a, b = self.items[i], self.items[j]
        return self.less(a, b) or self.equal(a, b)


def new_heap(
    items: Sequence[T], less: CompareFunction[T], equal: CompareFunction[T]
) -> Heap[T]:
    """A heap over a copy of ``items``, not yet arranged."""
    return Heap(list(items), less, equal)


def new_heap_init(
    items: Sequence[T], less: CompareFunction[T], equal: CompareFunction[T]
) -> Heap[T]:
    """A heap over a copy of ``items``, arranged into heap order."""
    heap = new_heap(items, less, equal)
    heap.init()
    return heap


def take_as_heap(
    items: List[T], less: CompareFunction[T], equal: CompareFunction[T]
) -> Heap[T]:
    """A heap working directly on ``items``, not yet arranged."""
    return Heap(items, less, equal)


def sort_top_n(
    items: List[T], n: int, less: CompareFunction[T], equal: CompareFunction[T]
) -> List[T]:
    """Move the ``n`` least items (by ``less``) to the front of ``items``.

    Works in place and returns ``items``. The front ``n`` items are ordered
    from the greatest of them to the least; the rest stay in no set order.
    When ``n`` covers the whole list, the list is only arranged as a heap.
    """
    if n >= len(items):
        take_as_heap(items, less, equal).init()
        return items
    if n <= 0:
        return items

    def larger(x: T, y: T) -> bool:
        return not less(x, y) and not equal(x, y)

    max_heap = Heap(items[:n], larger, equal)
    max_heap.init()
    for i in range(n, len(items)):
        if less(items[i], max_heap.top()):
            items[i] = max_heap.replace(items[i], 0)

    def compare(x: T, y: T) -> int:
        if larger(x, y):
            return -1
        if larger(y, x):
            return 1
        return 0

    items[:n] = sorted(max_heap.items, key=functools.cmp_to_key(compare))
    return items