import random

from gotkit.ordered_heap import (
    OrderedHeap,
    init_minheap,
    pop_minheap,
    push_minheap,
    slice_is_minheap,
    top_heap,
)

DATA = [43, 56, 33, 55, 23, 44, 12, 34, 45, 67, 89, 90, 33]


def test_ordered_heap_arranges_list():
    d = list(DATA)
    OrderedHeap(d, False)
    assert slice_is_minheap(d)
    assert sorted(d) == sorted(DATA)


def test_ordered_min_heap_pops_ascending():
    h = OrderedHeap(list(DATA))
    assert h.top() == 12
    assert [h.pop() for _ in range(len(DATA))] == sorted(DATA)
    assert h.pop() is None
    assert h.top() is None


def test_ordered_max_heap_pops_descending():
    h = OrderedHeap(list(DATA), max_heap=True)
    assert h.top() == 90
    h.push(100)
    assert h.top() == 100
    assert [h.pop() for _ in range(len(DATA) + 1)] == sorted(DATA + [100], reverse=True)


def test_ordered_heap_push_keeps_order():
    d = []
    h = OrderedHeap(d)
    for value in (5, 1, 9, 1, 3):
        h.push(value)
        assert slice_is_minheap(d)
    assert len(h) == 5
    assert h.top() == 1


def test_minheap_functions_round_trip():
    rng = random.Random(7)
    values = [rng.randint(-1000, 1000) for _ in range(100)]
    items = list(values)
    init_minheap(items)
    assert slice_is_minheap(items)
    push_minheap(items, -5000)
    assert top_heap(items) == -5000
    popped = [pop_minheap(items) for _ in range(len(items))]
    assert popped == sorted(values + [-5000])
    assert items == []


def test_pop_and_top_of_empty():
    items = []
    assert pop_minheap(items) is None
    assert top_heap(items) is None


def test_slice_is_minheap_detects_disorder():
    assert slice_is_minheap([])
    assert slice_is_minheap([1])
    assert not slice_is_minheap([2, 1])
    assert not slice_is_minheap([1, 2, 0])