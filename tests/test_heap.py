import random

import pytest

from gotkit.heap import (
    Heap,
    new_heap,
    new_heap_init,
    sort_top_n,
    take_as_heap,
)

TEST_LEN = [0, 1, 2, 3, 4, 5, 6, 7, 8, 126, 127, 128]
MAX_INT = [1, 10, 100, 1000, 100000]
REPEAT = 5


def fun_less(a, b):
    return a < b


def fun_greater(a, b):
    return a > b


def fun_equal(a, b):
    return a == b


def rand_list(rng, length, hi):
    return [rng.randint(-hi, hi) for _ in range(length)]


def test_heap_from_fixed_data():
    d = [43, 56, 33, 55, 23, 44, 12, 34, 45, 67, 89, 90, 33]
    h = take_as_heap(d, fun_less, fun_equal)
    h.init()
    assert h.is_heap()
    assert h.items is d
    assert sorted(d) == sorted([43, 56, 33, 55, 23, 44, 12, 34, 45, 67, 89, 90, 33])
    assert h.top() == 12


@pytest.mark.parametrize("length", TEST_LEN)
@pytest.mark.parametrize("hi", MAX_INT)
def test_new_heap_init(length, hi):
    rng = random.Random(length * 7919 + hi)
    for _ in range(2 * length + 1 if length < 10 else REPEAT):
        d = rand_list(rng, length, hi)
        h = new_heap_init(d, fun_less, fun_equal)
        assert h.is_heap()
        assert len(h) == len(d)
        for _ in range(3):
            h.init()
            assert h.is_heap()
            assert len(h) == len(d)


def test_new_heap_copies_items():
    d = [5, 3, 1]
    h = new_heap(d, fun_less, fun_equal)
    h.init()
    assert d == [5, 3, 1]
    assert h.top() == 1


@pytest.mark.parametrize("length", TEST_LEN)
@pytest.mark.parametrize("hi", MAX_INT)
def test_heap_push(length, hi):
    rng = random.Random(length * 31 + hi)
    lo = -hi
    for _ in range(REPEAT):
        d = rand_list(rng, length, hi)
        h = new_heap_init(d, fun_less, fun_equal)
        rounds = length // 2 + 1
        for v in range(rounds):
            for value in (
                rng.randint(lo, hi),
                hi + v * 2,
                hi + v * 2 - 1,
                lo - v * 2,
                lo - v * 2 + 1,
                hi + v * 2,
                lo - v * 2,
            ):
                h.push(value)
                assert h.is_heap()
        assert len(h) == len(d) + rounds * 7


@pytest.mark.parametrize("length", TEST_LEN)
@pytest.mark.parametrize("hi", MAX_INT)
def test_heap_pop(length, hi):
    rng = random.Random(length * 131 + hi)
    for _ in range(REPEAT):
        d = rand_list(rng, length, hi)
        h = new_heap_init(d, fun_less, fun_equal)
        for v in sorted(d):
            assert h.pop() == v

        h = new_heap_init(d, fun_greater, fun_equal)
        for v in sorted(d, reverse=True):
            assert h.pop() == v
        assert len(h) == 0
        assert h.pop() is None


@pytest.mark.parametrize("length", TEST_LEN)
@pytest.mark.parametrize("hi", MAX_INT)
def test_heap_init_push_and_pop(length, hi):
    rng = random.Random(length * 17 + hi)
    for _ in range(REPEAT):
        d = rand_list(rng, length, hi)
        h = new_heap_init(d, fun_less, fun_equal)
        for _ in range(length + 1):
            h.push(rng.randint(-hi, hi))
            assert h.is_heap()
            h.pop()
            assert h.is_heap()
        previous = -hi - 1
        while len(h) > 0:
            u = h.pop()
            assert previous <= u
            previous = u


def test_top_of_empty_heap_is_none():
    h = new_heap([], fun_less, fun_equal)
    assert h.empty()
    assert h.top() is None


def test_is_heap_detects_disorder():
    h = take_as_heap([3, 1, 2], fun_less, fun_equal)
    assert not h.is_heap()
    h.init()
    assert h.is_heap()


def test_replace_returns_old_and_keeps_heap():
    h = new_heap_init([1, 4, 2, 8, 5], fun_less, fun_equal)
    old = h.replace(0, 3)
    assert old == h.items[0] or old in (1, 4, 2, 8, 5)
    assert h.is_heap()
    assert h.top() == 0


def test_replace_top_sinks():
    h = new_heap_init([1, 4, 2, 8, 5], fun_less, fun_equal)
    assert h.replace(9, 0) == 1
    assert h.is_heap()
    assert sorted(h.items) == [2, 4, 5, 8, 9]


def test_replace_past_end_returns_none():
    h = new_heap_init([1, 2], fun_less, fun_equal)
    assert h.replace(7, 2) is None
    assert h.items == [1, 2]


def test_replace_negative_index_raises():
    h = new_heap_init([1, 2], fun_less, fun_equal)
    with pytest.raises(IndexError):
        h.replace(7, -1)


def test_swap():
    h = Heap([1, 2, 3], fun_less, fun_equal)
    h.swap(0, 2)
    assert h.items == [3, 2, 1]


@pytest.mark.parametrize("n", [1, 3, 5, 10])
def test_sort_top_n_puts_least_in_front(n):
    rng = random.Random(n)
    data = rand_list(rng, 40, 100)
    original = list(data)
    result = sort_top_n(data, n, fun_less, fun_equal)
    assert result is data
    assert sorted(result) == sorted(original)
    assert sorted(result[:n]) == sorted(original)[:n]
    assert result[:n] == sorted(result[:n], reverse=True)


def test_sort_top_n_whole_list_becomes_heap():
    data = [9, 3, 7, 1, 5]
    result = sort_top_n(data, 10, fun_less, fun_equal)
    assert sorted(result) == [1, 3, 5, 7, 9]
    assert take_as_heap(result, fun_less, fun_equal).is_heap()


def test_sort_top_n_zero_leaves_list():
    data = [4, 2, 3]
    assert sort_top_n(data, 0, fun_less, fun_equal) == [4, 2, 3]