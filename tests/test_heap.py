import random

import pytest

from dstructs.heap import MaxHeap, MinHeap


def _check_heap(levels, higher_or_equal):
    for index in range(1, len(levels)):
        assert higher_or_equal(levels[(index - 1) // 2], levels[index])


def test_min_heap_pops_sorted():
    rng = random.Random(11)
    values = [rng.randint(-50, 50) for _ in range(150)]
    heap = MinHeap(values)
    assert [heap.pop() for _ in range(len(values))] == sorted(values)
    assert len(heap) == 0


def test_max_heap_pops_descending():
    rng = random.Random(12)
    values = [rng.randint(0, 1000) for _ in range(120)]
    heap = MaxHeap(values)
    assert [heap.pop() for _ in range(len(values))] == sorted(values, reverse=True)


def test_min_heap_property_holds():
    rng = random.Random(2)
    heap = MinHeap(rng.sample(range(300), 80))
    _check_heap(heap.breadth_first(), lambda a, b: a <= b)
    heap.pop()
    heap.pop()
    _check_heap(heap.breadth_first(), lambda a, b: a <= b)


def test_max_heap_property_holds():
    rng = random.Random(4)
    heap = MaxHeap(rng.sample(range(300), 80))
    _check_heap(heap.breadth_first(), lambda a, b: a >= b)


def test_peek_matches_extreme():
    values = [7, 3, 9, 1, 5]
    assert MinHeap(values).peek() == min(values)
    assert MaxHeap(values).peek() == max(values)


def test_in_order_is_permutation():
    values = [4, 8, 2, 6, 1, 9]
    heap = MinHeap(values)
    assert sorted(heap.in_order()) == sorted(values)
    assert sorted(heap.breadth_first()) == sorted(values)


def test_sorted_input_keeps_level_order():
    heap = MinHeap([1, 2, 3, 4])
    assert heap.breadth_first() == [1, 2, 3, 4]


def test_empty_heap_errors():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_single_value_round_trip():
    heap = MinHeap()
    heap.push(42)
    assert heap.pop() == 42
    assert heap.breadth_first() == []