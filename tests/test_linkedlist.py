import random

import pytest

from dstructs.linkedlist import LinkedList, SortedList


def test_list_keeps_order():
    items = [3, 1, 5]
    linked = LinkedList(items)
    assert list(linked) == items
    assert len(linked) == len(items)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0
    assert linked.render() == ""


def test_render_one_item_per_line():
    assert LinkedList([3, 1, 5]).render() == "3\n1\n5\n"


@pytest.mark.parametrize("size, bound", [(0, 10), (1, 1), (20, 7), (50, 100)])
def test_random_list_size_and_bounds(size, bound):
    linked = LinkedList.random(size, bound, random.Random(1))
    assert len(linked) == size
    assert all(0 <= item < bound for item in linked)


def test_random_list_is_reproducible():
    first = LinkedList.random(15, 100, random.Random(42))
    second = LinkedList.random(15, 100, random.Random(42))
    assert list(first) == list(second)


def test_random_list_places_last_draw_first():
    rng = random.Random(7)
    draws = [rng.randrange(100) for _ in range(10)]
    linked = LinkedList.random(10, 100, random.Random(7))
    assert list(linked) == draws[::-1]


def test_random_list_rejects_empty_range():
    with pytest.raises(ValueError):
        LinkedList.random(3, 0)


def test_extend_appends():
    first = LinkedList([1, 2])
    first.extend(LinkedList([3, 4]))
    assert list(first) == [1, 2, 3, 4]
    first.extend([])
    assert list(first) == [1, 2, 3, 4]


def test_extend_empty_list():
    linked = LinkedList()
    linked.extend([9, 8])
    assert list(linked) == [9, 8]


def test_extend_with_itself():
    linked = LinkedList([1, 2])
    linked.extend(linked)
    assert list(linked) == [1, 2, 1, 2]


def test_clear():
    linked = LinkedList([1, 2, 3])
    linked.clear()
    assert len(linked) == 0
    assert list(linked) == []


def test_sorted_list_orders_items():
    items = [5, 3, 9, 1, 3, 7]
    sorted_list = SortedList(items)
    assert list(sorted_list) == sorted(items)
    assert len(sorted_list) == len(items)


def test_sorted_list_membership():
    sorted_list = SortedList([4, 8, 2])
    assert 8 in sorted_list
    assert 5 not in sorted_list
    assert 1 not in SortedList()


def test_sorted_list_remove_one_occurrence():
    sorted_list = SortedList([3, 1, 3, 2])
    sorted_list.remove(3)
    assert list(sorted_list) == [1, 2, 3]
    assert len(sorted_list) == 3


def test_sorted_list_remove_absent_is_noop():
    sorted_list = SortedList([1, 5, 9])
    sorted_list.remove(4)
    sorted_list.remove(10)
    assert list(sorted_list) == [1, 5, 9]


def test_sorted_list_remove_everything():
    items = [6, 2, 4]
    sorted_list = SortedList(items)
    for item in items:
        sorted_list.remove(item)
    assert list(sorted_list) == []
    assert len(sorted_list) == 0