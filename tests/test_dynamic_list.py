import logging

import pytest

from lists.builders import dyn_list
from lists.dynamic_list import INITIAL_CAPACITY, RESIZE_MULTIPLIER, DynamicList, GrowthPolicy
from lists.errors import BorrowError


def test_push():
    lst = DynamicList()
    for i in range(32_000):
        lst.push(i)
        assert lst[i] == i
    assert lst.len() == 32_000


def test_capacity_growth():
    lst = DynamicList()
    assert lst.capacity() == 0

    capacities = []
    for i in range(17):
        lst.push(i)
        capacities.append(lst.capacity())

    assert capacities[0] == INITIAL_CAPACITY
    assert capacities[4] == INITIAL_CAPACITY * RESIZE_MULTIPLIER
    assert sorted(set(capacities)) == [4, 8, 16, 32]


def test_custom_policy():
    lst = DynamicList(range(4), policy=GrowthPolicy(initial_capacity=1, resize_multiplier=3))

    assert lst.capacity() == 9
    assert list(lst) == [0, 1, 2, 3]


@pytest.mark.parametrize("kwargs", [{"initial_capacity": 0}, {"resize_multiplier": 1}])
def test_invalid_policy(kwargs):
    with pytest.raises(ValueError):
        GrowthPolicy(**kwargs)


def test_reallocation_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="lists.dynamic_list"):
        dyn_list(1, 2, 3, 4, 5)

    assert "capacity 0 -> 4" in caplog.text
    assert "capacity 4 -> 8" in caplog.text


def test_list_builder():
    lst = dyn_list(1, 2, 3, 4, 5)

    assert lst.len() == 5
    assert [lst[i] for i in range(5)] == [1, 2, 3, 4, 5]


def test_get():
    lst = dyn_list(1, 2, 3)
    lst.get_mut(0).value = 4

    assert lst.get(0) == 4
    assert lst.get(3) is None
    assert lst.get_mut(3) is None


def test_index():
    lst = dyn_list(1, 2, 3)
    lst[0] = 4
    lst[1] = 5
    lst[2] = 6

    assert list(lst) == [4, 5, 6]
    with pytest.raises(IndexError, match="Index '3' out of bounds."):
        lst[3]


def test_pop():
    lst = dyn_list(1, 2)

    assert lst.pop() == 2
    assert lst.pop() == 1
    assert lst.pop() is None
    assert lst.is_empty()


def test_truncate():
    lst = dyn_list(3, 2, 1)
    lst.truncate(5)
    assert lst == dyn_list(3, 2, 1)

    lst.truncate(1)
    assert lst == dyn_list(3)
    assert lst.capacity() == INITIAL_CAPACITY

    with pytest.raises(ValueError):
        lst.truncate(-1)


def test_clear():
    lst = dyn_list("List", "is", "not", "empty")
    assert not lst.is_empty()

    lst.clear()
    assert lst.is_empty()
    assert lst.get(0) is None


def test_iteration():
    lst = dyn_list(1, 2, 3)

    assert list(reversed(lst)) == [3, 2, 1]
    assert list(lst.iter_rev()) == [3, 2, 1]
    for ref in lst.iter_mut():
        ref.value += 1
    assert list(lst) == [2, 3, 4]


def test_into_iter():
    lst = dyn_list(1, 2, 3, 4, 5)
    it = lst.into_iter()

    assert lst.is_empty()
    assert lst.capacity() == 0
    assert it.next_back() == 5
    assert sum(it) == 10


def test_push_invalidates_borrows():
    lst = dyn_list(1, 2, 3, 4)
    it = lst.iter()
    lst.push(5)

    with pytest.raises(BorrowError):
        next(it)


def test_display_and_literal_round_trip():
    lst = dyn_list(1.5, "x", None, True)

    assert str(lst) == "[1.5, 'x', None, True]"
    assert DynamicList.from_str(str(lst)) == lst
