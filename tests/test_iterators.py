import pytest

from lists.builders import dl_list, dyn_list, sl_list
from lists.doubly_linked_list import DoublyLinkedList
from lists.errors import BorrowError
from lists.iterators import Rev
from lists.refs import ValueRef
from lists.singly_linked_list import SinglyLinkedList


@pytest.fixture(params=[sl_list, dl_list, dyn_list], ids=["singly", "doubly", "dynamic"])
def build(request):
    return request.param


def test_sum_via_owned_iteration(build):
    lst = build(1, 2, 3, 4, 5)
    assert sum(lst.into_iter()) == 15


def test_owned_iterator_yields_once(build):
    it = build(1, 2).into_iter()

    assert list(it) == [1, 2]
    assert list(it) == []


def test_reference_iterator_is_lazy_and_sized(build):
    it = build(1, 2, 3).iter()

    assert len(it) == 3
    assert next(it) == 1
    assert len(it) == 2


def test_empty_iterators(build):
    lst = build()

    assert list(lst.iter()) == []
    assert list(lst.iter_mut()) == []
    assert list(lst.into_iter()) == []


def test_iterating_a_moved_list_sees_nothing(build):
    lst = build(1, 2, 3)
    it = lst.iter()
    lst.into_iter()

    with pytest.raises(BorrowError):
        next(it)
    assert list(lst) == []


def test_value_ref_equality_and_repr():
    lst = sl_list(1, 2)
    first, second = lst.iter_mut()

    assert isinstance(first, ValueRef)
    assert first == 1
    assert first != second
    assert repr(first) == "ValueRef(1)"

    lst.clear()
    assert repr(first) == "ValueRef(<stale>)"


def test_value_refs_are_unhashable():
    with pytest.raises(TypeError):
        hash(sl_list(1).front_mut())


def test_rev_round_trip():
    it = dl_list(1, 2, 3).iter()
    rev = it.rev()

    assert isinstance(rev, Rev)
    assert next(rev) == 3
    assert rev.rev() is it
    assert next(it) == 1
    assert rev.next_back() == 2


def test_state_machine():
    for lst in (SinglyLinkedList(), DoublyLinkedList()):
        assert lst.is_empty()
        lst.push_back(1)
        lst.push_front(0)
        assert not lst.is_empty()
        lst.pop_back()
        assert not lst.is_empty()
        lst.pop_front()
        assert lst.is_empty()
        lst.push_back(2)
        assert list(lst) == [2]


def test_lists_of_different_types_are_not_equal():
    assert sl_list(1, 2) != dl_list(1, 2)
    assert dl_list(1, 2) != dyn_list(1, 2)
