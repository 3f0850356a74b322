"""
Iterator adapters shared by all list types.

Borrowing iterators walk the owner's storage through three hooks on the list:
``_slot(cursor)``, ``_step_front(cursor)`` and ``_step_back(cursor)``. They
count down the remaining elements rather than comparing cursors, so a
double-ended iterator stops exactly when its two ends meet.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from lists.refs import ValueRef

if TYPE_CHECKING:
    from lists.base_list import BaseList

T = TypeVar("T")


class Iter(Iterator[T], Generic[T]):
    """Forward iterator over the values of a list, borrowing it."""

    def __init__(self, owner: "BaseList[T]", front: Any, length: int):
        self._owner = owner
        self._epoch = owner._epoch
        self._front = front
        self._remaining = length

    def __iter__(self):
        return self

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining

    def _yield(self, slot: Any, key: Any) -> Any:
        return self._owner._read(slot, key)

    def __next__(self) -> T:
        self._owner._check_epoch(self._epoch)
        if self._remaining == 0:
            raise StopIteration
        slot, key = self._owner._slot(self._front)
        self._remaining -= 1
        if self._remaining:
            self._front = self._owner._step_front(self._front)
        return self._yield(slot, key)


class IterMut(Iter[T]):
    """Forward iterator yielding a ValueRef for each element."""

    def _yield(self, slot: Any, key: Any) -> ValueRef[T]:
        return ValueRef(self._owner, slot, key)


class DoubleEndedIter(Iter[T]):
    """
    Iterator consumable from both ends.

    next() takes from the front, next_back() from the back. Each element is
    produced once regardless of how calls to the two ends are interleaved.
    """

    def __init__(self, owner: "BaseList[T]", front: Any, back: Any, length: int):
        super().__init__(owner, front, length)
        self._back = back

    def next_back(self) -> T:
        """
        Take the next element from the back end.

        Raises:
            StopIteration: When the two ends have met
        """
        self._owner._check_epoch(self._epoch)
        if self._remaining == 0:
            raise StopIteration
        slot, key = self._owner._slot(self._back)
        self._remaining -= 1
        if self._remaining:
            self._back = self._owner._step_back(self._back)
        return self._yield(slot, key)

    def rev(self) -> "Rev[T]":
        """Return a view of this iterator that consumes from the back."""
        return Rev(self)

    def __reversed__(self):
        return Rev(self)


class DoubleEndedIterMut(DoubleEndedIter[T]):
    """Double-ended iterator yielding a ValueRef for each element."""

    def _yield(self, slot: Any, key: Any) -> ValueRef[T]:
        return ValueRef(self._owner, slot, key)


class Rev(Iterator[T], Generic[T]):
    """Swaps the ends of a double-ended iterator."""

    def __init__(self, inner):
        self._inner = inner

    def __iter__(self):
        return self

    def __next__(self) -> T:
        return self._inner.next_back()

    def next_back(self) -> T:
        return next(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def rev(self):
        return self._inner


class IntoIter(Iterator[T], Generic[T]):
    """
    Owned iterator: holds the elements moved out of a list and hands each one
    out exactly once.
    """

    def __init__(self, take_front: Callable[[], T], size: Callable[[], int]):
        """
        Args:
            take_front: Removes and returns the next element from the front
            size: Returns how many elements are left
        """
        self._take_front = take_front
        self._size = size

    def __iter__(self):
        return self

    def __len__(self) -> int:
        return self._size()

    def __length_hint__(self) -> int:
        return self._size()

    def __next__(self) -> T:
        if self._size() == 0:
            raise StopIteration
        return self._take_front()


class DoubleEndedIntoIter(IntoIter[T]):
    """Owned iterator consumable from both ends."""

    def __init__(self, take_front: Callable[[], T], take_back: Callable[[], T], size: Callable[[], int]):
        super().__init__(take_front, size)
        self._take_back = take_back

    def next_back(self) -> T:
        if self._size() == 0:
            raise StopIteration
        return self._take_back()

    def rev(self) -> Rev[T]:
        return Rev(self)

    def __reversed__(self):
        return Rev(self)
