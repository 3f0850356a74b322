"""
Dynamically allocated list backed by a raw ctypes array of object slots.
"""

import ctypes
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from lists.base_list import BaseList
from lists.iterators import DoubleEndedIntoIter, DoubleEndedIter, DoubleEndedIterMut, Rev

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Capacity allocated by the first push
INITIAL_CAPACITY = 4

# Capacity is multiplied by this whenever the buffer is full
RESIZE_MULTIPLIER = 2


@dataclass(frozen=True)
class GrowthPolicy:
    """How a DynamicList allocates and grows its buffer."""

    initial_capacity: int = INITIAL_CAPACITY
    resize_multiplier: int = RESIZE_MULTIPLIER

    def __post_init__(self):
        if self.initial_capacity < 1:
            raise ValueError(f"initial_capacity must be at least 1, got {self.initial_capacity}")
        if self.resize_multiplier < 2:
            raise ValueError(f"resize_multiplier must be at least 2, got {self.resize_multiplier}")


DEFAULT_POLICY = GrowthPolicy()


class DynamicList(BaseList[T]):
    """
    One-dimensional, dynamically allocated sequence.

    Nothing is allocated until the first push. Indexed access is O(1) and
    push is amortized O(1).
    """

    def __init__(self, items: Iterable[T] | None = None, policy: GrowthPolicy | None = None):
        """
        Args:
            items: Optional iterable of initial elements
            policy: Growth policy; defaults to INITIAL_CAPACITY / RESIZE_MULTIPLIER
        """
        self._policy = policy or DEFAULT_POLICY
        super().__init__(items)

    def _reset_storage(self) -> None:
        self._buf = None
        self._capacity = 0

    def _append(self, value: T) -> None:
        self.push(value)

    def _resize(self, new_capacity: int) -> None:
        logger.debug("Reallocating DynamicList buffer: capacity %d -> %d", self._capacity, new_capacity)
        new_buf = (new_capacity * ctypes.py_object)()
        for i in range(self._len):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = new_capacity

    def capacity(self) -> int:
        """Number of elements the list can hold without reallocating."""
        return self._capacity

    @property
    def policy(self) -> GrowthPolicy:
        return self._policy

    def push(self, value: T) -> None:
        """Append `value`, growing the buffer when it is full."""
        if self._capacity == 0:
            self._resize(self._policy.initial_capacity)
        elif self._len == self._capacity:
            self._resize(self._capacity * self._policy.resize_multiplier)
        self._buf[self._len] = value
        self._len += 1
        self._bump()

    def pop(self) -> T | None:
        """
        Remove the last element and return it.

        Returns:
            The removed value, or None if the list is empty
        """
        if self._len == 0:
            return None
        self._len -= 1
        value = self._buf[self._len]
        self._buf[self._len] = None
        self._bump()
        return value

    def truncate(self, length: int) -> None:
        """
        Keep the first `length` elements and drop the rest.

        Has no effect if `length` is not smaller than the current length.
        Capacity is left unchanged.
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if length >= self._len:
            return
        # Header shrinks before the dropped slots are released
        old_len, self._len = self._len, length
        for i in range(length, old_len):
            self._buf[i] = None
        self._bump()

    def clear(self) -> None:
        self.truncate(0)

    def _locate(self, index: int) -> tuple[Any, Any]:
        return self._buf, index

    def _slot(self, cursor: int) -> tuple[Any, Any]:
        return self._buf, cursor

    def _step_front(self, cursor: int) -> int:
        return cursor + 1

    def _step_back(self, cursor: int) -> int:
        return cursor - 1

    def iter(self) -> DoubleEndedIter[T]:
        return DoubleEndedIter(self, 0, self._len - 1, self._len)

    def iter_mut(self) -> DoubleEndedIterMut[T]:
        return DoubleEndedIterMut(self, 0, self._len - 1, self._len)

    def iter_rev(self) -> Rev[T]:
        """Iterate from the last element to the first."""
        return self.iter().rev()

    def __reversed__(self):
        return self.iter_rev()

    def into_iter(self) -> DoubleEndedIntoIter[T]:
        """Move the buffer into an owned iterator, leaving this list empty."""
        moved = type(self)(policy=self._policy)
        moved._buf, moved._capacity, moved._len = self._buf, self._capacity, self._len
        self._reset_storage()
        self._len = 0
        self._bump()
        cursor = moved.iter()
        return DoubleEndedIntoIter(cursor.__next__, cursor.next_back, cursor.__len__)
