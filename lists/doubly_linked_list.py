"""
Doubly linked list whose back-references never own the node they point to.

Each node owns its successor through ``next``; ``prev`` and the list's tail are
weak references, so the whole chain is kept alive by the head alone and is
released as soon as it is unlinked.
"""

import logging
import weakref
from typing import Any, Generic, TypeVar

from lists.base_list import BaseList
from lists.iterators import DoubleEndedIntoIter, DoubleEndedIter, DoubleEndedIterMut, Rev
from lists.refs import ValueRef

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DoublyNode(Generic[T]):
    """Node for a doubly linked list."""

    __slots__ = ("value", "next", "_prev", "__weakref__")

    def __init__(self, value: T):
        self.value = value
        self.next: DoublyNode[T] | None = None
        self._prev: weakref.ref | None = None

    @property
    def prev(self) -> "DoublyNode[T] | None":
        """The predecessor, or None for the head (or once the predecessor is gone)."""
        if self._prev is None:
            return None
        return self._prev()

    @prev.setter
    def prev(self, node: "DoublyNode[T] | None") -> None:
        self._prev = weakref.ref(node) if node is not None else None

    def __repr__(self):
        return f"Node({self.value!r})"


class DoublyLinkedList(BaseList[T]):
    """
    Two-directional linked list.

    Both ends are O(1); positional operations walk from whichever end is
    closer to the index.
    """

    def _reset_storage(self) -> None:
        self._head: DoublyNode[T] | None = None
        self._tail_ref: weakref.ref | None = None

    @property
    def _tail(self) -> DoublyNode[T] | None:
        if self._tail_ref is None:
            return None
        return self._tail_ref()

    @_tail.setter
    def _tail(self, node: DoublyNode[T] | None) -> None:
        self._tail_ref = weakref.ref(node) if node is not None else None

    def _append(self, value: T) -> None:
        self.push_back(value)

    def _node_at(self, index: int) -> DoublyNode[T]:
        """Walk to the node at an in-bounds `index` from the nearer end."""
        if index < self._len // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._len - 1 - index):
                node = node.prev
        return node

    def _locate(self, index: int) -> tuple[Any, Any]:
        return self._node_at(index), "value"

    def _step_back(self, cursor: DoublyNode[T]) -> DoublyNode[T] | None:
        return cursor.prev

    # ---- ends ----

    def front(self) -> T | None:
        if self._head is None:
            return None
        return self._head.value

    def back(self) -> T | None:
        tail = self._tail
        if tail is None:
            return None
        return tail.value

    def front_mut(self) -> ValueRef[T] | None:
        if self._head is None:
            return None
        return ValueRef(self, self._head)

    def back_mut(self) -> ValueRef[T] | None:
        tail = self._tail
        if tail is None:
            return None
        return ValueRef(self, tail)

    def push_front(self, value: T) -> None:
        """Prepend `value`. O(1)."""
        node = DoublyNode(value)
        head = self._head
        node.next = head
        if head is None:
            self._tail = node
        else:
            head.prev = node
        self._head = node
        self._len += 1
        self._bump()

    def push_back(self, value: T) -> None:
        """Append `value`. O(1)."""
        node = DoublyNode(value)
        tail = self._tail
        if tail is None:
            self._head = node
        else:
            node.prev = tail
            tail.next = node
        self._tail = node
        self._len += 1
        self._bump()

    def pop_front(self) -> T | None:
        """
        Remove the head and return its value. O(1).

        Returns:
            The removed value, or None if the list is empty
        """
        node = self._head
        if node is None:
            return None
        new_head = node.next
        node.next = None
        if new_head is None:
            # list is empty
            self._tail = None
        else:
            new_head.prev = None
        self._head = new_head
        self._len -= 1
        self._bump()
        return node.value

    def pop_back(self) -> T | None:
        """
        Remove the tail and return its value. O(1).

        Returns:
            The removed value, or None if the list is empty
        """
        node = self._tail
        if node is None:
            return None
        new_tail = node.prev
        node.prev = None
        if new_tail is None:
            # list is empty
            self._head = None
        else:
            # drops the last owning reference the chain held to `node`
            new_tail.next = None
        self._tail = new_tail
        self._len -= 1
        self._bump()
        return node.value

    def remove_front(self) -> None:
        self.pop_front()

    def remove_back(self) -> None:
        self.pop_back()

    # ---- positional ----

    def insert(self, index: int, value: T) -> bool:
        """
        Splice `value` in so that it ends up at position `index`. O(n).

        Args:
            index: Target position; ``len()`` appends
            value: Value to insert

        Returns:
            True on success, False if `index` is out of bounds (list unchanged)
        """
        if index < 0 or index > self._len:
            return False
        if index == 0:
            self.push_front(value)
            return True
        if index == self._len:
            self.push_back(value)
            return True

        succ = self._node_at(index)
        pred = succ.prev
        node = DoublyNode(value)
        node.prev = pred
        # The new node takes over the successor chain before pred lets go of it
        node.next = succ
        pred.next = node
        succ.prev = node
        self._len += 1
        self._bump()
        return True

    def remove(self, index: int) -> T | None:
        """
        Unlink the element at `index` and return it. O(n).

        Returns:
            The removed value, or None if `index` is out of bounds (list unchanged)
        """
        if not self._in_bounds(index):
            return None
        if index == 0:
            return self.pop_front()
        if index == self._len - 1:
            return self.pop_back()

        node = self._node_at(index)
        pred, succ = node.prev, node.next
        succ.prev = pred
        pred.next = succ
        node.next = None
        node.prev = None
        self._len -= 1
        self._bump()
        return node.value

    # ---- teardown ----

    def _release(self) -> None:
        node = self._head
        self._head = None
        self._tail = None
        while node is not None:
            next_node = node.next
            node.next = None
            node.prev = None
            node = next_node

    def clear(self) -> None:
        """Release every node and return to the empty state."""
        if self._len:
            logger.debug("Releasing %d nodes from %s", self._len, type(self).__name__)
        self._release()
        self._len = 0
        self._bump()

    def __del__(self):
        if getattr(self, "_head", None) is not None:
            self._release()

    # ---- iteration ----

    def iter(self) -> DoubleEndedIter[T]:
        return DoubleEndedIter(self, self._head, self._tail, self._len)

    def iter_mut(self) -> DoubleEndedIterMut[T]:
        return DoubleEndedIterMut(self, self._head, self._tail, self._len)

    def iter_rev(self) -> Rev[T]:
        """Iterate from tail to head."""
        return self.iter().rev()

    def __reversed__(self):
        return self.iter_rev()

    def into_iter(self) -> DoubleEndedIntoIter[T]:
        """
        Move the chain into an owned iterator consumable from both ends.

        This list is left empty; the iterator releases nodes as it goes.
        """
        moved = type(self)()
        moved._head, moved._tail, moved._len = self._head, self._tail, self._len
        self._head, self._tail, self._len = None, None, 0
        self._bump()
        return DoubleEndedIntoIter(moved.pop_front, moved.pop_back, moved.len)
