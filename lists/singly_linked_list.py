import logging
from typing import Any, Generic, TypeVar

from lists.base_list import BaseList
from lists.iterators import IntoIter, Iter, IterMut
from lists.refs import ValueRef

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SinglyNode(Generic[T]):
    """Node of a singly linked list. `next` is the only reference to the successor."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "SinglyNode[T] | None" = None):
        self.value = value
        self.next = next

    def __repr__(self):
        return f"Node({self.value!r})"


class SinglyLinkedList(BaseList[T]):
    """
    One-directional linked list.

    Front operations are O(1); anything touching the back or an arbitrary
    position walks the chain from the head and is O(n).
    """

    def _reset_storage(self) -> None:
        self._head: SinglyNode[T] | None = None

    def _append(self, value: T) -> None:
        # O(n) per element: there is no tail reference, only the head owns the chain
        self.push_back(value)

    def _node_at(self, index: int) -> SinglyNode[T]:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _last_node(self) -> SinglyNode[T] | None:
        node = self._head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _locate(self, index: int) -> tuple[Any, Any]:
        return self._node_at(index), "value"

    # ---- ends ----

    def front(self) -> T | None:
        """Return the first element, or None if the list is empty. O(1)."""
        if self._head is None:
            return None
        return self._head.value

    def back(self) -> T | None:
        """Return the last element, or None if the list is empty. O(n)."""
        node = self._last_node()
        if node is None:
            return None
        return node.value

    def front_mut(self) -> ValueRef[T] | None:
        if self._head is None:
            return None
        return ValueRef(self, self._head)

    def back_mut(self) -> ValueRef[T] | None:
        node = self._last_node()
        if node is None:
            return None
        return ValueRef(self, node)

    def push_front(self, value: T) -> None:
        """Make a new node holding `value` the head of the list. O(1)."""
        self._head = SinglyNode(value, self._head)
        self._len += 1
        self._bump()

    def push_back(self, value: T) -> None:
        """Attach a new node holding `value` after the last node. O(n)."""
        node = SinglyNode(value)
        last = self._last_node()
        if last is None:
            self._head = node
        else:
            last.next = node
        self._len += 1
        self._bump()

    def pop_front(self) -> T | None:
        """
        Detach the head and return its value. O(1).

        Returns:
            The removed value, or None if the list is empty
        """
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        self._len -= 1
        self._bump()
        return node.value

    def pop_back(self) -> T | None:
        """
        Detach the last node and return its value. O(n).

        Returns:
            The removed value, or None if the list is empty
        """
        if self._head is None or self._head.next is None:
            return self.pop_front()

        # Stop on the second-to-last node
        prev = self._head
        while prev.next.next is not None:
            prev = prev.next
        node = prev.next
        prev.next = None
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
        Insert `value` so that it ends up at position `index`. O(n).

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
        prev = self._node_at(index - 1)
        prev.next = SinglyNode(value, prev.next)
        self._len += 1
        self._bump()
        return True

    def remove(self, index: int) -> T | None:
        """
        Remove the element at `index` and return it. O(n).

        Returns:
            The removed value, or None if `index` is out of bounds (list unchanged)
        """
        if not self._in_bounds(index):
            return None
        if index == 0:
            return self.pop_front()
        prev = self._node_at(index - 1)
        node = prev.next
        prev.next = node.next
        node.next = None
        self._len -= 1
        self._bump()
        return node.value

    # ---- teardown ----

    def _release(self) -> None:
        # Unlink head to tail so no node is freed through a chain of nested releases
        node = self._head
        self._head = None
        while node is not None:
            next_node = node.next
            node.next = None
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

    def iter(self) -> Iter[T]:
        return Iter(self, self._head, self._len)

    def iter_mut(self) -> IterMut[T]:
        return IterMut(self, self._head, self._len)

    def into_iter(self) -> IntoIter[T]:
        """
        Move the chain into an owned iterator that yields each value once.

        This list is left empty; the iterator releases nodes as it goes.
        """
        moved = type(self)()
        moved._head, moved._len = self._head, self._len
        self._head, self._len = None, 0
        self._bump()
        return IntoIter(moved.pop_front, moved.len)

    # Forward-only
    __reversed__ = None
