"""
Shorthand constructors taking the elements as positional arguments.

    >>> sl_list(1, 2, 3)
    SinglyLinkedList([1, 2, 3])
"""

from typing import TypeVar

from lists.doubly_linked_list import DoublyLinkedList
from lists.dynamic_list import DynamicList
from lists.singly_linked_list import SinglyLinkedList

T = TypeVar("T")


def sl_list(*values: T) -> SinglyLinkedList[T]:
    """Create a SinglyLinkedList by pushing each value to the back in order. O(n^2)."""
    return SinglyLinkedList(values)


def dl_list(*values: T) -> DoublyLinkedList[T]:
    """Create a DoublyLinkedList by pushing each value to the back in order. O(n)."""
    return DoublyLinkedList(values)


def dyn_list(*values: T) -> DynamicList[T]:
    """Create a DynamicList by pushing each value in order."""
    return DynamicList(values)
