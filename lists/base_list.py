"""
Base list class providing the shared header, protocols and construction helpers.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from lists.errors import BorrowError
from lists.literal import parse_literal
from lists.refs import ValueRef

T = TypeVar("T")
L = TypeVar("L", bound="BaseList")


class BaseList(ABC, Generic[T]):
    """
    Abstract base class for all sequential containers.

    Owns the length header and the mutation epoch, and implements everything
    that only needs positional access and iteration: equality, display,
    the index protocol and construction from sequences or literal text.
    Subclasses provide the storage layout.
    """

    def __init__(self, items: Iterable[T] | None = None):
        """
        Initialize an empty list, then append every element of `items` in order.

        Args:
            items: Optional iterable of initial elements
        """
        self._len = 0
        self._epoch = 0
        self._reset_storage()
        if items is not None:
            self.extend(items)

    # ---- construction ----

    @classmethod
    def new(cls: type[L]) -> L:
        """Construct a new, empty list."""
        return cls()

    @classmethod
    def from_iter(cls: type[L], items: Iterable[T]) -> L:
        """Build a list by appending each element of `items` in order."""
        return cls(items)

    @classmethod
    def from_str(cls: type[L], text: str) -> L:
        """
        Build a list from literal text such as ``[1, 2, 3]``.

        Args:
            text: List literal, typically produced by ``str()`` on a list

        Returns:
            New list holding the parsed elements

        Raises:
            LiteralSyntaxError: If the text is not a valid list literal
        """
        return cls(parse_literal(text))

    def extend(self, items: Iterable[T]) -> None:
        """Append many items to the end of the list."""
        for item in items:
            self._append(item)

    # ---- header ----

    def __len__(self) -> int:
        return self._len

    def len(self) -> int:
        """Return the number of elements. O(1)."""
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def _bump(self) -> None:
        """Record a structural change, invalidating outstanding borrows."""
        self._epoch += 1

    def _check_epoch(self, epoch: int) -> None:
        if epoch != self._epoch:
            raise BorrowError(type(self).__name__, epoch, self._epoch)

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < self._len

    # ---- positional access ----

    def get(self, index: int) -> T | None:
        """
        Return the element at `index`.

        Args:
            index: Zero-based position

        Returns:
            The element, or None if `index` is out of bounds
        """
        if not self._in_bounds(index):
            return None
        slot, key = self._locate(index)
        return self._read(slot, key)

    def get_mut(self, index: int) -> ValueRef[T] | None:
        """
        Return a writable handle onto the element at `index`.

        Args:
            index: Zero-based position

        Returns:
            ValueRef for the element, or None if `index` is out of bounds
        """
        if not self._in_bounds(index):
            return None
        slot, key = self._locate(index)
        return ValueRef(self, slot, key)

    def __getitem__(self, index: int) -> T:
        if not self._in_bounds(index):
            raise IndexError(f"Index '{index}' out of bounds.")
        slot, key = self._locate(index)
        return self._read(slot, key)

    def __setitem__(self, index: int, value: T) -> None:
        if not self._in_bounds(index):
            raise IndexError(f"Index '{index}' out of bounds.")
        slot, key = self._locate(index)
        if isinstance(key, int):
            slot[key] = value
        else:
            setattr(slot, key, value)

    @staticmethod
    def _read(slot: Any, key: Any) -> T:
        if isinstance(key, int):
            return slot[key]
        return getattr(slot, key)

    # ---- iteration hooks ----

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def _slot(self, cursor: Any) -> tuple[Any, Any]:
        """Return the (slot, key) pair holding the element under `cursor`."""
        return cursor, "value"

    def _step_front(self, cursor: Any) -> Any:
        return cursor.next

    # ---- comparison & display ----

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        if self._len != other._len:
            return False
        return all(a == b for a, b in zip(self.iter(), other.iter()))

    __hash__ = None

    def __str__(self):
        return "[" + ", ".join(repr(value) for value in self.iter()) + "]"

    def __repr__(self):
        return f"{type(self).__name__}({self})"

    # ---- storage layout ----

    @abstractmethod
    def _reset_storage(self) -> None:
        """Put the storage fields into the empty state."""
        pass

    @abstractmethod
    def _append(self, value: T) -> None:
        """Add a value at the end; used by extend() and the constructors."""
        pass

    @abstractmethod
    def _locate(self, index: int) -> tuple[Any, Any]:
        """Return the (slot, key) pair for an in-bounds `index`."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def iter(self) -> Iterator[T]:
        """Return a borrowing iterator over the elements in list order."""
        pass

    @abstractmethod
    def iter_mut(self) -> Iterator[ValueRef[T]]:
        """Return a borrowing iterator of writable handles in list order."""
        pass

    @abstractmethod
    def into_iter(self) -> Iterator[T]:
        """Move every element into an owned iterator, leaving this list empty."""
        pass
