from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from lists.base_list import BaseList

T = TypeVar("T")


class ValueRef(Generic[T]):
    """
    Writable handle onto a single element of a list.

    The handle is only valid until the next structural change of the list that
    issued it (push, pop, insert, remove, clear). Reading or writing through a
    stale handle raises BorrowError instead of touching a node that may have
    been unlinked.
    """

    __slots__ = ("_owner", "_slot", "_key", "_epoch")

    def __init__(self, owner: "BaseList[T]", slot: Any, key: Any = "value"):
        """
        Args:
            owner: The list the element belongs to
            slot: Object holding the element (a node, or a backing array)
            key: Attribute name on nodes, or integer offset into an array
        """
        self._owner = owner
        self._slot = slot
        self._key = key
        self._epoch = owner._epoch

    @property
    def value(self) -> T:
        self._owner._check_epoch(self._epoch)
        if isinstance(self._key, int):
            return self._slot[self._key]
        return getattr(self._slot, self._key)

    @value.setter
    def value(self, new_value: T) -> None:
        self._owner._check_epoch(self._epoch)
        if isinstance(self._key, int):
            self._slot[self._key] = new_value
        else:
            setattr(self._slot, self._key, new_value)

    def is_valid(self) -> bool:
        """Return True while the issuing list has not been structurally mutated."""
        return self._owner._epoch == self._epoch

    def __eq__(self, other):
        if isinstance(other, ValueRef):
            return self.value == other.value
        return self.value == other

    __hash__ = None

    def __repr__(self):
        if not self.is_valid():
            return "ValueRef(<stale>)"
        return f"ValueRef({self.value!r})"
