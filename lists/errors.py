"""
Exceptions raised by the list containers.

Recoverable conditions (empty list, index out of range) are reported through
return values; the exceptions here are reserved for misuse.
"""


class ListError(Exception):
    """Base class for all list container faults."""


class BorrowError(ListError, RuntimeError):
    """A borrowed view was used after its list was structurally mutated."""

    def __init__(self, container: str, issued: int, current: int):
        self.container = container
        self.issued = issued
        self.current = current
        super().__init__(f"{container} was mutated while borrowed (epoch {issued} -> {current})")


class LiteralSyntaxError(ListError, ValueError):
    """List literal text could not be parsed."""

    def __init__(self, message: str, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(f"{message} at position {position}: {text!r}")
