"""Exceptions raised by wordbits.

Each exception also derives from the builtin that most closely matches it, so
callers can catch either the wordbits type or the builtin.
"""

from public import public


@public
class BitSetError(Exception):
    """Base class for all wordbits errors."""

    __slots__ = ()


@public
class OutOfRangeError(BitSetError, IndexError):
    """A bit index lies outside what a store can address.

    Raised by fixed-width stores for indices at or past their width, and by
    operations that would otherwise silently drop a set bit.
    """

    __slots__ = ()

    def __init__(self, index: int, capacity: int) -> None:
        super().__init__(
            f"index out of range: the capacity is {capacity} but the index is {index}"
        )
        self.index = index
        self.capacity = capacity


@public
class CapacityOverflowError(BitSetError, OverflowError):
    """Growing a store would exceed the largest capacity it may reach."""

    __slots__ = ()

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            f"capacity overflow: {requested} bits requested, limit is {limit}"
        )
        self.requested = requested
        self.limit = limit
