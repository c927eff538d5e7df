"""Lazy traversal of the bits held by a store.

:class:`Ones` walks set bits from lowest to highest index. Within a word it
repeatedly isolates the lowest set bit (``word & -word``), reports it and
clears it, so a word costs time proportional to its population count instead
of its width. :class:`ReversedOnes` does the same from the top using the
highest set bit.

Cursors read the store one word at a time as they advance. Mutating the store
while a cursor is live gives unspecified, but memory safe, results.

"""

from __future__ import annotations

from typing import Iterator, Sequence, overload

from public import public

from wordbits import indexing
from wordbits.protocols import Store


@public
class Ones(Iterator[int]):
    """A cursor over the indices of the set bits of a store, ascending."""

    __slots__ = "store", "word_index", "remaining"

    def __init__(self, store: Store) -> None:
        self.store = store
        self.word_index = 0
        self.remaining = store.word(0) if store.word_count() else 0

    def __iter__(self) -> Ones:
        return self

    def __next__(self) -> int:
        store = self.store
        remaining = self.remaining
        while not remaining:
            self.word_index += 1
            if self.word_index >= store.word_count():
                raise StopIteration
            remaining = store.word(self.word_index)
        lowest = remaining & -remaining
        self.remaining = remaining ^ lowest
        return indexing.position(
            self.word_index, lowest.bit_length() - 1, store.width
        )


@public
class ReversedOnes(Iterator[int]):
    """A cursor over the indices of the set bits of a store, descending."""

    __slots__ = "store", "word_index", "remaining"

    def __init__(self, store: Store) -> None:
        self.store = store
        self.word_index = store.word_count() - 1
        self.remaining = store.word(self.word_index) if self.word_index >= 0 else 0

    def __iter__(self) -> ReversedOnes:
        return self

    def __next__(self) -> int:
        store = self.store
        remaining = self.remaining
        while not remaining:
            self.word_index -= 1
            if self.word_index < 0:
                raise StopIteration
            remaining = store.word(self.word_index)
        offset = remaining.bit_length() - 1
        self.remaining = remaining ^ (1 << offset)
        return indexing.position(self.word_index, offset, store.width)


@public
class Bits(Sequence[bool]):
    """A read-only view of every bit of a store as booleans.

    Each iteration starts from the first bit again; the view always reflects
    the store's current contents.
    """

    __slots__ = ("store",)

    def __init__(self, store: Store) -> None:
        self.store = store

    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in self)
        return f"{type(self).__name__}({bits!r})"

    def __len__(self) -> int:
        return self.store.capacity()

    @overload
    def __getitem__(self, index: int) -> bool:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[bool]:
        ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(len(self))[index]]
        nbits = len(self)
        if -nbits <= index < nbits:
            return self.store.get(index % nbits)
        raise IndexError(index)

    def __iter__(self) -> Iterator[bool]:
        store = self.store
        width = store.width
        for word_index in range(store.word_count()):
            word = store.word(word_index)
            for offset in range(width):
                yield bool(word >> offset & 1)
