"""The capability every backing store of a bit-set provides."""

from __future__ import annotations

import abc
from typing import List, Sequence, TypeVar

from public import public
from typing_extensions import Protocol, runtime_checkable

S = TypeVar("S", bound="Store")


@public
@runtime_checkable
class Store(Protocol):
    """A protocol for objects that hold the bits of a bit-set.

    Stores are addressed by logical bit index and expose their contents as a
    little-endian sequence of `width`-bit words. Words handed out by a store
    never carry bits at or above `width`.

    Attributes
    ----------
    width
        The number of bits in each word.
    growable
        Whether writes past the current capacity grow the store.

    """

    width: int
    growable: bool

    @abc.abstractmethod
    def capacity(self) -> int:
        """Return the number of addressable bits."""

    @abc.abstractmethod
    def word_count(self) -> int:
        """Return the number of words currently backing the store."""

    @abc.abstractmethod
    def word(self, word_index: int) -> int:
        """Return word `word_index`, or zero past the last word."""

    @abc.abstractmethod
    def words(self) -> List[int]:
        """Return a copy of every word."""

    @abc.abstractmethod
    def get(self, index: int) -> bool:
        """Return the bit at `index`."""

    @abc.abstractmethod
    def set(self, index: int) -> bool:
        """Set the bit at `index` and return its previous value."""

    @abc.abstractmethod
    def clear(self, index: int) -> bool:
        """Clear the bit at `index` and return its previous value."""

    @abc.abstractmethod
    def toggle(self, index: int) -> bool:
        """Flip the bit at `index` and return its previous value."""

    @abc.abstractmethod
    def rebuild(self: S, words: Sequence[int], length: int) -> S:
        """Return a new store of the same kind holding `length` bits of `words`.

        `words` are in this store's word width.
        """

    @abc.abstractmethod
    def copy(self: S) -> S:
        """Return an independent copy of this store."""
