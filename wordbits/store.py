"""Backing stores for :class:`~wordbits.bitset.BitSet`.

Two stores conform to :class:`~wordbits.protocols.Store`:

:class:`FixedStore`
    A single unsigned integer of a fixed width. Its capacity is its width and
    never changes; touching a bit past it raises
    :class:`~wordbits.exceptions.OutOfRangeError`.

:class:`GrowableStore`
    A list of equally wide words. Writes past the end append zero words until
    the index is covered; reads past the end see ``False`` and leave the store
    alone.

Neither store inherits from the other. The facade only relies on the protocol.

"""

from __future__ import annotations

import logging
import sys
from typing import ClassVar, Iterable, List, MutableSequence, Optional, Sequence

from public import public

from wordbits import indexing
from wordbits.exceptions import CapacityOverflowError, OutOfRangeError

logger = logging.getLogger(__name__)


@public
class FixedStore:
    """A store backed by one unsigned integer of `width` bits."""

    __slots__ = "width", "value"

    growable: ClassVar[bool] = False

    def __init__(self, width: int, value: int = 0) -> None:
        """Construct a :class:`FixedStore`.

        Parameters
        ----------
        width
            The number of bits in the store; a positive multiple of 8.
        value
            The initial bits. Bit ``i`` of the store is bit ``i`` of `value`.

        Raises
        ------
        ValueError
            If `width` is invalid or `value` is negative or wider than `width`

        """
        indexing.check_width(width)
        if value < 0:
            raise ValueError(f"cannot store negative value {value}")
        if value.bit_length() > width:
            raise ValueError(f"value {value:#x} does not fit in {width} bits")
        self.width = width
        self.value = value

    def __repr__(self) -> str:
        """Return the width and value in hex."""
        return f"{type(self).__name__}(width={self.width}, value={self.value:#x})"

    def _bit(self, index: int) -> int:
        if indexing.check_index(index) >= self.width:
            raise OutOfRangeError(index, self.width)
        return 1 << index

    def capacity(self) -> int:
        """Return the width; a fixed store never grows."""
        return self.width

    def word_count(self) -> int:
        """Return 1, the single backing word."""
        return 1

    def word(self, word_index: int) -> int:
        """Return the backing integer for word 0 and zero for any other index."""
        return self.value if not word_index else 0

    def words(self) -> List[int]:
        """Return the backing integer as a one word list."""
        return [self.value]

    def raw(self) -> int:
        """Return the backing integer."""
        return self.value

    def get(self, index: int) -> bool:
        """Return the bit at `index`."""
        return bool(self.value & self._bit(index))

    def set(self, index: int) -> bool:
        """Set the bit at `index` and return its previous value."""
        bit = self._bit(index)
        old = bool(self.value & bit)
        self.value |= bit
        return old

    def clear(self, index: int) -> bool:
        """Clear the bit at `index` and return its previous value."""
        bit = self._bit(index)
        old = bool(self.value & bit)
        self.value &= ~bit
        return old

    def toggle(self, index: int) -> bool:
        """Flip the bit at `index` and return its previous value."""
        bit = self._bit(index)
        old = bool(self.value & bit)
        self.value ^= bit
        return old

    def rebuild(self, words: Sequence[int], length: int) -> FixedStore:
        """Return a fixed store holding the low `length` bits of `words`.

        The width is `length` rounded up to a multiple of 8, with the bits
        from `length` upward clear. A zero `length` keeps this store's width,
        with every bit clear.
        """
        width = indexing.words_needed(length, 8) * 8 or self.width
        value = indexing.join(words, self.width) & indexing.word_mask(length)
        return type(self)(width, value)

    def copy(self) -> FixedStore:
        """Return an independent copy."""
        return type(self)(self.width, self.value)


@public
class GrowableStore:
    """A store backed by a list of `width`-bit words.

    Attributes
    ----------
    width
        The number of bits in each word
    max_capacity
        The largest capacity, in bits, that the store may grow to

    """

    __slots__ = "width", "_words", "max_capacity"

    growable: ClassVar[bool] = True

    #: Default growth limit. Python integers never wrap, so this stands in for
    #: the largest index a native size type could address.
    max_capacity_default: ClassVar[int] = sys.maxsize

    def __init__(
        self,
        width: int = indexing.DEFAULT_WORD_WIDTH,
        words: Iterable[int] = (),
        *,
        max_capacity: Optional[int] = None,
    ) -> None:
        """Construct a :class:`GrowableStore`.

        Parameters
        ----------
        width
            The number of bits in each word; a positive multiple of 8.
        words
            Initial words, lowest first. Each must fit in `width` bits.
        max_capacity
            Growth limit in bits, defaults to
            :attr:`GrowableStore.max_capacity_default`.

        Raises
        ------
        ValueError
            If `width` is invalid or a word is negative or wider than `width`
        CapacityOverflowError
            If `words` already exceed `max_capacity`

        """
        self.width = indexing.check_width(width)
        self.max_capacity = (
            self.max_capacity_default if max_capacity is None else max_capacity
        )
        self._words: MutableSequence[int] = []
        for word in words:
            if word < 0 or word.bit_length() > width:
                raise ValueError(f"word {word:#x} does not fit in {width} bits")
            self._words.append(word)
        if self.capacity() > self.max_capacity:
            raise CapacityOverflowError(self.capacity(), self.max_capacity)

    @classmethod
    def with_capacity(
        cls,
        nbits: int,
        width: int = indexing.DEFAULT_WORD_WIDTH,
        *,
        max_capacity: Optional[int] = None,
    ) -> GrowableStore:
        """Construct a zeroed store covering at least `nbits` bits."""
        store = cls(width, max_capacity=max_capacity)
        store.reserve(nbits)
        return store

    def __repr__(self) -> str:
        """Return the word width and the words in hex, lowest first."""
        words = ", ".join(f"{word:#x}" for word in self._words)
        return f"{type(self).__name__}(width={self.width}, words=[{words}])"

    def capacity(self) -> int:
        """Return the number of bits covered by the current words."""
        return len(self._words) * self.width

    def word_count(self) -> int:
        """Return the number of words allocated."""
        return len(self._words)

    def word(self, word_index: int) -> int:
        """Return word `word_index`, or zero outside the allocated words."""
        words = self._words
        return words[word_index] if 0 <= word_index < len(words) else 0

    def words(self) -> List[int]:
        """Return a copy of the words, lowest first."""
        return list(self._words)

    def reserve(self, nbits: int) -> None:
        """Grow the store so that it covers at least `nbits` bits.

        Raises
        ------
        CapacityOverflowError
            If covering `nbits` bits would exceed :attr:`max_capacity`

        """
        needed = indexing.words_needed(nbits, self.width)
        current = len(self._words)
        if needed <= current:
            return
        if needed * self.width > self.max_capacity:
            raise CapacityOverflowError(needed * self.width, self.max_capacity)
        logger.debug(
            "growing %d-bit word store from %d to %d words",
            self.width,
            current,
            needed,
        )
        self._words.extend([0] * (needed - current))

    def shrink_to_fit(self) -> int:
        """Drop trailing words with no bit set and return how many were dropped."""
        words = self._words
        before = len(words)
        while words and not words[-1]:
            words.pop()
        dropped = before - len(words)
        if dropped:
            logger.debug("dropped %d empty trailing words", dropped)
        return dropped

    def get(self, index: int) -> bool:
        """Return the bit at `index`, or ``False`` past the end without growing."""
        word_index, offset = indexing.locate(index, self.width)
        return bool(self.word(word_index) >> offset & 1)

    def set(self, index: int) -> bool:
        """Set the bit at `index`, growing if needed; return its previous value."""
        word_index, offset = indexing.locate(index, self.width)
        self.reserve(index + 1)
        word = self._words[word_index]
        self._words[word_index] = word | (1 << offset)
        return bool(word >> offset & 1)

    def clear(self, index: int) -> bool:
        """Clear the bit at `index` and return its previous value."""
        word_index, offset = indexing.locate(index, self.width)
        if word_index >= len(self._words):
            # bits past the end already read as False
            return False
        word = self._words[word_index]
        self._words[word_index] = word & ~(1 << offset)
        return bool(word >> offset & 1)

    def toggle(self, index: int) -> bool:
        """Flip the bit at `index`, growing if needed; return its previous value."""
        word_index, offset = indexing.locate(index, self.width)
        self.reserve(index + 1)
        word = self._words[word_index]
        self._words[word_index] = word ^ (1 << offset)
        return bool(word >> offset & 1)

    def rebuild(self, words: Sequence[int], length: int) -> GrowableStore:
        """Return a growable store of this word width holding `length` bits."""
        count = indexing.words_needed(length, self.width)
        words = list(words[:count])
        words.extend([0] * (count - len(words)))
        if words:
            words[-1] &= indexing.tail_mask(length, self.width)
        return type(self)(self.width, words, max_capacity=self.max_capacity)

    def copy(self) -> GrowableStore:
        """Return an independent copy with the same growth limit."""
        return type(self)(self.width, self._words, max_capacity=self.max_capacity)
