"""A compact set of boolean flags addressed by integer index.

:class:`BitSet` is a thin facade over a backing store. The store is picked
when the bit-set is constructed and decides how indices past the current
capacity behave:

* a :class:`~wordbits.store.FixedStore` raises
  :class:`~wordbits.exceptions.OutOfRangeError`;
* a :class:`~wordbits.store.GrowableStore` reads them as ``False``, ignores
  :meth:`BitSet.clear` and grows for :meth:`BitSet.set` and
  :meth:`BitSet.toggle`.

>>> bs = BitSet.from_value(0, width=16)
>>> bs.set(3)
False
>>> bs.set(7)
False
>>> sorted(bs)
[3, 7]
>>> format(bs, "b")
'0b_0000_0000_1000_1000'

"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from public import public

from wordbits import algebra, formatting, indexing
from wordbits.cursor import Bits, Ones, ReversedOnes
from wordbits.exceptions import OutOfRangeError
from wordbits.protocols import Store
from wordbits.store import FixedStore, GrowableStore

S = TypeVar("S", bound=Store)


@public
class BitSet(Generic[S]):
    """A compact set of bits held in a :class:`~wordbits.protocols.Store`.

    ``len(bitset)`` is the capacity, the number of addressable bits.
    Iterating yields the indices of the set bits in ascending order, and a
    bit-set is truthy when at least one bit is set.

    Attributes
    ----------
    store
        The backing store. It is owned by this bit-set and must not be shared.

    """

    __slots__ = ("store",)

    def __init__(self, store: S) -> None:
        """Wrap `store`, which becomes owned by this bit-set."""
        self.store = store

    @classmethod
    def from_width(cls, width: int) -> BitSet[FixedStore]:
        """Construct an empty fixed bit-set of `width` bits."""
        return cls(FixedStore(width))

    empty = from_width

    @classmethod
    def full(cls, width: int) -> BitSet[FixedStore]:
        """Construct a fixed bit-set of `width` bits, all set."""
        return cls(FixedStore(width, indexing.word_mask(indexing.check_width(width))))

    @classmethod
    def from_value(cls, value: int, width: Optional[int] = None) -> BitSet[FixedStore]:
        """Construct a fixed bit-set whose bits are those of `value`.

        Parameters
        ----------
        value
            A non-negative integer. Bit ``i`` of the bit-set is bit ``i`` of
            `value`.
        width
            The width of the store. Defaults to the narrowest of 8, 16, 32, 64
            and 128 bits, or a multiple of 64 bits, that holds `value`.

        """
        if width is None:
            width = indexing.infer_width(value)
        return cls(FixedStore(width, value))

    @classmethod
    def with_capacity(
        cls,
        nbits: int = 0,
        word_width: int = indexing.DEFAULT_WORD_WIDTH,
        *,
        max_capacity: Optional[int] = None,
    ) -> BitSet[GrowableStore]:
        """Construct an empty growable bit-set covering at least `nbits` bits."""
        return cls(
            GrowableStore.with_capacity(nbits, word_width, max_capacity=max_capacity)
        )

    @classmethod
    def from_words(
        cls,
        words: Iterable[int],
        word_width: int = indexing.DEFAULT_WORD_WIDTH,
        *,
        max_capacity: Optional[int] = None,
    ) -> BitSet[GrowableStore]:
        """Construct a growable bit-set from `words`, lowest word first."""
        return cls(GrowableStore(word_width, words, max_capacity=max_capacity))

    @classmethod
    def from_indices(
        cls,
        indices: Iterable[int],
        width: Optional[int] = None,
        word_width: int = indexing.DEFAULT_WORD_WIDTH,
    ) -> BitSet[Any]:
        """Construct a bit-set with the bits at `indices` set.

        The result is fixed when `width` is given and growable otherwise.
        """
        bitset: BitSet[Any] = (
            cls.with_capacity(0, word_width) if width is None else cls.from_width(width)
        )
        for index in indices:
            bitset.set(index)
        return bitset

    def __repr__(self) -> str:
        """Return the bit-set with its store."""
        return f"{type(self).__name__}({self.store!r})"

    def __format__(self, format_spec: str) -> str:
        """Render binary digits for ``"b"``, otherwise format the repr."""
        if format_spec == "b":
            return formatting.binary(self.store)
        return format(str(self), format_spec)

    def pretty(self, **kwargs: Any) -> str:
        """Return a table of the words backing this bit-set.

        See Also
        --------
        wordbits.formatting.pretty

        """
        return formatting.pretty(self.store, **kwargs)

    # capacity

    def capacity(self) -> int:
        """Return the number of addressable bits."""
        return self.store.capacity()

    def __len__(self) -> int:
        """Return the capacity."""
        return self.store.capacity()

    @property
    def word_width(self) -> int:
        """Return the width of the words backing this bit-set."""
        return self.store.width

    @property
    def is_growable(self) -> bool:
        """Return whether writes past the capacity grow this bit-set."""
        return self.store.growable

    # single bits

    def get(self, index: int) -> bool:
        """Return the bit at `index`.

        Raises
        ------
        ValueError
            If `index` is negative
        OutOfRangeError
            If the store is fixed and `index` is past its width

        """
        return self.store.get(index)

    def set(self, index: int) -> bool:
        """Set the bit at `index` and return its previous value.

        Raises
        ------
        ValueError
            If `index` is negative
        OutOfRangeError
            If the store is fixed and `index` is past its width
        CapacityOverflowError
            If the store would have to grow past its limit

        """
        return self.store.set(index)

    def clear(self, index: int) -> bool:
        """Clear the bit at `index` and return its previous value.

        Clearing past the end of a growable store does nothing.
        """
        return self.store.clear(index)

    def toggle(self, index: int) -> bool:
        """Flip the bit at `index` and return its previous value.

        Toggling past the end of a growable store grows it and sets the bit,
        unlike :meth:`clear`.
        """
        return self.store.toggle(index)

    def change(self, index: int, value: bool) -> bool:
        """Set the bit at `index` to `value` and return its previous value."""
        return self.set(index) if value else self.clear(index)

    def __getitem__(self, index: int) -> bool:
        """Return the bit at `index`, as :meth:`get`."""
        return self.get(index)

    def __setitem__(self, index: int, value: bool) -> None:
        """Set the bit at `index` to `value`, as :meth:`change`."""
        self.change(index, value)

    def __contains__(self, index: Any) -> bool:
        """Return whether bit `index` is set; indices the store cannot hold are not."""
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or index < 0
            or index >= self.capacity()
        ):
            return False
        return self.store.get(index)

    # counting

    def count_ones(self) -> int:
        """Return the number of set bits."""
        return sum(map(indexing.popcount, self.store.words()))

    def count_zeros(self) -> int:
        """Return the number of clear bits within the capacity."""
        return self.capacity() - self.count_ones()

    def is_empty(self) -> bool:
        """Return whether no bit is set.

        A bit-set with a non-zero capacity can be empty.
        """
        return not any(self.store.words())

    def is_full(self) -> bool:
        """Return whether every bit within the capacity is set."""
        return self.count_ones() == self.capacity()

    def any(self) -> bool:
        """Return whether at least one bit is set."""
        return not self.is_empty()

    def __bool__(self) -> bool:
        """Return whether at least one bit is set."""
        return self.any()

    def first_one(self) -> Optional[int]:
        """Return the lowest set index, or :data:`None` if no bit is set."""
        return next(Ones(self.store), None)

    def last_one(self) -> Optional[int]:
        """Return the highest set index, or :data:`None` if no bit is set."""
        return next(ReversedOnes(self.store), None)

    def trailing_zeros(self) -> int:
        """Return the number of clear bits below the lowest set bit."""
        first = self.first_one()
        return self.capacity() if first is None else first

    def leading_zeros(self) -> int:
        """Return the number of clear bits above the highest set bit."""
        last = self.last_one()
        return self.capacity() if last is None else self.capacity() - 1 - last

    def trailing_ones(self) -> int:
        """Return the number of set bits below the lowest clear bit."""
        return self.complement().trailing_zeros()

    def leading_ones(self) -> int:
        """Return the number of set bits above the highest clear bit."""
        return self.complement().leading_zeros()

    # iteration

    def ones(self) -> Iterator[int]:
        """Return a new cursor over the set indices, lowest first."""
        return Ones(self.store)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the set indices, lowest first."""
        return Ones(self.store)

    def __reversed__(self) -> Iterator[int]:
        """Iterate over the set indices, highest first."""
        return ReversedOnes(self.store)

    def bits(self) -> Bits:
        """Return a view of every bit of this bit-set as booleans."""
        return Bits(self.store)

    # conversion

    def to_int(self) -> int:
        """Return the bits of this bit-set as one non-negative integer."""
        return indexing.join(self.store.words(), self.store.width)

    def words(self) -> List[int]:
        """Return a copy of the words backing this bit-set, lowest first."""
        return self.store.words()

    def as_fixed(self, width: Optional[int] = None) -> BitSet[FixedStore]:
        """Return a copy of this bit-set backed by a fixed store.

        Parameters
        ----------
        width
            The width of the new store, defaulting to the current capacity.

        Raises
        ------
        OutOfRangeError
            If a set bit does not fit in `width` bits

        """
        if width is None:
            width = self.capacity() or indexing.STANDARD_WIDTHS[0]
        last = self.last_one()
        if last is not None and last >= width:
            raise OutOfRangeError(last, width)
        return BitSet(FixedStore(width, self.to_int()))

    def as_growable(
        self, word_width: int = indexing.DEFAULT_WORD_WIDTH
    ) -> BitSet[GrowableStore]:
        """Return a copy of this bit-set backed by `word_width`-bit words."""
        return BitSet(
            GrowableStore(
                word_width,
                indexing.rechunk(self.store.words(), self.store.width, word_width),
            )
        )

    def copy(self) -> BitSet[S]:
        """Return an independent copy of this bit-set."""
        return type(self)(self.store.copy())

    __copy__ = copy

    # comparison

    def __eq__(self, other: Any) -> bool:
        """Return whether both bit-sets have the same capacity and set bits."""
        if not isinstance(other, BitSet):
            return NotImplemented
        if self.capacity() != other.capacity():
            return False
        if self.store.width == other.store.width:
            left, right = self.store.words(), other.store.words()
            count = max(len(left), len(right))
            return algebra.pad(left, count) == algebra.pad(right, count)
        return self.to_int() == other.to_int()

    def __ne__(self, other: Any) -> bool:
        """Return whether the bit-sets differ."""
        return not (self == other)

    __hash__ = None  # type: ignore[assignment]

    def is_subset(self, other: BitSet[Any]) -> bool:
        """Return whether every bit set in `self` is set in `other`."""
        return self.difference(other).is_empty()

    def is_superset(self, other: BitSet[Any]) -> bool:
        """Return whether every bit set in `other` is set in `self`."""
        return other.is_subset(self)

    def is_disjoint(self, other: BitSet[Any]) -> bool:
        """Return whether `self` and `other` have no set bit in common."""
        return self.intersection(other).is_empty()

    # set algebra

    def union(self, other: BitSet[Any]) -> BitSet[S]:
        """Return the bits set in `self` or `other`.

        The result is as long as the longer operand.
        """
        return type(self)(algebra.union(self.store, other.store))

    def intersection(self, other: BitSet[Any]) -> BitSet[S]:
        """Return the bits set in both `self` and `other`.

        The result is as long as the shorter operand.
        """
        return type(self)(algebra.intersect(self.store, other.store))

    def difference(self, other: BitSet[Any]) -> BitSet[S]:
        """Return the bits set in `self` but not in `other`.

        The result is as long as `self`.
        """
        return type(self)(algebra.difference(self.store, other.store))

    def symmetric_difference(self, other: BitSet[Any]) -> BitSet[S]:
        """Return the bits set in exactly one of `self` and `other`.

        The result is as long as the longer operand.
        """
        return type(self)(algebra.symmetric_difference(self.store, other.store))

    def complement(self) -> BitSet[S]:
        """Return a bit-set with every bit within the capacity flipped."""
        return type(self)(algebra.complement(self.store))

    def _check_fits(self, other: BitSet[Any]) -> None:
        if self.store.growable:
            return
        last = other.last_one()
        if last is not None and last >= self.capacity():
            raise OutOfRangeError(last, self.capacity())

    def union_with(self, other: BitSet[Any]) -> None:
        """Set every bit that is set in `other`.

        A growable bit-set grows to cover `other`.

        Raises
        ------
        OutOfRangeError
            If this bit-set is fixed and `other` has a bit set past its width

        """
        self._check_fits(other)
        length = None if self.store.growable else self.capacity()
        self.store = algebra.union(self.store, other.store, length=length)

    def intersect_with(self, other: BitSet[Any]) -> None:
        """Clear every bit that is not set in `other`, keeping the capacity."""
        self.store = algebra.intersect(
            self.store, other.store, length=self.capacity()
        )

    def difference_with(self, other: BitSet[Any]) -> None:
        """Clear every bit that is set in `other`."""
        self.store = algebra.difference(self.store, other.store)

    def symmetric_difference_with(self, other: BitSet[Any]) -> None:
        """Flip every bit that is set in `other`.

        Raises
        ------
        OutOfRangeError
            If this bit-set is fixed and `other` has a bit set past its width

        """
        self._check_fits(other)
        length = None if self.store.growable else self.capacity()
        self.store = algebra.symmetric_difference(
            self.store, other.store, length=length
        )

    def negate(self) -> None:
        """Flip every bit within the capacity."""
        self.store = algebra.complement(self.store)

    def __or__(self, other: Any) -> BitSet[S]:
        """Return :meth:`union`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Any) -> BitSet[S]:
        """Return :meth:`intersection`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: Any) -> BitSet[S]:
        """Return :meth:`difference`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: Any) -> BitSet[S]:
        """Return :meth:`symmetric_difference`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __invert__(self) -> BitSet[S]:
        """Return :meth:`complement`."""
        return self.complement()

    def __ior__(self, other: Any) -> BitSet[S]:
        """Apply :meth:`union_with`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        self.union_with(other)
        return self

    def __iand__(self, other: Any) -> BitSet[S]:
        """Apply :meth:`intersect_with`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        self.intersect_with(other)
        return self

    def __isub__(self, other: Any) -> BitSet[S]:
        """Apply :meth:`difference_with`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        self.difference_with(other)
        return self

    def __ixor__(self, other: Any) -> BitSet[S]:
        """Apply :meth:`symmetric_difference_with`."""
        if not isinstance(other, BitSet):
            return NotImplemented
        self.symmetric_difference_with(other)
        return self
