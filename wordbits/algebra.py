"""Word-wise set algebra over stores.

Binary operations bring the right operand into the left operand's word width,
combine the two word by word and hand the result to the left store's
:meth:`~wordbits.protocols.Store.rebuild`, so a fixed left operand yields a
fixed store and a growable one yields a growable store.

The length of the result depends on the operation:

====================  ======  ===================
operation             word    result length
====================  ======  ===================
union                 OR      max(left, right)
intersect             AND     min(left, right)
difference            AND NOT left
symmetric_difference  XOR     max(left, right)
====================  ======  ===================

Where one operand is shorter it is padded with zero words, so words past its
end are copied from the longer operand by OR and XOR and vanish under AND.
Every result word is masked to the word width and the final word to the result
length: Python integers are unbounded, and ``~word`` is negative unless
masked.

"""

from __future__ import annotations

import itertools
import logging
import operator
from typing import Callable, List, Optional, Sequence, TypeVar

import toolz
from public import public

from wordbits import indexing
from wordbits.protocols import Store

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Store)

WordOp = Callable[[int, int], int]
LengthPolicy = Callable[[int, int], int]


def _and_not(left: int, right: int) -> int:
    return left & ~right


def aligned_words(store: Store, width: int) -> List[int]:
    """Return the words of `store` expressed as `width`-bit words."""
    return indexing.rechunk(store.words(), store.width, width)


def pad(words: Sequence[int], count: int) -> List[int]:
    """Return the first `count` words of `words`, padded with zero words."""
    return list(toolz.take(count, toolz.concat((words, itertools.repeat(0)))))


def combine(
    left: S,
    right: Store,
    op: WordOp,
    policy: LengthPolicy,
    *,
    length: Optional[int] = None,
) -> S:
    """Combine `left` and `right` word by word with `op`.

    Parameters
    ----------
    left
        The left operand; its word width and store kind shape the result.
    right
        The right operand, of any word width or store kind.
    op
        A function combining a left word with a right word.
    policy
        A function computing the result length from the operands' capacities.
    length
        Result length overriding `policy`.

    """
    width = left.width
    if length is None:
        length = policy(left.capacity(), right.capacity())
    count = indexing.words_needed(length, width)
    mask = indexing.word_mask(width)
    words = [
        op(a, b) & mask
        for a, b in zip(
            pad(left.words(), count), pad(aligned_words(right, width), count)
        )
    ]
    if words:
        words[-1] &= indexing.tail_mask(length, width)
    logger.debug(
        "combined %d-bit and %d-bit operands into %d words of %d bits",
        left.capacity(),
        right.capacity(),
        count,
        width,
    )
    return left.rebuild(words, length)


@public
def union(left: S, right: Store, *, length: Optional[int] = None) -> S:
    """Return the bits set in either `left` or `right`."""
    return combine(left, right, operator.or_, max, length=length)


@public
def intersect(left: S, right: Store, *, length: Optional[int] = None) -> S:
    """Return the bits set in both `left` and `right`."""
    return combine(left, right, operator.and_, min, length=length)


@public
def difference(left: S, right: Store, *, length: Optional[int] = None) -> S:
    """Return the bits set in `left` but not in `right`."""
    return combine(left, right, _and_not, lambda a, _: a, length=length)


@public
def symmetric_difference(left: S, right: Store, *, length: Optional[int] = None) -> S:
    """Return the bits set in exactly one of `left` and `right`."""
    return combine(left, right, operator.xor, max, length=length)


@public
def complement(store: S) -> S:
    """Return `store` with every bit within its capacity flipped."""
    mask = indexing.word_mask(store.width)
    return store.rebuild([~word & mask for word in store.words()], store.capacity())
