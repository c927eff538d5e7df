"""Arithmetic mapping logical bit indices onto words of a fixed width.

Bits are numbered least-significant first. Bit ``0`` of word ``0`` is the
least significant bit of the whole bit-set, so a sequence of words is a
little-endian rendering of one (arbitrarily wide) unsigned integer::

    >>> locate(37, 16)
    (2, 5)
    >>> position(2, 5, 16)
    37

Every function here is pure.

"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from public import public

#: Widths tried, in order, when a width has to be inferred from a value.
STANDARD_WIDTHS: Tuple[int, ...] = (8, 16, 32, 64, 128)

#: Word width of growable stores when none is given.
DEFAULT_WORD_WIDTH = 64


@public
def check_index(index: int) -> int:
    """Return `index` if it is a valid bit index.

    Raises
    ------
    ValueError
        If `index` is negative

    """
    if index < 0:
        raise ValueError(f"bit not greater than or equal to 0, bit == {index}")
    return index


@public
def check_width(width: int) -> int:
    """Return `width` if it is a valid word width.

    Raises
    ------
    ValueError
        If `width` is not a positive multiple of 8

    """
    if width <= 0 or width % 8:
        raise ValueError(f"word width must be a positive multiple of 8, got {width}")
    return width


@public
def locate(index: int, width: int) -> Tuple[int, int]:
    """Return the word index and the bit offset within that word of `index`."""
    return divmod(check_index(index), width)


@public
def position(word_index: int, offset: int, width: int) -> int:
    """Return the logical bit index of bit `offset` of word `word_index`."""
    assert 0 <= offset < width, f"offset {offset} outside a {width}-bit word"
    return word_index * width + offset


@public
def words_needed(nbits: int, width: int) -> int:
    """Return the number of `width`-bit words needed to hold `nbits` bits."""
    return -(-nbits // width)


@public
def word_mask(width: int) -> int:
    """Return a mask with the low `width` bits set."""
    return (1 << width) - 1


@public
def tail_mask(nbits: int, width: int) -> int:
    """Return the mask of the final word's bits that lie within `nbits` bits.

    A length that ends on a word boundary uses all of its final word.
    """
    used = nbits % width
    return word_mask(used if used else width)


@public
def infer_width(value: int) -> int:
    """Return the narrowest standard width able to hold `value`.

    Past 128 bits the width grows in whole 64-bit steps.

    Raises
    ------
    ValueError
        If `value` is negative

    """
    if value < 0:
        raise ValueError(f"cannot store negative value {value}")
    nbits = value.bit_length()
    for width in STANDARD_WIDTHS:
        if nbits <= width:
            return width
    return words_needed(nbits, 64) * 64


@public
def join(words: Iterable[int], width: int) -> int:
    """Concatenate `words` into a single integer, word 0 lowest."""
    mask = word_mask(width)
    if width % 8:
        value = 0
        for shift, word in enumerate(words):
            value |= (word & mask) << (shift * width)
        return value
    nbytes = width // 8
    return int.from_bytes(
        b"".join((word & mask).to_bytes(nbytes, "little") for word in words), "little"
    )


@public
def split(value: int, width: int, count: int) -> List[int]:
    """Split `value` into `count` words of `width` bits, lowest word first.

    Bits of `value` at or above ``count * width`` are dropped.
    """
    if width % 8:
        mask = word_mask(width)
        return [(value >> (i * width)) & mask for i in range(count)]
    nbytes = width // 8
    data = (value & word_mask(count * width)).to_bytes(count * nbytes, "little")
    return [
        int.from_bytes(data[i : i + nbytes], "little")
        for i in range(0, count * nbytes, nbytes)
    ]


@public
def rechunk(words: Sequence[int], source_width: int, target_width: int) -> List[int]:
    """Re-express `words` of `source_width` bits as words of `target_width` bits.

    The result covers at least every bit of the input; it has no trailing
    words beyond that.
    """
    if source_width == target_width:
        return list(words)
    nbits = len(words) * source_width
    return split(
        join(words, source_width),
        target_width,
        words_needed(nbits, target_width),
    )


@public
def popcount(word: int) -> int:
    """Return the number of set bits in the non-negative integer `word`."""
    return bin(word).count("1")
