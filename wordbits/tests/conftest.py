from __future__ import annotations

import random
from typing import Any, Callable

import pytest

from wordbits.bitset import BitSet

WIDTHS = (8, 16, 32, 64, 128)


@pytest.fixture(params=WIDTHS, ids=lambda width: f"u{width}")  # type: ignore[misc]
def width(request: Any) -> int:
    return request.param


@pytest.fixture  # type: ignore[misc]
def rng() -> random.Random:
    return random.Random(0xB175E7)


def random_bitset(rng: random.Random, *, growable: bool | None = None) -> BitSet[Any]:
    """Return a bit-set of random kind, width and contents."""
    if growable is None:
        growable = rng.random() < 0.5
    if growable:
        word_width = rng.choice(WIDTHS)
        count = rng.randrange(4)
        return BitSet.from_words(
            [rng.getrandbits(word_width) for _ in range(count)], word_width
        )
    width = rng.choice(WIDTHS + (24, 192))
    return BitSet.from_value(rng.getrandbits(width), width)


@pytest.fixture  # type: ignore[misc]
def make_random() -> Callable[..., BitSet[Any]]:
    return random_bitset


def expected_ones(bitset: BitSet[Any]) -> set[int]:
    """Compute the set indices of `bitset` bit by bit, without its cursors."""
    return {i for i in range(bitset.capacity()) if bitset.get(i)}
