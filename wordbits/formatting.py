"""Human readable renderings of stores."""

from __future__ import annotations

from typing import Any

import tabulate
from public import public

from wordbits import indexing
from wordbits.protocols import Store


@public
def binary(store: Store) -> str:
    """Format `store` as binary digits, highest bit first, in groups of four.

    >>> from wordbits.store import FixedStore
    >>> binary(FixedStore(8, 0b0000_0101))
    '0b_0000_0101'

    """
    pieces = ["0b"]
    value = indexing.join(store.words(), store.width)
    for bit in reversed(range(store.capacity())):
        if not (bit + 1) % 4:
            pieces.append("_")
        pieces.append("1" if value >> bit & 1 else "0")
    return "".join(pieces)


@public
def pretty(store: Store, *, tablefmt: str = "simple", **kwargs: Any) -> str:
    """Pretty-format the words of `store` as a table.

    Parameters
    ----------
    store
        The store to format
    tablefmt
        The kind of table to use for formatting
    kwargs
        Additional keyword arguments passed to the `tabulate.tabulate`
        function

    Returns
    -------
    str
        One row per word, lowest word first

    """
    width = store.width
    digits = width // 4
    rows = [
        (
            word_index,
            "{}..{}".format(
                indexing.position(word_index, 0, width),
                indexing.position(word_index, width - 1, width),
            ),
            f"{word:0{digits}x}",
            indexing.popcount(word),
        )
        for word_index, word in enumerate(store.words())
    ]
    return tabulate.tabulate(
        rows,
        headers=("word", "bits", "hex", "ones"),
        tablefmt=tablefmt,
        disable_numparse=True,
        **kwargs,
    )
