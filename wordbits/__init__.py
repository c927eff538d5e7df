"""Top-level package for wordbits."""

import importlib.metadata as importlib_metadata

from wordbits.bitset import BitSet  # noqa: F401
from wordbits.exceptions import (  # noqa: F401
    BitSetError,
    CapacityOverflowError,
    OutOfRangeError,
)
from wordbits.protocols import Store  # noqa: F401
from wordbits.store import FixedStore, GrowableStore  # noqa: F401

__version__ = importlib_metadata.version(__name__)
