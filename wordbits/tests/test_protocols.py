import pytest

from wordbits.bitset import BitSet
from wordbits.protocols import Store
from wordbits.store import FixedStore, GrowableStore


@pytest.mark.parametrize("store", [FixedStore(8), GrowableStore(8)])
def test_stores_conform_to_protocol(store):
    assert isinstance(store, Store)


def test_stores_do_not_share_a_base():
    assert not issubclass(FixedStore, GrowableStore)
    assert not issubclass(GrowableStore, FixedStore)
    assert Store not in FixedStore.__mro__
    assert Store not in GrowableStore.__mro__


class ListStore:
    """A minimal third store holding one-bit words."""

    width = 1
    growable = False

    def __init__(self, nbits):
        self.bits = [0] * nbits

    def capacity(self):
        return len(self.bits)

    def word_count(self):
        return len(self.bits)

    def word(self, word_index):
        return self.bits[word_index] if word_index < len(self.bits) else 0

    def words(self):
        return list(self.bits)

    def get(self, index):
        return bool(self.bits[index])

    def set(self, index):
        old, self.bits[index] = self.bits[index], 1
        return bool(old)

    def clear(self, index):
        old, self.bits[index] = self.bits[index], 0
        return bool(old)

    def toggle(self, index):
        old = self.bits[index]
        self.bits[index] = 1 - old
        return bool(old)

    def rebuild(self, words, length):
        store = type(self)(len(words))
        store.bits = list(words)
        return store

    def copy(self):
        return self.rebuild(self.bits, len(self.bits))


def test_facade_accepts_any_store():
    store = ListStore(4)
    assert isinstance(store, Store)
    bs = BitSet(store)
    bs.set(2)
    assert bs.get(2)
    assert bs.count_ones() == 1
    assert list(bs) == [2]
    assert bs.copy().store.bits == [0, 0, 1, 0]
