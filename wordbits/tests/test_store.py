import pytest

from wordbits.exceptions import CapacityOverflowError, OutOfRangeError
from wordbits.store import FixedStore, GrowableStore


def test_fixed_zero_is_all_false(width):
    store = FixedStore(width)
    assert store.capacity() == width
    assert not any(store.get(i) for i in range(width))


def test_fixed_any_index_can_be_set(width):
    for i in range(width):
        store = FixedStore(width)
        assert store.set(i) is False
        assert store.get(i)
        assert store.raw() == 1 << i


def test_fixed_set_leaves_other_bits(width):
    value = int("10" * (width // 2), 2)
    store = FixedStore(width, value)
    for i in range(width):
        before = [store.get(j) for j in range(width)]
        store.set(i)
        after = [store.get(j) for j in range(width)]
        assert after[i]
        assert before[:i] + before[i + 1 :] == after[:i] + after[i + 1 :]


def test_fixed_clear_toggle():
    store = FixedStore(8, 0b1010)
    assert store.clear(1) is True
    assert store.clear(1) is False
    assert store.raw() == 0b1000
    assert store.toggle(0) is False
    assert store.toggle(0) is True
    assert store.raw() == 0b1000


@pytest.mark.parametrize("method", ["get", "set", "clear", "toggle"])
def test_fixed_out_of_range(method):
    store = FixedStore(16)
    with pytest.raises(OutOfRangeError) as excinfo:
        getattr(store, method)(16)
    assert excinfo.value.index == 16
    assert excinfo.value.capacity == 16
    assert store.raw() == 0


def test_fixed_out_of_range_is_index_error():
    with pytest.raises(IndexError):
        FixedStore(8).get(100)


@pytest.mark.parametrize("method", ["get", "set", "clear", "toggle"])
def test_negative_index(method):
    with pytest.raises(ValueError):
        getattr(FixedStore(8), method)(-1)
    with pytest.raises(ValueError):
        getattr(GrowableStore(8), method)(-1)


def test_fixed_value_must_fit():
    with pytest.raises(ValueError):
        FixedStore(8, 0x100)
    with pytest.raises(ValueError):
        FixedStore(8, -1)


def test_fixed_words():
    store = FixedStore(128, 1 << 100)
    assert store.word_count() == 1
    assert store.words() == [1 << 100]
    assert store.word(0) == 1 << 100
    assert store.word(1) == 0


def test_fixed_rebuild():
    store = FixedStore(16)
    rebuilt = store.rebuild([0xFF, 0xFF, 0xFF], 40)
    assert rebuilt.width == 40
    assert rebuilt.raw() == 0xFF00FF00FF
    assert store.rebuild([], 0).width == 16


def test_fixed_rebuild_rounds_width_up():
    rebuilt = FixedStore(16).rebuild([0xFFFF], 12)
    assert rebuilt.width == 16
    assert rebuilt.raw() == 0x0FFF
    assert FixedStore(8).rebuild([0xFF, 0xFF], 9).width == 16


def test_fixed_copy_is_independent():
    store = FixedStore(8, 1)
    copy = store.copy()
    copy.set(2)
    assert store.raw() == 1
    assert copy.raw() == 0b101


def test_fixed_repr():
    assert repr(FixedStore(16, 0x88)) == "FixedStore(width=16, value=0x88)"


def test_growable_starts_empty():
    store = GrowableStore()
    assert store.width == 64
    assert store.capacity() == 0
    assert store.word_count() == 0
    assert store.get(1000) is False
    assert store.capacity() == 0


def test_growable_set_grows(width):
    store = GrowableStore(width)
    assert store.set(100) is False
    assert store.capacity() >= 101
    assert store.capacity() % width == 0
    assert store.get(100)
    assert not store.get(50)
    assert store.word_count() == 100 // width + 1


def test_growable_growth_is_exact():
    store = GrowableStore(8)
    store.set(8)
    assert store.words() == [0, 1]
    store.set(3)
    assert store.words() == [0b1000, 1]


def test_growable_clear_past_end_is_noop():
    store = GrowableStore(8)
    assert store.clear(100) is False
    assert store.capacity() == 0


def test_growable_toggle_past_end_grows():
    store = GrowableStore(8)
    assert store.toggle(20) is False
    assert store.capacity() == 24
    assert store.get(20)
    assert store.toggle(20) is True
    assert not store.get(20)
    assert store.capacity() == 24


def test_growable_never_shrinks_implicitly():
    store = GrowableStore(8)
    store.set(30)
    store.clear(30)
    assert store.capacity() == 32


def test_growable_shrink_to_fit():
    store = GrowableStore(8, [1, 0, 4, 0, 0])
    assert store.shrink_to_fit() == 2
    assert store.words() == [1, 0, 4]
    assert store.shrink_to_fit() == 0
    store.clear(18)
    store.clear(0)
    assert store.shrink_to_fit() == 3
    assert store.capacity() == 0


def test_growable_reserve():
    store = GrowableStore(16)
    store.reserve(17)
    assert store.words() == [0, 0]
    store.reserve(3)
    assert store.word_count() == 2


def test_growable_with_capacity():
    store = GrowableStore.with_capacity(65, 32)
    assert store.capacity() == 96


def test_growable_capacity_overflow():
    store = GrowableStore(8, max_capacity=16)
    store.set(15)
    with pytest.raises(CapacityOverflowError) as excinfo:
        store.set(16)
    assert excinfo.value.limit == 16
    assert store.words() == [0, 0x80]
    with pytest.raises(OverflowError):
        store.toggle(1000)


def test_growable_default_limit_is_native_size():
    import sys

    with pytest.raises(CapacityOverflowError):
        GrowableStore(64).set(sys.maxsize)


def test_growable_initial_words_validated():
    with pytest.raises(ValueError):
        GrowableStore(8, [0x100])
    with pytest.raises(CapacityOverflowError):
        GrowableStore(8, [0, 0, 0], max_capacity=16)


def test_growable_rebuild_masks_tail():
    store = GrowableStore(8, max_capacity=64)
    rebuilt = store.rebuild([0xFF, 0xFF], 12)
    assert rebuilt.words() == [0xFF, 0x0F]
    assert rebuilt.max_capacity == 64
    assert store.rebuild([0xFF], 24).words() == [0xFF, 0, 0]


def test_growable_word_outside_words_is_zero():
    store = GrowableStore(8, [0x01, 0x80])
    assert store.word(1) == 0x80
    assert store.word(2) == 0
    assert store.word(-1) == 0
    assert FixedStore(8, 0xFF).word(-1) == 0


def test_growable_copy_is_independent():
    store = GrowableStore(8, [1])
    copy = store.copy()
    copy.set(20)
    assert store.words() == [1]
    assert copy.capacity() == 24


def test_growable_repr():
    assert repr(GrowableStore(8, [1, 0x80])) == "GrowableStore(width=8, words=[0x1, 0x80])"
