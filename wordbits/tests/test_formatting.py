from wordbits.bitset import BitSet
from wordbits.formatting import binary, pretty
from wordbits.store import FixedStore, GrowableStore


def test_binary():
    assert binary(FixedStore(8)) == "0b_0000_0000"
    assert binary(FixedStore(8, 0xFF)) == "0b_1111_1111"
    assert binary(FixedStore(16, 0b100)) == "0b_0000_0000_0000_0100"
    assert binary(GrowableStore(8)) == "0b"


def test_pretty():
    bs = BitSet.from_words([0x01, 0xF0], word_width=8)
    header, rule, *rows = bs.pretty().splitlines()
    assert header.split() == ["word", "bits", "hex", "ones"]
    assert set(rule.replace(" ", "")) == {"-"}
    assert [row.split() for row in rows] == [
        ["0", "0..7", "01", "1"],
        ["1", "8..15", "f0", "4"],
    ]


def test_pretty_zero_pads_hex():
    table = pretty(FixedStore(32, 0xAB), tablefmt="plain")
    assert "000000ab" in table


def test_pretty_passes_tablefmt():
    store = FixedStore(16, 0xABCD)
    assert "abcd" in pretty(store, tablefmt="plain")
    assert "|" in pretty(store, tablefmt="github")
