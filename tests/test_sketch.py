import pytest

from lfukit.errors import InvalidCountMinWidthError
from lfukit.sketch import DEPTH, CountMinRow, CountMinSketch, next_power_of_2


def test_count_min_row():
    cmr = CountMinRow(8)
    cmr.increment(0)
    assert cmr[0] == 0x01
    assert cmr.get(0) == 1
    assert cmr.get(1) == 0

    cmr.increment(1)
    assert cmr[0] == 0x11
    assert cmr.get(0) == 1
    assert cmr.get(1) == 1

    for _ in range(14):
        cmr.increment(1)
    assert cmr[0] == 0xF1
    assert cmr.get(1) == 15
    assert cmr.get(0) == 1

    for _ in range(3):
        cmr.increment(1)
        assert cmr[0] == 0xF1

    cmr.reset()
    assert cmr[0] == 0x70


def test_count_min_row_str_and_clear():
    cmr = CountMinRow(2)
    cmr.increment(1)
    assert str(cmr) == "00 01 00 00 "
    assert len(cmr) == 2
    cmr.clear()
    assert cmr[0] == 0
    assert cmr.get(1) == 0


def test_next_power_of_2():
    assert next_power_of_2(5) == 8
    assert next_power_of_2(16) == 16
    assert next_power_of_2(17) == 32
    assert next_power_of_2(1) == 1


def test_count_min_sketch():
    s = CountMinSketch(5)
    assert s.mask == 7


def test_count_min_sketch_invalid_width():
    with pytest.raises(InvalidCountMinWidthError) as info:
        CountMinSketch(0)
    assert info.value.value == 0


def test_count_min_sketch_increment():
    s = CountMinSketch(16, seed=42)
    s.increment(1)
    s.increment(5)
    s.increment(9)
    differing = [i for i in range(DEPTH) if str(s.rows[i]) != str(s.rows[0])]
    assert differing


def test_count_min_sketch_estimate():
    s = CountMinSketch(16)
    s.increment(1)
    s.increment(1)
    assert s.estimate(1) == 2
    assert s.estimate(0) == 0


def test_count_min_sketch_large_hash():
    cm = CountMinSketch(32)
    h = 0x0DDC0FFEEBADF00D
    cm.increment(h)
    cm.increment(h)
    assert cm.estimate(h) == 2


def test_count_min_sketch_reset():
    s = CountMinSketch(16)
    for _ in range(4):
        s.increment(1)
    s.reset()
    assert s.estimate(1) == 2


def test_count_min_sketch_clear():
    s = CountMinSketch(16)
    for i in range(16):
        s.increment(i)
    s.clear()
    assert all(s.estimate(i) == 0 for i in range(16))


def test_same_seed_is_reproducible():
    a = CountMinSketch(64, seed=9)
    b = CountMinSketch(64, seed=9)
    assert a.seeds == b.seeds