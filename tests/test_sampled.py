import pytest

from lfukit.sampled import SampledLFU


def test_remove():
    lfu = SampledLFU(4)
    lfu.increment_hashed_key(lfu.hash_key(1), 1)
    lfu.increment(2, 2)
    assert lfu.remove(2) == 2
    assert lfu.used == 1
    assert lfu.key_costs.get(2) is None
    assert lfu.remove_hashed_key(4) is None


def test_room():
    lfu = SampledLFU(16)
    lfu.increment(1, 1)
    lfu.increment_hashed_key(2, 2)
    lfu.increment_hashed_key(3, 3)
    assert lfu.room_left(4) == 6


def test_clear():
    lfu = SampledLFU(4)
    lfu.increment(1, 1)
    lfu.increment(2, 2)
    lfu.increment(3, 3)
    lfu.clear()
    assert len(lfu.key_costs) == 0
    assert lfu.used == 0


def test_update():
    lfu = SampledLFU(5)
    lfu.increment(1, 1)
    lfu.increment(2, 2)
    assert lfu.update(1, 2)
    assert lfu.used == 4
    kh = lfu.hash_key(2)
    assert lfu.update_hashed_key(kh, 3)
    assert lfu.used == 5
    assert not lfu.update(3, 3)


def test_fill_sample():
    lfu = SampledLFU(16)
    lfu.increment(4, 4)
    lfu.increment(5, 5)
    sample = lfu.fill_sample([(1, 1), (2, 2), (3, 3)])
    k = sample[-1][0]
    assert len(sample) == 5
    assert k not in (1, 2, 3)
    assert len(lfu.fill_sample(list(sample))) == len(sample)
    lfu.remove(5)
    sample = lfu.fill_sample(sample[: len(sample) - 2])
    assert len(sample) == 4


def test_fill_sample_does_not_mutate_input():
    lfu = SampledLFU(16)
    lfu.increment(7, 7)
    pairs = [(1, 1)]
    result = lfu.fill_sample(pairs)
    assert pairs == [(1, 1)]
    assert result == [(1, 1), (lfu.hash_key(7), 7)]


def test_custom_samples_limit():
    lfu = SampledLFU(100, samples=2)
    for i in range(5):
        lfu.increment(i, 1)
    assert len(lfu.fill_sample([])) == 2


def test_remove_hashed_key_returns_cost():
    lfu = SampledLFU(10)
    lfu.increment_hashed_key(42, 6)
    assert lfu.remove_hashed_key(42) == 6
    assert lfu.used == 0
    assert lfu.room_left(0) == 10


@pytest.mark.parametrize("key", [1, "apple", (1, 2)])
def test_hash_key_is_stable(key):
    lfu = SampledLFU(1)
    assert lfu.hash_key(key) == lfu.hash_key(key)
    assert 0 <= lfu.hash_key(key) < 1 << 64