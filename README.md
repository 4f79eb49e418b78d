# lfukit

Frequency-tracking building blocks for cache admission and eviction policies.

- `lfukit.tinylfu`: `TinyLFU` and `TinyLFUBuilder`. TinyLFU estimates how often
  keys are accessed. A Bloom filter "doorkeeper" records the first sighting of a
  key; later sightings increment a count-min sketch with 4-bit counters. Every
  `samples` increments the doorkeeper is emptied and all counters are halved.
- `lfukit.sketch`: `CountMinSketch` (depth 4, with per-row random seeds; pass
  `seed` for a reproducible sketch), `CountMinRow` (a row of 4-bit counters
  that saturate at 15) and `next_power_of_2`.
- `lfukit.bloom`: `Bloom`, a Bloom filter over 64-bit hashes whose bitset is a
  power of two in size and at least 512 bits.
- `lfukit.sampled`: `SampledLFU`, a store of key costs, indexed by key hash,
  with a cost budget (`max_cost`) and `fill_sample` for picking eviction
  candidates.
- `lfukit.hashing`: `KeyHasher` (abstract) and `DefaultKeyHasher`, which mixes
  Python's built-in `hash` into a 64-bit value. Since `str` and `bytes` hashes
  vary between interpreter runs unless `PYTHONHASHSEED` is set, so do the key
  hashes of such keys.
- `lfukit.errors`: `TinyLFUError` and its subclasses.

## Installation

```
pip install lfukit
```

## Usage

Counting accesses to key hashes:

```python
from lfukit.tinylfu import TinyLFU

lfu = TinyLFU(16, 16, 0.01)
lfu.increment_hashed_keys([1, 2, 2, 3, 3, 3])

assert lfu.estimate_hashed_key(1) == 1
assert lfu.estimate_hashed_key(3) == 3
```

Keys of any hashable type go through the key hasher:

```python
lfu.increment("a")
lfu.increment("b")
lfu.increment("b")
print(lfu.estimate("b"), lfu.lt("a", "b"))
```

Estimates are approximate: distinct keys may share counters or doorkeeper
bits, so an estimate can exceed the true count.

`eq`, `le`, `lt`, `gt` and `ge` compare the counters of two keys, `contains`
and `contains_hash` ask the doorkeeper, and `clear` zeroes everything.

A builder sets the same options one at a time:

```python
from lfukit.tinylfu import TinyLFUBuilder

lfu = TinyLFUBuilder(1024, 100).set_false_positive_ratio(0.02).finalize()
```

Invalid settings raise errors from `lfukit.errors`, all derived from
`TinyLFUError` (itself a `ValueError`):

- a sample count of zero raises `InvalidSamplesError`;
- a false positive ratio outside (0.0, 1.0) raises
  `InvalidFalsePositiveRatioError`;
- a sketch width below one raises `InvalidCountMinWidthError`.

Keeping track of costs under a budget:

```python
from lfukit.sampled import SampledLFU

costs = SampledLFU(16)
costs.increment("x", 4)
assert costs.room_left(2) == 10
assert costs.update("x", 6)
assert costs.remove("x") == 6
assert costs.remove("x") is None
```

## What it does not do

lfukit holds no cached values. It has no LRU, segmented or window cache and no
W-TinyLFU cache built from them; it supplies the frequency estimates and cost
bookkeeping that such a cache would consult.

## Running the tests

```
pip install -e ".[test]"
pytest
```