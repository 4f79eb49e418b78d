"""Count-min sketch with 4-bit counters."""

import random

DEPTH = 4
_MASK64 = (1 << 64) - 1

from lfukit.errors import InvalidCountMinWidthError  # noqa: E402


def next_power_of_2(num):
    """Return the smallest power of two that is >= ``num``."""
    num = (num - 1) & _MASK64
    for shift in (1, 2, 4, 8, 16):
        num |= num >> shift
    return (num + 1) & _MASK64


class CountMinRow:
    """A row of 4-bit counters, two per byte."""

    __slots__ = ("_data",)

    def __init__(self, width):
        self._data = bytearray(width)

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self):
        return len(self._data)

    def __str__(self):
        return "".join(f"{self.get(i):02d} " for i in range(len(self._data) * 2))

    def get(self, i):
        """Return counter ``i``."""
        return (self._data[i // 2] >> ((i & 1) * 4)) & 0x0F

    def increment(self, i):
        """Increase counter ``i`` by one, saturating at 15."""
        idx = i // 2
        shift = (i & 1) * 4
        if (self._data[idx] >> shift) & 0x0F < 15:
            self._data[idx] += 1 << shift

    def reset(self):
        """Halve every counter."""
        self._data = bytearray((v >> 1) & 0x77 for v in self._data)

    def clear(self):
        """Zero every counter."""
        self._data = bytearray(len(self._data))


class CountMinSketch:
    """Conservative count-min sketch of depth 4 with 4-bit counters."""

    def __init__(self, ctrs, seed=None):
        if ctrs < 1:
            raise InvalidCountMinWidthError(ctrs)
        ctrs = next_power_of_2(ctrs)
        half = ctrs // 2
        rng = random.Random(seed)
        self.rows = tuple(CountMinRow(half) for _ in range(DEPTH))
        self.seeds = tuple(rng.getrandbits(64) for _ in range(DEPTH))
        self.mask = ctrs - 1

    def increment(self, hashed):
        """Increment the counters for ``hashed``."""
        hashed &= _MASK64
        for row, seed in zip(self.rows, self.seeds):
            row.increment((hashed ^ seed) & self.mask)

    def estimate(self, hashed):
        """Return the estimated count for ``hashed``."""
        hashed &= _MASK64
        return min(
            row.get((hashed ^ seed) & self.mask)
            for row, seed in zip(self.rows, self.seeds)
        )

    def reset(self):
        """Halve all counters."""
        for row in self.rows:
            row.reset()

    def clear(self):
        """Zero all counters."""
        for row in self.rows:
            row.clear()