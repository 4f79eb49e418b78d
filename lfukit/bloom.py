"""A simple bloom filter over 64-bit hashes."""

import math

_LN_2 = 0.69314718056
_MASK64 = (1 << 64) - 1
_HEADER_BYTES = 5 * 8


def _get_size(n):
    n = max(n, 512)
    size, exp = 1, 0
    while size < n:
        size <<= 1
        exp += 1
    return size, exp


def _size_by_wrong_positives(num_entries, wrongs):
    if num_entries == 0:
        return 0, 0
    size = -1.0 * num_entries * math.log(wrongs) / (_LN_2 ** 2)
    locs = math.ceil(_LN_2 * size / num_entries)
    return int(size), int(locs)


class Bloom:
    """Bloom filter whose bitset is a power of two in size (at least 512 bits)."""

    def __init__(self, cap, false_positive_ratio):
        if false_positive_ratio < 1.0:
            entries, locs = _size_by_wrong_positives(float(cap), false_positive_ratio)
        else:
            entries, locs = cap, int(false_positive_ratio)

        size, exp = _get_size(entries)
        self._bits = bytearray((size >> 6) * 8)
        self.elem_num = 0
        self.mask = size - 1
        self.size_exp = exp
        self.set_locs = locs
        self.shift = 64 - exp

    def resize(self, sz):
        """Replace the bitset with an empty one of ``sz`` bits (rounded down to words)."""
        self._bits = bytearray((sz >> 6) * 8)

    def reset(self):
        """Zero every bit."""
        self._bits = bytearray(len(self._bits))

    def clear(self):
        """Zero every bit."""
        self.reset()

    def set(self, idx):
        """Set bit ``idx``."""
        self._bits[idx >> 3] |= 1 << (idx & 7)

    def is_set(self, idx):
        """Return whether bit ``idx`` is set."""
        return bool((self._bits[idx >> 3] >> (idx & 7)) & 1)

    def _positions(self, hash_value):
        hash_value &= _MASK64
        h = hash_value >> self.shift
        l = ((hash_value << self.shift) & _MASK64) >> self.shift
        return (((h + i * l) & _MASK64) & self.mask for i in range(self.set_locs))

    def add(self, hash_value):
        """Record ``hash_value`` in the filter."""
        for pos in self._positions(hash_value):
            self.set(pos)
            self.elem_num += 1

    def contains(self, hash_value):
        """Return True if every bit for ``hash_value`` is set."""
        return all(self.is_set(pos) for pos in self._positions(hash_value))

    def contains_or_add(self, hash_value):
        """Add ``hash_value`` if absent; return True if it was added."""
        if self.contains(hash_value):
            return False
        self.add(hash_value)
        return True

    def total_size(self):
        """Return the approximate memory size of the filter in bytes."""
        return len(self._bits) + _HEADER_BYTES