"""Key hashers used by the bloom filter and the count-min sketch."""

from abc import ABC, abstractmethod

MASK64 = (1 << 64) - 1


class KeyHasher(ABC):
    """Maps a key to an unsigned 64-bit hash."""

    @abstractmethod
    def hash_key(self, key):
        """Return the 64-bit hash of ``key``."""


class DefaultKeyHasher(KeyHasher):
    """Hashes keys with the built-in ``hash`` followed by a 64-bit mixer."""

    __slots__ = ("_seed",)

    def __init__(self, seed=0):
        self._seed = seed & MASK64

    def hash_key(self, key):
        x = (hash(key) ^ self._seed) & MASK64
        x = (x + 0x9E3779B97F4A7C15) & MASK64
        x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & MASK64
        return x ^ (x >> 31)