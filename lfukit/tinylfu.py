"""TinyLFU admission policy: a doorkeeper bloom filter in front of a count-min sketch."""

from lfukit.bloom import Bloom
from lfukit.errors import InvalidFalsePositiveRatioError, InvalidSamplesError
from lfukit.hashing import DefaultKeyHasher
from lfukit.sketch import CountMinSketch

DEFAULT_FALSE_POSITIVE_RATIO = 0.01


class TinyLFUBuilder:
    """Collects the settings of a :class:`TinyLFU` and builds it."""

    def __init__(self, size=0, samples=0):
        self.size = size
        self.samples = samples
        self.false_positive_ratio = DEFAULT_FALSE_POSITIVE_RATIO
        self.key_hasher = DefaultKeyHasher()

    def set_samples(self, samples):
        """Set the number of increments between resets."""
        self.samples = samples
        return self

    def set_size(self, size):
        """Set the number of counters of the sketch."""
        self.size = size
        return self

    def set_false_positive_ratio(self, fp_ratio):
        """Set the false positive ratio of the doorkeeper."""
        self.false_positive_ratio = fp_ratio
        return self

    def set_key_hasher(self, key_hasher):
        """Set the hasher used to turn keys into 64-bit hashes."""
        self.key_hasher = key_hasher
        return self

    def finalize(self):
        """Build the configured :class:`TinyLFU`."""
        return TinyLFU(
            self.size,
            self.samples,
            self.false_positive_ratio,
            self.key_hasher,
        )


class TinyLFU:
    """Admission helper tracking access frequency with 4-bit counters."""

    def __init__(
        self,
        size,
        samples,
        false_positive_ratio=DEFAULT_FALSE_POSITIVE_RATIO,
        key_hasher=None,
    ):
        if samples == 0:
            raise InvalidSamplesError(samples)
        if not 0.0 < false_positive_ratio < 1.0:
            raise InvalidFalsePositiveRatioError(false_positive_ratio)

        self.sketch = CountMinSketch(size)
        self.doorkeeper = Bloom(samples, false_positive_ratio)
        self.samples = samples
        self.window = 0
        self.key_hasher = key_hasher if key_hasher is not None else DefaultKeyHasher()

    @classmethod
    def from_builder(cls, builder):
        """Build a TinyLFU from a :class:`TinyLFUBuilder`."""
        return builder.finalize()

    def hash_key(self, key):
        """Return the 64-bit hash of ``key``."""
        return self.key_hasher.hash_key(key)

    def estimate(self, key):
        """Estimate the access frequency of ``key``."""
        return self.estimate_hashed_key(self.hash_key(key))

    def estimate_hashed_key(self, kh):
        """Estimate the access frequency of a key hash.

        The doorkeeper adds one to the sketch's estimate when it holds the hash.
        """
        hits = self.sketch.estimate(kh)
        if self.doorkeeper.contains(kh):
            hits += 1
        return hits

    def increment_keys(self, keys):
        """Record an access for each key in ``keys``."""
        for key in keys:
            self.increment(key)

    def increment_hashed_keys(self, khs):
        """Record an access for each key hash in ``khs``."""
        for kh in khs:
            self.increment_hashed_key(kh)

    def increment(self, key):
        """Record an access to ``key``."""
        self.increment_hashed_key(self.hash_key(key))

    def increment_hashed_key(self, kh):
        """Record an access to a key hash."""
        # The first sighting only flips the doorkeeper bits.
        if not self.doorkeeper.contains_or_add(kh):
            self.sketch.increment(kh)
        self.try_reset()

    def try_reset(self):
        """Count one sample and age the counters once ``samples`` is reached."""
        self.window += 1
        if self.window >= self.samples:
            self._reset()

    def _reset(self):
        self.window = 0
        self.doorkeeper.reset()
        self.sketch.reset()

    def clear(self):
        """Zero the doorkeeper and every counter."""
        self.window = 0
        self.doorkeeper.clear()
        self.sketch.clear()

    def contains(self, key):
        """Return True if the doorkeeper holds ``key``."""
        return self.doorkeeper.contains(self.hash_key(key))

    def contains_hash(self, kh):
        """Return True if the doorkeeper holds the key hash."""
        return self.doorkeeper.contains(kh)

    def _counters(self, a, b):
        akh = self.hash_key(a)
        bkh = self.hash_key(b)
        if not self.doorkeeper.contains(akh):
            return (0, 1) if self.doorkeeper.contains(bkh) else (0, 0)
        if not self.doorkeeper.contains(bkh):
            return 1, 0
        return 1 + self.sketch.estimate(akh), 1 + self.sketch.estimate(bkh)

    def eq(self, a, b):
        """Return True if ``a``'s counter equals ``b``'s."""
        ac, bc = self._counters(a, b)
        return ac == bc

    def le(self, a, b):
        """Return True if ``a``'s counter is at most ``b``'s."""
        ac, bc = self._counters(a, b)
        return ac <= bc

    def lt(self, a, b):
        """Return True if ``a``'s counter is below ``b``'s."""
        ac, bc = self._counters(a, b)
        return ac < bc

    def gt(self, a, b):
        """Return True if ``a``'s counter is above ``b``'s."""
        ac, bc = self._counters(a, b)
        return ac > bc

    def ge(self, a, b):
        """Return True if ``a``'s counter is at least ``b``'s."""
        ac, bc = self._counters(a, b)
        return ac >= bc