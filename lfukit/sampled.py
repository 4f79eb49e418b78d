"""Sampled LFU: tracks the cost of each hashed key against a cost budget."""

from lfukit.hashing import DefaultKeyHasher

DEFAULT_SAMPLES = 5


class SampledLFU:
    """Stores key-cost pairs by key hash and keeps the total cost in use."""

    def __init__(self, max_cost, samples=DEFAULT_SAMPLES, key_hasher=None):
        self.max_cost = max_cost
        self.samples = samples
        self.used = 0
        self.key_costs = {}
        self.key_hasher = key_hasher if key_hasher is not None else DefaultKeyHasher()

    def hash_key(self, key):
        """Return the 64-bit hash of ``key``."""
        return self.key_hasher.hash_key(key)

    def room_left(self, cost):
        """Return the budget left after adding ``cost`` to what is in use."""
        return self.max_cost - (self.used + cost)

    def fill_sample(self, pairs):
        """Return ``pairs`` topped up with stored (hash, cost) pairs up to ``samples``."""
        pairs = list(pairs)
        if len(pairs) >= self.samples:
            return pairs
        for kh, cost in self.key_costs.items():
            pairs.append((kh, cost))
            if len(pairs) >= self.samples:
                break
        return pairs

    def increment(self, key, cost):
        """Store ``key`` with ``cost``."""
        self.increment_hashed_key(self.hash_key(key), cost)

    def increment_hashed_key(self, key, cost):
        """Store a key hash with ``cost``."""
        self.key_costs[key] = cost
        self.used += cost

    def remove_hashed_key(self, kh):
        """Remove a key hash; return its cost, or None if it was absent."""
        cost = self.key_costs.pop(kh, None)
        if cost is not None:
            self.used -= cost
        return cost

    def remove(self, key):
        """Remove ``key``; return its cost, or None if it was absent."""
        return self.remove_hashed_key(self.hash_key(key))

    def clear(self):
        """Forget every key and reset the cost in use."""
        self.used = 0
        self.key_costs.clear()

    def update(self, key, cost):
        """Change the cost of a stored ``key``; return False if it is absent."""
        return self.update_hashed_key(self.hash_key(key), cost)

    def update_hashed_key(self, key, cost):
        """Change the cost of a stored key hash; return False if it is absent."""
        prev = self.key_costs.get(key)
        if prev is None:
            return False
        self.used += cost - prev
        self.key_costs[key] = cost
        return True