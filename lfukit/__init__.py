"""TinyLFU, count-min sketch, Bloom filter and sampled LFU for cache policies."""

__version__ = "0.1.0"

__all__ = ["bloom", "errors", "hashing", "sampled", "sketch", "tinylfu"]