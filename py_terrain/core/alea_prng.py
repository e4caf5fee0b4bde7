"""
Alea pseudo-random number generator.

Based on Johannes Baagøe's Alea algorithm. Every terrain generator owns
its own instance so that a fixed seed always reproduces the same terrain,
independent of any other generator.
"""

from typing import Union

Seed = Union[int, str]


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


def _mash_seed(seed: Seed):
    """Derive the three Alea state words from a seed."""
    mash_n = 0xEFC8249D  # 4022871197

    def mash(data):
        nonlocal mash_n
        for char in str(data):
            mash_n = mash_n + ord(char)
            h = 0.02519603282416938 * mash_n
            mash_n = _uint32(h)
            h -= mash_n
            h *= mash_n
            mash_n = _uint32(h)
            h -= mash_n
            mash_n += h * 0x100000000  # 2^32
        return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

    s0 = mash(" ")
    s1 = mash(" ")
    s2 = mash(" ")

    s0 -= mash(seed)
    if s0 < 0:
        s0 += 1
    s1 -= mash(seed)
    if s1 < 0:
        s1 += 1
    s2 -= mash(seed)
    if s2 < 0:
        s2 += 1

    return s0, s1, s2


class AleaPRNG:
    """Seeded Alea PRNG producing floats in [0, 1)."""

    def __init__(self, seed: Seed = 42):
        self.seed = seed
        self.call_count = 0
        self.s0, self.s1, self.s2 = _mash_seed(seed)
        self.c = 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def uniform(self, low: float, high: float) -> float:
        """Random float in [low, high) drawn with a single call to random()."""
        return low + self.random() * (high - low)

    def next_int(self, upper: int) -> int:
        """Random integer in [0, upper)."""
        if upper <= 0:
            raise ValueError(f"upper must be positive, got {upper}")
        return int(self.random() * upper)
