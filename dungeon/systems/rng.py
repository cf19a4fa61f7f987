"""Domain-separated deterministic RNG using xxhash.

Every draw is a pure function of ``(seed, domain, key, counter)``, so the
same seed always produces the same dungeon no matter which code path asks
for numbers first.

Formula: RNG_Value = Hash(Seed, Domain, Key, Counter)
"""

from __future__ import annotations

import struct

import xxhash

from dungeon.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, counter: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, counter)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, counter: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, counter) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, counter: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, counter)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, key: int, counter: int, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, counter) < probability

    def stream(self, domain: Domain, key: int = 0) -> RngStream:
        return RngStream(self, domain, key)


class RngStream:
    """Sequential view over one (domain, key) pair.

    Each draw advances an internal counter, which keeps call sites that need
    "the next random number" simple while staying reproducible.
    """

    __slots__ = ("_rng", "_domain", "_key", "_counter")

    def __init__(self, rng: DeterministicRNG, domain: Domain, key: int = 0) -> None:
        self._rng = rng
        self._domain = domain
        self._key = key
        self._counter = 0

    def _advance(self) -> int:
        c = self._counter
        self._counter += 1
        return c

    def randint(self, low: int, high: int) -> int:
        """Integer in [low, high] inclusive."""
        return self._rng.next_int(self._domain, self._key, self._advance(), low, high)

    def random(self) -> float:
        return self._rng.next_float(self._domain, self._key, self._advance())

    def chance(self, probability: float = 0.5) -> bool:
        return self._rng.next_bool(self._domain, self._key, self._advance(), probability)
