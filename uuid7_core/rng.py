"""
uuid7_core/rng.py — Random bit sources

A random source only has to answer one question: "give me N random bits".
The generator never reaches for a module-level RNG; it is handed one of
these, or falls back to SystemRandomSource, which keeps no state of its
own and is therefore safe to share between threads.

- SystemRandomSource:  OS entropy via `secrets` (default)
- SeededRandomSource:  private random.Random instance, reproducible output
"""

from __future__ import annotations

import random
import secrets
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce N random bits as a non-negative int."""

    def random_bits(self, n: int) -> int:
        ...


def _check_bit_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"Bit count must be non-negative, got {n}")


class SystemRandomSource:
    """Cryptographically strong bits from the operating system."""

    def random_bits(self, n: int) -> int:
        _check_bit_count(n)
        if n == 0:
            return 0
        return secrets.randbits(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class SeededRandomSource:
    """Deterministic bits from an owned random.Random instance.

    Not for production identifiers. Each instance carries its own state,
    so give every thread its own source rather than sharing one.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def random_bits(self, n: int) -> int:
        _check_bit_count(n)
        if n == 0:
            return 0
        return self._random.getrandbits(n)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"
