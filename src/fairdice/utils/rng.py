"""Entropy sources for the fairdice protocol.

Every random draw made by the protocol goes through a :class:`RandomSource`.
Two sources are provided:

- :class:`SystemRandomSource` reads the operating system CSPRNG through the
  :mod:`secrets` module. It is the only source suitable for real play.
- :class:`SeededRandomSource` derives a ``random.Random`` from a seed string so
  that simulations and tests can be replayed exactly. Keys drawn from it are
  predictable and must never protect a real exchange.

Both ``randbelow`` implementations are free of modulo bias for arbitrary
bounds: ``secrets.randbelow`` and ``random.Random.randrange`` already reject
out-of-range candidates internally, so callers must not wrap them in a second
rejection loop.

Examples:
    >>> source = SeededRandomSource(generate_seed("simulation", 7))
    >>> 0 <= source.randbelow(6) < 6
    True
"""

from __future__ import annotations

import hashlib
import random
import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Minimal entropy interface used by the commitment scheme and generator."""

    def randbelow(self, bound: int) -> int:
        """Return an integer uniformly distributed over ``[0, bound)``."""
        ...

    def token_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes."""
        ...


class SystemRandomSource:
    """Cryptographically secure source backed by :mod:`secrets`."""

    def randbelow(self, bound: int) -> int:
        if bound < 1:
            raise ValueError(f"bound must be positive, got {bound}")
        return secrets.randbelow(bound)

    def token_bytes(self, size: int) -> bytes:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        return secrets.token_bytes(size)


class SeededRandomSource:
    """Deterministic source for reproducible simulations.

    Args:
        seed: Seed string (see :func:`generate_seed`)
    """

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self._rng = random.Random(_seed_to_int(seed))

    def randbelow(self, bound: int) -> int:
        if bound < 1:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._rng.randrange(bound)

    def token_bytes(self, size: int) -> bytes:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        return self._rng.randbytes(size)


def generate_seed(context: str, index: int) -> str:
    """Build a seed string for a seeded simulation run.

    Format: "context:index"

    Examples:
        >>> generate_seed("matchup", 3)
        'matchup:3'

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")

    return f"{context}:{index}"


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    # Use first 8 bytes for a 64-bit integer
    return int.from_bytes(digest[:8], "big", signed=False)
