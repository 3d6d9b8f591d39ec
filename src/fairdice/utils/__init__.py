"""Utility functions for the fairdice protocol."""

from fairdice.utils.rng import (
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    generate_seed,
)

__all__ = [
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "generate_seed",
]
