"""Provably fair commit-reveal protocol for a non-transitive dice game."""

__version__ = "0.1.0"
