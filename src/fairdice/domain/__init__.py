"""Domain model for fairdice.

This package hosts the provably fair protocol and the game rules built on it:

* The HMAC commitment scheme and fair value generator.
* Dice, their parsing, and exact matchup odds (see :mod:`analysis`).
* The commit-reveal exchange state machine and round resolution.
* Explicit round and series values (see :mod:`models`).
* Rule configuration objects (see :mod:`rules_config`).

Everything here runs in memory; console and persistence adapters live
outside this package.
"""

from . import (
    analysis,
    commitment,
    dice,
    enums,
    fair_value,
    models,
    round,
    rules_config,
)

__all__ = [
    "analysis",
    "commitment",
    "dice",
    "enums",
    "fair_value",
    "models",
    "round",
    "rules_config",
]
