"""Declarative rule configuration for the fairdice domain."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import TiePolicy


@dataclass(frozen=True, slots=True)
class FairnessRules:
    """Commitment and fair-value constants."""

    key_bytes: int = 32  # 256 bits
    digest: str = "sha3_256"
    first_move_range: int = 2
    dice_range: int = 6


@dataclass(frozen=True, slots=True)
class SeriesRules:
    """Series length, die selection and scoring options."""

    rounds: int = 1
    minimum_dice: int = 3
    tie_policy: TiePolicy = TiePolicy.DRAW
    guess_winner_picks_first: bool = False
    abort_on_verification_failure: bool = True


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container."""

    fairness: FairnessRules = FairnessRules()
    series: SeriesRules = SeriesRules()


DEFAULT_RULES = RulesConfig()
