"""Dataclasses describing fairness exchanges, rounds and series.

Round and series state is carried in these explicit values; nothing in the
domain keeps module-level game state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

from .dice import Die
from .enums import RoundKind, RoundOutcome, SeriesOutcome, TiePolicy

# --- Protocol primitives --------------------------------------------------------

SecretKey = NewType("SecretKey", bytes)
Commitment = NewType("Commitment", str)


@dataclass(frozen=True, slots=True)
class FairValue:
    """A uniformly drawn value with the key and commitment attesting to it."""

    value: int
    range: int
    key: SecretKey
    commitment: Commitment


@dataclass(frozen=True, slots=True)
class Reveal:
    """What the house discloses once the contribution is fixed."""

    value: int
    range: int
    key: SecretKey
    contribution: int
    combined_index: int

    @property
    def key_hex(self) -> str:
        return self.key.hex()


# --- Rounds and series ----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RoundRecord:
    """Everything needed to re-check a resolved exchange after the fact."""

    kind: RoundKind
    range: int
    commitment: Commitment
    key: SecretKey
    value: int
    contribution: int
    combined_index: int
    verified: bool
    house_die: Die | None = None
    counterpart_die: Die | None = None
    house_face: int | None = None
    counterpart_face: int | None = None
    outcome: RoundOutcome | None = None


@dataclass(slots=True)
class Series:
    """Accumulated scores across the rounds of one game."""

    house_score: int = 0
    counterpart_score: int = 0
    ties: int = 0
    first_move: RoundRecord | None = None
    house_die: Die | None = None
    counterpart_die: Die | None = None
    rounds: list[RoundRecord] = field(default_factory=list)

    def record(self, record: RoundRecord) -> None:
        """Add a resolved dice round and update the scores."""

        if record.kind is not RoundKind.DICE or record.outcome is None:
            raise ValueError("only resolved dice rounds can be scored")
        if record.outcome is RoundOutcome.HOUSE:
            self.house_score += 1
        elif record.outcome is RoundOutcome.COUNTERPART:
            self.counterpart_score += 1
        else:
            self.ties += 1
        self.rounds.append(record)

    def outcome(self, tie_policy: TiePolicy = TiePolicy.DRAW) -> SeriesOutcome:
        """Strictly higher score wins; equal scores follow ``tie_policy``."""

        if self.house_score > self.counterpart_score:
            return SeriesOutcome.HOUSE
        if self.counterpart_score > self.house_score:
            return SeriesOutcome.COUNTERPART
        return SeriesOutcome(tie_policy.value)

    @property
    def rounds_played(self) -> int:
        return len(self.rounds)
