"""Enumerations used across the fairdice domain."""

from __future__ import annotations

from enum import StrEnum


class Participant(StrEnum):
    """The two parties of every exchange."""

    HOUSE = "house"
    COUNTERPART = "counterpart"

    @property
    def opponent(self) -> Participant:
        return Participant.COUNTERPART if self is Participant.HOUSE else Participant.HOUSE


class ExchangePhase(StrEnum):
    """Lifecycle of a single commit-reveal exchange."""

    AWAIT_COMMITMENT = "await_commitment"
    AWAIT_CONTRIBUTION = "await_contribution"
    RESOLVED = "resolved"


class RoundKind(StrEnum):
    """What a resolved exchange was used for."""

    FIRST_MOVE = "first_move"
    DICE = "dice"


class RoundOutcome(StrEnum):
    """Result of a single dice round."""

    HOUSE = "house"
    COUNTERPART = "counterpart"
    TIE = "tie"


class TiePolicy(StrEnum):
    """How a series with equal scores is settled."""

    DRAW = "draw"
    HOUSE = "house"
    COUNTERPART = "counterpart"


class SeriesOutcome(StrEnum):
    """Final result of a series."""

    HOUSE = "house"
    COUNTERPART = "counterpart"
    DRAW = "draw"
