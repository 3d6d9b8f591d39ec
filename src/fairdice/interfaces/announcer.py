"""Announcer Protocol Interface.

This module defines the protocol (interface) used to show commitments,
reveals, selections and results to the counterpart. Output is human-readable
and not part of the protocol's correctness surface.
"""

from collections.abc import Sequence
from typing import Protocol

from fairdice.domain.dice import Die
from fairdice.domain.enums import Participant, RoundKind, SeriesOutcome
from fairdice.domain.models import Commitment, Reveal, RoundRecord, Series


class IAnnouncer(Protocol):
    """Protocol defining every message the counterpart receives."""

    def commitment_published(self, kind: RoundKind, range_: int, commitment: Commitment) -> None:
        """Show the commitment before the counterpart contributes."""
        ...

    def revealed(self, kind: RoundKind, reveal: Reveal, verified: bool) -> None:
        """Disclose value and key together with the verification result."""
        ...

    def first_move_decided(self, record: RoundRecord, first_picker: Participant) -> None:
        """Report who picks a die first."""
        ...

    def dice_offered(self, options: Sequence[Die]) -> None:
        """List the dice the counterpart may choose from."""
        ...

    def die_chosen(self, participant: Participant, die: Die) -> None:
        """Report a die selection."""
        ...

    def round_resolved(self, number: int, record: RoundRecord) -> None:
        """Report both faces and the winner of a dice round."""
        ...

    def series_finished(self, series: Series, outcome: SeriesOutcome) -> None:
        """Report the final scores."""
        ...
