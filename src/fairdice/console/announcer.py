"""Console announcer: human-readable protocol messages."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from fairdice.domain.dice import Die
from fairdice.domain.enums import Participant, RoundKind, RoundOutcome, SeriesOutcome
from fairdice.domain.models import Commitment, Reveal, RoundRecord, Series

_ROUND_VERDICT = {
    RoundOutcome.HOUSE: "I win!",
    RoundOutcome.COUNTERPART: "You win!",
    RoundOutcome.TIE: "It's a tie!",
}

_SERIES_VERDICT = {
    SeriesOutcome.HOUSE: "I win the series.",
    SeriesOutcome.COUNTERPART: "You win the series.",
    SeriesOutcome.DRAW: "The series is a draw.",
}


class ConsoleAnnouncer:
    """Write every protocol message to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def _say(self, message: str) -> None:
        print(message, file=self._stream)

    def commitment_published(self, kind: RoundKind, range_: int, commitment: Commitment) -> None:
        self._say(f"I selected a random value in the range 0..{range_ - 1} (HMAC={commitment}).")

    def revealed(self, kind: RoundKind, reveal: Reveal, verified: bool) -> None:
        if kind is RoundKind.FIRST_MOVE:
            self._say(f"My selection: {reveal.value} (KEY={reveal.key_hex}).")
        else:
            self._say(f"My number is {reveal.value} (KEY={reveal.key_hex}).")
            self._say(
                f"The result is {reveal.contribution} + {reveal.value} = "
                f"{reveal.combined_index} (mod {reveal.range})."
            )
        if verified:
            self._say("The HMAC matches the revealed value and key.")
        else:
            self._say("WARNING: the HMAC does NOT match the revealed value and key!")

    def first_move_decided(self, record: RoundRecord, first_picker: Participant) -> None:
        guessed = "right" if record.outcome is RoundOutcome.COUNTERPART else "wrong"
        picker = "You pick" if first_picker is Participant.COUNTERPART else "I pick"
        self._say(f"You guessed {guessed}. {picker} a die first.")

    def dice_offered(self, options: Sequence[Die]) -> None:
        self._say("Choose your dice:")
        for index, die in enumerate(options):
            self._say(f"{index} - {die.describe()}")

    def die_chosen(self, participant: Participant, die: Die) -> None:
        if participant is Participant.HOUSE:
            self._say(f"I choose the {die.describe()} dice.")
        else:
            self._say(f"You chose the {die.describe()} dice.")

    def round_resolved(self, number: int, record: RoundRecord) -> None:
        if record.outcome is None:
            raise ValueError("only resolved dice rounds can be announced")
        self._say(
            f"Round {number}: your throw is {record.counterpart_face}, "
            f"my throw is {record.house_face}. {_ROUND_VERDICT[record.outcome]}"
        )

    def series_finished(self, series: Series, outcome: SeriesOutcome) -> None:
        self._say(
            f"Final score: you {series.counterpart_score}, me {series.house_score}, "
            f"ties {series.ties}. {_SERIES_VERDICT[outcome]}"
        )
