"""Round resolution: one commit, contribute, reveal, resolve exchange.

Each exchange moves through three phases::

    AWAIT_COMMITMENT -> AWAIT_CONTRIBUTION -> RESOLVED

The house's commitment is published on entering ``AWAIT_CONTRIBUTION``; the
value and key are only disclosed once the counterpart's contribution is fixed.
The combined index ``(contribution + value) mod range`` is uniform as long as
the house's value is, and neither side controls it alone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fairdice.domain.dice import Die
from fairdice.domain.enums import ExchangePhase, RoundKind, RoundOutcome
from fairdice.domain.fair_value import FairValueGenerator
from fairdice.domain.models import Commitment, FairValue, Reveal, RoundRecord
from fairdice.domain.rules_config import DEFAULT_RULES, FairnessRules

if TYPE_CHECKING:
    from fairdice.interfaces import IAnnouncer, IInputProvider

logger = logging.getLogger(__name__)

FIRST_MOVE_PROMPT = "Try to guess my selection (0 or 1): "
CONTRIBUTION_PROMPT = "Add your number modulo {range} (0-{max}): "


class InvalidContribution(ValueError):
    """Raised when a contribution is not an integer in ``[0, range)``."""


class ProtocolStateError(RuntimeError):
    """Raised when an exchange operation is called in the wrong phase."""


def combine(contribution: int, value: int, range_: int) -> int:
    """Combine both contributions into an index in ``[0, range_)``."""

    return (contribution + value) % range_


def compare_faces(house_face: int, counterpart_face: int) -> RoundOutcome:
    """Strictly greater face wins; equal faces tie."""

    if house_face > counterpart_face:
        return RoundOutcome.HOUSE
    if counterpart_face > house_face:
        return RoundOutcome.COUNTERPART
    return RoundOutcome.TIE


class CommitRevealExchange:
    """State machine for a single fairness exchange over ``[0, range_)``."""

    def __init__(self, generator: FairValueGenerator, range_: int) -> None:
        if range_ < 1:
            raise ValueError(f"range must be at least 1, got {range_}")
        self.range = range_
        self.phase = ExchangePhase.AWAIT_COMMITMENT
        self._generator = generator
        self._fair: FairValue | None = None
        self._reveal: Reveal | None = None

    @property
    def commitment(self) -> Commitment:
        if self._fair is None:
            raise ProtocolStateError("no commitment has been made yet")
        return self._fair.commitment

    def commit(self) -> Commitment:
        """Draw the house value and return the commitment to publish."""

        self._require(ExchangePhase.AWAIT_COMMITMENT, "commit")
        self._fair = self._generator.generate(self.range)
        self.phase = ExchangePhase.AWAIT_CONTRIBUTION
        return self._fair.commitment

    def contribute(self, contribution: int) -> Reveal:
        """Fix the counterpart's contribution and resolve the exchange.

        Raises:
            InvalidContribution: If the contribution is outside ``[0, range)``
        """
        self._require(ExchangePhase.AWAIT_CONTRIBUTION, "contribute")
        if (
            isinstance(contribution, bool)
            or not isinstance(contribution, int)
            or not 0 <= contribution < self.range
        ):
            raise InvalidContribution(
                f"contribution must be an integer in [0, {self.range}), got {contribution!r}"
            )
        fair = self._fair
        if fair is None:
            raise ProtocolStateError("no commitment has been made yet")
        self._reveal = Reveal(
            value=fair.value,
            range=self.range,
            key=fair.key,
            contribution=contribution,
            combined_index=combine(contribution, fair.value, self.range),
        )
        self.phase = ExchangePhase.RESOLVED
        logger.debug(
            "exchange resolved: value=%d contribution=%d index=%d",
            fair.value,
            contribution,
            self._reveal.combined_index,
        )
        return self._reveal

    def reveal(self) -> Reveal:
        """Return the disclosed value and key; only valid once resolved."""

        self._require(ExchangePhase.RESOLVED, "reveal")
        if self._reveal is None:
            raise ProtocolStateError("exchange resolved without a reveal")
        return self._reveal

    def _require(self, phase: ExchangePhase, operation: str) -> None:
        if self.phase is not phase:
            raise ProtocolStateError(
                f"cannot {operation} while exchange is in phase {self.phase.value}"
            )


class RoundResolver:
    """Run first-move and dice rounds against the counterpart."""

    def __init__(
        self,
        generator: FairValueGenerator,
        input_provider: IInputProvider,
        announcer: IAnnouncer,
        *,
        rules: FairnessRules = DEFAULT_RULES.fairness,
    ) -> None:
        self._generator = generator
        self._input = input_provider
        self._announcer = announcer
        self._rules = rules

    def play_first_move(self) -> RoundRecord:
        """Guess-the-bit round.

        The counterpart guesses the house's bit; the guess is right exactly
        when the combined index is 0. ``outcome`` names the winner of the guess.
        """
        range_ = self._rules.first_move_range
        commitment, reveal, verified = self._exchange(
            RoundKind.FIRST_MOVE, range_, FIRST_MOVE_PROMPT
        )
        outcome = RoundOutcome.COUNTERPART if reveal.combined_index == 0 else RoundOutcome.HOUSE
        return RoundRecord(
            kind=RoundKind.FIRST_MOVE,
            range=range_,
            commitment=commitment,
            key=reveal.key,
            value=reveal.value,
            contribution=reveal.contribution,
            combined_index=reveal.combined_index,
            verified=verified,
            outcome=outcome,
        )

    def play_dice_round(self, house_die: Die, counterpart_die: Die) -> RoundRecord:
        """Resolve both dice at the same combined index and compare faces."""

        range_ = self._rules.dice_range
        prompt = CONTRIBUTION_PROMPT.format(range=range_, max=range_ - 1)
        commitment, reveal, verified = self._exchange(RoundKind.DICE, range_, prompt)
        house_face = house_die.resolve(reveal.combined_index)
        counterpart_face = counterpart_die.resolve(reveal.combined_index)
        return RoundRecord(
            kind=RoundKind.DICE,
            range=range_,
            commitment=commitment,
            key=reveal.key,
            value=reveal.value,
            contribution=reveal.contribution,
            combined_index=reveal.combined_index,
            verified=verified,
            house_die=house_die,
            counterpart_die=counterpart_die,
            house_face=house_face,
            counterpart_face=counterpart_face,
            outcome=compare_faces(house_face, counterpart_face),
        )

    def _exchange(
        self, kind: RoundKind, range_: int, prompt: str
    ) -> tuple[Commitment, Reveal, bool]:
        exchange = CommitRevealExchange(self._generator, range_)
        commitment = exchange.commit()
        self._announcer.commitment_published(kind, range_, commitment)

        contribution = self._input.request_integer(prompt, range(range_))
        reveal = exchange.contribute(contribution)

        verified = self._generator.scheme.verify(reveal.key, reveal.value, commitment)
        self._announcer.revealed(kind, reveal, verified)
        return commitment, reveal, verified
