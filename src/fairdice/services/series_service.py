"""Series orchestration: first move, die selection and scoring rounds."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from fairdice.domain.analysis import best_response
from fairdice.domain.dice import Die, require_dice
from fairdice.domain.enums import Participant, RoundOutcome, SeriesOutcome
from fairdice.domain.models import RoundRecord, Series
from fairdice.domain.round import RoundResolver
from fairdice.domain.rules_config import DEFAULT_RULES, RulesConfig
from fairdice.interfaces import IAnnouncer, IInputProvider

logger = logging.getLogger(__name__)

DIE_SELECTION_PROMPT = "Your selection: "


class FairnessViolation(RuntimeError):
    """Raised when a revealed value does not match its commitment."""

    def __init__(self, record: RoundRecord) -> None:
        super().__init__(
            f"commitment {record.commitment} does not match revealed value {record.value}"
        )
        self.record = record


@dataclass(slots=True)
class SeriesResult:
    """A finished series and its settled outcome."""

    series: Series
    outcome: SeriesOutcome


class GameSeriesController:
    """Drive a complete series between the house and the counterpart.

    The controller owns no state between calls to :meth:`play`; everything a
    series accumulates lives in the returned :class:`Series`.
    """

    def __init__(
        self,
        resolver: RoundResolver,
        input_provider: IInputProvider,
        announcer: IAnnouncer,
        *,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self._resolver = resolver
        self._input = input_provider
        self._announcer = announcer
        self._rules = rules

    def play(self, dice: Sequence[Die], *, rounds: int | None = None) -> SeriesResult:
        """Play a full series with the given die set.

        Raises:
            ConfigurationError: If the die set is too small to choose from
            FairnessViolation: If a reveal fails verification and the rules
                ask to abort
        """
        series_rules = self._rules.series
        options = require_dice(dice, minimum=series_rules.minimum_dice)
        total_rounds = rounds if rounds is not None else series_rules.rounds
        if total_rounds < 1:
            raise ValueError(f"rounds must be at least 1, got {total_rounds}")

        series = Series()
        series.first_move = self._checked(self._resolver.play_first_move())
        first_picker = self.first_picker(series.first_move)
        self._announcer.first_move_decided(series.first_move, first_picker)
        logger.info("first move decided: %s picks first", first_picker.value)

        series.house_die, series.counterpart_die = self._select_dice(options, first_picker)

        for number in range(1, total_rounds + 1):
            record = self._checked(
                self._resolver.play_dice_round(series.house_die, series.counterpart_die)
            )
            series.record(record)
            self._announcer.round_resolved(number, record)
            logger.info(
                "round %d: house %d vs counterpart %d -> %s",
                number,
                record.house_face,
                record.counterpart_face,
                record.outcome,
            )

        outcome = series.outcome(series_rules.tie_policy)
        self._announcer.series_finished(series, outcome)
        logger.info(
            "series finished %d:%d (%d ties) -> %s",
            series.house_score,
            series.counterpart_score,
            series.ties,
            outcome.value,
        )
        return SeriesResult(series=series, outcome=outcome)

    def first_picker(self, first_move: RoundRecord) -> Participant:
        """Return who picks a die first given the first-move round."""

        guess_winner = (
            Participant.COUNTERPART
            if first_move.outcome is RoundOutcome.COUNTERPART
            else Participant.HOUSE
        )
        if self._rules.series.guess_winner_picks_first:
            return guess_winner
        return guess_winner.opponent

    def _select_dice(self, options: list[Die], first_picker: Participant) -> tuple[Die, Die]:
        if first_picker is Participant.HOUSE:
            house_die = options[0]
            self._announcer.die_chosen(Participant.HOUSE, house_die)
            counterpart_die = self._counterpart_choice(
                [die for die in options if die is not house_die]
            )
        else:
            counterpart_die = self._counterpart_choice(options)
            house_die = best_response(
                [die for die in options if die is not counterpart_die], counterpart_die
            )
            self._announcer.die_chosen(Participant.HOUSE, house_die)
        return house_die, counterpart_die

    def _counterpart_choice(self, available: list[Die]) -> Die:
        self._announcer.dice_offered(available)
        index = self._input.request_integer(DIE_SELECTION_PROMPT, range(len(available)))
        die = available[index]
        self._announcer.die_chosen(Participant.COUNTERPART, die)
        return die

    def _checked(self, record: RoundRecord) -> RoundRecord:
        if record.verified:
            return record
        logger.warning("fairness violation in %s round: %s", record.kind.value, record.commitment)
        if self._rules.series.abort_on_verification_failure:
            raise FairnessViolation(record)
        return record
