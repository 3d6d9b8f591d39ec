"""Exact matchup odds under shared-index resolution.

Both dice in a round are resolved at the same uniformly distributed combined
index, so the probability that one die beats another is the fraction of the
six positions where its face is strictly higher.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction

from fairdice.domain.dice import FACES_PER_DIE, Die


@dataclass(frozen=True, slots=True)
class Matchup:
    """Win, loss and tie probabilities of ``die`` against ``opponent``."""

    die: Die
    opponent: Die
    win: Fraction
    loss: Fraction
    tie: Fraction


def matchup(die: Die, opponent: Die) -> Matchup:
    """Compute exact odds for ``die`` against ``opponent``."""

    wins = losses = 0
    for index in range(FACES_PER_DIE):
        ours, theirs = die.resolve(index), opponent.resolve(index)
        if ours > theirs:
            wins += 1
        elif theirs > ours:
            losses += 1
    ties = FACES_PER_DIE - wins - losses
    return Matchup(
        die=die,
        opponent=opponent,
        win=Fraction(wins, FACES_PER_DIE),
        loss=Fraction(losses, FACES_PER_DIE),
        tie=Fraction(ties, FACES_PER_DIE),
    )


def win_probability(die: Die, opponent: Die) -> Fraction:
    return matchup(die, opponent).win


def best_response(options: Sequence[Die], opponent: Die) -> Die:
    """Pick the option with the highest win minus loss probability.

    The first option wins ties so the choice is deterministic.
    """
    if not options:
        raise ValueError("options cannot be empty")

    def edge(candidate: Die) -> Fraction:
        odds = matchup(candidate, opponent)
        return odds.win - odds.loss

    return max(options, key=edge)


def probability_table(dice: Sequence[Die]) -> list[list[Fraction | None]]:
    """Row ``i``, column ``j`` holds P(die i beats die j); the diagonal is None."""

    return [
        [None if row is column else win_probability(row, column) for column in dice]
        for row in dice
    ]


def is_nontransitive(dice: Sequence[Die]) -> bool:
    """True when every die is beaten by some other die with probability > 1/2."""

    half = Fraction(1, 2)
    return all(
        any(win_probability(other, die) > half for other in dice if other is not die)
        for die in dice
    )
