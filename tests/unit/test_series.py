"""Tests for series scoring and tie policies."""

from __future__ import annotations

import pytest

from fairdice.domain.enums import RoundKind, RoundOutcome, SeriesOutcome, TiePolicy
from fairdice.domain.models import Commitment, RoundRecord, SecretKey, Series


def _round(outcome: RoundOutcome, kind: RoundKind = RoundKind.DICE) -> RoundRecord:
    return RoundRecord(
        kind=kind,
        range=6,
        commitment=Commitment("00"),
        key=SecretKey(b"k" * 32),
        value=0,
        contribution=0,
        combined_index=0,
        verified=True,
        outcome=outcome,
    )


def test_house_wins_two_ties_one():
    series = Series()
    for outcome in (RoundOutcome.HOUSE, RoundOutcome.TIE, RoundOutcome.HOUSE):
        series.record(_round(outcome))

    assert (series.house_score, series.counterpart_score, series.ties) == (2, 0, 1)
    assert series.rounds_played == 3
    for policy in TiePolicy:
        assert series.outcome(policy) is SeriesOutcome.HOUSE


def test_counterpart_strictly_higher_wins():
    series = Series()
    series.record(_round(RoundOutcome.COUNTERPART))
    assert series.outcome(TiePolicy.HOUSE) is SeriesOutcome.COUNTERPART


@pytest.mark.parametrize(
    ("policy", "expected"),
    [
        (TiePolicy.DRAW, SeriesOutcome.DRAW),
        (TiePolicy.HOUSE, SeriesOutcome.HOUSE),
        (TiePolicy.COUNTERPART, SeriesOutcome.COUNTERPART),
    ],
)
def test_equal_scores_follow_tie_policy(policy, expected):
    series = Series()
    series.record(_round(RoundOutcome.HOUSE))
    series.record(_round(RoundOutcome.COUNTERPART))
    assert series.outcome(policy) is expected


def test_all_ties_default_to_draw():
    series = Series()
    series.record(_round(RoundOutcome.TIE))
    assert series.outcome() is SeriesOutcome.DRAW


def test_first_move_rounds_are_not_scored():
    series = Series()
    with pytest.raises(ValueError, match="only resolved dice rounds"):
        series.record(_round(RoundOutcome.HOUSE, kind=RoundKind.FIRST_MOVE))


def test_unresolved_round_is_not_scored():
    series = Series()
    with pytest.raises(ValueError):
        series.record(_round(None))
