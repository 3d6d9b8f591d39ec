"""Tests for exact matchup odds."""

from __future__ import annotations

from fractions import Fraction

import pytest

from fairdice.domain.analysis import (
    best_response,
    is_nontransitive,
    matchup,
    probability_table,
    win_probability,
)
from fairdice.domain.dice import Die


@pytest.fixture
def listed_triple():
    return (
        Die((2, 2, 4, 4, 9, 9)),
        Die((1, 1, 1, 4, 4, 4)),
        Die((3, 3, 5, 5, 7, 7)),
    )


@pytest.fixture
def cyclic_triple():
    return (
        Die((3, 3, 1, 1, 2, 2)),
        Die((2, 2, 3, 3, 1, 1)),
        Die((1, 1, 2, 2, 3, 3)),
    )


def test_listed_triple_shared_index_odds(listed_triple):
    a, b, c = listed_triple
    assert win_probability(a, b) == Fraction(5, 6)
    assert win_probability(c, a) == Fraction(4, 6)
    assert win_probability(c, b) == 1
    assert matchup(a, b).tie == Fraction(1, 6)


def test_listed_triple_is_not_cyclic_under_shared_index(listed_triple):
    assert not is_nontransitive(listed_triple)


def test_cyclic_triple_every_die_is_beaten(cyclic_triple):
    a, b, c = cyclic_triple
    assert win_probability(a, b) == Fraction(2, 3)
    assert win_probability(b, c) == Fraction(2, 3)
    assert win_probability(c, a) == Fraction(2, 3)
    assert is_nontransitive(cyclic_triple)


def test_matchup_probabilities_sum_to_one(listed_triple):
    for die in listed_triple:
        for other in listed_triple:
            odds = matchup(die, other)
            assert odds.win + odds.loss + odds.tie == 1
            assert odds.win == matchup(other, die).loss


def test_best_response_beats_choice(cyclic_triple):
    a, b, c = cyclic_triple
    assert best_response([b, c], a) is c
    assert best_response([a, c], b) is a
    assert best_response([a, b], c) is b


def test_best_response_prefers_first_on_equal_edge():
    first = Die((1, 2, 3, 4, 5, 6))
    second = Die((1, 2, 3, 4, 5, 6))
    opponent = Die((1, 1, 1, 1, 1, 1))
    assert best_response([first, second], opponent) is first


def test_best_response_requires_options():
    with pytest.raises(ValueError):
        best_response([], Die((1, 1, 1, 1, 1, 1)))


def test_probability_table(listed_triple):
    table = probability_table(listed_triple)
    assert [row[index] for index, row in enumerate(table)] == [None, None, None]
    assert table[0][1] == Fraction(5, 6)
    assert table[1][2] == 0


def test_identical_faces_are_distinct_entries():
    first = Die((1, 2, 3, 4, 5, 6))
    second = Die((1, 2, 3, 4, 5, 6))
    table = probability_table([first, second])
    assert table[0][1] == 0
