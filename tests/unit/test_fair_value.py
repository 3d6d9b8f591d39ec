"""Tests for fair value generation."""

from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fairdice.domain.commitment import CommitmentScheme
from fairdice.domain.fair_value import FairValueGenerator
from fairdice.utils.rng import SeededRandomSource

DRAWS = 12_000

# Chi-squared critical values at the 0.001 significance level, keyed by range.
CHI_SQUARED_CRITICAL = {2: 10.828, 6: 20.515, 7: 22.458, 10: 27.877}


def _chi_squared(counts: Counter, range_: int, draws: int) -> float:
    expected = draws / range_
    return sum((counts.get(value, 0) - expected) ** 2 / expected for value in range(range_))


@settings(max_examples=30, deadline=None)
@given(range_=st.integers(min_value=1, max_value=1_000))
def test_values_always_within_range(range_):
    generator = FairValueGenerator()
    for _ in range(20):
        fair = generator.generate(range_)
        assert 0 <= fair.value < range_
        assert fair.range == range_


@pytest.mark.parametrize("range_", sorted(CHI_SQUARED_CRITICAL))
def test_distribution_is_uniform(range_):
    generator = FairValueGenerator()
    counts = Counter(generator.generate(range_).value for _ in range(DRAWS))

    assert set(counts) <= set(range(range_))
    assert _chi_squared(counts, range_, DRAWS) < CHI_SQUARED_CRITICAL[range_]


def test_commitment_attests_to_value():
    generator = FairValueGenerator()
    fair = generator.generate(6)

    assert generator.scheme.verify(fair.key, fair.value, fair.commitment)
    assert fair.commitment == generator.scheme.commit(fair.key, fair.value)


def test_each_draw_uses_a_fresh_key():
    generator = FairValueGenerator()
    keys = {generator.generate(6).key for _ in range(200)}
    assert len(keys) == 200


def test_seeded_generation_is_reproducible():
    def draws(seed):
        source = SeededRandomSource(seed)
        generator = FairValueGenerator(CommitmentScheme(source=source), source=source)
        return [generator.generate(6) for _ in range(5)]

    assert draws("replay") == draws("replay")


def test_scripted_value_is_used(scripted_generator):
    fair = scripted_generator([4]).generate(6)
    assert fair.value == 4


@pytest.mark.parametrize("range_", [0, -1])
def test_invalid_range(range_):
    with pytest.raises(ValueError, match="range must be at least 1"):
        FairValueGenerator().generate(range_)
