"""Pytest configuration and shared fakes.

This adds the `src/` directory to `sys.path` so tests can import the
`fairdice` package without requiring an editable install in CI, and provides
protocol-based fakes for the entropy source, the input provider and the
announcer.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from fairdice.domain.commitment import CommitmentScheme  # noqa: E402
from fairdice.domain.fair_value import FairValueGenerator  # noqa: E402


class ScriptedSource:
    """Entropy source returning scripted draws and distinct keys."""

    def __init__(self, values):
        self._values = list(values)
        self._keys = 0

    def randbelow(self, bound):
        value = self._values.pop(0)
        assert 0 <= value < bound, f"scripted value {value} outside [0, {bound})"
        return value

    def token_bytes(self, size):
        self._keys += 1
        return bytes([self._keys % 256]) * size


class ScriptedInput:
    """Input provider answering from a script and recording every prompt."""

    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts = []

    def request_integer(self, prompt, valid_range):
        self.prompts.append((prompt, valid_range))
        answer = self._answers.pop(0)
        assert answer in valid_range, f"scripted answer {answer} outside {valid_range}"
        return answer


class RecordingAnnouncer:
    """Announcer that keeps every message for later assertions."""

    def __init__(self):
        self.events = []

    def commitment_published(self, kind, range_, commitment):
        self.events.append(("commitment", kind, range_, commitment))

    def revealed(self, kind, reveal, verified):
        self.events.append(("revealed", kind, reveal, verified))

    def first_move_decided(self, record, first_picker):
        self.events.append(("first_move", record, first_picker))

    def dice_offered(self, options):
        self.events.append(("offered", list(options)))

    def die_chosen(self, participant, die):
        self.events.append(("chosen", participant, die))

    def round_resolved(self, number, record):
        self.events.append(("round", number, record))

    def series_finished(self, series, outcome):
        self.events.append(("series", series, outcome))

    def of(self, name):
        return [event for event in self.events if event[0] == name]


@pytest.fixture
def scripted_generator():
    """Build a FairValueGenerator whose house values follow a script."""

    def factory(values):
        source = ScriptedSource(values)
        return FairValueGenerator(CommitmentScheme(source=source), source=source)

    return factory


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def announcer():
    return RecordingAnnouncer()
