"""End-to-end tests for the command line interface."""

from __future__ import annotations

import json

import pytest

from fairdice import main as cli
from fairdice.config import get_settings
from fairdice.factory import create_series_controller
from fairdice.utils.rng import SeededRandomSource

EFRON_LIKE = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]


class ZeroInput:
    """Answers every prompt with 0, which is valid for every range used."""

    def __init__(self):
        self.prompts = []

    def request_integer(self, prompt, valid_range):
        self.prompts.append(prompt)
        return 0


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FAIRDICE_DATA_DIR", str(tmp_path / "transcripts"))
    monkeypatch.delenv("FAIRDICE_ROUNDS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scripted_play(monkeypatch):
    provider = ZeroInput()

    def factory(rules, **_):
        return create_series_controller(
            rules, input_provider=provider, source=SeededRandomSource("cli")
        )

    monkeypatch.setattr(cli, "create_series_controller", factory)
    return provider


def test_odds_prints_probability_table(capsys):
    assert cli.main(["odds", *EFRON_LIKE]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert "[2,2,4,4,9,9]" in out
    assert "0.8333" in out
    assert "1.0000" in out


def test_odds_rejects_malformed_die(capsys):
    assert cli.main(["odds", "1,2,3", *EFRON_LIKE[:2]]) == cli.EXIT_CONFIGURATION
    assert "1,2,3" in capsys.readouterr().err


def test_play_requires_three_dice(capsys, scripted_play):
    assert cli.main(["play", *EFRON_LIKE[:2]]) == cli.EXIT_CONFIGURATION
    assert scripted_play.prompts == []
    assert "at least 3" in capsys.readouterr().err


def test_play_then_verify_saved_transcript(capsys, scripted_play, tmp_path):
    code = cli.main(["play", *EFRON_LIKE, "--rounds", "3", "--save-transcript"])

    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert out.startswith("Starting Non-Transitive Dice Game...")
    assert "Final score:" in out
    assert len(scripted_play.prompts) == 5

    (path,) = (tmp_path / "transcripts").glob("transcript_*.json")
    assert len(json.loads(path.read_text())["rounds"]) == 3

    assert cli.main(["verify", str(path)]) == cli.EXIT_OK
    assert "4 exchanges verified" in capsys.readouterr().out


def test_verify_reports_tampering(capsys, scripted_play, tmp_path):
    cli.main(["play", *EFRON_LIKE, "--save-transcript"])
    (path,) = (tmp_path / "transcripts").glob("transcript_*.json")
    payload = json.loads(path.read_text())
    payload["rounds"][0]["key"] = "00" * 32
    path.write_text(json.dumps(payload))
    capsys.readouterr()

    assert cli.main(["verify", str(path)]) == cli.EXIT_FAILURE
    out = capsys.readouterr().out
    assert "FAILED verification" in out
    assert "round 1: commitment does not match" in out


def test_verify_missing_file(capsys, tmp_path):
    assert cli.main(["verify", str(tmp_path / "missing.json")]) == cli.EXIT_FAILURE
    assert "Error:" in capsys.readouterr().err


def test_verify_unreadable_path(capsys, tmp_path):
    assert cli.main(["verify", str(tmp_path)]) == cli.EXIT_FAILURE
    assert "Error:" in capsys.readouterr().err


def test_invalid_environment_is_a_configuration_error(monkeypatch, capsys):
    monkeypatch.setenv("FAIRDICE_ROUNDS", "0")
    assert cli.main(["odds", *EFRON_LIKE]) == cli.EXIT_CONFIGURATION
    assert "invalid settings" in capsys.readouterr().err


def test_interrupt_exits_130(monkeypatch, capsys):
    class Interrupting:
        def request_integer(self, prompt, valid_range):
            raise KeyboardInterrupt

    monkeypatch.setattr(
        cli,
        "create_series_controller",
        lambda rules, **_: create_series_controller(rules, input_provider=Interrupting()),
    )

    assert cli.main(["play", *EFRON_LIKE]) == cli.EXIT_INTERRUPTED
    assert "Interrupted." in capsys.readouterr().err
