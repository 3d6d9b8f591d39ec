"""Export and independent verification of finished series.

A transcript lists every published commitment together with the value, key
and contribution that were revealed for it. Anyone holding the transcript can
recompute each commitment, each combined index, each resolved face and the
final scores without trusting the house.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from fairdice.domain.commitment import CommitmentScheme
from fairdice.domain.dice import Die, InvalidDieConfiguration
from fairdice.domain.enums import RoundKind, RoundOutcome, SeriesOutcome, TiePolicy
from fairdice.domain.models import RoundRecord, Series
from fairdice.domain.round import combine, compare_faces
from fairdice.domain.rules_config import FairnessRules

FORMAT_VERSION = 1


class DieSpec(BaseModel):
    """Faces of a die as stored in a transcript."""

    faces: list[int]
    label: str | None = None

    @classmethod
    def from_die(cls, die: Die) -> DieSpec:
        return cls(faces=list(die.faces), label=die.label)

    def to_die(self) -> Die:
        return Die(tuple(self.faces), label=self.label)


class ExchangeTranscript(BaseModel):
    """One revealed commit-reveal exchange."""

    kind: RoundKind
    range: int = Field(ge=1)
    commitment: str
    key: str = Field(description="Revealed key, hex encoded")
    value: int
    contribution: int
    combined_index: int
    house_face: int | None = None
    counterpart_face: int | None = None
    outcome: RoundOutcome | None = None

    @classmethod
    def from_record(cls, record: RoundRecord) -> ExchangeTranscript:
        return cls(
            kind=record.kind,
            range=record.range,
            commitment=record.commitment,
            key=record.key.hex(),
            value=record.value,
            contribution=record.contribution,
            combined_index=record.combined_index,
            house_face=record.house_face,
            counterpart_face=record.counterpart_face,
            outcome=record.outcome,
        )


class TranscriptMetadata(BaseModel):
    """Provenance of a transcript."""

    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    digest: str = "sha3_256"
    game_version: str = "0.1.0"


class SeriesTranscript(BaseModel):
    """Top-level transcript of a series."""

    format_version: int = FORMAT_VERSION
    metadata: TranscriptMetadata = Field(default_factory=TranscriptMetadata)
    house_die: DieSpec
    counterpart_die: DieSpec
    first_move: ExchangeTranscript
    rounds: list[ExchangeTranscript]
    house_score: int
    counterpart_score: int
    tie_policy: TiePolicy = TiePolicy.DRAW
    outcome: SeriesOutcome

    @field_validator("format_version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != FORMAT_VERSION:
            raise ValueError(f"unsupported transcript format {value}")
        return value


class TranscriptReport(BaseModel):
    """Result of :func:`verify_transcript`."""

    transcript_id: UUID
    exchanges_checked: int = 0
    issues: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def export_series(
    series: Series,
    outcome: SeriesOutcome,
    *,
    tie_policy: TiePolicy = TiePolicy.DRAW,
    digest: str = "sha3_256",
) -> SeriesTranscript:
    """Produce a transcript from a finished in-memory series."""

    if series.first_move is None or series.house_die is None or series.counterpart_die is None:
        raise ValueError("series has not been played")
    return SeriesTranscript(
        metadata=TranscriptMetadata(digest=digest),
        house_die=DieSpec.from_die(series.house_die),
        counterpart_die=DieSpec.from_die(series.counterpart_die),
        first_move=ExchangeTranscript.from_record(series.first_move),
        rounds=[ExchangeTranscript.from_record(record) for record in series.rounds],
        house_score=series.house_score,
        counterpart_score=series.counterpart_score,
        tie_policy=tie_policy,
        outcome=outcome,
    )


def verify_transcript(transcript: SeriesTranscript) -> TranscriptReport:
    """Recompute every commitment, index, face and score in ``transcript``."""

    report = TranscriptReport(transcript_id=transcript.metadata.id)
    rules = FairnessRules(digest=transcript.metadata.digest)
    try:
        scheme = CommitmentScheme(rules=rules)
    except ValueError as exc:
        report.issues.append(f"digest: {exc}")
        return report

    try:
        house_die = transcript.house_die.to_die()
        counterpart_die = transcript.counterpart_die.to_die()
    except InvalidDieConfiguration as exc:
        report.issues.append(f"dice: {exc}")
        return report

    _check_exchange(
        "first move", transcript.first_move, rules.first_move_range, scheme, report
    )
    if transcript.first_move.kind is not RoundKind.FIRST_MOVE:
        report.issues.append("first move: recorded with the wrong kind")
    expected_guess = (
        RoundOutcome.COUNTERPART
        if transcript.first_move.combined_index == 0
        else RoundOutcome.HOUSE
    )
    if transcript.first_move.outcome not in (None, expected_guess):
        report.issues.append("first move: recorded winner does not match the combined index")

    series = Series(house_die=house_die, counterpart_die=counterpart_die)
    for number, exchange in enumerate(transcript.rounds, start=1):
        label = f"round {number}"
        _check_exchange(label, exchange, rules.dice_range, scheme, report)
        if exchange.kind is not RoundKind.DICE:
            report.issues.append(f"{label}: recorded with the wrong kind")
        house_face = house_die.resolve(exchange.combined_index)
        counterpart_face = counterpart_die.resolve(exchange.combined_index)
        if (exchange.house_face, exchange.counterpart_face) != (house_face, counterpart_face):
            report.issues.append(f"{label}: recorded faces do not match the dice at the index")
        expected = compare_faces(house_face, counterpart_face)
        if exchange.outcome is not expected:
            report.issues.append(f"{label}: recorded outcome does not match the faces")
        series.record(
            RoundRecord(
                kind=RoundKind.DICE,
                range=exchange.range,
                commitment=exchange.commitment,
                key=b"",
                value=exchange.value,
                contribution=exchange.contribution,
                combined_index=exchange.combined_index,
                verified=True,
                outcome=expected,
            )
        )

    if (series.house_score, series.counterpart_score) != (
        transcript.house_score,
        transcript.counterpart_score,
    ):
        report.issues.append(
            f"scores: recorded {transcript.house_score}:{transcript.counterpart_score}, "
            f"recomputed {series.house_score}:{series.counterpart_score}"
        )
    if series.outcome(transcript.tie_policy) is not transcript.outcome:
        report.issues.append("series: recorded outcome does not match the recomputed scores")
    return report


def _check_exchange(
    label: str,
    exchange: ExchangeTranscript,
    expected_range: int,
    scheme: CommitmentScheme,
    report: TranscriptReport,
) -> None:
    report.exchanges_checked += 1
    if exchange.range != expected_range:
        report.issues.append(
            f"{label}: range {exchange.range} differs from the game's range {expected_range}"
        )
    if not scheme.verify(exchange.key, exchange.value, exchange.commitment):
        report.issues.append(f"{label}: commitment does not match the revealed key and value")
    if not 0 <= exchange.value < exchange.range:
        report.issues.append(f"{label}: value {exchange.value} outside [0, {exchange.range})")
    if not 0 <= exchange.contribution < exchange.range:
        report.issues.append(
            f"{label}: contribution {exchange.contribution} outside [0, {exchange.range})"
        )
    if combine(exchange.contribution, exchange.value, exchange.range) != exchange.combined_index:
        report.issues.append(f"{label}: combined index does not equal contribution + value")


def load_transcript(path: Path | str) -> SeriesTranscript:
    """Load a transcript from a JSON file."""

    return SeriesTranscript.model_validate_json(Path(path).read_bytes())


def save_transcript(transcript: SeriesTranscript, path: Path | str) -> Path:
    """Write a transcript to a JSON file."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(transcript.model_dump_json(indent=2), encoding="utf-8")
    return target
