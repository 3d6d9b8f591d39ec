"""JSON-based repository for series transcripts."""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from pydantic import TypeAdapter

from fairdice.transcript import SeriesTranscript


class JsonTranscriptRepository:
    """Persist transcripts as JSON snapshots on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[SeriesTranscript] = TypeAdapter(SeriesTranscript)

    def _path_for(self, transcript_id: UUID) -> Path:
        return self.base_path / f"transcript_{transcript_id}.json"

    def save(self, transcript: SeriesTranscript) -> Path:
        """Serialize a transcript to disk and return the snapshot path."""

        path = self._path_for(transcript.metadata.id)
        payload = self._adapter.dump_json(transcript, indent=2)
        path.write_bytes(payload)
        return path

    def load(self, transcript_id: UUID) -> SeriesTranscript:
        """Load a previously saved transcript."""

        path = self._path_for(transcript_id)
        data = path.read_bytes()
        return self._adapter.validate_json(data)

    def list_transcripts(self) -> list[UUID]:
        """Return the ids of every transcript in the repository."""

        ids: list[UUID] = []
        prefix = "transcript_"
        suffix = ".json"
        for path in self.base_path.glob("transcript_*.json"):
            stem = path.name
            raw = stem[len(prefix) : -len(suffix)]
            try:
                ids.append(UUID(raw))
            except ValueError:  # pragma: no cover - ignored malformed file
                continue
        return sorted(ids, key=str)

    def delete(self, transcript_id: UUID) -> None:
        """Remove a transcript if it exists."""

        path = self._path_for(transcript_id)
        if path.exists():
            path.unlink()
