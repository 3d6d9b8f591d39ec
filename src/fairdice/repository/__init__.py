"""Persistence adapters for fairdice."""

from fairdice.repository.json_store import JsonTranscriptRepository

__all__ = ["JsonTranscriptRepository"]
