"""Lightweight configuration for the fairdice tools."""

from __future__ import annotations

import hashlib
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fairdice.domain.enums import TiePolicy
from fairdice.domain.rules_config import FairnessRules, RulesConfig, SeriesRules


class Settings(BaseSettings):
    """Application settings, read from ``FAIRDICE_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="FAIRDICE_", env_file=".env", env_file_encoding="utf-8"
    )

    data_dir: Path = Field(default=Path("transcripts"), description="Where transcripts live")
    rounds: int = Field(default=1, ge=1, description="Scoring rounds per series")
    tie_policy: TiePolicy = Field(
        default=TiePolicy.DRAW, description="How a series with equal scores is settled"
    )
    key_bytes: int = Field(default=32, ge=32, description="Secret key size in bytes")
    digest: str = Field(default="sha3_256", description="hashlib digest used by the HMAC")
    minimum_dice: int = Field(default=3, ge=3, description="Smallest die set accepted")
    guess_winner_picks_first: bool = Field(
        default=False,
        description="Let the winner of the first-move guess pick a die first",
    )
    abort_on_verification_failure: bool = Field(
        default=True,
        description="Stop the series when a reveal does not match its commitment",
    )
    log_level: str = Field(default="WARNING", description="Root logging level")

    @field_validator("digest")
    @classmethod
    def _check_digest(cls, value: str) -> str:
        name = value.lower().replace("-", "_")
        if name not in hashlib.algorithms_available:
            raise ValueError(f"unknown digest {value!r}")
        if hashlib.new(name).digest_size == 0:
            raise ValueError(f"digest {value!r} has no fixed length")
        return name

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    def to_rules(self) -> RulesConfig:
        """Translate settings into the frozen rule objects used by the domain."""

        return RulesConfig(
            fairness=FairnessRules(key_bytes=self.key_bytes, digest=self.digest),
            series=SeriesRules(
                rounds=self.rounds,
                minimum_dice=self.minimum_dice,
                tie_policy=self.tie_policy,
                guess_winner_picks_first=self.guess_winner_picks_first,
                abort_on_verification_failure=self.abort_on_verification_failure,
            ),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
