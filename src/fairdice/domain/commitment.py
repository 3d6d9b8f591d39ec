"""HMAC commitment scheme used by the house to bind itself to a value.

The house publishes ``HMAC(key, str(value))`` before the counterpart moves and
reveals ``(value, key)`` afterwards. Without the key the digest tells the
counterpart nothing about the value; once published, the house cannot find a
different value that matches it.
"""

from __future__ import annotations

import hashlib
import hmac
import logging

from fairdice.domain.models import Commitment, SecretKey
from fairdice.domain.rules_config import DEFAULT_RULES, FairnessRules
from fairdice.utils.rng import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

MIN_KEY_BYTES = 32


class CommitmentScheme:
    """Generate keys, commit to integers and verify revealed commitments."""

    def __init__(
        self,
        *,
        source: RandomSource | None = None,
        rules: FairnessRules = DEFAULT_RULES.fairness,
    ) -> None:
        if rules.key_bytes < MIN_KEY_BYTES:
            raise ValueError(
                f"key_bytes must be at least {MIN_KEY_BYTES}, got {rules.key_bytes}"
            )
        digest = hashlib.new(rules.digest)
        if digest.digest_size == 0:  # pragma: no cover - shake digests
            raise ValueError(f"digest {rules.digest!r} has no fixed length")
        self._source = source or SystemRandomSource()
        self._key_bytes = rules.key_bytes
        self._digest = rules.digest
        self.digest_size = digest.digest_size

    @property
    def digest_name(self) -> str:
        return self._digest

    def generate_key(self) -> SecretKey:
        """Return a fresh key; keys are never derived from earlier ones."""

        return SecretKey(self._source.token_bytes(self._key_bytes))

    def commit(self, key: bytes, value: int) -> Commitment:
        """HMAC over the decimal representation of ``value``, hex encoded."""

        mac = hmac.new(key, str(value).encode("ascii"), self._digest)
        return Commitment(mac.hexdigest())

    def verify(self, key: bytes | str, value: int, commitment: str) -> bool:
        """Return whether ``commitment`` matches ``commit(key, value)``.

        ``key`` may be raw bytes or their hex rendering. Malformed input of any
        kind is a failed verification, never an exception.
        """
        if not isinstance(key, (str, bytes, bytearray)):
            logger.warning("verification rejected key of type %s", type(key).__name__)
            return False
        try:
            raw_key = bytes.fromhex(key) if isinstance(key, str) else bytes(key)
            published = bytes.fromhex(commitment)
        except (TypeError, ValueError):
            logger.warning("verification rejected malformed key or commitment")
            return False
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning("verification rejected non-integer value %r", value)
            return False

        try:
            expected = bytes.fromhex(self.commit(raw_key, value))
        except ValueError:
            # str() refuses integers beyond sys.get_int_max_str_digits()
            logger.warning("verification rejected a value too large to encode")
            return False
        matches = hmac.compare_digest(expected, published)
        if not matches:
            logger.warning("commitment %s does not match revealed value %d", commitment, value)
        return matches
