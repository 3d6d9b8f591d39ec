"""Fair value generation: a uniform draw bound to a fresh commitment."""

from __future__ import annotations

import logging

from fairdice.domain.commitment import CommitmentScheme
from fairdice.domain.models import FairValue
from fairdice.utils.rng import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


class FairValueGenerator:
    """Draw values uniformly over ``[0, range)`` and commit to them.

    The draw relies on ``RandomSource.randbelow``, which is bias-free for any
    bound, so no additional rejection loop is applied here.
    """

    def __init__(
        self,
        scheme: CommitmentScheme | None = None,
        *,
        source: RandomSource | None = None,
    ) -> None:
        self._source = source or SystemRandomSource()
        self.scheme = scheme or CommitmentScheme(source=self._source)

    def generate(self, range_: int) -> FairValue:
        """Return a fresh value with its key and commitment.

        Only ``commitment`` may be shown to the counterpart until their
        contribution for the same exchange is fixed.

        Raises:
            ValueError: If ``range_`` is smaller than 1
        """
        if range_ < 1:
            raise ValueError(f"range must be at least 1, got {range_}")

        value = self._source.randbelow(range_)
        key = self.scheme.generate_key()
        commitment = self.scheme.commit(key, value)
        logger.debug("committed to a value in [0, %d): %s", range_, commitment)
        return FairValue(value=value, range=range_, key=key, commitment=commitment)
