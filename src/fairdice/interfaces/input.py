"""Input Provider Protocol Interface.

This module defines the protocol (interface) through which the counterpart's
integers reach the protocol: guesses, die selections and contributions.
"""

from typing import Protocol


class IInputProvider(Protocol):
    """Protocol defining how the counterpart supplies validated integers.

    Implementations block until a valid integer is available and handle
    re-prompting themselves; callers never see malformed input.
    """

    def request_integer(self, prompt: str, valid_range: range) -> int:
        """Ask the counterpart for an integer.

        Args:
            prompt: Human-readable question
            valid_range: Accepted values

        Returns:
            An integer contained in ``valid_range``
        """
        ...
