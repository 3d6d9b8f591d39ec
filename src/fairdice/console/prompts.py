"""Console input provider: reads validated integers from a text prompt."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from fairdice.domain.round import InvalidContribution


def parse_integer(raw: str, valid_range: range) -> int:
    """Parse ``raw`` as an integer contained in ``valid_range``.

    Raises:
        InvalidContribution: If ``raw`` is not an integer or out of range
    """
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise InvalidContribution(f"{raw.strip()!r} is not an integer") from exc
    if value not in valid_range:
        raise InvalidContribution(
            f"{value} is outside {valid_range.start}..{valid_range.stop - 1}"
        )
    return value


class ConsoleInputProvider:
    """Prompt until the counterpart types an acceptable integer."""

    def __init__(
        self,
        read: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._read = read
        self._output = output or sys.stdout

    def request_integer(self, prompt: str, valid_range: range) -> int:
        while True:
            raw = self._read(prompt)
            try:
                return parse_integer(raw, valid_range)
            except InvalidContribution as exc:
                print(f"Invalid input: {exc}. Try again.", file=self._output)
