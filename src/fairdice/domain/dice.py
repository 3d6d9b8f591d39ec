"""Die definition and die-configuration parsing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

FACES_PER_DIE = 6


class ConfigurationError(ValueError):
    """Raised when the die set handed to a series is unusable."""


class InvalidDieConfiguration(ConfigurationError):
    """Raised when a single die is not exactly six positive integers."""


@dataclass(frozen=True, slots=True, eq=False)
class Die:
    """Immutable six-faced die.

    Dice compare by identity: two dice with the same faces are still two
    distinct options in a die set.
    """

    faces: tuple[int, ...]
    label: str | None = None

    def __post_init__(self) -> None:
        faces = tuple(self.faces)
        if len(faces) != FACES_PER_DIE:
            raise InvalidDieConfiguration(
                f"a die needs exactly {FACES_PER_DIE} faces, got {len(faces)}"
            )
        for face in faces:
            if isinstance(face, bool) or not isinstance(face, int) or face < 1:
                raise InvalidDieConfiguration(
                    f"die faces must be integers greater than 0, got {face!r}"
                )
        object.__setattr__(self, "faces", faces)

    def resolve(self, index: int) -> int:
        """Return the face selected by ``index`` (any integer, taken mod 6)."""

        return self.faces[index % FACES_PER_DIE]

    def describe(self) -> str:
        return "[" + ",".join(str(face) for face in self.faces) + "]"

    def __str__(self) -> str:
        return self.describe()


def parse_die(text: str, *, label: str | None = None) -> Die:
    """Parse a comma separated list of six positive integers.

    Examples:
        >>> parse_die("2,2,4,4,9,9").faces
        (2, 2, 4, 4, 9, 9)

    Raises:
        InvalidDieConfiguration: If the text is not six positive integers
    """
    parts = [part.strip() for part in text.split(",")]
    faces: list[int] = []
    for part in parts:
        try:
            faces.append(int(part))
        except ValueError as exc:
            raise InvalidDieConfiguration(
                f"die configuration {text!r} contains a non-integer face {part!r}"
            ) from exc
    try:
        return Die(tuple(faces), label=label)
    except InvalidDieConfiguration as exc:
        raise InvalidDieConfiguration(f"invalid die configuration {text!r}: {exc}") from exc


def parse_die_configurations(texts: Iterable[str], *, minimum: int = 3) -> list[Die]:
    """Parse every configuration string into a die set.

    Raises:
        ConfigurationError: If fewer than ``minimum`` configurations are given
            or any configuration is malformed
    """
    texts = list(texts)
    if len(texts) < minimum:
        raise ConfigurationError(
            f"at least {minimum} dice configurations must be provided, got {len(texts)}"
        )
    return [parse_die(text, label=str(index)) for index, text in enumerate(texts)]


def require_dice(dice: Sequence[Die], *, minimum: int = 3) -> list[Die]:
    """Validate an already constructed die set."""

    if len(dice) < minimum:
        raise ConfigurationError(
            f"at least {minimum} dice are required to start a series, got {len(dice)}"
        )
    return list(dice)
