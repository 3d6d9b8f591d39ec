"""Console adapters for the fairdice collaborators."""

from fairdice.console.announcer import ConsoleAnnouncer
from fairdice.console.prompts import ConsoleInputProvider, parse_integer

__all__ = [
    "ConsoleAnnouncer",
    "ConsoleInputProvider",
    "parse_integer",
]
