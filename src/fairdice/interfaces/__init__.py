"""Protocol-based interfaces for the fairdice collaborators.

The protocol core depends only on these contracts; console adapters live in
:mod:`fairdice.console` and tests inject small fakes.
"""

from fairdice.interfaces.announcer import IAnnouncer
from fairdice.interfaces.input import IInputProvider

__all__ = [
    "IAnnouncer",
    "IInputProvider",
]
