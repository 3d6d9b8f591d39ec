"""Service layer for fairdice.

The service layer wires the protocol core to its collaborators:

- GameSeriesController: first move, die selection, scoring rounds, series result

Collaborators are injected as protocol implementations (see
:mod:`fairdice.interfaces`); use :mod:`fairdice.factory` for the console
wiring and small fakes in tests.
"""

from fairdice.services.series_service import (
    FairnessViolation,
    GameSeriesController,
    SeriesResult,
)

__all__ = [
    "FairnessViolation",
    "GameSeriesController",
    "SeriesResult",
]
