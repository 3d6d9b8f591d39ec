"""Factory functions for fairdice.

This module wires the protocol core to its collaborators. Use these functions
in production code; in tests construct the classes directly and inject
protocol-based fakes.

Example:
    # Production usage
    from fairdice.factory import create_series_controller
    controller = create_series_controller(settings.to_rules())
    result = controller.play(dice)

    # Testing usage
    from fairdice.domain.round import RoundResolver

    class FakeInput:
        def request_integer(self, prompt, valid_range):
            return 0

    resolver = RoundResolver(generator, FakeInput(), announcer)
"""

from fairdice.console import ConsoleAnnouncer, ConsoleInputProvider
from fairdice.domain.commitment import CommitmentScheme
from fairdice.domain.fair_value import FairValueGenerator
from fairdice.domain.round import RoundResolver
from fairdice.domain.rules_config import DEFAULT_RULES, RulesConfig
from fairdice.interfaces import IAnnouncer, IInputProvider
from fairdice.services.series_service import GameSeriesController
from fairdice.utils.rng import RandomSource, SystemRandomSource


def create_generator(
    rules: RulesConfig = DEFAULT_RULES,
    *,
    source: RandomSource | None = None,
) -> FairValueGenerator:
    """Create a FairValueGenerator with its commitment scheme.

    Args:
        rules: Rule configuration (key size and digest)
        source: Entropy source; the system CSPRNG when omitted

    Returns:
        Generator sharing one entropy source with its scheme
    """
    source = source or SystemRandomSource()
    scheme = CommitmentScheme(source=source, rules=rules.fairness)
    return FairValueGenerator(scheme, source=source)


def create_series_controller(
    rules: RulesConfig = DEFAULT_RULES,
    *,
    input_provider: IInputProvider | None = None,
    announcer: IAnnouncer | None = None,
    source: RandomSource | None = None,
) -> GameSeriesController:
    """Create a GameSeriesController with all dependencies.

    Console collaborators are used for any collaborator not supplied.
    """
    input_provider = input_provider or ConsoleInputProvider()
    announcer = announcer or ConsoleAnnouncer()
    resolver = RoundResolver(
        create_generator(rules, source=source),
        input_provider,
        announcer,
        rules=rules.fairness,
    )
    return GameSeriesController(resolver, input_provider, announcer, rules=rules)
