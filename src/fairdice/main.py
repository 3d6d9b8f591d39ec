"""Command line entrypoint for fairdice."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from fairdice.config import Settings, get_settings
from fairdice.domain.analysis import probability_table
from fairdice.domain.dice import ConfigurationError, Die, parse_die_configurations
from fairdice.domain.enums import TiePolicy
from fairdice.factory import create_series_controller
from fairdice.repository import JsonTranscriptRepository
from fairdice.services.series_service import FairnessViolation
from fairdice.transcript import export_series, load_transcript, verify_transcript

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fairdice",
        description="Provably fair non-transitive dice game",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    play = subparsers.add_parser("play", help="Play a series against the house")
    play.add_argument("dice", nargs="+", help="Die faces, e.g. 2,2,4,4,9,9")
    play.add_argument("--rounds", type=int, default=None, help="Scoring rounds in the series")
    play.add_argument(
        "--tie-policy",
        choices=[policy.value for policy in TiePolicy],
        default=None,
        help="How a series with equal scores is settled",
    )
    play.add_argument(
        "--save-transcript",
        action="store_true",
        help="Write a verifiable transcript to the data directory",
    )

    odds = subparsers.add_parser("odds", help="Show pairwise win probabilities")
    odds.add_argument("dice", nargs="+", help="Die faces, e.g. 2,2,4,4,9,9")

    verify = subparsers.add_parser("verify", help="Independently verify a saved transcript")
    verify.add_argument("path", help="Transcript JSON file")
    return parser


def _settings_for(args: argparse.Namespace, settings: Settings) -> Settings:
    update: dict[str, object] = {}
    if getattr(args, "rounds", None) is not None:
        update["rounds"] = args.rounds
    if getattr(args, "tie_policy", None) is not None:
        update["tie_policy"] = TiePolicy(args.tie_policy)
    if not update:
        return settings
    return Settings.model_validate({**settings.model_dump(), **update})


def run_play(args: argparse.Namespace, settings: Settings) -> int:
    rules = settings.to_rules()
    dice = parse_die_configurations(args.dice, minimum=rules.series.minimum_dice)
    print("Starting Non-Transitive Dice Game...")
    controller = create_series_controller(rules)
    result = controller.play(dice)

    if args.save_transcript:
        transcript = export_series(
            result.series,
            result.outcome,
            tie_policy=rules.series.tie_policy,
            digest=rules.fairness.digest,
        )
        path = JsonTranscriptRepository(settings.data_dir).save(transcript)
        print(f"Transcript saved to {path}")
    return EXIT_OK


def run_odds(args: argparse.Namespace, settings: Settings) -> int:
    dice = parse_die_configurations(args.dice, minimum=settings.minimum_dice)
    print(format_probability_table(dice))
    return EXIT_OK


def run_verify(args: argparse.Namespace, settings: Settings) -> int:
    report = verify_transcript(load_transcript(args.path))
    if report.ok:
        print(f"Transcript {report.transcript_id}: {report.exchanges_checked} exchanges verified.")
        return EXIT_OK
    print(f"Transcript {report.transcript_id} FAILED verification:")
    for issue in report.issues:
        print(f"  - {issue}")
    return EXIT_FAILURE


def format_probability_table(dice: Sequence[Die]) -> str:
    """Render P(row beats column) for every pair of dice."""

    labels = [die.describe() for die in dice]
    width = max(len(label) for label in labels) + 2
    lines = [
        "Probability that the row die beats the column die:",
        " " * width + "".join(label.rjust(width) for label in labels),
    ]
    for label, row in zip(labels, probability_table(dice), strict=True):
        cells = ["-" if cell is None else f"{float(cell):.4f}" for cell in row]
        lines.append(label.ljust(width) + "".join(cell.rjust(width) for cell in cells))
    return "\n".join(lines)


_COMMANDS = {
    "play": run_play,
    "odds": run_odds,
    "verify": run_verify,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = _settings_for(args, get_settings())
    except ValidationError as exc:
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("running command %s", args.command)

    try:
        return _COMMANDS[args.command](args, settings)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION
    except FairnessViolation as exc:
        print(f"Fairness violation: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except (OSError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
