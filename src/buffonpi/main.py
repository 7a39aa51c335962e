"""
Application Initialization
==========================
This module wires the settings, the field and the simulator together and
throws the toothpicks.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Loads the settings and builds the Field.
3. Runs the Simulator in animated (paced), batch or sharded mode.
4. Reports the final estimate.
"""
import argparse
import logging
from typing import Optional, Sequence

from buffonpi.config import load_settings
from buffonpi.controller.pacing import paced, ms_to_seconds
from buffonpi.dev import timer
from buffonpi.logging_config import setup_logging
from buffonpi.model.state import format_estimate
from buffonpi.solvers.parallel import estimate_sharded
from buffonpi.solvers.simulator import Simulator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buffonpi",
        description="Estimate pi by throwing toothpicks across parallel lines")
    parser.add_argument("--settings", type=str, default=None,
                        help="JSON settings file (defaults to assets/settings_default.json)")
    parser.add_argument("--drops", type=int, default=None,
                        help="Number of toothpicks, overrides the settings")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed of the random generator")
    parser.add_argument("--batch", action="store_true",
                        help="Throw all toothpicks at once without pacing")
    parser.add_argument("--shards", type=int, default=None,
                        help="Split the drops over N parallel simulators")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Also write the log to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Log at DEBUG level, without the per-drop records")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at DEBUG level including every drop")
    return parser


@timer
def simulate(argv: Optional[Sequence[str]] = None) -> float:
    """
    Run one simulation from command-line arguments.

    Returns:
        The final pi estimate.
    """
    args = build_parser().parse_args(argv)
    setup_logging(
        level=logging.DEBUG if args.verbose or args.debug else logging.INFO,
        log_file=args.log_file,
        log_drops=args.verbose,
    )

    settings = load_settings(args.settings)
    if args.drops is not None:
        settings.toothpick_count = args.drops
    if args.seed is not None:
        settings.seed = args.seed
    settings.validate()

    field = settings.build_field()
    logger.info(
        f"Field: {field.line_count} lines, spacing {field.segment_length}, "
        f"{field.extent_width} x {field.extent_height}"
    )

    if args.shards is not None:
        result = estimate_sharded(field, settings.toothpick_count, shards=args.shards, seed=settings.seed)
        estimate = result.pi_estimate
    else:
        simulator = Simulator(field, seed=settings.seed)
        if args.batch:
            simulator.run_batch(settings.toothpick_count)
        else:
            delay = ms_to_seconds(settings.throw_interval)
            for _ in paced(simulator.run(settings.toothpick_count), delay):
                pass
        estimate = simulator.pi_estimate

    logger.info(f"Pi has been estimated as {format_estimate(estimate)}")
    logger.info("END")
    return estimate


def main() -> None:
    simulate()


if __name__ == "__main__":
    main()
