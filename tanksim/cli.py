"""Command line entry point: run the tank filling simulation and print the table."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import SimulationSettings, get_settings
from .errors import DomainError
from .logging_config import configure_logging
from .playback import paced
from .report import print_table, summarize
from .state import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tanksim",
        description="Simulate a pump filling a tank through a pipe.",
    )
    parser.add_argument(
        "--duration",
        type=float,
        help="Simulated duration in seconds (default: TANKSIM_SIMULATION_DURATION or 60)",
    )
    parser.add_argument(
        "--time-step",
        type=float,
        help="Step length in seconds (default: TANKSIM_TIME_STEP or 1)",
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Wait one time step of wall-clock time between rows",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for tanksim itself (default: TANKSIM_LOG_LEVEL or INFO)",
    )
    return parser


def apply_overrides(settings: SimulationSettings, args: argparse.Namespace) -> SimulationSettings:
    overrides: dict[str, object] = {}
    if args.duration is not None:
        overrides["simulation_duration"] = args.duration
    if args.time_step is not None:
        overrides["time_step"] = args.time_step
    if args.realtime:
        overrides["realtime"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return settings.model_copy(update=overrides)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    configure_logging("WARNING", package_level=settings.log_level)

    try:
        pump, pipe, tank = settings.build_system()
        records = run(pump, pipe, tank, settings.simulation_duration, settings.time_step)
    except DomainError as exc:
        logger.error("Invalid simulation parameters: %s", exc)
        print(f"tanksim: error: {exc}", file=sys.stderr)
        return 2

    if settings.realtime:
        records = paced(records, settings.time_step)

    consumed = print_table(records)
    summary = summarize(consumed)
    logger.info(
        "Run summary steps=%s final_water_level_m=%s status_counts=%s",
        summary["steps"],
        summary["final_water_level"],
        summary["status_counts"],
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
