#!/usr/bin/env python3
"""Headless gene game runner.

Runs the simulation without any renderer until every creature has died or
the round bound is reached, then prints the final statistics as JSON.

Usage:
    python -m tools.run_headless --rounds 1000 --seed 42
    python -m tools.run_headless --width 200 --height 150 --population 100
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List

from genegame.config.simulation_config import SimulationConfig
from genegame.exceptions import ConfigurationError
from genegame.logging_config import configure_logging
from genegame.simulation.engine import SimulationEngine
from genegame.snapshots import StatsSnapshot

logger = logging.getLogger(__name__)


def run_headless(
    config: SimulationConfig,
    *,
    rounds: int | None = None,
    quiet: bool = False,
) -> StatsSnapshot:
    """Seed and run a simulation headless.

    Args:
        config: Simulation configuration (seed, size, population, ...)
        rounds: Optional round bound; overrides ``config.max_rounds``
        quiet: Suppress progress output

    Returns:
        Final statistics snapshot.
    """
    engine = SimulationEngine(config)
    engine.setup()

    start_time = time.time()
    completed = engine.run(max_rounds=rounds)
    runtime = time.time() - start_time

    if not quiet:
        rate = completed / runtime if runtime > 0 else 0
        logger.info(f"Completed {completed} rounds in {runtime:.2f}s ({rate:.1f} rounds/s)")

    return engine.get_stats()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the gene game simulation in headless mode",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tools.run_headless --rounds 1000 --seed 42
  python -m tools.run_headless --width 200 --height 150 --population 100 --stats-interval 50
        """,
    )
    defaults = SimulationConfig()

    parser.add_argument(
        "--width",
        type=int,
        default=defaults.width,
        help=f"World width in tiles (default: {defaults.width})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=defaults.height,
        help=f"World height in tiles (default: {defaults.height})",
    )
    parser.add_argument(
        "--population",
        "-p",
        type=int,
        default=defaults.initial_population,
        help=f"Initial population (default: {defaults.initial_population})",
    )
    parser.add_argument(
        "--rounds",
        "-r",
        type=int,
        default=None,
        help="Stop after N rounds (default: run until extinction)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a repeatable run",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=100,
        help="Log stats every N rounds (default: 100, 0 = off)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $GENEGAME_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress progress output",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    """CLI entry point for the headless runner."""
    args = build_parser().parse_args(argv)
    configure_logging(level="WARNING" if args.quiet else args.log_level)

    try:
        config = SimulationConfig(
            width=args.width,
            height=args.height,
            initial_population=args.population,
            seed=args.seed,
            max_rounds=args.rounds,
            stats_interval=0 if args.quiet else args.stats_interval,
        )
        config.validate()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    if not args.quiet:
        logger.info(
            f"Running {config.width}x{config.height} world with "
            f"{config.initial_population} creatures (seed={config.seed})"
        )

    try:
        stats = run_headless(config, quiet=args.quiet)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    print(stats.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
