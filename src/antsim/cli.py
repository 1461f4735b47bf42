"""
Command-line entry point.

    antsim <map_file> <num_ants> [--seed N] [--max-moves N] [--max-ticks N]
"""

import argparse
import logging
import sys

from antsim.core import AntSimulation, SimulationConfig, DEFAULT_MAX_MOVES
from antsim.io import format_world

logger = logging.getLogger("antsim")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="antsim",
        description="Simulate ants wandering a colony map until they collide.",
    )
    parser.add_argument("map_file", help="Path to the colony map file")
    parser.add_argument("num_ants", type=int, help="Number of ants to place")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")
    parser.add_argument("--max-moves", type=int, default=DEFAULT_MAX_MOVES,
                        help="Per-ant move budget (default: %(default)s)")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Tick ceiling (default: same as --max-moves)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = SimulationConfig(
            num_ants=args.num_ants,
            max_moves=args.max_moves,
            max_ticks=args.max_ticks,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        sim = AntSimulation.from_map_file(args.map_file, config)
    except OSError as e:
        logger.error("Failed to load map file %s: %s", args.map_file, e)
        return 1
    except ValueError as e:
        logger.error("Cannot start simulation: %s", e)
        return 1

    ants, colonies, total = sim.stats()
    print(f"Starting simulation: {ants} ants, {colonies}/{total} active colonies")

    result = sim.run()

    print(f"\nSimulation ended after {result.ticks} iterations")
    print(f"\nSimulation completed in {result.elapsed_seconds:.3f}s")
    print()
    print(format_world(sim.graph, sim.state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
