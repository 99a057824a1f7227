"""Command-line interface for the Monty Hall Simulator.

Runs each requested strategy over the same number of games and prints the
win/loss tallies.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

import numpy as np

from montyhall_sim.metrics import expected_win_rate
from montyhall_sim.sampling import make_rng
from montyhall_sim.simulator import Simulation
from montyhall_sim.strategies import STRATEGIES


def run_monte_carlo(
    rng: np.random.Generator,
    simulation: Simulation,
    progress: bool = False,
) -> dict[str, Any]:
    """Run a simulation, optionally printing progress.

    Args:
        rng: Random number generator
        simulation: Simulation to advance
        progress: Print a progress line every ~5% of runs

    Returns:
        Dictionary with simulation results
    """
    runs = simulation.iterations
    step = max(1, runs // 20)

    for i in range(runs):
        simulation.run_trial(rng)
        if progress and runs >= 20 and ((i + 1) % step == 0 or i + 1 == runs):
            print(f"Progress: {i + 1}/{runs}")

    return {
        "strategy": simulation.strategy,
        "doors": simulation.door_count,
        "expected_win_rate": expected_win_rate(
            simulation.strategy, simulation.door_count
        ),
        "summary": simulation.report(),
    }


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Monty Hall Simulator")

    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--iterations", type=int, default=10_000, help="Games per strategy"
    )
    parser.add_argument("--doors", type=int, default=3, help="Number of doors")
    parser.add_argument(
        "--strategy",
        action="append",
        choices=list(STRATEGIES),
        default=None,
        help="Strategy to simulate (repeatable, default: all)",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Print progress while running"
    )
    parser.add_argument("--json", action="store_true", help="Also print JSON output")

    args = parser.parse_args(argv)
    if args.doors < 2:
        parser.error("--doors must be at least 2")
    if args.iterations < 0:
        parser.error("--iterations must be non-negative")

    rng = make_rng(args.seed)
    strategies = args.strategy or list(STRATEGIES)

    results = []
    for name in strategies:
        simulation = Simulation(args.iterations, name, args.doors)
        results.append(run_monte_carlo(rng, simulation, progress=args.progress))
        print(simulation.describe())

    if args.json:
        print("\n" + "=" * 40)
        print("JSON Output:")
        print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
