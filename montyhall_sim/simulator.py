"""Simulation engine for the Monty Hall Simulator.

Runs independent games through a strategy and tallies the outcomes.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from montyhall_sim.metrics import summary
from montyhall_sim.models import Game
from montyhall_sim.sampling import make_rng
from montyhall_sim.strategies import StrategyName, get_strategy_function, make_strategy


def simulate_once(
    rng: np.random.Generator, door_count: int, strategy: StrategyName
) -> dict[str, Any]:
    """Run a single game.

    Returns dict with won, first_choice, second_choice, switched, winning_index.
    """
    game = Game(door_count, rng=rng)
    player = make_strategy(strategy, game, rng)

    # Step 1: host opens the losers around the tentative pick
    game.host_reveal(player.first_choice)

    # Step 2: player commits to a door
    second = player.second_choice(rng)
    game.final_answer(second)

    return {
        "won": game.won(),
        "first_choice": player.first_choice,
        "second_choice": second,
        "switched": second != player.first_choice,
        "winning_index": game.winning_index,
    }


class Simulation:
    """Repeated independent games played with one strategy."""

    def __init__(
        self, iterations: int, strategy: StrategyName, door_count: int = 3
    ) -> None:
        if iterations < 0:
            raise ValueError("Cannot run a negative number of iterations")
        if door_count < 2:
            raise ValueError(f"Game needs at least 2 doors, got {door_count}")
        get_strategy_function(strategy)

        self.iterations = iterations
        self.strategy = strategy
        self.door_count = door_count
        self.wins = 0
        self.losses = 0

    def run_trial(self, rng: np.random.Generator) -> bool:
        """Play one game and add it to the tallies."""
        won = simulate_once(rng, self.door_count, self.strategy)["won"]
        if won:
            self.wins += 1
        else:
            self.losses += 1
        return won

    def run(self, rng: np.random.Generator | None = None) -> None:
        """Play ``iterations`` games and add them to the tallies."""
        if rng is None:
            rng = make_rng()

        for _ in range(self.iterations):
            self.run_trial(rng)

    def report(self) -> dict[str, float | int]:
        """Counts and percentages over every game played so far."""
        return summary(self.wins, self.losses)

    def describe(self) -> str:
        stats = self.report()
        return (
            f"In {stats['iterations']} simulations of strategy {self.strategy}, there were: "
            f"Wins: {self.wins} ({stats['win_pct']:.2f}%) "
            f"Losses: {self.losses} ({stats['loss_pct']:.2f}%)"
        )
