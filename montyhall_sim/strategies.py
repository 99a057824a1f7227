"""Strategy implementations for the Monty Hall Simulator.

Each strategy is a plain function mapping the game's closed doors and the
player's first pick to a second pick. ``Strategy`` binds one of them to a
game.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

import numpy as np

from montyhall_sim.models import Game
from montyhall_sim.sampling import uniform_choice, uniform_index

StrategyName = Literal["always_switch", "never_switch", "random_switch"]


def always_switch(game: Game, first_choice: int, rng: np.random.Generator) -> int:
    """Pick a closed door other than the first choice.

    After the host reveal only two doors are closed, so this is the one
    door the player did not pick.
    """
    remaining = [door for door in game.closed_doors() if door != first_choice]
    return uniform_choice(rng, remaining)


def never_switch(game: Game, first_choice: int, rng: np.random.Generator) -> int:
    """Stick with the first choice."""
    return first_choice


def random_switch(game: Game, first_choice: int, rng: np.random.Generator) -> int:
    """Pick any closed door, possibly the first choice again."""
    return uniform_choice(rng, game.closed_doors())


STRATEGIES: dict[str, Callable[[Game, int, np.random.Generator], int]] = {
    "always_switch": always_switch,
    "never_switch": never_switch,
    "random_switch": random_switch,
}


def get_strategy_function(strategy_name: str):
    """Get strategy function by name."""
    if strategy_name not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy_name}")

    return STRATEGIES[strategy_name]


@dataclass
class Strategy:
    """A strategy bound to one game with its first pick already drawn."""

    kind: StrategyName
    game: Game
    first_choice: int

    def second_choice(self, rng: np.random.Generator) -> int:
        return get_strategy_function(self.kind)(self.game, self.first_choice, rng)


def make_strategy(
    kind: StrategyName, game: Game, rng: np.random.Generator
) -> Strategy:
    """Bind a strategy to a game, drawing the first pick uniformly.

    The first pick is independent of where the prize is.
    """
    get_strategy_function(kind)
    return Strategy(kind=kind, game=game, first_choice=uniform_index(rng, game.n_doors()))
