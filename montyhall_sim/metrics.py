"""Metrics and analysis utilities for the Monty Hall Simulator.

Functions for summarizing win/loss tallies.
"""

from __future__ import annotations

import numpy as np


def percentage(count: int, total: int) -> float:
    """Share of count in total as a percentage rounded to 2 decimals."""
    if total <= 0:
        return 0.0

    return round(count * 100 / total, 2)


def standard_error(wins: int, total: int) -> float:
    """Binomial standard error of the observed win rate.

    Args:
        wins: Number of wins
        total: Number of trials

    Returns:
        sqrt(p * (1 - p) / total) for p = wins / total, or 0.0 with no trials
    """
    if total <= 0:
        return 0.0

    p = wins / total
    return float(np.sqrt(p * (1.0 - p) / total))


def expected_win_rate(strategy: str, door_count: int = 3) -> float:
    """Analytic win probability of a strategy.

    Switching wins whenever the first pick was a loser, so (n - 1) / n.
    Staying wins only when the first pick was right, so 1 / n. A random
    pick between the two remaining doors wins half the time.
    """
    if door_count < 2:
        raise ValueError(f"Game needs at least 2 doors, got {door_count}")

    rates = {
        "always_switch": (door_count - 1) / door_count,
        "never_switch": 1 / door_count,
        "random_switch": 0.5,
    }
    if strategy not in rates:
        raise ValueError(f"Unknown strategy: {strategy}")

    return rates[strategy]


def summary(wins: int, losses: int) -> dict[str, float | int]:
    """Generate summary statistics for a win/loss tally.

    Returns:
        Dictionary with counts, 2-decimal percentages and win rate SE
    """
    iterations = wins + losses
    return {
        "iterations": iterations,
        "wins": wins,
        "losses": losses,
        "win_pct": percentage(wins, iterations),
        "loss_pct": percentage(losses, iterations),
        "win_rate_se": standard_error(wins, iterations),
    }
