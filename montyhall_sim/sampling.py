"""Sampling utilities for the Monty Hall Simulator.

Centralized, reproducible randomness. Every draw in the package goes through
an explicitly passed generator.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def uniform_index(rng: np.random.Generator, n: int) -> int:
    """Draw an integer uniformly from [0, n).

    Args:
        rng: Random number generator
        n: Exclusive upper bound

    Returns:
        Plain Python int in [0, n)
    """
    if n <= 0:
        raise ValueError("Cannot draw an index from an empty range")

    return int(rng.integers(n))


def uniform_choice(rng: np.random.Generator, items: Sequence[T]) -> T:
    """Pick one element of items uniformly at random."""
    if len(items) == 0:
        raise ValueError("Cannot choose from an empty sequence")

    return items[uniform_index(rng, len(items))]
