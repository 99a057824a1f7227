"""Monty Hall Simulator

A small, readable Monte Carlo simulator of the Monty Hall puzzle.
Uses NumPy only for deterministic, reproducible random draws.
"""

__version__ = "0.1.0"
