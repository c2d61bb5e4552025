"""Solvers for twelve daily programming puzzles, one module per day."""

__version__ = "1.0.0"