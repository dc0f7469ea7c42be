"""Solvers for daily programming puzzles, one module per year and day."""

__version__ = "0.1.0"