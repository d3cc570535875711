"""Solvers for the 2024 advent programming puzzles, days 1 to 20, with a command line entry point."""

__version__ = "0.1.0"