"""Backtracking solvers for Wordle-style word completion and shift scheduling."""

__version__ = "0.1.0"
__all__ = ["dictionary", "wordle", "schedwork"]