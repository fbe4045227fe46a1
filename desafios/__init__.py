"""Puzzles and contest problems: the knight's corner circuit, a Nim advisor and contest solutions."""

__version__ = "0.1.0"
__all__ = ["knight", "nim", "contest"]