"""Worked solutions to short algorithmic exercises, with a command runner."""

__version__ = "0.1.0"
__all__ = ["bitwise", "classic", "cli", "puzzles", "sequences", "sorting"]