"""Solutions to daily programming puzzles, one module per puzzle."""

__version__ = "0.1.0"