"""Solutions to classic integer, array, interval, stack, string and grid puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "grids", "integers", "intervals", "stacks", "text"]