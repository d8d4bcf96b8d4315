"""Solutions to classic greedy, implementation, search and string puzzles."""

__version__ = "0.1.0"

__all__ = ["greedy", "strings", "implementation", "search"]