"""Two-stack integer sorting puzzle: a solver and an instruction checker."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "queries", "moveset", "planner", "sorter", "checker", "cli"]