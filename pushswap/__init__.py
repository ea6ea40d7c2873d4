"""Two-stack integer sorting: a solver, a checker, and their parsing, line-reading and formatting helpers."""

__version__ = "0.1.0"

__all__ = ["stack", "parsing", "linereader", "solver", "checker", "formatter"]