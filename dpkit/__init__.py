"""Dynamic-programming solvers for counting, path, interval, string and knapsack problems."""

__version__ = "0.1.0"
__all__ = [
    "automata",
    "boards",
    "climbing",
    "grids",
    "intervals",
    "knapsack",
    "minimax",
    "probability",
    "recurrences",
    "sequences",
    "strings",
]