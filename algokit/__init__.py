"""Classic sorting, searching, dynamic programming, greedy, graph, geometry, tree, backtracking and number theory algorithms."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "dp_counting",
    "dp_sequences",
    "geometry",
    "graphs",
    "greedy",
    "number_theory",
    "searching",
    "sorting_advanced",
    "sorting_basic",
    "trees",
]