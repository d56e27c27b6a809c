"""Competitive-programming algorithms: geometry, line containers, range queries,
number theory, strings, graphs, trees, greedy and sequence problems, and
dynamic programming."""

__version__ = "0.1.0"

__all__ = [
    "contests",
    "dp",
    "geometry",
    "graphs",
    "greedy",
    "lichao",
    "number_theory",
    "segment_tree",
    "sequences",
    "strings",
    "text_problems",
    "trees",
]