"""Sorting algorithms, a chained hash set and a growable vector."""

__version__ = "0.1.0"
__all__ = ["sort", "sort_iterative", "introsort", "hashset", "vector"]