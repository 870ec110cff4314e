"""Heapsort, mergesort and quicksort, random data files, and a command that times the sorts."""

__version__ = "1.0.0"

__all__ = ["cli", "heapsort", "mergesort", "quicksort", "randdata"]