"""Command-line benchmark: generate random data, sort it, time it, save it."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from pathlib import Path

from sortbench.heapsort import heapsort
from sortbench.mergesort import mergesort
from sortbench.quicksort import quicksort
from sortbench.randdata import (
    DEFAULT_COUNT,
    read_numbers,
    read_words,
    write_numbers,
    write_words,
)

_SEED = 1

_SORTERS = {
    "heap": heapsort,
    "merge": mergesort,
    "quick": quicksort,
}

_KINDS = {
    "numbers": ("number.txt", "sortnumber.txt", write_numbers, read_numbers),
    "words": ("words.txt", "sortwords.txt", write_words, read_words),
}


def run(
    algorithm: str,
    kind: str = "numbers",
    directory: str | os.PathLike[str] = ".",
    count: int = DEFAULT_COUNT,
) -> int:
    """Generate ``count`` random items in ``directory``, sort them and save the result.

    Returns the time spent sorting, in microseconds. Raises ``ValueError``
    for an unknown algorithm or kind and ``OSError`` if a file cannot be opened.
    """
    try:
        sorter = _SORTERS[algorithm]
    except KeyError:
        raise ValueError(f"unknown algorithm: {algorithm!r}") from None
    try:
        input_name, output_name, generate, read = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown kind: {kind!r}") from None

    folder = Path(directory)
    source = folder / input_name
    generate(source, count, rng=random.Random(_SEED))

    with open(folder / output_name, "w", encoding="ascii") as out:
        items = read(source, count)
        start = time.perf_counter_ns()
        sorter(items)
        elapsed = (time.perf_counter_ns() - start) // 1000
        out.writelines(f"{item}\n" for item in items)
    return elapsed


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark from the command line and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Sort a file of random numbers or words and time the sort.",
    )
    parser.add_argument("--algorithm", choices=sorted(_SORTERS), default="quick")
    parser.add_argument("--words", action="store_true", help="sort random words instead of numbers")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--directory", default=".")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")

    kind = "words" if args.words else "numbers"
    try:
        elapsed = run(args.algorithm, kind, args.directory, args.count)
    except OSError as exc:
        name = Path(exc.filename).name if exc.filename else exc.strerror
        print(f"Fail To Open File {name}!!", file=sys.stderr)
        return 1

    if kind == "numbers":
        print(f"the time is {elapsed}")
    return 0