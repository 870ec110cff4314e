"""Generation, writing and reading of random benchmark data files."""

from __future__ import annotations

import os
import random
import string
from pathlib import Path

DEFAULT_COUNT = 1_000_000
WORD_LENGTH = 100
MAX_WORD_LENGTH = 100
RAND_MAX = 2**31 - 1


def _rng(rng: random.Random | None) -> random.Random:
    return random.Random() if rng is None else rng


def random_numbers(count: int = DEFAULT_COUNT, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers in ``0..RAND_MAX``."""
    source = _rng(rng)
    return [source.randint(0, RAND_MAX) for _ in range(count)]


def random_words(
    count: int = DEFAULT_COUNT,
    length: int = WORD_LENGTH,
    rng: random.Random | None = None,
) -> list[str]:
    """Return ``count`` random words of ``length`` lowercase ASCII letters."""
    source = _rng(rng)
    return ["".join(source.choices(string.ascii_lowercase, k=length)) for _ in range(count)]


def _write_lines(path: str | os.PathLike[str], values) -> None:
    with open(path, "w", encoding="ascii") as out:
        out.writelines(f"{value}\n" for value in values)


def write_numbers(
    path: str | os.PathLike[str],
    count: int = DEFAULT_COUNT,
    rng: random.Random | None = None,
) -> list[int]:
    """Write ``count`` random integers to ``path``, one per line, and return them."""
    values = random_numbers(count, rng)
    _write_lines(path, values)
    return values


def write_words(
    path: str | os.PathLike[str],
    count: int = DEFAULT_COUNT,
    length: int = WORD_LENGTH,
    rng: random.Random | None = None,
) -> list[str]:
    """Write ``count`` random words to ``path``, one per line, and return them."""
    words = random_words(count, length, rng)
    _write_lines(path, words)
    return words


def _read_tokens(path: str | os.PathLike[str], count: int | None) -> list[str]:
    tokens = Path(path).read_text(encoding="ascii").split()
    if count is None:
        return tokens
    if len(tokens) < count:
        raise ValueError(f"{path}: expected {count} entries, found {len(tokens)}")
    return tokens[:count]


def read_numbers(path: str | os.PathLike[str], count: int | None = None) -> list[int]:
    """Read whitespace-separated integers from ``path``.

    With ``count`` given, exactly that many are returned and a shorter
    file raises ``ValueError``.
    """
    return [int(token) for token in _read_tokens(path, count)]


def read_words(path: str | os.PathLike[str], count: int | None = None) -> list[str]:
    """Read whitespace-separated words of at most ``MAX_WORD_LENGTH`` characters."""
    words = _read_tokens(path, count)
    for word in words:
        if len(word) > MAX_WORD_LENGTH:
            raise ValueError(f"{path}: word longer than {MAX_WORD_LENGTH} characters")
    return words