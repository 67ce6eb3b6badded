"""
Example sources
===============

Unbounded integer sequences, handy as inputs for take/skip/zip. Each call
returns a fresh generator with its own counter.
"""

from __future__ import annotations

import itertools
from collections.abc import AsyncIterator, Iterator


def positives() -> Iterator[int]:
    """1, 2, 3, ... forever."""
    return itertools.count(1)


def negatives() -> Iterator[int]:
    """-1, -2, -3, ... forever."""
    return itertools.count(-1, -1)


async def positives_async() -> AsyncIterator[int]:
    """Async 1, 2, 3, ... forever."""
    for i in itertools.count(1):
        yield i


async def negatives_async() -> AsyncIterator[int]:
    """Async -1, -2, -3, ... forever."""
    for i in itertools.count(-1, -1):
        yield i


__all__ = ("positives", "negatives", "positives_async", "negatives_async")
