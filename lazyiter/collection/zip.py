"""
Zip combinators
===============

Step two sequences in lockstep. The left side is always pulled first and
the right side is only pulled once the left produced an element; pulls are
never issued concurrently.
"""

from __future__ import annotations

from collections.abc import (
    AsyncIterable,
    AsyncIterator,
    Callable,
    Iterable,
    Iterator,
)

from .._helpers import DONE, as_async_iterator, as_iterator, resolve
from .._types import MaybeAwaitable, SequenceLike


# ============================================================================
# Sync sequences
# ============================================================================


def zip[A, B](left: Iterable[A], right: Iterable[B]) -> Iterator[tuple[A, B]]:
    """
    Yield (a, b) pairs until either side is exhausted.

    End of sequence is detected through the iterator protocol, not the
    element value, so None/0/False elements pair normally.
    """
    left_it = as_iterator(left)
    right_it = as_iterator(right)
    while True:
        a = next(left_it, DONE)
        if a is DONE:
            return
        b = next(right_it, DONE)
        if b is DONE:
            return
        yield a, b


def zip_with[A, B, R](
    left: Iterable[A],
    right: Iterable[B],
    f: Callable[[A, B], R],
) -> Iterator[R]:
    """zip, then combine each pair with f."""
    for a, b in zip(left, right):
        yield f(a, b)


# ============================================================================
# Async sequences
# ============================================================================


async def zip_async[A, B](
    left: SequenceLike[A],
    right: SequenceLike[B],
) -> AsyncIterator[tuple[A, B]]:
    """Async zip. Awaits left, then right, before each pair."""
    left_it = as_async_iterator(left)
    right_it = as_async_iterator(right)
    while True:
        a = await anext(left_it, DONE)
        if a is DONE:
            return
        b = await anext(right_it, DONE)
        if b is DONE:
            return
        yield a, b


async def zip_with_async[A, B, R](
    left: SequenceLike[A],
    right: SequenceLike[B],
    f: Callable[[A, B], MaybeAwaitable[R]],
) -> AsyncIterator[R]:
    """zip_async, then combine each pair with f (sync or async)."""
    async for a, b in zip_async(left, right):
        yield await resolve(f(a, b))


__all__ = ("zip", "zip_with", "zip_async", "zip_with_async")
