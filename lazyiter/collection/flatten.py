"""
Flatten combinators
===================

Concatenate nested sequences. Inner sequences may be raw iterables or
handles; both expose the iteration protocol, so no type branching is needed.
"""

from __future__ import annotations

from collections.abc import (
    AsyncIterable,
    AsyncIterator,
    Callable,
    Iterable,
    Iterator,
)

from .._helpers import as_async_iterator, as_iterator, resolve
from .._types import MaybeAwaitable, SequenceLike


# ============================================================================
# Sync sequences
# ============================================================================


def flatten[T](source: Iterable[Iterable[T]]) -> Iterator[T]:
    """Yield every element of every inner sequence, draining each in turn."""
    for inner in source:
        yield from as_iterator(inner)


def flat_map[T, U](source: Iterable[T], f: Callable[[T], Iterable[U]]) -> Iterator[U]:
    """Single-pass map(f) + flatten. f must return a sequence."""
    for item in source:
        yield from as_iterator(f(item))


# ============================================================================
# Async sequences
# ============================================================================


async def flatten_async[T](source: AsyncIterable[SequenceLike[T]]) -> AsyncIterator[T]:
    """
    Async flatten.

    Inner sequences may be async or sync; sync ones are drained without
    extra suspension beyond the async generator itself.
    """
    async for inner in source:
        async for item in as_async_iterator(inner):
            yield item


async def flat_map_async[T, U](
    source: AsyncIterable[T],
    f: Callable[[T], MaybeAwaitable[SequenceLike[U]]],
) -> AsyncIterator[U]:
    """Single-pass map(f) + flatten. f may be a coroutine function."""
    async for item in source:
        inner = await resolve(f(item))
        async for value in as_async_iterator(inner):
            yield value


__all__ = ("flatten", "flat_map", "flatten_async", "flat_map_async")
