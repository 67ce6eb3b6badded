"""Positional combinators

Combinators that depend only on an element's position: index tagging
and delimiter interspersion."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

# Sync sequences
def enumerate[T](source: Iterable[T]) -> Iterator[tuple[T, int]]:
    """
    Yield (element, index) pairs, index from 0.

    NOTE: element comes first, unlike the builtin enumerate.
    """
    index = 0
    for item in source:
        yield item, index
        index += 1

def intersperse[T, D](source: Iterable[T], delim: D) -> Iterator[T | D]:
    """Yield delim between consecutive elements, never before or after."""
    first = True
    for item in source:
        if not first:
            yield delim
        first = False
        yield item

# Async sequences
async def enumerate_async[T](source: AsyncIterable[T]) -> AsyncIterator[tuple[T, int]]:
    """Async enumerate, (element, index) pairs."""
    index = 0
    async for item in source:
        yield item, index
        index += 1

async def intersperse_async[T, D](source: AsyncIterable[T], delim: D) -> AsyncIterator[T | D]:
    """Async intersperse."""
    first = True
    async for item in source:
        if not first:
            yield delim
        first = False
        yield item

__all__ = ("enumerate", "intersperse", "enumerate_async", "intersperse_async")
