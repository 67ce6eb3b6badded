"""
Map / filter combinators
========================

Element-wise transformation and selection.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import resolve
from .._types import MaybeAwaitable, Predicate


# ============================================================================
# Sync sequences
# ============================================================================


def map[T, U](source: Iterable[T], f: Callable[[T], U]) -> Iterator[U]:
    """Yield f(x) for each element. f runs only when its output is pulled."""
    for item in source:
        yield f(item)


def filter[T](source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Yield only the elements that satisfy predicate."""
    for item in source:
        if predicate(item):
            yield item


# ============================================================================
# Async sequences
# ============================================================================


async def map_async[T, U](
    source: AsyncIterable[T],
    f: Callable[[T], MaybeAwaitable[U]],
) -> AsyncIterator[U]:
    """Yield f(x) for each element, awaiting f's result if needed."""
    async for item in source:
        yield await resolve(f(item))


async def filter_async[T](
    source: AsyncIterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> AsyncIterator[T]:
    """Yield only the elements that satisfy predicate (sync or async)."""
    async for item in source:
        if await resolve(predicate(item)):
            yield item


__all__ = ("map", "filter", "map_async", "filter_async")
