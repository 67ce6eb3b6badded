"""
Take / skip combinators
=======================

Bounded prefix and suffix of a sequence.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator


# ============================================================================
# Sync sequences
# ============================================================================


def take[T](source: Iterable[T], n: int) -> Iterator[T]:
    """
    Yield at most n leading elements.

    Stops right after the nth element, so an infinite source is never
    pulled past it. n <= 0 yields nothing and pulls nothing.
    """
    remaining = n
    if remaining <= 0:
        return
    for item in source:
        yield item
        remaining -= 1
        if remaining == 0:
            return


def skip[T](source: Iterable[T], n: int) -> Iterator[T]:
    """Drop the first n elements, yield the rest."""
    skipped = 0
    for item in source:
        if skipped < n:
            skipped += 1
            continue
        yield item


# ============================================================================
# Async sequences
# ============================================================================


async def take_async[T](source: AsyncIterable[T], n: int) -> AsyncIterator[T]:
    """Yield at most n leading elements. Never awaits past the nth."""
    remaining = n
    if remaining <= 0:
        return
    async for item in source:
        yield item
        remaining -= 1
        if remaining == 0:
            return


async def skip_async[T](source: AsyncIterable[T], n: int) -> AsyncIterator[T]:
    """Drop the first n elements, yield the rest."""
    skipped = 0
    async for item in source:
        if skipped < n:
            skipped += 1
            continue
        yield item


__all__ = ("take", "skip", "take_async", "skip_async")
