"""Side effect combinators

Effects execute for observation only (logging, counting, debugging)
and don't change the elements flowing through. They are intermediate:
nothing runs until a terminal operation pulls."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import resolve
from .._types import Effect, MaybeAwaitable

# Sync sequences
def use[T](source: Iterable[T], effect: Effect[T]) -> Iterator[T]:
    """Run effect on each element, then yield it unchanged."""
    for item in source:
        effect(item)
        yield item

# Async sequences
async def use_async[T](
    source: AsyncIterable[T],
    effect: Callable[[T], MaybeAwaitable[object]],
) -> AsyncIterator[T]:
    """Run effect (sync or async) on each element, then yield it unchanged."""
    async for item in source:
        await resolve(effect(item))
        yield item

__all__ = ("use", "use_async")
