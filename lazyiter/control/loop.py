"""Loop combinators

Replay a finite sequence forever. The first pass buffers what it yields,
later passes index into the buffer, so memory stays at one copy of the
source no matter how many cycles are consumed."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

logger = logging.getLogger(__name__)

# Sync sequences
def loop[T](source: Iterable[T]) -> Iterator[T]:
    """
    Yield the source, then its elements again and again.

    An infinite source never leaves the first pass. An empty source
    yields nothing and ends instead of spinning.
    """
    buffer: list[T] = []
    for item in source:
        buffer.append(item)
        yield item

    if not buffer:
        logger.debug("loop: source was empty, nothing to cycle")
        return

    logger.debug("loop: cycling over %d buffered elements", len(buffer))
    index = 0
    while True:
        yield buffer[index]
        index = (index + 1) % len(buffer)

# Async sequences
async def loop_async[T](source: AsyncIterable[T]) -> AsyncIterator[T]:
    """Async loop. Only the first pass suspends; cycling reads the buffer."""
    buffer: list[T] = []
    async for item in source:
        buffer.append(item)
        yield item

    if not buffer:
        logger.debug("loop_async: source was empty, nothing to cycle")
        return

    logger.debug("loop_async: cycling over %d buffered elements", len(buffer))
    index = 0
    while True:
        yield buffer[index]
        index = (index + 1) % len(buffer)

__all__ = ("loop", "loop_async")
