"""Internal helpers for lazyiter.

Protocol checks and adapters shared by the sync and async combinators.
These are not part of the public API but can be used for writing custom
combinators that plug into LazyIterator / LazyAsyncIterator."""

from __future__ import annotations

import inspect
import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from ._errors import InvalidSourceError
from ._types import MaybeAwaitable

# End-of-sequence marker for next()/anext() defaults
# NOTE: compared by identity, so None and other falsy elements are never
#       mistaken for the end of a sequence.
DONE: typing.Final = object()

# Capability checks
def is_iterable(value: object) -> bool:
    """
    True if iter() accepts value.

    Covers legacy sequences that only define __getitem__, which the
    Iterable ABC does not recognize.
    """
    try:
        iter(typing.cast(Iterable[object], value))
    except TypeError:
        return False
    return True

def is_async_iterable(value: object) -> bool:
    """True if value implements the asynchronous iteration protocol."""
    return isinstance(value, AsyncIterable)

# Adapters (any sequence-like -> cursor)
def as_iterator[T](value: Iterable[T]) -> Iterator[T]:
    """
    Get a cursor over a sync sequence, raw or wrapped.

    Raises InvalidSourceError if value is not iterable.
    """
    try:
        return iter(value)
    except TypeError:
        raise InvalidSourceError(value, "a synchronous") from None

def as_async_iterator[T](value: Iterable[T] | AsyncIterable[T]) -> AsyncIterator[T]:
    """
    Get an async cursor over any sequence, raw or wrapped.

    Async iterables are used as-is; sync iterables are lifted so that
    `async for` can drain them. Raises InvalidSourceError otherwise.
    """
    if is_async_iterable(value):
        return aiter(typing.cast(AsyncIterable[T], value))
    if is_iterable(value):
        return lift_iterator(iter(typing.cast(Iterable[T], value)))
    raise InvalidSourceError(value, "a synchronous or asynchronous")

async def lift_iterator[T](it: Iterator[T]) -> AsyncIterator[T]:
    """Expose a sync cursor through the async iteration protocol."""
    for item in it:
        yield item

# Callback results in the async engine
async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """
    Await value if it is awaitable, otherwise return it unchanged.

    Lets async combinators take both plain and coroutine callbacks.
    """
    if inspect.isawaitable(value):
        return await value
    return value

__all__ = (
    "DONE",
    "is_iterable",
    "is_async_iterable",
    "as_iterator",
    "as_async_iterator",
    "lift_iterator",
    "resolve",
)
