"""LazyAsyncIterator

Handle over an asynchronous iterable. Same API as LazyIterator:
- Intermediate operations return a new LazyAsyncIterator, nothing is awaited
- Terminal operations are coroutines (or a LazyCoroResult for try_*)
- Exactly one pull is in flight at a time; no tasks are spawned

Callbacks may be plain functions or coroutine functions."""

from __future__ import annotations

import logging
import operator
import typing
from collections.abc import AsyncIterator, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from . import collection, control, transform
from ._errors import EmptySequenceError, IndexOutOfRangeError, InvalidSourceError
from ._helpers import DONE, is_async_iterable, resolve
from ._types import AsyncSource, MaybeAwaitable, SequenceLike

logger = logging.getLogger(__name__)

class LazyAsyncIterator[T]:
    """Lazy, composable view over an asynchronous iterable.

    Example:
        async def ticks():
            for i in range(5):
                await asyncio.sleep(0)
                yield i

        await wrap_async(ticks()).map(lambda x: x * 10).take(2).collect()
        # [0, 10]
    """

    __slots__ = ("_iter",)

    def __init__(self, source: AsyncSource[T], /) -> None:
        """Take an async cursor over source. Raises InvalidSourceError otherwise."""
        if not is_async_iterable(source):
            logger.debug("Rejected non-async-iterable source of type %s", type(source).__name__)
            raise InvalidSourceError(source, "an asynchronous")
        self._iter: AsyncIterator[T] = aiter(source)

    # Intermediate operations

    def use(self, f: Callable[[T], MaybeAwaitable[object]], /) -> LazyAsyncIterator[T]:
        """Run f on each element before yielding it, unmodified."""
        return LazyAsyncIterator(transform.use_async(self._iter, f))

    tap = use

    def take(self, n: int, /) -> LazyAsyncIterator[T]:
        """Yield the first n elements, then stop."""
        return LazyAsyncIterator(control.take_async(self._iter, n))

    def skip(self, n: int, /) -> LazyAsyncIterator[T]:
        """Drop the first n elements."""
        return LazyAsyncIterator(control.skip_async(self._iter, n))

    def map[U](self, f: Callable[[T], MaybeAwaitable[U]], /) -> LazyAsyncIterator[U]:
        """Transform each element with f."""
        return LazyAsyncIterator(transform.map_async(self._iter, f))

    def flat_map[U](
        self,
        f: Callable[[T], MaybeAwaitable[SequenceLike[U]]],
        /,
    ) -> LazyAsyncIterator[U]:
        """Transform each element into a sequence (sync or async) and flatten."""
        return LazyAsyncIterator(collection.flat_map_async(self._iter, f))

    def filter(self, predicate: Callable[[T], MaybeAwaitable[bool]], /) -> LazyAsyncIterator[T]:
        """Keep only elements that satisfy predicate."""
        return LazyAsyncIterator(transform.filter_async(self._iter, predicate))

    def flatten[U](self: LazyAsyncIterator[SequenceLike[U]]) -> LazyAsyncIterator[U]:
        """Concatenate inner sequences; inner ones may be sync, async or handles."""
        return LazyAsyncIterator(collection.flatten_async(self._iter))

    def loop(self) -> LazyAsyncIterator[T]:
        """Repeat the (finite) sequence forever."""
        return LazyAsyncIterator(control.loop_async(self._iter))

    cycle = loop

    def zip[U](self, other: SequenceLike[U], /) -> LazyAsyncIterator[tuple[T, U]]:
        """Pair elements with other's. Awaits this side first, then other."""
        return LazyAsyncIterator(collection.zip_async(self._iter, other))

    def zip_with[U, R](
        self,
        other: SequenceLike[U],
        f: Callable[[T, U], MaybeAwaitable[R]],
        /,
    ) -> LazyAsyncIterator[R]:
        """Combine elements with other's pairwise through f."""
        return LazyAsyncIterator(collection.zip_with_async(self._iter, other, f))

    def intersperse[D](self, delim: D, /) -> LazyAsyncIterator[T | D]:
        """Put delim between every two consecutive elements."""
        return LazyAsyncIterator(collection.intersperse_async(self._iter, delim))

    def enumerate(self) -> LazyAsyncIterator[tuple[T, int]]:
        """Pair each element with its index: (element, index)."""
        return LazyAsyncIterator(collection.enumerate_async(self._iter))

    # Terminal operations

    async def fold[A](self, init: A, reducer: Callable[[A, T], MaybeAwaitable[A]], /) -> A:
        """Left fold over the whole sequence."""
        value = init
        async for item in self._iter:
            value = await resolve(reducer(value, item))
        return value

    async def collect(self) -> list[T]:
        """Collect all elements into a list."""
        return [item async for item in self._iter]

    async def for_each(self, f: Callable[[T], MaybeAwaitable[object]], /) -> None:
        """Run f on every element."""
        async for item in self._iter:
            await resolve(f(item))

    async def count(self) -> int:
        """Number of elements. Drains the sequence."""
        return await self.map(lambda _: 1).sum()

    async def sum(self) -> typing.Any:
        """Sum of the elements, 0 if empty. Numbers only."""
        return await self.fold(0, operator.add)

    async def nth(self, n: int, /) -> T | None:
        """Element at zero-based position n, or None if out of range."""
        if n < 0:
            return None
        found = await self.skip(n).take(1).collect()
        return found[0] if found else None

    async def first(self) -> T | None:
        """First element, or None if the sequence is empty."""
        return await anext(self._iter, None)

    async def any(self, predicate: Callable[[T], MaybeAwaitable[bool]], /) -> bool:
        """True on the first element satisfying predicate. Short-circuits."""
        async for item in self._iter:
            if await resolve(predicate(item)):
                return True
        return False

    async def all(self, predicate: Callable[[T], MaybeAwaitable[bool]], /) -> bool:
        """False on the first element failing predicate. Short-circuits."""
        async for item in self._iter:
            if not await resolve(predicate(item)):
                return False
        return True

    def try_first(self) -> LazyCoroResult[T, EmptySequenceError]:
        """
        First element as Ok, or Error(EmptySequenceError) if empty.

        Nothing is pulled until the result is awaited.
        """

        async def run() -> Result[T, EmptySequenceError]:
            item = await anext(self._iter, DONE)
            if item is DONE:
                return Error(EmptySequenceError())
            return Ok(typing.cast("T", item))

        return LazyCoroResult(run)

    def try_nth(self, n: int, /) -> LazyCoroResult[T, IndexOutOfRangeError]:
        """Element at position n as Ok, or Error(IndexOutOfRangeError)."""

        async def run() -> Result[T, IndexOutOfRangeError]:
            if n < 0:
                return Error(IndexOutOfRangeError(n))
            r = await self.skip(n).take(1).try_first()()
            match r:
                case Ok(value):
                    return Ok(value)
                case Error(_):
                    return Error(IndexOutOfRangeError(n))

        return LazyCoroResult(run)

    def iterator(self) -> AsyncIterator[T]:
        """The async cursor wrapped by this handle."""
        return self._iter

    # Protocol methods

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        return await anext(self._iter)

# Entry constructors
def wrap_async[T](source: AsyncSource[T], /) -> LazyAsyncIterator[T]:
    """
    Wrap an asynchronous iterable.

    Raises InvalidSourceError if source is not async iterable. Terminal
    operations on the result must be awaited.
    """
    return LazyAsyncIterator(source)

def try_wrap_async[T](
    source: AsyncSource[T],
    /,
) -> Result[LazyAsyncIterator[T], InvalidSourceError]:
    """Wrap an asynchronous iterable, returning the failure as Error instead of raising."""
    try:
        return Ok(LazyAsyncIterator(source))
    except InvalidSourceError as e:
        return Error(e)

__all__ = ("LazyAsyncIterator", "try_wrap_async", "wrap_async")
