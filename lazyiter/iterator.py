"""LazyIterator

Handle over a synchronous iterable:
- Lazy (intermediate operations build generators, nothing is pulled)
- Single cursor (the source is iterated once, at construction)
- Terminal operations drive the pipeline to a concrete result

The handle is itself an iterator, so it can be fed back into any
combinator that accepts a sequence."""

from __future__ import annotations

import logging
import operator
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Error, Ok, Result

from . import collection, control, transform
from ._errors import EmptySequenceError, IndexOutOfRangeError, InvalidSourceError
from ._helpers import DONE, as_iterator
from ._types import Effect, Predicate, Reducer, SyncSource

logger = logging.getLogger(__name__)

class LazyIterator[T]:
    """Lazy, composable view over a synchronous iterable.

    Example:
        wrap([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).map(str).collect()
        # ['2', '4']
    """

    __slots__ = ("_iter",)

    def __init__(self, source: SyncSource[T], /) -> None:
        """Take a cursor over source. Raises InvalidSourceError if not iterable."""
        try:
            self._iter: Iterator[T] = as_iterator(source)
        except InvalidSourceError:
            logger.debug("Rejected non-iterable source of type %s", type(source).__name__)
            raise

    # Intermediate operations

    def use(self, f: Effect[T], /) -> LazyIterator[T]:
        """Run f on each element before yielding it, unmodified."""
        return LazyIterator(transform.use(self._iter, f))

    tap = use

    def take(self, n: int, /) -> LazyIterator[T]:
        """Yield the first n elements, then stop."""
        return LazyIterator(control.take(self._iter, n))

    def skip(self, n: int, /) -> LazyIterator[T]:
        """
        Drop the first n elements.

        If the source has fewer than n elements nothing is yielded.
        """
        return LazyIterator(control.skip(self._iter, n))

    def map[U](self, f: Callable[[T], U], /) -> LazyIterator[U]:
        """Transform each element with f."""
        return LazyIterator(transform.map(self._iter, f))

    def flat_map[U](self, f: Callable[[T], Iterable[U]], /) -> LazyIterator[U]:
        """Transform each element into a sequence and flatten the result."""
        return LazyIterator(collection.flat_map(self._iter, f))

    def filter(self, predicate: Predicate[T], /) -> LazyIterator[T]:
        """Keep only elements that satisfy predicate."""
        return LazyIterator(transform.filter(self._iter, predicate))

    def flatten[U](self: LazyIterator[Iterable[U]]) -> LazyIterator[U]:
        """
        Concatenate inner sequences.

        [[1, 2, 3], [4, 5, 6]] becomes [1, 2, 3, 4, 5, 6]; inner sequences
        may also be LazyIterator handles.
        """
        return LazyIterator(collection.flatten(self._iter))

    def loop(self) -> LazyIterator[T]:
        """Repeat the (finite) sequence forever."""
        return LazyIterator(control.loop(self._iter))

    cycle = loop

    def zip[U](self, other: Iterable[U], /) -> LazyIterator[tuple[T, U]]:
        """Pair elements with other's, stepping both; stops at the shorter."""
        return LazyIterator(collection.zip(self._iter, other))

    def zip_with[U, R](self, other: Iterable[U], f: Callable[[T, U], R], /) -> LazyIterator[R]:
        """Combine elements with other's pairwise through f."""
        return LazyIterator(collection.zip_with(self._iter, other, f))

    def intersperse[D](self, delim: D, /) -> LazyIterator[T | D]:
        """Put delim between every two consecutive elements."""
        return LazyIterator(collection.intersperse(self._iter, delim))

    def enumerate(self) -> LazyIterator[tuple[T, int]]:
        """Pair each element with its index: (element, index)."""
        return LazyIterator(collection.enumerate(self._iter))

    # Terminal operations

    def fold[A](self, init: A, reducer: Reducer[A, T], /) -> A:
        """Left fold: reducer(...reducer(reducer(init, x0), x1)..., xn)."""
        value = init
        for item in self._iter:
            value = reducer(value, item)
        return value

    def collect(self) -> list[T]:
        """Collect all elements into a list."""
        return list(self._iter)

    def for_each(self, f: Effect[T], /) -> None:
        """Run f on every element."""
        for item in self._iter:
            f(item)

    def count(self) -> int:
        """Number of elements. Drains the sequence."""
        return self.map(lambda _: 1).sum()

    def sum(self) -> typing.Any:
        """
        Sum of the elements, 0 if empty.

        Only meaningful for numbers; whatever `+` raises for other
        elements propagates to the caller.
        """
        return self.fold(0, operator.add)

    def nth(self, n: int, /) -> T | None:
        """Element at zero-based position n, or None if out of range."""
        if n < 0:
            return None
        found = self.skip(n).take(1).collect()
        return found[0] if found else None

    def first(self) -> T | None:
        """First element, or None if the sequence is empty."""
        return next(self._iter, None)

    def any(self, predicate: Predicate[T], /) -> bool:
        """True on the first element satisfying predicate. Short-circuits."""
        for item in self._iter:
            if predicate(item):
                return True
        return False

    def all(self, predicate: Predicate[T], /) -> bool:
        """False on the first element failing predicate. Short-circuits."""
        for item in self._iter:
            if not predicate(item):
                return False
        return True

    def try_first(self) -> Result[T, EmptySequenceError]:
        """First element as Ok, or Error(EmptySequenceError) if empty."""
        item = next(self._iter, DONE)
        if item is DONE:
            return Error(EmptySequenceError())
        return Ok(typing.cast("T", item))

    def try_nth(self, n: int, /) -> Result[T, IndexOutOfRangeError]:
        """Element at position n as Ok, or Error(IndexOutOfRangeError)."""
        if n < 0:
            return Error(IndexOutOfRangeError(n))
        return self.skip(n).take(1).try_first().map_err(lambda _: IndexOutOfRangeError(n))

    def iterator(self) -> Iterator[T]:
        """The cursor wrapped by this handle."""
        return self._iter

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._iter)

# Entry constructors
def wrap[T](source: SyncSource[T], /) -> LazyIterator[T]:
    """
    Wrap a synchronous iterable.

    Raises InvalidSourceError if source is not iterable.
    """
    return LazyIterator(source)

def try_wrap[T](source: SyncSource[T], /) -> Result[LazyIterator[T], InvalidSourceError]:
    """Wrap a synchronous iterable, returning the failure as Error instead of raising."""
    try:
        return Ok(LazyIterator(source))
    except InvalidSourceError as e:
        return Error(e)

__all__ = ("LazyIterator", "try_wrap", "wrap")
