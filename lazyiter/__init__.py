"""
Lazy, composable iteration over sync and async sequences.

Wrap any iterable with `wrap` (or any async iterable with `wrap_async`),
chain intermediate operations, and finish with a terminal operation.
Nothing is pulled from the source before the terminal operation runs.

Architecture:
- Leaf combinators (control / transform / collection) are plain generators,
  each with a sync form and an *_async form side by side
- LazyIterator / LazyAsyncIterator hold one cursor and chain the leaves
- Fallible lookups (try_first, try_nth, try_wrap) return kungfu Results
"""

# Core types
from ._types import AsyncSource, Effect, MaybeAwaitable, Predicate, Reducer, SequenceLike, SyncSource

# Internal helpers (for custom combinators)
from . import _helpers

# Leaf combinators (namespace imports)
from . import collection, control, transform

# Handles
from .async_iterator import LazyAsyncIterator, try_wrap_async, wrap_async
from .iterator import LazyIterator, try_wrap, wrap

# Example sources
from .sources import negatives, negatives_async, positives, positives_async

# Errors
from ._errors import EmptySequenceError, IndexOutOfRangeError, InvalidSourceError

__all__ = (
    # Types
    "AsyncSource",
    "Effect",
    "MaybeAwaitable",
    "Predicate",
    "Reducer",
    "SequenceLike",
    "SyncSource",
    # Internal helpers (for custom combinators)
    "_helpers",
    # Leaf combinators
    "collection",
    "control",
    "transform",
    # Handles - sync
    "LazyIterator",
    "try_wrap",
    "wrap",
    # Handles - async
    "LazyAsyncIterator",
    "try_wrap_async",
    "wrap_async",
    # Sources
    "negatives",
    "negatives_async",
    "positives",
    "positives_async",
    # Errors
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "InvalidSourceError",
)
