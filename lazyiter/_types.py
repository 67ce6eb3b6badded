"""
Core type definitions for lazyiter.

Aliases shared by the sync and async engines.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Awaitable, Callable, Iterable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests an element
type Predicate[T] = Callable[[T], bool]

# Effect = side effect run on an element, result discarded
type Effect[T] = Callable[[T], object]

# Reducer = folds one element into the accumulator
type Reducer[A, T] = Callable[[A, T], A]

# MaybeAwaitable = callback result accepted by the async engine
# NOTE: async callbacks may be plain functions or coroutine functions.
type MaybeAwaitable[T] = T | Awaitable[T]

# ============================================================================
# Sources
# ============================================================================

# SyncSource = anything `wrap` accepts
type SyncSource[T] = Iterable[T]

# AsyncSource = anything `wrap_async` accepts
type AsyncSource[T] = AsyncIterable[T]

# SequenceLike = inner sequences of flatten/flat_map/zip in the async engine
type SequenceLike[T] = Iterable[T] | AsyncIterable[T]

__all__ = (
    "Predicate",
    "Effect",
    "Reducer",
    "MaybeAwaitable",
    "SyncSource",
    "AsyncSource",
    "SequenceLike",
)
