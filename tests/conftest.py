"""Shared fixtures: sources that record how many elements were pulled."""

from collections.abc import Iterable

import pytest


class CountingSource:
    """Sync iterator over items that counts successful pulls."""

    def __init__(self, items: Iterable):
        self._it = iter(items)
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self):
        item = next(self._it)
        self.pulled += 1
        return item


class CountingAsyncSource:
    """Async iterator over items that counts successful pulls."""

    def __init__(self, items: Iterable):
        self._it = iter(items)
        self.pulled = 0

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            item = next(self._it)
        except StopIteration:
            raise StopAsyncIteration from None
        self.pulled += 1
        return item


async def agen(items: Iterable):
    for item in items:
        yield item


@pytest.fixture
def counting():
    return CountingSource


@pytest.fixture
def counting_async():
    return CountingAsyncSource


@pytest.fixture
def make_agen():
    return agen
