"""Leaf combinators used directly, without a handle"""

import pytest

from lazyiter import _helpers, collection, control, transform
from lazyiter import InvalidSourceError


class TestSyncLeaves:
    def test_are_plain_generators(self):
        assert list(control.take(transform.map(range(5), str), 2)) == ["0", "1"]

    def test_skip_then_filter(self):
        assert list(transform.filter(control.skip(range(6), 2), lambda x: x % 2)) == [3, 5]

    def test_zip_with_and_enumerate(self):
        summed = collection.zip_with([1, 2], [3, 4], lambda a, b: a + b)
        assert list(collection.enumerate(summed)) == [(4, 0), (6, 1)]

    def test_flatten_accepts_mixed_inner(self):
        assert list(collection.flatten([(1,), [2], "3", range(4, 5)])) == [1, 2, "3", 4]


class TestAsyncLeaves:
    @pytest.mark.asyncio
    async def test_chain(self, make_agen):
        doubled = transform.map_async(make_agen([1, 2, 3]), lambda x: x * 2)
        assert [x async for x in control.take_async(doubled, 2)] == [2, 4]

    @pytest.mark.asyncio
    async def test_zip_async_accepts_sync_sides(self):
        assert [p async for p in collection.zip_async([1, 2], "ab")] == [(1, "a"), (2, "b")]

    @pytest.mark.asyncio
    async def test_intersperse_and_loop(self, make_agen):
        looped = control.loop_async(collection.intersperse_async(make_agen("ab"), "|"))
        assert [x async for x in control.take_async(looped, 5)] == ["a", "|", "b", "a", "|"]


class TestHelpers:
    def test_capability_checks(self, make_agen):
        assert _helpers.is_iterable([])
        assert not _helpers.is_iterable(1)
        assert _helpers.is_async_iterable(make_agen([]))
        assert not _helpers.is_async_iterable([])

    def test_as_iterator_rejects(self):
        with pytest.raises(InvalidSourceError):
            _helpers.as_iterator(5)

    def test_as_async_iterator_rejects(self):
        with pytest.raises(InvalidSourceError):
            _helpers.as_async_iterator(5)

    @pytest.mark.asyncio
    async def test_resolve(self):
        async def later():
            return 3

        assert await _helpers.resolve(2) == 2
        assert await _helpers.resolve(later()) == 3

    def test_public_helpers(self):
        assert set(_helpers.__all__) == {
            "DONE",
            "is_iterable",
            "is_async_iterable",
            "as_iterator",
            "as_async_iterator",
            "lift_iterator",
            "resolve",
        }
        assert all(hasattr(_helpers, name) for name in _helpers.__all__)
