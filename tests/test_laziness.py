"""Building a pipeline must not pull from the source or run callbacks"""

import logging

import pytest

from lazyiter import wrap, wrap_async


class TestSyncLaziness:
    def test_chain_pulls_nothing_until_terminal(self, counting):
        calls = []
        src = counting(range(10))
        pipeline = (
            wrap(src)
            .use(lambda x: calls.append(("use", x)))
            .map(lambda x: calls.append(("map", x)) or x * 2)
            .filter(lambda x: calls.append(("filter", x)) or x > 4)
            .skip(1)
            .enumerate()
            .intersperse(None)
            .take(3)
        )
        assert src.pulled == 0
        assert calls == []

        assert pipeline.collect() == [(8, 0), None, (10, 1)]
        assert src.pulled == 6

    def test_every_intermediate_is_lazy(self, counting):
        src = counting([[1], [2]])
        it = wrap(src)
        chains = [
            it.flatten(),
            it.flat_map(lambda x: x),
            it.loop(),
            it.zip([1, 2]),
            it.zip_with([1, 2], lambda a, b: (a, b)),
            it.tap(print),
        ]
        assert len(chains) == 6
        assert src.pulled == 0

    def test_map_runs_once_per_pulled_position(self):
        calls = []
        it = wrap([1, 2, 3, 4]).map(lambda x: calls.append(x) or x)
        assert it.take(2).collect() == [1, 2]
        assert calls == [1, 2]

    def test_loop_switch_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lazyiter.control.loop"):
            wrap([1, 2]).loop().take(3).collect()
        assert "2 buffered elements" in caplog.text


class TestAsyncLaziness:
    @pytest.mark.asyncio
    async def test_chain_pulls_nothing_until_terminal(self, counting_async):
        calls = []
        src = counting_async(range(10))
        pipeline = (
            wrap_async(src)
            .use(lambda x: calls.append(x))
            .map(lambda x: x + 1)
            .filter(lambda x: x % 2 == 0)
            .skip(1)
            .take(2)
        )
        assert src.pulled == 0
        assert calls == []

        assert await pipeline.collect() == [4, 6]
        assert src.pulled == 6
        assert calls == [0, 1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_every_intermediate_is_lazy(self, counting_async):
        src = counting_async([[1], [2]])
        it = wrap_async(src)
        chains = [
            it.flatten(),
            it.flat_map(lambda x: x),
            it.loop(),
            it.zip([1, 2]),
            it.zip_with([1, 2], lambda a, b: (a, b)),
            it.intersperse(0),
            it.enumerate(),
        ]
        assert len(chains) == 7
        assert src.pulled == 0

    @pytest.mark.asyncio
    async def test_zip_alternates_sides(self, counting_async):
        order = []
        left = wrap_async(counting_async([1, 2])).use(lambda x: order.append(("L", x)))
        right = wrap_async(counting_async("ab")).use(lambda x: order.append(("R", x)))
        await left.zip(right).collect()
        assert order == [("L", 1), ("R", "a"), ("L", 2), ("R", "b")]
