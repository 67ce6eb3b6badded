from __future__ import annotations

from _infra import Reading, banner, run, sensor_feed

from lazyiter import wrap_async
from kungfu import Error, Ok


async def main() -> None:
    banner("02_async_feed: the same chain over an async source")

    def feed(seed: int):
        return sensor_feed("roof", count=20, delay_seconds=0.005, seed=seed)

    freezing = (
        wrap_async(feed(1))
        .filter(lambda r: r.value < 0)
        .map(lambda r: r.value)
        .take(3)
    )
    print(f"first freezing readings: {await freezing.collect()}")

    # Async callbacks are awaited one element at a time.
    async def to_fahrenheit(r: Reading) -> float:
        return round(r.value * 9 / 5 + 32, 1)

    total = await wrap_async(feed(2)).map(to_fahrenheit).sum()
    print(f"sum in F: {total:.1f}")

    print("labelled:", await wrap_async(feed(3)).enumerate().map(lambda p: f"#{p[1]}={p[0].value}").take(3).collect())

    match await wrap_async(feed(4)).try_nth(100):
        case Ok(reading):
            print(f"reading #100: {reading}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
