from __future__ import annotations

import asyncio
import random
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    value: float


async def sensor_feed(
    name: str,
    *,
    count: int,
    delay_seconds: float = 0.0,
    seed: int = 0,
) -> AsyncIterator[Reading]:  # pragma: no cover (examples only)
    """Fake async source: `count` readings, one per `delay_seconds`."""
    rng = random.Random(seed)
    for _ in range(count):
        await asyncio.sleep(delay_seconds)
        yield Reading(name, round(rng.uniform(-5.0, 35.0), 1))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
