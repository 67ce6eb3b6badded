from __future__ import annotations

from _infra import banner, run

from lazyiter import negatives, positives, wrap
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: wrap + intermediate chain + terminal")

    # Nothing runs until collect(): positives() is infinite.
    squares_of_odds = (
        wrap(positives())
        .filter(lambda x: x % 2 == 1)
        .map(lambda x: x * x)
        .take(5)
        .collect()
    )
    print(f"squares of odds: {squares_of_odds}")

    print("zeros:", wrap(positives()).zip_with(negatives(), lambda a, b: a + b).take(3).collect())
    print("csv:", "".join(wrap(["a", "b", "c"]).intersperse(",").collect()))
    print("rotation:", wrap([1, 2, 3]).loop().skip(1).take(3).collect())

    match wrap([]).try_first():
        case Ok(value):
            print(f"first: {value}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
