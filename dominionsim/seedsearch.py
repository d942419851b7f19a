"""Search a seeded random stream for a given value."""

from __future__ import annotations

import sys
from itertools import count

from dominionsim.rngs import RandomStreams

LIMIT = 1_000_000_000


def find_value(seed: int, target: int, rng: RandomStreams | None = None) -> int:
    """Draw values in [0, LIMIT) from stream 1 until ``target`` comes up.

    Returns how many values were drawn.
    """
    if not 0 <= target < LIMIT:
        raise ValueError(f"target must be in 0..{LIMIT - 1}")
    rng = RandomStreams() if rng is None else rng
    rng.select_stream(1)
    rng.put_seed(seed)
    for draws in count(1):
        if int(rng.random() * LIMIT) == target:
            return draws
    raise AssertionError("unreachable")


def main(argv: list[str] | None = None) -> int:
    """Take a seed and a target and report once the target is drawn."""
    args = sys.argv[1:] if argv is None else argv
    try:
        seed, target = int(args[0]), int(args[1])
    except (IndexError, ValueError):
        print("Not enough inputs:  seed target")
        return 1
    try:
        find_value(seed, target)
    except ValueError as exc:
        print(exc)
        return 1
    print("Found the bug!")
    return 0


if __name__ == "__main__":
    sys.exit(main())