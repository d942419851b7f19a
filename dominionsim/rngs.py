"""Multi-stream Lehmer random number generator.

The generator keeps 256 independent streams. Each one is a
multiplicative congruential generator with modulus 2**31 - 1 and
multiplier 48271. Its values lie strictly between 0.0 and 1.0.
"""

from __future__ import annotations

import time

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789


def _step(seed: int, multiplier: int) -> int:
    """Advance a seed by one multiplication modulo MODULUS (Schrage's method)."""
    q, r = divmod(MODULUS, multiplier)
    t = multiplier * (seed % q) - r * (seed // q)
    return t if t > 0 else t + MODULUS


class RandomStreams:
    """A set of 256 seeded random streams, one of which is current."""

    def __init__(self) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False

    @property
    def stream(self) -> int:
        """Index of the current stream."""
        return self._stream

    def random(self) -> float:
        """Return the next value of the current stream, in (0.0, 1.0)."""
        seed = _step(self._seeds[self._stream], MULTIPLIER)
        self._seeds[self._stream] = seed
        return seed / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and derive the seeds of every other stream."""
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            self._seeds[j] = _step(self._seeds[j - 1], A256)

    def put_seed(self, x: int) -> None:
        """Set the seed of the current stream.

        A positive value is reduced modulo MODULUS, a negative one is
        replaced by a value from the clock, and zero asks for a seed on
        standard input.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        while x == 0 or not 0 < x < MODULUS:
            reply = input("\nEnter a positive integer seed (9 digits or less) >> ")
            try:
                x = int(reply.strip())
            except ValueError:
                x = 0
            if not 0 < x < MODULUS:
                print("\nInput out of range ... try again")
                x = 0
        self._seeds[self._stream] = x

    def get_seed(self) -> int:
        """Return the seed of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index % 256`` current, planting seeds if none were."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)

    def self_test(self) -> bool:
        """Check the generator against its published reference values."""
        self.select_stream(0)
        self.put_seed(1)
        for _ in range(10000):
            self.random()
        ok = self.get_seed() == CHECK
        self.select_stream(1)
        self.plant_seeds(1)
        return ok and self.get_seed() == A256