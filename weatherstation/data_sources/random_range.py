"""Synthetic sensor data source"""
import random
import logging
from typing import Generator, Iterator, Optional

from weatherstation.exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)


class RandomRangeGenerator:
    """Infinite stream of integers drawn uniformly from [base, base + delta)"""

    def __init__(self, base: int, delta: int, rng: Optional[random.Random] = None):
        """
        Initialize a random range generator

        Args:
            base: Lowest value the generator can produce
            delta: Width of the half-open range, must be at least 1
            rng: Random source private to this generator, a fresh one is created if omitted
        """
        if isinstance(base, bool) or not isinstance(base, int):
            raise InvalidConfiguration(f"base must be an integer, got {base!r}")
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InvalidConfiguration(f"delta must be an integer, got {delta!r}")
        if delta < 1:
            raise InvalidConfiguration(f"delta must be at least 1, got {delta}")

        self.base = base
        self.delta = delta
        self._rng = rng or random.Random()
        logger.debug(f"Random range generator initialized: [{self.low}, {self.high})")

    @property
    def low(self) -> int:
        return self.base

    @property
    def high(self) -> int:
        """Exclusive upper bound"""
        return self.base + self.delta

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.base + self._rng.randrange(self.delta)

    def stream(self, count: Optional[int] = None) -> Generator[int, None, None]:
        """
        Yield draws from the generator

        Args:
            count: Number of values to yield, unbounded when None

        Yields:
            One integer per draw
        """
        produced = 0
        while count is None or produced < count:
            yield next(self)
            produced += 1

    def __repr__(self) -> str:
        return f"RandomRangeGenerator(base={self.base}, delta={self.delta})"
