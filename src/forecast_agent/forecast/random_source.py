"""Random source used for forecast generation."""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Minimal random interface; ``random.Random`` satisfies it."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        ...


def create_random_source(seed: int | None = None) -> RandomSource:
    """Create the default random source.

    Args:
        seed: Optional seed for reproducible output

    Returns:
        A ``random.Random`` instance
    """
    return random.Random(seed)
