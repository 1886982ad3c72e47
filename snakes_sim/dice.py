"""Die sources — anything that can produce the next face value."""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable

DIE_SIZE = 6  # must be >= 1


class DieExhaustedError(RuntimeError):
    """A die was rolled when it had nothing left to give.

    Signals a broken test or integration, never a game condition.
    """


@runtime_checkable
class Die(Protocol):
    """Structural interface — any object with ``size`` and ``roll()`` works."""

    size: int

    def roll(self) -> int: ...


def _check_size(size: int) -> int:
    if size < 1:
        raise ValueError(f"Die size must be at least 1, got {size}")
    return size


class RandomDie:
    """Fair die backed by a :class:`random.Random`."""

    def __init__(
        self,
        size: int = DIE_SIZE,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self.size = _check_size(size)
        self._rng = rng if rng is not None else random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, self.size)


class MockDie:
    """Scripted die for tests.

    Values are popped from the END of *queued_results*, so
    ``MockDie([3, 6])`` rolls 6 and then 3. Raises once empty.
    """

    def __init__(self, queued_results: list[int], size: int = DIE_SIZE):
        self.size = _check_size(size)
        self.queued_results = list(queued_results)

    def roll(self) -> int:
        if not self.queued_results:
            raise DieExhaustedError("Mock die has no queued results left")
        return self.queued_results.pop()


class Unrollable:
    """A die that must never be rolled (tests only)."""

    def __init__(self, size: int = DIE_SIZE):
        self.size = _check_size(size)

    def roll(self) -> int:
        raise DieExhaustedError("Can't roll this!")
