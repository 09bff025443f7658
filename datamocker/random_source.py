"""Shared pseudo-random source handed to every provider.

A single RandomSource wraps one ``random.Random``. Each draw is one call
into the wrapped generator, whose primitive methods run atomically under the
GIL, so the source can be shared by concurrent callers without locking.

Example:
    >>> rng = RandomSource(random.Random(42))
    >>> rng.between(1, 6)
    >>> rng.next_double()
"""

from __future__ import annotations

import random
import threading
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from datamocker.errors import InvalidArgumentError, InvalidRangeError

T = TypeVar("T")


class RandomSource:
    """Bounded integer, long and double draws over one ``random.Random``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._random = rng if rng is not None else random.Random()

    @property
    def random(self) -> random.Random:
        """The wrapped generator."""
        return self._random

    def next_int(self, bound: int) -> int:
        """Draw an integer in ``[0, bound)``."""
        if bound <= 0:
            raise InvalidRangeError("Bound must be positive", bound=bound)
        return self._random.randrange(bound)

    def between(self, low: int, high: int) -> int:
        """Draw an integer in ``[low, high]``."""
        if low > high:
            raise InvalidRangeError(
                f"Max must be greater than or equal to min (min={low}, max={high})",
                min=low,
                max=high,
            )
        return self._random.randint(low, high)

    def next_long(self, bound: int) -> int:
        """Draw an integer in ``[0, bound)`` for bounds beyond 64 bits."""
        if bound <= 0:
            raise InvalidRangeError("Bound must be positive", bound=bound)
        # randrange falls back to getrandbits for big ints, so no precision loss
        return self._random.randrange(bound)

    def next_double(self) -> float:
        """Draw a float in ``[0, 1)``."""
        return self._random.random()

    def next_bool(self) -> bool:
        return self._random.random() < 0.5

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element uniformly."""
        if not seq:
            raise InvalidArgumentError("Sequence must not be empty")
        return seq[self._random.randrange(len(seq))]

    def chars(self, alphabet: str, k: int) -> str:
        """Draw ``k`` characters uniformly from ``alphabet``."""
        if not alphabet:
            raise InvalidArgumentError("Character set must not be empty")
        return "".join(self._random.choices(alphabet, k=k))

    def shuffle(self, items: MutableSequence[T]) -> None:
        self._random.shuffle(items)

    def seed(self, seed: int | None) -> None:
        self._random.seed(seed)


_default_source: RandomSource | None = None
_default_lock = threading.Lock()


def default_random_source() -> RandomSource:
    """Return the process-wide source, creating it on first use."""
    global _default_source
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                _default_source = RandomSource()
    return _default_source
