"""Range-constrained numeric generation."""

from __future__ import annotations

import math

from datamocker.errors import InvalidArgumentError, InvalidRangeError
from datamocker.providers.base import MockProvider

MAX_PRECISION = 10


def is_prime(n: int) -> bool:
    """Trial division up to the square root of ``n``."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


def _check_range(min_value: int | float, max_value: int | float) -> None:
    if min_value > max_value:
        raise InvalidRangeError(
            f"Max must be greater than or equal to min (min={min_value}, max={max_value})",
            min=min_value,
            max=max_value,
        )


class NumberProvider(MockProvider):
    """Integers, parity/divisor/prime constrained integers, decimals and booleans.

    Constrained draws use a reduced space: both bounds are moved inward to
    the nearest qualifying value and a uniform index is drawn into the
    qualifying values, so every qualifying value is equally likely.
    """

    key = "number"

    def integer(self, min_value: int, max_value: int) -> int:
        """Uniform integer in ``[min_value, max_value]``."""
        _check_range(min_value, max_value)
        return self.rng.between(min_value, max_value)

    def even(self, min_value: int, max_value: int) -> int:
        return self._stepped(min_value, max_value, step=2, residue=0, what="even number")

    def odd(self, min_value: int, max_value: int) -> int:
        return self._stepped(min_value, max_value, step=2, residue=1, what="odd number")

    def divisible_by(self, min_value: int, max_value: int, divisor: int) -> int:
        """Uniform multiple of ``divisor`` in ``[min_value, max_value]``."""
        if divisor <= 0:
            raise InvalidRangeError("Divisor must be positive", divisor=divisor)
        return self._stepped(
            min_value, max_value, step=divisor, residue=0, what=f"multiple of {divisor}"
        )

    def prime(self, min_value: int, max_value: int) -> int:
        """Uniform prime in ``[min_value, max_value]``.

        Enumerates the range, so cost grows with ``(max - min) * sqrt(max)``.
        """
        _check_range(min_value, max_value)
        primes = [n for n in range(max(min_value, 2), max_value + 1) if is_prime(n)]
        if not primes:
            raise InvalidRangeError(
                f"No prime number in range [{min_value}, {max_value}]",
                min=min_value,
                max=max_value,
            )
        return primes[self.rng.next_int(len(primes))]

    def decimal(
        self,
        min_value: float,
        max_value: float,
        precision: int | None = None,
    ) -> float:
        """Uniform float in ``[min_value, max_value]``.

        Args:
            min_value: Lower bound.
            max_value: Upper bound.
            precision: Optional number of decimal places (0-10).

        Raises:
            InvalidRangeError: If a bound is not finite or min > max.
            InvalidArgumentError: If precision is outside [0, 10].
        """
        if not (math.isfinite(min_value) and math.isfinite(max_value)):
            raise InvalidRangeError(
                "Bounds must be finite numbers", min=min_value, max=max_value
            )
        _check_range(min_value, max_value)
        if precision is not None and not 0 <= precision <= MAX_PRECISION:
            raise InvalidArgumentError(
                f"Precision must be between 0 and {MAX_PRECISION}", precision=precision
            )

        value = min_value + (max_value - min_value) * self.rng.next_double()
        if precision is not None:
            value = round(value, precision)
        # rounding can step just past a bound
        return min(max(value, min_value), max_value)

    def percentage(self, precision: int = 2) -> float:
        return self.decimal(0.0, 100.0, precision)

    def boolean(self, true_probability: float = 0.5) -> bool:
        """Bernoulli draw that is True with ``true_probability``."""
        if not 0.0 <= true_probability <= 1.0:
            raise InvalidArgumentError(
                "Probability must be between 0 and 1", true_probability=true_probability
            )
        return self.rng.next_double() < true_probability

    def is_prime(self, value: int) -> bool:
        return is_prime(value)

    def _stepped(
        self,
        min_value: int,
        max_value: int,
        step: int,
        residue: int,
        what: str,
    ) -> int:
        _check_range(min_value, max_value)
        low = min_value + (residue - min_value) % step
        high = max_value - (max_value - residue) % step
        if low > high:
            raise InvalidRangeError(
                f"No {what} in range [{min_value}, {max_value}]",
                min=min_value,
                max=max_value,
            )
        count = (high - low) // step + 1
        return low + step * self.rng.next_int(count)
