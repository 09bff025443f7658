"""Base class for datamocker providers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, TypeVar

from faker.providers import BaseProvider

from datamocker.errors import InvalidArgumentError
from datamocker.random_source import RandomSource

T = TypeVar("T")


class MockProvider(BaseProvider):
    """Faker provider that draws from an injected RandomSource.

    Subclasses set ``key``, the registry identifier they are installed under.
    The random source defaults to one wrapping the generator's own
    ``random.Random`` so Faker helpers (``bothify``, ``random_element``) and
    our draws share a single stream.
    """

    key: ClassVar[str] = ""

    def __init__(self, generator: Any, rng: RandomSource | None = None) -> None:
        super().__init__(generator)
        self.rng = rng if rng is not None else RandomSource(generator.random)

    def pick(self, items: Sequence[T]) -> T:
        """Pick one element uniformly from a non-empty sequence."""
        if items is None or len(items) == 0:
            raise InvalidArgumentError("Array must not be null or empty")
        return self.rng.choice(items)

    @staticmethod
    def require_positive(value: int, name: str = "Length") -> None:
        if value <= 0:
            raise InvalidArgumentError(f"{name} must be positive", value=value)

    @classmethod
    def operations(cls) -> list[str]:
        """Public generation/validation methods defined by this provider."""
        names = set()
        for klass in cls.__mro__:
            if klass is MockProvider:
                break
            names.update(
                name
                for name, value in vars(klass).items()
                if not name.startswith("_") and callable(value) and name != "operations"
            )
        return sorted(names)
