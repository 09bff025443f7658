"""Username strategies: word combos, name-based and fully custom."""

from __future__ import annotations

import unicodedata
from typing import Any

from datamocker.errors import InvalidArgumentError
from datamocker.providers.base import MockProvider
from datamocker.providers.name import NameProvider
from datamocker.random_source import RandomSource
from datamocker.tables.words import (
    ADJECTIVES,
    ALPHABET_LOWER,
    ALPHABET_UPPER,
    ALPHANUMERIC,
    NOUNS,
    USERNAME_SPECIAL_CHARS,
)
from datamocker.types import Region

MIN_LENGTH = 6
MAX_LENGTH = 32


def ascii_fold(text: str) -> str:
    """Drop accents and any character outside ASCII."""
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


class UsernameProvider(MockProvider):
    key = "username"

    def __init__(
        self,
        generator: Any,
        rng: RandomSource | None = None,
        names: NameProvider | None = None,
    ) -> None:
        super().__init__(generator, rng)
        self.names = names if names is not None else NameProvider(generator, self.rng)

    def random(self) -> str:
        """Adjective + noun + number, e.g. ``'BraveFalcon4821'``."""
        return f"{self.pick(ADJECTIVES)}{self.pick(NOUNS)}{self.rng.between(100, 9999)}"

    def name_based(self, with_separator: bool = True, region: Region | str = Region.WESTERN) -> str:
        """``first.last`` or ``firstlast`` from a regional name, lowercased."""
        first = self._handle_part(self.names.first_name(region))
        last = self._handle_part(self.names.last_name(region))
        separator = "." if with_separator else ""
        return f"{first}{separator}{last}"

    def custom(
        self,
        length: int = 12,
        special_chars: bool = False,
        start_with_letter: bool = True,
    ) -> str:
        """Username of exactly ``length`` characters.

        Args:
            length: Between 6 and 32.
            special_chars: Also draw from ``._-``.
            start_with_letter: Force the first character to be a letter.

        Raises:
            InvalidArgumentError: If ``length`` is outside [6, 32].
        """
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise InvalidArgumentError(
                f"Username length must be between {MIN_LENGTH} and {MAX_LENGTH}",
                length=length,
            )
        alphabet = ALPHANUMERIC + USERNAME_SPECIAL_CHARS if special_chars else ALPHANUMERIC
        if start_with_letter:
            return self.rng.choice(ALPHABET_UPPER + ALPHABET_LOWER) + self.rng.chars(
                alphabet, length - 1
            )
        return self.rng.chars(alphabet, length)

    @staticmethod
    def _handle_part(part: str) -> str:
        return "".join(ch for ch in ascii_fold(part).lower() if ch.isalnum())
