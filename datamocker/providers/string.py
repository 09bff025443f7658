"""Alphabet-constrained strings, patterns, lorem text, identifiers and passwords."""

from __future__ import annotations

import re
import uuid as uuid_lib

from datamocker.errors import InvalidArgumentError
from datamocker.providers.base import MockProvider
from datamocker.tables.words import (
    ALL_CHARS,
    ALPHABET_LOWER,
    ALPHABET_UPPER,
    ALPHANUMERIC,
    DIGITS,
    FILE_EXTENSIONS,
    FOLDERS,
    HEX_CHARS,
    LOREM_WORDS,
    SPECIAL_CHARS,
    TOP_LEVEL_DOMAINS,
)

EMAIL_SHAPE = re.compile(r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$")

PATTERN_DIGIT = "#"
PATTERN_LETTER = "@"

MIN_STRONG_PASSWORD_LENGTH = 8
# characters guaranteed from each class in a strong password
CLASS_BLOCK = 2


class StringProvider(MockProvider):
    """General-purpose string builders.

    Example:
        >>> provider.from_pattern("###-@@@")
        '042-QXM'
    """

    key = "string"

    def alphabetic(self, length: int) -> str:
        return self._build(length, ALPHABET_UPPER + ALPHABET_LOWER)

    def numeric(self, length: int) -> str:
        return self._build(length, DIGITS)

    def alphanumeric(self, length: int) -> str:
        return self._build(length, ALPHANUMERIC)

    def hex(self, length: int) -> str:
        return self._build(length, HEX_CHARS)

    def with_special_chars(self, length: int) -> str:
        return self._build(length, ALL_CHARS)

    def custom(self, length: int, charset: str) -> str:
        """String of ``length`` characters drawn uniformly from ``charset``."""
        if not charset:
            raise InvalidArgumentError("Character set must not be null or empty")
        return self._build(length, charset)

    def from_pattern(self, pattern: str) -> str:
        """Fill ``#`` with a digit and ``@`` with an uppercase letter.

        Every other character is copied as is.
        """
        if not pattern:
            raise InvalidArgumentError("Pattern must not be null or empty")
        out = []
        for char in pattern:
            if char == PATTERN_DIGIT:
                out.append(self.rng.choice(DIGITS))
            elif char == PATTERN_LETTER:
                out.append(self.rng.choice(ALPHABET_UPPER))
            else:
                out.append(char)
        return "".join(out)

    def lorem(self, words: int) -> str:
        self.require_positive(words, "Word count")
        return " ".join(self.pick(LOREM_WORDS) for _ in range(words))

    def sentence(self, words: int) -> str:
        return self.lorem(words).capitalize() + "."

    def paragraph(self, sentences: int) -> str:
        """``sentences`` sentences of 5 to 10 words each."""
        self.require_positive(sentences, "Sentence count")
        return " ".join(self.sentence(self.rng.between(5, 10)) for _ in range(sentences))

    def uuid(self) -> str:
        return str(uuid_lib.uuid4())

    def guid(self) -> str:
        return self.uuid()

    def uuid_like(self) -> str:
        """UUID-shaped hex string drawn from the random source."""
        return "-".join(self.hex(size) for size in (8, 4, 4, 4, 12))

    def password(self, length: int) -> str:
        return self.with_special_chars(length)

    def strong_password(self, length: int = 12) -> str:
        """Password with at least two characters of each class.

        Raises:
            InvalidArgumentError: If ``length`` is below 8.
        """
        if length < MIN_STRONG_PASSWORD_LENGTH:
            raise InvalidArgumentError(
                f"Strong password length must be at least {MIN_STRONG_PASSWORD_LENGTH}",
                length=length,
            )
        blocks = [
            self.rng.chars(ALPHABET_UPPER, CLASS_BLOCK),
            self.rng.chars(ALPHABET_LOWER, CLASS_BLOCK),
            self.rng.chars(DIGITS, CLASS_BLOCK),
            self.rng.chars(SPECIAL_CHARS, CLASS_BLOCK),
        ]
        remainder = length - CLASS_BLOCK * len(blocks)
        if remainder:
            blocks.append(self.rng.chars(ALL_CHARS, remainder))
        chars = list("".join(blocks))
        self.rng.shuffle(chars)
        return "".join(chars)

    def file_path(self) -> str:
        return f"/{self.pick(FOLDERS)}/{self.alphanumeric(10)}.{self.pick(FILE_EXTENSIONS)}"

    def url(self) -> str:
        domain = self.alphanumeric(self.rng.between(5, 10)).lower()
        path = self.alphanumeric(self.rng.between(5, 10))
        return f"https://{domain}.{self.pick(TOP_LEVEL_DOMAINS)}/{path}"

    def is_email(self, value: str) -> bool:
        """Best-effort email shape check."""
        if not value:
            return False
        return EMAIL_SHAPE.match(value) is not None

    def _build(self, length: int, alphabet: str) -> str:
        self.require_positive(length)
        return self.rng.chars(alphabet, length)
