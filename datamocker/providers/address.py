"""Template-driven postal addresses per country."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from datamocker.errors import InvalidArgumentError
from datamocker.providers.base import MockProvider
from datamocker.random_source import RandomSource
from datamocker.tables.addresses import (
    COUNTRY_PROFILES,
    DIGIT,
    LETTER,
    PLACEHOLDER_PATTERN,
    STREET_NAMES,
    CountryProfile,
)
from datamocker.tables.words import ALPHABET_UPPER, DIGITS

MAX_STREET_NUMBER = 999
MAX_APARTMENT_NUMBER = 99


def _literal_pattern(text: str) -> str:
    # spaces in the template tolerate any amount of whitespace
    return r"\s*".join(re.escape(part) for part in text.split(" "))


def _alternation(options: tuple[str, ...]) -> str:
    return "(?:" + "|".join(re.escape(option) for option in options) + ")"


def _postal_pattern(template: str) -> str:
    parts = []
    for char in template:
        if char == DIGIT:
            parts.append(r"\d")
        elif char == LETTER:
            parts.append("[A-Z]")
        elif char == " ":
            parts.append(r"\s*")
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def get_profile(country: str) -> CountryProfile:
    """Look up a country profile by case-insensitive ISO code.

    Raises:
        InvalidArgumentError: If the country code is not supported.
    """
    profile = COUNTRY_PROFILES.get((country or "").strip().upper())
    if profile is None:
        raise InvalidArgumentError(
            f"Unsupported country code: {country}. "
            f"Supported: {', '.join(sorted(COUNTRY_PROFILES))}",
            country=country,
        )
    return profile


@lru_cache(maxsize=None)
def _validator(code: str) -> re.Pattern[str]:
    profile = COUNTRY_PROFILES[code]
    fields = {
        "street_number": r"\d+",
        "street_name": r"\w+",
        "street_type": _alternation(profile.street_types),
        "city": _alternation(profile.cities),
        "state": _alternation(profile.states),
        "postal_code": _postal_pattern(profile.postal_template),
    }
    parts = []
    position = 0
    for match in PLACEHOLDER_PATTERN.finditer(profile.template):
        parts.append(_literal_pattern(profile.template[position : match.start()]))
        parts.append(fields[match.group(1)])
        position = match.end()
    parts.append(_literal_pattern(profile.template[position:]))
    return re.compile("".join(parts))


class AddressProvider(MockProvider):
    """Addresses rendered from per-country templates.

    Example:
        >>> provider.full_address("UK")
        '45 High Street, London, 12AB 3CD'
    """

    key = "address"

    def __init__(
        self,
        generator: Any,
        rng: RandomSource | None = None,
        default_country: str = "US",
    ) -> None:
        super().__init__(generator, rng)
        self.default_country = get_profile(default_country).code

    def full_address(self, country: str | None = None) -> str:
        """Render a complete address for ``country``.

        Raises:
            InvalidArgumentError: If the country code is not supported.
        """
        profile = self._profile(country)
        values = {
            "street_number": str(self.rng.between(1, MAX_STREET_NUMBER)),
            "street_name": self.pick(STREET_NAMES),
            "street_type": self.pick(profile.street_types),
            "city": self.pick(profile.cities),
            "state": self.pick(profile.states),
            "postal_code": self._render_postal_code(profile.postal_template),
        }
        return PLACEHOLDER_PATTERN.sub(lambda m: values[m.group(1)], profile.template)

    def street_address(self, country: str | None = None) -> str:
        profile = self._profile(country)
        return (
            f"{self.rng.between(1, MAX_STREET_NUMBER)} "
            f"{self.pick(STREET_NAMES)} {self.pick(profile.street_types)}"
        )

    def city(self, country: str | None = None) -> str:
        return self.pick(self._profile(country).cities)

    def state(self, country: str | None = None) -> str:
        return self.pick(self._profile(country).states)

    def postal_code(self, country: str | None = None) -> str:
        return self._render_postal_code(self._profile(country).postal_template)

    def with_apartment(self, country: str | None = None) -> str:
        """Full address with an "Apt N[letter]" token before the first comma.

        The token is appended when the address has no comma.
        """
        address = self.full_address(country)
        apartment = f"Apt {self.rng.between(1, MAX_APARTMENT_NUMBER)}"
        if self.rng.next_bool():
            apartment += self.random_uppercase_letter()

        comma = address.find(",")
        if comma == -1:
            return f"{address} {apartment}"
        return f"{address[:comma]} {apartment}{address[comma:]}"

    def random_country_address(self) -> str:
        return self.full_address(self.pick(self.supported_countries()))

    def is_valid_address(self, address: str, country: str | None = None) -> bool:
        """Best-effort structural check of ``address`` against the country's template."""
        if not address:
            return False
        return _validator(self._profile(country).code).fullmatch(address.strip()) is not None

    def supported_countries(self) -> list[str]:
        return sorted(COUNTRY_PROFILES)

    def _render_postal_code(self, template: str) -> str:
        out = []
        for char in template:
            if char == DIGIT:
                out.append(self.rng.choice(DIGITS))
            elif char == LETTER:
                out.append(self.rng.choice(ALPHABET_UPPER))
            else:
                out.append(char)
        return "".join(out)

    def _profile(self, country: str | None) -> CountryProfile:
        return get_profile(country or self.default_country)
