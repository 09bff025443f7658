"""Phone numbers driven by per-country numbering profiles."""

from __future__ import annotations

import re
from typing import Any

from datamocker.errors import InvalidArgumentError
from datamocker.providers.base import MockProvider
from datamocker.random_source import RandomSource
from datamocker.tables.phones import (
    DIGIT_SLOT,
    NORTH_AMERICA,
    PHONE_PROFILES,
    PREMIUM_RATE_PREFIX,
    TOLL_FREE_PREFIX,
    PhoneCountryProfile,
)
from datamocker.tables.words import DIGITS
from datamocker.types import PhoneKind, parse_enum

PHONE_NUMBER_PATTERN = re.compile(r"^(\+\d{1,4}[\s-]?)?(\(?\d\)?[\s.-]?){7,15}(x\d+)?$")
NON_DIGITS = re.compile(r"\D")

# leading digits compared against the prefix tables
PREFIX_WINDOW = 2


def render(digits: str, template: str) -> str:
    """Lay ``digits`` into the ``X`` slots of ``template``.

    Literal characters are copied, digits left over once the slots run out
    are appended, and slots left over once the digits run out are dropped
    along with any trailing separators.
    """
    out = []
    remaining = iter(digits)
    consumed = 0
    exhausted = False
    for char in template:
        if char != DIGIT_SLOT:
            out.append(char)
            continue
        digit = next(remaining, None)
        if digit is None:
            exhausted = True
            break
        out.append(digit)
        consumed += 1
    rendered = "".join(out)
    if consumed < len(digits):
        return rendered + digits[consumed:]
    return rendered.rstrip(" -.(") if exhausted else rendered


def get_phone_profile(country: str) -> PhoneCountryProfile:
    """Look up a numbering profile by case-insensitive country code.

    Raises:
        InvalidArgumentError: If the country code is not supported.
    """
    profile = PHONE_PROFILES.get((country or "").strip().upper())
    if profile is None:
        raise InvalidArgumentError(
            f"Unsupported country code: {country}. "
            f"Supported: {', '.join(sorted(PHONE_PROFILES))}",
            country=country,
        )
    return profile


class PhoneNumberProvider(MockProvider):
    """Local, international and display-formatted phone numbers.

    Every number is a prefix from the country's mobile or landline table
    followed by random digits up to the profile's local number length.

    Example:
        >>> provider.formatted("US")
        '(415) 555-0132'
        >>> provider.international("NG")
        '+2348031234567'
    """

    key = "phone_number"

    def __init__(
        self,
        generator: Any,
        rng: RandomSource | None = None,
        default_country: str = "NG",
    ) -> None:
        super().__init__(generator, rng)
        self.default_country = get_phone_profile(default_country).code

    def generate(
        self,
        country: str | None = None,
        kind: PhoneKind | str = PhoneKind.MOBILE,
        international: bool = False,
        formatted: bool = False,
    ) -> str:
        """Draw one number.

        Args:
            country: ISO-like country code, defaults to the provider's country.
            kind: Mobile or landline prefix table.
            international: Prepend the international dialing prefix.
            formatted: Render the local part through the display template.

        Raises:
            InvalidArgumentError: If the country or kind is not supported.
        """
        profile = self._profile(country)
        kind = parse_enum(PhoneKind, kind, "phone kind")
        prefixes = profile.mobile_prefixes if kind is PhoneKind.MOBILE else profile.landline_prefixes
        local = self._local_number(profile, self.pick(prefixes))
        if formatted:
            local = render(local, profile.display_template)
        if international:
            separator = " " if formatted else ""
            return f"{profile.international_prefix}{separator}{local}"
        return local

    def phone_number(self, country: str | None = None) -> str:
        """Unformatted local mobile number."""
        return self.generate(country)

    def international(self, country: str | None = None) -> str:
        return self.generate(country, international=True)

    def formatted(self, country: str | None = None) -> str:
        return self.generate(country, formatted=True)

    def custom_formatted(self, country: str | None, pattern: str) -> str:
        """Local mobile number rendered through a caller ``pattern``.

        Raises:
            InvalidArgumentError: If ``pattern`` has no ``X`` slot.
        """
        if not pattern or DIGIT_SLOT not in pattern:
            raise InvalidArgumentError(
                "Pattern must contain 'X' placeholders for digits", pattern=pattern
            )
        return render(self.phone_number(country), pattern)

    def mobile(self, country: str | None = None) -> str:
        return self.generate(country, PhoneKind.MOBILE, international=True)

    def landline(self, country: str | None = None) -> str:
        return self.generate(country, PhoneKind.LANDLINE, international=True)

    def toll_free(self, country: str | None = None) -> str:
        return self._special(country, TOLL_FREE_PREFIX)

    def premium_rate(self, country: str | None = None) -> str:
        return self._special(country, PREMIUM_RATE_PREFIX)

    def with_extension(self, country: str | None = None, extension_length: int = 4) -> str:
        """International number followed by ``x`` and an extension."""
        self.require_positive(extension_length, "Extension length")
        return f"{self.international(country)}x{self.rng.chars(DIGITS, extension_length)}"

    def random_country(self) -> str:
        """International number for a randomly chosen country."""
        return self.international(self.pick(self.supported_countries()))

    def supported_countries(self) -> list[str]:
        return sorted(PHONE_PROFILES)

    def is_valid_phone_number(self, value: str) -> bool:
        """Generic structural check, country agnostic."""
        if not value:
            return False
        return PHONE_NUMBER_PATTERN.match(value) is not None

    def is_valid_for_country(self, value: str, country: str) -> bool:
        """Check length and leading digits of ``value`` against a country profile.

        Unknown countries are reported as invalid rather than raised.
        """
        profile = PHONE_PROFILES.get((country or "").strip().upper())
        if profile is None or not value:
            return False

        number = value.strip().split("x", 1)[0]
        digits = NON_DIGITS.sub("", number)
        if number.startswith(profile.international_prefix):
            digits = digits[len(profile.dialing_digits) :]
        if len(digits) != profile.number_length:
            return False

        leading = digits[:PREFIX_WINDOW]
        return any(
            leading.startswith(prefix)
            for prefix in profile.mobile_prefixes + profile.landline_prefixes
        )

    def _special(self, country: str | None, prefixes: dict[str, str]) -> str:
        profile = self._profile(country)
        region = "north_america" if profile.code in NORTH_AMERICA else "other"
        local = self._local_number(profile, prefixes[region])
        return f"{profile.international_prefix}{local}"

    def _local_number(self, profile: PhoneCountryProfile, prefix: str) -> str:
        return prefix + self.rng.chars(DIGITS, profile.number_length - len(prefix))

    def _profile(self, country: str | None) -> PhoneCountryProfile:
        return get_phone_profile(country or self.default_country)
