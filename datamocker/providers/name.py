"""Culture-aware personal name composition."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from datamocker.errors import InvalidArgumentError
from datamocker.providers.base import MockProvider
from datamocker.random_source import RandomSource
from datamocker.tables.names import MIDDLE_NAMES, REGION_NAMES, RegionNames
from datamocker.types import Gender, NameFormat, Region, parse_enum


class NameProvider(MockProvider):
    """Names composed from per-region first/last/title tables.

    A name is built from a first name (region and gender), a last name
    (region) and, depending on the format, a middle name from the shared
    cross-region pool or a title from the region's table.

    Example:
        >>> provider.name(Region.NIGERIAN, Gender.MALE, NameFormat.TITLE_FIRST_LAST)
        'Chief Emeka Okafor'
    """

    key = "name"

    def __init__(
        self,
        generator: Any,
        rng: RandomSource | None = None,
        default_region: Region | str = Region.WESTERN,
        default_gender: Gender | str = Gender.UNSPECIFIED,
        default_name_format: NameFormat | str = NameFormat.FIRST_LAST,
    ) -> None:
        super().__init__(generator, rng)
        self.default_region = parse_enum(Region, default_region, "region")
        self.default_gender = parse_enum(Gender, default_gender, "gender")
        self.default_name_format = parse_enum(NameFormat, default_name_format, "name format")

    def name(
        self,
        region: Region | str | None = None,
        gender: Gender | str | None = None,
        name_format: NameFormat | str | None = None,
    ) -> str:
        """Compose a name for ``region`` in ``name_format``.

        Omitted arguments fall back to the provider defaults.

        Raises:
            InvalidArgumentError: If a tag is not recognised.
        """
        tables = self._tables(region)
        gender = self._gender(gender)
        name_format = parse_enum(
            NameFormat,
            name_format if name_format is not None else self.default_name_format,
            "name format",
        )

        first = self._first_name(tables, gender)
        last = self.pick(tables.last)

        if name_format is NameFormat.FIRST_LAST:
            return f"{first} {last}"
        if name_format is NameFormat.LAST_FIRST:
            return f"{last}, {first}"
        if name_format is NameFormat.FIRST_MIDDLE_LAST:
            return f"{first} {self.middle_name()} {last}"
        return f"{self.pick(tables.titles)} {first} {last}"

    def full_name(self) -> str:
        """Name in the default region, gender and format."""
        return self.name()

    def nigerian(self) -> str:
        return self.name(Region.NIGERIAN)

    def arabic(self) -> str:
        return self.name(Region.ARABIC)

    def western(self) -> str:
        return self.name(Region.WESTERN)

    def asian(self) -> str:
        return self.name(Region.ASIAN)

    def european(self) -> str:
        return self.name(Region.EUROPEAN)

    def first_name(
        self,
        region: Region | str | None = None,
        gender: Gender | str | None = None,
    ) -> str:
        return self._first_name(self._tables(region), self._gender(gender))

    def last_name(self, region: Region | str | None = None) -> str:
        return self.pick(self._tables(region).last)

    def middle_name(self) -> str:
        return self.pick(MIDDLE_NAMES)

    def title(self, region: Region | str | None = None) -> str:
        return self.pick(self._tables(region).titles)

    def from_lists(self, first_names: Sequence[str], last_names: Sequence[str]) -> str:
        """Compose "First Last" from caller-supplied lists."""
        if not first_names:
            raise InvalidArgumentError("First name list must not be null or empty")
        if not last_names:
            raise InvalidArgumentError("Last name list must not be null or empty")
        return f"{self.pick(first_names)} {self.pick(last_names)}"

    def is_valid_name(self, name: str, region: Region | str | None = None) -> bool:
        """Check that ``name`` is "First Last" drawn from the region's tables."""
        if not name:
            return False
        tables = self._tables(region)
        parts = name.split(" ")
        if len(parts) != 2:
            return False
        first, last = parts
        return (first in tables.male_first or first in tables.female_first) and last in tables.last

    def _tables(self, region: Region | str | None) -> RegionNames:
        if region is None:
            region = self.default_region
        return REGION_NAMES[parse_enum(Region, region, "region")]

    def _gender(self, gender: Gender | str | None) -> Gender:
        return parse_enum(Gender, gender if gender is not None else self.default_gender, "gender")

    def _first_name(self, tables: RegionNames, gender: Gender) -> str:
        if gender is Gender.MALE:
            return self.pick(tables.male_first)
        return self.pick(tables.female_first)
