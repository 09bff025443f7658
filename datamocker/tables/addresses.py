"""Per-country address profiles."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from datamocker.errors import DataTableError

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")

ADDRESS_FIELDS = frozenset(
    {"street_number", "street_name", "street_type", "city", "state", "postal_code"}
)

# Postal template characters
DIGIT = "#"
LETTER = "@"


@dataclass(frozen=True)
class CountryProfile:
    """Street, city and postal data plus the output template for one country.

    ``postal_template`` uses ``#`` for a digit and ``@`` for an uppercase
    letter; every other character is copied verbatim.
    """

    code: str
    street_types: tuple[str, ...]
    cities: tuple[str, ...]
    states: tuple[str, ...]
    postal_template: str
    template: str

    def __post_init__(self) -> None:
        for attr in ("street_types", "cities", "states"):
            if not getattr(self, attr):
                raise DataTableError(f"{self.code}: '{attr}' must not be empty")
        unknown = set(PLACEHOLDER_PATTERN.findall(self.template)) - ADDRESS_FIELDS
        if unknown:
            raise DataTableError(
                f"{self.code}: template references unknown placeholders {sorted(unknown)}"
            )


STREET_NAMES: tuple[str, ...] = (
    "Main", "Broadway", "Market", "Park", "High", "Church", "Elm", "Oak", "Cedar", "Pine",
)

COUNTRY_PROFILES: MappingProxyType[str, CountryProfile] = MappingProxyType(
    {
        "US": CountryProfile(
            code="US",
            street_types=("St", "Ave", "Rd", "Blvd", "Ln"),
            cities=("New York", "Los Angeles", "Chicago", "Houston", "Phoenix"),
            states=("NY", "CA", "IL", "TX", "AZ"),
            postal_template="#####",
            template="{street_number} {street_name} {street_type}, {city}, {state} {postal_code}",
        ),
        "UK": CountryProfile(
            code="UK",
            street_types=("Street", "Road", "Lane", "Avenue", "Close"),
            cities=("London", "Manchester", "Birmingham", "Glasgow", "Edinburgh"),
            states=("England", "Scotland", "Wales", "Northern Ireland"),
            postal_template="##@@ #@@",
            template="{street_number} {street_name} {street_type}, {city}, {postal_code}",
        ),
        "NG": CountryProfile(
            code="NG",
            street_types=("Street", "Road", "Avenue", "Close", "Lane"),
            cities=("Lagos", "Abuja", "Kano", "Ibadan", "Port Harcourt"),
            states=("Lagos", "FCT", "Kano", "Oyo", "Rivers"),
            postal_template="####",
            template="{street_number} {street_name} {street_type}, {city}, {state}",
        ),
        "CA": CountryProfile(
            code="CA",
            street_types=("St", "Ave", "Rd", "Blvd", "Dr"),
            cities=("Toronto", "Vancouver", "Montreal", "Calgary", "Ottawa"),
            states=("ON", "BC", "QC", "AB"),
            postal_template="@#@ #@#",
            template="{street_number} {street_name} {street_type}, {city}, {state} {postal_code}",
        ),
    }
)
