"""Static lookup tables, built once at import and never mutated."""

from datamocker.tables.addresses import COUNTRY_PROFILES, STREET_NAMES, CountryProfile
from datamocker.tables.companies import (
    CONTINENT_COMPANIES,
    CORPORATE_SUFFIXES,
    COUNTRY_COMPANIES,
    GENERIC_TERMS,
    INDUSTRY_PREFIXES,
)
from datamocker.tables.names import MIDDLE_NAMES, REGION_NAMES, RegionNames
from datamocker.tables.phones import PHONE_PROFILES, PhoneCountryProfile

__all__ = [
    "CONTINENT_COMPANIES",
    "CORPORATE_SUFFIXES",
    "COUNTRY_COMPANIES",
    "COUNTRY_PROFILES",
    "CountryProfile",
    "GENERIC_TERMS",
    "INDUSTRY_PREFIXES",
    "MIDDLE_NAMES",
    "PHONE_PROFILES",
    "PhoneCountryProfile",
    "REGION_NAMES",
    "RegionNames",
    "STREET_NAMES",
]
