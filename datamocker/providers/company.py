"""Company names from curated tables or synthesized from name parts."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from datamocker.errors import InvalidArgumentError
from datamocker.providers.base import MockProvider
from datamocker.tables.companies import (
    CONTINENT_COMPANIES,
    CORPORATE_SUFFIXES,
    COUNTRY_COMPANIES,
    GENERIC_TERMS,
    INDUSTRY_PREFIXES,
)
from datamocker.tables.words import ALPHABET_UPPER
from datamocker.types import Continent, Industry

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

COMPANY_NAME_PATTERN = re.compile(
    r"^[A-Za-z0-9][A-Za-z0-9\s]*(Inc\.|Ltd|LLC|GmbH|Co\.|Corp|Group|Solutions)?$"
)
GENERATED_PREFIX_LENGTH = 4


def _lookup(enum_cls: type[E], value: E | str | None) -> E | None:
    """Resolve ``value`` to a member, or None when it names none."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip()
        for member in enum_cls:
            if key.upper() == member.name:
                return member
    return None


class CompanyProvider(MockProvider):
    """Real-world company names by continent or country, and synthesized names.

    Table misses fall back to the GLOBAL entry instead of raising.
    """

    key = "company"

    def by_continent(self, continent: Continent | str) -> str:
        member = _lookup(Continent, continent)
        names = CONTINENT_COMPANIES.get(member) if member is not None else None
        if names is None:
            logger.debug("No companies for continent %r, using global list", continent)
            names = CONTINENT_COMPANIES[Continent.GLOBAL]
        return self.pick(names)

    def by_country(self, country: str) -> str:
        names = COUNTRY_COMPANIES.get((country or "").strip().upper())
        if names is None:
            logger.debug("No companies for country %r, using global list", country)
            names = CONTINENT_COMPANIES[Continent.GLOBAL]
        return self.pick(names)

    def by_industry(self, industry: Industry | str, with_suffix: bool = True) -> str:
        """Industry prefix + generic token, with an optional corporate suffix.

        Example:
            >>> provider.by_industry(Industry.TECH)
            'Cybertron Inc.'
        """
        member = _lookup(Industry, industry)
        prefixes = INDUSTRY_PREFIXES.get(member) if member is not None else None
        if prefixes is None:
            logger.debug("No prefixes for industry %r, using global list", industry)
            prefixes = INDUSTRY_PREFIXES[Industry.GLOBAL]
        return self._compose(self.pick(prefixes), with_suffix)

    def generated(self, with_suffix: bool = True) -> str:
        """Four random uppercase letters + generic token, e.g. ``'QZRTify LLC'``."""
        return self._compose(self.rng.chars(ALPHABET_UPPER, GENERATED_PREFIX_LENGTH), with_suffix)

    def from_list(self, names: Sequence[str]) -> str:
        if not names:
            raise InvalidArgumentError("Custom company list must not be null or empty")
        return self.pick(names)

    def random(self) -> str:
        """Company from a randomly chosen continent."""
        return self.by_continent(self.pick(list(Continent)))

    def is_valid_company_name(self, name: str) -> bool:
        if not name or not name.strip():
            return False
        return COMPANY_NAME_PATTERN.match(name) is not None

    def _compose(self, prefix: str, with_suffix: bool) -> str:
        name = prefix + self.pick(GENERIC_TERMS)
        if with_suffix:
            name = f"{name} {self.pick(CORPORATE_SUFFIXES)}"
        return name
