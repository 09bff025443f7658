"""Personal and business email addresses composed from names and companies."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from datamocker.errors import InvalidArgumentError
from datamocker.providers.base import MockProvider
from datamocker.providers.company import CompanyProvider
from datamocker.providers.name import NameProvider
from datamocker.providers.username import ascii_fold
from datamocker.random_source import RandomSource
from datamocker.tables.words import (
    BUSINESS_PREFIXES,
    BUSINESS_TLDS,
    COUNTRY_TLDS,
    DEFAULT_TLD,
    PERSONAL_DOMAINS,
)
from datamocker.types import NameFormat

EMAIL_PATTERN = re.compile(r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$")
LOCAL_PART_JUNK = re.compile(r"[^a-z0-9.]")
COMPANY_JUNK = re.compile(r"[^a-z0-9]")


def clean_company(name: str) -> str:
    """Lowercase ``name`` and strip everything but letters and digits."""
    return COMPANY_JUNK.sub("", ascii_fold(name).lower())


class EmailProvider(MockProvider):
    """Email addresses built on top of the name and company providers.

    Example:
        >>> provider.personal()
        'emily.carter@gmail.com'
        >>> provider.business_by_country("UK")
        'sales@tesco.co.uk'
    """

    key = "email"

    def __init__(
        self,
        generator: Any,
        rng: RandomSource | None = None,
        names: NameProvider | None = None,
        companies: CompanyProvider | None = None,
        personal_domains: Sequence[str] = PERSONAL_DOMAINS,
    ) -> None:
        super().__init__(generator, rng)
        self.names = names if names is not None else NameProvider(generator, self.rng)
        self.companies = (
            companies if companies is not None else CompanyProvider(generator, self.rng)
        )
        if not personal_domains:
            raise InvalidArgumentError("Personal domain list must not be empty")
        for domain in personal_domains:
            self._check_domain(domain)
        self.personal_domains = tuple(personal_domains)

    def personal(self, domain: str | None = None) -> str:
        """``first.last@domain`` from the name provider's default region and gender.

        Raises:
            InvalidArgumentError: If ``domain`` is given without a dot.
        """
        if domain is not None:
            self._check_domain(domain)
        else:
            domain = self.pick(self.personal_domains)
        full_name = self.names.name(name_format=NameFormat.FIRST_LAST)
        local = self._local_part(full_name.replace(" ", "."))
        return f"{local}@{domain}"

    def personal_random_format(self) -> str:
        """Personal email in one of ``first.last``, ``flast``, ``firstlastNN`` or ``last.f``."""
        first = self._local_part(self.names.first_name())
        last = self._local_part(self.names.last_name())
        formats = (
            lambda: f"{first}.{last}",
            lambda: f"{first[0]}{last}",
            lambda: f"{first}{last}{self.rng.next_int(100)}",
            lambda: f"{last}.{first[0]}",
        )
        return f"{self.pick(formats)()}@{self.pick(self.personal_domains)}"

    def business(self) -> str:
        return self._business(self.companies.random(), self.pick(BUSINESS_TLDS))

    def business_by_country(self, country: str) -> str:
        """Business email with a TLD derived from ``country``, ``com`` when unmapped."""
        tld = COUNTRY_TLDS.get((country or "").strip().upper(), DEFAULT_TLD)
        return self._business(self.companies.by_country(country), tld)

    def business_with_custom(self, company_name: str, tld: str) -> str:
        if not company_name or not company_name.strip():
            raise InvalidArgumentError("Company name must not be null or empty")
        if not tld or not tld.strip():
            raise InvalidArgumentError("TLD must not be null or empty")
        return self._business(company_name, tld.strip().lstrip("."))

    def is_valid_email(self, value: str) -> bool:
        if not value:
            return False
        return EMAIL_PATTERN.match(value) is not None

    def _business(self, company: str, tld: str) -> str:
        domain = clean_company(company)
        if not domain:
            raise InvalidArgumentError(
                "Company name must contain letters or digits", company=company
            )
        return f"{self.pick(BUSINESS_PREFIXES)}@{domain}.{tld}"

    @staticmethod
    def _local_part(text: str) -> str:
        return LOCAL_PART_JUNK.sub("", ascii_fold(text).lower())

    @staticmethod
    def _check_domain(domain: str) -> None:
        if not domain or not domain.strip() or "." not in domain:
            raise InvalidArgumentError(
                "Domain must not be null, empty, or missing a TLD", domain=domain
            )
