"""Tests for the company provider."""

from __future__ import annotations

import logging
import re

import pytest
from faker import Faker

from datamocker.errors import InvalidArgumentError
from datamocker.providers.company import CompanyProvider
from datamocker.random_source import RandomSource
from datamocker.tables.companies import (
    CONTINENT_COMPANIES,
    CORPORATE_SUFFIXES,
    COUNTRY_COMPANIES,
    INDUSTRY_PREFIXES,
)
from datamocker.types import Continent, Industry


@pytest.fixture
def companies(faker: Faker, rng: RandomSource) -> CompanyProvider:
    return CompanyProvider(faker, rng)


class TestTableLookups:
    """Tests for continent and country tables."""

    @pytest.mark.parametrize("continent", list(Continent))
    def test_by_continent(self, companies: CompanyProvider, continent: Continent) -> None:
        assert companies.by_continent(continent) in CONTINENT_COMPANIES[continent]

    def test_by_continent_string(self, companies: CompanyProvider) -> None:
        assert companies.by_continent("asia") in CONTINENT_COMPANIES[Continent.ASIA]

    def test_by_country(self, companies: CompanyProvider) -> None:
        assert companies.by_country("jp") in COUNTRY_COMPANIES["JP"]

    def test_country_miss_falls_back_to_global(
        self, companies: CompanyProvider, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="datamocker.providers.company"):
            value = companies.by_country("BR")
        assert value in CONTINENT_COMPANIES[Continent.GLOBAL]
        assert "using global list" in caplog.text

    def test_continent_miss_falls_back_to_global(self, companies: CompanyProvider) -> None:
        assert companies.by_continent("antarctica") in CONTINENT_COMPANIES[Continent.GLOBAL]

    def test_random(self, companies: CompanyProvider) -> None:
        everything = {name for names in CONTINENT_COMPANIES.values() for name in names}
        assert companies.random() in everything


class TestSynthesizedNames:
    """Tests for industry and generated names."""

    def test_by_industry_with_suffix(self, companies: CompanyProvider) -> None:
        for _ in range(50):
            name, suffix = companies.by_industry(Industry.FINANCE).split(" ", 1)
            assert name.startswith(INDUSTRY_PREFIXES[Industry.FINANCE])
            assert suffix in CORPORATE_SUFFIXES

    def test_by_industry_without_suffix(self, companies: CompanyProvider) -> None:
        value = companies.by_industry("tech", with_suffix=False)
        assert " " not in value
        assert value.startswith(INDUSTRY_PREFIXES[Industry.TECH])

    def test_industry_miss_falls_back_to_global(self, companies: CompanyProvider) -> None:
        value = companies.by_industry("aerospace", with_suffix=False)
        assert value.startswith(INDUSTRY_PREFIXES[Industry.GLOBAL])

    def test_generated(self, companies: CompanyProvider) -> None:
        for _ in range(50):
            value = companies.generated()
            assert re.fullmatch(r"[A-Z]{4}[a-z]+ \S+", value)
            assert companies.is_valid_company_name(value)

    def test_generated_without_suffix(self, companies: CompanyProvider) -> None:
        assert re.fullmatch(r"[A-Z]{4}[a-z]+", companies.generated(with_suffix=False))


class TestFromList:
    """Tests for caller supplied lists."""

    def test_picks_from_list(self, companies: CompanyProvider) -> None:
        assert companies.from_list(["Acme", "Globex"]) in ("Acme", "Globex")

    def test_empty_list_raises(self, companies: CompanyProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            companies.from_list([])


class TestIsValidCompanyName:
    """Tests for the best-effort name check."""

    def test_accepts(self, companies: CompanyProvider) -> None:
        assert companies.is_valid_company_name("Acme Corp")
        assert companies.is_valid_company_name("Techify Inc.")

    def test_rejects(self, companies: CompanyProvider) -> None:
        assert not companies.is_valid_company_name("")
        assert not companies.is_valid_company_name("   ")
        assert not companies.is_valid_company_name("-Acme")
