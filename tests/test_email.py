"""Tests for the email provider."""

from __future__ import annotations

import re

import pytest
from faker import Faker

from datamocker.errors import InvalidArgumentError
from datamocker.providers.company import CompanyProvider
from datamocker.providers.email import EmailProvider, clean_company
from datamocker.random_source import RandomSource
from datamocker.tables.words import PERSONAL_DOMAINS

PERSONAL = re.compile(
    r"^[a-z]+\.[a-z]+@(" + "|".join(re.escape(d) for d in PERSONAL_DOMAINS) + r")$"
)
BUSINESS = re.compile(r"^(contact|info|sales|support|admin)@[a-z0-9]+\.[a-z.]+$")


class FixedCompanies(CompanyProvider):
    """Company provider that always returns the same name."""

    def random(self) -> str:
        return "Zenith & Co."

    def by_country(self, country: str) -> str:
        return "Zenith & Co."


@pytest.fixture
def emails(faker: Faker, rng: RandomSource) -> EmailProvider:
    return EmailProvider(faker, rng)


class TestPersonal:
    """Tests for personal addresses."""

    def test_shape(self, emails: EmailProvider) -> None:
        for _ in range(100):
            assert PERSONAL.match(emails.personal())

    def test_custom_domain(self, emails: EmailProvider) -> None:
        value = emails.personal("acme.io")
        assert re.fullmatch(r"[a-z]+\.[a-z]+@acme\.io", value)

    def test_domain_needs_tld(self, emails: EmailProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            emails.personal("localhost")

    def test_configured_domains(self, faker: Faker, rng: RandomSource) -> None:
        provider = EmailProvider(faker, rng, personal_domains=["corp.test"])
        assert provider.personal().endswith("@corp.test")

    def test_invalid_configured_domains(self, faker: Faker, rng: RandomSource) -> None:
        with pytest.raises(InvalidArgumentError):
            EmailProvider(faker, rng, personal_domains=[])
        with pytest.raises(InvalidArgumentError):
            EmailProvider(faker, rng, personal_domains=["nodot"])

    def test_random_format(self, emails: EmailProvider) -> None:
        pattern = re.compile(r"^([a-z]+\.[a-z]+|[a-z]+\d{0,2}|[a-z]+\.[a-z])@[a-z.]+$")
        for _ in range(100):
            value = emails.personal_random_format()
            assert pattern.match(value), value
            assert emails.is_valid_email(value)


class TestBusiness:
    """Tests for business addresses."""

    def test_shape(self, emails: EmailProvider) -> None:
        for _ in range(100):
            assert BUSINESS.match(emails.business())

    @pytest.mark.parametrize(
        ("country", "tld"),
        [("UK", "co.uk"), ("ng", "ng"), ("CA", "ca"), ("DE", "de"), ("FR", "fr"), ("JP", "jp")],
    )
    def test_by_country_tld(self, emails: EmailProvider, country: str, tld: str) -> None:
        value = emails.business_by_country(country)
        assert value.endswith(f".{tld}")
        assert BUSINESS.match(value)

    def test_unmapped_country_defaults_to_com(self, emails: EmailProvider) -> None:
        assert emails.business_by_country("BR").endswith(".com")

    def test_uses_injected_company_provider(self, faker: Faker, rng: RandomSource) -> None:
        provider = EmailProvider(faker, rng, companies=FixedCompanies(faker, rng))
        assert provider.business().split("@")[1].startswith("zenithco.")
        assert provider.business_by_country("UK").endswith("@zenithco.co.uk")

    def test_with_custom(self, emails: EmailProvider) -> None:
        value = emails.business_with_custom("L'Oréal Group", "fr")
        assert re.fullmatch(r"(contact|info|sales|support|admin)@lorealgroup\.fr", value)

    def test_with_custom_requires_values(self, emails: EmailProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            emails.business_with_custom(" ", "com")
        with pytest.raises(InvalidArgumentError):
            emails.business_with_custom("Acme", "")
        with pytest.raises(InvalidArgumentError):
            emails.business_with_custom("!!!", "com")

    def test_clean_company(self) -> None:
        assert clean_company("McDonald's") == "mcdonalds"
        assert clean_company("Coca-Cola") == "cocacola"


class TestIsValidEmail:
    """Tests for email shape validation."""

    def test_accepts_generated(self, emails: EmailProvider) -> None:
        assert emails.is_valid_email(emails.personal())
        assert emails.is_valid_email(emails.business_by_country("UK"))

    def test_rejects(self, emails: EmailProvider) -> None:
        assert not emails.is_valid_email("")
        assert not emails.is_valid_email("no-at-sign.com")
        assert not emails.is_valid_email("a@b")
