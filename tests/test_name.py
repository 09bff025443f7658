"""Tests for the name provider."""

from __future__ import annotations

import pytest
from faker import Faker

from datamocker.errors import InvalidArgumentError
from datamocker.providers.name import NameProvider
from datamocker.random_source import RandomSource
from datamocker.tables.names import MIDDLE_NAMES, REGION_NAMES
from datamocker.types import Gender, NameFormat, Region
from tests.conftest import ITERATIONS


@pytest.fixture
def names(faker: Faker, rng: RandomSource) -> NameProvider:
    return NameProvider(faker, rng)


class TestNameFormats:
    """Tests for the token shape of each format."""

    @pytest.mark.parametrize("region", list(Region))
    def test_first_last(self, names: NameProvider, region: Region) -> None:
        tables = REGION_NAMES[region]
        for _ in range(50):
            first, last = names.name(region).split(" ")
            assert first in tables.female_first
            assert last in tables.last

    def test_last_first(self, names: NameProvider) -> None:
        value = names.name(Region.ASIAN, Gender.MALE, NameFormat.LAST_FIRST)
        last, first = value.split(", ")
        assert last in REGION_NAMES[Region.ASIAN].last
        assert first in REGION_NAMES[Region.ASIAN].male_first

    def test_first_middle_last(self, names: NameProvider) -> None:
        first, middle, last = names.name(
            Region.EUROPEAN, name_format=NameFormat.FIRST_MIDDLE_LAST
        ).split(" ")
        assert middle in MIDDLE_NAMES
        assert last in REGION_NAMES[Region.EUROPEAN].last

    def test_title_first_last(self, names: NameProvider) -> None:
        tables = REGION_NAMES[Region.NIGERIAN]
        for _ in range(50):
            value = names.name(Region.NIGERIAN, Gender.MALE, NameFormat.TITLE_FIRST_LAST)
            *title, first, last = value.split(" ")
            assert " ".join(title) in tables.titles
            assert first in tables.male_first
            assert last in tables.last

    def test_string_tags(self, names: NameProvider) -> None:
        value = names.name("NIGERIAN", "male", "last_first")
        last, first = value.split(", ")
        assert first in REGION_NAMES[Region.NIGERIAN].male_first

    def test_unknown_region_raises(self, names: NameProvider) -> None:
        with pytest.raises(InvalidArgumentError, match="Unsupported region"):
            names.name("martian")

    def test_unknown_format_raises(self, names: NameProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            names.name(Region.WESTERN, name_format="middle_only")


class TestGender:
    """Tests for gender table selection."""

    def test_male_uses_male_table(self, names: NameProvider) -> None:
        tables = REGION_NAMES[Region.WESTERN]
        for _ in range(ITERATIONS):
            assert names.first_name(Region.WESTERN, Gender.MALE) in tables.male_first

    @pytest.mark.parametrize("gender", [Gender.FEMALE, Gender.UNSPECIFIED])
    def test_other_genders_use_female_table(self, names: NameProvider, gender: Gender) -> None:
        tables = REGION_NAMES[Region.ARABIC]
        for _ in range(ITERATIONS):
            assert names.first_name(Region.ARABIC, gender) in tables.female_first


class TestConvenience:
    """Tests for region shortcuts and parts."""

    @pytest.mark.parametrize(
        ("method", "region"),
        [
            ("nigerian", Region.NIGERIAN),
            ("arabic", Region.ARABIC),
            ("western", Region.WESTERN),
            ("asian", Region.ASIAN),
            ("european", Region.EUROPEAN),
        ],
    )
    def test_region_shortcuts(self, names: NameProvider, method: str, region: Region) -> None:
        value = getattr(names, method)()
        assert names.is_valid_name(value, region)

    def test_full_name_uses_default_region(self, faker: Faker, rng: RandomSource) -> None:
        provider = NameProvider(faker, rng, default_region="asian")
        for _ in range(20):
            assert provider.is_valid_name(provider.full_name(), Region.ASIAN)

    def test_full_name_uses_default_gender_and_format(
        self, faker: Faker, rng: RandomSource
    ) -> None:
        provider = NameProvider(
            faker, rng, default_gender="male", default_name_format="last_first"
        )
        tables = REGION_NAMES[Region.WESTERN]
        for _ in range(20):
            last, first = provider.full_name().split(", ")
            assert last in tables.last
            assert first in tables.male_first

    def test_explicit_arguments_override_defaults(
        self, faker: Faker, rng: RandomSource
    ) -> None:
        provider = NameProvider(faker, rng, default_name_format="last_first")
        value = provider.name(name_format=NameFormat.FIRST_LAST)
        assert ", " not in value
        assert len(value.split(" ")) == 2

    def test_parts(self, names: NameProvider) -> None:
        assert names.last_name(Region.ARABIC) in REGION_NAMES[Region.ARABIC].last
        assert names.title(Region.WESTERN) in REGION_NAMES[Region.WESTERN].titles
        assert names.middle_name() in MIDDLE_NAMES


class TestFromLists:
    """Tests for caller supplied name lists."""

    def test_composes_from_lists(self, names: NameProvider) -> None:
        value = names.from_lists(["Ada"], ["Lovelace", "Byron"])
        assert value in ("Ada Lovelace", "Ada Byron")

    def test_empty_lists_raise(self, names: NameProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            names.from_lists([], ["Lovelace"])
        with pytest.raises(InvalidArgumentError):
            names.from_lists(["Ada"], [])


class TestIsValidName:
    """Tests for name validation."""

    def test_accepts_generated_name(self, names: NameProvider) -> None:
        assert names.is_valid_name(names.name(Region.WESTERN, Gender.MALE), Region.WESTERN)

    def test_rejects_foreign_or_malformed(self, names: NameProvider) -> None:
        assert not names.is_valid_name("", Region.WESTERN)
        assert not names.is_valid_name("Zorg Blarg", Region.WESTERN)
        assert not names.is_valid_name("OnlyOneToken", Region.WESTERN)
