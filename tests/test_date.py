"""Tests for the date provider."""

from __future__ import annotations

from datetime import date

import pytest
from faker import Faker

from datamocker.errors import InvalidArgumentError, InvalidRangeError
from datamocker.providers.date import DEFAULT_MIN_DATE, DateProvider, is_weekend, shift_years
from datamocker.random_source import RandomSource
from datamocker.types import Season
from tests.conftest import FIXED_TODAY, ITERATIONS, fixed_clock


@pytest.fixture
def dates(faker: Faker, rng: RandomSource) -> DateProvider:
    return DateProvider(faker, rng, clock=fixed_clock)


class TestShiftYears:
    """Tests for calendar year arithmetic."""

    def test_regular_day(self) -> None:
        assert shift_years(date(2024, 6, 15), -5) == date(2019, 6, 15)

    def test_leap_day_clamps(self) -> None:
        assert shift_years(date(2024, 2, 29), 1) == date(2025, 2, 28)
        assert shift_years(date(2024, 2, 29), 4) == date(2028, 2, 29)


class TestBetween:
    """Tests for the core uniform draw."""

    def test_inclusive_bounds(self, dates: DateProvider) -> None:
        start, end = date(2024, 1, 1), date(2024, 1, 3)
        values = {dates.between(start, end) for _ in range(ITERATIONS)}
        assert values == {date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)}

    def test_single_day(self, dates: DateProvider) -> None:
        assert dates.between(date(2020, 5, 5), date(2020, 5, 5)) == date(2020, 5, 5)

    def test_inverted_range_raises(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidRangeError):
            dates.between(date(2024, 1, 2), date(2024, 1, 1))

    def test_random_defaults(self, dates: DateProvider) -> None:
        for _ in range(ITERATIONS):
            assert DEFAULT_MIN_DATE <= dates.random() <= FIXED_TODAY


class TestRelativeWindows:
    """Tests for past, future and birthday windows."""

    def test_past_is_strictly_before_today(self, dates: DateProvider) -> None:
        earliest = shift_years(FIXED_TODAY, -5)
        for _ in range(ITERATIONS):
            value = dates.past(5)
            assert earliest <= value < FIXED_TODAY

    def test_future_is_strictly_after_today(self, dates: DateProvider) -> None:
        latest = shift_years(FIXED_TODAY, 5)
        for _ in range(ITERATIONS):
            value = dates.future(5)
            assert FIXED_TODAY < value <= latest

    def test_zero_years_returns_today(self, dates: DateProvider) -> None:
        assert dates.past(0) == FIXED_TODAY
        assert dates.future(0) == FIXED_TODAY

    def test_negative_years_raise(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            dates.past(-1)
        with pytest.raises(InvalidArgumentError):
            dates.future(-1)

    def test_birthday_gives_exact_age(self, dates: DateProvider) -> None:
        for _ in range(ITERATIONS):
            born = dates.birthday(30)
            age = FIXED_TODAY.year - born.year - (
                (FIXED_TODAY.month, FIXED_TODAY.day) < (born.month, born.day)
            )
            assert age == 30

    def test_birthday_negative_age_raises(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            dates.birthday(-3)

    def test_today_uses_clock(self, dates: DateProvider) -> None:
        assert dates.today() == FIXED_TODAY


class TestCalendarWindows:
    """Tests for month and season windows."""

    def test_in_month(self, dates: DateProvider) -> None:
        for _ in range(ITERATIONS):
            value = dates.in_month(2, 2024)
            assert value.year == 2024
            assert value.month == 2

    def test_in_month_reaches_leap_day(self, dates: DateProvider) -> None:
        days = {dates.in_month(2, 2024).day for _ in range(2000)}
        assert max(days) == 29

    def test_invalid_month_raises(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            dates.in_month(13, 2024)
        with pytest.raises(InvalidArgumentError):
            dates.in_month(0, 2024)

    @pytest.mark.parametrize(
        ("season", "start", "end"),
        [
            (Season.WINTER, date(2023, 12, 1), date(2024, 2, 29)),
            (Season.SPRING, date(2024, 3, 1), date(2024, 5, 31)),
            (Season.SUMMER, date(2024, 6, 1), date(2024, 8, 31)),
            (Season.FALL, date(2024, 9, 1), date(2024, 11, 30)),
        ],
    )
    def test_in_season(
        self, dates: DateProvider, season: Season, start: date, end: date
    ) -> None:
        for _ in range(ITERATIONS):
            assert start <= dates.in_season(season, 2024) <= end

    def test_winter_in_common_year_ends_feb_28(self, dates: DateProvider) -> None:
        for _ in range(ITERATIONS):
            assert dates.in_season(1, 2023) <= date(2023, 2, 28)

    def test_season_accepts_numbers_and_names(self, dates: DateProvider) -> None:
        assert dates.in_season(3, 2024).month in (6, 7, 8)
        assert dates.in_season("fall", 2024).month in (9, 10, 11)

    def test_invalid_season_raises(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError, match="Season must be between 1 and 4"):
            dates.in_season(5, 2024)


class TestYearBounds:
    """Years outside 1-9999 are rejected as invalid arguments."""

    def test_in_month_year_zero(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            dates.in_month(1, 0)
        assert exc_info.value.context == {"year": 0}

    def test_winter_of_year_one(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError, match="Year must be between 1 and 9999"):
            dates.in_season(Season.WINTER, 1)

    def test_past_beyond_year_one(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            dates.past(5000)
        assert exc_info.value.context["year"] == FIXED_TODAY.year - 5000

    def test_future_beyond_year_9999(self, dates: DateProvider) -> None:
        with pytest.raises(InvalidArgumentError):
            dates.future(9000)

    def test_shift_years_out_of_range(self) -> None:
        with pytest.raises(InvalidArgumentError):
            shift_years(date(9999, 6, 1), 1)


class TestWeekdayWeekend:
    """Tests for rejection-sampled day kinds."""

    def test_weekday(self, dates: DateProvider) -> None:
        for _ in range(ITERATIONS):
            assert not is_weekend(dates.weekday(date(2024, 1, 1), date(2024, 1, 31)))

    def test_weekend(self, dates: DateProvider) -> None:
        for _ in range(ITERATIONS):
            assert is_weekend(dates.weekend(date(2024, 1, 1), date(2024, 1, 31)))

    def test_default_range(self, dates: DateProvider) -> None:
        value = dates.weekday()
        assert DEFAULT_MIN_DATE <= value <= FIXED_TODAY

    def test_range_without_weekend_raises(self, dates: DateProvider) -> None:
        # Monday to Friday
        with pytest.raises(InvalidRangeError):
            dates.weekend(date(2024, 1, 1), date(2024, 1, 5))

    def test_range_without_weekday_raises(self, dates: DateProvider) -> None:
        # Saturday and Sunday
        with pytest.raises(InvalidRangeError):
            dates.weekday(date(2024, 1, 6), date(2024, 1, 7))
