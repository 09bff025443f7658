"""Calendar date generation.

Every operation reduces its request to an inclusive ``[start, end]`` pair
and draws a uniform day offset from ``start``.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Callable
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Any

from datamocker.errors import InvalidArgumentError, InvalidRangeError
from datamocker.providers.base import MockProvider
from datamocker.random_source import RandomSource
from datamocker.types import Season, parse_enum

logger = logging.getLogger(__name__)

DEFAULT_MIN_DATE = date(1900, 1, 1)
MAX_REJECTION_ATTEMPTS = 1000

SATURDAY = 5


def check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgumentError(
            f"Year must be between {MINYEAR} and {MAXYEAR}", year=year
        )


def make_date(year: int, month: int, day: int) -> date:
    check_year(year)
    return date(year, month, day)


def shift_years(day: date, years: int) -> date:
    """Move ``day`` by whole years, clamping Feb 29 to Feb 28.

    Raises:
        InvalidArgumentError: If the resulting year is outside 1-9999.
    """
    year = day.year + years
    check_year(year)
    try:
        return day.replace(year=year)
    except ValueError:
        return day.replace(year=year, day=28)


def is_weekend(day: date) -> bool:
    return day.weekday() >= SATURDAY


class DateProvider(MockProvider):
    """Uniform dates over day-resolution windows."""

    key = "date"

    def __init__(
        self,
        generator: Any,
        rng: RandomSource | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        super().__init__(generator, rng)
        self._clock = clock

    def today(self) -> date:
        return self._clock()

    def between(self, start: date, end: date) -> date:
        """Uniform date in ``[start, end]``."""
        if start is None or end is None:
            raise InvalidArgumentError("Min and max dates must not be None")
        if start > end:
            raise InvalidRangeError(
                "Max date must be on or after min date", start=start, end=end
            )
        day_count = (end - start).days + 1
        return start + timedelta(days=self.rng.next_long(day_count))

    def random(self) -> date:
        """Uniform date between 1900-01-01 and today."""
        return self.between(DEFAULT_MIN_DATE, self.today())

    def past(self, max_years: int) -> date:
        """Date strictly before today and no earlier than ``max_years`` ago.

        ``past(0)`` is the only call that returns today, since the window
        before today is empty.
        """
        self._check_years(max_years, "Years ago")
        today = self.today()
        if max_years == 0:
            return today
        return self.between(shift_years(today, -max_years), today - timedelta(days=1))

    def future(self, max_years: int) -> date:
        """Date strictly after today and no later than ``max_years`` ahead.

        ``future(0)`` is the only call that returns today.
        """
        self._check_years(max_years, "Years ahead")
        today = self.today()
        if max_years == 0:
            return today
        return self.between(today + timedelta(days=1), shift_years(today, max_years))

    def birthday(self, age: int) -> date:
        """Birth date of someone who is exactly ``age`` years old today."""
        self._check_years(age, "Age")
        latest = shift_years(self.today(), -age)
        earliest = shift_years(latest, -1) + timedelta(days=1)
        return self.between(earliest, latest)

    def in_month(self, month: int, year: int) -> date:
        if not 1 <= month <= 12:
            raise InvalidArgumentError("Month must be between 1 and 12", month=month)
        check_year(year)
        last_day = calendar.monthrange(year, month)[1]
        return self.between(make_date(year, month, 1), make_date(year, month, last_day))

    def in_season(self, season: Season | int | str, year: int) -> date:
        """Date within a season of ``year``.

        Winter spans December of the previous year through the end of
        February, including Feb 29 in leap years.
        """
        try:
            season = parse_enum(Season, season, "season")
        except InvalidArgumentError:
            raise InvalidArgumentError(
                "Season must be between 1 and 4", season=season
            ) from None

        if season is Season.WINTER:
            start = make_date(year - 1, 12, 1)
            end = make_date(year, 2, 29 if calendar.isleap(year) else 28)
        elif season is Season.SPRING:
            start, end = make_date(year, 3, 1), make_date(year, 5, 31)
        elif season is Season.SUMMER:
            start, end = make_date(year, 6, 1), make_date(year, 8, 31)
        else:
            start, end = make_date(year, 9, 1), make_date(year, 11, 30)
        return self.between(start, end)

    def weekday(self, start: date | None = None, end: date | None = None) -> date:
        """Monday-to-Friday date, by rejection sampling."""
        return self._sample_until(lambda d: not is_weekend(d), start, end, "weekday")

    def weekend(self, start: date | None = None, end: date | None = None) -> date:
        """Saturday or Sunday date, by rejection sampling."""
        return self._sample_until(is_weekend, start, end, "weekend day")

    def _sample_until(
        self,
        accept: Callable[[date], bool],
        start: date | None,
        end: date | None,
        what: str,
    ) -> date:
        start = start or DEFAULT_MIN_DATE
        end = end or self.today()
        if start > end:
            raise InvalidRangeError("Max date must be on or after min date", start=start, end=end)

        # any 7 consecutive days contain both kinds, so only short ranges need a scan
        span = min((end - start).days + 1, 7)
        if not any(accept(start + timedelta(days=i)) for i in range(span)):
            raise InvalidRangeError(f"No {what} in range [{start}, {end}]", start=start, end=end)

        for attempt in range(1, MAX_REJECTION_ATTEMPTS + 1):
            candidate = self.between(start, end)
            if accept(candidate):
                if attempt > 1:
                    logger.debug("Drew %s after %d attempts", what, attempt)
                return candidate
        raise InvalidRangeError(
            f"Gave up drawing a {what} after {MAX_REJECTION_ATTEMPTS} attempts",
            start=start,
            end=end,
        )

    @staticmethod
    def _check_years(years: int, name: str) -> None:
        if years < 0:
            raise InvalidArgumentError(f"{name} must not be negative", value=years)
