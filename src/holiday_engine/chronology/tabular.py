"""Arithmetic (tabular) calendars used for moving religious holidays.

Both calendars are modelled by a pair of integer functions: one mapping a
(year, month, day) triple to a proleptic Gregorian ordinal and one estimating
the calendar year containing an ordinal. Conversions are exact for the
tabular rules; the Islamic calendar here is the civil arithmetic variant and
does not follow actual moon sightings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

logger = logging.getLogger(__name__)

# Ordinal of the day before 1 Muharram AH 1 (16 July 622, Julian).
_ISLAMIC_EPOCH = 227014
# Thirty Islamic years span 10631 days (19 common years of 354 days, 11 leap years of 355).
_ISLAMIC_CYCLE_DAYS = 10631
_ISLAMIC_CYCLE_YEARS = 30
# Ordinal of the day before 1 Thout AM 1 (29 August 284, Julian).
_COPTIC_EPOCH = 103604


@dataclass(frozen=True, slots=True)
class TabularCalendar:
    """Arithmetic calendar description."""

    name: str
    months: int
    to_ordinal: Callable[[int, int, int], int]
    year_of: Callable[[int], int]
    month_length: Callable[[int, int], int]

    def validate(self, month: int, day: int) -> None:
        if not 1 <= month <= self.months:
            msg = f"{self.name} month must be between 1 and {self.months}, got {month}"
            raise ValueError(msg)
        longest = max(self.month_length(year, month) for year in range(1, 31))
        if not 1 <= day <= longest:
            msg = f"{self.name} day must be between 1 and {longest} for month {month}, got {day}"
            raise ValueError(msg)

    def dates_within_gregorian_year(self, gregorian_year: int, month: int, day: int) -> set[date]:
        """Return every Gregorian date of ``gregorian_year`` falling on ``month``/``day``."""

        self.validate(month, day)
        first = date(gregorian_year, 1, 1).toordinal()
        last = date(gregorian_year, 12, 31).toordinal()
        results: set[date] = set()
        # One year of slack on both ends keeps the enumeration independent of
        # rounding in ``year_of``.
        for year in range(self.year_of(first) - 1, self.year_of(last) + 2):
            if year < 1 or day > self.month_length(year, month):
                continue
            ordinal = self.to_ordinal(year, month, day)
            if first <= ordinal <= last:
                results.add(date.fromordinal(ordinal))
        return results


def is_islamic_leap_year(year: int) -> bool:
    return (14 + 11 * year) % _ISLAMIC_CYCLE_YEARS < 11


def _islamic_month_length(year: int, month: int) -> int:
    if month == 12 and is_islamic_leap_year(year):
        return 30
    return 30 if month % 2 == 1 else 29


def islamic_to_ordinal(year: int, month: int, day: int) -> int:
    return (
        day
        + (59 * (month - 1) + 1) // 2
        + (year - 1) * 354
        + (3 + 11 * year) // _ISLAMIC_CYCLE_YEARS
        + _ISLAMIC_EPOCH
    )


def islamic_year_of(ordinal: int) -> int:
    days = ordinal - _ISLAMIC_EPOCH - 1
    return (_ISLAMIC_CYCLE_YEARS * days + 10646) // _ISLAMIC_CYCLE_DAYS


def _coptic_month_length(year: int, month: int) -> int:
    if month < 13:
        return 30
    return 6 if year % 4 == 3 else 5


def coptic_to_ordinal(year: int, month: int, day: int) -> int:
    return _COPTIC_EPOCH + 365 * (year - 1) + year // 4 + 30 * (month - 1) + day


def coptic_year_of(ordinal: int) -> int:
    return (4 * (ordinal - _COPTIC_EPOCH - 1) + 1463) // 1461


ISLAMIC = TabularCalendar(
    name="Islamic",
    months=12,
    to_ordinal=islamic_to_ordinal,
    year_of=islamic_year_of,
    month_length=_islamic_month_length,
)

COPTIC = TabularCalendar(
    name="Coptic",
    months=13,
    to_ordinal=coptic_to_ordinal,
    year_of=coptic_year_of,
    month_length=_coptic_month_length,
)


def islamic_holidays_in_gregorian_year(
    gregorian_year: int, islamic_month: int, islamic_day: int
) -> set[date]:
    """Gregorian dates in ``gregorian_year`` of the Hijri ``islamic_month``/``islamic_day``.

    The Islamic year is about eleven days shorter than the Gregorian one, so
    the result holds zero, one or two dates.
    """

    dates = ISLAMIC.dates_within_gregorian_year(gregorian_year, islamic_month, islamic_day)
    logger.debug(
        "Islamic %s/%s falls on %s in %s", islamic_month, islamic_day, sorted(dates), gregorian_year
    )
    return dates


def ethiopian_orthodox_holidays_in_gregorian_year(
    gregorian_year: int, ethiopian_month: int, ethiopian_day: int
) -> set[date]:
    """Gregorian dates in ``gregorian_year`` of a Coptic/Ethiopian month and day."""

    return COPTIC.dates_within_gregorian_year(gregorian_year, ethiopian_month, ethiopian_day)


__all__ = [
    "COPTIC",
    "ISLAMIC",
    "TabularCalendar",
    "coptic_to_ordinal",
    "coptic_year_of",
    "ethiopian_orthodox_holidays_in_gregorian_year",
    "is_islamic_leap_year",
    "islamic_holidays_in_gregorian_year",
    "islamic_to_ordinal",
    "islamic_year_of",
]
