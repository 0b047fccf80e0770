"""Gregorian calendar helpers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from holiday_engine.domain import Holiday

SATURDAY = 5
SUNDAY = 6

# Proleptic Gregorian ordinal of the day before Julian day number zero.
_JDN_ORDINAL_OFFSET = 1721425


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def julian_to_gregorian(year: int, month: int, day: int) -> date:
    """Return the physical day labelled ``year-month-day`` in the Julian calendar."""

    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return date.fromordinal(jdn - _JDN_ORDINAL_OFFSET)


def contains(holidays: Iterable[Holiday], day: date) -> bool:
    """Return whether any holiday falls exactly on ``day``."""

    return any(holiday.date == day for holiday in holidays)


__all__ = ["contains", "is_weekend", "julian_to_gregorian"]
