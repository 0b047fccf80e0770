"""Easter Sunday computus on both sides of the 1582 calendar reform."""

from __future__ import annotations

from datetime import date

from .gregorian import julian_to_gregorian

LAST_JULIAN_YEAR = 1582


def easter_sunday(year: int) -> date:
    """Return Easter Sunday for ``year``.

    Years up to and including 1582 use the Julian computus, later years the
    Gregorian one. Julian results are expressed as proleptic Gregorian dates,
    like every ``datetime.date``.
    """

    if year <= LAST_JULIAN_YEAR:
        return julian_easter_sunday(year)
    return gregorian_easter_sunday(year)


def julian_easter_sunday(year: int) -> date:
    """Easter Sunday according to the Julian computus (Meeus)."""

    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    x = d + e + 114
    month = x // 31
    day = x % 31 + 1
    return julian_to_gregorian(year, month, day)


def gregorian_easter_sunday(year: int) -> date:
    """Easter Sunday according to the Gregorian computus (Meeus/Jones/Butcher)."""

    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    x = h + l - 7 * m + 114
    month = x // 31
    day = x % 31 + 1
    return date(year, month, day)


__all__ = [
    "LAST_JULIAN_YEAR",
    "easter_sunday",
    "gregorian_easter_sunday",
    "julian_easter_sunday",
]
