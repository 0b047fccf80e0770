"""Enumerations used across the holiday domain layer."""

from __future__ import annotations

from enum import StrEnum


class HolidayType(StrEnum):
    """Whether a holiday is a statutory day off."""

    OFFICIAL_HOLIDAY = "official_holiday"
    UNOFFICIAL_HOLIDAY = "unofficial_holiday"

    @property
    def is_official(self) -> bool:
        return self is HolidayType.OFFICIAL_HOLIDAY


class HolidayCalendar(StrEnum):
    """Calendar codes known to the engine."""

    ALBANIA = "al"
    ARGENTINA = "ar"
    AUSTRALIA = "au"
    AUSTRIA = "at"
    BELARUS = "by"
    BELGIUM = "be"
    BOLIVIA = "bo"
    BRAZIL = "br"
    BULGARIA = "bg"
    CANADA = "ca"
    CHILE = "cl"
    COLOMBIA = "co"
    CROATIA = "hr"
    CZECH_REPUBLIC = "cz"
    DENMARK = "dk"
    ECUADOR = "ec"
    ESTONIA = "ee"
    ETHIOPIA = "et"
    FINLAND = "fi"
    FRANCE = "fr"
    GERMANY = "de"
    GREECE = "gr"
    HUNGARY = "hu"
    ICELAND = "is"
    IRELAND = "ie"
    ITALY = "it"
    JAPAN = "jp"
    KAZAKHSTAN = "kz"
    LATVIA = "lv"
    LIECHTENSTEIN = "li"
    LITHUANIA = "lt"
    LUXEMBOURG = "lu"
    MACEDONIA = "mk"
    MALTA = "mt"
    MEXICO = "mx"
    NETHERLANDS = "nl"
    NEW_ZEALAND = "nz"
    NORWAY = "no"
    PARAGUAY = "py"
    PERU = "pe"
    POLAND = "pl"
    PORTUGAL = "pt"
    ROMANIA = "ro"
    RUSSIA = "ru"
    SERBIA = "rs"
    SLOVAKIA = "sk"
    SLOVENIA = "si"
    SOUTH_AFRICA = "za"
    SPAIN = "es"
    SWEDEN = "se"
    SWITZERLAND = "ch"
    UKRAINE = "ua"
    UNITED_KINGDOM = "gb"
    UNITED_STATES = "us"
    URUGUAY = "uy"
    VENEZUELA = "ve"
    LONDON_METAL_EXCHANGE = "lme"
    NYSE = "nyse"
    NYSE_EURONEXT = "nyse_euronext"
    TARGET = "target"


__all__ = ["HolidayCalendar", "HolidayType"]
