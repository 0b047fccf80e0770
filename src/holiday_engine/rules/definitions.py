"""Calendar definitions shipped with the engine."""

from __future__ import annotations

from holiday_engine.domain import HolidayCalendar, HolidayType

from .catalog import DefinitionCatalog
from .models import CalendarDefinition, EasterRelativeRule, FixedDateRule

GERMANY = CalendarDefinition(
    id=HolidayCalendar.GERMANY.value,
    description="Germany",
    rules=(
        FixedDateRule(key="NEW_YEAR", month=1, day=1),
        EasterRelativeRule(key="GOOD_FRIDAY", offset_days=-2),
        EasterRelativeRule(key="EASTER", offset_days=0, holiday_type=HolidayType.UNOFFICIAL_HOLIDAY),
        EasterRelativeRule(key="EASTER_MONDAY", offset_days=1),
        FixedDateRule(key="LABOUR_DAY", month=5, day=1),
        EasterRelativeRule(key="ASCENSION_DAY", offset_days=39),
        EasterRelativeRule(key="WHIT_MONDAY", offset_days=50),
        FixedDateRule(key="UNIFICATION_GERMANY", month=6, day=17, valid_from=1954, valid_to=1990),
        FixedDateRule(key="UNIFICATION_GERMANY", month=10, day=3, valid_from=1990),
        FixedDateRule(key="CHRISTMAS", month=12, day=25),
        FixedDateRule(key="STEPHENS", month=12, day=26),
    ),
    subdivisions={
        "by": CalendarDefinition(
            id="by",
            description="Bavaria",
            rules=(
                FixedDateRule(key="EPIPHANY", month=1, day=6),
                EasterRelativeRule(key="CORPUS_CHRISTI", offset_days=60),
                FixedDateRule(key="ASSUMPTION_DAY", month=8, day=15),
                FixedDateRule(key="ALL_SAINTS", month=11, day=1),
            ),
        ),
        "be": CalendarDefinition(
            id="be",
            description="Berlin",
            rules=(FixedDateRule(key="INTERNATIONAL_WOMAN", month=3, day=8, valid_from=2019),),
        ),
    },
)


def _build_default_catalog() -> DefinitionCatalog:
    catalog = DefinitionCatalog()
    catalog.register(GERMANY)
    return catalog


default_catalog = _build_default_catalog()


def register_definition(definition: CalendarDefinition, *, override: bool = False) -> None:
    """Register a definition on the default catalog."""

    default_catalog.register(definition, override=override)


__all__ = ["GERMANY", "default_catalog", "register_definition"]
