"""The French Republican calendar.

Year 1 of the Republic starts on ISO 1792-09-22. The calendar has
twelve months of three ten-day decades each, followed by five
complementary days (six in a leap year). Leap years follow a strict
four-year rule aligned so that year 3 is the first leap year.

The week is the ten-day decade: the day of the week is the position of
the day within its decade, and the complementary days form a short
final decade.

Examples:
    >>> FrenchRepublicanDate(1, 1, 1).to_iso_date()
    datetime.date(1792, 9, 22)
"""

from __future__ import annotations

from typing import ClassVar

from altchrono.calendars.nile import NileChronology, NileDate
from altchrono.core.chronology import register_chronology
from altchrono.core.value_range import ValueRange
from altchrono.units.era import FrenchRepublicanEra
from altchrono.units.field import Field

# Republican 0001-01-01 is ISO 1792-09-22
EPOCH_DAY_DIFFERENCE: int = 64_748
DAYS_PER_DECADE: int = 10


class FrenchRepublicanChronology(NileChronology):
    """The French Republican calendar system.

    Examples:
        >>> FrenchRepublicanChronology.INSTANCE.range(Field.DAY_OF_WEEK)
        ValueRange(1, 10)
    """

    __slots__ = ()

    INSTANCE: ClassVar[FrenchRepublicanChronology]
    ERA_CLASS = FrenchRepublicanEra
    RANGES: ClassVar[dict[Field, ValueRange]] = {
        **NileChronology.RANGES,
        Field.DAY_OF_WEEK: ValueRange.of(1, DAYS_PER_DECADE),
        Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, DAYS_PER_DECADE),
        Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, DAYS_PER_DECADE),
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 3),
        Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 37),
    }

    @property
    def id(self) -> str:
        return "French Republican"

    @property
    def calendar_type(self) -> str | None:
        return "french-republican"

    def date(self, year: int, month: int, day: int) -> FrenchRepublicanDate:
        return FrenchRepublicanDate(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> FrenchRepublicanDate:
        return FrenchRepublicanDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> FrenchRepublicanDate:
        return FrenchRepublicanDate.of_epoch_day(epoch_day)


class FrenchRepublicanDate(NileDate):
    """A date in the French Republican calendar.

    Examples:
        >>> d = FrenchRepublicanDate(4, 6, 10)
        >>> d.to_iso_date()
        datetime.date(1796, 2, 29)
        >>> d.day_of_week
        10
        >>> FrenchRepublicanDate(3, 13, 6).is_leap_year()
        True
    """

    __slots__ = ()

    EPOCH_DAY_DIFFERENCE = EPOCH_DAY_DIFFERENCE

    @property
    def chronology(self) -> FrenchRepublicanChronology:
        return FrenchRepublicanChronology.INSTANCE

    @property
    def era(self) -> FrenchRepublicanEra:
        if self._year >= 1:
            return FrenchRepublicanEra.REPUBLICAN
        return FrenchRepublicanEra.BEFORE_REPUBLICAN

    @property
    def day_of_week(self) -> int:
        """Return the day within the decade, 1 to 10."""
        return (self._day - 1) % DAYS_PER_DECADE + 1

    def length_of_week(self) -> int:
        return DAYS_PER_DECADE


FrenchRepublicanChronology.INSTANCE = register_chronology(FrenchRepublicanChronology())


__all__ = ["FrenchRepublicanChronology", "FrenchRepublicanDate"]
