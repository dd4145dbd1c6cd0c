"""The Coptic calendar.

The Coptic (Alexandrian) calendar counts years Anno Martyrum from
ISO 0284-08-29. It has twelve months of 30 days and a 13th month of
five days, six in the year before each multiple of four.

Examples:
    >>> CopticDate(1728, 10, 29).to_iso_date()
    datetime.date(2012, 7, 6)
"""

from __future__ import annotations

from typing import ClassVar

from altchrono._internal.constants import MJD_UNIX_EPOCH
from altchrono.calendars.nile import NileChronology, NileDate
from altchrono.core.chronology import register_chronology
from altchrono.units.era import CopticEra

# Coptic 0001-01-01 is MJD -574971
EPOCH_DAY_DIFFERENCE: int = 574_971 + MJD_UNIX_EPOCH


class CopticChronology(NileChronology):
    """The Coptic calendar system.

    Examples:
        >>> CopticChronology.INSTANCE.is_leap_year(1727)
        True
        >>> CopticChronology.INSTANCE.date_epoch_day(0)
        CopticDate(1686, 4, 23)
    """

    __slots__ = ()

    INSTANCE: ClassVar[CopticChronology]
    ERA_CLASS = CopticEra

    @property
    def id(self) -> str:
        return "Coptic"

    @property
    def calendar_type(self) -> str | None:
        return "coptic"

    def date(self, year: int, month: int, day: int) -> CopticDate:
        return CopticDate(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> CopticDate:
        return CopticDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> CopticDate:
        return CopticDate.of_epoch_day(epoch_day)


class CopticDate(NileDate):
    """A date in the Coptic calendar.

    Examples:
        >>> d = CopticDate(1662, 3, 3)
        >>> d.to_iso_date()
        datetime.date(1945, 11, 12)
        >>> str(CopticDate(3, 13, 6))
        'Coptic AM 3-13-06'
    """

    __slots__ = ()

    EPOCH_DAY_DIFFERENCE = EPOCH_DAY_DIFFERENCE

    @property
    def chronology(self) -> CopticChronology:
        return CopticChronology.INSTANCE

    @property
    def era(self) -> CopticEra:
        return CopticEra.AM if self._year >= 1 else CopticEra.BEFORE_AM


CopticChronology.INSTANCE = register_chronology(CopticChronology())


__all__ = ["CopticChronology", "CopticDate"]
