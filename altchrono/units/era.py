"""Era enumerations for the calendar systems.

Each calendar family has its own era enum. Two-era calendars use value
0 for the era before year 1 and value 1 for the era starting at year 1;
the mapping to proleptic years is year = year_of_era in the later era
and year = 1 - year_of_era in the earlier one.
"""

from __future__ import annotations

from enum import Enum

from altchrono.errors import ValidationError


class CalendarEra(Enum):
    """Base class of all era enums.

    Subclasses declare members with integer values. Year 0 belongs to
    the earlier era (astronomical convention).

    Examples:
        >>> JulianEra.of(1)
        <JulianEra.AD: 1>

        >>> JulianEra.BC.is_before_epoch
        True
    """

    @classmethod
    def of(cls, value: int) -> CalendarEra:
        """Return the era with the given numeric value.

        Raises:
            ValidationError: If the value names no era of this calendar.
        """
        for era in cls:
            if era.value == value:
                return era
        raise ValidationError(f"invalid {cls.__name__} value: {value}")

    @property
    def is_before_epoch(self) -> bool:
        """Return True for the era that counts years backwards."""
        return self.value == 0

    def proleptic_year(self, year_of_era: int) -> int:
        """Convert a year-of-era in this era to a proleptic year."""
        return 1 - year_of_era if self.is_before_epoch else year_of_era


class IsoEra(CalendarEra):
    """Before Common Era / Common Era, as used by Pax and Symmetry."""

    BCE = 0
    CE = 1


class JulianEra(CalendarEra):
    """Eras of the Julian and cutover calendars."""

    BC = 0
    AD = 1


class CopticEra(CalendarEra):
    """Eras of the Coptic calendar (Anno Martyrum)."""

    BEFORE_AM = 0
    AM = 1


class DiscordianEra(CalendarEra):
    """The single Discordian era, Year of Our Lady of Discord."""

    YOLD = 1


class FrenchRepublicanEra(CalendarEra):
    """Eras of the French Republican calendar."""

    BEFORE_REPUBLICAN = 0
    REPUBLICAN = 1


class InternationalFixedEra(CalendarEra):
    """The single era of the International Fixed calendar."""

    CE = 1


class AccountingEra(CalendarEra):
    """Eras of the accounting calendars."""

    BCE = 0
    CE = 1


__all__ = [
    "CalendarEra",
    "IsoEra",
    "JulianEra",
    "CopticEra",
    "DiscordianEra",
    "FrenchRepublicanEra",
    "InternationalFixedEra",
    "AccountingEra",
]
