"""ChronoUnit enumeration for date arithmetic.

This module provides the ChronoUnit enum naming the units in which
amounts can be added to a date or measured between two dates.
"""

from __future__ import annotations

from enum import Enum


class ChronoUnit(Enum):
    """Units of calendar arithmetic.

    DAYS and WEEKS are exact within one calendar; MONTHS and coarser
    units depend on the calendar's month and year structure. Units
    smaller than a day are listed so that dates can reject them.

    Examples:
        >>> ChronoUnit.DECADES.years
        10

        >>> ChronoUnit.DAYS.years is None
        True
    """

    NANOS = "Nanos"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"

    @property
    def is_date_based(self) -> bool:
        """Return True for units of one day or longer."""
        return self not in (
            ChronoUnit.NANOS,
            ChronoUnit.SECONDS,
            ChronoUnit.MINUTES,
            ChronoUnit.HOURS,
        )

    @property
    def years(self) -> int | None:
        """Return the number of years in one unit.

        Returns:
            The year multiple for YEARS and coarser year-based units,
            or None for other units (including ERAS).
        """
        multiples: dict[ChronoUnit, int] = {
            ChronoUnit.YEARS: 1,
            ChronoUnit.DECADES: 10,
            ChronoUnit.CENTURIES: 100,
            ChronoUnit.MILLENNIA: 1000,
        }
        return multiples.get(self)

    def __str__(self) -> str:
        return self.value


__all__ = ["ChronoUnit"]
