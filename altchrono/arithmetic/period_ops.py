"""Period arithmetic operations for calendar dates.

This module provides functions for adding ChronoPeriod values to dates,
implementing the month overflow clamping of the shared date kernel.

Clamping behavior:
    When adding a period results in a day that does not exist in the
    target month, the day is clamped to the last valid day of that month.

Examples:
    JulianDate(2011, 1, 31) + period(0, 1, 0)  -> JulianDate(2011, 2, 28)
    PaxDate(2014, 5, 26) + period(0, 2, 2)     -> PaxDate(2014, 7, 28)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from altchrono.errors import ValidationError
from altchrono.units.field import Field
from altchrono.units.unit import ChronoUnit

if TYPE_CHECKING:
    from altchrono.core.date import AbstractDate
    from altchrono.core.period import ChronoPeriod

D = TypeVar("D", bound="AbstractDate")


def _months_per_year(period: ChronoPeriod) -> int | None:
    month_range = period.chronology.range(Field.MONTH_OF_YEAR)
    if not month_range.is_fixed:
        return None
    return month_range.maximum - month_range.minimum + 1


def add_period_to_date(date: D, period: ChronoPeriod) -> D:
    """Add a ChronoPeriod to a date, clamping the day if necessary.

    The components are applied in order:
    1. Years and months, as one month count where the calendar has a
       fixed number of months per year, else years before months
    2. Days

    Args:
        date: The date to add to.
        period: A period of the date's chronology.

    Returns:
        A new date offset by the period.

    Raises:
        ValidationError: If the period belongs to another chronology.

    Examples:
        >>> from altchrono import JulianDate, JulianChronology
        >>> add_period_to_date(JulianDate(2011, 1, 31), JulianChronology.INSTANCE.period(0, 1, 0))
        JulianDate(2011, 2, 28)
    """
    if date.chronology != period.chronology:
        raise ValidationError(
            f"chronology mismatch, expected {date.chronology.id}, "
            f"got {period.chronology.id}"
        )
    result = date
    per_year = _months_per_year(period)
    if per_year is not None:
        total_months = period.years * per_year + period.months
        if total_months != 0:
            result = result.plus(total_months, ChronoUnit.MONTHS)
    else:
        if period.years != 0:
            result = result.plus(period.years, ChronoUnit.YEARS)
        if period.months != 0:
            result = result.plus(period.months, ChronoUnit.MONTHS)
    if period.days != 0:
        result = result.plus(period.days, ChronoUnit.DAYS)
    return result


def subtract_period_from_date(date: D, period: ChronoPeriod) -> D:
    """Subtract a ChronoPeriod from a date.

    This is equivalent to adding the negated period.

    Args:
        date: The date to subtract from.
        period: A period of the date's chronology.

    Returns:
        A new date offset backwards by the period.

    Raises:
        ValidationError: If the period belongs to another chronology.
    """
    return add_period_to_date(date, -period)


__all__ = [
    "add_period_to_date",
    "subtract_period_from_date",
]
