"""Calendar-agnostic date arithmetic.

This module implements the arithmetic shared by every calendar once,
as free functions over the primitives each date type provides
(proleptic year, month, day-of-month, day-of-year, month and year
lengths, months per year, epoch day and end-of-month resolution).

Clamping behavior:
    Adding months or years never rolls into the following month. When
    the target month is shorter than the original day-of-month, the
    date type's resolve_previous picks the last valid day instead:

    CopticDate(1728, 12, 30) + 1 month  -> CopticDate(1728, 13, 5)
    JulianDate(2012, 1, 31) + 1 month   -> JulianDate(2012, 2, 29)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from altchrono._internal.calendar import trunc_div, trunc_mod
from altchrono.errors import DateRangeError, UnsupportedFieldError
from altchrono.units.field import Field
from altchrono.units.unit import ChronoUnit

if TYPE_CHECKING:
    from altchrono.core.date import AbstractDate
    from altchrono.core.period import ChronoPeriod

D = TypeVar("D", bound="AbstractDate")


def check_year(date: AbstractDate, year: int) -> int:
    """Check an arithmetic result year against the calendar's year range.

    Raises:
        DateRangeError: If the year cannot be represented.
    """
    year_range = date.chronology.range(Field.YEAR)
    if not year_range.is_valid_value(year):
        raise DateRangeError(
            f"year {year} is outside the supported range "
            f"{year_range.minimum} to {year_range.maximum}"
        )
    return year


def plus_days(date: D, days: int) -> D:
    """Return the date shifted by a number of days.

    Works through the epoch day, so it is correct across every calendar
    irregularity (leap days, leap weeks, cutover gaps).
    """
    if days == 0:
        return date
    return date._resolve_epoch_day(date.to_epoch_day() + days)


def plus_weeks(date: D, weeks: int) -> D:
    """Return the date shifted by whole weeks of the calendar's week length."""
    return plus_days(date, weeks * date.length_of_week())


def plus_months(date: D, months: int) -> D:
    """Return the date shifted by a number of months.

    The proleptic month is split back into year and month with floor
    division, then the day is resolved with end-of-month clamping.

    Raises:
        DateRangeError: If the result leaves the supported year range.
    """
    if months == 0:
        return date
    per_year = date.months_in_year()
    calc_month = date.proleptic_month + months
    year = check_year(date, calc_month // per_year)
    month = calc_month % per_year + 1
    return date._resolve_previous(year, month, date.day_of_month)


def plus_years(date: D, years: int) -> D:
    """Return the date shifted by a number of years.

    Raises:
        DateRangeError: If the result leaves the supported year range.
    """
    if years == 0:
        return date
    year = check_year(date, date.proleptic_year + years)
    return date._resolve_previous(year, date.month, date.day_of_month)


def plus(date: D, amount: int, unit: ChronoUnit) -> D:
    """Return the date shifted by an amount of a unit.

    Raises:
        UnsupportedFieldError: If the unit is smaller than a day.
        DateRangeError: If the result leaves the supported range.
    """
    if unit is ChronoUnit.DAYS:
        return date.plus_days(amount)
    if unit is ChronoUnit.WEEKS:
        return date.plus_weeks(amount)
    if unit is ChronoUnit.MONTHS:
        return date.plus_months(amount)
    if unit is ChronoUnit.ERAS:
        return date.with_field(Field.ERA, date.get(Field.ERA) + amount)
    multiple = unit.years
    if multiple is not None:
        return date.plus_years(amount * multiple)
    raise UnsupportedFieldError(f"unsupported unit: {unit}")


def days_until(start: AbstractDate, end: AbstractDate) -> int:
    """Return the signed number of days from start to end."""
    return end.to_epoch_day() - start.to_epoch_day()


def weeks_until(start: AbstractDate, end: AbstractDate) -> int:
    """Return the number of complete weeks from start to end."""
    return trunc_div(days_until(start, end), start.length_of_week())


def months_until(start: AbstractDate, end: AbstractDate) -> int:
    """Return the number of complete months from start to end.

    Proleptic month and day-of-month are packed into one number so that
    a month only counts once the day-of-month has been reached.
    """
    packed1 = start.proleptic_month * 256 + start.day_of_month
    packed2 = end.proleptic_month * 256 + end.day_of_month
    return trunc_div(packed2 - packed1, 256)


def until(start: AbstractDate, end: AbstractDate, unit: ChronoUnit) -> int:
    """Return the amount of whole units between two dates of one calendar.

    The result is negative when end is before start, and truncated
    toward zero.

    Raises:
        UnsupportedFieldError: If the unit is smaller than a day.
    """
    if unit is ChronoUnit.DAYS:
        return days_until(start, end)
    if unit is ChronoUnit.WEEKS:
        return start._weeks_until(end)
    if unit is ChronoUnit.MONTHS:
        return start._months_until(end)
    if unit is ChronoUnit.ERAS:
        return end.get(Field.ERA) - start.get(Field.ERA)
    multiple = unit.years
    if multiple is not None:
        return trunc_div(start._years_until(end), multiple)
    raise UnsupportedFieldError(f"unsupported unit: {unit}")


def period_until(start: AbstractDate, end: AbstractDate) -> ChronoPeriod:
    """Return the period between two dates of one calendar.

    Whole months are counted from the start date. When the end's
    day-of-month has not been reached, one month fewer is counted and
    the remainder is taken in days, so no invalid intermediate date is
    ever formed.
    """
    total_months = end.proleptic_month - start.proleptic_month
    days = end.day_of_month - start.day_of_month
    if total_months > 0 and days < 0:
        total_months -= 1
        calc_date = start.plus_months(total_months)
        days = end.to_epoch_day() - calc_date.to_epoch_day()
    elif total_months < 0 and days > 0:
        total_months += 1
        days -= end.length_of_month()
    per_year = start.months_in_year()
    years = trunc_div(total_months, per_year)
    months = trunc_mod(total_months, per_year)
    return start.chronology.period(years, months, days)


def with_field(date: D, field: Field, value: int) -> D:
    """Return a copy of the date with one field changed.

    The value is first checked against the date's range for the field.
    Week-based fields move the date by days or weeks; month and year
    fields keep the day-of-month where possible and clamp otherwise.

    Raises:
        ValidationError: If the value is outside the field's range.
        UnsupportedFieldError: If the field is not date-based.
    """
    date.range(field).check_valid_value(value, field)
    return apply_field(date, field, value)


def apply_field(date: D, field: Field, value: int) -> D:
    """Apply an already validated field value; see with_field."""
    week = date.length_of_week()
    if field is Field.DAY_OF_WEEK:
        return date.plus_days(value - date.day_of_week)
    if field is Field.ALIGNED_DAY_OF_WEEK_IN_MONTH:
        return date.plus_days(value - date.aligned_day_of_week_in_month)
    if field is Field.ALIGNED_DAY_OF_WEEK_IN_YEAR:
        return date.plus_days(value - date.aligned_day_of_week_in_year)
    if field is Field.DAY_OF_MONTH:
        return date._resolve_previous(date.proleptic_year, date.month, value)
    if field is Field.DAY_OF_YEAR:
        return date.plus_days(value - date.day_of_year)
    if field is Field.EPOCH_DAY:
        return date._resolve_epoch_day(value)
    if field is Field.ALIGNED_WEEK_OF_MONTH:
        return date.plus_days((value - date.aligned_week_of_month) * week)
    if field is Field.ALIGNED_WEEK_OF_YEAR:
        return date.plus_days((value - date.aligned_week_of_year) * week)
    if field is Field.MONTH_OF_YEAR:
        return date._resolve_previous(date.proleptic_year, value, date.day_of_month)
    if field is Field.PROLEPTIC_MONTH:
        return date.plus_months(value - date.proleptic_month)
    if field is Field.YEAR_OF_ERA:
        year = value if date.proleptic_year >= 1 else 1 - value
        return date._resolve_previous(year, date.month, date.day_of_month)
    if field is Field.YEAR:
        return date._resolve_previous(value, date.month, date.day_of_month)
    if field is Field.ERA:
        if value == date.get(Field.ERA):
            return date
        return date._resolve_previous(1 - date.proleptic_year, date.month, date.day_of_month)
    raise UnsupportedFieldError(f"unsupported field: {field}")


__all__ = [
    "apply_field",
    "check_year",
    "days_until",
    "months_until",
    "period_until",
    "plus",
    "plus_days",
    "plus_months",
    "plus_weeks",
    "plus_years",
    "until",
    "weeks_until",
    "with_field",
]
