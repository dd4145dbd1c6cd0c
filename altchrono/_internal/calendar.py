"""Calendar utilities for altchrono.

This module provides the proleptic ISO (Gregorian) kernel used as the
interchange calendar, together with the integer helpers the calendar
systems share: division truncating toward zero and weekday alignment.

Epoch day 0 = 1970-01-01 (ISO).

This module is not part of the public API.
"""

from __future__ import annotations

from altchrono._internal.constants import DAYS_0001_TO_1970, DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a Gregorian month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_100_YEARS = 36_524
_DAYS_PER_4_YEARS = 1_461


def days_before_month(month: int, leap: bool) -> int:
    """Return the number of days in the year before the first of the month.

    Shared by the Gregorian and Julian calendars, which differ only in
    their leap rule.

    Args:
        month: The month (1-12).
        leap: Whether the year is a leap year.

    Returns:
        Number of days before the month in that year.
    """
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and leap:
        result += 1
    return result


def month_day_from_day_of_year(day_of_year: int, leap: bool) -> tuple[int, int]:
    """Split a 1-based day-of-year into (month, day) for a 12-month year.

    Args:
        day_of_year: Day of the year, 1-365 (366 in leap years).
        leap: Whether the year is a leap year.

    Returns:
        Tuple of (month, day).
    """
    n = day_of_year - 1
    # Estimate is either exact or one too large
    month = (n + 50) >> 5
    preceding = days_before_month(month, leap)
    if preceding > n:
        month -= 1
        preceding = days_before_month(month, leap)
    return month, n - preceding + 1


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert an ISO year, month, day to an epoch day.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Days since 1970-01-01.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(0, 12, 31)
        -719163
    """
    # Python's // floors toward negative infinity, which keeps the
    # leap-year count correct for BCE years
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    ordinal = days_before_year + days_before_month(month, is_leap_year(year)) + day
    return ordinal - DAYS_0001_TO_1970 - 1


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day to an ISO year, month, day.

    Args:
        epoch_day: Days since 1970-01-01 (can be negative).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(-719163)
        (0, 12, 31)
    """
    # Days since 0001-01-01
    n = epoch_day + DAYS_0001_TO_1970
    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)
    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    if n1 == 4 or n100 == 4:
        # Last day of a leap cycle
        return year - 1, 12, 31
    leap = n1 == 3 and (n4 != 24 or n100 == 3)
    month, day = month_day_from_day_of_year(n + 1, leap)
    return year, month, day


def iso_day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week (Monday=1 .. Sunday=7) of an epoch day.

    Examples:
        >>> iso_day_of_week(0)  # 1970-01-01 was a Thursday
        4
    """
    return (epoch_day + 3) % 7 + 1


def previous_or_same(epoch_day: int, day_of_week: int) -> int:
    """Return the epoch day of the given ISO weekday on or before epoch_day."""
    return epoch_day - (iso_day_of_week(epoch_day) - day_of_week) % 7


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero.

    Examples:
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, 2)
        3
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching trunc_div, carrying the sign of the dividend.

    Examples:
        >>> trunc_mod(-7, 2)
        -1
    """
    return a - b * trunc_div(a, b)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_before_month",
    "month_day_from_day_of_year",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "iso_day_of_week",
    "previous_or_same",
    "trunc_div",
    "trunc_mod",
]
