"""Field enumeration for calendar field queries.

This module provides the Field enum used by the get/with/range
protocol shared by every calendar date.
"""

from __future__ import annotations

from enum import Enum


class Field(Enum):
    """Named fields that can be queried on a calendar date.

    Date-based fields are understood by every calendar, although each
    calendar reports its own ranges for them. Time-based fields exist
    so callers can probe support; every date rejects them.

    Examples:
        >>> Field.DAY_OF_MONTH.is_date_based
        True

        >>> Field.HOUR_OF_DAY.is_date_based
        False
    """

    DAY_OF_WEEK = "DayOfWeek"
    ALIGNED_DAY_OF_WEEK_IN_MONTH = "AlignedDayOfWeekInMonth"
    ALIGNED_DAY_OF_WEEK_IN_YEAR = "AlignedDayOfWeekInYear"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    ALIGNED_WEEK_OF_MONTH = "AlignedWeekOfMonth"
    ALIGNED_WEEK_OF_YEAR = "AlignedWeekOfYear"
    MONTH_OF_YEAR = "MonthOfYear"
    PROLEPTIC_MONTH = "ProlepticMonth"
    YEAR_OF_ERA = "YearOfEra"
    YEAR = "Year"
    ERA = "Era"

    NANO_OF_SECOND = "NanoOfSecond"
    SECOND_OF_MINUTE = "SecondOfMinute"
    MINUTE_OF_HOUR = "MinuteOfHour"
    MINUTE_OF_DAY = "MinuteOfDay"
    HOUR_OF_DAY = "HourOfDay"

    @property
    def is_date_based(self) -> bool:
        """Return True if this field describes part of a date."""
        return self not in _TIME_FIELDS

    def __str__(self) -> str:
        return self.value


_TIME_FIELDS = frozenset(
    {
        Field.NANO_OF_SECOND,
        Field.SECOND_OF_MINUTE,
        Field.MINUTE_OF_HOUR,
        Field.MINUTE_OF_DAY,
        Field.HOUR_OF_DAY,
    }
)


__all__ = ["Field"]
