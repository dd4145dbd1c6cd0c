"""ISO day-of-week and month-of-year names.

These enums name the ISO weekdays and months used to configure
calendars that are anchored to the ISO calendar, such as the
Accounting calendar's year end. Both are IntEnums, so plain integers
(Monday = 1, January = 1) are accepted wherever a member is expected.
"""

from __future__ import annotations

from enum import IntEnum

from altchrono._internal.validation import check_valid_value


class DayOfWeek(IntEnum):
    """An ISO day of the week, Monday = 1 to Sunday = 7.

    Examples:
        >>> DayOfWeek.of(7)
        <DayOfWeek.SUNDAY: 7>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int) -> DayOfWeek:
        """Return the weekday with the given ISO number.

        Raises:
            ValidationError: If the value is not 1 to 7.
        """
        return cls(check_valid_value(int(value), 1, 7, "day_of_week"))


class Month(IntEnum):
    """An ISO month of the year, January = 1 to December = 12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: int) -> Month:
        """Return the month with the given number.

        Raises:
            ValidationError: If the value is not 1 to 12.
        """
        return cls(check_valid_value(int(value), 1, 12, "month"))


__all__ = ["DayOfWeek", "Month"]
