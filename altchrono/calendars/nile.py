"""Shared base for calendars with twelve 30-day months and a short 13th month.

The Coptic and French Republican calendars both have twelve months of
30 days followed by five epagomenal days (six in a leap year), and a
leap year every fourth year without exception. They differ only in
their epoch and in the week structure, so the arithmetic lives here and
each calendar supplies its epoch offset.
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from altchrono._internal.validation import check_valid_value, validate_day, validate_range
from altchrono.core.chronology import Chronology
from altchrono.core.date import AbstractDate
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, ValidationError
from altchrono.units.field import Field

N = TypeVar("N", bound="NileDate")

MIN_YEAR: int = -999_998
MAX_YEAR: int = 999_999
MONTHS_PER_YEAR: int = 13
DAYS_PER_CYCLE: int = 365 * 4 + 1


def is_nile_leap_year(year: int) -> bool:
    """Check the leap rule: the year before each multiple of four is long.

    Examples:
        >>> is_nile_leap_year(3)
        True
        >>> is_nile_leap_year(-1)
        True
    """
    return year % 4 == 3


def nile_length_of_month(year: int, month: int) -> int:
    """Return 30, or 5/6 for the epagomenal 13th month."""
    if month == 13:
        return 6 if is_nile_leap_year(year) else 5
    return 30


class NileChronology(Chronology):
    """Common rules of the Nile-style calendars."""

    __slots__ = ()

    RANGES: ClassVar[dict[Field, ValueRange]] = {
        Field.DAY_OF_MONTH: ValueRange.of(1, 5, 30),
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, 5),
        Field.MONTH_OF_YEAR: ValueRange.of(1, MONTHS_PER_YEAR),
        Field.PROLEPTIC_MONTH: ValueRange.of(
            MIN_YEAR * MONTHS_PER_YEAR, MAX_YEAR * MONTHS_PER_YEAR + 12
        ),
        Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR),
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    }

    def is_leap_year(self, year: int) -> bool:
        return is_nile_leap_year(year)


class NileDate(AbstractDate):
    """A date with twelve 30-day months and a 5 or 6 day 13th month.

    Subclasses set EPOCH_DAY_DIFFERENCE, the negated epoch day of their
    day 1 of month 1 of year 1, and provide the chronology property.
    """

    __slots__ = ("_year", "_month", "_day")

    EPOCH_DAY_DIFFERENCE: ClassVar[int]

    @validate_range(month=(1, 13), day=(1, 30))
    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a date from proleptic year, month and day-of-month.

        Raises:
            ValidationError: If a field is out of range, or the day does
                not exist in the 13th month of that year.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        validate_day(day, nile_length_of_month(year, month), year, month)
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls: type[N], year: int, month: int, day: int) -> N:
        date = object.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls: type[N], year: int, month: int, day: int) -> N:
        """Create a date; see the constructor."""
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls: type[N], year: int, day_of_year: int) -> N:
        """Create a date from a year and day-of-year.

        Raises:
            ValidationError: If the year is out of range or the
                day-of-year does not exist in the year.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        check_valid_value(day_of_year, 1, 366, "day_of_year")
        if day_of_year == 366 and not is_nile_leap_year(year):
            raise ValidationError(f"day_of_year 366 is invalid, {year} is not a leap year")
        return cls._create(year, (day_of_year - 1) // 30 + 1, (day_of_year - 1) % 30 + 1)

    @classmethod
    def of_epoch_day(cls: type[N], epoch_day: int) -> N:
        """Create a date from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        # Days since day 1 of year 1; the leap year ends each 4-year cycle
        nile_day = epoch_day + cls.EPOCH_DAY_DIFFERENCE
        year = (nile_day * 4 + 1463) // DAYS_PER_CYCLE
        if year < MIN_YEAR or year > MAX_YEAR:
            raise DateRangeError(
                f"epoch day {epoch_day} is outside the range of {cls.__name__}"
            )
        start_of_year = (year - 1) * 365 + year // 4
        day0 = nile_day - start_of_year
        return cls._create(year, day0 // 30 + 1, day0 % 30 + 1)

    @property
    def proleptic_year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day_of_month(self) -> int:
        return self._day

    @property
    def day_of_year(self) -> int:
        return (self._month - 1) * 30 + self._day

    def length_of_month(self) -> int:
        return nile_length_of_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 366 if is_nile_leap_year(self._year) else 365

    def months_in_year(self) -> int:
        return MONTHS_PER_YEAR

    def is_leap_year(self) -> bool:
        return is_nile_leap_year(self._year)

    def to_epoch_day(self) -> int:
        year = self._year
        return (year - 1) * 365 + year // 4 + self.day_of_year - 1 - self.EPOCH_DAY_DIFFERENCE

    def _range_aligned_week_of_month(self) -> ValueRange:
        return ValueRange.of(1, 1 if self._month == 13 else 29 // self.length_of_week() + 1)

    def _resolve_previous(self: N, year: int, month: int, day: int) -> N:
        check_valid_value(month, 1, MONTHS_PER_YEAR, "month")
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        return type(self)._create(year, month, min(day, nile_length_of_month(year, month)))

    def _resolve_epoch_day(self: N, epoch_day: int) -> N:
        return type(self).of_epoch_day(epoch_day)


__all__ = [
    "NileChronology",
    "NileDate",
    "is_nile_leap_year",
    "nile_length_of_month",
]
