"""The proleptic Julian calendar.

The Julian calendar has the same months as the ISO calendar and a leap
year every fourth year without exception. Year 1 AD starts two days
before ISO year 1 (Julian 0001-01-01 = ISO 0000-12-30), and the gap
grows by three days every four centuries.

Examples:
    >>> JulianDate(1582, 10, 5).to_iso_date()
    datetime.date(1582, 10, 15)
"""

from __future__ import annotations

from typing import ClassVar

from altchrono._internal.calendar import days_before_month, month_day_from_day_of_year
from altchrono._internal.constants import DAYS_IN_MONTH, MJD_UNIX_EPOCH
from altchrono._internal.validation import check_valid_value, validate_day, validate_range
from altchrono.core.chronology import Chronology, register_chronology
from altchrono.core.date import AbstractDate
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, ValidationError
from altchrono.units.era import JulianEra
from altchrono.units.field import Field

# Julian 0001-01-01 is MJD -678577
JULIAN_0001_TO_ISO_1970: int = 678_577 + MJD_UNIX_EPOCH
DAYS_PER_CYCLE: int = 365 * 4 + 1

MIN_YEAR: int = -999_998
MAX_YEAR: int = 999_999


def is_julian_leap_year(year: int) -> bool:
    """Check the Julian leap rule: every year divisible by four."""
    return year % 4 == 0


def julian_length_of_month(year: int, month: int) -> int:
    """Return the number of days in a Julian month."""
    if month == 2 and is_julian_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def julian_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert Julian fields to an epoch day without validation."""
    y = year - 1
    day_of_year = days_before_month(month, is_julian_leap_year(year)) + day
    return y * 365 + y // 4 + day_of_year - 1 - JULIAN_0001_TO_ISO_1970


def julian_from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch day to Julian (year, month, day) without range checks."""
    # Counting from Julian 0001 puts the leap year at the end of each cycle
    julian_day = epoch_day + JULIAN_0001_TO_ISO_1970
    cycle, day_in_cycle = divmod(julian_day, DAYS_PER_CYCLE)
    if day_in_cycle == DAYS_PER_CYCLE - 1:
        year = cycle * 4 + 4
        day_of_year = 366
    else:
        year = cycle * 4 + day_in_cycle // 365 + 1
        day_of_year = day_in_cycle % 365 + 1
    month, day = month_day_from_day_of_year(day_of_year, is_julian_leap_year(year))
    return year, month, day


class JulianChronology(Chronology):
    """The Julian calendar system.

    Examples:
        >>> JulianChronology.INSTANCE.is_leap_year(1900)
        True
        >>> JulianChronology.INSTANCE.date(2012, 6, 23)
        JulianDate(2012, 6, 23)
    """

    __slots__ = ()

    INSTANCE: ClassVar[JulianChronology]
    ERA_CLASS = JulianEra
    RANGES: ClassVar[dict[Field, ValueRange]] = {
        Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR, -MIN_YEAR + 1),
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
        Field.PROLEPTIC_MONTH: ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
        Field.EPOCH_DAY: ValueRange.of(
            julian_to_epoch_day(MIN_YEAR, 1, 1),
            julian_to_epoch_day(MAX_YEAR, 12, 31),
        ),
    }

    @property
    def id(self) -> str:
        return "Julian"

    @property
    def calendar_type(self) -> str | None:
        return "julian"

    def date(self, year: int, month: int, day: int) -> JulianDate:
        return JulianDate(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> JulianDate:
        return JulianDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> JulianDate:
        return JulianDate.of_epoch_day(epoch_day)

    def is_leap_year(self, year: int) -> bool:
        """Check if a year is a Julian leap year (divisible by four).

        Examples:
            >>> JulianChronology.INSTANCE.is_leap_year(-4)
            True
        """
        return is_julian_leap_year(year)


class JulianDate(AbstractDate):
    """A date in the proleptic Julian calendar.

    Attributes:
        proleptic_year: The year (0 and negative years are BC).
        month: The month (1-12).
        day_of_month: The day of the month (1-31).

    Examples:
        >>> d = JulianDate(2012, 6, 23)
        >>> d.to_epoch_day()
        15527
        >>> str(d)
        'Julian AD 2012-06-23'
    """

    __slots__ = ("_year", "_month", "_day")

    @validate_range(month=(1, 12), day=(1, 31))
    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a JulianDate from year, month and day.

        Raises:
            ValidationError: If any field is out of range or the day
                does not exist in the month.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        validate_day(day, julian_length_of_month(year, month), year, month)
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls, year: int, month: int, day: int) -> JulianDate:
        date = object.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls, year: int, month: int, day: int) -> JulianDate:
        """Create a JulianDate; see the constructor."""
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> JulianDate:
        """Create a JulianDate from a year and day-of-year.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        leap = is_julian_leap_year(year)
        check_valid_value(day_of_year, 1, 366 if leap else 365, "day_of_year")
        month, day = month_day_from_day_of_year(day_of_year, leap)
        return cls._create(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> JulianDate:
        """Create a JulianDate from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        year, month, day = julian_from_epoch_day(epoch_day)
        if year < MIN_YEAR or year > MAX_YEAR:
            raise DateRangeError(f"epoch day {epoch_day} is outside the Julian range")
        return cls._create(year, month, day)

    @property
    def chronology(self) -> JulianChronology:
        return JulianChronology.INSTANCE

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
        return days_before_month(self._month, self.is_leap_year()) + self._day

    @property
    def era(self) -> JulianEra:
        return JulianEra.AD if self._year >= 1 else JulianEra.BC

    def is_leap_year(self) -> bool:
        return is_julian_leap_year(self._year)

    def length_of_month(self) -> int:
        return julian_length_of_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year() else 365

    def months_in_year(self) -> int:
        return 12

    def to_epoch_day(self) -> int:
        return julian_to_epoch_day(self._year, self._month, self._day)

    def _resolve_previous(self, year: int, month: int, day: int) -> JulianDate:
        check_valid_value(month, 1, 12, "month")
        if year < MIN_YEAR or year > MAX_YEAR:
            raise ValidationError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        return JulianDate._create(year, month, min(day, julian_length_of_month(year, month)))

    def _resolve_epoch_day(self, epoch_day: int) -> JulianDate:
        return JulianDate.of_epoch_day(epoch_day)


JulianChronology.INSTANCE = register_chronology(JulianChronology())


__all__ = [
    "JULIAN_0001_TO_ISO_1970",
    "JulianChronology",
    "JulianDate",
    "is_julian_leap_year",
    "julian_from_epoch_day",
    "julian_length_of_month",
    "julian_to_epoch_day",
]
