"""The Symmetry454 and Symmetry010 perennial calendars.

Both calendars divide the year into four identical quarters of 91 days
(13 weeks), so every year and every quarter starts on a Monday. They
differ in how a quarter is split into months:

- Symmetry454 uses months of 4, 5 and 4 whole weeks (28, 35, 28 days).
- Symmetry010 uses months of 30, 31 and 30 days.

Leap years add a leap week at the end of December. A year is a leap
year when ``(52 * year + 146) % 293 < 52``, giving 52 leap years in
every 293-year cycle. Year 1 starts on ISO 0001-01-01.

Examples:
    >>> Symmetry454Date(1970, 1, 4).to_iso_date()
    datetime.date(1970, 1, 1)
    >>> Symmetry010Date(2000, 1, 1).to_iso_date()
    datetime.date(2000, 1, 3)
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from altchrono._internal.calendar import trunc_div
from altchrono._internal.constants import DAYS_0001_TO_1970
from altchrono._internal.validation import check_valid_value, validate_day, validate_range
from altchrono.core.chronology import Chronology, register_chronology
from altchrono.core.date import AbstractDate
from altchrono.core.period import ChronoPeriod
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, ValidationError
from altchrono.units.era import IsoEra
from altchrono.units.field import Field

S = TypeVar("S", bound="SymmetryDate")

DAYS_IN_WEEK: int = 7
MONTHS_IN_YEAR: int = 12
WEEKS_IN_YEAR: int = 52
DAYS_IN_QUARTER: int = 13 * DAYS_IN_WEEK
DAYS_IN_YEAR: int = 4 * DAYS_IN_QUARTER
DAYS_IN_YEAR_LONG: int = DAYS_IN_YEAR + DAYS_IN_WEEK
YEARS_IN_CYCLE: int = 293
DAYS_PER_CYCLE: int = YEARS_IN_CYCLE * DAYS_IN_YEAR + WEEKS_IN_YEAR * DAYS_IN_WEEK

MIN_YEAR: int = -1_000_000
MAX_YEAR: int = 1_000_000


def is_symmetry_leap_year(year: int) -> bool:
    """Check the Symmetry leap rule.

    Examples:
        >>> is_symmetry_leap_year(2015)
        True
        >>> is_symmetry_leap_year(2016)
        False
    """
    return (WEEKS_IN_YEAR * year + 146) % YEARS_IN_CYCLE < WEEKS_IN_YEAR


def leap_years_before(year: int) -> int:
    """Return the leap years between year 1 and the given year."""
    return (WEEKS_IN_YEAR * (year - 1) + 146) // YEARS_IN_CYCLE


def symmetry_to_epoch_day(year: int, day_of_year: int) -> int:
    """Convert a year and day-of-year to an epoch day."""
    return (
        (year - 1) * DAYS_IN_YEAR
        + leap_years_before(year) * DAYS_IN_WEEK
        + day_of_year
        - DAYS_0001_TO_1970
        - 1
    )


def symmetry_year_day_of(epoch_day: int) -> tuple[int, int]:
    """Convert an epoch day to (year, day-of-year) without range checks."""
    zero_day = epoch_day + DAYS_0001_TO_1970 + 1
    year = 1 + YEARS_IN_CYCLE * zero_day // DAYS_PER_CYCLE
    day_of_year = zero_day - ((year - 1) * DAYS_IN_YEAR + leap_years_before(year) * DAYS_IN_WEEK)
    while day_of_year < 1:
        year -= 1
        day_of_year += DAYS_IN_YEAR_LONG if is_symmetry_leap_year(year) else DAYS_IN_YEAR
    while True:
        length = DAYS_IN_YEAR_LONG if is_symmetry_leap_year(year) else DAYS_IN_YEAR
        if day_of_year <= length:
            return year, day_of_year
        day_of_year -= length
        year += 1


_EPOCH_DAY_RANGE = ValueRange.of(
    symmetry_to_epoch_day(MIN_YEAR, 1),
    symmetry_to_epoch_day(MAX_YEAR + 1, 1) - 1,
)

_SHARED_RANGES: dict[Field, ValueRange] = {
    Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, WEEKS_IN_YEAR, WEEKS_IN_YEAR + 1),
    Field.DAY_OF_YEAR: ValueRange.of(1, DAYS_IN_YEAR, DAYS_IN_YEAR_LONG),
    Field.EPOCH_DAY: _EPOCH_DAY_RANGE,
    Field.MONTH_OF_YEAR: ValueRange.of(1, MONTHS_IN_YEAR),
    Field.PROLEPTIC_MONTH: ValueRange.of(
        MIN_YEAR * MONTHS_IN_YEAR, MAX_YEAR * MONTHS_IN_YEAR + MONTHS_IN_YEAR - 1
    ),
    Field.YEAR_OF_ERA: ValueRange.of(1, 1 - MIN_YEAR),
    Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
}


class SymmetryChronology(Chronology):
    """Rules shared by the Symmetry calendars."""

    __slots__ = ()

    ERA_CLASS = IsoEra

    def is_leap_year(self, year: int) -> bool:
        return is_symmetry_leap_year(year)


class SymmetryDate(AbstractDate):
    """A date in one of the Symmetry calendars.

    Subclasses set the lengths of the short and the long month of each
    quarter and provide the chronology property. The long month is the
    second month of each quarter; December grows by the leap week.
    """

    __slots__ = ("_year", "_month", "_day")

    DAYS_IN_MONTH: ClassVar[int]
    DAYS_IN_MONTH_LONG: ClassVar[int]

    @validate_range(year=(MIN_YEAR, MAX_YEAR), month=(1, MONTHS_IN_YEAR))
    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a date from proleptic year, month and day-of-month.

        Raises:
            ValidationError: If a field is out of range, or the day falls
                in the leap week of a non-leap year.
        """
        validate_day(day, self._month_length(year, month), year, month)
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _month_length(cls, year: int, month: int) -> int:
        if month == MONTHS_IN_YEAR and is_symmetry_leap_year(year):
            return cls.DAYS_IN_MONTH + DAYS_IN_WEEK
        if month % 3 == 2:
            return cls.DAYS_IN_MONTH_LONG
        return cls.DAYS_IN_MONTH

    @classmethod
    def _create(cls: type[S], year: int, month: int, day: int) -> S:
        date = object.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls: type[S], year: int, month: int, day: int) -> S:
        """Create a date; see the constructor."""
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls: type[S], year: int, day_of_year: int) -> S:
        """Create a date from a year and day-of-year.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        check_valid_value(day_of_year, 1, DAYS_IN_YEAR_LONG, "day_of_year")
        if day_of_year > DAYS_IN_YEAR and not is_symmetry_leap_year(year):
            raise ValidationError(f"day_of_year {day_of_year} is invalid, {year} is not a leap year")
        quarter = (min(day_of_year, DAYS_IN_YEAR) - 1) // DAYS_IN_QUARTER
        day = day_of_year - quarter * DAYS_IN_QUARTER
        month = 1 + quarter * 3
        # Leap week days run on past the quarter and stay in December
        if day > cls.DAYS_IN_MONTH + cls.DAYS_IN_MONTH_LONG:
            month += 2
            day -= cls.DAYS_IN_MONTH + cls.DAYS_IN_MONTH_LONG
        elif day > cls.DAYS_IN_MONTH:
            month += 1
            day -= cls.DAYS_IN_MONTH
        return cls._create(year, month, day)

    @classmethod
    def of_epoch_day(cls: type[S], epoch_day: int) -> S:
        """Create a date from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        if not _EPOCH_DAY_RANGE.is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the range of {cls.__name__}")
        return cls.of_year_day(*symmetry_year_day_of(epoch_day))

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

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
    def era(self) -> IsoEra:
        return IsoEra.CE if self._year >= 1 else IsoEra.BCE

    @property
    def day_of_year(self) -> int:
        long_extra = self.DAYS_IN_MONTH_LONG - self.DAYS_IN_MONTH
        return self.DAYS_IN_MONTH * (self._month - 1) + long_extra * (self._month // 3) + self._day

    @property
    def day_of_week(self) -> int:
        """Return the day of week; every year starts on a Monday."""
        return (self.day_of_year - 1) % DAYS_IN_WEEK + 1

    def is_leap_year(self) -> bool:
        return is_symmetry_leap_year(self._year)

    def is_leap_week(self) -> bool:
        """Return True if this date falls in the leap week."""
        return self.is_leap_year() and self.day_of_year > DAYS_IN_YEAR

    def length_of_month(self) -> int:
        return self._month_length(self._year, self._month)

    def length_of_year(self) -> int:
        return DAYS_IN_YEAR_LONG if self.is_leap_year() else DAYS_IN_YEAR

    def months_in_year(self) -> int:
        return MONTHS_IN_YEAR

    def to_epoch_day(self) -> int:
        return symmetry_to_epoch_day(self._year, self.day_of_year)

    def range(self, field: Field) -> ValueRange:
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(1, WEEKS_IN_YEAR + (1 if self.is_leap_year() else 0))
        return super().range(field)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _resolve_previous(self: S, year: int, month: int, day: int) -> S:
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise DateRangeError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        month = min(month, MONTHS_IN_YEAR)
        return type(self)._create(year, month, min(day, self._month_length(year, month)))

    def _resolve_epoch_day(self: S, epoch_day: int) -> S:
        return type(self).of_epoch_day(epoch_day)

    def _years_until(self, end: AbstractDate) -> int:
        other = type(self).from_date(end)
        start = self._year * 512 + self.day_of_year
        finish = other._year * 512 + other.day_of_year
        return trunc_div(finish - start, 512)

    def _period_until(self, end: AbstractDate) -> ChronoPeriod:
        years = self._years_until(end)
        same_year = self.plus_years(years)
        months = same_year._months_until(end)
        days = end.to_epoch_day() - same_year.plus_months(months).to_epoch_day()
        return self.chronology.period(years, months, days)


class Symmetry454Chronology(SymmetryChronology):
    """The Symmetry454 calendar system.

    Examples:
        >>> Symmetry454Chronology.INSTANCE.range(Field.DAY_OF_MONTH)
        ValueRange(1, 28, 35)
    """

    __slots__ = ()

    INSTANCE: ClassVar[Symmetry454Chronology]
    RANGES: ClassVar[dict[Field, ValueRange]] = {
        **_SHARED_RANGES,
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 4, 5),
        Field.DAY_OF_MONTH: ValueRange.of(1, 28, 35),
    }

    @property
    def id(self) -> str:
        return "Sym454"

    def date(self, year: int, month: int, day: int) -> Symmetry454Date:
        return Symmetry454Date(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> Symmetry454Date:
        return Symmetry454Date.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> Symmetry454Date:
        return Symmetry454Date.of_epoch_day(epoch_day)


class Symmetry454Date(SymmetryDate):
    """A date in the Symmetry454 calendar.

    Every month consists of whole weeks and starts on a Monday.

    Examples:
        >>> d = Symmetry454Date(2014, 5, 26)
        >>> d.day_of_year
        145
        >>> d.day_of_week
        5
        >>> str(Symmetry454Date(2015, 12, 35))
        'Sym454 CE 2015-12-35'
    """

    __slots__ = ()

    DAYS_IN_MONTH = 28
    DAYS_IN_MONTH_LONG = 35

    @property
    def chronology(self) -> Symmetry454Chronology:
        return Symmetry454Chronology.INSTANCE


class Symmetry010Chronology(SymmetryChronology):
    """The Symmetry010 calendar system.

    Examples:
        >>> Symmetry010Chronology.INSTANCE.range(Field.DAY_OF_MONTH)
        ValueRange(1, 30, 37)
    """

    __slots__ = ()

    INSTANCE: ClassVar[Symmetry010Chronology]
    RANGES: ClassVar[dict[Field, ValueRange]] = {
        **_SHARED_RANGES,
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 5, 6),
        Field.DAY_OF_MONTH: ValueRange.of(1, 30, 37),
    }

    @property
    def id(self) -> str:
        return "Sym010"

    def date(self, year: int, month: int, day: int) -> Symmetry010Date:
        return Symmetry010Date(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> Symmetry010Date:
        return Symmetry010Date.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> Symmetry010Date:
        return Symmetry010Date.of_epoch_day(epoch_day)


class Symmetry010Date(SymmetryDate):
    """A date in the Symmetry010 calendar.

    Months have 30, 31 and 30 days, so only the first month of each
    quarter starts on a Monday.

    Examples:
        >>> Symmetry010Date(1970, 1, 4).to_iso_date()
        datetime.date(1970, 1, 1)
        >>> Symmetry010Date(2014, 5, 26).day_of_year
        147
    """

    __slots__ = ()

    DAYS_IN_MONTH = 30
    DAYS_IN_MONTH_LONG = 31

    @property
    def chronology(self) -> Symmetry010Chronology:
        return Symmetry010Chronology.INSTANCE


Symmetry454Chronology.INSTANCE = register_chronology(Symmetry454Chronology())
Symmetry010Chronology.INSTANCE = register_chronology(Symmetry010Chronology())


__all__ = [
    "Symmetry010Chronology",
    "Symmetry010Date",
    "Symmetry454Chronology",
    "Symmetry454Date",
    "SymmetryChronology",
    "SymmetryDate",
    "is_symmetry_leap_year",
]
