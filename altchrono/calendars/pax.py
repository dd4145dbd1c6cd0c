"""The Pax calendar.

The Pax calendar has thirteen months of four weeks each, so every year
and every month starts on a Sunday. Leap years insert a one-week month
named Pax before the final month, which then becomes month 14.

A year is a leap year when its last two digits are divisible by six, or
are 99, or are 00 and the year is not divisible by 400.

Examples:
    >>> PaxDate(2012, 6, 23).to_iso_date()
    datetime.date(2012, 6, 4)
    >>> PaxDate(6, 14, 1).to_iso_date()
    datetime.date(6, 12, 3)
"""

from __future__ import annotations

from typing import ClassVar

from altchrono._internal.calendar import trunc_div
from altchrono._internal.validation import check_valid_value, validate_range
from altchrono.arithmetic import date_ops
from altchrono.core.chronology import Chronology, register_chronology
from altchrono.core.date import AbstractDate
from altchrono.core.period import ChronoPeriod
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, ValidationError
from altchrono.units.era import IsoEra
from altchrono.units.field import Field

DAYS_IN_WEEK: int = 7
WEEKS_IN_MONTH: int = 4
MONTHS_IN_YEAR: int = 13
DAYS_IN_MONTH: int = WEEKS_IN_MONTH * DAYS_IN_WEEK
DAYS_IN_YEAR: int = MONTHS_IN_YEAR * DAYS_IN_MONTH
WEEKS_IN_YEAR: int = DAYS_IN_YEAR // DAYS_IN_WEEK

# Pax 0001-01-01 is ISO 0000-12-31
PAX_0001_TO_ISO_1970: int = 719_163
DAYS_PER_LONG_CYCLE: int = DAYS_IN_YEAR * 400 + DAYS_IN_WEEK * 71
DAYS_PER_CYCLE: int = DAYS_IN_YEAR * 100 + DAYS_IN_WEEK * 18
DAYS_PER_SIX_CYCLE: int = DAYS_IN_YEAR * 6 + DAYS_IN_WEEK

MIN_YEAR: int = -999_998
MAX_YEAR: int = 999_999


def is_pax_leap_year(year: int) -> bool:
    """Check the Pax leap rule.

    Examples:
        >>> is_pax_leap_year(2012)
        True
        >>> is_pax_leap_year(2000)
        False
        >>> is_pax_leap_year(1900)
        True
    """
    last_two_digits = abs(year) % 100
    return last_two_digits == 99 or (year % 400 != 0 and last_two_digits % 6 == 0)


def _leap_years_up_to(year: int) -> int:
    # Leap years from 1 to year inclusive, for year >= 0
    centuries, rest = divmod(year, 100)
    return 18 * centuries - year // 400 + rest // 6 + (1 if rest == 99 else 0)


def leap_years_before(year: int) -> int:
    """Return the leap years between year 1 and the given year.

    The count is negative for years before year 1. The rule is
    symmetric around year 0, so year -6 is a leap year just like year 6.
    """
    if year >= 1:
        return _leap_years_up_to(year - 1)
    return -_leap_years_up_to(-year)


def pax_to_epoch_day(year: int, day_of_year: int) -> int:
    """Convert a year and day-of-year to an epoch day."""
    pax_day = (year - 1) * DAYS_IN_YEAR + leap_years_before(year) * DAYS_IN_WEEK + day_of_year - 1
    return pax_day - PAX_0001_TO_ISO_1970


def _year_start_month(year: int) -> int:
    return year * MONTHS_IN_YEAR + leap_years_before(year)


class PaxChronology(Chronology):
    """The Pax calendar system.

    Examples:
        >>> PaxChronology.INSTANCE.range(Field.MONTH_OF_YEAR)
        ValueRange(1, 13, 14)
    """

    __slots__ = ()

    INSTANCE: ClassVar[PaxChronology]
    ERA_CLASS = IsoEra
    RANGES: ClassVar[dict[Field, ValueRange]] = {
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 1, WEEKS_IN_MONTH),
        Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, WEEKS_IN_YEAR, WEEKS_IN_YEAR + 1),
        Field.DAY_OF_MONTH: ValueRange.of(1, DAYS_IN_WEEK, DAYS_IN_MONTH),
        Field.DAY_OF_YEAR: ValueRange.of(1, DAYS_IN_YEAR, DAYS_IN_YEAR + DAYS_IN_WEEK),
        Field.EPOCH_DAY: ValueRange.of(
            pax_to_epoch_day(MIN_YEAR, 1),
            pax_to_epoch_day(MAX_YEAR + 1, 1) - 1,
        ),
        Field.MONTH_OF_YEAR: ValueRange.of(1, MONTHS_IN_YEAR, MONTHS_IN_YEAR + 1),
        Field.PROLEPTIC_MONTH: ValueRange.of(
            _year_start_month(MIN_YEAR), _year_start_month(MAX_YEAR + 1) - 1
        ),
        Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR),
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    }

    @property
    def id(self) -> str:
        return "Pax"

    @property
    def calendar_type(self) -> str | None:
        return "pax"

    def date(self, year: int, month: int, day: int) -> PaxDate:
        return PaxDate(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> PaxDate:
        return PaxDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> PaxDate:
        return PaxDate.of_epoch_day(epoch_day)

    def is_leap_year(self, year: int) -> bool:
        return is_pax_leap_year(year)


class PaxDate(AbstractDate):
    """A date in the Pax calendar.

    In a leap year month 13 is the one-week month Pax and month 14 is
    December. In other years month 13 is December.

    Examples:
        >>> d = PaxDate(2014, 5, 26)
        >>> d.day_of_year
        138
        >>> d.plus_months(-5)
        PaxDate(2013, 13, 26)
        >>> str(PaxDate(2012, 13, 7))
        'Pax CE 2012-13-07'
    """

    __slots__ = ("_year", "_month", "_day")

    @validate_range(year=(MIN_YEAR, MAX_YEAR), month=(1, MONTHS_IN_YEAR + 1), day=(1, DAYS_IN_MONTH))
    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a date from proleptic year, month and day-of-month.

        Raises:
            ValidationError: If a field is out of range, month 14 is
                requested in a non-leap year, or the day does not exist
                in the one-week Pax month.
        """
        leap = is_pax_leap_year(year)
        if month == MONTHS_IN_YEAR + 1 and not leap:
            raise ValidationError(f"invalid month 14, {year} is not a leap year")
        if month == MONTHS_IN_YEAR and leap and day > DAYS_IN_WEEK:
            raise ValidationError(
                f"day must be between 1 and {DAYS_IN_WEEK} for the Pax month of {year}, got {day}"
            )
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls, year: int, month: int, day: int) -> PaxDate:
        date = object.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls, year: int, month: int, day: int) -> PaxDate:
        """Create a date; see the constructor."""
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> PaxDate:
        """Create a date from a year and day-of-year.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        check_valid_value(day_of_year, 1, DAYS_IN_YEAR + DAYS_IN_WEEK, "day_of_year")
        leap = is_pax_leap_year(year)
        if day_of_year > DAYS_IN_YEAR and not leap:
            raise ValidationError(f"day_of_year {day_of_year} is invalid, {year} is not a leap year")
        month = (day_of_year - 1) // DAYS_IN_MONTH + 1
        # The short Pax month pushes the rest of the year into month 14
        if leap and month == MONTHS_IN_YEAR and day_of_year > DAYS_IN_YEAR + DAYS_IN_WEEK - DAYS_IN_MONTH:
            month += 1
        day = day_of_year - (month - 1) * DAYS_IN_MONTH
        if month == MONTHS_IN_YEAR + 1:
            day += DAYS_IN_MONTH - DAYS_IN_WEEK
        return cls._create(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> PaxDate:
        """Create a date from an epoch day.

        The day is located within a 400-year cycle, then its century,
        then the run of six-year leap cycles inside that century.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        epoch_range = PaxChronology.RANGES[Field.EPOCH_DAY]
        if not epoch_range.is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the Pax range")
        # Counting from Pax 0001 puts the non-leap century year at the end of the long cycle
        pax_day = epoch_day + PAX_0001_TO_ISO_1970
        long_cycle, day_of_long_cycle = divmod(pax_day, DAYS_PER_LONG_CYCLE)
        cycle, day_of_cycle = divmod(day_of_long_cycle, DAYS_PER_CYCLE)
        century_start = long_cycle * 400 + cycle * 100
        century_year_start = DAYS_PER_CYCLE - DAYS_IN_YEAR - DAYS_IN_WEEK
        if day_of_cycle >= century_year_start:
            return cls.of_year_day(century_start + 100, day_of_cycle - century_year_start + 1)

        if pax_day >= 0:
            year_99_start = DAYS_PER_CYCLE - 2 * (DAYS_IN_YEAR + DAYS_IN_WEEK)
            if day_of_cycle >= year_99_start:
                return cls.of_year_day(century_start + 99, day_of_cycle - year_99_start + 1)
            offset_in_cycle = day_of_cycle
            first_year = century_start
        else:
            # Before year 1 the '99 leap year opens the century
            if day_of_cycle < DAYS_IN_YEAR + DAYS_IN_WEEK:
                return cls.of_year_day(century_start + 1, day_of_cycle + 1)
            offset_in_cycle = day_of_cycle + 2 * DAYS_IN_YEAR - DAYS_IN_WEEK
            first_year = century_start - 2
        six_cycle, day_of_six_cycle = divmod(offset_in_cycle, DAYS_PER_SIX_CYCLE)
        year_in_six_cycle, day_of_year0 = divmod(day_of_six_cycle, DAYS_IN_YEAR)
        if year_in_six_cycle == 6:
            # The leap week at the end of the sixth year
            year_in_six_cycle = 5
            day_of_year0 += DAYS_IN_YEAR
        return cls.of_year_day(first_year + six_cycle * 6 + year_in_six_cycle + 1, day_of_year0 + 1)

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    @property
    def chronology(self) -> PaxChronology:
        return PaxChronology.INSTANCE

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
        day_of_year = (self._month - 1) * DAYS_IN_MONTH + self._day
        if self._month == MONTHS_IN_YEAR + 1:
            day_of_year -= DAYS_IN_MONTH - DAYS_IN_WEEK
        return day_of_year

    @property
    def proleptic_month(self) -> int:
        return _year_start_month(self._year) + self._month - 1

    def is_leap_year(self) -> bool:
        return is_pax_leap_year(self._year)

    def length_of_month(self) -> int:
        if self._month == MONTHS_IN_YEAR and self.is_leap_year():
            return DAYS_IN_WEEK
        return DAYS_IN_MONTH

    def length_of_year(self) -> int:
        return DAYS_IN_YEAR + (DAYS_IN_WEEK if self.is_leap_year() else 0)

    def months_in_year(self) -> int:
        return MONTHS_IN_YEAR + (1 if self.is_leap_year() else 0)

    def length_of_year_in_months(self) -> int:
        """Return 14 in leap years and 13 otherwise."""
        return self.months_in_year()

    def to_epoch_day(self) -> int:
        return pax_to_epoch_day(self._year, self.day_of_year)

    def range(self, field: Field) -> ValueRange:
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(1, WEEKS_IN_YEAR + (1 if self.is_leap_year() else 0))
        if field is Field.MONTH_OF_YEAR:
            return ValueRange.of(1, self.months_in_year())
        return super().range(field)

    def with_field(self, field: Field, value: int) -> PaxDate:
        """Return a copy with one field changed.

        Changing the year goes through plus_years, so December stays
        December when the Pax month appears or disappears.
        """
        if field is Field.YEAR:
            PaxChronology.INSTANCE.range(field).check_valid_value(value, field)
            return self.plus_years(value - self._year)
        return super().with_field(field, value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_years(self, years: int) -> PaxDate:
        """Return a copy with years added.

        December keeps being December: it moves to month 14 when the
        target year is a leap year and back to month 13 otherwise.

        Raises:
            DateRangeError: If the result leaves the supported year range.
        """
        if years == 0:
            return self
        year = date_ops.check_year(self, self._year + years)
        if self._month == MONTHS_IN_YEAR and not self.is_leap_year() and is_pax_leap_year(year):
            return PaxDate._create(year, MONTHS_IN_YEAR + 1, self._day)
        return self._resolve_previous(year, self._month, self._day)

    def plus_months(self, months: int) -> PaxDate:
        """Return a copy with months added, counting the Pax month.

        Raises:
            DateRangeError: If the result leaves the supported year range.
        """
        if months == 0:
            return self
        calc_month = self.proleptic_month + months
        # Thirteen months plus 71 leap months every 400 years
        year = calc_month * 400 // (MONTHS_IN_YEAR * 400 + 71)
        while _year_start_month(year) > calc_month:
            year -= 1
        while _year_start_month(year + 1) <= calc_month:
            year += 1
        date_ops.check_year(self, year)
        return self._resolve_previous(year, calc_month - _year_start_month(year) + 1, self._day)

    def _resolve_previous(self, year: int, month: int, day: int) -> PaxDate:
        leap = is_pax_leap_year(year)
        new_month = min(month, MONTHS_IN_YEAR + (1 if leap else 0))
        new_day = min(day, DAYS_IN_WEEK if month == MONTHS_IN_YEAR and leap else DAYS_IN_MONTH)
        return PaxDate(year, new_month, new_day)

    def _resolve_epoch_day(self, epoch_day: int) -> PaxDate:
        return PaxDate.of_epoch_day(epoch_day)

    def _years_until(self, end: AbstractDate) -> int:
        other = PaxDate.from_date(end)
        # December of a common year counts as if the Pax month preceded it
        start = self._year * 512 + self.day_of_year
        if self._month == MONTHS_IN_YEAR and not self.is_leap_year() and other.is_leap_year():
            start += DAYS_IN_WEEK
        finish = other._year * 512 + other.day_of_year
        if other._month == MONTHS_IN_YEAR and not other.is_leap_year() and self.is_leap_year():
            finish += DAYS_IN_WEEK
        return trunc_div(finish - start, 512)

    def _period_until(self, end: AbstractDate) -> ChronoPeriod:
        years = self._years_until(end)
        same_year = self.plus_years(years)
        months = same_year._months_until(end)
        days = end.to_epoch_day() - same_year.plus_months(months).to_epoch_day()
        return PaxChronology.INSTANCE.period(years, months, days)


PaxChronology.INSTANCE = register_chronology(PaxChronology())


__all__ = [
    "PaxChronology",
    "PaxDate",
    "is_pax_leap_year",
]
