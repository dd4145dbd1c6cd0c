"""The International Fixed calendar.

The International Fixed (Cotsworth) calendar has thirteen months of
exactly four weeks, so every month starts on a Sunday. The 365th day,
Year Day, follows the 28th of the 13th month; in leap years Leap Day
follows the 28th of the 6th month. Neither day belongs to a month or a
week. Years coincide with ISO years and share the Gregorian leap rule.

Year Day is represented as month 0, day 0 and Leap Day as month -1,
day -1. Both have day-of-week 0.

Examples:
    >>> InternationalFixedDate(2012, 6, 16).to_iso_date()
    datetime.date(2012, 6, 4)
    >>> InternationalFixedDate.year_day(2012).to_iso_date()
    datetime.date(2012, 12, 31)
"""

from __future__ import annotations

from typing import ClassVar

from altchrono._internal.calendar import is_leap_year as is_iso_leap_year
from altchrono._internal.calendar import trunc_div
from altchrono._internal.constants import DAYS_0000_TO_1970
from altchrono._internal.validation import check_valid_value, validate_range
from altchrono.core.chronology import Chronology, register_chronology
from altchrono.core.date import AbstractDate
from altchrono.core.period import ChronoPeriod
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, UnsupportedFieldError, ValidationError
from altchrono.units.era import InternationalFixedEra
from altchrono.units.field import Field

DAYS_IN_WEEK: int = 7
WEEKS_IN_MONTH: int = 4
MONTHS_IN_YEAR: int = 13
DAYS_IN_MONTH: int = WEEKS_IN_MONTH * DAYS_IN_WEEK
DAYS_IN_YEAR: int = MONTHS_IN_YEAR * DAYS_IN_MONTH + 1
WEEKS_IN_YEAR: int = DAYS_IN_YEAR // DAYS_IN_WEEK
DAYS_PER_CYCLE: int = 146_097
LEAP_DAY_AS_DAY_OF_YEAR: int = 6 * DAYS_IN_MONTH + 1

MIN_YEAR: int = 1
MAX_YEAR: int = 1_000_000

_EMPTY = ValueRange.of(0, 0)
_WEEK_FIELDS = (
    Field.DAY_OF_WEEK,
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH,
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR,
    Field.ALIGNED_WEEK_OF_MONTH,
    Field.ALIGNED_WEEK_OF_YEAR,
)


def leap_years_before(year: int) -> int:
    """Return the number of leap years from year 1 up to year - 1."""
    before = year - 1
    return before // 4 - before // 100 + before // 400


def ifc_to_epoch_day(year: int, day_of_year: int) -> int:
    """Convert a year and day-of-year to an epoch day."""
    return year * DAYS_IN_YEAR + leap_years_before(year) + day_of_year - DAYS_0000_TO_1970


class InternationalFixedChronology(Chronology):
    """The International Fixed calendar system.

    Examples:
        >>> InternationalFixedChronology.INSTANCE.range(Field.DAY_OF_MONTH)
        ValueRange(-1, 0, -1, 28)
    """

    __slots__ = ()

    INSTANCE: ClassVar[InternationalFixedChronology]
    ERA_CLASS = InternationalFixedEra
    RANGES: ClassVar[dict[Field, ValueRange]] = {
        Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(0, DAYS_IN_WEEK),
        Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(0, 1, 0, DAYS_IN_WEEK),
        Field.DAY_OF_WEEK: ValueRange.of(0, 1, 0, DAYS_IN_WEEK),
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(0, 1, 0, WEEKS_IN_MONTH),
        Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(0, WEEKS_IN_YEAR),
        Field.DAY_OF_MONTH: ValueRange.of(-1, 0, -1, DAYS_IN_MONTH),
        Field.DAY_OF_YEAR: ValueRange.of(1, DAYS_IN_YEAR, DAYS_IN_YEAR + 1),
        Field.EPOCH_DAY: ValueRange.of(
            ifc_to_epoch_day(MIN_YEAR, 1),
            ifc_to_epoch_day(MAX_YEAR, DAYS_IN_YEAR + 1),
        ),
        Field.ERA: ValueRange.of(1, 1),
        Field.MONTH_OF_YEAR: ValueRange.of(-1, 0, -1, MONTHS_IN_YEAR),
        Field.PROLEPTIC_MONTH: ValueRange.of(MONTHS_IN_YEAR, MAX_YEAR * MONTHS_IN_YEAR - 1),
        Field.YEAR_OF_ERA: ValueRange.of(MIN_YEAR, MAX_YEAR),
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    }

    @property
    def id(self) -> str:
        return "Ifc"

    @property
    def calendar_type(self) -> str | None:
        return "ifc"

    def date(self, year: int, month: int, day: int) -> InternationalFixedDate:
        return InternationalFixedDate(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> InternationalFixedDate:
        return InternationalFixedDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> InternationalFixedDate:
        return InternationalFixedDate.of_epoch_day(epoch_day)

    def is_leap_year(self, year: int) -> bool:
        """Check the Gregorian leap rule."""
        return is_iso_leap_year(year)

    def proleptic_year(self, era: InternationalFixedEra, year_of_era: int) -> int:  # type: ignore[override]
        super().proleptic_year(era, year_of_era)
        return check_valid_value(year_of_era, MIN_YEAR, MAX_YEAR, "year_of_era")


class InternationalFixedDate(AbstractDate):
    """A date in the International Fixed calendar.

    Examples:
        >>> d = InternationalFixedDate(2014, 5, 26)
        >>> d.day_of_year
        138
        >>> str(d)
        'Ifc CE 2014-05-26'
        >>> str(InternationalFixedDate.leap_day(2012))
        'Ifc CE 2012 Leap Day'
    """

    __slots__ = ("_year", "_month", "_day")

    @validate_range(year=(MIN_YEAR, MAX_YEAR), month=(-1, MONTHS_IN_YEAR), day=(-1, DAYS_IN_MONTH))
    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a date; (year, 0, 0) is Year Day, (year, -1, -1) Leap Day.

        Raises:
            ValidationError: If a field is out of range, the special day
                encoding is inconsistent, or Leap Day is requested in a
                non-leap year.
        """
        if month < 1 or day < 1:
            if month != day:
                raise ValidationError(
                    f"invalid date {year}/{month}/{day}, special days are "
                    "(0, 0) for Year Day and (-1, -1) for Leap Day"
                )
            if month == -1 and not is_iso_leap_year(year):
                raise ValidationError(f"invalid date Leap Day, {year} is not a leap year")
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls, year: int, month: int, day: int) -> InternationalFixedDate:
        date = object.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls, year: int, month: int, day: int) -> InternationalFixedDate:
        """Create a date; see the constructor."""
        return cls(year, month, day)

    @classmethod
    def leap_day(cls, year: int) -> InternationalFixedDate:
        """Return Leap Day of a year.

        Raises:
            ValidationError: If the year is not a leap year.
        """
        return cls(year, -1, -1)

    @classmethod
    def year_day(cls, year: int) -> InternationalFixedDate:
        """Return Year Day, the last day of a year."""
        return cls(year, 0, 0)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> InternationalFixedDate:
        """Create a date from a year and day-of-year.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        check_valid_value(day_of_year, 1, DAYS_IN_YEAR + 1, "day_of_year")
        leap = is_iso_leap_year(year)
        if day_of_year == DAYS_IN_YEAR + 1 and not leap:
            raise ValidationError(f"day_of_year 366 is invalid, {year} is not a leap year")
        if day_of_year == DAYS_IN_YEAR + (1 if leap else 0):
            return cls._create(year, 0, 0)
        if leap:
            if day_of_year == LEAP_DAY_AS_DAY_OF_YEAR:
                return cls._create(year, -1, -1)
            if day_of_year > LEAP_DAY_AS_DAY_OF_YEAR:
                day_of_year -= 1
        return cls._from_week_day_of_year(year, day_of_year)

    @classmethod
    def _from_week_day_of_year(cls, year: int, day_of_year: int) -> InternationalFixedDate:
        # Day-of-year counting only days that belong to a month
        return cls._create(
            year,
            (day_of_year - 1) // DAYS_IN_MONTH + 1,
            (day_of_year - 1) % DAYS_IN_MONTH + 1,
        )

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> InternationalFixedDate:
        """Create a date from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        epoch_range = InternationalFixedChronology.RANGES[Field.EPOCH_DAY]
        if not epoch_range.is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the Ifc range")
        zero_day = epoch_day + DAYS_0000_TO_1970
        # Estimate from the mean year length, then correct by one year
        year = 400 * zero_day // DAYS_PER_CYCLE
        day_of_year = zero_day - (year * DAYS_IN_YEAR + leap_years_before(year))
        if day_of_year < 1:
            year -= 1
            day_of_year = zero_day - (year * DAYS_IN_YEAR + leap_years_before(year))
        else:
            length = DAYS_IN_YEAR + (1 if is_iso_leap_year(year) else 0)
            if day_of_year > length:
                year += 1
                day_of_year -= length
        return cls.of_year_day(year, day_of_year)

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    @property
    def chronology(self) -> InternationalFixedChronology:
        return InternationalFixedChronology.INSTANCE

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
    def era(self) -> InternationalFixedEra:
        return InternationalFixedEra.CE

    def is_leap_day(self) -> bool:
        """Return True if this date is Leap Day."""
        return self._month == -1

    def is_year_day(self) -> bool:
        """Return True if this date is Year Day."""
        return self._month == 0

    def _is_special(self) -> bool:
        return self._month < 1

    @property
    def day_of_year(self) -> int:
        if self._month == -1:
            return LEAP_DAY_AS_DAY_OF_YEAR
        if self._month == 0:
            return self.length_of_year()
        extra = 1 if self._month > 6 and self.is_leap_year() else 0
        return (self._month - 1) * DAYS_IN_MONTH + self._day + extra

    def _week_day_of_year(self) -> int:
        return (self._month - 1) * DAYS_IN_MONTH + self._day

    def _calculated_month_day(self) -> tuple[int, int]:
        # Special days count as a 29th day after the month they follow
        if self._month == 0:
            return MONTHS_IN_YEAR, DAYS_IN_MONTH + 1
        if self._month == -1:
            return 6, DAYS_IN_MONTH + 1
        return self._month, self._day

    def is_leap_year(self) -> bool:
        return is_iso_leap_year(self._year)

    def length_of_month(self) -> int:
        return DAYS_IN_MONTH if self._month > 0 else 1

    def length_of_year(self) -> int:
        return DAYS_IN_YEAR + (1 if self.is_leap_year() else 0)

    def months_in_year(self) -> int:
        return MONTHS_IN_YEAR

    def to_epoch_day(self) -> int:
        return ifc_to_epoch_day(self._year, self.day_of_year)

    @property
    def day_of_week(self) -> int:
        """Return the day of week, 7 for the Sunday that starts every month.

        Year Day and Leap Day have day-of-week 0.
        """
        if self._is_special():
            return 0
        return 1 + (5 + self._week_day_of_year()) % DAYS_IN_WEEK

    @property
    def aligned_day_of_week_in_month(self) -> int:
        if self._is_special():
            return 0
        return (self._day - 1) % DAYS_IN_WEEK + 1

    @property
    def aligned_day_of_week_in_year(self) -> int:
        if self._is_special():
            return 0
        return (self._week_day_of_year() - 1) % DAYS_IN_WEEK + 1

    @property
    def aligned_week_of_month(self) -> int:
        if self._is_special():
            return 0
        return (self._day - 1) // DAYS_IN_WEEK + 1

    @property
    def aligned_week_of_year(self) -> int:
        if self._is_special():
            return 0
        return (self._week_day_of_year() - 1) // DAYS_IN_WEEK + 1

    @property
    def proleptic_month(self) -> int:
        return self._year * MONTHS_IN_YEAR + self._calculated_month_day()[0] - 1

    @property
    def proleptic_week(self) -> int:
        """Return the week count from year 0; special days end their week."""
        month, day = self._calculated_month_day()
        return self._year * WEEKS_IN_YEAR + (month - 1) * WEEKS_IN_MONTH + (day - 1) // DAYS_IN_WEEK

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    def range(self, field: Field) -> ValueRange:
        """Return the range of a field for this date.

        The week fields of Year Day and Leap Day have the empty range 0 to
        0, and their month and day-of-month ranges hold only their own
        encoding.
        """
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"unsupported field: {field}")
        special = self._is_special()
        if field in (
            Field.DAY_OF_WEEK,
            Field.ALIGNED_DAY_OF_WEEK_IN_MONTH,
            Field.ALIGNED_DAY_OF_WEEK_IN_YEAR,
        ):
            return _EMPTY if special else ValueRange.of(1, DAYS_IN_WEEK)
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return _EMPTY if special else ValueRange.of(1, WEEKS_IN_YEAR)
        if field in (Field.DAY_OF_MONTH, Field.MONTH_OF_YEAR):
            if self._month == 0:
                return _EMPTY
            if self._month == -1:
                return ValueRange.of(-1, -1)
            if field is Field.DAY_OF_MONTH:
                return ValueRange.of(1, DAYS_IN_MONTH)
            return ValueRange.of(-1 if self.is_leap_year() else 0, MONTHS_IN_YEAR)
        return super().range(field)

    def _range_aligned_week_of_month(self) -> ValueRange:
        return _EMPTY if self._is_special() else ValueRange.of(1, WEEKS_IN_MONTH)

    def with_field(self, field: Field, value: int) -> InternationalFixedDate:
        """Return a copy with one field changed.

        Setting the month or day-of-month to 0 selects Year Day, and to -1
        selects Leap Day. On a special day the week fields only accept 0,
        and other fields act as if the day were the 28th of the month it
        follows.

        Raises:
            ValidationError: If the value is outside the field's range,
                or Leap Day is selected in a non-leap year.
            UnsupportedFieldError: If the field is not date-based.

        Examples:
            >>> InternationalFixedDate(2014, 5, 26).with_field(Field.ALIGNED_WEEK_OF_YEAR, 23)
            InternationalFixedDate(2014, 6, 19)
        """
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"unsupported field: {field}")
        InternationalFixedChronology.INSTANCE.range(field).check_valid_value(value, field)
        if field in (Field.DAY_OF_MONTH, Field.MONTH_OF_YEAR):
            if value == 0:
                return InternationalFixedDate._create(self._year, 0, 0)
            if value == -1:
                return InternationalFixedDate.leap_day(self._year)
        if self._is_special():
            month, day = self._calculated_month_day()
            if field is Field.DAY_OF_MONTH:
                return self._resolve_previous(self._year, month, value)
            if field is Field.MONTH_OF_YEAR:
                return self._resolve_previous(self._year, value, day)
            if field in _WEEK_FIELDS:
                self.range(field).check_valid_value(value, field)
                return self
            return super().with_field(field, value)
        self.range(field).check_valid_value(value, field)
        if field is Field.DAY_OF_WEEK:
            # Sunday (7) starts the week
            return self.plus_days(value % DAYS_IN_WEEK + 1 - self.aligned_day_of_week_in_month)
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            target = (value - 1) * DAYS_IN_WEEK + self.aligned_day_of_week_in_year
            return InternationalFixedDate._from_week_day_of_year(self._year, target)
        return super().with_field(field, value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_weeks(self, weeks: int) -> InternationalFixedDate:
        """Return a copy with weeks added, keeping the day of the week.

        Whole months of four weeks are added as months. Otherwise the
        result moves by one extra day when a special day is crossed.
        """
        if weeks == 0:
            return self
        if weeks % WEEKS_IN_MONTH == 0:
            return self.plus_months(weeks // WEEKS_IN_MONTH)
        day_of_week = self.day_of_week
        epoch_day = self.to_epoch_day() + weeks * DAYS_IN_WEEK
        result = InternationalFixedDate.of_epoch_day(epoch_day)
        if day_of_week == 0 or result.day_of_week == day_of_week:
            return result
        return InternationalFixedDate.of_epoch_day(epoch_day + (1 if weeks > 0 else -1))

    def plus_months(self, months: int) -> InternationalFixedDate:
        """Return a copy with months added.

        Year Day and Leap Day move like the 28th of the month they follow.

        Raises:
            DateRangeError: If the result leaves the supported year range.
        """
        if months == 0:
            return self
        if months % MONTHS_IN_YEAR == 0:
            return self.plus_years(months // MONTHS_IN_YEAR)
        calc_month = self.proleptic_month + months
        year = calc_month // MONTHS_IN_YEAR
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise DateRangeError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        day = min(self._calculated_month_day()[1], DAYS_IN_MONTH)
        return InternationalFixedDate._create(year, calc_month % MONTHS_IN_YEAR + 1, day)

    def _resolve_previous(self, year: int, month: int, day: int) -> InternationalFixedDate:
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise DateRangeError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        if month == 0:
            return InternationalFixedDate._create(year, 0, 0)
        if month == -1:
            if is_iso_leap_year(year):
                return InternationalFixedDate._create(year, -1, -1)
            return InternationalFixedDate._create(year, 6, DAYS_IN_MONTH)
        check_valid_value(month, 1, MONTHS_IN_YEAR, "month")
        return InternationalFixedDate._create(year, month, max(1, min(day, DAYS_IN_MONTH)))

    def _resolve_epoch_day(self, epoch_day: int) -> InternationalFixedDate:
        return InternationalFixedDate.of_epoch_day(epoch_day)

    def _weeks_until(self, end: AbstractDate) -> int:
        other = InternationalFixedDate.from_date(end)
        start = self.proleptic_week * 8 + (self.aligned_day_of_week_in_month if self._month > 0 else -1)
        finish = other.proleptic_week * 8 + (other.aligned_day_of_week_in_month if other._month > 0 else -1)
        return trunc_div(finish - start, 8)

    def _months_until(self, end: AbstractDate) -> int:
        other = InternationalFixedDate.from_date(end)
        start = self.proleptic_month * 32 + self._calculated_month_day()[1]
        finish = other.proleptic_month * 32 + other._calculated_month_day()[1]
        return trunc_div(finish - start, 32)

    def _period_until(self, end: AbstractDate) -> ChronoPeriod:
        years = self._years_until(end)
        same_year = self.plus_years(years)
        months = same_year._months_until(end)
        days = end.to_epoch_day() - same_year.plus_months(months).to_epoch_day()
        return InternationalFixedChronology.INSTANCE.period(years, months, days)

    def __str__(self) -> str:
        if self._month == -1:
            return f"{self.chronology} {self.era.name} {self._year} Leap Day"
        if self._month == 0:
            return f"{self.chronology} {self.era.name} {self._year} Year Day"
        return super().__str__()


InternationalFixedChronology.INSTANCE = register_chronology(InternationalFixedChronology())


__all__ = [
    "InternationalFixedChronology",
    "InternationalFixedDate",
]
