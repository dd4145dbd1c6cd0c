"""The Discordian calendar.

The Discordian year has five seasons of 73 days and a five-day week,
so every year starts on the first day of a week. Years are counted
from 1166 BC and follow the Gregorian leap rule. In leap years St. Tib's
Day is inserted between Chaos 59 and Chaos 60; it belongs to no season
and no week.

St. Tib's Day is represented as month 0, day 0, and has day-of-week 0.

Examples:
    >>> DiscordianDate(3178, 3, 41).to_iso_date()
    datetime.date(2012, 7, 6)
    >>> DiscordianDate(1170, 0, 0).to_iso_date()
    datetime.date(4, 2, 29)
"""

from __future__ import annotations

from typing import ClassVar

from altchrono._internal.calendar import (
    epoch_day_to_ymd,
    is_leap_year as is_iso_leap_year,
    trunc_div,
    trunc_mod,
    ymd_to_epoch_day,
)
from altchrono._internal.validation import check_valid_value, validate_range
from altchrono.core.chronology import Chronology, register_chronology
from altchrono.core.date import AbstractDate
from altchrono.core.period import ChronoPeriod
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, UnsupportedFieldError, ValidationError
from altchrono.units.era import DiscordianEra
from altchrono.units.field import Field

# Discordian year 1166 is ISO year 0
OFFSET_FROM_ISO_0000: int = 1166
DAYS_IN_MONTH: int = 73
DAYS_IN_WEEK: int = 5
MONTHS_IN_YEAR: int = 5
WEEKS_IN_YEAR: int = 73
ST_TIBS_OFFSET: int = 60

MIN_YEAR: int = 1
MAX_YEAR: int = 999_999

_ST_TIBS_WEEK = ST_TIBS_OFFSET // DAYS_IN_WEEK
_EMPTY = ValueRange.of(0, 0)
_DAY_OF_WEEK_FIELDS = (
    Field.DAY_OF_WEEK,
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH,
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR,
)
# Fields where the value 0 selects St. Tib's Day in a leap year
_ST_TIBS_FIELDS = _DAY_OF_WEEK_FIELDS + (
    Field.ALIGNED_WEEK_OF_MONTH,
    Field.ALIGNED_WEEK_OF_YEAR,
    Field.DAY_OF_MONTH,
    Field.MONTH_OF_YEAR,
)


def is_discordian_leap_year(year: int) -> bool:
    """Check the Gregorian leap rule applied to the ISO-aligned year.

    Examples:
        >>> is_discordian_leap_year(3178)
        True
        >>> is_discordian_leap_year(1266)
        False
    """
    return is_iso_leap_year(year - OFFSET_FROM_ISO_0000)


class DiscordianChronology(Chronology):
    """The Discordian calendar system.

    Examples:
        >>> DiscordianChronology.INSTANCE.range(Field.MONTH_OF_YEAR)
        ValueRange(0, 1, 5, 5)
    """

    __slots__ = ()

    INSTANCE: ClassVar[DiscordianChronology]
    ERA_CLASS = DiscordianEra
    RANGES: ClassVar[dict[Field, ValueRange]] = {
        Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(0, 1, DAYS_IN_WEEK, DAYS_IN_WEEK),
        Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(0, 1, 0, DAYS_IN_WEEK),
        Field.DAY_OF_WEEK: ValueRange.of(0, 1, 0, DAYS_IN_WEEK),
        Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(0, 1, 0, 15),
        Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(0, 1, WEEKS_IN_YEAR, WEEKS_IN_YEAR),
        Field.DAY_OF_MONTH: ValueRange.of(0, 1, 0, DAYS_IN_MONTH),
        Field.EPOCH_DAY: ValueRange.of(
            ymd_to_epoch_day(MIN_YEAR - OFFSET_FROM_ISO_0000, 1, 1),
            ymd_to_epoch_day(MAX_YEAR - OFFSET_FROM_ISO_0000, 12, 31),
        ),
        Field.ERA: ValueRange.of(1, 1),
        Field.MONTH_OF_YEAR: ValueRange.of(0, 1, MONTHS_IN_YEAR, MONTHS_IN_YEAR),
        Field.PROLEPTIC_MONTH: ValueRange.of(0, MAX_YEAR * MONTHS_IN_YEAR + MONTHS_IN_YEAR - 1),
        Field.YEAR_OF_ERA: ValueRange.of(MIN_YEAR, MAX_YEAR),
        Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    }

    @property
    def id(self) -> str:
        return "Discordian"

    @property
    def calendar_type(self) -> str | None:
        return "discordian"

    def date(self, year: int, month: int, day: int) -> DiscordianDate:
        return DiscordianDate(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> DiscordianDate:
        return DiscordianDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> DiscordianDate:
        return DiscordianDate.of_epoch_day(epoch_day)

    def is_leap_year(self, year: int) -> bool:
        return is_discordian_leap_year(year)

    def proleptic_year(self, era: DiscordianEra, year_of_era: int) -> int:  # type: ignore[override]
        """Return the year; the single era counts from year 1.

        Raises:
            EraMismatchError: If the era is not DiscordianEra.YOLD.
            ValidationError: If the year is out of range.
        """
        super().proleptic_year(era, year_of_era)
        return check_valid_value(year_of_era, MIN_YEAR, MAX_YEAR, "year_of_era")


class DiscordianDate(AbstractDate):
    """A date in the Discordian calendar.

    Examples:
        >>> d = DiscordianDate(3178, 3, 41)
        >>> d.day_of_week
        2
        >>> str(d)
        'Discordian YOLD 3178-03-41'
        >>> str(DiscordianDate(3178, 0, 0))
        "Discordian YOLD 3178 St. Tib's Day"
    """

    __slots__ = ("_year", "_month", "_day")

    @validate_range(year=(MIN_YEAR, MAX_YEAR), month=(0, MONTHS_IN_YEAR), day=(0, DAYS_IN_MONTH))
    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a DiscordianDate; St. Tib's Day is (year, 0, 0).

        Raises:
            ValidationError: If a field is out of range, only one of
                month and day is 0, or St. Tib's Day is requested in a
                non-leap year.
        """
        if month == 0 or day == 0:
            if month != 0 or day != 0:
                raise ValidationError(
                    f"invalid date {year}-{month}-{day}, St. Tib's Day is the only "
                    "day outside the seasons and must be given as month 0, day 0"
                )
            if not is_discordian_leap_year(year):
                raise ValidationError(
                    f"invalid date St. Tib's Day, {year} is not a leap year"
                )
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls, year: int, month: int, day: int) -> DiscordianDate:
        date = object.__new__(cls)
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls, year: int, month: int, day: int) -> DiscordianDate:
        """Create a DiscordianDate; see the constructor."""
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> DiscordianDate:
        """Create a DiscordianDate from a year and day-of-year.

        Day 60 of a leap year is St. Tib's Day.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        check_valid_value(day_of_year, 1, 366, "day_of_year")
        leap = is_discordian_leap_year(year)
        if day_of_year == 366 and not leap:
            raise ValidationError(f"day_of_year 366 is invalid, {year} is not a leap year")
        if leap:
            if day_of_year == ST_TIBS_OFFSET:
                return cls._create(year, 0, 0)
            if day_of_year > ST_TIBS_OFFSET:
                day_of_year -= 1
        return cls._create(
            year,
            (day_of_year - 1) // DAYS_IN_MONTH + 1,
            (day_of_year - 1) % DAYS_IN_MONTH + 1,
        )

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> DiscordianDate:
        """Create a DiscordianDate from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        if not DiscordianChronology.RANGES[Field.EPOCH_DAY].is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the Discordian range")
        # Years begin on ISO January 1st, so the ISO kernel finds the year
        iso_year = epoch_day_to_ymd(epoch_day)[0]
        day_of_year = epoch_day - ymd_to_epoch_day(iso_year, 1, 1) + 1
        return cls.of_year_day(iso_year + OFFSET_FROM_ISO_0000, day_of_year)

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    @property
    def chronology(self) -> DiscordianChronology:
        return DiscordianChronology.INSTANCE

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
        if self._month == 0:
            return ST_TIBS_OFFSET
        day_of_year = (self._month - 1) * DAYS_IN_MONTH + self._day
        if day_of_year >= ST_TIBS_OFFSET and self.is_leap_year():
            return day_of_year + 1
        return day_of_year

    @property
    def era(self) -> DiscordianEra:
        return DiscordianEra.YOLD

    def is_st_tibs_day(self) -> bool:
        """Return True if this date is St. Tib's Day."""
        return self._month == 0

    def is_leap_year(self) -> bool:
        return is_discordian_leap_year(self._year)

    def length_of_month(self) -> int:
        return 1 if self._month == 0 else DAYS_IN_MONTH

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year() else 365

    def months_in_year(self) -> int:
        return MONTHS_IN_YEAR

    def length_of_week(self) -> int:
        return DAYS_IN_WEEK

    def to_epoch_day(self) -> int:
        iso_year = self._year - OFFSET_FROM_ISO_0000
        return ymd_to_epoch_day(iso_year, 1, 1) + self.day_of_year - 1

    def _week_day_of_year(self) -> int:
        # Day-of-year with St. Tib's Day taken out of the count
        day_of_year = self.day_of_year
        if day_of_year >= ST_TIBS_OFFSET and self.is_leap_year():
            return day_of_year - 1
        return day_of_year

    @property
    def day_of_week(self) -> int:
        if self._month == 0:
            return 0
        return (self._week_day_of_year() - 1) % DAYS_IN_WEEK + 1

    @property
    def aligned_day_of_week_in_month(self) -> int:
        if self._month == 0:
            return 0
        return (self._day - 1) % DAYS_IN_WEEK + 1

    @property
    def aligned_day_of_week_in_year(self) -> int:
        return self.day_of_week

    @property
    def aligned_week_of_month(self) -> int:
        if self._month == 0:
            return 0
        return (self._day - 1) // DAYS_IN_WEEK + 1

    @property
    def aligned_week_of_year(self) -> int:
        if self._month == 0:
            return 0
        return (self._week_day_of_year() - 1) // DAYS_IN_WEEK + 1

    @property
    def proleptic_month(self) -> int:
        return self._year * MONTHS_IN_YEAR + (1 if self._month == 0 else self._month) - 1

    @property
    def proleptic_week(self) -> int:
        """Return the week count from year 0; St. Tib's Day sits in week 12."""
        week = _ST_TIBS_WEEK if self._month == 0 else self.aligned_week_of_year
        return self._year * WEEKS_IN_YEAR + week - 1

    # -------------------------------------------------------------------------
    # Fields
    # -------------------------------------------------------------------------

    def range(self, field: Field) -> ValueRange:
        """Return the range of a field for this date.

        On St. Tib's Day the week and day-of-month fields have the empty
        range 0 to 0; in leap years the year-based week fields and the
        month start at 0.
        """
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"unsupported field: {field}")
        tibs = self._month == 0
        first = 0 if self.is_leap_year() else 1
        if field in (Field.ALIGNED_DAY_OF_WEEK_IN_MONTH, Field.DAY_OF_WEEK):
            return _EMPTY if tibs else ValueRange.of(1, DAYS_IN_WEEK)
        if field is Field.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return ValueRange.of(first, DAYS_IN_WEEK)
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return ValueRange.of(first, WEEKS_IN_YEAR)
        if field is Field.DAY_OF_MONTH:
            return _EMPTY if tibs else ValueRange.of(1, DAYS_IN_MONTH)
        if field is Field.MONTH_OF_YEAR:
            return ValueRange.of(first, MONTHS_IN_YEAR)
        return super().range(field)

    def _range_aligned_week_of_month(self) -> ValueRange:
        return _EMPTY if self._month == 0 else ValueRange.of(1, 15)

    def with_field(self, field: Field, value: int) -> DiscordianDate:
        """Return a copy with one field changed.

        In a leap year, setting any week, day-of-month or month field to
        0 selects St. Tib's Day. Changing a field of St. Tib's Day starts
        from Chaos 60, the day after it, except when only the year
        changes to another leap year. Weekday and week changes that step
        over St. Tib's Day skip it.

        Raises:
            ValidationError: If the value is outside the field's range.
            UnsupportedFieldError: If the field is not date-based.

        Examples:
            >>> DiscordianDate(3178, 0, 0).with_field(Field.DAY_OF_WEEK, 1)
            DiscordianDate(3178, 1, 56)
        """
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"unsupported field: {field}")
        DiscordianChronology.INSTANCE.range(field).check_valid_value(value, field)
        if value == 0 and self.is_leap_year() and field in _ST_TIBS_FIELDS:
            if self._month == 0:
                return self
            return DiscordianDate._create(self._year, 0, 0)
        if self._month == 0:
            if field in (Field.YEAR, Field.YEAR_OF_ERA) and is_discordian_leap_year(value):
                return DiscordianDate._create(value, 0, 0)
            return DiscordianDate._create(self._year, 1, ST_TIBS_OFFSET).with_field(field, value)
        self.range(field).check_valid_value(value, field)
        leap = self.is_leap_year()
        if field in _DAY_OF_WEEK_FIELDS:
            if (
                leap
                and self._month == 1
                and ST_TIBS_OFFSET - DAYS_IN_WEEK < self._day <= ST_TIBS_OFFSET
            ):
                current = self.day_of_week
                if current < DAYS_IN_WEEK and value == DAYS_IN_WEEK:
                    return self.plus_days(value - current + 1)
                if current == DAYS_IN_WEEK and value < DAYS_IN_WEEK:
                    return self.plus_days(value - current - 1)
        elif field in (Field.ALIGNED_WEEK_OF_MONTH, Field.ALIGNED_WEEK_OF_YEAR):
            if leap and (self._month == 1 or field is Field.ALIGNED_WEEK_OF_YEAR):
                week = self.get(field)
                current = self.day_of_week
                week_after = week > _ST_TIBS_WEEK or (
                    week == _ST_TIBS_WEEK and current == DAYS_IN_WEEK
                )
                value_after = value > _ST_TIBS_WEEK or (
                    value == _ST_TIBS_WEEK and current == DAYS_IN_WEEK
                )
                if week_after and not value_after:
                    return self.plus_days((value - week) * DAYS_IN_WEEK - 1)
                if value_after and not week_after:
                    return self.plus_days((value - week) * DAYS_IN_WEEK + 1)
        return super().with_field(field, value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_months(self, months: int) -> DiscordianDate:
        """Return a copy with months added; St. Tib's Day stays in Chaos.

        Examples:
            >>> DiscordianDate(3178, 0, 0).plus_months(3)
            DiscordianDate(3178, 4, 60)
        """
        if months == 0:
            return self
        calc_month = self.proleptic_month + months
        year = calc_month // MONTHS_IN_YEAR
        month = calc_month % MONTHS_IN_YEAR + 1
        if self._month == 0 and month == 1:
            month = 0
        return self._resolve_previous(year, month, self._day)

    def plus_weeks(self, weeks: int) -> DiscordianDate:
        """Return a copy with weeks added, keeping the weekday.

        St. Tib's Day moves like the last day of its week.
        """
        if weeks == 0:
            return self
        calc_week = self.proleptic_week + weeks
        year = calc_week // WEEKS_IN_YEAR
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise DateRangeError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        day_of_week = DAYS_IN_WEEK if self._month == 0 else self.day_of_week
        day_of_year = calc_week % WEEKS_IN_YEAR * DAYS_IN_WEEK + day_of_week
        if is_discordian_leap_year(year) and (
            day_of_year > ST_TIBS_OFFSET or (day_of_year == ST_TIBS_OFFSET and self._month != 0)
        ):
            day_of_year += 1
        return DiscordianDate.of_year_day(year, day_of_year)

    def _resolve_previous(self, year: int, month: int, day: int) -> DiscordianDate:
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise DateRangeError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        check_valid_value(month, 0, MONTHS_IN_YEAR, "month")
        if month == 0:
            if is_discordian_leap_year(year):
                return DiscordianDate._create(year, 0, 0)
            month = 1
            day = ST_TIBS_OFFSET
        elif day == 0:
            day = ST_TIBS_OFFSET
        return DiscordianDate._create(year, month, day)

    def _resolve_epoch_day(self, epoch_day: int) -> DiscordianDate:
        return DiscordianDate.of_epoch_day(epoch_day)

    def _weeks_until(self, end: AbstractDate) -> int:
        other = DiscordianDate.from_date(end)
        start_week = self.proleptic_week * 8
        end_week = other.proleptic_week * 8
        if self._month == 0 and other._month != 0:
            offset1 = DAYS_IN_WEEK if end_week > start_week else DAYS_IN_WEEK - 1
        else:
            offset1 = self.day_of_week
        if other._month == 0 and self._month != 0:
            offset2 = DAYS_IN_WEEK if start_week > end_week else DAYS_IN_WEEK - 1
        else:
            offset2 = other.day_of_week
        return trunc_div(end_week + offset2 - start_week - offset1, 8)

    def _months_until(self, end: AbstractDate) -> int:
        other = DiscordianDate.from_date(end)
        start_month = self.proleptic_month * 128
        end_month = other.proleptic_month * 128
        if self._month == 0 and other._month != 0:
            offset1 = ST_TIBS_OFFSET if end_month > start_month else ST_TIBS_OFFSET - 1
        else:
            offset1 = self._day
        if other._month == 0 and self._month != 0:
            offset2 = ST_TIBS_OFFSET if start_month > end_month else ST_TIBS_OFFSET - 1
        else:
            offset2 = other._day
        return trunc_div(end_month + offset2 - start_month - offset1, 128)

    def _period_until(self, end: AbstractDate) -> ChronoPeriod:
        months = self._months_until(end)
        days = end.to_epoch_day() - self.plus_months(months).to_epoch_day()
        return DiscordianChronology.INSTANCE.period(
            trunc_div(months, MONTHS_IN_YEAR), trunc_mod(months, MONTHS_IN_YEAR), days
        )

    def __str__(self) -> str:
        if self._month == 0:
            return f"{self.chronology} {self.era.name} {self._year} St. Tib's Day"
        return super().__str__()


DiscordianChronology.INSTANCE = register_chronology(DiscordianChronology())


__all__ = [
    "DiscordianChronology",
    "DiscordianDate",
    "is_discordian_leap_year",
]
