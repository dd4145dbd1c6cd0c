"""Julian-Gregorian cutover calendars.

A cutover calendar follows the Julian calendar before a cutover date
and the ISO (proleptic Gregorian) calendar from the cutover date on.
The days between the last Julian date and the cutover date never
existed in that calendar: in Britain, Wednesday 1752-09-02 was
followed by Thursday 1752-09-14, so September 1752 had 19 days and the
year 1752 had 355.

Leap years follow the Julian rule up to and including the cutover
year and the Gregorian rule afterwards.

Dates are created leniently: a day-of-month inside the gap is read as
a Julian date and so lands after the cutover. British 1752-09-03 is
the same day as 1752-09-14.

Examples:
    >>> BritishCutoverDate(1752, 9, 2).plus_days(1)
    BritishCutoverDate(1752, 9, 14)
    >>> BritishCutoverDate(1752, 9, 20).length_of_month()
    19
"""

from __future__ import annotations

import datetime
from typing import ClassVar, cast

from altchrono._internal.calendar import (
    days_in_month,
    epoch_day_to_ymd,
    trunc_div,
    trunc_mod,
    ymd_to_epoch_day,
)
from altchrono._internal.calendar import is_leap_year as is_iso_leap_year
from altchrono._internal.validation import check_valid_value, validate_day
from altchrono.arithmetic import date_ops
from altchrono.calendars.julian import (
    MAX_YEAR,
    MIN_YEAR,
    is_julian_leap_year,
    julian_from_epoch_day,
    julian_length_of_month,
    julian_to_epoch_day,
)
from altchrono.core.chronology import (
    Chronology,
    Clock,
    epoch_day_of,
    read_clock,
    register_chronology,
)
from altchrono.core.date import AbstractDate
from altchrono.core.period import ChronoPeriod
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, UnsupportedFieldError, ValidationError
from altchrono.units.era import JulianEra
from altchrono.units.field import Field

EARLIEST_CUTOVER = datetime.date(1582, 1, 1)
LATEST_CUTOVER = datetime.date(2400, 1, 1)
BRITISH_CUTOVER = datetime.date(1752, 9, 14)

_EPOCH_DAY_RANGE = ValueRange.of(
    julian_to_epoch_day(MIN_YEAR, 1, 1), ymd_to_epoch_day(MAX_YEAR, 12, 31)
)


class CutoverChronology(Chronology):
    """A Julian-Gregorian calendar with a configurable cutover date.

    Two cutover chronologies are equal when their cutover dates are.

    Attributes:
        cutover: The first ISO date of the Gregorian part.
        cutover_days: The number of dates skipped at the cutover.

    Examples:
        >>> vatican = CutoverChronology.of(datetime.date(1582, 10, 15))
        >>> vatican.id
        'Cutover[1582-10-15]'
        >>> vatican.cutover_days
        10
        >>> vatican.date(1582, 10, 4).plus_days(1)
        CutoverDate(1582, 10, 15)
    """

    __slots__ = ("_cutover", "_cutover_epoch_day", "_cutover_days", "_ranges")

    ERA_CLASS = JulianEra

    def __init__(self, cutover: datetime.date) -> None:
        """Create a cutover chronology.

        Raises:
            ValidationError: If the cutover is not between 1582-01-01
                (inclusive) and 2400-01-01 (exclusive).
        """
        if isinstance(cutover, datetime.datetime):
            cutover = cutover.date()
        if not isinstance(cutover, datetime.date):
            raise TypeError(f"cutover must be a datetime.date, got {type(cutover).__name__}")
        if cutover < EARLIEST_CUTOVER or cutover >= LATEST_CUTOVER:
            raise ValidationError(
                f"cutover must be between {EARLIEST_CUTOVER} and {LATEST_CUTOVER}, got {cutover}"
            )
        self._cutover = cutover
        self._cutover_epoch_day = epoch_day_of(cutover)
        julian = julian_to_epoch_day(cutover.year, cutover.month, cutover.day)
        self._cutover_days = julian - self._cutover_epoch_day
        self._ranges = self._build_ranges()

    @classmethod
    def of(cls, cutover: datetime.date) -> CutoverChronology:
        """Create a cutover chronology; see the constructor."""
        return cls(cutover)

    def _build_ranges(self) -> dict[Field, ValueRange]:
        year = self._cutover.year
        shortest_year = min(self.length_of_year(year - 1), self.length_of_year(year))
        month = self._cutover.month
        previous = (year, month - 1) if month > 1 else (year - 1, 12)
        shortest_month = min(
            28, self.length_of_month(year, month), self.length_of_month(*previous)
        )
        return {
            Field.DAY_OF_YEAR: ValueRange.of(1, shortest_year, 366),
            Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, (shortest_month - 1) // 7 + 1, 5),
            Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, (shortest_year - 1) // 7 + 1, 53),
            Field.PROLEPTIC_MONTH: ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
            Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR, -MIN_YEAR + 1),
            Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
            Field.EPOCH_DAY: _EPOCH_DAY_RANGE,
        }

    @property
    def cutover(self) -> datetime.date:
        return self._cutover

    @property
    def cutover_epoch_day(self) -> int:
        return self._cutover_epoch_day

    @property
    def cutover_days(self) -> int:
        return self._cutover_days

    @property
    def id(self) -> str:
        return f"Cutover[{self._cutover.isoformat()}]"

    def date(self, year: int, month: int, day: int) -> CutoverDate:
        return CutoverDate(self, year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> CutoverDate:
        return CutoverDate.of_year_day(self, year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> CutoverDate:
        return CutoverDate.of_epoch_day(self, epoch_day)

    def range(self, field: Field) -> ValueRange:
        if not field.is_date_based:
            raise UnsupportedFieldError(f"unsupported field: {field}")
        found = self._ranges.get(field)
        return found if found is not None else super().range(field)

    def is_leap_year(self, year: int) -> bool:
        """Apply the Julian rule up to the cutover year, Gregorian after."""
        if year <= self._cutover.year:
            return is_julian_leap_year(year)
        return is_iso_leap_year(year)

    # -------------------------------------------------------------------------
    # Calendar arithmetic shared by the dates
    # -------------------------------------------------------------------------

    def is_julian(self, epoch_day: int) -> bool:
        """Return True if the epoch day is before the cutover."""
        return epoch_day < self._cutover_epoch_day

    def fields_of(self, epoch_day: int) -> tuple[int, int, int]:
        """Return the (year, month, day) of an epoch day."""
        if epoch_day < self._cutover_epoch_day:
            return julian_from_epoch_day(epoch_day)
        return epoch_day_to_ymd(epoch_day)

    def epoch_day_of_fields(self, year: int, month: int, day: int) -> int:
        """Return the epoch day of a year, month and day.

        Dates in the gap are read leniently as Julian dates.

        Raises:
            ValidationError: If the day does not exist in the month.
        """
        if year < self._cutover.year:
            validate_day(day, julian_length_of_month(year, month), year, month)
            return julian_to_epoch_day(year, month, day)
        if year > self._cutover.year:
            validate_day(day, days_in_month(year, month), year, month)
            return ymd_to_epoch_day(year, month, day)
        if 1 <= day <= days_in_month(year, month):
            iso = ymd_to_epoch_day(year, month, day)
            if iso >= self._cutover_epoch_day:
                return iso
        validate_day(day, julian_length_of_month(year, month), year, month)
        return julian_to_epoch_day(year, month, day)

    def epoch_day_of_year_day(self, year: int, day_of_year: int) -> int:
        """Return the epoch day of a year and existing day-of-year.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        check_valid_value(day_of_year, 1, self.length_of_year(year), "day_of_year")
        return self.month_start(year, 1) + day_of_year - 1

    def month_start(self, year: int, month: int) -> int:
        """Return the epoch day of the first existing day of a month."""
        julian = julian_to_epoch_day(year, month, 1)
        if julian < self._cutover_epoch_day:
            return julian
        return max(ymd_to_epoch_day(year, month, 1), self._cutover_epoch_day)

    def length_of_month(self, year: int, month: int) -> int:
        """Return the number of existing days in a month."""
        following = (year, month + 1) if month < 12 else (year + 1, 1)
        return self.month_start(*following) - self.month_start(year, month)

    def length_of_year(self, year: int) -> int:
        """Return the number of existing days in a year."""
        return self.month_start(year + 1, 1) - self.month_start(year, 1)

    def nominal_length_of_month(self, year: int, month: int) -> int:
        """Return the month length in the calendar in force at its end.

        This is the largest day-of-month accepted for the month, gap
        days included.
        """
        if year < self._cutover.year:
            return julian_length_of_month(year, month)
        iso_length = days_in_month(year, month)
        if year > self._cutover.year:
            return iso_length
        if ymd_to_epoch_day(year, month, iso_length) >= self._cutover_epoch_day:
            return iso_length
        return julian_length_of_month(year, month)

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CutoverChronology):
            return NotImplemented
        return type(self) is type(other) and self._cutover == other._cutover

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._cutover))

    def __repr__(self) -> str:
        return f"CutoverChronology({self._cutover!r})"


class CutoverDate(AbstractDate):
    """A date in a Julian-Gregorian cutover calendar.

    The date is held as an epoch day together with the year, month and
    day of the calendar in force on that day.

    Examples:
        >>> british = CutoverChronology.of(datetime.date(1752, 9, 14))
        >>> d = CutoverDate(british, 1752, 9, 2)
        >>> d.to_iso_date()
        datetime.date(1752, 9, 13)
        >>> d.until(CutoverDate(british, 1752, 10, 1))
        ChronoPeriod(years=0, months=0, days=18, chronology=Cutover[1752-09-14])
    """

    __slots__ = ("_chronology", "_epoch_day", "_year", "_month", "_day")

    def __init__(self, chronology: CutoverChronology, year: int, month: int, day: int) -> None:
        """Create a CutoverDate, reading gap dates leniently.

        Raises:
            TypeError: If chronology is not a CutoverChronology.
            ValidationError: If the day does not exist in either calendar.
        """
        _check_chronology(chronology)
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        check_valid_value(month, 1, 12, "month")
        epoch_day = chronology.epoch_day_of_fields(year, month, day)
        self._set(chronology, epoch_day)

    def _set(self, chronology: CutoverChronology, epoch_day: int) -> None:
        self._chronology = chronology
        self._epoch_day = epoch_day
        self._year, self._month, self._day = chronology.fields_of(epoch_day)

    @classmethod
    def _at(cls, chronology: CutoverChronology, epoch_day: int) -> CutoverDate:
        date = object.__new__(cls)
        date._set(chronology, epoch_day)
        return date

    @classmethod
    def of(cls, chronology: CutoverChronology, year: int, month: int, day: int) -> CutoverDate:
        """Create a CutoverDate; see the constructor."""
        return cls(chronology, year, month, day)

    @classmethod
    def of_year_day(cls, chronology: CutoverChronology, year: int, day_of_year: int) -> CutoverDate:
        """Create a CutoverDate from a year and day-of-year.

        The day-of-year counts only existing days, so British day 247
        of 1752 is 1752-09-14.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        _check_chronology(chronology)
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        return cls._at(chronology, chronology.epoch_day_of_year_day(year, day_of_year))

    @classmethod
    def of_epoch_day(cls, chronology: CutoverChronology, epoch_day: int) -> CutoverDate:
        """Create a CutoverDate from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        _check_chronology(chronology)
        if not _EPOCH_DAY_RANGE.is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the cutover range")
        return cls._at(chronology, epoch_day)

    @classmethod
    def now(  # type: ignore[override]
        cls, chronology: CutoverChronology, clock: Clock | None = None
    ) -> CutoverDate:
        """Return the current date in the given cutover calendar."""
        return cls.of_epoch_day(chronology, read_clock(clock))

    @classmethod
    def from_date(  # type: ignore[override]
        cls, chronology: CutoverChronology, temporal: object
    ) -> CutoverDate:
        """Convert another calendar's date or a datetime.date."""
        return cls.of_epoch_day(chronology, epoch_day_of(temporal))

    @property
    def chronology(self) -> CutoverChronology:
        return self._chronology

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
        return self._epoch_day - self._chronology.month_start(self._year, 1) + 1

    def is_julian(self) -> bool:
        """Return True if this date is before the cutover."""
        return self._chronology.is_julian(self._epoch_day)

    def _day_index_in_month(self) -> int:
        return self._epoch_day - self._chronology.month_start(self._year, self._month)

    @property
    def aligned_day_of_week_in_month(self) -> int:
        return self._day_index_in_month() % 7 + 1

    @property
    def aligned_week_of_month(self) -> int:
        return self._day_index_in_month() // 7 + 1

    def length_of_month(self) -> int:
        return self._chronology.length_of_month(self._year, self._month)

    def length_of_year(self) -> int:
        return self._chronology.length_of_year(self._year)

    def months_in_year(self) -> int:
        return 12

    def to_epoch_day(self) -> int:
        return self._epoch_day

    def range(self, field: Field) -> ValueRange:
        """Return the range of a field for this date.

        In the cutover month the day-of-month range still runs to the
        end of the Gregorian month, since gap days are accepted
        leniently.
        """
        if field is Field.DAY_OF_MONTH:
            return ValueRange.of(
                1, self._chronology.nominal_length_of_month(self._year, self._month)
            )
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            length = self.length_of_year()
            if length < 365:
                return ValueRange.of(1, (length - 1) // 7 + 1)
            return ValueRange.of(1, 53)
        return super().range(field)

    def with_field(self, field: Field, value: int) -> CutoverDate:
        """Return a copy of this date with one field changed.

        The value is checked against the chronology's range rather than
        this date's, so values that fall into the gap or past a short
        month are applied leniently by moving the date.

        Raises:
            ValidationError: If the value is outside the chronology's range.
            UnsupportedFieldError: If the field is not date-based.
        """
        self._chronology.range(field).check_valid_value(value, field)
        return date_ops.apply_field(self, field, value)

    def _resolve_previous(self, year: int, month: int, day: int) -> CutoverDate:
        if year < MIN_YEAR or year > MAX_YEAR:
            raise DateRangeError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        check_valid_value(month, 1, 12, "month")
        day = min(day, self._chronology.nominal_length_of_month(year, month))
        epoch_day = self._chronology.epoch_day_of_fields(year, month, day)
        return type(self)._at(self._chronology, epoch_day)

    def _resolve_epoch_day(self, epoch_day: int) -> CutoverDate:
        if not _EPOCH_DAY_RANGE.is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the cutover range")
        return type(self)._at(self._chronology, epoch_day)

    def _period_until(self, end: AbstractDate) -> ChronoPeriod:
        end = cast(CutoverDate, end)
        total_months = end.proleptic_month - self.proleptic_month
        days = end.day_of_month - self.day_of_month
        if total_months == 0:
            days = end.to_epoch_day() - self._epoch_day
        elif total_months > 0:
            # Day-of-month differences are meaningless across the gap
            if self.is_julian() and not end.is_julian():
                days = end.to_epoch_day() - self.plus_months(total_months).to_epoch_day()
            if days < 0:
                total_months -= 1
                days = end.to_epoch_day() - self.plus_months(total_months).to_epoch_day()
        elif days > 0:
            total_months += 1
            days = end.to_epoch_day() - self.plus_months(total_months).to_epoch_day()
        years = trunc_div(total_months, 12)
        months = trunc_mod(total_months, 12)
        return self._chronology.period(years, months, days)


class BritishCutoverChronology(CutoverChronology):
    """The British calendar, switching to Gregorian on 1752-09-14.

    Examples:
        >>> BritishCutoverChronology.INSTANCE.date_year_day(1752, 247)
        BritishCutoverDate(1752, 9, 14)
        >>> BritishCutoverChronology.INSTANCE.date(1752, 9, 20).length_of_year()
        355
    """

    __slots__ = ()

    INSTANCE: ClassVar[BritishCutoverChronology]

    def __init__(self) -> None:
        super().__init__(BRITISH_CUTOVER)

    @property
    def id(self) -> str:
        return "BritishCutover"

    def date(self, year: int, month: int, day: int) -> BritishCutoverDate:
        return BritishCutoverDate(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> BritishCutoverDate:
        return BritishCutoverDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> BritishCutoverDate:
        return BritishCutoverDate.of_epoch_day(epoch_day)

    def __repr__(self) -> str:
        return "BritishCutoverChronology()"


class BritishCutoverDate(CutoverDate):
    """A date in the British cutover calendar.

    Examples:
        >>> d = BritishCutoverDate(1752, 9, 3)
        >>> d
        BritishCutoverDate(1752, 9, 14)
        >>> str(d)
        'BritishCutover AD 1752-09-14'
    """

    __slots__ = ()

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a BritishCutoverDate, reading gap dates leniently.

        Raises:
            ValidationError: If the day does not exist in either calendar.
        """
        super().__init__(BritishCutoverChronology.INSTANCE, year, month, day)

    @classmethod
    def of(cls, year: int, month: int, day: int) -> BritishCutoverDate:  # type: ignore[override]
        """Create a BritishCutoverDate; see the constructor."""
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> BritishCutoverDate:  # type: ignore[override]
        """Create a BritishCutoverDate from a year and existing day-of-year."""
        chronology = BritishCutoverChronology.INSTANCE
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        epoch_day = chronology.epoch_day_of_year_day(year, day_of_year)
        return cls._at(chronology, epoch_day)  # type: ignore[return-value]

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> BritishCutoverDate:  # type: ignore[override]
        """Create a BritishCutoverDate from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        if not _EPOCH_DAY_RANGE.is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the cutover range")
        return cls._at(BritishCutoverChronology.INSTANCE, epoch_day)  # type: ignore[return-value]

    @classmethod
    def now(cls, clock: Clock | None = None) -> BritishCutoverDate:  # type: ignore[override]
        """Return the current British date."""
        return cls.of_epoch_day(read_clock(clock))

    @classmethod
    def from_date(cls, temporal: object) -> BritishCutoverDate:  # type: ignore[override]
        """Convert another calendar's date or a datetime.date."""
        return cls.of_epoch_day(epoch_day_of(temporal))


def _check_chronology(chronology: object) -> None:
    if not isinstance(chronology, CutoverChronology):
        raise TypeError(
            f"chronology must be a CutoverChronology, got {type(chronology).__name__}"
        )


BritishCutoverChronology.INSTANCE = register_chronology(BritishCutoverChronology())


__all__ = [
    "BRITISH_CUTOVER",
    "BritishCutoverChronology",
    "BritishCutoverDate",
    "CutoverChronology",
    "CutoverDate",
]
