"""The Accounting calendar, also known as the 52/53-week calendar.

Accounting calendars are used by businesses whose fiscal year should
always end on the same day of the week. Every year is a whole number
of weeks: 52 weeks (364 days) normally, and 53 weeks (371 days) in the
years where the year end would otherwise drift too far from the chosen
ISO month. The extra week is appended to a configurable month.

A year ends either on the last given weekday of an ISO month
(``in_last_week_of``) or on the given weekday nearest the end of that
month (``nearest_end_of``). The year is divided into months by an
AccountingYearDivision: quarters of 4-4-5, 4-5-4 or 5-4-4 weeks, or
thirteen months of four weeks.

Accounting chronologies are configured values rather than singletons
and are created through AccountingChronologyBuilder.

Examples:
    >>> chrono = (
    ...     AccountingChronologyBuilder()
    ...     .ends_on(DayOfWeek.SUNDAY)
    ...     .nearest_end_of(Month.AUGUST)
    ...     .with_division(AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS)
    ...     .leap_week_in_month(13)
    ...     .to_chronology()
    ... )
    >>> chrono.date(2012, 1, 1).to_iso_date()
    datetime.date(2011, 8, 29)
    >>> chrono.date(2012, 13, 35).to_iso_date()
    datetime.date(2012, 9, 2)
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from enum import Enum
from typing import Any, TypeVar

from altchrono._internal.calendar import (
    days_in_month,
    epoch_day_to_ymd,
    previous_or_same,
    ymd_to_epoch_day,
)
from altchrono._internal.validation import check_valid_value, validate_day
from altchrono.core.chronology import Chronology, Clock, epoch_day_of, read_clock
from altchrono.core.date import AbstractDate
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, ParseError, UnsupportedFieldError, ValidationError
from altchrono.units.era import AccountingEra
from altchrono.units.field import Field
from altchrono.units.iso import DayOfWeek, Month

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

DAYS_PER_WEEK: int = 7
WEEKS_IN_YEAR: int = 52
DAYS_IN_YEAR: int = WEEKS_IN_YEAR * DAYS_PER_WEEK
DAYS_IN_LEAP_YEAR: int = DAYS_IN_YEAR + DAYS_PER_WEEK

MIN_YEAR: int = -999_999
MAX_YEAR: int = 999_999


class AccountingYearDivision(Enum):
    """How an accounting year is divided into months of whole weeks.

    The value of each member is the number of weeks in each month of a
    non-leap year. In a leap year one month gains the leap week.

    Examples:
        >>> div = AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS
        >>> div.weeks_in_month(3)
        5
        >>> div.weeks_at_start_of_month(4)
        13
        >>> div.month_from_elapsed_weeks(13)
        4
    """

    QUARTERS_OF_PATTERN_4_4_5_WEEKS = (4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5)
    QUARTERS_OF_PATTERN_4_5_4_WEEKS = (4, 5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4)
    QUARTERS_OF_PATTERN_5_4_4_WEEKS = (5, 4, 4, 5, 4, 4, 5, 4, 4, 5, 4, 4)
    THIRTEEN_EVEN_MONTHS_OF_4_WEEKS = (4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4)

    def __init__(self, *weeks: int) -> None:
        elapsed = [0]
        for count in weeks[:-1]:
            elapsed.append(elapsed[-1] + count)
        self._elapsed_weeks = tuple(elapsed)

    def length_in_months(self) -> int:
        """Return the number of months in a year."""
        return len(self.value)

    def months_in_year_range(self) -> ValueRange:
        """Return the range of valid months."""
        return ValueRange.of(1, len(self.value))

    def _check_month(self, month: int, name: str = "month") -> int:
        return check_valid_value(month, 1, len(self.value), name)

    def _check_leap_month(self, leap_week_in_month: int) -> int:
        if leap_week_in_month == 0:
            return 0
        return self._check_month(leap_week_in_month, "leap_week_in_month")

    def weeks_in_month(self, month: int, leap_week_in_month: int = 0) -> int:
        """Return the number of weeks in a month.

        Args:
            month: The month, 1-based.
            leap_week_in_month: The month holding the leap week in a leap
                year, or 0 for a year without a leap week.

        Raises:
            ValidationError: If either month is out of range.
        """
        month = self._check_month(month)
        leap = self._check_leap_month(leap_week_in_month)
        return self.value[month - 1] + (1 if month == leap else 0)

    def weeks_at_start_of_month(self, month: int, leap_week_in_month: int = 0) -> int:
        """Return the number of weeks elapsed before the month starts.

        Raises:
            ValidationError: If either month is out of range.
        """
        month = self._check_month(month)
        leap = self._check_leap_month(leap_week_in_month)
        extra = 1 if leap != 0 and month > leap else 0
        return self._elapsed_weeks[month - 1] + extra

    def month_from_elapsed_weeks(self, weeks_elapsed: int, leap_week_in_month: int = 0) -> int:
        """Return the month containing the week after the elapsed weeks.

        Args:
            weeks_elapsed: Whole weeks elapsed since the start of the
                year, from 0 to 51 (52 in a year with a leap week).
            leap_week_in_month: The month holding the leap week, or 0.

        Raises:
            ValidationError: If the week count is outside the year.
        """
        weeks_in_year = WEEKS_IN_YEAR if leap_week_in_month == 0 else WEEKS_IN_YEAR + 1
        if weeks_elapsed < 0 or weeks_elapsed >= weeks_in_year:
            raise ValidationError(
                f"elapsed weeks must be between 0 and {weeks_in_year - 1}, got {weeks_elapsed}"
            )
        leap = self._check_leap_month(leap_week_in_month)
        month = bisect_right(self._elapsed_weeks, weeks_elapsed)
        # The first week of a month after the leap week is the leap week itself
        if leap == 0 or month <= leap or weeks_elapsed > self._elapsed_weeks[month - 1]:
            return month
        return month - 1

    def _max_weeks_in_month(self, leap_week_in_month: int) -> int:
        return max(
            self.weeks_in_month(month, leap_week_in_month)
            for month in range(1, len(self.value) + 1)
        )


class AccountingChronology(Chronology):
    """An Accounting calendar system with a fixed configuration.

    Instances are immutable values: two chronologies with the same
    configuration are equal. Create them with AccountingChronologyBuilder.

    Attributes:
        day_of_week: The weekday every year ends on.
        end: The ISO month the year ends in or near.
        in_last_week: True if the year ends in the last week of the
            month, False if it ends on the weekday nearest the month end.
        division: How the year is split into months.
        leap_week_in_month: The month that gains the leap week.
        year_offset: 0 if accounting year N ends in ISO year N, 1 if it
            starts in ISO year N.
    """

    __slots__ = (
        "_day_of_week",
        "_end",
        "_in_last_week",
        "_division",
        "_leap_week_in_month",
        "_year_offset",
        "_ranges",
    )

    ERA_CLASS = AccountingEra

    def __init__(
        self,
        day_of_week: DayOfWeek | int,
        end: Month | int,
        in_last_week: bool,
        division: AccountingYearDivision,
        leap_week_in_month: int,
        year_offset: int = 0,
    ) -> None:
        """Create an AccountingChronology.

        Raises:
            ValidationError: If any setting is out of range.
        """
        self._day_of_week = DayOfWeek.of(day_of_week)
        self._end = Month.of(end)
        self._in_last_week = bool(in_last_week)
        if not isinstance(division, AccountingYearDivision):
            raise ValidationError(f"division must be an AccountingYearDivision, got {division!r}")
        self._division = division
        self._leap_week_in_month = check_valid_value(
            leap_week_in_month, 1, division.length_in_months(), "leap_week_in_month"
        )
        self._year_offset = check_valid_value(year_offset, 0, 1, "year_offset")
        self._ranges = self._build_ranges()

    def _build_ranges(self) -> dict[Field, ValueRange]:
        months = self._division.length_in_months()
        max_weeks = self._division._max_weeks_in_month(self._leap_week_in_month)
        return {
            Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 4, max_weeks),
            Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, WEEKS_IN_YEAR, WEEKS_IN_YEAR + 1),
            Field.DAY_OF_MONTH: ValueRange.of(1, 4 * DAYS_PER_WEEK, max_weeks * DAYS_PER_WEEK),
            Field.DAY_OF_YEAR: ValueRange.of(1, DAYS_IN_YEAR, DAYS_IN_LEAP_YEAR),
            Field.MONTH_OF_YEAR: ValueRange.of(1, months),
            Field.PROLEPTIC_MONTH: ValueRange.of(MIN_YEAR * months, MAX_YEAR * months + months - 1),
            Field.EPOCH_DAY: ValueRange.of(self.year_end(MIN_YEAR - 1) + 1, self.year_end(MAX_YEAR)),
            Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR, -MIN_YEAR + 1),
            Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
        }

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._day_of_week

    @property
    def end(self) -> Month:
        return self._end

    @property
    def in_last_week(self) -> bool:
        return self._in_last_week

    @property
    def division(self) -> AccountingYearDivision:
        return self._division

    @property
    def leap_week_in_month(self) -> int:
        return self._leap_week_in_month

    @property
    def year_offset(self) -> int:
        return self._year_offset

    def config(self) -> dict[str, Any]:
        """Return the configuration as a JSON-serializable dictionary."""
        return {
            "ends_on": self._day_of_week.name,
            "end": self._end.name,
            "in_last_week": self._in_last_week,
            "division": self._division.name,
            "leap_week_in_month": self._leap_week_in_month,
            "year_offset": self._year_offset,
        }

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> AccountingChronology:
        """Rebuild a chronology from the output of config().

        Raises:
            KeyError: If a setting is missing.
            ParseError: If a setting names no member of its enum.
            ValidationError: If a setting is out of range.
        """
        return cls(
            _config_member(DayOfWeek, config, "ends_on"),
            _config_member(Month, config, "end"),
            config["in_last_week"],
            _config_member(AccountingYearDivision, config, "division"),
            config["leap_week_in_month"],
            config.get("year_offset", 0),
        )

    # -------------------------------------------------------------------------
    # Chronology protocol
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return "Accounting"

    def date(self, year: int, month: int, day: int) -> AccountingDate:
        return AccountingDate(self, year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> AccountingDate:
        return AccountingDate.of_year_day(self, year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> AccountingDate:
        return AccountingDate.of_epoch_day(self, epoch_day)

    def range(self, field: Field) -> ValueRange:
        if not field.is_date_based:
            raise UnsupportedFieldError(f"unsupported field: {field}")
        found = self._ranges.get(field)
        return found if found is not None else super().range(field)

    def is_leap_year(self, year: int) -> bool:
        """Check if a year has 53 weeks.

        Examples:
            >>> chrono = (
            ...     AccountingChronologyBuilder()
            ...     .ends_on(DayOfWeek.SUNDAY)
            ...     .nearest_end_of(Month.AUGUST)
            ...     .with_division(AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS)
            ...     .leap_week_in_month(13)
            ...     .to_chronology()
            ... )
            >>> chrono.is_leap_year(2012), chrono.is_leap_year(2013)
            (True, False)
        """
        return self.year_end(year) - self.year_end(year - 1) == DAYS_IN_LEAP_YEAR

    def year_end(self, year: int) -> int:
        """Return the epoch day of the last day of an accounting year."""
        iso_year = year + self._year_offset
        if self._in_last_week:
            last = days_in_month(iso_year, self._end)
            return previous_or_same(ymd_to_epoch_day(iso_year, self._end, last), self._day_of_week)
        # Nearest the month end means within three days either side of it
        if self._end == Month.DECEMBER:
            following = ymd_to_epoch_day(iso_year + 1, 1, 3)
        else:
            following = ymd_to_epoch_day(iso_year, self._end + 1, 3)
        return previous_or_same(following, self._day_of_week)

    def previous_leap_years(self, year: int) -> int:
        """Return the number of leap years between year 1 and the year.

        For years after 0 this counts the leap years in [1, year). For
        year 0 and earlier it is the negated count of leap years in
        [year, 0], so that the result grows by one across every leap
        year.
        """
        days = self.year_end(year - 1) - self.year_end(0) - DAYS_IN_YEAR * (year - 1)
        return days // DAYS_PER_WEEK

    def _leap_week_month(self, year: int) -> int:
        return self._leap_week_in_month if self.is_leap_year(year) else 0

    def length_of_month(self, year: int, month: int) -> int:
        """Return the number of days in a month of an accounting year."""
        return self._division.weeks_in_month(month, self._leap_week_month(year)) * DAYS_PER_WEEK

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[Any, ...]:
        return (
            self._day_of_week,
            self._end,
            self._in_last_week,
            self._division,
            self._leap_week_in_month,
            self._year_offset,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountingChronology):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"AccountingChronology({self._day_of_week.name}, {self._end.name}, "
            f"in_last_week={self._in_last_week}, {self._division.name}, "
            f"leap_week_in_month={self._leap_week_in_month}, year_offset={self._year_offset})"
        )

    def __str__(self) -> str:
        """Return the description of the configuration used in date strings."""
        position = "in last week of" if self._in_last_week else "nearest end of"
        anchor = "starting" if self._year_offset else "ending"
        return (
            f"Accounting calendar ends on {self._day_of_week.name} {position} "
            f"{self._end.name}, year divided in {self._division.name} with leap-week "
            f"in month {self._leap_week_in_month} {anchor} in the given ISO year"
        )


class AccountingChronologyBuilder:
    """Builds an AccountingChronology step by step.

    The weekday, the end month and the division are required. Every
    setter returns the builder so calls can be chained.

    Examples:
        >>> builder = AccountingChronologyBuilder().ends_on(DayOfWeek.SATURDAY)
        >>> builder = builder.in_last_week_of(Month.DECEMBER)
        >>> builder = builder.with_division(AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS)
        >>> builder.leap_week_in_month(12).to_chronology().is_leap_year(2015)
        False
    """

    __slots__ = (
        "_day_of_week",
        "_end",
        "_in_last_week",
        "_division",
        "_leap_week_in_month",
        "_year_offset",
    )

    def __init__(self) -> None:
        self._day_of_week: DayOfWeek | int | None = None
        self._end: Month | int | None = None
        self._in_last_week = False
        self._division: AccountingYearDivision | None = None
        self._leap_week_in_month = 0
        self._year_offset = 0

    def ends_on(self, day_of_week: DayOfWeek | int) -> AccountingChronologyBuilder:
        """Set the weekday every year ends on."""
        self._day_of_week = day_of_week
        return self

    def nearest_end_of(self, month: Month | int) -> AccountingChronologyBuilder:
        """End the year on the weekday nearest the last day of the month."""
        self._end = month
        self._in_last_week = False
        return self

    def in_last_week_of(self, month: Month | int) -> AccountingChronologyBuilder:
        """End the year on the last such weekday within the month."""
        self._end = month
        self._in_last_week = True
        return self

    def with_division(self, division: AccountingYearDivision) -> AccountingChronologyBuilder:
        """Set how the year is split into months."""
        self._division = division
        return self

    def leap_week_in_month(self, month: int) -> AccountingChronologyBuilder:
        """Set the month that holds the leap week in 53-week years."""
        self._leap_week_in_month = month
        return self

    def accounting_year_ends_in_iso_year(self) -> AccountingChronologyBuilder:
        """Number each accounting year after the ISO year it ends in."""
        self._year_offset = 0
        return self

    def accounting_year_starts_in_iso_year(self) -> AccountingChronologyBuilder:
        """Number each accounting year after the ISO year it starts in."""
        self._year_offset = 1
        return self

    def to_chronology(self) -> AccountingChronology:
        """Build the chronology.

        Raises:
            ValidationError: If a required setting is missing or the
                leap week month does not exist in the division.
        """
        if self._day_of_week is None:
            raise ValidationError("day of week must be set with ends_on()")
        if self._end is None:
            raise ValidationError(
                "end month must be set with nearest_end_of() or in_last_week_of()"
            )
        if self._division is None:
            raise ValidationError("division must be set with with_division()")
        chronology = AccountingChronology(
            self._day_of_week,
            self._end,
            self._in_last_week,
            self._division,
            self._leap_week_in_month,
            self._year_offset,
        )
        logger.debug("built accounting chronology: %s", chronology)
        return chronology


class AccountingDate(AbstractDate):
    """A date in an Accounting calendar.

    Every AccountingDate carries its chronology, since the calendar
    depends on its configuration. Dates of differently configured
    chronologies are never equal.

    Examples:
        >>> chrono = (
        ...     AccountingChronologyBuilder()
        ...     .ends_on(DayOfWeek.SUNDAY)
        ...     .nearest_end_of(Month.AUGUST)
        ...     .with_division(AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS)
        ...     .leap_week_in_month(13)
        ...     .to_chronology()
        ... )
        >>> d = chrono.date(2014, 5, 26)
        >>> d.day_of_year
        138
        >>> d.plus_months(-5)
        AccountingDate(2013, 13, 26)
    """

    __slots__ = ("_chronology", "_year", "_month", "_day")

    def __init__(self, chronology: AccountingChronology, year: int, month: int, day: int) -> None:
        """Create an AccountingDate.

        Raises:
            TypeError: If chronology is not an AccountingChronology.
            ValidationError: If the fields do not form a valid date.
        """
        _check_chronology(chronology)
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        check_valid_value(month, 1, chronology.division.length_in_months(), "month")
        validate_day(day, chronology.length_of_month(year, month), year, month)
        self._chronology = chronology
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(
        cls, chronology: AccountingChronology, year: int, month: int, day: int
    ) -> AccountingDate:
        date = object.__new__(cls)
        date._chronology = chronology
        date._year = year
        date._month = month
        date._day = day
        return date

    @classmethod
    def of(cls, chronology: AccountingChronology, year: int, month: int, day: int) -> AccountingDate:
        """Create an AccountingDate; see the constructor."""
        return cls(chronology, year, month, day)

    @classmethod
    def of_year_day(
        cls, chronology: AccountingChronology, year: int, day_of_year: int
    ) -> AccountingDate:
        """Create an AccountingDate from a year and day-of-year.

        Raises:
            ValidationError: If the day-of-year does not exist in the year.
        """
        _check_chronology(chronology)
        check_valid_value(year, MIN_YEAR, MAX_YEAR, "year")
        leap = chronology.is_leap_year(year)
        check_valid_value(
            day_of_year, 1, DAYS_IN_LEAP_YEAR if leap else DAYS_IN_YEAR, "day_of_year"
        )
        leap_month = chronology.leap_week_in_month if leap else 0
        division = chronology.division
        month = division.month_from_elapsed_weeks((day_of_year - 1) // DAYS_PER_WEEK, leap_month)
        day = day_of_year - division.weeks_at_start_of_month(month, leap_month) * DAYS_PER_WEEK
        return cls._create(chronology, year, month, day)

    @classmethod
    def of_epoch_day(cls, chronology: AccountingChronology, epoch_day: int) -> AccountingDate:
        """Create an AccountingDate from an epoch day.

        Raises:
            DateRangeError: If the epoch day is outside the supported range.
        """
        _check_chronology(chronology)
        if not chronology.range(Field.EPOCH_DAY).is_valid_value(epoch_day):
            raise DateRangeError(f"epoch day {epoch_day} is outside the Accounting range")
        year = epoch_day_to_ymd(epoch_day)[0] - chronology.year_offset
        while epoch_day > chronology.year_end(year):
            year += 1
        while epoch_day <= chronology.year_end(year - 1):
            year -= 1
        return cls.of_year_day(chronology, year, epoch_day - chronology.year_end(year - 1))

    @classmethod
    def now(  # type: ignore[override]
        cls, chronology: AccountingChronology, clock: Clock | None = None
    ) -> AccountingDate:
        """Return the current date in the given Accounting calendar."""
        return cls.of_epoch_day(chronology, read_clock(clock))

    @classmethod
    def from_date(  # type: ignore[override]
        cls, chronology: AccountingChronology, temporal: object
    ) -> AccountingDate:
        """Convert another calendar's date or a datetime.date."""
        return cls.of_epoch_day(chronology, epoch_day_of(temporal))

    @property
    def chronology(self) -> AccountingChronology:
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
        weeks = self._chronology.division.weeks_at_start_of_month(
            self._month, self._chronology._leap_week_month(self._year)
        )
        return weeks * DAYS_PER_WEEK + self._day

    @property
    def era(self) -> AccountingEra:
        return AccountingEra.CE if self._year >= 1 else AccountingEra.BCE

    def length_of_month(self) -> int:
        return self._chronology.length_of_month(self._year, self._month)

    def length_of_year(self) -> int:
        return DAYS_IN_LEAP_YEAR if self.is_leap_year() else DAYS_IN_YEAR

    def months_in_year(self) -> int:
        return self._chronology.division.length_in_months()

    def to_epoch_day(self) -> int:
        return self._chronology.year_end(self._year - 1) + self.day_of_year

    def _resolve_previous(self, year: int, month: int, day: int) -> AccountingDate:
        if year < MIN_YEAR or year > MAX_YEAR:
            raise DateRangeError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        check_valid_value(month, 1, self.months_in_year(), "month")
        length = self._chronology.length_of_month(year, month)
        return AccountingDate._create(self._chronology, year, month, min(day, length))

    def _resolve_epoch_day(self, epoch_day: int) -> AccountingDate:
        return AccountingDate.of_epoch_day(self._chronology, epoch_day)


def _check_chronology(chronology: object) -> None:
    if not isinstance(chronology, AccountingChronology):
        raise TypeError(
            f"chronology must be an AccountingChronology, got {type(chronology).__name__}"
        )


def _config_member(enum_type: type[E], config: dict[str, Any], key: str) -> E:
    """Look up a configuration setting stored as an enum member name."""
    name = config[key]
    if not isinstance(name, str) or name not in enum_type.__members__:
        raise ParseError(f"unknown value for Accounting setting {key!r}: {name!r}")
    return enum_type[name]


__all__ = [
    "AccountingChronology",
    "AccountingChronologyBuilder",
    "AccountingDate",
    "AccountingYearDivision",
]
