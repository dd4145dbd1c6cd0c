"""AbstractDate base class shared by every calendar date.

This module provides AbstractDate: the contract every calendar's date
type fulfils (the required primitives) and the generic behaviour built
on top of those primitives (field access, ranges, arithmetic, periods,
comparison and representation). The arithmetic itself lives in
altchrono.arithmetic.date_ops as free functions.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from altchrono.arithmetic import date_ops
from altchrono.core.chronology import Clock, epoch_day_of, read_clock
from altchrono.core.value_range import ValueRange
from altchrono.errors import DateRangeError, UnsupportedFieldError
from altchrono.units.field import Field
from altchrono.units.unit import ChronoUnit

if TYPE_CHECKING:
    from altchrono.core.chronology import Chronology
    from altchrono.core.period import ChronoPeriod
    from altchrono.units.era import CalendarEra

D = TypeVar("D", bound="AbstractDate")

_PY_EPOCH_ORDINAL = datetime.date(1970, 1, 1).toordinal()

_FIELD_GETTERS: dict[Field, Callable[[AbstractDate], int]] = {
    Field.DAY_OF_WEEK: lambda d: d.day_of_week,
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: lambda d: d.aligned_day_of_week_in_month,
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: lambda d: d.aligned_day_of_week_in_year,
    Field.DAY_OF_MONTH: lambda d: d.day_of_month,
    Field.DAY_OF_YEAR: lambda d: d.day_of_year,
    Field.EPOCH_DAY: lambda d: d.to_epoch_day(),
    Field.ALIGNED_WEEK_OF_MONTH: lambda d: d.aligned_week_of_month,
    Field.ALIGNED_WEEK_OF_YEAR: lambda d: d.aligned_week_of_year,
    Field.MONTH_OF_YEAR: lambda d: d.month,
    Field.PROLEPTIC_MONTH: lambda d: d.proleptic_month,
    Field.YEAR_OF_ERA: lambda d: d.year_of_era,
    Field.YEAR: lambda d: d.proleptic_year,
    Field.ERA: lambda d: d.era.value,
}


class AbstractDate:
    """A date in one of the alternative calendar systems.

    Concrete date types supply the primitives (proleptic_year, month,
    day_of_month, day_of_year, length_of_month, length_of_year,
    to_epoch_day, chronology and _resolve_previous) and inherit
    everything else. Dates are immutable; every operation that
    "modifies" a date returns a new instance.

    Equality requires the same calendar and the same day. Ordering
    operators compare dates of the same calendar; use is_before,
    is_after and is_equal to compare across calendars by epoch day.
    """

    __slots__ = ()

    # -------------------------------------------------------------------------
    # Required primitives
    # -------------------------------------------------------------------------

    @property
    def chronology(self) -> Chronology:
        """Return the chronology of this date."""
        raise NotImplementedError

    @property
    def proleptic_year(self) -> int:
        """Return the proleptic year."""
        raise NotImplementedError

    @property
    def month(self) -> int:
        """Return the month-of-year."""
        raise NotImplementedError

    @property
    def day_of_month(self) -> int:
        """Return the day-of-month."""
        raise NotImplementedError

    @property
    def day_of_year(self) -> int:
        """Return the day-of-year."""
        raise NotImplementedError

    def length_of_month(self) -> int:
        """Return the number of days in the month of this date."""
        raise NotImplementedError

    def length_of_year(self) -> int:
        """Return the number of days in the year of this date."""
        raise NotImplementedError

    def to_epoch_day(self) -> int:
        """Return the epoch day (ISO 1970-01-01 = 0) of this date."""
        raise NotImplementedError

    def _resolve_previous(self: D, year: int, month: int, day: int) -> D:
        """Create a date, clamping the day to the end of a short month."""
        raise NotImplementedError

    def _resolve_epoch_day(self: D, epoch_day: int) -> D:
        return self.chronology.date_epoch_day(epoch_day)  # type: ignore[return-value]

    def months_in_year(self) -> int:
        """Return the number of months in the year of this date."""
        return self.chronology.range(Field.MONTH_OF_YEAR).maximum

    def length_of_week(self) -> int:
        """Return the number of days in a week of this calendar."""
        return 7

    def is_leap_year(self) -> bool:
        """Return True if the year of this date is a leap year."""
        return self.chronology.is_leap_year(self.proleptic_year)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def era(self) -> CalendarEra:
        """Return the era of this date."""
        return self.chronology.era_of(1 if self.proleptic_year >= 1 else 0)

    @property
    def year_of_era(self) -> int:
        """Return the year counted within the era."""
        year = self.proleptic_year
        return year if year >= 1 else 1 - year

    @property
    def day_of_week(self) -> int:
        """Return the day of week, 1 (Monday) to 7 (Sunday) by default."""
        return (self.to_epoch_day() + 3) % 7 + 1

    @property
    def proleptic_month(self) -> int:
        """Return the month count from year 0, month 1."""
        return self.proleptic_year * self.months_in_year() + self.month - 1

    @property
    def aligned_day_of_week_in_month(self) -> int:
        """Return the day within weeks aligned to the start of the month."""
        return (self.day_of_month - 1) % self.length_of_week() + 1

    @property
    def aligned_day_of_week_in_year(self) -> int:
        """Return the day within weeks aligned to the start of the year."""
        return (self.day_of_year - 1) % self.length_of_week() + 1

    @property
    def aligned_week_of_month(self) -> int:
        """Return the week of the month, weeks aligned to the month start."""
        return (self.day_of_month - 1) // self.length_of_week() + 1

    @property
    def aligned_week_of_year(self) -> int:
        """Return the week of the year, weeks aligned to the year start."""
        return (self.day_of_year - 1) // self.length_of_week() + 1

    # -------------------------------------------------------------------------
    # Field protocol
    # -------------------------------------------------------------------------

    def is_supported(self, field: Field) -> bool:
        """Return True if the field can be queried on this date."""
        return field.is_date_based

    def get(self, field: Field) -> int:
        """Return the value of a field.

        Raises:
            UnsupportedFieldError: If the field is not date-based.

        Examples:
            >>> from altchrono import CopticDate, Field
            >>> CopticDate(1728, 10, 29).get(Field.PROLEPTIC_MONTH)
            22473
        """
        getter = _FIELD_GETTERS.get(field)
        if getter is None:
            raise UnsupportedFieldError(f"unsupported field: {field}")
        return getter(self)

    def range(self, field: Field) -> ValueRange:
        """Return the range of a field for this particular date.

        Unlike the chronology's static range, the day-of-month,
        day-of-year and aligned-week-of-month ranges reflect the actual
        month and year of this date.

        Raises:
            UnsupportedFieldError: If the field is not date-based.
        """
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"unsupported field: {field}")
        if field is Field.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is Field.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is Field.ALIGNED_WEEK_OF_MONTH:
            return self._range_aligned_week_of_month()
        return self.chronology.range(field)

    def _range_aligned_week_of_month(self) -> ValueRange:
        return ValueRange.of(1, (self.length_of_month() - 1) // self.length_of_week() + 1)

    def with_field(self: D, field: Field, value: int) -> D:
        """Return a copy of this date with one field changed.

        Raises:
            ValidationError: If the value is outside the field's range.
            UnsupportedFieldError: If the field is not date-based.
        """
        if not self.is_supported(field):
            raise UnsupportedFieldError(f"unsupported field: {field}")
        return date_ops.with_field(self, field, value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_days(self: D, days: int) -> D:
        """Return a copy of this date with days added."""
        return date_ops.plus_days(self, days)

    def plus_weeks(self: D, weeks: int) -> D:
        """Return a copy of this date with weeks added."""
        return date_ops.plus_weeks(self, weeks)

    def plus_months(self: D, months: int) -> D:
        """Return a copy of this date with months added, clamping the day."""
        return date_ops.plus_months(self, months)

    def plus_years(self: D, years: int) -> D:
        """Return a copy of this date with years added, clamping the day."""
        return date_ops.plus_years(self, years)

    def plus(self: D, amount: int, unit: ChronoUnit) -> D:
        """Return a copy of this date with an amount of a unit added."""
        if not unit.is_date_based:
            raise UnsupportedFieldError(f"unsupported unit: {unit}")
        return date_ops.plus(self, amount, unit)

    def minus_days(self: D, days: int) -> D:
        """Return a copy of this date with days subtracted."""
        return self.plus_days(-days)

    def minus_weeks(self: D, weeks: int) -> D:
        """Return a copy of this date with weeks subtracted."""
        return self.plus_weeks(-weeks)

    def minus_months(self: D, months: int) -> D:
        """Return a copy of this date with months subtracted."""
        return self.plus_months(-months)

    def minus_years(self: D, years: int) -> D:
        """Return a copy of this date with years subtracted."""
        return self.plus_years(-years)

    def minus(self: D, amount: int, unit: ChronoUnit) -> D:
        """Return a copy of this date with an amount of a unit subtracted."""
        return self.plus(-amount, unit)

    def until(self, end: object, unit: ChronoUnit | None = None) -> Any:
        """Measure the time from this date to another.

        Args:
            end: The end date, exclusive. Any calendar date or a
                datetime.date; it is converted to this calendar.
            unit: The unit to measure in. When omitted, a ChronoPeriod
                of years, months and days is returned.

        Returns:
            An int amount of the unit, or a ChronoPeriod.

        Raises:
            UnsupportedFieldError: If the unit is smaller than a day.

        Examples:
            >>> from altchrono import JulianDate, ChronoUnit
            >>> JulianDate(2012, 1, 31).until(JulianDate(2012, 3, 1), ChronoUnit.MONTHS)
            1
        """
        end_date = self._resolve_epoch_day(epoch_day_of(end))
        if unit is None:
            return self._period_until(end_date)
        if not unit.is_date_based:
            raise UnsupportedFieldError(f"unsupported unit: {unit}")
        return date_ops.until(self, end_date, unit)

    def _weeks_until(self, end: AbstractDate) -> int:
        return date_ops.weeks_until(self, end)

    def _months_until(self, end: AbstractDate) -> int:
        return date_ops.months_until(self, end)

    def _years_until(self, end: AbstractDate) -> int:
        from altchrono._internal.calendar import trunc_div

        return trunc_div(self._months_until(end), self.months_in_year())

    def _period_until(self, end: AbstractDate) -> ChronoPeriod:
        return date_ops.period_until(self, end)

    def __add__(self: D, other: object) -> D:
        """Add a ChronoPeriod of the same chronology to this date."""
        from altchrono.arithmetic.period_ops import add_period_to_date
        from altchrono.core.period import ChronoPeriod

        if not isinstance(other, ChronoPeriod):
            return NotImplemented
        return add_period_to_date(self, other)

    def __sub__(self, other: object) -> Any:
        """Subtract a ChronoPeriod, or measure the period from another date.

        ``end - start`` returns ``start.until(end)``.
        """
        from altchrono.arithmetic.period_ops import subtract_period_from_date
        from altchrono.core.period import ChronoPeriod

        if isinstance(other, ChronoPeriod):
            return subtract_period_from_date(self, other)
        if isinstance(other, AbstractDate):
            return other.until(self)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------

    @classmethod
    def now(cls: type[D], clock: Clock | None = None) -> D:
        """Return the current date in this calendar.

        Args:
            clock: Zero-argument callable returning a datetime.date;
                defaults to datetime.date.today. Its errors propagate.
        """
        return cls.of_epoch_day(read_clock(clock))  # type: ignore[attr-defined]

    @classmethod
    def from_date(cls: type[D], temporal: object) -> D:
        """Convert another calendar's date or a datetime.date.

        Raises:
            TypeError: If the object has no epoch-day representation.
        """
        return cls.of_epoch_day(epoch_day_of(temporal))  # type: ignore[attr-defined]

    def to_iso_date(self) -> datetime.date:
        """Return the equivalent datetime.date.

        Raises:
            DateRangeError: If the date is outside datetime.date's range.
        """
        ordinal = self.to_epoch_day() + _PY_EPOCH_ORDINAL
        if ordinal < datetime.date.min.toordinal() or ordinal > datetime.date.max.toordinal():
            raise DateRangeError(f"{self!r} is outside the range of datetime.date")
        return datetime.date.fromordinal(ordinal)

    def to_json(self) -> dict[str, Any]:
        """Return the date as a JSON-serializable dictionary."""
        from altchrono.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls: type[D], data: dict[str, Any]) -> D:
        """Create a date of this class from a JSON dictionary.

        Raises:
            ParseError: If the data is malformed or holds another type.
            ValidationError: If the stored fields do not form a valid date.
        """
        from altchrono.convert.json import from_json
        from altchrono.errors import ParseError

        value = from_json(data)
        if not isinstance(value, cls):
            raise ParseError(f"expected {cls.__name__}, got {type(value).__name__}")
        return value

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def is_before(self, other: AbstractDate) -> bool:
        """Return True if this day is before the other, in any calendar."""
        return self.to_epoch_day() < other.to_epoch_day()

    def is_after(self, other: AbstractDate) -> bool:
        """Return True if this day is after the other, in any calendar."""
        return self.to_epoch_day() > other.to_epoch_day()

    def is_equal(self, other: AbstractDate) -> bool:
        """Return True if both dates denote the same day, in any calendar."""
        return self.to_epoch_day() == other.to_epoch_day()

    def _comparable(self, other: object) -> bool:
        return type(other) is type(self) and other.chronology == self.chronology  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractDate):
            return NotImplemented
        return self._comparable(other) and self.to_epoch_day() == other.to_epoch_day()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AbstractDate) or not self._comparable(other):
            return NotImplemented
        return self.to_epoch_day() < other.to_epoch_day()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AbstractDate) or not self._comparable(other):
            return NotImplemented
        return self.to_epoch_day() <= other.to_epoch_day()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AbstractDate) or not self._comparable(other):
            return NotImplemented
        return self.to_epoch_day() > other.to_epoch_day()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AbstractDate) or not self._comparable(other):
            return NotImplemented
        return self.to_epoch_day() >= other.to_epoch_day()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.chronology.id, self.to_epoch_day()))

    # -------------------------------------------------------------------------
    # Representation
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        """Return a string like 'CopticDate(1728, 10, 29)'."""
        return (
            f"{type(self).__name__}({self.proleptic_year}, {self.month}, "
            f"{self.day_of_month})"
        )

    def __str__(self) -> str:
        """Return a string like 'Coptic AM 1728-10-29'."""
        return (
            f"{self.chronology} {self.era.name} {self.year_of_era}"
            f"-{self.month:02d}-{self.day_of_month:02d}"
        )


__all__ = ["AbstractDate"]
