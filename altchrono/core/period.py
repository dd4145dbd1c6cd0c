"""ChronoPeriod class representing an amount of years, months and days.

This module provides the ChronoPeriod class: a calendar-based amount
of time bound to one chronology, as produced by ``date.until(end)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from altchrono._internal.calendar import trunc_div, trunc_mod
from altchrono.errors import ValidationError
from altchrono.units.field import Field

if TYPE_CHECKING:
    from altchrono.core.chronology import Chronology
    from altchrono.core.date import AbstractDate


class ChronoPeriod:
    """A calendar-based amount with year, month and day components.

    A ChronoPeriod belongs to a chronology because the meaning of a
    month depends on the calendar: one Coptic month is 30 days (or 5
    or 6 for the epagomenal month), one Pax month 28 days (or 7 for the
    leap month).

    The components are stored as-is without normalization. Use
    normalized() to fold months into years where the calendar has a
    fixed number of months per year.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).
        chronology: The calendar the amounts are expressed in.

    Examples:
        >>> from altchrono.calendars.coptic import CopticChronology
        >>> p = CopticChronology.INSTANCE.period(1, 14, 3)
        >>> p.normalized()
        ChronoPeriod(years=2, months=1, days=3, chronology=Coptic)
    """

    __slots__ = ("_years", "_months", "_days", "_chronology")

    def __init__(
        self,
        years: int,
        months: int,
        days: int,
        chronology: Chronology,
    ) -> None:
        self._years = years
        self._months = months
        self._days = days
        self._chronology = chronology

    @property
    def years(self) -> int:
        """Return the years component."""
        return self._years

    @property
    def months(self) -> int:
        """Return the months component."""
        return self._months

    @property
    def days(self) -> int:
        """Return the days component."""
        return self._days

    @property
    def chronology(self) -> Chronology:
        """Return the chronology of this period."""
        return self._chronology

    @property
    def is_zero(self) -> bool:
        """Return True if all components are zero."""
        return self._years == 0 and self._months == 0 and self._days == 0

    @property
    def is_negative(self) -> bool:
        """Return True if any component is negative."""
        return self._years < 0 or self._months < 0 or self._days < 0

    def _month_range(self) -> int | None:
        # Months per year, or None when the calendar has a varying count
        month_range = self._chronology.range(Field.MONTH_OF_YEAR)
        if not month_range.is_fixed:
            return None
        return month_range.maximum - month_range.minimum + 1

    def normalized(self) -> ChronoPeriod:
        """Return a copy with months folded into years.

        Folding only happens when the calendar has a fixed number of
        months per year; otherwise the period is returned unchanged.
        Signs follow truncating division, so years and months end up
        with the same sign. Days are never folded.

        Returns:
            The normalized period.
        """
        per_year = self._month_range()
        if per_year is None:
            return self
        total = self._years * per_year + self._months
        years = trunc_div(total, per_year)
        months = trunc_mod(total, per_year)
        if years == self._years and months == self._months:
            return self
        return ChronoPeriod(years, months, self._days, self._chronology)

    def add_to(self, date: AbstractDate) -> AbstractDate:
        """Add this period to a date of the same chronology.

        Raises:
            ValidationError: If the date belongs to another chronology.
        """
        from altchrono.arithmetic.period_ops import add_period_to_date

        return add_period_to_date(date, self)

    def subtract_from(self, date: AbstractDate) -> AbstractDate:
        """Subtract this period from a date of the same chronology."""
        from altchrono.arithmetic.period_ops import subtract_period_from_date

        return subtract_period_from_date(date, self)

    def __add__(self, other: object) -> ChronoPeriod:
        """Add two periods of the same chronology.

        Raises:
            ValidationError: If the chronologies differ.
        """
        if not isinstance(other, ChronoPeriod):
            return NotImplemented
        if other._chronology != self._chronology:
            raise ValidationError(
                f"chronology mismatch, expected {self._chronology.id}, "
                f"got {other._chronology.id}"
            )
        return ChronoPeriod(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
            self._chronology,
        )

    def __sub__(self, other: object) -> ChronoPeriod:
        if not isinstance(other, ChronoPeriod):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> ChronoPeriod:
        return self * -1

    def __mul__(self, other: object) -> ChronoPeriod:
        """Multiply every component by an integer scalar."""
        if not isinstance(other, int):
            return NotImplemented
        return ChronoPeriod(
            self._years * other,
            self._months * other,
            self._days * other,
            self._chronology,
        )

    def __rmul__(self, other: object) -> ChronoPeriod:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChronoPeriod):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
            and self._chronology == other._chronology
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days, self._chronology))

    def __repr__(self) -> str:
        return (
            f"ChronoPeriod(years={self._years}, months={self._months}, "
            f"days={self._days}, chronology={self._chronology.id})"
        )

    def __str__(self) -> str:
        """Return the ISO 8601 style form prefixed by the chronology id.

        Examples:
            >>> from altchrono.calendars.julian import JulianChronology
            >>> str(JulianChronology.INSTANCE.period(1, 2, 3))
            'Julian P1Y2M3D'
        """
        if self.is_zero:
            return f"{self._chronology.id} P0D"
        parts = [f"{self._chronology.id} P"]
        if self._years != 0:
            parts.append(f"{self._years}Y")
        if self._months != 0:
            parts.append(f"{self._months}M")
        if self._days != 0:
            parts.append(f"{self._days}D")
        return "".join(parts)


__all__ = ["ChronoPeriod"]
