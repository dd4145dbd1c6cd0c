"""Tests for ChronoPeriod and ValueRange.

These tests verify period construction, normalization, arithmetic and
string forms, and the bounds checking done by ValueRange.
"""

from __future__ import annotations

import pytest

from altchrono import (
    ChronoPeriod,
    CopticChronology,
    CopticDate,
    Field,
    JulianChronology,
    JulianDate,
    PaxChronology,
    ValidationError,
    ValueRange,
)

JULIAN = JulianChronology.INSTANCE
COPTIC = CopticChronology.INSTANCE
PAX = PaxChronology.INSTANCE


# =============================================================================
# ChronoPeriod Tests
# =============================================================================


class TestChronoPeriodConstruction:
    """Tests for creating periods."""

    def test_components(self) -> None:
        """A period keeps its components unchanged."""
        period = JULIAN.period(1, 14, -3)
        assert period.years == 1
        assert period.months == 14
        assert period.days == -3
        assert period.chronology is JULIAN

    def test_direct_construction(self) -> None:
        """The constructor matches Chronology.period."""
        assert ChronoPeriod(1, 2, 3, JULIAN) == JULIAN.period(1, 2, 3)

    def test_is_zero(self) -> None:
        """Only the all-zero period is zero."""
        assert JULIAN.period(0, 0, 0).is_zero
        assert not JULIAN.period(0, 0, 1).is_zero

    def test_is_negative(self) -> None:
        """Any negative component makes the period negative."""
        assert JULIAN.period(1, -1, 0).is_negative
        assert not JULIAN.period(1, 1, 0).is_negative


class TestChronoPeriodNormalized:
    """Tests for ChronoPeriod.normalized()."""

    def test_folds_months(self) -> None:
        """Months fold into years by the calendar's month count."""
        assert JULIAN.period(1, 14, 3).normalized() == JULIAN.period(2, 2, 3)
        assert COPTIC.period(0, 27, 0).normalized() == COPTIC.period(2, 1, 0)

    def test_truncates_towards_zero(self) -> None:
        """Years and months share the same sign."""
        assert JULIAN.period(1, -14, 0).normalized() == JULIAN.period(0, -2, 0)
        assert JULIAN.period(-1, 2, 0).normalized() == JULIAN.period(0, -10, 0)

    def test_days_untouched(self) -> None:
        """Days are never folded into months."""
        assert JULIAN.period(0, 0, 400).normalized() == JULIAN.period(0, 0, 400)

    def test_varying_month_count(self) -> None:
        """Calendars with a varying month count are left alone."""
        period = PAX.period(0, 15, 0)
        assert period.normalized() is period

    def test_already_normal(self) -> None:
        """A normalized period is returned as-is."""
        period = JULIAN.period(1, 2, 3)
        assert period.normalized() is period


class TestChronoPeriodArithmetic:
    """Tests for period arithmetic."""

    def test_add_and_subtract(self) -> None:
        """Components are added one by one."""
        assert JULIAN.period(1, 2, 3) + JULIAN.period(0, 11, 30) == JULIAN.period(1, 13, 33)
        assert JULIAN.period(1, 2, 3) - JULIAN.period(1, 2, 3) == JULIAN.period(0, 0, 0)

    def test_negate_and_multiply(self) -> None:
        """Scaling multiplies every component."""
        assert -JULIAN.period(1, 2, 3) == JULIAN.period(-1, -2, -3)
        assert JULIAN.period(1, 2, 3) * 2 == JULIAN.period(2, 4, 6)
        assert 3 * JULIAN.period(1, 0, -1) == JULIAN.period(3, 0, -3)

    def test_chronology_mismatch(self) -> None:
        """Periods of different calendars cannot be added."""
        with pytest.raises(ValidationError, match="chronology mismatch, expected Julian, got Coptic"):
            JULIAN.period(1, 0, 0) + COPTIC.period(1, 0, 0)

    def test_unsupported_operands(self) -> None:
        """Arithmetic with other types is rejected."""
        with pytest.raises(TypeError):
            JULIAN.period(1, 0, 0) + 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            JULIAN.period(1, 0, 0) * 1.5  # type: ignore[operator]

    def test_add_to_date(self) -> None:
        """Periods add to and subtract from dates of their calendar."""
        date = JulianDate(2011, 1, 31)
        assert JULIAN.period(1, 2, 3).add_to(date) == JulianDate(2012, 4, 3)
        assert date + JULIAN.period(0, 1, 0) == JulianDate(2011, 2, 28)
        assert JULIAN.period(0, 1, 0).subtract_from(JulianDate(2011, 3, 31)) == JulianDate(2011, 2, 28)
        assert JulianDate(2011, 3, 31) - JULIAN.period(0, 1, 0) == JulianDate(2011, 2, 28)

    def test_add_to_date_of_other_calendar(self) -> None:
        """A period only applies to dates of its own calendar."""
        with pytest.raises(ValidationError, match="chronology mismatch, expected Julian, got Coptic"):
            JulianDate(2011, 1, 31) + COPTIC.period(0, 1, 0)

    def test_until_and_add_agree(self) -> None:
        """Adding the period between two dates reaches the end date."""
        start = CopticDate(1727, 5, 26)
        end = CopticDate(1728, 6, 25)
        assert start + start.until(end) == end
        assert end - start == start.until(end)


class TestChronoPeriodEquality:
    """Tests for period equality and representation."""

    def test_chronology_matters(self) -> None:
        """Equal components in different calendars are not equal."""
        assert JULIAN.period(1, 2, 3) != COPTIC.period(1, 2, 3)
        assert JULIAN.period(1, 2, 3) != (1, 2, 3)

    def test_hash(self) -> None:
        """Equal periods hash equally."""
        assert hash(JULIAN.period(1, 2, 3)) == hash(ChronoPeriod(1, 2, 3, JULIAN))
        assert len({JULIAN.period(1, 2, 3), JULIAN.period(1, 2, 3)}) == 1

    def test_repr(self) -> None:
        """repr shows the components and the chronology id."""
        assert repr(JULIAN.period(1, 2, 3)) == "ChronoPeriod(years=1, months=2, days=3, chronology=Julian)"

    def test_str(self) -> None:
        """str uses the ISO 8601 style with the chronology id."""
        assert str(JULIAN.period(1, 2, 3)) == "Julian P1Y2M3D"
        assert str(COPTIC.period(0, 0, -5)) == "Coptic P-5D"
        assert str(COPTIC.period(0, 0, 0)) == "Coptic P0D"


# =============================================================================
# ValueRange Tests
# =============================================================================


class TestValueRange:
    """Tests for ValueRange."""

    def test_of_two_bounds(self) -> None:
        """Two bounds give a fixed range."""
        r = ValueRange.of(1, 12)
        assert r.minimum == r.largest_minimum == 1
        assert r.smallest_maximum == r.maximum == 12
        assert r.is_fixed

    def test_of_three_bounds(self) -> None:
        """Three bounds give a varying maximum."""
        r = ValueRange.of(1, 28, 35)
        assert r.smallest_maximum == 28
        assert r.maximum == 35
        assert not r.is_fixed

    def test_of_four_bounds(self) -> None:
        """Four bounds allow a varying minimum."""
        r = ValueRange.of(-1, 1, 12, 13)
        assert r.minimum == -1
        assert r.largest_minimum == 1
        assert not r.is_fixed

    def test_of_wrong_count(self) -> None:
        """Only two to four bounds are accepted."""
        with pytest.raises(TypeError, match="expected 2, 3 or 4 bounds, got 1"):
            ValueRange.of(1)

    def test_inconsistent_bounds(self) -> None:
        """Bounds must be ordered."""
        with pytest.raises(ValidationError, match="smallest maximum 35 exceeds largest maximum 28"):
            ValueRange.of(1, 35, 28)
        with pytest.raises(ValidationError, match="minimum 10 exceeds maximum 5"):
            ValueRange.of(10, 5)
        with pytest.raises(ValidationError, match="smallest minimum 2 exceeds largest minimum 1"):
            ValueRange.of(2, 1, 5, 6)

    def test_is_valid_value(self) -> None:
        """Values between minimum and maximum are valid."""
        r = ValueRange.of(1, 28, 35)
        assert r.is_valid_value(1)
        assert r.is_valid_value(35)
        assert not r.is_valid_value(0)
        assert not r.is_valid_value(36)

    def test_check_valid_value(self) -> None:
        """check_valid_value returns the value or raises."""
        r = ValueRange.of(1, 30)
        assert r.check_valid_value(30) == 30
        with pytest.raises(ValidationError, match="DayOfMonth must be between 1 and 30, got 31"):
            r.check_valid_value(31, Field.DAY_OF_MONTH)
        with pytest.raises(ValidationError, match="value must be between 1 and 30, got 0"):
            r.check_valid_value(0)

    def test_equality(self) -> None:
        """Ranges with the same bounds are equal."""
        assert ValueRange.of(1, 12) == ValueRange.of(1, 1, 12, 12)
        assert ValueRange.of(1, 12) != ValueRange.of(1, 12, 13)
        assert hash(ValueRange.of(1, 12)) == hash(ValueRange(1, 1, 12, 12))

    def test_repr(self) -> None:
        """repr uses the shortest form."""
        assert repr(ValueRange.of(1, 7)) == "ValueRange(1, 7)"
        assert repr(ValueRange.of(1, 355, 366)) == "ValueRange(1, 355, 366)"
        assert repr(ValueRange.of(-1, 1, 12, 13)) == "ValueRange(-1, 1, 12, 13)"

    def test_str(self) -> None:
        """str shows varying bounds with a slash."""
        assert str(ValueRange.of(1, 7)) == "1 - 7"
        assert str(ValueRange.of(1, 28, 35)) == "1 - 28/35"
        assert str(ValueRange.of(-1, 1, 12, 13)) == "-1/1 - 12/13"
