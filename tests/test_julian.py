"""Tests for the Julian calendar.

The Julian calendar also serves as the reference calendar for the
shared date kernel: field access, arithmetic and period computation
that every calendar inherits from AbstractDate.
"""

from __future__ import annotations

import datetime

import pytest

from altchrono import (
    ChronoUnit,
    CopticChronology,
    CopticDate,
    CopticEra,
    DateRangeError,
    EraMismatchError,
    Field,
    JulianChronology,
    JulianDate,
    JulianEra,
    UnsupportedFieldError,
    ValidationError,
    ValueRange,
)
from altchrono.calendars.julian import is_julian_leap_year

JULIAN = JulianChronology.INSTANCE

# (Julian date, ISO date)
SAMPLES = [
    ((1, 1, 3), datetime.date(1, 1, 1)),
    ((1, 2, 28), datetime.date(1, 2, 26)),
    ((1, 3, 1), datetime.date(1, 2, 27)),
    ((4, 2, 29), datetime.date(4, 2, 27)),
    ((4, 3, 1), datetime.date(4, 2, 28)),
    ((100, 2, 29), datetime.date(100, 2, 27)),
    ((100, 3, 1), datetime.date(100, 2, 28)),
    ((1582, 10, 4), datetime.date(1582, 10, 14)),
    ((1582, 10, 5), datetime.date(1582, 10, 15)),
    ((1945, 10, 30), datetime.date(1945, 11, 12)),
    ((2012, 6, 22), datetime.date(2012, 7, 5)),
    ((2012, 6, 23), datetime.date(2012, 7, 6)),
]


# =============================================================================
# Conversion Tests
# =============================================================================


class TestJulianConversion:
    """Tests for conversion between Julian dates and epoch days."""

    def test_samples_to_iso(self) -> None:
        """Reference Julian dates convert to the expected ISO dates."""
        for (y, m, d), iso in SAMPLES:
            assert JulianDate(y, m, d).to_iso_date() == iso

    def test_samples_from_iso(self) -> None:
        """Reference ISO dates convert to the expected Julian dates."""
        for (y, m, d), iso in SAMPLES:
            assert JulianDate.from_date(iso) == JulianDate(y, m, d)

    def test_samples_round_trip_epoch_day(self) -> None:
        """of_epoch_day inverts to_epoch_day for the reference dates."""
        for (y, m, d), _ in SAMPLES:
            date = JulianDate(y, m, d)
            assert JulianDate.of_epoch_day(date.to_epoch_day()) == date

    def test_first_day_of_year_one(self) -> None:
        """Julian 0001-01-01 is two days before ISO 0001-01-01."""
        assert JulianDate(1, 1, 1).to_epoch_day() == -719164

    def test_epoch_day_of_sample(self) -> None:
        """Julian 2012-06-23 is epoch day 15527."""
        assert JulianDate(2012, 6, 23).to_epoch_day() == 15527

    def test_negative_years(self) -> None:
        """Year 0 and negative years convert consistently."""
        date = JulianDate(0, 12, 31)
        assert date.plus_days(1) == JulianDate(1, 1, 1)
        assert JulianDate.of_epoch_day(JulianDate(-4, 2, 29).to_epoch_day()) == JulianDate(-4, 2, 29)

    def test_chronology_factories(self) -> None:
        """The chronology factories build the same dates."""
        assert JULIAN.date(2012, 6, 23) == JulianDate(2012, 6, 23)
        assert JULIAN.date_year_day(2012, 175) == JulianDate(2012, 6, 23)
        assert JULIAN.date_epoch_day(15527) == JulianDate(2012, 6, 23)
        assert JULIAN.date_from(datetime.date(2012, 7, 6)) == JulianDate(2012, 6, 23)

    def test_date_of_era(self) -> None:
        """Era-based factories convert the year of era."""
        assert JULIAN.date_of_era(JulianEra.AD, 2012, 6, 23) == JulianDate(2012, 6, 23)
        assert JULIAN.date_of_era(JulianEra.BC, 5, 1, 1) == JulianDate(-4, 1, 1)
        assert JULIAN.date_year_day_of_era(JulianEra.BC, 1, 60) == JulianDate(0, 2, 29)

    def test_from_other_calendar(self) -> None:
        """from_date accepts a date of another calendar."""
        assert JulianDate.from_date(CopticDate(1728, 10, 29)) == JulianDate(2012, 6, 23)

    def test_from_date_rejects_other_objects(self) -> None:
        """from_date rejects objects without an epoch day."""
        with pytest.raises(TypeError, match="expected a calendar date"):
            JulianDate.from_date("2012-06-23")

    def test_to_iso_date_out_of_range(self) -> None:
        """Dates before ISO year 1 cannot become datetime.date."""
        with pytest.raises(DateRangeError, match="outside the range of datetime.date"):
            JulianDate(1, 1, 1).to_iso_date()


# =============================================================================
# Validation Tests
# =============================================================================


class TestJulianValidation:
    """Tests for rejecting invalid Julian dates."""

    def test_invalid_month(self) -> None:
        """Months outside 1-12 are rejected."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12, got 13"):
            JulianDate(1900, 13, 1)
        with pytest.raises(ValidationError, match="month must be between 1 and 12, got 0"):
            JulianDate(1900, 0, 1)

    def test_invalid_day(self) -> None:
        """Days past the end of the month are rejected."""
        with pytest.raises(ValidationError, match="day must be between 1 and 31"):
            JulianDate(1900, 1, 32)
        with pytest.raises(ValidationError, match="day must be between 1 and 30 for 1900-04, got 31"):
            JulianDate(1900, 4, 31)

    def test_february_29(self) -> None:
        """February 29 exists only in leap years, including 1900."""
        assert JulianDate(1900, 2, 29).day_of_month == 29
        with pytest.raises(ValidationError, match="day must be between 1 and 28 for 1899-02"):
            JulianDate(1899, 2, 29)
        with pytest.raises(ValidationError):
            JulianDate(1900, 2, 30)

    def test_invalid_year(self) -> None:
        """Years outside the supported range are rejected."""
        with pytest.raises(ValidationError, match="year must be between"):
            JulianDate(1_000_000, 1, 1)

    def test_invalid_day_of_year(self) -> None:
        """Day 366 exists only in leap years."""
        assert JulianDate.of_year_day(1900, 366) == JulianDate(1900, 12, 31)
        with pytest.raises(ValidationError, match="day_of_year must be between 1 and 365"):
            JulianDate.of_year_day(1901, 366)

    def test_epoch_day_out_of_range(self) -> None:
        """Epoch days beyond the last supported year are rejected."""
        with pytest.raises(DateRangeError, match="outside the Julian range"):
            JulianDate.of_epoch_day(400_000_000)


# =============================================================================
# Chronology Tests
# =============================================================================


class TestJulianChronology:
    """Tests for JulianChronology."""

    def test_identity(self) -> None:
        """The chronology has the Julian id and calendar type."""
        assert JULIAN.id == "Julian"
        assert JULIAN.calendar_type == "julian"
        assert str(JULIAN) == "Julian"
        assert repr(JULIAN) == "JulianChronology()"

    def test_leap_years(self) -> None:
        """Every fourth year is a leap year, centuries included."""
        for year in (-8, -4, 0, 4, 100, 1900, 2000, 2012):
            assert JULIAN.is_leap_year(year)
            assert is_julian_leap_year(year)
        for year in (-7, -1, 1, 3, 1901, 2013):
            assert not JULIAN.is_leap_year(year)

    def test_eras(self) -> None:
        """The Julian eras are BC and AD."""
        assert JULIAN.eras() == [JulianEra.BC, JulianEra.AD]
        assert JULIAN.era_of(0) is JulianEra.BC
        assert JULIAN.era_of(1) is JulianEra.AD

    def test_era_of_invalid(self) -> None:
        """Unknown era values are rejected."""
        with pytest.raises(ValidationError, match="invalid JulianEra value: 2"):
            JULIAN.era_of(2)

    def test_proleptic_year(self) -> None:
        """Years of the BC era count backwards from year 0."""
        assert JULIAN.proleptic_year(JulianEra.AD, 4) == 4
        assert JULIAN.proleptic_year(JulianEra.BC, 1) == 0
        assert JULIAN.proleptic_year(JulianEra.BC, 4) == -3

    def test_proleptic_year_wrong_era(self) -> None:
        """An era of another calendar is rejected."""
        with pytest.raises(EraMismatchError, match="era must be JulianEra, got CopticEra"):
            JULIAN.proleptic_year(CopticEra.AM, 4)

    def test_era_mismatch_is_type_error(self) -> None:
        """EraMismatchError can be caught as TypeError."""
        with pytest.raises(TypeError):
            JULIAN.date_of_era(CopticEra.AM, 4, 1, 1)

    def test_ranges(self) -> None:
        """Static ranges fall back to the ISO ranges."""
        assert JULIAN.range(Field.DAY_OF_MONTH) == ValueRange.of(1, 28, 31)
        assert JULIAN.range(Field.DAY_OF_YEAR) == ValueRange.of(1, 365, 366)
        assert JULIAN.range(Field.MONTH_OF_YEAR) == ValueRange.of(1, 12)
        assert JULIAN.range(Field.YEAR) == ValueRange.of(-999_998, 999_999)

    def test_range_unsupported(self) -> None:
        """Time fields have no range."""
        with pytest.raises(UnsupportedFieldError, match="unsupported field: HourOfDay"):
            JULIAN.range(Field.HOUR_OF_DAY)

    def test_date_now(self) -> None:
        """date_now reads the given clock."""
        assert JULIAN.date_now(lambda: datetime.date(2012, 7, 6)) == JulianDate(2012, 6, 23)

    def test_equality(self) -> None:
        """Chronologies compare by type."""
        assert JULIAN == JulianChronology()
        assert JULIAN != CopticChronology.INSTANCE
        assert hash(JULIAN) == hash(JulianChronology())


# =============================================================================
# Field Tests
# =============================================================================


class TestJulianFields:
    """Tests for the get/range/with_field protocol."""

    def test_get(self) -> None:
        """Every date field has the expected value."""
        date = JulianDate(2014, 5, 26)
        assert date.get(Field.DAY_OF_WEEK) == 7
        assert date.get(Field.DAY_OF_MONTH) == 26
        assert date.get(Field.DAY_OF_YEAR) == 146
        assert date.get(Field.ALIGNED_DAY_OF_WEEK_IN_MONTH) == 5
        assert date.get(Field.ALIGNED_DAY_OF_WEEK_IN_YEAR) == 6
        assert date.get(Field.ALIGNED_WEEK_OF_MONTH) == 4
        assert date.get(Field.ALIGNED_WEEK_OF_YEAR) == 21
        assert date.get(Field.MONTH_OF_YEAR) == 5
        assert date.get(Field.PROLEPTIC_MONTH) == 2014 * 12 + 5 - 1
        assert date.get(Field.YEAR) == 2014
        assert date.get(Field.YEAR_OF_ERA) == 2014
        assert date.get(Field.ERA) == 1
        assert date.get(Field.EPOCH_DAY) == date.to_epoch_day()

    def test_get_before_epoch(self) -> None:
        """Year-of-era and era reflect the BC era."""
        date = JulianDate(-2013, 5, 26)
        assert date.year_of_era == 2014
        assert date.era is JulianEra.BC
        assert date.get(Field.ERA) == 0

    def test_get_unsupported(self) -> None:
        """Time fields are rejected."""
        date = JulianDate(2014, 5, 26)
        assert not date.is_supported(Field.MINUTE_OF_HOUR)
        with pytest.raises(UnsupportedFieldError):
            date.get(Field.MINUTE_OF_HOUR)

    def test_range(self) -> None:
        """Date ranges reflect the month and year of the date."""
        assert JulianDate(2012, 2, 1).range(Field.DAY_OF_MONTH) == ValueRange.of(1, 29)
        assert JulianDate(2011, 2, 1).range(Field.DAY_OF_MONTH) == ValueRange.of(1, 28)
        assert JulianDate(2011, 4, 1).range(Field.DAY_OF_MONTH) == ValueRange.of(1, 30)
        assert JulianDate(2011, 1, 1).range(Field.DAY_OF_YEAR) == ValueRange.of(1, 365)
        assert JulianDate(2012, 1, 1).range(Field.DAY_OF_YEAR) == ValueRange.of(1, 366)
        assert JulianDate(2011, 2, 1).range(Field.ALIGNED_WEEK_OF_MONTH) == ValueRange.of(1, 4)
        assert JulianDate(2012, 2, 1).range(Field.ALIGNED_WEEK_OF_MONTH) == ValueRange.of(1, 5)
        assert JulianDate(2012, 2, 1).range(Field.MONTH_OF_YEAR) == ValueRange.of(1, 12)

    def test_with_field(self) -> None:
        """with_field adjusts one field and keeps the others."""
        date = JulianDate(2014, 5, 26)
        assert date.with_field(Field.DAY_OF_WEEK, 3) == JulianDate(2014, 5, 22)
        assert date.with_field(Field.DAY_OF_MONTH, 31) == JulianDate(2014, 5, 31)
        assert date.with_field(Field.DAY_OF_YEAR, 365) == JulianDate(2014, 12, 31)
        assert date.with_field(Field.ALIGNED_WEEK_OF_MONTH, 1) == JulianDate(2014, 5, 5)
        assert date.with_field(Field.MONTH_OF_YEAR, 2) == JulianDate(2014, 2, 26)
        assert date.with_field(Field.YEAR, 2012) == JulianDate(2012, 5, 26)
        assert date.with_field(Field.YEAR_OF_ERA, 2012) == JulianDate(2012, 5, 26)
        assert date.with_field(Field.ERA, 0) == JulianDate(-2013, 5, 26)
        assert date.with_field(Field.ERA, 1) is date

    def test_with_field_clamps_day(self) -> None:
        """Changing the month clamps the day to the end of the month."""
        assert JulianDate(2012, 3, 31).with_field(Field.MONTH_OF_YEAR, 2) == JulianDate(2012, 2, 29)
        assert JulianDate(2011, 3, 31).with_field(Field.MONTH_OF_YEAR, 2) == JulianDate(2011, 2, 28)
        assert JulianDate(2012, 2, 29).with_field(Field.YEAR, 2011) == JulianDate(2011, 2, 28)

    def test_with_field_invalid(self) -> None:
        """Values outside the date's range are rejected."""
        date = JulianDate(2014, 5, 26)
        with pytest.raises(ValidationError, match="DayOfMonth must be between 1 and 31, got 32"):
            date.with_field(Field.DAY_OF_MONTH, 32)
        with pytest.raises(ValidationError, match="MonthOfYear"):
            date.with_field(Field.MONTH_OF_YEAR, 13)
        with pytest.raises(UnsupportedFieldError):
            date.with_field(Field.HOUR_OF_DAY, 1)


# =============================================================================
# Arithmetic Tests
# =============================================================================


class TestJulianArithmetic:
    """Tests for adding amounts to Julian dates."""

    def test_plus(self) -> None:
        """Amounts of every date unit can be added."""
        date = JulianDate(2014, 5, 26)
        assert date.plus(8, ChronoUnit.DAYS) == JulianDate(2014, 6, 3)
        assert date.plus(3, ChronoUnit.WEEKS) == JulianDate(2014, 6, 16)
        assert date.plus(3, ChronoUnit.MONTHS) == JulianDate(2014, 8, 26)
        assert date.plus(3, ChronoUnit.YEARS) == JulianDate(2017, 5, 26)
        assert date.plus(3, ChronoUnit.DECADES) == JulianDate(2044, 5, 26)
        assert date.plus(3, ChronoUnit.CENTURIES) == JulianDate(2314, 5, 26)
        assert date.plus(3, ChronoUnit.MILLENNIA) == JulianDate(5014, 5, 26)
        assert date.plus(-1, ChronoUnit.ERAS) == JulianDate(-2013, 5, 26)

    def test_minus(self) -> None:
        """Subtracting is adding the negated amount."""
        date = JulianDate(2014, 5, 26)
        assert date.minus(8, ChronoUnit.DAYS) == JulianDate(2014, 5, 18)
        assert date.minus_weeks(3) == JulianDate(2014, 5, 5)
        assert date.minus_months(5) == JulianDate(2013, 12, 26)
        assert date.minus_years(2014) == JulianDate(0, 5, 26)

    def test_plus_months_clamps(self) -> None:
        """Adding months never rolls into the next month."""
        assert JulianDate(2012, 1, 31).plus_months(1) == JulianDate(2012, 2, 29)
        assert JulianDate(2011, 1, 31).plus_months(1) == JulianDate(2011, 2, 28)
        assert JulianDate(2012, 1, 31).plus_months(-2) == JulianDate(2011, 11, 30)

    def test_plus_zero_returns_same(self) -> None:
        """Adding zero returns the date itself."""
        date = JulianDate(2014, 5, 26)
        assert date.plus_days(0) is date
        assert date.plus_months(0) is date

    def test_plus_unsupported_unit(self) -> None:
        """Units smaller than a day are rejected."""
        with pytest.raises(UnsupportedFieldError, match="unsupported unit: Seconds"):
            JulianDate(2014, 5, 26).plus(1, ChronoUnit.SECONDS)

    def test_plus_out_of_range(self) -> None:
        """Arithmetic past the last supported year fails."""
        with pytest.raises(DateRangeError, match="outside the supported range"):
            JulianDate(999_999, 1, 1).plus_years(1)

    def test_date_range_error_is_overflow_error(self) -> None:
        """DateRangeError can be caught as OverflowError."""
        with pytest.raises(OverflowError):
            JulianDate(999_999, 12, 1).plus_months(1)

    def test_period_operators(self) -> None:
        """Dates add and subtract periods of their chronology."""
        date = JulianDate(2011, 1, 31)
        assert date + JULIAN.period(0, 1, 0) == JulianDate(2011, 2, 28)
        assert date + JULIAN.period(1, 2, 3) == JulianDate(2012, 4, 3)
        assert JulianDate(2011, 3, 31) - JULIAN.period(0, 1, 0) == JulianDate(2011, 2, 28)

    def test_period_of_other_chronology(self) -> None:
        """Periods of another chronology are rejected."""
        with pytest.raises(ValidationError, match="chronology mismatch, expected Julian, got Coptic"):
            JulianDate(2011, 1, 31) + CopticChronology.INSTANCE.period(0, 1, 0)


# =============================================================================
# Until Tests
# =============================================================================


class TestJulianUntil:
    """Tests for measuring between Julian dates."""

    def test_until_units(self) -> None:
        """until counts complete units."""
        start = JulianDate(2014, 5, 26)
        assert start.until(JulianDate(2014, 6, 26), ChronoUnit.DAYS) == 31
        assert start.until(JulianDate(2014, 6, 26), ChronoUnit.WEEKS) == 4
        assert start.until(JulianDate(2014, 6, 26), ChronoUnit.MONTHS) == 1
        assert start.until(JulianDate(2014, 6, 25), ChronoUnit.MONTHS) == 0
        assert start.until(JulianDate(2015, 5, 26), ChronoUnit.YEARS) == 1
        assert start.until(JulianDate(2015, 5, 25), ChronoUnit.YEARS) == 0
        assert start.until(JulianDate(2024, 5, 26), ChronoUnit.DECADES) == 1
        assert start.until(JulianDate(2114, 5, 26), ChronoUnit.CENTURIES) == 1
        assert start.until(JulianDate(3014, 5, 26), ChronoUnit.MILLENNIA) == 1
        assert start.until(JulianDate(-2013, 5, 26), ChronoUnit.ERAS) == -1

    def test_until_negative_truncates(self) -> None:
        """Negative amounts truncate toward zero."""
        start = JulianDate(2014, 5, 26)
        assert start.until(JulianDate(2014, 4, 27), ChronoUnit.MONTHS) == 0
        assert start.until(JulianDate(2014, 4, 26), ChronoUnit.MONTHS) == -1
        assert start.until(JulianDate(2014, 5, 20), ChronoUnit.WEEKS) == 0

    def test_until_month_end(self) -> None:
        """A month is complete once the day-of-month is reached."""
        assert JulianDate(2012, 1, 31).until(JulianDate(2012, 3, 1), ChronoUnit.MONTHS) == 1

    def test_until_other_calendar(self) -> None:
        """The end date may be in another calendar."""
        start = JulianDate(2012, 6, 23)
        assert start.until(CopticDate(1728, 10, 29), ChronoUnit.DAYS) == 0
        assert start.until(datetime.date(2012, 7, 13), ChronoUnit.WEEKS) == 1

    def test_until_unsupported_unit(self) -> None:
        """Units smaller than a day are rejected."""
        with pytest.raises(UnsupportedFieldError):
            JulianDate(2012, 6, 23).until(JulianDate(2012, 6, 24), ChronoUnit.HOURS)

    def test_until_period(self) -> None:
        """until without a unit returns a period."""
        start = JulianDate(2014, 5, 26)
        assert start.until(JulianDate(2014, 5, 26)) == JULIAN.period(0, 0, 0)
        assert start.until(JulianDate(2014, 6, 4)) == JULIAN.period(0, 0, 9)
        assert start.until(JulianDate(2014, 6, 25)) == JULIAN.period(0, 0, 30)
        assert start.until(JulianDate(2014, 6, 26)) == JULIAN.period(0, 1, 0)
        assert start.until(JulianDate(2015, 6, 28)) == JULIAN.period(1, 1, 2)
        assert start.until(JulianDate(2014, 4, 26)) == JULIAN.period(0, -1, 0)
        assert start.until(JulianDate(2014, 4, 28)) == JULIAN.period(0, 0, -28)

    def test_subtract_dates(self) -> None:
        """end - start is start.until(end)."""
        assert JulianDate(2015, 6, 28) - JulianDate(2014, 5, 26) == JULIAN.period(1, 1, 2)

    def test_period_adds_back(self) -> None:
        """Adding the measured period to the start gives the end."""
        start = JulianDate(2014, 5, 26)
        for end in (JulianDate(2014, 7, 1), JulianDate(2016, 2, 29), JulianDate(2015, 1, 3)):
            assert start + start.until(end) == end


# =============================================================================
# Comparison and Representation Tests
# =============================================================================


class TestJulianComparison:
    """Tests for equality, ordering and hashing."""

    def test_equality(self) -> None:
        """Dates are equal when they are the same day."""
        assert JulianDate(2012, 6, 23) == JulianDate(2012, 6, 23)
        assert JulianDate(2012, 6, 23) != JulianDate(2012, 6, 24)
        assert hash(JulianDate(2012, 6, 23)) == hash(JulianDate(2012, 6, 23))

    def test_other_calendar_is_not_equal(self) -> None:
        """The same day in another calendar is not equal, but is_equal."""
        julian = JulianDate(2012, 6, 23)
        coptic = CopticDate(1728, 10, 29)
        assert julian != coptic
        assert julian.is_equal(coptic)
        assert not julian.is_before(coptic)
        assert not julian.is_after(coptic)

    def test_ordering(self) -> None:
        """Dates of one calendar are ordered by epoch day."""
        early = JulianDate(2012, 6, 23)
        late = JulianDate(2012, 7, 1)
        assert early < late
        assert early <= late
        assert late > early
        assert late >= early
        assert sorted([late, early]) == [early, late]

    def test_ordering_across_calendars(self) -> None:
        """Ordering operators reject dates of another calendar."""
        with pytest.raises(TypeError):
            JulianDate(2012, 6, 23) < CopticDate(1728, 10, 29)

    def test_repr_and_str(self) -> None:
        """repr shows the constructor, str the era-based form."""
        assert repr(JulianDate(2012, 6, 23)) == "JulianDate(2012, 6, 23)"
        assert str(JulianDate(2012, 6, 23)) == "Julian AD 2012-06-23"
        assert str(JulianDate(0, 1, 1)) == "Julian BC 1-01-01"

    def test_now_with_clock(self) -> None:
        """now converts the clock's date."""
        assert JulianDate.now(lambda: datetime.date(2012, 7, 6)) == JulianDate(2012, 6, 23)

    def test_now_clock_error_propagates(self) -> None:
        """Errors raised by the clock propagate unchanged."""

        def broken_clock() -> datetime.date:
            raise RuntimeError("clock unavailable")

        with pytest.raises(RuntimeError, match="clock unavailable"):
            JulianDate.now(broken_clock)

    def test_immutable(self) -> None:
        """Dates have no instance dictionary."""
        with pytest.raises(AttributeError):
            JulianDate(2012, 6, 23).extra = 1  # type: ignore[attr-defined]
