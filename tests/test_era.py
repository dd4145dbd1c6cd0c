"""Tests for the era, field, unit and ISO enums.

These tests verify the era enums of each calendar family and the
Field, ChronoUnit, DayOfWeek and Month enums shared by all calendars.
"""

from __future__ import annotations

import pytest

from altchrono import (
    ChronoUnit,
    CopticEra,
    DayOfWeek,
    DiscordianEra,
    Field,
    FrenchRepublicanEra,
    InternationalFixedEra,
    IsoEra,
    JulianEra,
    Month,
    ValidationError,
)


class TestCalendarEra:
    """Tests for the era enums."""

    def test_two_era_values(self) -> None:
        """The earlier era is 0 and the later era is 1."""
        assert IsoEra.BCE.value == 0
        assert IsoEra.CE.value == 1
        assert JulianEra.BC.value == 0
        assert CopticEra.AM.value == 1
        assert FrenchRepublicanEra.BEFORE_REPUBLICAN.value == 0

    def test_single_era_calendars(self) -> None:
        """Discordian and International Fixed have one era each."""
        assert list(DiscordianEra) == [DiscordianEra.YOLD]
        assert list(InternationalFixedEra) == [InternationalFixedEra.CE]
        assert DiscordianEra.YOLD.value == 1

    def test_of(self) -> None:
        """of() looks eras up by value."""
        assert JulianEra.of(0) is JulianEra.BC
        assert CopticEra.of(1) is CopticEra.AM

    def test_of_invalid(self) -> None:
        """of() rejects values that name no era."""
        with pytest.raises(ValidationError, match="invalid JulianEra value: 2"):
            JulianEra.of(2)
        with pytest.raises(ValidationError, match="invalid DiscordianEra value: 0"):
            DiscordianEra.of(0)

    def test_is_before_epoch(self) -> None:
        """Only the earlier era counts backwards."""
        assert JulianEra.BC.is_before_epoch is True
        assert JulianEra.AD.is_before_epoch is False
        assert DiscordianEra.YOLD.is_before_epoch is False

    def test_proleptic_year(self) -> None:
        """Year 1 of the earlier era is proleptic year 0."""
        assert JulianEra.BC.proleptic_year(1) == 0
        assert JulianEra.BC.proleptic_year(5) == -4
        assert JulianEra.AD.proleptic_year(2012) == 2012

    def test_eras_of_different_calendars_differ(self) -> None:
        """Eras with equal values in different calendars are not equal."""
        assert IsoEra.CE != InternationalFixedEra.CE
        assert JulianEra.AD != CopticEra.AM


class TestField:
    """Tests for the Field enum."""

    def test_str_is_value(self) -> None:
        """str() gives the field's display name."""
        assert str(Field.DAY_OF_MONTH) == "DayOfMonth"
        assert str(Field.ALIGNED_WEEK_OF_YEAR) == "AlignedWeekOfYear"

    def test_date_based(self) -> None:
        """Time fields are not date-based."""
        assert Field.EPOCH_DAY.is_date_based
        assert Field.ERA.is_date_based
        assert not Field.HOUR_OF_DAY.is_date_based
        assert not Field.NANO_OF_SECOND.is_date_based
        assert sum(1 for field in Field if field.is_date_based) == 13


class TestChronoUnit:
    """Tests for the ChronoUnit enum."""

    def test_str_is_value(self) -> None:
        """str() gives the unit's display name."""
        assert str(ChronoUnit.DAYS) == "Days"
        assert str(ChronoUnit.MILLENNIA) == "Millennia"

    def test_date_based(self) -> None:
        """Units shorter than a day are not date-based."""
        assert ChronoUnit.DAYS.is_date_based
        assert ChronoUnit.ERAS.is_date_based
        assert not ChronoUnit.SECONDS.is_date_based
        assert not ChronoUnit.HOURS.is_date_based

    def test_years(self) -> None:
        """Year-based units know their year multiple."""
        assert ChronoUnit.YEARS.years == 1
        assert ChronoUnit.DECADES.years == 10
        assert ChronoUnit.CENTURIES.years == 100
        assert ChronoUnit.MILLENNIA.years == 1000
        assert ChronoUnit.ERAS.years is None
        assert ChronoUnit.MONTHS.years is None


class TestIsoEnums:
    """Tests for DayOfWeek and Month."""

    def test_day_of_week(self) -> None:
        """Weekdays are numbered from Monday."""
        assert DayOfWeek.MONDAY == 1
        assert DayOfWeek.of(7) is DayOfWeek.SUNDAY
        with pytest.raises(ValidationError, match="day_of_week must be between 1 and 7, got 8"):
            DayOfWeek.of(8)

    def test_month(self) -> None:
        """Months are numbered from January."""
        assert Month.of(8) is Month.AUGUST
        assert Month.DECEMBER + 0 == 12
        with pytest.raises(ValidationError, match="month must be between 1 and 12, got 0"):
            Month.of(0)
