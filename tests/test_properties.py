"""Tests for properties every calendar shares.

Each calendar is walked day by day across leap years, the cutover gaps
and years before the common era, checking that fields increase with
the epoch day, that dates rebuild from their fields, that adding and
then removing days returns the starting date, and that eras map to
proleptic years the same way everywhere.
"""

from __future__ import annotations

import datetime

from altchrono import (
    AccountingChronologyBuilder,
    AccountingYearDivision,
    BritishCutoverChronology,
    Chronology,
    CopticChronology,
    CutoverChronology,
    DayOfWeek,
    DiscordianChronology,
    DiscordianDate,
    FrenchRepublicanChronology,
    InternationalFixedChronology,
    InternationalFixedDate,
    JulianChronology,
    JulianDate,
    Month,
    PaxChronology,
    Symmetry010Chronology,
    Symmetry454Chronology,
)
from altchrono.core.chronology import epoch_day_of

ACCOUNTING = (
    AccountingChronologyBuilder()
    .ends_on(DayOfWeek.SATURDAY)
    .in_last_week_of(Month.DECEMBER)
    .with_division(AccountingYearDivision.QUARTERS_OF_PATTERN_4_4_5_WEEKS)
    .leap_week_in_month(12)
    .to_chronology()
)
VATICAN = CutoverChronology.of(datetime.date(1582, 10, 15))

CHRONOLOGIES: list[Chronology] = [
    JulianChronology.INSTANCE,
    CopticChronology.INSTANCE,
    DiscordianChronology.INSTANCE,
    FrenchRepublicanChronology.INSTANCE,
    InternationalFixedChronology.INSTANCE,
    PaxChronology.INSTANCE,
    Symmetry454Chronology.INSTANCE,
    Symmetry010Chronology.INSTANCE,
    BritishCutoverChronology.INSTANCE,
    VATICAN,
    ACCOUNTING,
]

TWO_ERA_CHRONOLOGIES: list[Chronology] = [
    JulianChronology.INSTANCE,
    CopticChronology.INSTANCE,
    FrenchRepublicanChronology.INSTANCE,
    PaxChronology.INSTANCE,
    Symmetry454Chronology.INSTANCE,
    Symmetry010Chronology.INSTANCE,
    BritishCutoverChronology.INSTANCE,
    VATICAN,
    ACCOUNTING,
]

# Epoch-day windows, each crossing at least one leap year of every calendar
MODERN = (epoch_day_of(datetime.date(2011, 1, 1)), epoch_day_of(datetime.date(2017, 1, 31)))
GREGORIAN_CUTOVER = (epoch_day_of(datetime.date(1582, 6, 1)), epoch_day_of(datetime.date(1583, 3, 1)))
BRITISH_CUTOVER = (epoch_day_of(datetime.date(1752, 1, 1)), epoch_day_of(datetime.date(1753, 3, 1)))
BEFORE_COMMON_ERA = (JulianDate(-4, 1, 1).to_epoch_day(), JulianDate(1, 3, 1).to_epoch_day())


def windows_for(chronology: Chronology) -> list[tuple[int, int]]:
    """Return the windows a calendar supports; IFC starts at year 1."""
    if chronology is InternationalFixedChronology.INSTANCE:
        return [MODERN, GREGORIAN_CUTOVER, BRITISH_CUTOVER]
    return [MODERN, GREGORIAN_CUTOVER, BRITISH_CUTOVER, BEFORE_COMMON_ERA]


def is_special_day(date: object) -> bool:
    """Year Day, Leap Day and St. Tib's Day sit outside the months."""
    return date.month < 1  # type: ignore[attr-defined]


# =============================================================================
# Monotonicity Tests
# =============================================================================


class TestMonotonicity:
    """Tests that fields increase with the epoch day."""

    def test_consecutive_days_increase(self) -> None:
        """Each day sorts after the one before it in every calendar."""
        for chronology in CHRONOLOGIES:
            for start, end in windows_for(chronology):
                previous = chronology.date_epoch_day(start)
                for epoch_day in range(start + 1, end + 1):
                    date = chronology.date_epoch_day(epoch_day)
                    assert date.to_epoch_day() == epoch_day, (chronology, epoch_day)
                    assert previous < date, (chronology, epoch_day)
                    assert (previous.proleptic_year, previous.day_of_year) < (
                        date.proleptic_year,
                        date.day_of_year,
                    ), (chronology, epoch_day)
                    if not is_special_day(previous) and not is_special_day(date):
                        assert (previous.proleptic_year, previous.month, previous.day_of_month) < (
                            date.proleptic_year,
                            date.month,
                            date.day_of_month,
                        ), (chronology, epoch_day)
                    previous = date

    def test_dates_rebuild_from_fields(self) -> None:
        """A date built from its own fields has the same epoch day."""
        for chronology in CHRONOLOGIES:
            for start, end in windows_for(chronology):
                for epoch_day in range(start, end + 1, 3):
                    date = chronology.date_epoch_day(epoch_day)
                    rebuilt = chronology.date(date.proleptic_year, date.month, date.day_of_month)
                    assert rebuilt == date, (chronology, epoch_day)
                    assert rebuilt.to_epoch_day() == epoch_day, (chronology, epoch_day)

    def test_st_tibs_day(self) -> None:
        """St. Tib's Day falls between the 59th and 60th of Chaos."""
        st_tibs = DiscordianDate(3178, 0, 0)
        epoch_day = st_tibs.to_epoch_day()
        assert DiscordianDate.of_epoch_day(epoch_day - 1) == DiscordianDate(3178, 1, 59)
        assert DiscordianDate.of_epoch_day(epoch_day + 1) == DiscordianDate(3178, 1, 60)
        days_of_year = [DiscordianDate.of_epoch_day(epoch_day + i).day_of_year for i in (-1, 0, 1)]
        assert days_of_year == [59, 60, 61]

    def test_international_fixed_special_days(self) -> None:
        """Leap Day follows June and Year Day ends the year."""
        leap_day = InternationalFixedDate(2012, -1, -1)
        epoch_day = leap_day.to_epoch_day()
        assert InternationalFixedDate.of_epoch_day(epoch_day - 1) == InternationalFixedDate(2012, 6, 28)
        assert InternationalFixedDate.of_epoch_day(epoch_day + 1) == InternationalFixedDate(2012, 7, 1)
        days_of_year = [InternationalFixedDate.of_epoch_day(epoch_day + i).day_of_year for i in (-1, 0, 1)]
        assert days_of_year == [168, 169, 170]

        year_day = InternationalFixedDate(2012, 0, 0)
        epoch_day = year_day.to_epoch_day()
        assert InternationalFixedDate.of_epoch_day(epoch_day - 1) == InternationalFixedDate(2012, 13, 28)
        assert InternationalFixedDate.of_epoch_day(epoch_day + 1) == InternationalFixedDate(2013, 1, 1)
        assert year_day.day_of_year == 366


# =============================================================================
# Day Arithmetic Tests
# =============================================================================


class TestPlusDaysIdentity:
    """Tests that adding and removing days cancel out."""

    def test_plus_then_minus(self) -> None:
        """Adding n days and then -n days gives back the date."""
        amounts = (1, 2, 7, 28, 31, 366, 1461, -1, -3, -30, -400, -1000)
        for chronology in CHRONOLOGIES:
            for start, end in windows_for(chronology):
                for epoch_day in range(start, end + 1, 29):
                    date = chronology.date_epoch_day(epoch_day)
                    for amount in amounts:
                        moved = date.plus_days(amount)
                        assert moved.to_epoch_day() == epoch_day + amount, (chronology, epoch_day, amount)
                        assert moved.plus_days(-amount) == date, (chronology, epoch_day, amount)
                        assert moved.minus_days(amount) == date, (chronology, epoch_day, amount)

    def test_zero_days(self) -> None:
        """Adding no days returns an equal date."""
        for chronology in CHRONOLOGIES:
            date = chronology.date_epoch_day(MODERN[0])
            assert date.plus_days(0) == date


# =============================================================================
# Era Mapping Tests
# =============================================================================


class TestEraMapping:
    """Tests for era and year-of-era conversion in every calendar."""

    def test_two_era_calendars(self) -> None:
        """Year n of the earlier era is proleptic year 1 - n."""
        for chronology in TWO_ERA_CHRONOLOGIES:
            eras = chronology.eras()
            assert len(eras) == 2, chronology
            earlier, later = eras
            assert chronology.era_of(0) is earlier
            assert chronology.era_of(1) is later
            for year_of_era in (1, 2, 5, 100, 2012):
                assert chronology.proleptic_year(earlier, year_of_era) == 1 - year_of_era, chronology
                assert chronology.proleptic_year(later, year_of_era) == year_of_era, chronology

    def test_dates_of_the_earlier_era(self) -> None:
        """Dates before year 1 report the earlier era."""
        for chronology in TWO_ERA_CHRONOLOGIES:
            earlier, later = chronology.eras()
            date = chronology.date_of_era(earlier, 5, 1, 1)
            assert date.proleptic_year == -4, chronology
            assert date.era is earlier, chronology
            assert date.year_of_era == 5, chronology
            date = chronology.date_of_era(later, 5, 1, 1)
            assert date.proleptic_year == 5, chronology
            assert date.era is later, chronology

    def test_single_era_calendars(self) -> None:
        """Calendars with one era count years directly."""
        for chronology in (DiscordianChronology.INSTANCE, InternationalFixedChronology.INSTANCE):
            (era,) = chronology.eras()
            assert chronology.proleptic_year(era, 2012) == 2012
            assert chronology.date_of_era(era, 2012, 1, 1).year_of_era == 2012
