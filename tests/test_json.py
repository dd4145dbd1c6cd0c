"""Tests for JSON serialization of dates and chronologies."""

from __future__ import annotations

import datetime
import json

import pytest

from altchrono import (
    AccountingChronologyBuilder,
    AccountingYearDivision,
    BritishCutoverDate,
    CopticDate,
    CutoverChronology,
    DayOfWeek,
    DiscordianDate,
    InternationalFixedDate,
    JulianChronology,
    JulianDate,
    Month,
    ParseError,
    PaxDate,
    Symmetry010Date,
    Symmetry454Date,
    ValidationError,
    from_json,
    to_json,
)
from altchrono.calendars.french_republican import FrenchRepublicanDate

ACCOUNTING = (
    AccountingChronologyBuilder()
    .ends_on(DayOfWeek.SUNDAY)
    .nearest_end_of(Month.AUGUST)
    .with_division(AccountingYearDivision.THIRTEEN_EVEN_MONTHS_OF_4_WEEKS)
    .leap_week_in_month(13)
    .to_chronology()
)
VATICAN = CutoverChronology.of(datetime.date(1582, 10, 15))


# =============================================================================
# Serialization Tests
# =============================================================================


class TestToJson:
    """Tests for to_json."""

    def test_date(self) -> None:
        """Dates carry their class, chronology id and fields."""
        assert to_json(CopticDate(1728, 10, 29)) == {
            "_type": "CopticDate",
            "chronology": "Coptic",
            "year": 1728,
            "month": 10,
            "day": 29,
        }

    def test_special_day_fields(self) -> None:
        """Month-less days keep their special field values."""
        assert to_json(DiscordianDate(3178, 0, 0))["month"] == 0
        assert to_json(InternationalFixedDate(2012, 0, 0))["day"] == 0

    def test_accounting_date_carries_config(self) -> None:
        """Accounting dates include the chronology configuration."""
        data = to_json(ACCOUNTING.date(2014, 5, 26))
        assert data["chronology"] == "Accounting"
        assert data["config"] == ACCOUNTING.config()

    def test_chronology(self) -> None:
        """Chronologies serialize to their id."""
        assert to_json(JulianChronology.INSTANCE) == {"_type": "Chronology", "id": "Julian"}
        assert to_json(VATICAN) == {"_type": "Chronology", "id": "Cutover[1582-10-15]"}
        assert to_json(ACCOUNTING)["config"]["division"] == "THIRTEEN_EVEN_MONTHS_OF_4_WEEKS"

    def test_date_method(self) -> None:
        """Dates serialize themselves."""
        date = PaxDate(2014, 13, 7)
        assert date.to_json() == to_json(date)

    def test_output_is_json(self) -> None:
        """The result survives a trip through the json module."""
        data = to_json(ACCOUNTING.date(2014, 5, 26))
        assert json.loads(json.dumps(data)) == data

    def test_unsupported_value(self) -> None:
        """Other values are rejected."""
        with pytest.raises(TypeError, match="expected a calendar date or chronology, got int"):
            to_json(42)  # type: ignore[arg-type]


# =============================================================================
# Deserialization Tests
# =============================================================================


class TestFromJson:
    """Tests for from_json."""

    def test_round_trip_dates(self) -> None:
        """Every calendar's dates round-trip."""
        dates = [
            JulianDate(2012, 2, 29),
            CopticDate(1727, 13, 6),
            DiscordianDate(3178, 0, 0),
            FrenchRepublicanDate(3, 13, 6),
            InternationalFixedDate(2012, -1, -1),
            PaxDate(2012, 14, 28),
            Symmetry454Date(2015, 12, 35),
            Symmetry010Date(2015, 12, 37),
            BritishCutoverDate(1752, 9, 14),
            VATICAN.date(1582, 10, 15),
            ACCOUNTING.date(2012, 13, 35),
        ]
        for date in dates:
            restored = from_json(json.loads(json.dumps(to_json(date))))
            assert restored == date
            assert type(restored) is type(date)

    def test_round_trip_chronologies(self) -> None:
        """Registered, cutover and accounting chronologies round-trip."""
        assert from_json(to_json(JulianChronology.INSTANCE)) is JulianChronology.INSTANCE
        assert from_json(to_json(VATICAN)) == VATICAN
        assert from_json(to_json(ACCOUNTING)) == ACCOUNTING

    def test_class_method(self) -> None:
        """from_json on a date class checks the type."""
        payload = to_json(JulianDate(2012, 2, 29))
        assert JulianDate.from_json(payload) == JulianDate(2012, 2, 29)
        with pytest.raises(ParseError, match="expected CopticDate, got JulianDate"):
            CopticDate.from_json(payload)

    def test_not_a_dict(self) -> None:
        """Only dictionaries are accepted."""
        with pytest.raises(ParseError, match="expected dict, got list"):
            from_json([])  # type: ignore[arg-type]

    def test_missing_type(self) -> None:
        """The type tag is required."""
        with pytest.raises(ParseError, match="missing '_type' field"):
            from_json({"chronology": "Julian", "year": 2012, "month": 1, "day": 1})

    def test_unknown_type(self) -> None:
        """Unknown type tags are rejected."""
        with pytest.raises(TypeError, match="unknown date type: 'GregorianDate'"):
            from_json({"_type": "GregorianDate", "chronology": "ISO", "year": 2012, "month": 1, "day": 1})

    def test_missing_chronology(self) -> None:
        """Dates need a chronology id."""
        with pytest.raises(ParseError, match="missing 'chronology' field for JulianDate"):
            from_json({"_type": "JulianDate", "year": 2012, "month": 1, "day": 1})
        with pytest.raises(ParseError, match="missing 'id' field for Chronology"):
            from_json({"_type": "Chronology"})

    def test_unknown_chronology(self) -> None:
        """Unknown chronology ids are rejected."""
        with pytest.raises(ParseError, match="unknown chronology in JSON data: 'Mayan'"):
            from_json({"_type": "Chronology", "id": "Mayan"})

    def test_bad_fields(self) -> None:
        """Fields must be integers, and booleans do not count."""
        with pytest.raises(ParseError, match="missing or non-integer 'day' field for JulianDate"):
            from_json({"_type": "JulianDate", "chronology": "Julian", "year": 2012, "month": 1})
        with pytest.raises(ParseError, match="missing or non-integer 'year' field"):
            from_json({"_type": "JulianDate", "chronology": "Julian", "year": True, "month": 1, "day": 1})
        with pytest.raises(ParseError, match="missing or non-integer 'month' field"):
            from_json({"_type": "JulianDate", "chronology": "Julian", "year": 2012, "month": "1", "day": 1})

    def test_type_and_chronology_disagree(self) -> None:
        """The date class must be the one the chronology builds."""
        with pytest.raises(ParseError, match="does not build JulianDate, got CopticDate"):
            from_json({"_type": "JulianDate", "chronology": "Coptic", "year": 1728, "month": 1, "day": 1})
        with pytest.raises(ParseError, match="does not build CutoverDate"):
            from_json({"_type": "CutoverDate", "chronology": "BritishCutover", "year": 1752, "month": 9, "day": 14})

    def test_invalid_date(self) -> None:
        """Stored fields are validated."""
        with pytest.raises(ValidationError):
            from_json({"_type": "JulianDate", "chronology": "Julian", "year": 2011, "month": 2, "day": 29})

    def test_accounting_config(self) -> None:
        """Accounting data needs a complete configuration."""
        data = to_json(ACCOUNTING.date(2014, 5, 26))
        del data["config"]
        with pytest.raises(ParseError, match="missing 'config' field for Accounting chronology"):
            from_json(data)
        config = ACCOUNTING.config()
        del config["division"]
        with pytest.raises(ParseError, match="incomplete Accounting configuration"):
            from_json({"_type": "Chronology", "id": "Accounting", "config": config})

    def test_accounting_config_unknown_value(self) -> None:
        """Unknown weekday, month or division names are reported as such."""
        config = ACCOUNTING.config()
        config["ends_on"] = "FOO"
        with pytest.raises(ParseError, match="unknown value for Accounting setting 'ends_on': 'FOO'"):
            from_json({"_type": "Chronology", "id": "Accounting", "config": config})
        config = ACCOUNTING.config()
        config["end"] = "Smarch"
        with pytest.raises(ParseError, match="unknown value for Accounting setting 'end': 'Smarch'"):
            from_json({"_type": "Chronology", "id": "Accounting", "config": config})
        config = ACCOUNTING.config()
        config["division"] = 3
        with pytest.raises(ParseError, match="unknown value for Accounting setting 'division': 3"):
            from_json({"_type": "Chronology", "id": "Accounting", "config": config})
