"""altchrono: alternative calendar systems as immutable date values.

altchrono provides date types for calendars other than the ISO calendar.
Every date converts to and from an epoch day (days since 1970-01-01 ISO),
so dates of different calendars can be converted into each other and
into datetime.date.

Calendars:
    AccountingDate: 52/53-week fiscal calendar built with
        AccountingChronologyBuilder
    BritishCutoverDate, CutoverDate: Julian before a cutover date,
        Gregorian after
    CopticDate, DiscordianDate, FrenchRepublicanDate,
    InternationalFixedDate, JulianDate, PaxDate, Symmetry454Date,
    Symmetry010Date

Core Types:
    Chronology: A calendar system and factory for its dates
    ChronoPeriod: Years, months and days in one calendar
    ValueRange: The valid range of a field

Units:
    Field: Named date fields for get, with_field and range
    ChronoUnit: Units of date arithmetic
    Era enums for every calendar family

Exceptions:
    AltChronoError: Base exception
    ValidationError: Invalid field values or configuration
    DateRangeError: Arithmetic outside the supported range
    EraMismatchError: An era of another calendar family
    UnsupportedFieldError: A field or unit the calendar does not handle
    ParseError: Failed to read a JSON payload

Example:
    >>> from altchrono import CopticDate, JulianDate, ChronoUnit
    >>> d = CopticDate(1728, 10, 29)
    >>> JulianDate.from_date(d)
    JulianDate(2012, 6, 23)
    >>> d.plus(1, ChronoUnit.MONTHS)
    CopticDate(1728, 11, 29)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Calendars
from altchrono.calendars import (
    AccountingChronology,
    AccountingChronologyBuilder,
    AccountingDate,
    AccountingYearDivision,
    BritishCutoverChronology,
    BritishCutoverDate,
    CopticChronology,
    CopticDate,
    CutoverChronology,
    CutoverDate,
    DiscordianChronology,
    DiscordianDate,
    FrenchRepublicanChronology,
    FrenchRepublicanDate,
    InternationalFixedChronology,
    InternationalFixedDate,
    JulianChronology,
    JulianDate,
    PaxChronology,
    PaxDate,
    Symmetry010Chronology,
    Symmetry010Date,
    Symmetry454Chronology,
    Symmetry454Date,
)

# Core types
from altchrono.core import (
    AbstractDate,
    ChronoPeriod,
    Chronology,
    ValueRange,
    available_chronologies,
    get_chronology,
    register_chronology,
)

# Units
from altchrono.units import (
    AccountingEra,
    CalendarEra,
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
)

# Exceptions
from altchrono.errors import (
    AltChronoError,
    DateRangeError,
    EraMismatchError,
    ParseError,
    UnsupportedFieldError,
    ValidationError,
)

# Conversion
from altchrono.convert import from_json, to_json

__all__: list[str] = [
    "__version__",
    # Calendars
    "AccountingChronology",
    "AccountingChronologyBuilder",
    "AccountingDate",
    "AccountingYearDivision",
    "BritishCutoverChronology",
    "BritishCutoverDate",
    "CopticChronology",
    "CopticDate",
    "CutoverChronology",
    "CutoverDate",
    "DiscordianChronology",
    "DiscordianDate",
    "FrenchRepublicanChronology",
    "FrenchRepublicanDate",
    "InternationalFixedChronology",
    "InternationalFixedDate",
    "JulianChronology",
    "JulianDate",
    "PaxChronology",
    "PaxDate",
    "Symmetry010Chronology",
    "Symmetry010Date",
    "Symmetry454Chronology",
    "Symmetry454Date",
    # Core types
    "AbstractDate",
    "ChronoPeriod",
    "Chronology",
    "ValueRange",
    "available_chronologies",
    "get_chronology",
    "register_chronology",
    # Units
    "AccountingEra",
    "CalendarEra",
    "ChronoUnit",
    "CopticEra",
    "DayOfWeek",
    "DiscordianEra",
    "Field",
    "FrenchRepublicanEra",
    "InternationalFixedEra",
    "IsoEra",
    "JulianEra",
    "Month",
    # Exceptions
    "AltChronoError",
    "DateRangeError",
    "EraMismatchError",
    "ParseError",
    "UnsupportedFieldError",
    "ValidationError",
    # Conversion
    "from_json",
    "to_json",
]
