"""Calendar units and enumerations.

This module provides:
    - Field: named date fields for the get/with/range protocol
    - ChronoUnit: units of date arithmetic (DAYS, MONTHS, YEARS, etc.)
    - Era enums for every calendar family
    - DayOfWeek and Month: ISO weekday and month names
"""

from __future__ import annotations

from altchrono.units.era import (
    AccountingEra,
    CalendarEra,
    CopticEra,
    DiscordianEra,
    FrenchRepublicanEra,
    InternationalFixedEra,
    IsoEra,
    JulianEra,
)
from altchrono.units.field import Field
from altchrono.units.iso import DayOfWeek, Month
from altchrono.units.unit import ChronoUnit

__all__: list[str] = [
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
]
