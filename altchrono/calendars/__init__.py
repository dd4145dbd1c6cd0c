"""Calendar systems.

Importing this package registers every parameterless chronology, so
they can be found with get_chronology.

Calendars:
    - Accounting: 52/53-week fiscal years, configured with a builder
    - BritishCutover, Cutover: Julian until a cutover date, then Gregorian
    - Coptic: twelve 30-day months and a short thirteenth month
    - Discordian: five 73-day seasons and St. Tib's Day
    - FrenchRepublican: the calendar of the French Revolution
    - InternationalFixed: thirteen 28-day months, Year Day and Leap Day
    - Julian: the proleptic Julian calendar
    - Pax: 364-day years with a leap week month
    - Symmetry454, Symmetry010: quarter-based perennial calendars
"""

from __future__ import annotations

from altchrono.calendars.accounting import (
    AccountingChronology,
    AccountingChronologyBuilder,
    AccountingDate,
    AccountingYearDivision,
)
from altchrono.calendars.coptic import CopticChronology, CopticDate
from altchrono.calendars.cutover import (
    BritishCutoverChronology,
    BritishCutoverDate,
    CutoverChronology,
    CutoverDate,
)
from altchrono.calendars.discordian import DiscordianChronology, DiscordianDate
from altchrono.calendars.french_republican import (
    FrenchRepublicanChronology,
    FrenchRepublicanDate,
)
from altchrono.calendars.international_fixed import (
    InternationalFixedChronology,
    InternationalFixedDate,
)
from altchrono.calendars.julian import JulianChronology, JulianDate
from altchrono.calendars.pax import PaxChronology, PaxDate
from altchrono.calendars.symmetry import (
    Symmetry010Chronology,
    Symmetry010Date,
    Symmetry454Chronology,
    Symmetry454Date,
)

__all__: list[str] = [
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
]
