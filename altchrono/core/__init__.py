"""Core calendar types.

This module provides the types shared by every calendar:
    - Chronology: a calendar system and factory for its dates
    - AbstractDate: the date kernel built on a few per-calendar primitives
    - ChronoPeriod: an amount of years, months and days in one calendar
    - ValueRange: the valid range of a field
"""

from __future__ import annotations

from altchrono.core.chronology import (
    Chronology,
    Clock,
    available_chronologies,
    get_chronology,
    register_chronology,
)
from altchrono.core.date import AbstractDate
from altchrono.core.period import ChronoPeriod
from altchrono.core.value_range import ValueRange

__all__: list[str] = [
    "AbstractDate",
    "ChronoPeriod",
    "Chronology",
    "Clock",
    "ValueRange",
    "available_chronologies",
    "get_chronology",
    "register_chronology",
]
