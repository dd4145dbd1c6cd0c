"""Altchrono exception hierarchy.

All altchrono-specific exceptions inherit from AltChronoError.
"""

from __future__ import annotations


class AltChronoError(Exception):
    """Base exception for all altchrono errors."""

    pass


class ValidationError(AltChronoError):
    """Invalid input values.

    Raised when a calendar field is out of range or a combination of
    fields does not denote a real date in the calendar.

    Examples:
        - Day 31 in a 30-day Coptic month
        - Month 14 in a non-leap Pax year
        - Requesting the International Fixed leap day in a non-leap year
        - An accounting chronology built without an end month
    """

    pass


class ParseError(AltChronoError):
    """Failed to rebuild a value from its serialized form.

    Examples:
        - JSON payload without a `_type` tag
        - Unknown chronology id in a payload
        - Non-integer year, month or day fields
    """

    pass


class DateRangeError(AltChronoError, OverflowError):
    """Arithmetic operation exceeded the supported range.

    Raised when a calculation produces a proleptic year or epoch day
    that the calendar cannot represent.

    Examples:
        - Adding a million years to a Julian date
        - Converting an epoch day far beyond year 999,999
    """

    pass


class EraMismatchError(AltChronoError, TypeError):
    """An era from a different calendar family was supplied.

    Examples:
        - Passing CopticEra.AM to JulianChronology.proleptic_year
    """

    pass


class UnsupportedFieldError(AltChronoError):
    """A field or unit the calendar does not handle was requested.

    Examples:
        - Querying Field.HOUR_OF_DAY on a date
        - Adding ChronoUnit.SECONDS to a date
    """

    pass


__all__ = [
    "AltChronoError",
    "ValidationError",
    "ParseError",
    "DateRangeError",
    "EraMismatchError",
    "UnsupportedFieldError",
]
