"""Conversion utilities.

This module provides functions for converting dates and chronologies to
and from JSON-serializable dictionaries.

Examples:
    >>> from altchrono import JulianDate
    >>> from altchrono.convert import to_json, from_json

    >>> data = to_json(JulianDate(2012, 2, 29))
    >>> from_json(data) == JulianDate(2012, 2, 29)
    True
"""

from __future__ import annotations

from altchrono.convert.json import from_json, to_json

__all__ = [
    "to_json",
    "from_json",
]
