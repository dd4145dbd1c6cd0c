"""JSON serialization and deserialization for dates and chronologies.

This module provides functions for converting calendar dates and
chronologies to and from JSON-serializable dictionaries.

Functions:
    to_json: Convert a date or chronology to a JSON-serializable dict.
    from_json: Create a date or chronology from a JSON dict.

The format uses a type tag for polymorphic deserialization and the
chronology id to find the calendar:

    {"_type": "CopticDate", "chronology": "Coptic", "year": 1728, "month": 10, "day": 29}
    {"_type": "Chronology", "id": "Cutover[1582-10-15]"}

Accounting chronologies are not registered, so their dates and the
chronologies themselves also carry the builder configuration under
"config".

Examples:
    >>> from altchrono import CopticDate
    >>> from altchrono.convert import to_json, from_json

    >>> data = to_json(CopticDate(1728, 10, 29))
    >>> data['_type']
    'CopticDate'

    >>> from_json(data)
    CopticDate(1728, 10, 29)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from altchrono.errors import ParseError

if TYPE_CHECKING:
    from altchrono.core.chronology import Chronology
    from altchrono.core.date import AbstractDate

# Type alias for serializable objects
JsonValue = Union["AbstractDate", "Chronology"]

_CHRONOLOGY_TYPE = "Chronology"
_ACCOUNTING_ID = "Accounting"


def to_json(value: JsonValue) -> dict[str, Any]:
    """Convert a date or chronology to a JSON-serializable dictionary.

    Args:
        value: A calendar date or a chronology.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a date or chronology.

    Examples:
        >>> from altchrono import JulianChronology, JulianDate
        >>> to_json(JulianDate(2012, 2, 29))
        {'_type': 'JulianDate', 'chronology': 'Julian', 'year': 2012, 'month': 2, 'day': 29}
        >>> to_json(JulianChronology.INSTANCE)
        {'_type': 'Chronology', 'id': 'Julian'}
    """
    # Import here to avoid circular imports
    from altchrono.calendars.accounting import AccountingChronology
    from altchrono.core.chronology import Chronology
    from altchrono.core.date import AbstractDate

    if isinstance(value, AbstractDate):
        data: dict[str, Any] = {
            "_type": type(value).__name__,
            "chronology": value.chronology.id,
            "year": value.proleptic_year,
            "month": value.month,
            "day": value.day_of_month,
        }
        if isinstance(value.chronology, AccountingChronology):
            data["config"] = value.chronology.config()
        return data
    elif isinstance(value, Chronology):
        data = {"_type": _CHRONOLOGY_TYPE, "id": value.id}
        if isinstance(value, AccountingChronology):
            data["config"] = value.config()
        return data
    else:
        raise TypeError(f"expected a calendar date or chronology, got {type(value).__name__}")


def from_json(data: dict[str, Any]) -> JsonValue:
    """Create a date or chronology from a JSON dictionary.

    Dates are rebuilt through their chronology's ``date`` factory, so
    stored fields are validated like any other input.

    Args:
        data: A dictionary produced by to_json.

    Returns:
        The date or chronology.

    Raises:
        ParseError: If the data is missing fields, names an unknown
            chronology or names a date class that does not match it.
        ValidationError: If the stored fields do not form a valid date.
        TypeError: If `_type` is not a recognized type.

    Examples:
        >>> from_json({'_type': 'Chronology', 'id': 'Coptic'})
        CopticChronology()
        >>> from_json({'_type': 'PaxDate', 'chronology': 'Pax', 'year': 2014, 'month': 13, 'day': 7})
        PaxDate(2014, 13, 7)
    """
    # Import here so every calendar has registered itself
    import altchrono.calendars  # noqa: F401
    from altchrono.core.date import AbstractDate

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")

    if type_name == _CHRONOLOGY_TYPE:
        chronology_id = data.get("id")
        if not isinstance(chronology_id, str) or not chronology_id:
            raise ParseError("missing 'id' field for Chronology")
        return _chronology_from(chronology_id, data)

    date_class = _date_classes().get(type_name)
    if date_class is None:
        raise TypeError(f"unknown date type: {type_name!r}")

    chronology_id = data.get("chronology")
    if not isinstance(chronology_id, str) or not chronology_id:
        raise ParseError(f"missing 'chronology' field for {type_name}")
    fields = []
    for key in ("year", "month", "day"):
        field_value = data.get(key)
        if not isinstance(field_value, int) or isinstance(field_value, bool):
            raise ParseError(f"missing or non-integer {key!r} field for {type_name}")
        fields.append(field_value)

    chronology = _chronology_from(chronology_id, data)
    date: AbstractDate = chronology.date(*fields)
    if type(date) is not date_class:
        raise ParseError(
            f"chronology {chronology_id!r} does not build {type_name}, got {type(date).__name__}"
        )
    return date


def _chronology_from(chronology_id: str, data: dict[str, Any]) -> Chronology:
    """Resolve a chronology id, using the stored configuration for Accounting."""
    from altchrono.calendars.accounting import AccountingChronology
    from altchrono.core.chronology import get_chronology
    from altchrono.errors import ValidationError

    if chronology_id == _ACCOUNTING_ID:
        config = data.get("config")
        if not isinstance(config, dict):
            raise ParseError("missing 'config' field for Accounting chronology")
        try:
            return AccountingChronology.from_config(config)
        except KeyError as e:
            raise ParseError(f"incomplete Accounting configuration: missing {e}") from e
    try:
        return get_chronology(chronology_id)
    except ValidationError as e:
        raise ParseError(f"unknown chronology in JSON data: {chronology_id!r}") from e


def _date_classes() -> dict[str, type[AbstractDate]]:
    from altchrono import calendars

    return {
        cls.__name__: cls
        for cls in (
            calendars.AccountingDate,
            calendars.BritishCutoverDate,
            calendars.CopticDate,
            calendars.CutoverDate,
            calendars.DiscordianDate,
            calendars.FrenchRepublicanDate,
            calendars.InternationalFixedDate,
            calendars.JulianDate,
            calendars.PaxDate,
            calendars.Symmetry010Date,
            calendars.Symmetry454Date,
        )
    }


__all__ = ["to_json", "from_json"]
