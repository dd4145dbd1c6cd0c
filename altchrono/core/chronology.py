"""Chronology base class and the chronology registry.

A chronology describes one calendar system: its leap rule, its eras and
the static ranges of its fields. It acts as the factory for the dates
of that calendar. Parameterless calendars expose a single instance as
``XChronology.INSTANCE`` and register it in the module-level registry
when their module is imported.
"""

from __future__ import annotations

import datetime
import logging
import re
from typing import TYPE_CHECKING, Callable, ClassVar

from altchrono.core.value_range import ValueRange
from altchrono.errors import EraMismatchError, UnsupportedFieldError, ValidationError
from altchrono.units.era import CalendarEra
from altchrono.units.field import Field

if TYPE_CHECKING:
    from altchrono.core.date import AbstractDate
    from altchrono.core.period import ChronoPeriod

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.date]

# Ranges of the ISO calendar, used where a chronology has no override
ISO_RANGES: dict[Field, ValueRange] = {
    Field.DAY_OF_WEEK: ValueRange.of(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
    Field.DAY_OF_MONTH: ValueRange.of(1, 28, 31),
    Field.DAY_OF_YEAR: ValueRange.of(1, 365, 366),
    Field.EPOCH_DAY: ValueRange.of(-365_243_219_162, 365_241_780_471),
    Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 4, 5),
    Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 53),
    Field.MONTH_OF_YEAR: ValueRange.of(1, 12),
    Field.PROLEPTIC_MONTH: ValueRange.of(-999_999_999 * 12, 999_999_999 * 12 + 11),
    Field.YEAR_OF_ERA: ValueRange.of(1, 999_999_999, 1_000_000_000),
    Field.YEAR: ValueRange.of(-999_999_999, 999_999_999),
    Field.ERA: ValueRange.of(0, 1),
}


class Chronology:
    """A calendar system.

    Subclasses provide the id, the leap-year rule, the era enum and the
    factories for their date class. Field ranges are looked up first in
    the subclass's ``RANGES`` table and then in the ISO defaults.

    Chronologies are immutable and safe to share between threads.
    """

    __slots__ = ()

    ERA_CLASS: ClassVar[type[CalendarEra]]
    RANGES: ClassVar[dict[Field, ValueRange]] = {}

    @property
    def id(self) -> str:
        """Return the identifier of this calendar system."""
        raise NotImplementedError

    @property
    def calendar_type(self) -> str | None:
        """Return the CLDR calendar type, or None if there is none."""
        return None

    # -------------------------------------------------------------------------
    # Date factories
    # -------------------------------------------------------------------------

    def date(self, year: int, month: int, day: int) -> AbstractDate:
        """Create a date from proleptic year, month and day-of-month."""
        raise NotImplementedError

    def date_year_day(self, year: int, day_of_year: int) -> AbstractDate:
        """Create a date from proleptic year and day-of-year."""
        raise NotImplementedError

    def date_epoch_day(self, epoch_day: int) -> AbstractDate:
        """Create a date from an epoch day (ISO 1970-01-01 = 0)."""
        raise NotImplementedError

    def date_of_era(
        self, era: CalendarEra, year_of_era: int, month: int, day: int
    ) -> AbstractDate:
        """Create a date from era, year-of-era, month and day-of-month.

        Raises:
            EraMismatchError: If the era belongs to another calendar.
            ValidationError: If the fields do not form a valid date.
        """
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    def date_year_day_of_era(
        self, era: CalendarEra, year_of_era: int, day_of_year: int
    ) -> AbstractDate:
        """Create a date from era, year-of-era and day-of-year."""
        return self.date_year_day(self.proleptic_year(era, year_of_era), day_of_year)

    def date_now(self, clock: Clock | None = None) -> AbstractDate:
        """Return the current date in this calendar.

        Args:
            clock: Zero-argument callable returning a datetime.date;
                defaults to datetime.date.today.

        Returns:
            Today's date in this calendar.
        """
        return self.date_epoch_day(read_clock(clock))

    def date_from(self, temporal: object) -> AbstractDate:
        """Convert another calendar's date or a datetime.date to this calendar.

        Raises:
            TypeError: If the object has no epoch-day representation.
        """
        return self.date_epoch_day(epoch_day_of(temporal))

    # -------------------------------------------------------------------------
    # Calendar rules
    # -------------------------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        """Check if a proleptic year is a leap year in this calendar."""
        raise NotImplementedError

    def proleptic_year(self, era: CalendarEra, year_of_era: int) -> int:
        """Convert an era and year-of-era to a proleptic year.

        Raises:
            EraMismatchError: If the era belongs to another calendar.
        """
        if not isinstance(era, self.ERA_CLASS):
            raise EraMismatchError(
                f"era must be {self.ERA_CLASS.__name__}, got {type(era).__name__}"
            )
        return era.proleptic_year(year_of_era)

    def era_of(self, value: int) -> CalendarEra:
        """Return the era with the given numeric value.

        Raises:
            ValidationError: If the value names no era of this calendar.
        """
        return self.ERA_CLASS.of(value)

    def eras(self) -> list[CalendarEra]:
        """Return the eras of this calendar, earliest first."""
        return list(self.ERA_CLASS)

    def range(self, field: Field) -> ValueRange:
        """Return the static range of a field in this calendar.

        Raises:
            UnsupportedFieldError: If the field is not date-based.
        """
        if not field.is_date_based:
            raise UnsupportedFieldError(f"unsupported field: {field}")
        found = self.RANGES.get(field)
        return found if found is not None else ISO_RANGES[field]

    def period(self, years: int = 0, months: int = 0, days: int = 0) -> ChronoPeriod:
        """Return a period in this calendar."""
        from altchrono.core.period import ChronoPeriod

        return ChronoPeriod(years, months, days, self)

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chronology):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.id


def read_clock(clock: Clock | None = None) -> int:
    """Read a clock and return today's epoch day.

    Errors raised by the clock propagate unchanged.
    """
    today = clock() if clock is not None else datetime.date.today()
    logger.debug("read clock: %s", today)
    return epoch_day_of(today)


def epoch_day_of(temporal: object) -> int:
    """Return the epoch day of a calendar date or a datetime.date.

    Raises:
        TypeError: If the object has no epoch-day representation.
    """
    from altchrono.core.date import AbstractDate

    if isinstance(temporal, AbstractDate):
        return temporal.to_epoch_day()
    if isinstance(temporal, datetime.datetime):
        temporal = temporal.date()
    if isinstance(temporal, datetime.date):
        return temporal.toordinal() - datetime.date(1970, 1, 1).toordinal()
    raise TypeError(f"expected a calendar date or datetime.date, got {type(temporal).__name__}")


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------

_REGISTRY: dict[str, Chronology] = {}

_CUTOVER_ID = re.compile(r"^Cutover\[(-?\d{4,})-(\d{2})-(\d{2})\]$")


def register_chronology(chronology: Chronology) -> Chronology:
    """Register a chronology under its id.

    Registering the same chronology twice is harmless; registering a
    different chronology under a taken id is an error.

    Args:
        chronology: The chronology to register.

    Returns:
        The chronology, to allow use at module level.

    Raises:
        ValidationError: If another chronology already uses the id.
    """
    existing = _REGISTRY.get(chronology.id)
    if existing is not None and existing != chronology:
        raise ValidationError(f"chronology id already registered: {chronology.id}")
    _REGISTRY[chronology.id] = chronology
    logger.debug("registered chronology %s", chronology.id)
    return chronology


def get_chronology(chronology_id: str) -> Chronology:
    """Look up a chronology by id.

    Registered ids are found directly. Ids of the form
    ``Cutover[YYYY-MM-DD]`` build a cutover chronology on demand.

    Args:
        chronology_id: The chronology id, such as "Coptic".

    Returns:
        The chronology.

    Raises:
        ValidationError: If no chronology has the id.

    Examples:
        >>> get_chronology("Julian")
        JulianChronology()
    """
    found = _REGISTRY.get(chronology_id)
    if found is not None:
        return found
    match = _CUTOVER_ID.match(chronology_id)
    if match:
        from altchrono.calendars.cutover import CutoverChronology

        year, month, day = (int(g) for g in match.groups())
        try:
            cutover = datetime.date(year, month, day)
        except ValueError as e:
            raise ValidationError(f"invalid cutover date in id: {chronology_id}") from e
        logger.debug("built cutover chronology for %s", chronology_id)
        return CutoverChronology.of(cutover)
    raise ValidationError(f"unknown chronology: {chronology_id}")


def available_chronologies() -> list[Chronology]:
    """Return all registered chronologies, sorted by id."""
    return [_REGISTRY[key] for key in sorted(_REGISTRY)]


__all__ = [
    "Chronology",
    "Clock",
    "ISO_RANGES",
    "available_chronologies",
    "epoch_day_of",
    "get_chronology",
    "read_clock",
    "register_chronology",
]
