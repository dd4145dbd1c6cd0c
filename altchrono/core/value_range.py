"""ValueRange class describing the valid values of a field.

This module provides the ValueRange class returned by the range
queries of chronologies and dates.
"""

from __future__ import annotations

from altchrono.errors import ValidationError


class ValueRange:
    """The range of valid values for a calendar field.

    Both ends of a range may vary by context. The maximum is described
    by the smallest maximum (valid in every context) and the largest
    maximum (valid in some context). For example the day-of-month of an
    accounting calendar with 4-4-5 quarters has the range 1 - 28/35.
    The minimum varies only for calendars with month-less days, such as
    the International Fixed calendar whose month field runs -1/0 - 13.

    Attributes:
        minimum: Smallest valid value in any context.
        largest_minimum: Smallest value that is a valid minimum in
            every context.
        smallest_maximum: Largest value valid in every context.
        maximum: Largest value valid in some context.

    Examples:
        >>> r = ValueRange.of(1, 28, 35)
        >>> r.is_valid_value(30)
        True
        >>> r.is_fixed
        False

        >>> ValueRange.of(1, 7)
        ValueRange(1, 7)
    """

    __slots__ = ("_min_smallest", "_min_largest", "_max_smallest", "_max_largest")

    def __init__(
        self,
        min_smallest: int,
        min_largest: int,
        max_smallest: int,
        max_largest: int,
    ) -> None:
        """Create a ValueRange from all four bounds.

        Args:
            min_smallest: Smallest minimum.
            min_largest: Largest minimum.
            max_smallest: Smallest maximum.
            max_largest: Largest maximum.

        Raises:
            ValidationError: If the bounds are inconsistent.
        """
        if min_smallest > min_largest:
            raise ValidationError(
                f"smallest minimum {min_smallest} exceeds largest minimum {min_largest}"
            )
        if max_smallest > max_largest:
            raise ValidationError(
                f"smallest maximum {max_smallest} exceeds largest maximum {max_largest}"
            )
        if min_largest > max_largest:
            raise ValidationError(
                f"minimum {min_largest} exceeds maximum {max_largest}"
            )
        self._min_smallest = min_smallest
        self._min_largest = min_largest
        self._max_smallest = max_smallest
        self._max_largest = max_largest

    @classmethod
    def of(cls, *bounds: int) -> ValueRange:
        """Create a ValueRange from two, three or four bounds.

        Args:
            *bounds: (min, max), (min, smallest_max, largest_max) or
                (smallest_min, largest_min, smallest_max, largest_max).

        Returns:
            The ValueRange.

        Raises:
            ValidationError: If the bounds are inconsistent.
            TypeError: If the number of bounds is not 2, 3 or 4.

        Examples:
            >>> ValueRange.of(1, 355, 366)
            ValueRange(1, 355, 366)
        """
        if len(bounds) == 2:
            low, high = bounds
            return cls(low, low, high, high)
        if len(bounds) == 3:
            low, smallest, largest = bounds
            return cls(low, low, smallest, largest)
        if len(bounds) == 4:
            return cls(*bounds)
        raise TypeError(f"expected 2, 3 or 4 bounds, got {len(bounds)}")

    @property
    def minimum(self) -> int:
        """Return the smallest valid value."""
        return self._min_smallest

    @property
    def largest_minimum(self) -> int:
        """Return the largest possible minimum."""
        return self._min_largest

    @property
    def smallest_maximum(self) -> int:
        """Return the largest value valid in every context."""
        return self._max_smallest

    @property
    def maximum(self) -> int:
        """Return the largest value valid in some context."""
        return self._max_largest

    @property
    def is_fixed(self) -> bool:
        """Return True if neither bound varies."""
        return (
            self._min_smallest == self._min_largest
            and self._max_smallest == self._max_largest
        )

    def is_valid_value(self, value: int) -> bool:
        """Check whether a value lies within minimum and maximum."""
        return self._min_smallest <= value <= self._max_largest

    def check_valid_value(self, value: int, name: object = "value") -> int:
        """Check a value against the range.

        Args:
            value: The value to check.
            name: Field name used in the error message.

        Returns:
            The value, unchanged.

        Raises:
            ValidationError: If the value is outside the range.

        Examples:
            >>> ValueRange.of(1, 30).check_valid_value(31, "DayOfMonth")
            Traceback (most recent call last):
            ...
            ValidationError: DayOfMonth must be between 1 and 30, got 31
        """
        if not self.is_valid_value(value):
            raise ValidationError(
                f"{name} must be between {self._min_smallest} and "
                f"{self._max_largest}, got {value}"
            )
        return value

    def _bounds(self) -> tuple[int, int, int, int]:
        return (self._min_smallest, self._min_largest, self._max_smallest, self._max_largest)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return self._bounds() == other._bounds()

    def __hash__(self) -> int:
        return hash(self._bounds())

    def __repr__(self) -> str:
        if self._min_smallest != self._min_largest:
            args = self._bounds()
        elif self._max_smallest != self._max_largest:
            args = (self._min_smallest, self._max_smallest, self._max_largest)
        else:
            args = (self._min_smallest, self._max_largest)
        return f"ValueRange({', '.join(str(a) for a in args)})"

    def __str__(self) -> str:
        low = str(self._min_smallest)
        if self._min_smallest != self._min_largest:
            low += f"/{self._min_largest}"
        high = str(self._max_smallest)
        if self._max_smallest != self._max_largest:
            high += f"/{self._max_largest}"
        return f"{low} - {high}"


__all__ = ["ValueRange"]
