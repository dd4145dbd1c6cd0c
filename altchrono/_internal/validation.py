"""Validation utilities for altchrono.

This module provides validation decorators and helpers for ensuring
calendar field values are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from altchrono.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising ValidationError if any value is out of range. It is
    used on date factories for the static part of a calendar's rules;
    year-dependent limits are checked inside the factory itself.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(month=(1, 13), day=(1, 30))
        ... def create_date(year: int, month: int, day: int) -> None:
        ...     pass

        >>> create_date(2024, 14, 1)  # Raises ValidationError
        Traceback (most recent call last):
        ...
        ValidationError: month must be between 1 and 13, got 14
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)
            for param_name, (min_val, max_val) in limits.items():
                if param_name in bound.arguments:
                    check_valid_value(bound.arguments[param_name], min_val, max_val, param_name)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def check_valid_value(value: int, min_val: int, max_val: int, name: str) -> int:
    """Check that a value is within an inclusive range.

    Args:
        value: The value to check.
        min_val: Smallest valid value.
        max_val: Largest valid value.
        name: Field name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        ValidationError: If value is outside min_val to max_val.
    """
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )
    return value


def validate_day(day: int, max_day: int, year: int, month: int) -> None:
    """Validate that a day exists in the given year and month.

    Args:
        day: The day to validate.
        max_day: Length of the month.
        year: The proleptic year, for the error message.
        month: The month, for the error message.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "validate_range",
    "check_valid_value",
    "validate_day",
]
