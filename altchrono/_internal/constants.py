"""Internal constants for altchrono.

These constants define the epoch alignments and day counts shared by the
calendar implementations. This module is not part of the public API.
"""

from __future__ import annotations

# Day counts between calendar origins and ISO 1970-01-01 (epoch day 0)
DAYS_0000_TO_1970: int = 719_528  # ISO 0000-01-01 to 1970-01-01
DAYS_0001_TO_1970: int = 719_162  # ISO 0001-01-01 to 1970-01-01

# MJD (Modified Julian Day) reference point
# MJD 0 = 1858-11-17
MJD_UNIX_EPOCH: int = 40587

# Days in each Gregorian/Julian month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "DAYS_0000_TO_1970",
    "DAYS_0001_TO_1970",
    "MJD_UNIX_EPOCH",
    "DAYS_IN_MONTH",
]
