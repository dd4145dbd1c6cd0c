"""Calendar arithmetic.

The functions in this module are the canonical implementations of date
arithmetic. They are written against the primitives of AbstractDate, so
one implementation serves every calendar, and they back the
method-based API on the date classes.

Date Operations (from altchrono.arithmetic.date_ops):
    - plus_days, plus_weeks, plus_months, plus_years, plus
    - days_until, weeks_until, months_until, until, period_until
    - with_field, apply_field

Period Operations (from altchrono.arithmetic.period_ops):
    - add_period_to_date: Add a ChronoPeriod to a date
    - subtract_period_from_date: Subtract a ChronoPeriod from a date
"""

from __future__ import annotations

from altchrono.arithmetic.date_ops import (
    apply_field,
    days_until,
    months_until,
    period_until,
    plus,
    plus_days,
    plus_months,
    plus_weeks,
    plus_years,
    until,
    weeks_until,
    with_field,
)
from altchrono.arithmetic.period_ops import (
    add_period_to_date,
    subtract_period_from_date,
)

__all__: list[str] = [
    # Date operations
    "apply_field",
    "days_until",
    "months_until",
    "period_until",
    "plus",
    "plus_days",
    "plus_months",
    "plus_weeks",
    "plus_years",
    "until",
    "weeks_until",
    "with_field",
    # Period operations
    "add_period_to_date",
    "subtract_period_from_date",
]
