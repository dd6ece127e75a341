"""
Day-by-day calendar model used as the test oracle.

Nothing here is clever on purpose: a leap-year rule, a month-length table and
single-day steps.
"""
from __future__ import annotations

from typing import Iterator, Literal

from ..core.types import Date

Calendar = Literal["gregorian", "julian"]


def is_leap_year(y: int, calendar: Calendar = "gregorian") -> bool:
    if calendar == "julian":
        return y % 4 == 0
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def last_day_of_month(y: int, m: int, calendar: Calendar = "gregorian") -> int:
    if m != 2:
        # 31 for Jan, Mar, May, Jul, Aug, Oct, Dec; 30 otherwise.
        return (m ^ (m >> 3)) | 30
    return 29 if is_leap_year(y, calendar) else 28


def next_date(d: Date, calendar: Calendar = "gregorian") -> Date:
    if d.day != last_day_of_month(d.year, d.month, calendar):
        return Date(d.year, d.month, d.day + 1)
    if d.month != 12:
        return Date(d.year, d.month + 1, 1)
    return Date(d.year + 1, 1, 1)


def previous_date(d: Date, calendar: Calendar = "gregorian") -> Date:
    if d.day != 1:
        return Date(d.year, d.month, d.day - 1)
    if d.month != 1:
        return Date(d.year, d.month - 1, last_day_of_month(d.year, d.month - 1, calendar))
    return Date(d.year - 1, 12, 31)


def walk(start: Date, steps: int, calendar: Calendar = "gregorian") -> Iterator[Date]:
    """Yield start and the following `steps` dates (preceding ones if steps < 0)."""
    d = start
    yield d
    step = next_date if steps >= 0 else previous_date
    for _ in range(abs(steps)):
        d = step(d, calendar)
        yield d
