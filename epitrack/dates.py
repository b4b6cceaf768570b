"""
Calendar (day ordinals and week numbers)
========================================

All series share one time axis: the *day ordinal*, a 1-based day count inside
the reference year (Jan 1 2020 == 1).

- Dates in the year just before the reference year are valid input but are
  not plotted; they map to `PRIOR_YEAR`.
- The month table gives February 29 days (Feb 29 is day 60, March 1 is
  day 61). Keep it as is: series produced so far were built on this table.
- Weeks start on Monday: Jan 1-5 2020 (Wed..Sun) is week 0, Jan 6-12 week 1.
"""

from __future__ import annotations
from typing import List

from .exceptions import InvalidDate

REFERENCE_YEAR = 2020
PRIOR_YEAR = -1  # day ordinal marker for dates in REFERENCE_YEAR - 1

MONTH_DAYS: List[int] = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# day ordinal of the day before each month's first day
_MONTH_OFFSETS: List[int] = [sum(MONTH_DAYS[:m]) for m in range(12)]


def day_ordinal(year: int, month: int, day: int) -> int:
    """Return the 1-based day ordinal of a date in the reference year.

    Returns `PRIOR_YEAR` for any date in the previous year (month/day are not
    checked then). Raises `InvalidDate` for other years or out-of-range
    month/day values.
    """
    if year == REFERENCE_YEAR - 1:
        return PRIOR_YEAR
    if year != REFERENCE_YEAR:
        raise InvalidDate(f"Invalid value: year == {year}")
    if month < 1 or month > 12:
        raise InvalidDate(f"Invalid value: month == {month}")
    if day < 1 or day > MONTH_DAYS[month - 1]:
        raise InvalidDate(f"Invalid value: month == {month}, but day == {day}")
    return _MONTH_OFFSETS[month - 1] + day


def week_index(ordinal: int) -> int:
    """Week number for a day ordinal (0 for ordinals below 6)."""
    if ordinal < 6:
        return 0
    return 1 + (ordinal - 6) // 7


def is_plotted(ordinal: int) -> bool:
    return ordinal != PRIOR_YEAR
