"""Calendar windows used to filter reports.

Every window is half-open: ``start`` is inclusive and ``end`` exclusive,
which is how hledger reads ``--begin`` and ``--end``.
"""

from datetime import date
from enum import Enum


class DateRangePreset(str, Enum):
    """Named date windows offered by the viewer."""

    THIS_MONTH = "this-month"
    LAST_MONTH = "last-month"
    THIS_YEAR = "this-year"
    LAST_YEAR = "last-year"


def shift_month(first_of_month: date, months: int) -> date:
    """Return the first day of the month ``months`` away from the given one."""
    index = first_of_month.year * 12 + first_of_month.month - 1 + months
    return date(index // 12, index % 12 + 1, 1)


def previous_month_bounds(today: date, months_back: int = 1) -> tuple[date, date]:
    """Return the window of the complete month ``months_back`` before today.

    Args:
        today: Reference date.
        months_back: 1 for last month, 2 for the month before, etc.

    Returns:
        tuple[date, date]: First day of that month and first day of the
        following month.
    """
    current = today.replace(day=1)
    start = shift_month(current, -months_back)
    return start, shift_month(start, 1)


def preset_date_range(preset: DateRangePreset, today: date) -> tuple[date, date]:
    """Return the window covered by ``preset`` relative to ``today``."""
    if preset is DateRangePreset.THIS_MONTH:
        start = today.replace(day=1)
        return start, shift_month(start, 1)
    if preset is DateRangePreset.LAST_MONTH:
        return previous_month_bounds(today)
    if preset is DateRangePreset.THIS_YEAR:
        return date(today.year, 1, 1), date(today.year + 1, 1, 1)
    return date(today.year - 1, 1, 1), date(today.year, 1, 1)


__all__ = [
    "DateRangePreset",
    "shift_month",
    "previous_month_bounds",
    "preset_date_range",
]
