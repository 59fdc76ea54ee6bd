"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from week_start import WeekStart


def as_date(value: date) -> date:
    """Reduce a date or datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def shift_month(year: int, month: int, steps: int) -> tuple[int, int]:
    """Return (year, month) *steps* months away, rolling over years."""
    index = year * 12 + (month - 1) + steps
    return index // 12, index % 12 + 1


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def first_of_month(anchor: date, month_offset: int = 0) -> date:
    anchor = as_date(anchor)
    year, month = shift_month(anchor.year, anchor.month, month_offset)
    return date(year, month, 1)


def dates_for_month(anchor: date, month_offset: int = 0) -> list[date]:
    """Return every day of the month *month_offset* months from *anchor*.

    Day 1 through the last day, ascending, nothing from neighbouring
    months. Only the anchor's year and month are used, so the result does
    not depend on time of day or time zone.
    """
    first = first_of_month(anchor, month_offset)
    days_in_month = calendar.monthrange(first.year, first.month)[1]
    return [first + timedelta(days=i) for i in range(days_in_month)]


def column_for_weekday(iso_weekday: int, week_start: WeekStart) -> int:
    """Map an ISO weekday (Mon=1 .. Sun=7) to its 1-7 grid column."""
    if week_start is WeekStart.SUNDAY:
        # Sunday leads, Monday closes the row, Tue..Sat stay put
        if iso_weekday == 7:
            return 1
        if iso_weekday == 1:
            return 7
        return iso_weekday

    if week_start is WeekStart.SATURDAY:
        if iso_weekday == 6:
            return 1
        if iso_weekday == 7:
            return 2
        return iso_weekday + 2

    return iso_weekday


def column_of(d: date, week_start: WeekStart) -> int:
    """Return the 1-7 grid column of *d* under *week_start*."""
    return column_for_weekday(as_date(d).isoweekday(), week_start)


def month_label(anchor: date) -> str:
    """Return e.g. ``"March 2024"`` for the anchor's month."""
    return f"{calendar.month_name[anchor.month]} {anchor.year}"


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday
