"""Month-grid range picker model: dates, columns and tags for a renderer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from calendar_logic import (
    as_date,
    column_of,
    dates_for_month,
    first_of_month,
    month_label,
    next_month,
    prev_month,
)
from selection import DayTag, RangeSelection, SelectionState
from settings import resolve_locale
from week_start import WeekStart, resolve, weekday_labels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayCell:
    """One rendered day: its date, grid column and visual tags."""

    date: date
    column: int
    tags: frozenset[DayTag]

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def key(self) -> str:
        # stable identity for list diffing in the rendering layer
        return self.date.isoformat()


class DatePicker:
    """Single-month picker with two-click range selection.

    The locale is resolved once at construction (see
    ``settings.resolve_locale``). ``weekday_labels`` replaces the header
    names as given, with no reordering.
    """

    def __init__(
        self,
        locale: str | None = None,
        anchor_month: date | None = None,
        weekday_labels: list[str] | None = None,
        on_date_clicked: Callable[[date], None] | None = None,
        settings: dict | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.locale: str = resolve_locale(locale, settings)
        self.week_start: WeekStart = resolve(self.locale)
        self._label_override = list(weekday_labels) if weekday_labels is not None else None
        self._on_date_clicked = on_date_clicked
        self._today = today

        self.selection = RangeSelection()
        self.month: date = first_of_month(anchor_month if anchor_month is not None else today())
        self._anchor_month = anchor_month
        logger.debug("Picker locale %r, week starts %s", self.locale, self.week_start.name)

    # ------------------------------------------------------------------
    # Month cursor
    # ------------------------------------------------------------------
    def sync_anchor(self, anchor_month: date | None) -> bool:
        """Follow an externally supplied anchor month.

        Returns True when the cursor moved. ``None`` or an unchanged anchor
        leave the cursor (and any navigation since) alone.
        """
        if anchor_month is None or anchor_month == self._anchor_month:
            return False
        self._anchor_month = anchor_month
        self.month = first_of_month(anchor_month)
        return True

    def navigate(self, step: int) -> None:
        """Move the cursor one month back (-1) or forward (+1)."""
        step = max(-1, min(1, step))
        if step < 0:
            year, month = prev_month(self.month.year, self.month.month)
        elif step > 0:
            year, month = next_month(self.month.year, self.month.month)
        else:
            return
        self.month = date(year, month, 1)

    def go_today(self) -> None:
        self.month = first_of_month(self._today())
        self.clear_selection()

    @property
    def month_label(self) -> str:
        return month_label(self.month)

    @property
    def header_labels(self) -> list[str]:
        if self._label_override is not None:
            return list(self._label_override)
        return weekday_labels(self.week_start)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def click(self, d: date) -> SelectionState:
        d = as_date(d)
        state = self.selection.click(d)
        logger.debug("Clicked %s -> %s", d, state.name)
        if self._on_date_clicked is not None:
            self._on_date_clicked(d)
        return state

    def hover_enter(self, d: date) -> None:
        self.selection.hover_enter(as_date(d))

    def hover_leave(self, d: date | None = None) -> None:
        self.selection.hover_leave(as_date(d) if d is not None else None)

    def clear_selection(self) -> None:
        self.selection.reset()

    # ------------------------------------------------------------------
    # Render data
    # ------------------------------------------------------------------
    def dates(self) -> list[date]:
        return dates_for_month(self.month)

    def cells(self) -> list[DayCell]:
        today = self._today()
        return [
            DayCell(d, column_of(d, self.week_start), self.selection.tags_for(d, today))
            for d in self.dates()
        ]

    def selection_summary(self) -> str:
        """Footer text: the committed range and its length, plus today."""
        today_str = f"Today: {self._today().strftime('%d.%m.%Y')}"
        sel_lo, sel_hi = self.selection.bounds()
        if sel_lo is None or sel_lo == sel_hi:
            return today_str

        total_days = (sel_hi - sel_lo).days + 1
        full_weeks, rem_days = divmod(total_days, 7)

        parts: list[str] = []
        if full_weeks:
            parts.append(f"{full_weeks} week{'s' if full_weeks != 1 else ''}")
        if rem_days:
            parts.append(f"{rem_days} day{'s' if rem_days != 1 else ''}")

        range_str = f"{sel_lo.strftime('%d.%m')} → {sel_hi.strftime('%d.%m')}"
        return f"{range_str}:  {total_days} days  ({', '.join(parts)})     {today_str}"
