"""Two-click range selection with hover preview."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class SelectionState(Enum):
    EMPTY = "empty"
    START_ONLY = "start_only"
    RANGE = "range"


class DayTag(Enum):
    TODAY = "today"
    SELECTION_START = "selection-start"
    SELECTION_END = "selection-end"
    SELECTION = "selection"


@dataclass
class RangeSelection:
    """Selection owned by one picker: start click, end click, reset click.

    ``end`` keeps the clicked order; it may fall before ``start``.
    """

    start: date | None = None
    end: date | None = None
    hovered: date | None = None

    @property
    def state(self) -> SelectionState:
        if self.start is None:
            return SelectionState.EMPTY
        if self.end is None:
            return SelectionState.START_ONLY
        return SelectionState.RANGE

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def click(self, d: date) -> SelectionState:
        """Advance on a date click and return the new state."""
        state = self.state
        if state is SelectionState.EMPTY:
            self.start = d
        elif state is SelectionState.START_ONLY:
            self.end = d
        else:
            # third click only clears; a fresh click starts the next range
            self.start = None
            self.end = None
        return self.state

    def hover_enter(self, d: date) -> None:
        if self.hovered is None or self.hovered == d:
            self.hovered = d

    def hover_leave(self, d: date | None = None) -> None:
        """Clear the hover when the pointer leaves the hovered date.

        Without *d* the hover is cleared unconditionally.
        """
        if d is None or d == self.hovered:
            self.hovered = None

    def reset(self) -> None:
        self.start = None
        self.end = None
        self.hovered = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def bounds(self) -> tuple[date | None, date | None]:
        """Committed range as (low, high) in calendar order, else (None, None)."""
        if self.start is not None and self.end is not None:
            return min(self.start, self.end), max(self.start, self.end)
        return None, None

    def tags_for(self, d: date, today: date) -> frozenset[DayTag]:
        """Visual tags of *d* for the current selection and hover."""
        tags: set[DayTag] = set()
        if d == today:
            tags.add(DayTag.TODAY)

        start, end = self.start, self.end
        if start is None:
            return frozenset(tags)

        if d == start:
            tags.add(DayTag.SELECTION_START)

        if end is not None:
            if d == end:
                tags.add(DayTag.SELECTION_END)
            if start < d < end:
                tags.add(DayTag.SELECTION)
        elif self.hovered is not None and start < self.hovered:
            if d == self.hovered:
                tags.add(DayTag.SELECTION_END)
            elif start < d < self.hovered:
                tags.add(DayTag.SELECTION)

        return frozenset(tags)
