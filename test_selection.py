"""Tests for the two-click range selection and its day tags."""

from datetime import date

import pytest

from selection import DayTag, RangeSelection, SelectionState


def jan(day: int) -> date:
    return date(2024, 1, day)


# a "today" outside every range under test
TODAY = date(2030, 1, 1)


class TestClickTransitions:
    def test_three_click_cycle(self):
        sel = RangeSelection()
        assert sel.state is SelectionState.EMPTY

        assert sel.click(jan(3)) is SelectionState.START_ONLY
        assert (sel.start, sel.end) == (jan(3), None)

        assert sel.click(jan(9)) is SelectionState.RANGE
        assert (sel.start, sel.end) == (jan(3), jan(9))

        assert sel.click(jan(20)) is SelectionState.EMPTY
        assert (sel.start, sel.end) == (None, None)

        assert sel.click(jan(25)) is SelectionState.START_ONLY
        assert sel.start == jan(25)

    def test_end_before_start_is_kept(self):
        sel = RangeSelection()
        sel.click(jan(20))
        sel.click(jan(5))
        assert (sel.start, sel.end) == (jan(20), jan(5))
        assert sel.bounds() == (jan(5), jan(20))

    def test_bounds_without_range(self):
        sel = RangeSelection()
        assert sel.bounds() == (None, None)
        sel.click(jan(5))
        assert sel.bounds() == (None, None)

    def test_reset(self):
        sel = RangeSelection()
        sel.click(jan(1))
        sel.hover_enter(jan(4))
        sel.reset()
        assert sel == RangeSelection()


class TestHover:
    def test_enter_sets_when_unset(self):
        sel = RangeSelection()
        sel.hover_enter(jan(4))
        assert sel.hovered == jan(4)

    def test_enter_other_date_ignored_while_hovering(self):
        sel = RangeSelection()
        sel.hover_enter(jan(4))
        sel.hover_enter(jan(5))
        assert sel.hovered == jan(4)

    def test_reenter_same_date(self):
        sel = RangeSelection()
        sel.hover_enter(jan(4))
        sel.hover_enter(jan(4))
        assert sel.hovered == jan(4)

    def test_leave_hovered_date_clears(self):
        sel = RangeSelection()
        sel.hover_enter(jan(4))
        sel.hover_leave(jan(4))
        assert sel.hovered is None
        sel.hover_enter(jan(5))
        assert sel.hovered == jan(5)

    def test_leave_other_date_keeps_hover(self):
        sel = RangeSelection()
        sel.hover_enter(jan(4))
        sel.hover_leave(jan(9))
        assert sel.hovered == jan(4)

    def test_leave_without_date_clears(self):
        sel = RangeSelection(hovered=jan(4))
        sel.hover_leave()
        assert sel.hovered is None


def tags_by_day(sel: RangeSelection, today: date = TODAY) -> dict[int, frozenset]:
    return {d: sel.tags_for(jan(d), today) for d in range(1, 32)}


class TestTags:
    def test_empty_selection_has_no_tags(self):
        assert all(not t for t in tags_by_day(RangeSelection()).values())

    def test_today(self):
        tags = tags_by_day(RangeSelection(), today=jan(17))
        assert tags[17] == {DayTag.TODAY}
        assert not tags[16]

    def test_committed_range(self):
        sel = RangeSelection(start=jan(10), end=jan(14))
        tags = tags_by_day(sel)
        assert tags[10] == {DayTag.SELECTION_START}
        assert tags[14] == {DayTag.SELECTION_END}
        for d in (11, 12, 13):
            assert tags[d] == {DayTag.SELECTION}
        assert not tags[9]
        assert not tags[15]

    def test_hover_preview(self):
        sel = RangeSelection()
        sel.click(jan(10))
        sel.hover_enter(jan(15))
        tags = tags_by_day(sel)
        assert tags[10] == {DayTag.SELECTION_START}
        for d in (11, 12, 13, 14):
            assert tags[d] == {DayTag.SELECTION}
        assert tags[15] == {DayTag.SELECTION_END}
        assert not tags[16]

        sel.hover_leave(jan(15))
        tags = tags_by_day(sel)
        assert tags[10] == {DayTag.SELECTION_START}
        assert all(not tags[d] for d in range(1, 32) if d != 10)

    def test_hover_before_start_previews_nothing(self):
        sel = RangeSelection(start=jan(10), hovered=jan(5))
        tags = tags_by_day(sel)
        assert tags[10] == {DayTag.SELECTION_START}
        assert all(not tags[d] for d in range(1, 32) if d != 10)

    def test_hover_ignored_once_range_committed(self):
        sel = RangeSelection(start=jan(10), end=jan(12), hovered=jan(20))
        tags = tags_by_day(sel)
        assert not tags[20]
        assert not tags[15]

    def test_inverted_range_has_no_fill(self):
        sel = RangeSelection(start=jan(20), end=jan(5))
        tags = tags_by_day(sel)
        assert tags[20] == {DayTag.SELECTION_START}
        assert tags[5] == {DayTag.SELECTION_END}
        assert not any(DayTag.SELECTION in t for t in tags.values())

    def test_single_day_range_carries_both_ends(self):
        sel = RangeSelection(start=jan(8), end=jan(8))
        assert sel.tags_for(jan(8), TODAY) == {DayTag.SELECTION_START, DayTag.SELECTION_END}

    def test_tags_are_cumulative_with_today(self):
        sel = RangeSelection(start=jan(10), end=jan(14))
        assert sel.tags_for(jan(12), jan(12)) == {DayTag.TODAY, DayTag.SELECTION}

    @pytest.mark.parametrize("tag,value", [
        (DayTag.TODAY, "today"),
        (DayTag.SELECTION_START, "selection-start"),
        (DayTag.SELECTION_END, "selection-end"),
        (DayTag.SELECTION, "selection"),
    ])
    def test_tag_values(self, tag, value):
        assert tag.value == value
