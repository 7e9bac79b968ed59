"""Tests for SelectionCursor."""

from pathlib import Path

import pytest
from targetctl.core.results import ResultSet
from targetctl.core.selection import SelectionCursor


def _cursor(count: int) -> tuple[ResultSet, SelectionCursor]:
    results = ResultSet(Path(f"/work/p{i}/target") for i in range(count))
    return results, SelectionCursor(results)


class TestInitialState:
    """Tests for a fresh cursor."""

    def test_starts_without_selection(self) -> None:
        """A new cursor selects nothing."""
        _, cursor = _cursor(3)
        assert cursor.selected is None
        assert cursor.offset == 0


class TestNext:
    """Tests for next()."""

    def test_from_none_selects_first(self) -> None:
        """next() from no selection selects index 0."""
        _, cursor = _cursor(3)
        cursor.next()
        assert cursor.selected == 0

    def test_advances(self) -> None:
        """next() moves down by one."""
        _, cursor = _cursor(3)
        cursor.select(1)
        cursor.next()
        assert cursor.selected == 2

    def test_wraps_from_last(self) -> None:
        """next() on the last entry wraps to the first."""
        _, cursor = _cursor(3)
        cursor.select(2)
        cursor.next()
        assert cursor.selected == 0

    def test_empty_is_noop(self) -> None:
        """next() on an empty list keeps no selection."""
        _, cursor = _cursor(0)
        cursor.next()
        cursor.next()
        assert cursor.selected is None


class TestPrevious:
    """Tests for previous()."""

    def test_from_none_selects_last(self) -> None:
        """previous() from no selection selects the last index."""
        _, cursor = _cursor(3)
        cursor.previous()
        assert cursor.selected == 2

    def test_moves_up(self) -> None:
        """previous() moves up by one."""
        _, cursor = _cursor(3)
        cursor.select(2)
        cursor.previous()
        assert cursor.selected == 1

    def test_wraps_from_first(self) -> None:
        """previous() on the first entry wraps to the last."""
        _, cursor = _cursor(3)
        cursor.select(0)
        cursor.previous()
        assert cursor.selected == 2

    def test_empty_is_noop(self) -> None:
        """previous() on an empty list keeps no selection."""
        _, cursor = _cursor(0)
        cursor.previous()
        assert cursor.selected is None


class TestRoundTrip:
    """Tests for next/previous symmetry."""

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_next_then_previous_returns(self, count: int) -> None:
        """next() followed by previous() restores every start index."""
        _, cursor = _cursor(count)
        for start in range(count):
            cursor.select(start)
            cursor.next()
            cursor.previous()
            assert cursor.selected == start

    def test_single_element_stays_on_zero(self) -> None:
        """With one entry both directions stay on index 0."""
        _, cursor = _cursor(1)
        cursor.select(0)
        cursor.next()
        assert cursor.selected == 0
        cursor.previous()
        assert cursor.selected == 0


class TestSelect:
    """Tests for select() and clear()."""

    def test_select_out_of_range(self) -> None:
        """Selecting outside the list raises IndexError."""
        _, cursor = _cursor(2)
        with pytest.raises(IndexError):
            cursor.select(2)
        with pytest.raises(IndexError):
            cursor.select(-1)

    def test_select_none(self) -> None:
        """select(None) clears the selection."""
        _, cursor = _cursor(2)
        cursor.select(1)
        cursor.select(None)
        assert cursor.selected is None

    def test_clear_resets_offset(self) -> None:
        """clear() drops the selection and the scroll offset."""
        _, cursor = _cursor(2)
        cursor.select(1)
        cursor.offset = 1
        cursor.clear()
        assert cursor.selected is None
        assert cursor.offset == 0


class TestSync:
    """Tests for re-validation after the list shrinks."""

    def test_keeps_index_when_still_valid(self) -> None:
        """After removing entry i the cursor stays on i."""
        results, cursor = _cursor(3)
        cursor.select(1)
        results.remove(1)
        cursor.sync()
        assert cursor.selected == 1
        assert results.get(1) == Path("/work/p2/target")

    def test_wraps_when_last_removed(self) -> None:
        """Removing the last entry wraps the cursor to 0."""
        results, cursor = _cursor(3)
        cursor.select(2)
        results.remove(2)
        cursor.sync()
        assert cursor.selected == 0

    def test_clears_when_empty(self) -> None:
        """An empty list leaves no selection."""
        results, cursor = _cursor(1)
        cursor.select(0)
        results.remove(0)
        cursor.sync()
        assert cursor.selected is None

    def test_none_stays_none(self) -> None:
        """sync() does not create a selection."""
        results, cursor = _cursor(2)
        results.remove(0)
        cursor.sync()
        assert cursor.selected is None
