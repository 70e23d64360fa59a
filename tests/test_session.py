"""Tests for EditSession intent handling."""

from dataclasses import dataclass, replace

import pytest

from pixel_art.core.color import Color
from pixel_art.core.config import EditorConfig
from pixel_art.core.grid import Coord, OutOfBoundsError
from pixel_art.edit.intents import (
    Erase,
    Fill,
    Paint,
    Redo,
    SelectColor,
    SelectTool,
    ToggleEraser,
    ToolMode,
    Undo,
    UseTool,
)
from pixel_art.edit.session import EditSession


def all_cells(session: EditSession, color: Color) -> bool:
    return all(c == color for _, c in session.grid.cells())


class TestInitialState:

    def test_blank_canvas(self, session: EditSession) -> None:
        assert session.grid.width == session.grid.height == 4
        assert all_cells(session, Color.WHITE)
        assert session.current_color == Color.BLACK
        assert session.tool is ToolMode.PAINT
        assert session.modified is False
        assert list(session.color_history) == []


class TestEdits:
    """Paint, erase and fill."""

    def test_paint_uses_current_color(self, session: EditSession) -> None:
        session.dispatch(SelectColor(Color.RED))
        assert session.dispatch(Paint(Coord(2, 3))) is True
        assert session.grid.get((2, 3)) == Color.RED
        assert session.modified is True

    def test_paint_same_color_records_but_reports_no_change(self, session: EditSession) -> None:
        session.dispatch(SelectColor(Color.WHITE))
        assert session.dispatch(Paint(Coord(0, 0))) is False
        assert session.history.undo_depth == 1
        assert session.modified is False

    def test_erase_writes_background(self, session: EditSession) -> None:
        session.dispatch(Paint(Coord(1, 1)))
        session.dispatch(Erase(Coord(1, 1)))
        assert session.grid.get((1, 1)) == Color.WHITE

    def test_fill_whole_canvas(self, session: EditSession) -> None:
        session.dispatch(SelectColor(Color.RED))
        assert session.dispatch(Fill(Coord(1, 1))) is True
        assert all_cells(session, Color.RED)
        assert session.dispatch(Fill(Coord(1, 1))) is False
        assert all_cells(session, Color.RED)

    def test_out_of_bounds_leaves_no_history(self, session: EditSession) -> None:
        with pytest.raises(OutOfBoundsError):
            session.dispatch(Paint(Coord(4, 0)))
        with pytest.raises(OutOfBoundsError):
            session.dispatch(Fill(Coord(0, -1)))
        assert session.history.undo_depth == 0

    def test_unknown_intent(self, session: EditSession) -> None:
        @dataclass(frozen=True)
        class Rotate:
            degrees: int

        with pytest.raises(TypeError):
            session.dispatch(Rotate(90))


class TestUndoRedo:

    def test_first_undo_reverts_first_edit(self, session: EditSession) -> None:
        session.dispatch(Paint(Coord(0, 0)))
        assert session.grid.get((0, 0)) == Color.BLACK
        assert session.dispatch(Undo()) is True
        assert session.grid.get((0, 0)) == Color.WHITE

    def test_undo_redo_inverse(self, session: EditSession) -> None:
        session.dispatch(SelectColor(Color.BLUE))
        session.dispatch(Paint(Coord(3, 0)))
        session.dispatch(Fill(Coord(0, 0)))
        after = session.snapshot()

        assert session.dispatch(Undo()) is True
        assert session.grid.get((0, 0)) == Color.WHITE
        assert session.dispatch(Redo()) is True
        assert session.snapshot() == after

    def test_undo_fill_restores_region(self, session: EditSession) -> None:
        session.dispatch(Paint(Coord(1, 0)))
        session.dispatch(Paint(Coord(0, 1)))
        before = session.snapshot()
        session.dispatch(SelectColor(Color.GREEN))
        session.dispatch(Fill(Coord(3, 3)))
        session.dispatch(Undo())
        assert session.snapshot() == before

    def test_new_edit_invalidates_redo(self, session: EditSession) -> None:
        session.dispatch(Paint(Coord(0, 0)))
        session.dispatch(Undo())
        session.dispatch(Erase(Coord(2, 2)))
        assert session.dispatch(Redo()) is False

    def test_undo_redo_do_not_record(self, session: EditSession) -> None:
        session.dispatch(Paint(Coord(0, 0)))
        session.dispatch(Undo())
        session.dispatch(Redo())
        assert session.history.undo_depth == 1
        assert session.history.redo_depth == 0

    def test_empty_history(self, session: EditSession) -> None:
        assert session.dispatch(Undo()) is False
        assert session.dispatch(Redo()) is False
        assert session.modified is False

    def test_depth_follows_config(self, small_config: EditorConfig) -> None:
        session = EditSession(replace(small_config, history_depth=3))
        for col in range(4):
            session.dispatch(Paint(Coord(col, 0)))
        assert session.history.undo_depth == 3


class TestTools:

    def test_eraser_turns_paint_into_erase(self, session: EditSession) -> None:
        session.dispatch(Paint(Coord(0, 0)))
        session.dispatch(ToggleEraser(True))
        assert session.eraser_enabled is True
        session.dispatch(Paint(Coord(0, 0)))
        assert session.grid.get((0, 0)) == Color.WHITE

        session.dispatch(ToggleEraser(False))
        assert session.tool is ToolMode.PAINT
        session.dispatch(Paint(Coord(0, 0)))
        assert session.grid.get((0, 0)) == Color.BLACK

    def test_eraser_off_returns_to_previous_tool(self, session: EditSession) -> None:
        session.dispatch(SelectTool(ToolMode.FILL))
        session.dispatch(ToggleEraser(True))
        session.dispatch(ToggleEraser(False))
        assert session.tool is ToolMode.FILL

    def test_eraser_off_when_not_erasing(self, session: EditSession) -> None:
        session.dispatch(SelectTool(ToolMode.FILL))
        session.dispatch(ToggleEraser(False))
        assert session.tool is ToolMode.FILL

    @pytest.mark.parametrize(
        "tool, expected_changed",
        [
            (ToolMode.PAINT, 1),
            (ToolMode.ERASE, 0),
            (ToolMode.FILL, 16),
        ],
    )
    def test_use_tool_dispatches_on_mode(
        self, session: EditSession, tool: ToolMode, expected_changed: int
    ) -> None:
        session.dispatch(SelectColor(Color.RED))
        session.dispatch(SelectTool(tool))
        session.dispatch(UseTool(Coord(1, 2)))
        changed = sum(1 for _, c in session.grid.cells() if c == Color.RED)
        assert changed == expected_changed

    def test_select_color_updates_history(self, session: EditSession) -> None:
        for color in (Color.RED, Color.GREEN, Color.RED):
            session.dispatch(SelectColor(color))
        assert session.current_color == Color.RED
        assert list(session.color_history) == [Color.RED, Color.GREEN]


class TestStrokes:

    def test_stroke_is_one_undo_step(self, session: EditSession) -> None:
        with session.stroke():
            for col in range(4):
                session.dispatch(Paint(Coord(col, 2)))
        assert session.history.undo_depth == 1
        session.dispatch(Undo())
        assert all_cells(session, Color.WHITE)

    def test_edits_outside_stroke_are_separate(self, session: EditSession) -> None:
        with session.stroke():
            session.dispatch(Paint(Coord(0, 0)))
        session.dispatch(Paint(Coord(1, 0)))
        assert session.history.undo_depth == 2

    def test_undo_inside_stroke_starts_new_step(self, session: EditSession) -> None:
        session.begin_stroke()
        session.dispatch(Paint(Coord(0, 0)))
        session.dispatch(Undo())
        session.dispatch(Paint(Coord(1, 0)))
        session.end_stroke()
        assert session.history.undo_depth == 1
        session.dispatch(Undo())
        assert all_cells(session, Color.WHITE)


class TestModified:

    def test_clear_modified(self, session: EditSession) -> None:
        session.dispatch(Paint(Coord(0, 0)))
        session.clear_modified()
        assert session.modified is False
        session.dispatch(Undo())
        assert session.modified is True
