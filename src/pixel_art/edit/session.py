"""EditSession - coordinates the grid, its history and the fill engine.

Every intent goes through ``EditSession.dispatch``. Edits are recorded
before they mutate the grid so that undo restores the pre-edit state:

    session = EditSession(EditorConfig.small(4))
    session.dispatch(SelectColor(Color.RED))
    session.dispatch(Paint(Coord(0, 0)))
    session.dispatch(Undo())
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from pixel_art.core.color import Color
from pixel_art.core.config import EditorConfig
from pixel_art.core.grid import Coord, PixelGrid, Snapshot
from pixel_art.edit.color_history import ColorHistory
from pixel_art.edit.flood_fill import FloodFillEngine
from pixel_art.edit.history import HistoryStack
from pixel_art.edit.intents import (
    Erase,
    Fill,
    Intent,
    Paint,
    Redo,
    SelectColor,
    SelectTool,
    ToggleEraser,
    ToolMode,
    Undo,
    UseTool,
)

logger = logging.getLogger(__name__)


class EditSession:
    """State of one editing session.

    Owns the PixelGrid, its HistoryStack and the ColorHistory. Nothing
    else mutates them; all changes arrive as intents.

    Attributes:
        config: Geometry and limits for this session
        grid: The live grid
        history: Undo/redo snapshots of the grid
        color_history: Recently selected colors
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self.config = config or EditorConfig()
        size = self.config.grid_size
        self.grid = PixelGrid(size, size, self.config.background)
        self.history = HistoryStack(self.config.history_depth)
        self.color_history = ColorHistory(max_size=self.config.color_history_size)
        self._fill_engine = FloodFillEngine()

        self._current_color = self.config.initial_color
        self._tool = ToolMode.PAINT
        self._tool_before_eraser = ToolMode.PAINT
        self._modified = False

        self._stroke_active = False
        self._stroke_recorded = False

        self._handlers: dict[type, Callable[..., bool]] = {
            Paint: self._on_paint,
            Erase: self._on_erase,
            Fill: self._on_fill,
            UseTool: self._on_use_tool,
            Undo: self._on_undo,
            Redo: self._on_redo,
            SelectColor: self._on_select_color,
            ToggleEraser: self._on_toggle_eraser,
            SelectTool: self._on_select_tool,
        }

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def current_color(self) -> Color:
        return self._current_color

    @property
    def tool(self) -> ToolMode:
        return self._tool

    @property
    def eraser_enabled(self) -> bool:
        return self._tool is ToolMode.ERASE

    @property
    def modified(self) -> bool:
        """Whether the grid changed since the last clear_modified()."""
        return self._modified

    def clear_modified(self) -> None:
        self._modified = False

    def snapshot(self) -> Snapshot:
        return self.grid.snapshot()

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, intent: Intent) -> bool:
        """Apply one intent.

        Returns:
            For edits, undo and redo: whether the grid changed.
            For color and tool intents: True.

        Raises:
            TypeError: If the intent type is unknown
            OutOfBoundsError: If an edit targets a cell outside the grid
        """
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unknown intent: {intent!r}")
        logger.debug("Dispatching %r", intent)
        return handler(intent)

    # -------------------------------------------------------------------------
    # Strokes
    # -------------------------------------------------------------------------

    def begin_stroke(self) -> None:
        """Start grouping edits into a single undo step."""
        self._stroke_active = True
        self._stroke_recorded = False

    def end_stroke(self) -> None:
        self._stroke_active = False
        self._stroke_recorded = False

    @contextmanager
    def stroke(self) -> Iterator[EditSession]:
        """Group the edits made inside the block into one undo step."""
        self.begin_stroke()
        try:
            yield self
        finally:
            self.end_stroke()

    def _record(self) -> None:
        if self._stroke_active:
            if self._stroke_recorded:
                return
            self._stroke_recorded = True
        self.history.record_before_edit(self.grid)

    # -------------------------------------------------------------------------
    # Edit handlers
    # -------------------------------------------------------------------------

    def _write(self, coord: Coord, color: Color) -> bool:
        # Bounds are checked before recording so a bad coord leaves no history
        previous = self.grid.get(coord)
        self._record()
        self.grid.fill_rect(coord, color)
        changed = previous != color
        self._modified |= changed
        return changed

    def _on_paint(self, intent: Paint) -> bool:
        if self.eraser_enabled:
            return self._write(intent.coord, self.grid.background)
        return self._write(intent.coord, self._current_color)

    def _on_erase(self, intent: Erase) -> bool:
        return self._write(intent.coord, self.grid.background)

    def _on_fill(self, intent: Fill) -> bool:
        self.grid.get(intent.coord)
        self._record()
        changed = self._fill_engine.fill(self.grid, intent.coord, self._current_color) > 0
        self._modified |= changed
        return changed

    def _on_use_tool(self, intent: UseTool) -> bool:
        if self._tool is ToolMode.FILL:
            return self._on_fill(Fill(intent.coord))
        if self._tool is ToolMode.ERASE:
            return self._on_erase(Erase(intent.coord))
        return self._on_paint(Paint(intent.coord))

    def _on_undo(self, intent: Undo) -> bool:
        changed = self.history.undo(self.grid)
        if changed:
            self._modified = True
            # The next edit of an ongoing stroke starts a new undo step
            self._stroke_recorded = False
        return changed

    def _on_redo(self, intent: Redo) -> bool:
        changed = self.history.redo(self.grid)
        if changed:
            self._modified = True
            self._stroke_recorded = False
        return changed

    # -------------------------------------------------------------------------
    # Color and tool handlers
    # -------------------------------------------------------------------------

    def _on_select_color(self, intent: SelectColor) -> bool:
        self._current_color = intent.color
        self.color_history.add(intent.color)
        return True

    def _set_tool(self, tool: ToolMode) -> None:
        if tool is ToolMode.ERASE and self._tool is not ToolMode.ERASE:
            self._tool_before_eraser = self._tool
        self._tool = tool

    def _on_toggle_eraser(self, intent: ToggleEraser) -> bool:
        if intent.enabled:
            self._set_tool(ToolMode.ERASE)
        elif self._tool is ToolMode.ERASE:
            self._set_tool(self._tool_before_eraser)
        return True

    def _on_select_tool(self, intent: SelectTool) -> bool:
        self._set_tool(intent.tool)
        return True
