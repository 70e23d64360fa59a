"""PixelArtEditor - the surface a UI toolkit drives.

Handlers take device (screen) coordinates relative to the canvas origin,
translate them to grid cells, and route the result to an EditSession.
Clicks outside the canvas are ignored, so the core never sees an
out-of-bounds coordinate from here.

Example:
    editor = PixelArtEditor()
    editor.on_select_color("#ff0000")
    editor.on_paint_at(45, 12)       # paints cell (2, 0)
    editor.on_fill_at(300, 300)
    editor.on_undo()
    message = editor.on_save("drawing.png")
"""

from __future__ import annotations

import logging
from pathlib import Path

from pixel_art.core.color import Color
from pixel_art.core.config import EditorConfig
from pixel_art.core.grid import Coord, Snapshot
from pixel_art.edit.intents import (
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
from pixel_art.edit.session import EditSession
from pixel_art.io.writer import save_png
from pixel_art.render.image import RgbaBuffer, to_rgba
from pixel_art.render.terminal import render_to_ansi

logger = logging.getLogger(__name__)


class PixelArtEditor:
    """UI event handlers around one EditSession."""

    def __init__(self, config: EditorConfig | None = None) -> None:
        self.session = EditSession(config)

    @property
    def config(self) -> EditorConfig:
        return self.session.config

    # -------------------------------------------------------------------------
    # Coordinate translation
    # -------------------------------------------------------------------------

    def screen_to_cell(self, x: int, y: int) -> Coord | None:
        """Map a canvas-relative device position to a grid cell.

        Returns:
            The cell under (x, y), or None if the point is off the canvas
        """
        size = self.config.canvas_size
        if not (0 <= x < size and 0 <= y < size):
            return None
        return Coord(int(x) // self.config.pixel_size, int(y) // self.config.pixel_size)

    def _at(self, x: int, y: int, intent_type: type[Paint] | type[Fill] | type[UseTool]) -> bool:
        coord = self.screen_to_cell(x, y)
        if coord is None:
            logger.debug("Ignoring click outside canvas at (%s, %s)", x, y)
            return False
        return self._dispatch(intent_type(coord))

    def _dispatch(self, intent: Intent) -> bool:
        return self.session.dispatch(intent)

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def on_select_color(self, color: Color | str) -> None:
        """Select the drawing color (a Color or any string Color.parse accepts)."""
        if isinstance(color, str):
            color = Color.parse(color)
        self._dispatch(SelectColor(color))

    def on_toggle_eraser(self, enabled: bool) -> None:
        self._dispatch(ToggleEraser(enabled))

    def on_select_tool(self, tool: ToolMode) -> None:
        self._dispatch(SelectTool(tool))

    def on_paint_at(self, x: int, y: int) -> bool:
        return self._at(x, y, Paint)

    def on_fill_at(self, x: int, y: int) -> bool:
        return self._at(x, y, Fill)

    def on_click_at(self, x: int, y: int) -> bool:
        """Apply the selected tool at a canvas position."""
        return self._at(x, y, UseTool)

    def on_stroke_start(self) -> None:
        """Mouse button pressed: following paints form one undo step."""
        self.session.begin_stroke()

    def on_stroke_end(self) -> None:
        self.session.end_stroke()

    def on_undo(self) -> bool:
        return self._dispatch(Undo())

    def on_redo(self) -> bool:
        return self._dispatch(Redo())

    # -------------------------------------------------------------------------
    # Read access for collaborators
    # -------------------------------------------------------------------------

    def render_frame(self) -> Snapshot:
        """Current grid contents for the renderer."""
        return self.session.snapshot()

    def export_image(self) -> RgbaBuffer:
        """Full-resolution RGBA pixels of the canvas, without grid overlay."""
        return to_rgba(self.session.snapshot(), self.config.pixel_size)

    def color_history(self) -> tuple[Color, ...]:
        return tuple(self.session.color_history)

    def preview(self) -> str:
        """Current grid as a true-color ANSI string."""
        return render_to_ansi(self.session.snapshot())

    def on_save(self, path: str | Path) -> str:
        """Save the canvas as PNG.

        Returns:
            A message for the user; write failures are reported here
            rather than raised.
        """
        try:
            saved = save_png(self.export_image(), path)
        except OSError as e:
            logger.warning("Could not save canvas to %s: %s", path, e)
            return f"Could not save canvas to {path}: {e}"
        self.session.clear_modified()
        logger.info("Canvas saved as %s", saved)
        return f"Canvas saved as {saved}"
