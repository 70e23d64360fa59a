"""EditorConfig - canvas geometry and session limits."""

from __future__ import annotations

from dataclasses import dataclass

from pixel_art.core.color import Color
from pixel_art.core.constants import (
    CANVAS_SIZE,
    COLOR_HISTORY_SIZE,
    HISTORY_DEPTH,
    PIXEL_SIZE,
)


@dataclass(frozen=True)
class EditorConfig:
    """Settings fixed for the lifetime of an editing session.

    Attributes:
        canvas_size: Side of the square canvas in device pixels
        pixel_size: Side of one cell in device pixels (the brush size)
        background: Color of new and erased cells
        initial_color: Drawing color selected at session start
        history_depth: Maximum undo steps kept (None = unbounded)
        color_history_size: Maximum entries in the color history
    """
    canvas_size: int = CANVAS_SIZE
    pixel_size: int = PIXEL_SIZE
    background: Color = Color.WHITE
    initial_color: Color = Color.BLACK
    history_depth: int | None = HISTORY_DEPTH
    color_history_size: int = COLOR_HISTORY_SIZE

    def __post_init__(self) -> None:
        if self.canvas_size <= 0 or self.pixel_size <= 0:
            raise ValueError(
                f"Sizes must be positive, got canvas={self.canvas_size} pixel={self.pixel_size}"
            )
        if self.canvas_size % self.pixel_size:
            raise ValueError(
                f"Canvas size {self.canvas_size} is not a multiple of pixel size {self.pixel_size}"
            )
        if self.history_depth is not None and self.history_depth <= 0:
            raise ValueError(f"history_depth must be positive or None, got {self.history_depth}")
        if self.color_history_size <= 0:
            raise ValueError(f"color_history_size must be positive, got {self.color_history_size}")

    @property
    def grid_size(self) -> int:
        """Cells per side of the grid."""
        return self.canvas_size // self.pixel_size

    @classmethod
    def default(cls) -> EditorConfig:
        """The standard 500px canvas with 20px cells."""
        return cls()

    @classmethod
    def small(cls, cells: int = 4, pixel_size: int = PIXEL_SIZE) -> EditorConfig:
        """A tiny canvas of ``cells`` x ``cells``, handy for tests and previews."""
        return cls(canvas_size=cells * pixel_size, pixel_size=pixel_size)
