"""Intents - discrete user actions routed to an EditSession."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pixel_art.core.color import Color
from pixel_art.core.grid import Coord


class ToolMode(Enum):
    """Tool applied by a click on the canvas."""
    PAINT = auto()  # Write the current color to one cell
    ERASE = auto()  # Write the background color to one cell
    FILL = auto()   # Flood the clicked region with the current color


@dataclass(frozen=True)
class Paint:
    """Paint one cell (writes the background while the eraser is on)."""
    coord: Coord


@dataclass(frozen=True)
class Erase:
    coord: Coord


@dataclass(frozen=True)
class Fill:
    coord: Coord


@dataclass(frozen=True)
class UseTool:
    """Apply whichever tool is currently selected."""
    coord: Coord


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class SelectColor:
    color: Color


@dataclass(frozen=True)
class ToggleEraser:
    enabled: bool


@dataclass(frozen=True)
class SelectTool:
    tool: ToolMode


Intent = Paint | Erase | Fill | UseTool | Undo | Redo | SelectColor | ToggleEraser | SelectTool
