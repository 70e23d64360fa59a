"""Edit module - history, flood fill and the editing session."""

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
from pixel_art.edit.session import EditSession

__all__ = [
    "ColorHistory",
    "FloodFillEngine",
    "HistoryStack",
    "EditSession",
    "ToolMode",
    "Intent",
    "Paint",
    "Erase",
    "Fill",
    "UseTool",
    "Undo",
    "Redo",
    "SelectColor",
    "ToggleEraser",
    "SelectTool",
]
