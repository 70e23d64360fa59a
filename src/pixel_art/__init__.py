"""
pixel-art-editor: the state machine behind a grid pixel-art editor

Paint fixed-size cells on a square canvas, erase, flood-fill regions,
and undo/redo every edit.

Quick Start:
    >>> import pixel_art
    >>> editor = pixel_art.create()
    >>> editor.on_select_color("red")
    >>> editor.on_fill_at(10, 10)
    True
    >>> editor.on_undo()
    True
    >>> print(editor.preview())

Features:
    - Fixed-size grid of RGBA cells with bounds-checked access
    - Snapshot-based undo/redo with a capped depth
    - 4-connected flood fill over grid cells
    - Paint, erase and fill tools with stroke grouping
    - Export to raw RGBA buffers and PNG (Pillow)
    - True-color terminal preview (rich)
"""

__version__ = "0.1.0"

# Core types
from pixel_art.core.color import Color
from pixel_art.core.config import EditorConfig
from pixel_art.core.grid import Coord, OutOfBoundsError, PixelGrid, Snapshot

# Editing
from pixel_art.edit.history import HistoryStack
from pixel_art.edit.flood_fill import FloodFillEngine
from pixel_art.edit.color_history import ColorHistory
from pixel_art.edit.intents import ToolMode
from pixel_art.edit.session import EditSession

# UI surface
from pixel_art.editor import PixelArtEditor


def create(config: EditorConfig | None = None) -> PixelArtEditor:
    """Start a new editor on a blank canvas."""
    return PixelArtEditor(config)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "EditorConfig",
    "Coord",
    "OutOfBoundsError",
    "PixelGrid",
    "Snapshot",
    # Editing
    "HistoryStack",
    "FloodFillEngine",
    "ColorHistory",
    "ToolMode",
    "EditSession",
    # UI surface
    "PixelArtEditor",
    "create",
]
