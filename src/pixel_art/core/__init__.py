"""Core data structures for pixel art representation."""

from pixel_art.core.color import Color
from pixel_art.core.config import EditorConfig
from pixel_art.core.grid import Coord, OutOfBoundsError, PixelGrid, Snapshot

__all__ = ["Color", "EditorConfig", "Coord", "OutOfBoundsError", "PixelGrid", "Snapshot"]
