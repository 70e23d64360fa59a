"""I/O module for writing pixel art files."""

from pixel_art.io.writer import save_png, to_image

__all__ = ["save_png", "to_image"]
