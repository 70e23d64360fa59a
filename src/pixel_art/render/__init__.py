"""Renderers for outputting pixel art to buffers and terminals."""

from pixel_art.render.image import RgbaBuffer, to_rgba
from pixel_art.render.terminal import GridView, render_to_ansi

__all__ = ["RgbaBuffer", "to_rgba", "GridView", "render_to_ansi"]
