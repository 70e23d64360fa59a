"""Save exported pixel art as PNG."""

from pathlib import Path

from PIL import Image

from pixel_art.render.image import RgbaBuffer


def to_image(buffer: RgbaBuffer) -> Image.Image:
    """Wrap an RGBA buffer in a Pillow image."""
    return Image.frombytes("RGBA", (buffer.width, buffer.height), buffer.data)


def save_png(buffer: RgbaBuffer, path: str | Path) -> Path:
    """
    Write an RGBA buffer to disk as a PNG file.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    to_image(buffer).save(path, format="PNG")
    return path
