"""Render a grid snapshot to a raw RGBA pixel buffer."""

from __future__ import annotations

from dataclasses import dataclass

from pixel_art.core.grid import Snapshot


@dataclass(frozen=True)
class RgbaBuffer:
    """
    Raw 8-bit RGBA pixels, row-major, top row first.

    ``data`` holds ``width * height * 4`` bytes, ready for an image
    encoder (e.g. ``PIL.Image.frombytes("RGBA", (width, height), data)``).
    """
    width: int
    height: int
    data: bytes

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Get the RGBA value of one device pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) out of bounds ({self.width}x{self.height})")
        offset = (y * self.width + x) * 4
        r, g, b, a = self.data[offset:offset + 4]
        return (r, g, b, a)


def to_rgba(snapshot: Snapshot, pixel_size: int) -> RgbaBuffer:
    """
    Expand each cell of a snapshot to a pixel_size square.

    Args:
        snapshot: Grid contents to export
        pixel_size: Side of one cell in device pixels

    Returns:
        Buffer of (width * pixel_size) x (height * pixel_size) pixels
    """
    if pixel_size <= 0:
        raise ValueError(f"pixel_size must be positive, got {pixel_size}")

    lines: list[bytes] = []
    for colors in snapshot.rows:
        line = b"".join(bytes(color.rgba) * pixel_size for color in colors)
        lines.append(line * pixel_size)

    return RgbaBuffer(
        width=snapshot.width * pixel_size,
        height=snapshot.height * pixel_size,
        data=b"".join(lines),
    )
