"""Color representation for pixel art."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from pixel_art.core.constants import NAMED_COLORS


_RGB_TRIPLE = re.compile(r'(\d+)[,\s]+(\d+)[,\s]+(\d+)$')


@dataclass(frozen=True, slots=True)
class Color:
    """
    An RGBA color value.

    Two colors are equal iff all four channels match. Colors are
    immutable, so they can be stored in snapshots and shared freely.
    """
    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b, self.a)):
            raise ValueError(
                f"RGBA values must be 0-255, got ({self.r}, {self.g}, {self.b}, {self.a})"
            )

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create an opaque Color from RGB values."""
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Create a Color from #RGB, #RRGGBB or #RRGGBBAA."""
        digits = text.strip().lstrip("#")
        if len(digits) == 3:
            # Short form: F0F -> FF00FF
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Cannot parse hex color: {text!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Cannot parse hex color: {text!r}") from None
        return cls(*channels)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse a color string.

        Accepts:
            - Named colors: "black", "white", "red", "green", "blue",
              "magenta", "cyan", "yellow"
            - Hex colors: "#FF00FF", "FF00FF", "#F0F", "#FF00FF80"
            - RGB triples: "255,0,255" or "255 0 255"

        Raises:
            ValueError: If the string is not a recognizable color
        """
        value = text.strip().lower()
        if value in NAMED_COLORS:
            return cls(*NAMED_COLORS[value])

        match = _RGB_TRIPLE.match(value)
        if match:
            return cls(*(int(group) for group in match.groups()))

        return cls.from_hex(value)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def transparent(self) -> bool:
        return self.a == 0

    def to_hex(self) -> str:
        """Return #rrggbb, or #rrggbbaa for colors that are not opaque."""
        if self.a == 255:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


# Initialize class-level color constants
Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)
