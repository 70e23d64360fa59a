"""Recently used drawing colors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from pixel_art.core.color import Color
from pixel_art.core.constants import COLOR_HISTORY_SIZE


@dataclass
class ColorHistory:
    """Short list of distinct colors, oldest first.

    A color already present is ignored rather than moved to the end, so
    the list holds the most recently *first-seen* colors.
    """
    colors: list[Color] = field(default_factory=list)
    max_size: int = COLOR_HISTORY_SIZE

    def add(self, color: Color) -> bool:
        """Add a color. Returns False if it was already in the history."""
        if color in self.colors:
            return False
        self.colors.append(color)
        if len(self.colors) > self.max_size:
            self.colors.pop(0)
        return True

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __contains__(self, color: object) -> bool:
        return color in self.colors
