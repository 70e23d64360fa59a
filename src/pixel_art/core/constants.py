"""Shared constants for the pixel canvas."""

# Canvas geometry (device pixels)
CANVAS_SIZE = 500
PIXEL_SIZE = 20

# Cells per side
GRID_SIZE = CANVAS_SIZE // PIXEL_SIZE

# History limits
HISTORY_DEPTH = 100
COLOR_HISTORY_SIZE = 5

# Half-block characters for terminal preview
UPPER_HALF = "▀"  # FG = top cell, BG = bottom cell
LOWER_HALF = "▄"  # FG = bottom cell, BG = top cell

# Named colors accepted by Color.parse
NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "magenta": (255, 0, 255),
    "cyan": (0, 255, 255),
    "yellow": (255, 255, 0),
}
