"""Shared fixtures: a 4x4 canvas of 20px cells, initially all white."""

import pytest

from pixel_art.core.color import Color
from pixel_art.core.config import EditorConfig
from pixel_art.core.grid import PixelGrid
from pixel_art.edit.session import EditSession
from pixel_art.editor import PixelArtEditor


@pytest.fixture
def small_config() -> EditorConfig:
    return EditorConfig.small(cells=4, pixel_size=20)


@pytest.fixture
def grid() -> PixelGrid:
    return PixelGrid(4, 4, Color.WHITE)


@pytest.fixture
def session(small_config: EditorConfig) -> EditSession:
    return EditSession(small_config)


@pytest.fixture
def editor(small_config: EditorConfig) -> PixelArtEditor:
    return PixelArtEditor(small_config)


PALETTE = {
    ".": Color.WHITE,
    "#": Color.BLACK,
    "r": Color.RED,
    "g": Color.GREEN,
    "b": Color.BLUE,
}


def grid_from_rows(rows: list[str]) -> PixelGrid:
    """Build a grid from strings, one PALETTE character per cell."""
    grid = PixelGrid(len(rows[0]), len(rows), Color.WHITE)
    for y, line in enumerate(rows):
        for x, ch in enumerate(line):
            grid.set((x, y), PALETTE[ch])
    return grid


def rows_of(grid: PixelGrid) -> list[str]:
    """Inverse of grid_from_rows."""
    symbols = {color: ch for ch, color in PALETTE.items()}
    lines = [[""] * grid.width for _ in range(grid.height)]
    for (x, y), color in grid.cells():
        lines[y][x] = symbols[color]
    return ["".join(line) for line in lines]


@pytest.fixture
def make_grid():
    """Factory fixture: make_grid(["..#", ...]) -> PixelGrid."""
    return grid_from_rows


@pytest.fixture
def grid_rows():
    """Factory fixture: grid_rows(grid) -> ["..#", ...]."""
    return rows_of
