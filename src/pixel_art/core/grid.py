"""PixelGrid - the authoritative 2D grid of cell colors.

The grid is addressed in cell coordinates, not device pixels. Each cell
is one brush-sized square of the canvas; translating screen positions
into cells is the caller's job (see ``pixel_art.editor``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from pixel_art.core.color import Color


# 4-connected neighborhood (up, down, left, right)
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class OutOfBoundsError(IndexError):
    """A cell coordinate lies outside the grid."""

    def __init__(self, coord: tuple[int, int], width: int, height: int):
        self.coord = coord
        self.width = width
        self.height = height
        super().__init__(f"Cell {tuple(coord)} out of bounds ({width}x{height})")


class Coord(NamedTuple):
    """A cell coordinate (column, row), 0-indexed."""
    col: int
    row: int


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable copy of a grid's cell colors at one instant.

    Rows are tuples of immutable Colors, so a snapshot shares nothing
    mutable with the grid it was taken from.
    """
    width: int
    height: int
    rows: tuple[tuple[Color, ...], ...]

    def get(self, coord: tuple[int, int]) -> Color:
        col, row = coord
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise OutOfBoundsError(coord, self.width, self.height)
        return self.rows[row][col]

    def cells(self) -> Iterator[tuple[Coord, Color]]:
        """Iterate over all cells as (coord, color) tuples."""
        for row, colors in enumerate(self.rows):
            for col, color in enumerate(colors):
                yield Coord(col, row), color


class PixelGrid:
    """
    A fixed-size grid of Colors.

    Every cell holds a color at all times; new grids start filled with
    the background color. Dimensions never change after construction.
    """

    def __init__(self, width: int, height: int, background: Color = Color.WHITE):
        """
        Initialize a grid filled with the background color.

        Args:
            width: Width in cells
            height: Height in cells
            background: Initial color of every cell
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._background = background
        self._cells: list[list[Color]] = [
            [background for _ in range(width)]
            for _ in range(height)
        ]

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot, background: Color = Color.WHITE) -> PixelGrid:
        """Create a new grid holding a snapshot's contents."""
        grid = cls(snapshot.width, snapshot.height, background)
        grid.restore(snapshot)
        return grid

    @property
    def width(self) -> int:
        """Width in cells."""
        return self._width

    @property
    def height(self) -> int:
        """Height in cells."""
        return self._height

    @property
    def background(self) -> Color:
        """Color used for new and erased cells."""
        return self._background

    def in_bounds(self, coord: tuple[int, int]) -> bool:
        col, row = coord
        return 0 <= col < self._width and 0 <= row < self._height

    def _check(self, coord: tuple[int, int]) -> None:
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self._width, self._height)

    def get(self, coord: tuple[int, int]) -> Color:
        """
        Get the color of a cell.

        Raises:
            OutOfBoundsError: If coord is outside the grid
        """
        self._check(coord)
        col, row = coord
        return self._cells[row][col]

    def set(self, coord: tuple[int, int], color: Color) -> None:
        """
        Overwrite the color of a cell.

        Raises:
            OutOfBoundsError: If coord is outside the grid
        """
        self._check(coord)
        col, row = coord
        self._cells[row][col] = color

    def fill_rect(self, coord: tuple[int, int], color: Color) -> None:
        """Stamp one brush-sized cell.

        The brush covers exactly one grid-aligned cell, so this paints a
        single cell; there is no partial-cell painting.
        """
        self.set(coord, color)

    def neighbors(self, coord: tuple[int, int]) -> Iterator[Coord]:
        """Yield the in-bounds 4-connected neighbors of a cell."""
        col, row = coord
        for dc, dr in NEIGHBOR_OFFSETS:
            c, r = col + dc, row + dr
            if 0 <= c < self._width and 0 <= r < self._height:
                yield Coord(c, r)

    def cells(self) -> Iterator[tuple[Coord, Color]]:
        """Iterate over all cells as (coord, color) tuples."""
        for row, colors in enumerate(self._cells):
            for col, color in enumerate(colors):
                yield Coord(col, row), color

    def snapshot(self) -> Snapshot:
        """Return an independent, immutable copy of the whole grid."""
        return Snapshot(
            width=self._width,
            height=self._height,
            rows=tuple(tuple(row) for row in self._cells),
        )

    def restore(self, snapshot: Snapshot) -> None:
        """
        Replace the grid contents with a snapshot's contents.

        Raises:
            ValueError: If the snapshot dimensions differ from the grid's
        """
        if (snapshot.width, snapshot.height) != (self._width, self._height):
            raise ValueError(
                f"Snapshot is {snapshot.width}x{snapshot.height}, "
                f"grid is {self._width}x{self._height}"
            )
        self._cells = [list(row) for row in snapshot.rows]
