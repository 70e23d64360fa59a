"""Flood fill over the logical cell grid."""

from __future__ import annotations

import logging

from pixel_art.core.color import Color
from pixel_art.core.grid import Coord, PixelGrid

logger = logging.getLogger(__name__)


class FloodFillEngine:
    """
    Fill a 4-connected region of same-colored cells.

    The region is every cell reachable from the seed through horizontal
    or vertical steps over cells matching the seed's original color.
    Diagonal neighbors are not connected.
    """

    def fill(self, grid: PixelGrid, seed: tuple[int, int], fill_color: Color) -> int:
        """
        Replace the seed's region with fill_color.

        Args:
            grid: Grid to mutate in place
            seed: Cell the fill starts from
            fill_color: Color written to every cell of the region

        Returns:
            Number of cells changed (0 when the seed already has fill_color)

        Raises:
            OutOfBoundsError: If seed is outside the grid
        """
        target = grid.get(seed)
        if target == fill_color:
            return 0

        stack: list[Coord] = [Coord(*seed)]
        filled = 0
        while stack:
            coord = stack.pop()
            # A cell can be queued twice before it is filled
            if grid.get(coord) != target:
                continue
            grid.set(coord, fill_color)
            filled += 1
            for neighbor in grid.neighbors(coord):
                if grid.get(neighbor) == target:
                    stack.append(neighbor)

        logger.debug("Filled %d cells from %s with %s", filled, tuple(seed), fill_color.to_hex())
        return filled
