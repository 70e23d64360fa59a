"""
Undo and redo management for the pixel grid.

History is snapshot based: every edit, whatever its kind, is reverted by
restoring a full copy of the grid taken before the edit.
"""

from __future__ import annotations

import logging
from collections import deque

from pixel_art.core.constants import HISTORY_DEPTH
from pixel_art.core.grid import PixelGrid, Snapshot

logger = logging.getLogger(__name__)


class HistoryStack:
    """Bounded undo/redo stacks of grid snapshots.

    Both stacks keep the most recent entry last. Recording a new edit
    always invalidates the redo stack.
    """

    def __init__(self, max_depth: int | None = HISTORY_DEPTH):
        self.max_depth = max_depth
        self._undo: deque[Snapshot] = deque(maxlen=max_depth)
        self._redo: deque[Snapshot] = deque(maxlen=max_depth)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record_before_edit(self, grid: PixelGrid) -> None:
        """Capture the grid before it is mutated. Call once per edit."""
        self._undo.append(grid.snapshot())
        self._redo.clear()

    def undo(self, grid: PixelGrid) -> bool:
        """Revert the most recent edit.

        The live grid is saved onto the redo stack, then replaced by the
        snapshot recorded before that edit.

        Returns:
            False if there was nothing to undo
        """
        if not self._undo:
            return False
        previous = self._undo.pop()
        self._redo.append(grid.snapshot())
        grid.restore(previous)
        logger.debug("Undo: %d undo / %d redo entries left", len(self._undo), len(self._redo))
        return True

    def redo(self, grid: PixelGrid) -> bool:
        """Re-apply the most recently undone edit.

        Returns:
            False if there was nothing to redo
        """
        if not self._redo:
            return False
        following = self._redo.pop()
        self._undo.append(grid.snapshot())
        grid.restore(following)
        logger.debug("Redo: %d undo / %d redo entries left", len(self._undo), len(self._redo))
        return True

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
