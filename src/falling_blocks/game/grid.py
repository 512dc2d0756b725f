from __future__ import annotations

import logging
from typing import Iterable, Tuple

import numpy as np

from .errors import LockOutOfBoundsError


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class OccupancyGrid:
    """Settled cells of the playing field.

    Row 0 is the bottom row. The array is ``buffer_rows`` taller than the
    visible field so a piece can settle above the skyline; any settled cell in
    those extra rows means the game is lost.

    The grid uses 0 for empty cells and the ``TetrominoType`` value of the
    piece that settled there otherwise, so settled cells keep their colour.
    """

    def __init__(self, width: int, visible_height: int, buffer_rows: int = 4) -> None:
        self.width = int(width)
        self.visible_height = int(visible_height)
        self.height = self.visible_height + int(buffer_rows)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def in_bounds(self, x: int, y: int) -> bool:
        # Pieces may move above the grid; they lose only when they settle there.
        return 0 <= x < self.width and y >= 0

    def is_occupied(self, x: int, y: int) -> bool:
        return y < self.visible_height and self.grid[y, x] != 0

    def can_fit(self, cells: Iterable[Coordinate]) -> bool:
        return all(self.in_bounds(x, y) and not self.is_occupied(x, y) for x, y in cells)

    def lock(self, cells: Iterable[Coordinate], value: int = 1) -> None:
        cells = list(cells)
        for x, y in cells:
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise LockOutOfBoundsError(x, y, self.width, self.height)
        for x, y in cells:
            self.grid[y, x] = value
        logger.debug("locked %s", cells)

    def full_rows(self) -> np.ndarray:
        visible = self.grid[: self.visible_height]
        return np.flatnonzero(np.all(visible != 0, axis=1))

    def clear_full_rows(self) -> int:
        """Remove every full visible row and drop the rows above into place.

        Returns the number of rows removed.
        """
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        kept = np.delete(self.grid, full_rows, axis=0)
        self.grid = np.vstack((kept, np.zeros((num, self.width), dtype=np.int8)))
        return num

    def is_loss(self) -> bool:
        return bool(np.any(self.grid[self.visible_height :] != 0))

    def visible_state(self) -> np.ndarray:
        """Copy of the visible rows, top row first, ready for drawing."""
        return np.flipud(self.grid[: self.visible_height]).copy()
