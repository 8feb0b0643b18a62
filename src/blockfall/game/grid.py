from __future__ import annotations

from typing import List

import numpy as np

from .pieces import Shape


class GameGrid:
    """Fixed-size well of settled cells.

    The grid uses 0 for empty cells and positive integers for occupied ones.
    The integer is the identity of the piece kind that left the cell there.
    Row 0 is the top of the well.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def collides(self, shape: Shape, x: int, y: int) -> bool:
        """True if `shape` with its top-left at (x, y) hits a wall, the floor or a settled cell.

        Cells above the top row only take part in the wall and floor checks,
        so a piece may hang partly above the well while spawning.
        """
        h, w = shape.shape
        for dy in range(h):
            for dx in range(w):
                if not shape[dy, dx]:
                    continue
                bx, by = x + dx, y + dy
                if bx < 0 or bx >= self.width or by >= self.height:
                    return True
                if by >= 0 and self.grid[by, bx] != 0:
                    return True
        return False

    def merge(self, shape: Shape, x: int, y: int, identity: int) -> None:
        """Write `identity` into every cell covered by `shape`.

        Cells that land on negative rows are dropped.
        """
        h, w = shape.shape
        for dy in range(h):
            for dx in range(w):
                if not shape[dy, dx]:
                    continue
                bx, by = x + dx, y + dy
                if by < 0:
                    continue
                assert 0 <= bx < self.width and by < self.height, (
                    f"merge outside the well at ({bx}, {by})"
                )
                self.grid[by, bx] = identity

    def is_row_complete(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != 0))

    def completed_rows(self) -> List[int]:
        return [int(r) for r in np.where(np.all(self.grid != 0, axis=1))[0]]

    def clear_completed_rows(self) -> int:
        """Remove every completed row and refill from the top with empty rows.

        Remaining rows keep their relative order. Returns the number of rows cleared.
        """
        full_rows = self.completed_rows()
        if not full_rows:
            return 0
        num = len(full_rows)
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        assert self.grid.shape == (self.height, self.width)
        return num

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
