"""
Grid entity - the fixed-size cell store the game is played on.

Cells are kept in a numpy array indexed [y, x]. Bounds checks are the
caller's responsibility except for step(), which returns None instead of
leaving the board.
"""

from typing import List, Optional

import numpy as np

from .constants import CellValue
from .direction import Direction
from .position import Position


def step(pos: Position, direction: Direction, width: int, height: int) -> Optional[Position]:
    """
    Return the cell adjacent to pos in the given direction.

    Args:
        pos: Starting cell
        direction: Direction to move in
        width, height: Board dimensions

    Returns:
        The neighbouring Position, or None if it lies outside the board.
    """
    dx, dy = direction.delta
    x, y = pos[0] + dx, pos[1] + dy
    if x < 0 or x >= width or y < 0 or y >= height:
        return None
    return Position(x, y)


class Grid:
    """
    Fixed-size 2D grid of CellValue.

    Attributes:
        width, height: board dimensions, fixed at construction
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self._cells = np.full((height, width), int(CellValue.EMPTY), dtype=np.int8)

    def is_out_of_bounds(self, pos: Optional[Position]) -> bool:
        if pos is None:
            return True
        x, y = pos
        return x < 0 or x >= self.width or y < 0 or y >= self.height

    def get(self, pos: Position) -> CellValue:
        x, y = pos
        return CellValue(int(self._cells[y, x]))

    def set(self, pos: Position, value: CellValue) -> None:
        x, y = pos
        self._cells[y, x] = int(value)

    def fill(self, value: CellValue) -> None:
        """Reset every cell to value."""
        self._cells.fill(int(value))

    def step(self, pos: Position, direction: Direction) -> Optional[Position]:
        return step(pos, direction, self.width, self.height)

    def count(self, value: CellValue) -> int:
        return int(np.count_nonzero(self._cells == int(value)))

    def empty_cells(self) -> List[Position]:
        """All EMPTY cells in row-major order."""
        return [
            Position(int(x), int(y))
            for y, x in np.argwhere(self._cells == int(CellValue.EMPTY))
        ]

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the cell array for handing to bots."""
        cells = self._cells.copy()
        cells.flags.writeable = False
        return cells

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}, snake={self.count(CellValue.SNAKE)}>"
