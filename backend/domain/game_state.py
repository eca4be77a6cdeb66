"""
GameState entity - a read-only snapshot of the board handed to bots each tick.
"""

from typing import Optional

import numpy as np

from .constants import CellValue
from .direction import Direction
from .grid import step
from .position import Position


class GameState:
    """
    A snapshot of the game at a specific tick.

    Bots only ever see this view; they never get references to the
    simulator's grid or snake.

    Attributes:
        cells: non-writeable array of CellValue indexed [y, x]
        food: position of the food, or None once the board is full
        move_count: moves applied so far
        score: food eaten so far
        width, height: board dimensions
    """

    def __init__(
        self,
        cells: np.ndarray,
        food: Optional[Position],
        move_count: int = 0,
        score: int = 0
    ):
        self.cells = cells
        self.food = food
        self.move_count = move_count
        self.score = score
        self.height, self.width = cells.shape

    def is_out_of_bounds(self, pos: Optional[Position]) -> bool:
        if pos is None:
            return True
        x, y = pos
        return x < 0 or x >= self.width or y < 0 or y >= self.height

    def cell_value(self, pos: Position) -> CellValue:
        x, y = pos
        return CellValue(int(self.cells[y, x]))

    def is_safe(self, pos: Optional[Position]) -> bool:
        """True if pos is on the board and not occupied by the snake."""
        if self.is_out_of_bounds(pos):
            return False
        return self.cell_value(pos) != CellValue.SNAKE

    def step(self, pos: Position, direction: Direction) -> Optional[Position]:
        return step(pos, direction, self.width, self.height)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake
        (0,0) is the top left, x-axis labels at the bottom
        """
        symbols = {CellValue.EMPTY: '.', CellValue.FOOD: 'F', CellValue.SNAKE: 'S'}
        result = []
        for y in range(self.height):
            row = [symbols[CellValue(int(v))] for v in self.cells[y]]
            result.append(f"{y:2d} {' '.join(row)}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState move={self.move_count}, food={self.food}, "
            f"size={self.width}x{self.height}, score={self.score}>"
        )
