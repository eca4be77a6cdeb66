"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Optional

from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'self', 'max_moves'
        death_move: The move number on which the snake died
    """

    def __init__(self, positions: List[Position]):
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_move: Optional[int] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the oldest segment (last element)."""
        return self.positions[-1]

    def __len__(self):
        return len(self.positions)
