"""
Directions a snake can move in.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) for one step. y grows downward."""
        return _DELTAS[self]

    def opposite(self) -> "Direction":
        """Return the direction opposite of this one."""
        return _OPPOSITES[self]

    def __str__(self) -> str:
        return self.value


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}
