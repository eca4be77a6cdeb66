"""
Position value type.
"""

from typing import NamedTuple


class Position(NamedTuple):
    """An (x, y) cell coordinate. Compares and hashes by coordinate."""
    x: int
    y: int

    def manhattan(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)
