"""
Brute player - travels the same Hamiltonian cycle forever.
"""

from domain.direction import Direction
from domain.game_state import GameState
from .base import Player

# Moves in a transposed frame mapped back onto the board
_TRANSPOSED = {
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.LEFT,
}


def cycle_move(x: int, y: int, width: int, height: int) -> Direction:
    """
    Next move of the boustrophedon cycle for a head at (x, y).

    Column 0 is the return lane back up to (0, 0); the remaining columns are
    swept right on even rows and left on odd rows. Closes into a cycle when
    height is even.
    """
    if x == 0:
        return Direction.RIGHT if y == 0 else Direction.UP

    if y % 2 == 0:
        return Direction.DOWN if x == width - 1 else Direction.RIGHT

    if x == 1:
        return Direction.LEFT if y == height - 1 else Direction.DOWN
    return Direction.LEFT


class BrutePlayer(Player):
    """
    Sweeps the whole board on a fixed cycle, so it never collides once the
    body is on the cycle. Guaranteed to fill the board when one of its
    dimensions is even; odd by odd boards have no such cycle.
    """

    name = "BruteBot"

    def get_move(self, game_state: GameState) -> Direction:
        x, y = self.head
        width, height = game_state.width, game_state.height

        if height % 2 == 1 and width % 2 == 0:
            # Sweep columns instead of rows
            direction = _TRANSPOSED[cycle_move(y, x, height, width)]
        else:
            direction = cycle_move(x, y, width, height)

        self._advance(game_state, direction)
        return direction
