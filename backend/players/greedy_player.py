"""
Greedy player - shortest path to the food.
"""

import logging

from domain.direction import Direction
from domain.game_state import GameState
from pathfinding import find_path
from .base import Player

logger = logging.getLogger(__name__)


class GreedyPlayer(Player):
    """
    Takes the shortest path to the food. If no path exists, makes random
    moves that don't collide with itself or leave the board.
    """

    name = "GreedyBot"

    def get_move(self, game_state: GameState) -> Direction:
        path = None
        if game_state.food is not None:
            path = find_path(self.head, game_state.food, game_state.is_safe, game_state.step)

        if path is None:
            logger.debug("%s: no path to food from %s", self.name, self.head)
            direction = self.random_move(game_state)
        else:
            direction = path.first_move

        self._advance(game_state, direction)
        return direction
