"""
Random player implementation - picks random safe moves.
"""

from domain.direction import Direction
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Moves randomly without colliding with itself or leaving the board.
    """

    name = "RandomBot"

    def get_move(self, game_state: GameState) -> Direction:
        direction = self.random_move(game_state)
        self._advance(game_state, direction)
        return direction
