"""
Base player interface for the game engine.
"""

import logging
import random
from typing import Optional

from domain.direction import Direction
from domain.game_state import GameState
from domain.position import Position

logger = logging.getLogger(__name__)


class Player:
    """
    Base class/interface for bot logic.

    Each bot is reset with initialize() at the start of a game and then asked
    for one move per tick. Bots track their own head by applying the move
    they return; they never touch the simulator's state.
    """

    name = "Player"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.head: Optional[Position] = None

    def initialize(self, start: Position) -> None:
        """
        Reset bookkeeping for a new game.

        Args:
            start: Starting cell of the snake's head
        """
        self.head = start

    def get_move(self, game_state: GameState) -> Direction:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            The Direction to move in this tick.
        """
        raise NotImplementedError

    def random_move(self, game_state: GameState) -> Direction:
        """
        Pick a random direction that does not leave the board or hit the snake.

        If every direction is blocked, returns UP (we'll die anyway).
        """
        directions = list(Direction)
        self.rng.shuffle(directions)

        for direction in directions:
            if game_state.is_safe(game_state.step(self.head, direction)):
                return direction

        logger.debug("%s is boxed in at %s, defaulting to UP", self.name, self.head)
        return Direction.UP

    def _advance(self, game_state: GameState, direction: Direction) -> Optional[Position]:
        """Move the tracked head one step; None if it left the board."""
        self.head = game_state.step(self.head, direction)
        return self.head

    def __str__(self):
        return self.name
