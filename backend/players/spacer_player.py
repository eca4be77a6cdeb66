"""
Spacer player - shortest path to the food that keeps one cell of space
around the route.
"""

import logging
from collections import deque
from typing import Optional

from domain.direction import Direction
from domain.game_state import GameState
from domain.position import Position
from pathfinding import find_path
from .base import Player

logger = logging.getLogger(__name__)


class SpacerPlayer(Player):
    """
    Takes the shortest path to the food that keeps at least one cell of
    separation from the board edges and from other snake parts. If no such
    path exists, takes the plain shortest path. If there is no path at all,
    makes random safe moves.
    """

    name = "SpacerBot"

    def initialize(self, start: Position) -> None:
        super().initialize(start)
        self.body_parts = deque([start])

    def get_move(self, game_state: GameState) -> Direction:
        food = game_state.food
        path = None
        if food is not None:
            path = find_path(
                self.head, food,
                lambda pos: self._has_clearance(game_state, pos),
                game_state.step,
            )
            if path is None:
                logger.debug("%s: no spaced path to %s, relaxing", self.name, food)
                path = find_path(self.head, food, game_state.is_safe, game_state.step)

        direction = path.first_move if path is not None else self.random_move(game_state)

        if self._advance(game_state, direction) is None:
            return direction

        # Remove the tail if this move won't eat the food
        if self.head != food:
            self.body_parts.popleft()
        self.body_parts.append(self.head)

        return direction

    def _has_clearance(self, game_state: GameState, pos: Optional[Position]) -> bool:
        """
        True if pos is safe and all eight cells around it are safe as well.

        The two most recent head positions are allowed next to the path since
        the snake is moving away from them.
        """
        if not game_state.is_safe(pos):
            return False

        recent = {self.body_parts[-1]}
        if len(self.body_parts) >= 2:
            recent.add(self.body_parts[-2])

        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                neighbor = Position(pos.x + dx, pos.y + dy)
                if neighbor in recent:
                    continue
                if not game_state.is_safe(neighbor):
                    return False

        return True
