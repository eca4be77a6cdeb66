"""
GreedyTail player - shortest path to the food, chasing its own tail when
the food is walled off.
"""

import logging
from collections import deque
from typing import Optional

from domain.direction import Direction
from domain.game_state import GameState
from domain.position import Position
from pathfinding import Path, find_path, farthest_cell
from .base import Player

logger = logging.getLogger(__name__)


class GreedyTailPlayer(Player):
    """
    Takes the shortest path to the food. If no path exists, moves towards the
    oldest body part that can be reached. If the snake would reach that part
    before it vacates its cell, the snake stalls for time by moving towards
    the cell that is farthest away from its head.

    Attributes:
        body_parts: deque of Position, oldest tail at the left, head at the right
        ages: Position -> moves left until that body part disappears
        oldest_found_part: oldest body part bordering the last search
    """

    name = "GreedyTailBot"

    def initialize(self, start: Position) -> None:
        super().initialize(start)
        self.body_parts = deque([start])
        self.ages = {start: 0}
        self.oldest_found_part = start

    def get_move(self, game_state: GameState) -> Direction:
        path = None
        if game_state.food is not None:
            path = self._pathfind_to(game_state, game_state.food)

        if path is not None:
            direction = path.first_move
        else:
            direction = self._chase_tail(game_state)

        if self._advance(game_state, direction) is not None:
            self._update_body(game_state.food)
        return direction

    def _pathfind_to(self, game_state: GameState, target: Position) -> Optional[Path]:
        """
        Shortest path to target, which may itself be a body part. Records the
        oldest body part bordering the searched area as a side effect.
        """
        self.oldest_found_part = self.head
        return find_path(
            self.head,
            target,
            game_state.is_safe,
            game_state.step,
            allow_target=True,
            on_blocked=self._track_oldest,
        )

    def _track_oldest(self, pos: Position) -> None:
        age = self.ages.get(pos)
        if age is not None and age < self.ages[self.oldest_found_part]:
            self.oldest_found_part = pos

    def _chase_tail(self, game_state: GameState) -> Direction:
        oldest = self.oldest_found_part
        age = self.ages[oldest]
        tail_path = self._pathfind_to(game_state, oldest)

        if tail_path is not None and tail_path.length >= age:
            return tail_path.first_move

        # Arriving too early would run into the part before it moves away
        stall_target = farthest_cell(self.head, game_state.is_safe, game_state.step)
        stall_path = find_path(self.head, stall_target, game_state.is_safe, game_state.step)
        if stall_path is not None:
            logger.debug(
                "%s: stalling towards %s, oldest part %s has age %d",
                self.name, stall_target, oldest, age,
            )
            return stall_path.first_move

        if tail_path is not None and tail_path.length == 1:
            return tail_path.first_move

        return self.random_move(game_state)

    def _update_body(self, food: Optional[Position]) -> None:
        # Eating keeps the tail where it is, so nothing ages
        if self.head != food:
            tail = self.body_parts.popleft()
            self.ages.pop(tail, None)
            for part in self.ages:
                self.ages[part] -= 1

        self.body_parts.append(self.head)
        self.ages[self.head] = len(self.body_parts) - 1
