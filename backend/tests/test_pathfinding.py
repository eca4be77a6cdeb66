"""
Tests for the A* planner and the farthest-cell search.
"""

import pytest
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Direction, Position, step
from pathfinding import find_path, farthest_cell, heuristic


def make_step(width, height):
    return lambda pos, d: step(pos, d, width, height)


def blocked_by(cells):
    blocked = set(cells)
    return lambda pos: pos not in blocked


class TestHeuristic:
    """Tests for the weighted Manhattan heuristic."""

    def test_weighted_manhattan(self):
        assert heuristic(Position(0, 0), Position(3, 4)) == pytest.approx(7.007)

    def test_zero_at_target(self):
        assert heuristic(Position(2, 2), Position(2, 2)) == 0


class TestFindPath:
    """Tests for find_path()."""

    def test_replanning_reaches_target_in_manhattan_steps(self):
        """On an empty board every pair is reached in exactly Manhattan distance moves."""
        width, height = 6, 5
        grid_step = make_step(width, height)
        cells = [Position(x, y) for x in range(width) for y in range(height)]

        for source in cells:
            for target in cells:
                if source == target:
                    continue
                pos = source
                moves = 0
                while pos != target:
                    path = find_path(pos, target, lambda p: True, grid_step)
                    assert path.length == pos.manhattan(target)
                    pos = grid_step(pos, path.first_move)
                    moves += 1
                assert moves == source.manhattan(target)

    def test_returns_first_move_not_last(self):
        """With (1,0) blocked the path goes down, across and back up."""
        path = find_path(
            Position(0, 0), Position(2, 0),
            blocked_by([Position(1, 0)]), make_step(5, 5),
        )
        assert path.first_move == Direction.DOWN
        assert path.length == 4

    def test_straight_line(self):
        path = find_path(Position(5, 5), Position(5, 8), lambda p: True, make_step(20, 20))
        assert path.first_move == Direction.DOWN
        assert path.length == 3

    def test_unreachable_target_returns_none(self):
        """Target walled into the corner cannot be reached."""
        is_safe = Mock(side_effect=blocked_by([Position(3, 4), Position(4, 3)]))
        path = find_path(Position(0, 0), Position(4, 4), is_safe, make_step(5, 5))

        assert path is None
        # Each cell is expanded at most once, so at most four checks per cell
        assert is_safe.call_count <= 4 * 25

    def test_isolated_source_returns_none(self):
        walls = [Position(1, 0), Position(0, 1)]
        assert find_path(Position(0, 0), Position(3, 3), blocked_by(walls), make_step(4, 4)) is None

    def test_source_equals_target_returns_none(self):
        assert find_path(Position(2, 2), Position(2, 2), lambda p: True, make_step(4, 4)) is None

    def test_unsafe_target_needs_exemption(self):
        target = Position(3, 0)
        is_safe = blocked_by([target])

        assert find_path(Position(0, 0), target, is_safe, make_step(4, 4)) is None

        path = find_path(Position(0, 0), target, is_safe, make_step(4, 4), allow_target=True)
        assert path.first_move == Direction.RIGHT
        assert path.length == 3

    def test_on_blocked_reports_rejected_neighbours(self):
        walls = {Position(1, 0), Position(1, 1), Position(1, 2)}
        blocked = []
        path = find_path(
            Position(0, 0), Position(0, 2),
            blocked_by(walls), make_step(3, 3),
            on_blocked=blocked.append,
        )

        assert path.first_move == Direction.DOWN
        assert Position(1, 0) in blocked
        assert Position(1, 1) in blocked
        assert None not in blocked

    def test_detours_around_obstacles(self):
        walls = [Position(x, 2) for x in range(0, 4)]
        path = find_path(Position(0, 0), Position(0, 4), blocked_by(walls), make_step(5, 5))
        assert path.length == 12


class TestFarthestCell:
    """Tests for farthest_cell()."""

    @pytest.mark.parametrize("width,height", [(7, 5), (20, 20), (1, 6), (3, 1)])
    def test_open_grid_from_corner_returns_opposite_corner(self, width, height):
        source = Position(0, 0)
        farthest = farthest_cell(source, lambda p: True, make_step(width, height))
        assert farthest == Position(width - 1, height - 1)
        assert source.manhattan(farthest) == width + height - 2

    def test_from_opposite_corner(self):
        farthest = farthest_cell(Position(6, 4), lambda p: True, make_step(7, 5))
        assert farthest == Position(0, 0)

    def test_isolated_source_returns_source(self):
        walls = [Position(1, 0), Position(0, 1)]
        assert farthest_cell(Position(0, 0), blocked_by(walls), make_step(4, 4)) == Position(0, 0)

    def test_follows_corridor_around_walls(self):
        """A wall with a gap at the bottom makes the top right the farthest cell."""
        walls = [Position(2, y) for y in range(0, 4)]
        farthest = farthest_cell(Position(0, 0), blocked_by(walls), make_step(5, 5))
        assert farthest == Position(4, 0)

    def test_only_safe_cells_are_reached(self):
        walls = [Position(1, y) for y in range(3)]
        farthest = farthest_cell(Position(0, 0), blocked_by(walls), make_step(3, 3))
        assert farthest == Position(0, 2)
