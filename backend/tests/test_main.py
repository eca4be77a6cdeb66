"""
Tests for main.py - the Snake game engine and its single-game driver.
"""

import argparse
import math
import pytest
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import SnakeGame, run_simulation, clamp_delay
from domain import CellValue, Direction, GamePhase, GameState, Position
from domain.constants import MAX_DELAY
from players import GreedyPlayer, BrutePlayer


def scripted_game(moves, width=10, height=10, start=(5, 5), food=None):
    """A started game whose bot plays the given moves in order."""
    game = SnakeGame(width=width, height=height, seed=7)
    mock_player = Mock()
    mock_player.get_move = Mock(side_effect=list(moves))
    game.players[game.bot_key] = mock_player
    game.start_game(start=Position(*start))
    if food is not None:
        game.place_food(Position(*food))
    return game


class TestSnakeGameSetup:
    """Tests for constructing and starting a SnakeGame."""

    def test_game_initialization(self):
        game = SnakeGame(width=12, height=8)

        assert game.width == 12
        assert game.height == 8
        assert game.phase == GamePhase.IDLE
        assert game.game_over is False
        assert game.moves == 0
        assert game.food_eaten == 0

    def test_invalid_dimensions_raise(self):
        with pytest.raises(ValueError):
            SnakeGame(width=0, height=10)

    def test_unknown_bot_raises(self):
        with pytest.raises(ValueError):
            SnakeGame(width=10, height=10, bot="nope")

    def test_start_game_places_snake_and_food(self):
        game = SnakeGame(width=10, height=10, seed=1)
        game.start_game()

        assert game.phase == GamePhase.RUNNING
        assert len(game.snake) == 1
        assert game.grid.count(CellValue.SNAKE) == 1
        assert game.grid.count(CellValue.FOOD) == 1
        assert game.cell_value(game.food) == CellValue.FOOD
        assert game.food != game.snake.head

    def test_start_game_at_given_cell(self):
        game = SnakeGame(width=10, height=10, bot="greedy")
        game.start_game(start=Position(3, 4))

        assert game.snake.head == Position(3, 4)
        assert game.cell_value(Position(3, 4)) == CellValue.SNAKE
        assert game.player.head == Position(3, 4)

    def test_start_game_out_of_bounds_raises(self):
        game = SnakeGame(width=10, height=10)
        with pytest.raises(ValueError):
            game.start_game(start=Position(10, 0))

    def test_restart_resets_counters(self):
        game = scripted_game([Direction.DOWN], food=(5, 6))
        game.tick()
        assert game.food_eaten == 1

        game.players[game.bot_key] = GreedyPlayer()
        game.start_game()

        assert game.phase == GamePhase.RUNNING
        assert game.moves == 0
        assert game.food_eaten == 0
        assert len(game.snake) == 1
        assert game.grid.count(CellValue.SNAKE) == 1


class TestTick:
    """Tests for advancing the game one tick at a time."""

    def test_tick_when_idle_does_nothing(self):
        game = SnakeGame(width=10, height=10)
        assert game.tick() is False
        assert game.moves == 0

    def test_move_vacates_tail(self):
        game = scripted_game([Direction.RIGHT], food=(0, 0))

        assert game.tick() is True
        assert game.snake.head == Position(6, 5)
        assert len(game.snake) == 1
        assert game.cell_value(Position(5, 5)) == CellValue.EMPTY
        assert game.cell_value(Position(6, 5)) == CellValue.SNAKE
        assert game.moves == 1

    def test_eating_grows_and_places_new_food(self):
        game = scripted_game([Direction.DOWN], food=(5, 6))

        assert game.tick() is True
        assert game.food_eaten == 1
        assert list(game.snake.positions) == [Position(5, 6), Position(5, 5)]
        assert game.food not in game.snake.positions
        assert game.grid.count(CellValue.FOOD) == 1
        assert game.grid.count(CellValue.SNAKE) == 2

    def test_wall_collision_ends_game(self):
        game = scripted_game([Direction.LEFT], start=(0, 5), food=(9, 9))

        assert game.tick() is False
        assert game.phase == GamePhase.GAME_OVER
        assert game.snake.alive is False
        assert game.snake.death_reason == "wall"
        assert game.snake.death_move == 1

    def test_running_into_tail_is_a_collision(self):
        """The tail is still in place when the head moves."""
        game = scripted_game([Direction.DOWN, Direction.UP], food=(5, 6))

        assert game.tick() is True
        assert game.tick() is False
        assert game.snake.death_reason == "self"
        assert game.end_reason == "self"

    def test_no_ticks_after_game_over(self):
        game = scripted_game([Direction.LEFT, Direction.LEFT], start=(0, 5), food=(9, 9))
        game.tick()

        assert game.tick() is False
        assert game.moves == 1

    def test_filling_the_board_wins(self):
        game = SnakeGame(width=2, height=1, bot="greedy")
        game.start_game(start=Position(0, 0))
        assert game.food == Position(1, 0)

        assert game.tick() is False
        assert game.won is True
        assert game.phase == GamePhase.GAME_OVER
        assert game.food is None
        assert game.snake.alive is True
        assert game.food_eaten == 1

    def test_max_moves_ends_game(self):
        game = SnakeGame(width=4, height=4, bot="brute", max_moves=5, seed=3)
        game.start_game()

        while game.tick():
            pass

        assert game.moves == 5
        assert game.end_reason == "max_moves"
        assert game.snake.alive is True

    def test_bot_receives_read_only_snapshot(self):
        game = scripted_game([Direction.RIGHT], food=(0, 0))
        game.tick()

        state = game.players[game.bot_key].get_move.call_args[0][0]
        assert isinstance(state, GameState)
        assert state.food == Position(0, 0)
        with pytest.raises(ValueError):
            state.cells[0, 0] = int(CellValue.SNAKE)

    @pytest.mark.parametrize("width,height", [(4, 4), (6, 4), (4, 5)])
    def test_brute_fills_board_with_an_even_side(self, width, height):
        game = SnakeGame(width=width, height=height, bot="brute", max_moves=10_000, seed=11)
        game.start_game()

        while game.tick():
            pass

        assert game.won is True
        assert game.food_eaten == width * height - 1

    def test_same_seed_same_game(self):
        def heads(seed):
            game = SnakeGame(width=8, height=8, bot="random", seed=seed)
            game.start_game()
            trail = [game.snake.head]
            for _ in range(40):
                if not game.tick():
                    break
                trail.append(game.snake.head)
            return trail

        assert heads(5) == heads(5)


class TestControls:
    """Tests for stop, bot selection and food placement."""

    def test_stop_pauses_game(self):
        game = SnakeGame(width=10, height=10, bot="greedy", seed=2)
        game.start_game()
        game.stop()

        assert game.phase == GamePhase.IDLE
        assert game.tick() is False

    def test_select_bot_while_running_raises(self):
        game = SnakeGame(width=10, height=10, bot="greedy")
        game.start_game()

        with pytest.raises(ValueError):
            game.select_bot("brute")

    def test_select_bot_between_games(self):
        game = SnakeGame(width=10, height=10, bot="greedy")
        game.start_game()
        game.stop()

        player = game.select_bot("BruteBot")

        assert isinstance(player, BrutePlayer)
        assert game.player is player

    def test_select_unknown_bot_raises(self):
        game = SnakeGame(width=10, height=10)
        with pytest.raises(ValueError):
            game.select_bot("astar")

    def test_place_food_moves_food(self):
        game = SnakeGame(width=10, height=10, seed=4)
        game.start_game(start=Position(0, 0))
        old_food = game.food

        game.place_food(Position(9, 9) if old_food != Position(9, 9) else Position(8, 8))

        assert game.grid.count(CellValue.FOOD) == 1
        assert game.cell_value(old_food) == CellValue.EMPTY

    def test_place_food_on_snake_raises(self):
        game = SnakeGame(width=10, height=10)
        game.start_game(start=Position(2, 2))
        with pytest.raises(ValueError):
            game.place_food(Position(2, 2))

    def test_place_food_out_of_bounds_raises(self):
        game = SnakeGame(width=10, height=10)
        game.start_game()
        with pytest.raises(ValueError):
            game.place_food(Position(15, 15))

    def test_is_out_of_bounds(self):
        game = SnakeGame(width=10, height=5)
        assert game.is_out_of_bounds(Position(9, 4)) is False
        assert game.is_out_of_bounds(Position(9, 5)) is True
        assert game.is_out_of_bounds(None) is True


class TestStats:
    """Tests for the move/score counters."""

    def test_ratio_is_nan_before_eating(self):
        game = SnakeGame(width=10, height=10)
        stats = game.stats()
        assert stats["moves"] == 0
        assert stats["score"] == 0
        assert math.isnan(stats["ratio"])

    def test_ratio_is_moves_per_food(self):
        game = SnakeGame(width=10, height=10)
        game.moves = 10
        game.food_eaten = 3
        assert game.stats()["ratio"] == 3.33


class TestRunSimulation:
    """Tests for the run_simulation() driver."""

    def test_brute_wins_small_even_board(self):
        params = argparse.Namespace(width=4, height=4, max_moves=2000, seed=1)
        result = run_simulation("brute", params)

        assert result["bot"] == "BruteBot"
        assert result["result"] == "won"
        assert result["final_score"] == 15
        assert result["death_reason"] is None

    def test_move_cap_reported(self):
        params = argparse.Namespace(width=6, height=6, max_moves=3, seed=2)
        result = run_simulation("spacer", params)

        assert result["moves"] == 3
        assert result["result"] == "max_moves"
        assert result["death_reason"] is None

    @pytest.mark.parametrize("delay,expected", [(-5, 0), (0, 0), (50, 50), (MAX_DELAY + 1, MAX_DELAY)])
    def test_clamp_delay(self, delay, expected):
        assert clamp_delay(delay) == expected
