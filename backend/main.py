"""
Snake game engine: runs one bot on a fixed grid, one tick at a time.

The simulator owns the grid, the snake and the food. Bots only see the
GameState snapshot built for each tick.
"""

import argparse
import json
import logging
import math
import os
import random
import time
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from domain.constants import (
    CellValue,
    GamePhase,
    DEFAULT_GRID_WIDTH,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_DELAY,
    MAX_DELAY,
    DEFAULT_BOT,
    WALL,
    SELF,
    MAX_MOVES,
)
from domain.game_state import GameState
from domain.grid import Grid
from domain.position import Position
from domain.snake import Snake
from players import Player, create_players, resolve_variant_key, list_variants

load_dotenv()
logger = logging.getLogger(__name__)

# Read once at startup; fixed for the lifetime of the process
GRID_WIDTH = int(os.getenv("SNAKE_GRID_WIDTH", DEFAULT_GRID_WIDTH))
GRID_HEIGHT = int(os.getenv("SNAKE_GRID_HEIGHT", DEFAULT_GRID_HEIGHT))
TICK_DELAY_MS = int(os.getenv("SNAKE_TICK_DELAY_MS", DEFAULT_DELAY))
DEFAULT_BOT_NAME = os.getenv("SNAKE_DEFAULT_BOT", DEFAULT_BOT)


def clamp_delay(delay_ms: int) -> int:
    """Keep a tick delay within [0, MAX_DELAY] milliseconds."""
    return max(0, min(MAX_DELAY, delay_ms))


class SnakeGame:
    """
    Manages:
      - Grid (width, height)
      - Snake
      - The selected bot
      - Food placement
      - Move and score counters
      - Phase (IDLE -> RUNNING -> GAME_OVER)
    """

    def __init__(
        self,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        bot: Optional[str] = DEFAULT_BOT_NAME,
        max_moves: Optional[int] = None,
        seed: Optional[int] = None
    ):
        self.grid = Grid(width, height)
        self.rng = random.Random(seed)
        self.players: Dict[str, Player] = create_players(self.rng)
        self.bot_key = resolve_variant_key(bot)
        self.max_moves = max_moves

        self.phase = GamePhase.IDLE
        self.snake: Optional[Snake] = None
        self.food: Optional[Position] = None
        self.moves = 0
        self.food_eaten = 0
        self.won = False
        self.end_reason: Optional[str] = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def player(self) -> Player:
        return self.players[self.bot_key]

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def select_bot(self, name: str) -> Player:
        """
        Switch the bot used by the next game.

        Raises:
            ValueError: If a game is running or the name is unknown.
        """
        if self.phase == GamePhase.RUNNING:
            raise ValueError("Cannot switch bots while a game is running.")
        self.bot_key = resolve_variant_key(name)
        logger.info("Selected %s", self.player)
        return self.player

    def start_game(self, start: Optional[Position] = None):
        """
        Clear the board and start a new game with the selected bot.

        Args:
            start: Starting cell of the head. Random if omitted.
        """
        if start is None:
            start = Position(self.rng.randrange(self.width), self.rng.randrange(self.height))
        elif self.grid.is_out_of_bounds(start):
            raise ValueError(f"Start position out of bounds at {start}.")
        start = Position(*start)

        self.grid.fill(CellValue.EMPTY)
        self.snake = Snake([start])
        self.grid.set(start, CellValue.SNAKE)
        self.player.initialize(start)

        self.food = None
        self.moves = 0
        self.food_eaten = 0
        self.won = False
        self.end_reason = None
        self.phase = GamePhase.RUNNING

        self.place_food()
        logger.info(
            "Started %dx%d game with %s at %s, food at %s",
            self.width, self.height, self.player, start, self.food,
        )

    def stop(self):
        """Pause the current game. Only start_game() resumes play."""
        if self.phase == GamePhase.RUNNING:
            self.phase = GamePhase.IDLE
            logger.info("Stopped after %d moves", self.moves)

    def place_food(self, pos: Optional[Position] = None) -> Optional[Position]:
        """
        Move the food to pos, or to a random empty cell if pos is omitted.

        Returns:
            The new food position, or None if there is no empty cell left.

        Raises:
            ValueError: If pos is off the board or on the snake.
        """
        if pos is not None:
            if self.grid.is_out_of_bounds(pos):
                raise ValueError(f"Food out of bounds at {pos}.")
            if self.grid.get(pos) == CellValue.SNAKE:
                raise ValueError(f"Food cannot be placed on the snake at {pos}.")

        if self.food is not None and self.grid.get(self.food) == CellValue.FOOD:
            self.grid.set(self.food, CellValue.EMPTY)

        if pos is None:
            empty_cells = self.grid.empty_cells()
            if not empty_cells:
                self.food = None
                return None
            pos = self.rng.choice(empty_cells)

        self.food = Position(*pos)
        self.grid.set(self.food, CellValue.FOOD)
        return self.food

    def get_current_state(self) -> GameState:
        """
        Return a read-only snapshot of the current board as a GameState.
        """
        return GameState(
            cells=self.grid.snapshot(),
            food=self.food,
            move_count=self.moves,
            score=self.food_eaten,
        )

    def is_out_of_bounds(self, pos: Optional[Position]) -> bool:
        return self.grid.is_out_of_bounds(pos)

    def cell_value(self, pos: Position) -> CellValue:
        return self.grid.get(pos)

    def tick(self) -> bool:
        """
        Execute one tick:
          1) If the game is not running, do nothing
          2) Ask the bot for its move
          3) Check wall and self collisions
          4) Grow on food (and place new food), otherwise drop the tail

        Returns:
            True if the game is still running afterwards.
        """
        if self.phase != GamePhase.RUNNING:
            return False

        move = self.player.get_move(self.get_current_state())
        self.moves += 1
        new_head = self.grid.step(self.snake.head, move)
        logger.debug("Move %d: %s -> %s", self.moves, move, new_head)

        if new_head is None:
            self._end_game(WALL)
            return False
        # The tail has not moved yet, so running into it is a collision too
        if self.grid.get(new_head) == CellValue.SNAKE:
            self._end_game(SELF)
            return False

        ate_food = self.grid.get(new_head) == CellValue.FOOD
        self.snake.positions.appendleft(new_head)
        self.grid.set(new_head, CellValue.SNAKE)

        if ate_food:
            self.food_eaten += 1
            if self.place_food() is None:
                self.won = True
                self._end_game(None)
                return False
        else:
            self.grid.set(self.snake.positions.pop(), CellValue.EMPTY)

        if self.max_moves is not None and self.moves >= self.max_moves:
            self._end_game(MAX_MOVES)
            return False

        return True

    def stats(self) -> Dict[str, Any]:
        """Moves, score and moves per food eaten (nan before the first food)."""
        if self.food_eaten == 0:
            ratio = math.nan
        else:
            ratio = round(self.moves / self.food_eaten, 2)
        return {"moves": self.moves, "score": self.food_eaten, "ratio": ratio}

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")

    def _end_game(self, reason: Optional[str]):
        self.phase = GamePhase.GAME_OVER
        self.end_reason = reason
        if reason in (WALL, SELF):
            self.snake.alive = False
            self.snake.death_reason = reason
            self.snake.death_move = self.moves

        if self.won:
            logger.info("Game over: %s filled the board in %d moves", self.player, self.moves)
        else:
            logger.info(
                "Game over (%s): %s scored %d in %d moves",
                reason, self.player, self.food_eaten, self.moves,
            )


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(bot_name: str, game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Runs a single game with one bot until it ends.

    Args:
        bot_name: Bot key or display name.
        game_params: An object (like argparse.Namespace) containing game settings
                     (width, height, and optionally max_moves, seed, delay, print_board).

    Returns:
        A dictionary summarizing the game (bot, final_score, moves, ratio, result, death_reason).
    """
    game = SnakeGame(
        width=game_params.width,
        height=game_params.height,
        bot=bot_name,
        max_moves=getattr(game_params, 'max_moves', None),
        seed=getattr(game_params, 'seed', None),
    )
    delay = clamp_delay(getattr(game_params, 'delay', 0) or 0) / 1000.0
    show_board = getattr(game_params, 'print_board', False)

    game.start_game()
    while game.tick():
        if show_board:
            game.print_board()
        if delay:
            time.sleep(delay)

    if game.won:
        result = "won"
    elif game.end_reason == MAX_MOVES:
        result = "max_moves"
    else:
        result = "lost"

    stats = game.stats()
    return {
        "bot": str(game.player),
        "final_score": stats["score"],
        "moves": stats["moves"],
        "ratio": stats["ratio"],
        "result": result,
        "death_reason": game.snake.death_reason,
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a Snake game played by one of the built-in bots."
    )
    parser.add_argument("--bot", type=str, default=DEFAULT_BOT_NAME,
                        help="Bot to play with (e.g. 'spacer', 'greedy_tail', 'BruteBot')")
    parser.add_argument("--width", type=int, default=GRID_WIDTH,
                        help="Width of the board in cells")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT,
                        help="Height of the board in cells")
    parser.add_argument("--delay", type=int, default=TICK_DELAY_MS,
                        help=f"Delay between ticks in milliseconds (0-{MAX_DELAY})")
    parser.add_argument("--max-moves", type=int, default=None,
                        help="Stop the game after this many moves")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and random moves")
    parser.add_argument("--print-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--list-bots", action="store_true",
                        help="List the available bots and exit")
    parser.add_argument("--log-level", type=str, default="INFO",
                        help="Logging level (DEBUG shows every move)")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.list_bots:
        for variant in list_variants():
            print(f"{variant['key']:<12} {variant['name']:<14} {variant['description']}")
        return

    try:
        result = run_simulation(args.bot, args)
    except ValueError as e:
        parser.error(str(e))

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
