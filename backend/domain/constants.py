"""
Game constants for the snake bot simulator.
"""

from enum import Enum, IntEnum


class CellValue(IntEnum):
    """Contents of a single grid cell."""
    EMPTY = 0
    FOOD = 1
    SNAKE = 2


class GamePhase(Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    GAME_OVER = "GAME_OVER"


# Board settings
DEFAULT_GRID_WIDTH = 20
DEFAULT_GRID_HEIGHT = 20

# Delay between ticks in milliseconds (driver only, the core has no clock)
MAX_DELAY = 100
DEFAULT_DELAY = 50

# Multiplier on the Manhattan heuristic. Slightly above 1 so that equal-cost
# paths are broken toward the goal deterministically.
HEURISTIC_TIEBREAK_WEIGHT = 1.001

DEFAULT_BOT = "spacer"

# Death reasons
WALL = "wall"
SELF = "self"
MAX_MOVES = "max_moves"
