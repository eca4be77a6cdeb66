"""
Domain entities for the snake bot simulator.

This module contains the core game entities that are independent of
the bots and the drivers that run them.
"""

from .constants import (
    CellValue,
    GamePhase,
    DEFAULT_GRID_WIDTH,
    DEFAULT_GRID_HEIGHT,
    MAX_DELAY,
    DEFAULT_DELAY,
    HEURISTIC_TIEBREAK_WEIGHT,
)
from .direction import Direction
from .position import Position
from .grid import Grid, step
from .snake import Snake
from .game_state import GameState

__all__ = [
    'CellValue', 'GamePhase',
    'DEFAULT_GRID_WIDTH', 'DEFAULT_GRID_HEIGHT', 'MAX_DELAY', 'DEFAULT_DELAY',
    'HEURISTIC_TIEBREAK_WEIGHT',
    'Direction',
    'Position',
    'Grid', 'step',
    'Snake',
    'GameState',
]
