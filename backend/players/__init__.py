"""
Player implementations for the snake bot simulator.

This module contains the player abstraction and the bots that control
snake movement decisions.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .greedy_tail_player import GreedyTailPlayer
from .spacer_player import SpacerPlayer
from .brute_player import BrutePlayer
from .variant_registry import (
    get_player_class,
    resolve_variant_key,
    create_players,
    list_variants,
    AVAILABLE_VARIANTS,
)

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'GreedyTailPlayer',
    'SpacerPlayer',
    'BrutePlayer',
    'get_player_class',
    'resolve_variant_key',
    'create_players',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
