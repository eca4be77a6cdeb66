"""
Registry for bot variants.

Maps bot keys (e.g., 'spacer', 'greedy_tail') to player classes. Display
names such as 'GreedyTailBot' resolve to the same entries.
"""

import random
from typing import Dict, List, Optional, Type

from domain.constants import DEFAULT_BOT
from .base import Player
from .brute_player import BrutePlayer
from .greedy_player import GreedyPlayer
from .greedy_tail_player import GreedyTailPlayer
from .random_player import RandomPlayer
from .spacer_player import SpacerPlayer


# Registry: maps bot key -> player class, in menu order
PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "spacer": SpacerPlayer,
    "greedy_tail": GreedyTailPlayer,
    "greedy": GreedyPlayer,
    "brute": BrutePlayer,
    "random": RandomPlayer,
}

# Canonical list of available bot keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())

_DESCRIPTIONS = {
    "spacer": "Shortest path to food keeping one cell of space, relaxed when boxed in",
    "greedy_tail": "Shortest path to food, else chase the oldest reachable body part",
    "greedy": "Shortest path to food, else random safe moves",
    "brute": "Fixed Hamiltonian cycle over the whole board",
    "random": "Random safe moves",
}


def _normalize(name: str) -> str:
    key = name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
    if key.endswith("bot"):
        key = key[:-3]
    return key


_LOOKUP = {_normalize(key): key for key in PLAYER_VARIANTS}


def resolve_variant_key(name: Optional[str] = None) -> str:
    """
    Resolve a bot name to its registry key.

    Args:
        name: A key ('greedy_tail'), display name ('GreedyTailBot') or any
            spelling in between. If None or empty, returns the default bot.

    Raises:
        ValueError: If name is not recognized.
    """
    if not name or name.strip() == "":
        return DEFAULT_BOT

    key = _LOOKUP.get(_normalize(name))
    if key is None:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(f"Unknown bot '{name}'. Available bots: {available}")
    return key


def get_player_class(name: Optional[str] = None) -> Type[Player]:
    """Get the player class for a bot name (see resolve_variant_key)."""
    return PLAYER_VARIANTS[resolve_variant_key(name)]


def create_players(rng: Optional[random.Random] = None) -> Dict[str, Player]:
    """One instance of every bot, sharing the given random source."""
    return {key: cls(rng=rng) for key, cls in PLAYER_VARIANTS.items()}


def list_variants() -> List[dict]:
    """
    Return metadata about all available bots.

    Returns:
        List of dicts with 'key', 'name' and 'description' for each bot.
    """
    return [
        {"key": key, "name": cls.name, "description": _DESCRIPTIONS[key]}
        for key, cls in PLAYER_VARIANTS.items()
    ]
