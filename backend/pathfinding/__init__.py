"""
Grid searches shared by the bots.
"""

from .astar import Path, SearchNode, find_path, heuristic
from .reachability import farthest_cell

__all__ = [
    'Path',
    'SearchNode',
    'find_path',
    'heuristic',
    'farthest_cell',
]
