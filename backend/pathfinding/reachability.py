"""
Breadth-first search for the cell that takes the most moves to reach.
"""

from typing import List

from domain.direction import Direction
from domain.position import Position
from .astar import SafetyCheck, StepFunction


def farthest_cell(source: Position, is_safe: SafetyCheck, step: StepFunction) -> Position:
    """
    Flood fill outward from source one layer at a time.

    Returns the last cell discovered on the deepest layer, or source itself
    when none of its neighbours is safe.
    """
    frontier: List[Position] = [source]
    seen = {source}
    farthest = source

    while frontier:
        next_frontier: List[Position] = []
        for current in frontier:
            for direction in Direction:
                neighbor = step(current, direction)
                if neighbor is None or neighbor in seen or not is_safe(neighbor):
                    continue
                seen.add(neighbor)
                next_frontier.append(neighbor)
                farthest = neighbor
        frontier = next_frontier

    return farthest
