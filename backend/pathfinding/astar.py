"""
A* path planning over the board.

Bots plan with different notions of which cells are traversable, so the
planner takes the safety predicate and the adjacency function as arguments
and only returns the first move of the shortest path it finds. Search state
is created per call and never kept between ticks.
"""

import itertools
from dataclasses import dataclass
from heapq import heappush, heappop
from typing import Callable, Dict, List, NamedTuple, Optional, Set, Tuple

from domain.constants import HEURISTIC_TIEBREAK_WEIGHT
from domain.direction import Direction
from domain.position import Position

SafetyCheck = Callable[[Position], bool]
StepFunction = Callable[[Position, Direction], Optional[Position]]


class Path(NamedTuple):
    """First move of a planned path and the number of moves in it."""
    first_move: Direction
    length: int


@dataclass
class SearchNode:
    position: Position
    g_score: float = float("inf")  # real cost to reach this node
    f_score: float = float("inf")  # g_score plus heuristic
    direction_to_parent: Optional[Direction] = None


def heuristic(a: Position, b: Position) -> float:
    """Manhattan distance scaled by the tie-break weight."""
    return HEURISTIC_TIEBREAK_WEIGHT * (abs(a[0] - b[0]) + abs(a[1] - b[1]))


def find_path(
    source: Position,
    target: Position,
    is_safe: SafetyCheck,
    step: StepFunction,
    allow_target: bool = False,
    on_blocked: Optional[Callable[[Position], None]] = None,
) -> Optional[Path]:
    """
    Find the shortest path from source to target.

    Args:
        source: Cell the search starts from (never checked for safety)
        target: Cell to reach
        is_safe: Predicate deciding whether a cell may be entered
        step: Adjacency function returning None off the board
        allow_target: Enter the target even if is_safe rejects it
        on_blocked: Called with every on-board neighbour rejected during
            expansion (unsafe or already closed)

    Returns:
        Path with the first move and the path length, or None if the
        target cannot be reached (or is the source itself).
    """
    if source == target:
        return None

    counter = itertools.count()
    start = SearchNode(source, g_score=0, f_score=heuristic(source, target))
    nodes: Dict[Position, SearchNode] = {source: start}
    open_heap: List[Tuple[float, int, Position]] = [(start.f_score, next(counter), source)]
    open_set: Set[Position] = {source}
    closed_set: Set[Position] = set()

    while open_heap:
        _, _, position = heappop(open_heap)
        if position not in open_set:
            # Superseded by a cheaper entry that was already expanded
            continue
        open_set.discard(position)
        current = nodes[position]

        if position == target:
            return _reconstruct(current, source, nodes, step)

        closed_set.add(position)

        for direction in Direction:
            neighbor_pos = step(position, direction)
            if neighbor_pos is None:
                continue

            exempt = allow_target and neighbor_pos == target
            if not exempt and (neighbor_pos in closed_set or not is_safe(neighbor_pos)):
                if on_blocked is not None:
                    on_blocked(neighbor_pos)
                continue

            neighbor = nodes.get(neighbor_pos)
            if neighbor is None:
                neighbor = SearchNode(neighbor_pos)
                nodes[neighbor_pos] = neighbor

            tentative_g_score = current.g_score + 1
            if tentative_g_score < neighbor.g_score:
                neighbor.direction_to_parent = direction.opposite()
                neighbor.g_score = tentative_g_score
                neighbor.f_score = tentative_g_score + heuristic(neighbor_pos, target)
                # Re-insert; the stale entry is skipped when popped
                heappush(open_heap, (neighbor.f_score, next(counter), neighbor_pos))
                open_set.add(neighbor_pos)

    return None


def _reconstruct(
    node: SearchNode,
    source: Position,
    nodes: Dict[Position, SearchNode],
    step: StepFunction,
) -> Path:
    """Walk back pointers to the source, keeping the first move taken."""
    length = 0
    first_move = None
    while node.position != source:
        length += 1
        first_move = node.direction_to_parent.opposite()
        node = nodes[step(node.position, node.direction_to_parent)]
    return Path(first_move, length)
