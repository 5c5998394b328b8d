"""Cardinal directions and adjacency helpers.

``PRIORITY_ORDER`` is the fixed traversal order used by the auto-solver
(DOWN, RIGHT, UP, LEFT). Changing it changes every solve trace.
"""

from typing import Dict, Tuple

from maze_puzzle.components import Position
from maze_puzzle.types import DIRECTION_DELTAS, Direction

__all__ = [
    "DIRECTION_DELTAS",
    "PRIORITY_ORDER",
    "Direction",
    "direction_of",
    "opposite",
]

PRIORITY_ORDER: Tuple[Direction, ...] = (
    Direction.DOWN,
    Direction.RIGHT,
    Direction.UP,
    Direction.LEFT,
)

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTA_DIRECTIONS: Dict[Tuple[int, int], Direction] = {
    delta: direction for direction, delta in DIRECTION_DELTAS.items()
}


def opposite(direction: Direction) -> Direction:
    """Return the reverse of ``direction`` (UP<->DOWN, LEFT<->RIGHT)."""
    return _OPPOSITES[direction]


def direction_of(start: Position, end: Position) -> Direction:
    """Return the direction leading from ``start`` to the adjacent ``end``.

    Raises:
        ValueError: If ``end`` is not exactly one cardinal step from ``start``.
    """
    delta = (end.row - start.row, end.col - start.col)
    direction = _DELTA_DIRECTIONS.get(delta)
    if direction is None:
        raise ValueError(f"Positions {start} and {end} are not adjacent")
    return direction
