"""Common type aliases and enumerations.

``Cell`` is the classification of a single grid square and ``Direction`` one
of the four steps between squares. ``MoveOutcome`` and
``SolveOutcome`` are the result values returned to controllers: a blocked
move or an unsolvable maze is a normal outcome, not an exception.
"""

from enum import StrEnum, auto
from typing import Dict, Sequence, Tuple

CharGrid = Sequence[str]
"""Rows of maze characters (``#``, ``.``, `` ``, ``S``, ``E``)."""


class Cell(StrEnum):
    """Classification of a grid square."""

    PATH = auto()
    WALL = auto()
    START = auto()
    END = auto()


class MoveOutcome(StrEnum):
    """Result of a single-step move attempt."""

    MOVED = auto()
    BLOCKED = auto()


class SolveOutcome(StrEnum):
    """Result of a full auto-solve run."""

    REACHED_END = auto()
    UNSOLVABLE = auto()


class Direction(StrEnum):
    """One of the four grid directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}
"""(drow, dcol) unit vector of each direction."""
