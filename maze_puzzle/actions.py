"""Action enumerations.

Defines the human readable :class:`Action` (string enum) consumed by the
reducer and a stable integer :class:`GymAction` mapping for Gymnasium
compatibility.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict

from maze_puzzle.directions import Direction


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Single-step movement.
        SOLVE: Run the auto-solver from the start.
        RESET: Return to the start and clear the trail.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SOLVE = auto()
    RESET = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
