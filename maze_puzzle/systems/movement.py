"""Live position movement system.

Attempts to move the live position one step in ``direction``:

1. The target is ``state.live`` moved one cell in ``direction``. No bounds
    check is made; the border of WALL cells keeps every move inside the grid.
2. A WALL target blocks the move and the original ``State`` object is
    returned unchanged (callers compare by identity to detect the block).
3. Otherwise the trail is reclassified by :func:`trail_system` and ``live``
    becomes the target.
"""

from dataclasses import replace

from maze_puzzle.directions import Direction
from maze_puzzle.state import State
from maze_puzzle.systems.trail import trail_system


def can_move(state: State, direction: Direction) -> bool:
    """Return True if the neighbour in ``direction`` is not a wall."""
    return not state.grid.is_wall(state.live.moved_in(direction))


def movement_system(state: State, direction: Direction) -> State:
    """Move the live position one cell if not blocked by a wall.

    Args:
        state (State): Current state.
        direction (Direction): Direction of the single step.

    Returns:
        State: Same state if blocked, otherwise the updated state.
    """
    target = state.live.moved_in(direction)
    if state.grid.is_wall(target):
        return state

    state = trail_system(state, target)
    return replace(state, live=target, turn=state.turn + 1)
