"""State reducer and step orchestration.

This module wires the systems together to implement a single transition
given an ``Action``. The exported :func:`step` is the only public entry point
for gameplay progression and is intentionally pure: it returns a *new*
:class:`maze_puzzle.state.State`.

Ordering:

1. Movement actions run ``movement_system`` (wall check, trail update).
2. ``win_system`` evaluates the END condition after a successful move.
3. ``SOLVE`` replaces the state with the auto-solver's final state.
4. ``RESET`` returns to the start with a fresh trail.
"""

from dataclasses import replace

from maze_puzzle.actions import ACTION_DIRECTIONS, MOVE_ACTIONS, Action
from maze_puzzle.solver import auto_solve
from maze_puzzle.state import State, reset_state
from maze_puzzle.systems.movement import movement_system
from maze_puzzle.systems.terminal import win_system
from maze_puzzle.utils.terminal import is_terminal_state

WALL_MESSAGE = "Could not move in the given direction as there was a wall."
CONGRATULATIONS_MESSAGE = "Congratulations, you reached the end of the maze!"


def step(state: State, action: Action) -> State:
    """Advance the maze by one logical action.

    Args:
        state (State): Previous immutable state.
        action (Action): Player action enum value to apply.

    Returns:
        State: Next state snapshot. Movement on a terminal state, or into a
            wall, returns an equal state (a blocked move only sets
            ``message``).

    Raises:
        ValueError: If the action is not recognized.
    """
    if action in MOVE_ACTIONS:
        return _step_move(state, action)
    elif action == Action.SOLVE:
        solved, _ = auto_solve(state)
        return solved
    elif action == Action.RESET:
        return reset_state(state)
    raise ValueError("Action is not valid")


def _step_move(state: State, action: Action) -> State:
    """Handle a single-step movement action.

    A blocked move leaves the position and trail untouched and records the
    wall message so controllers can warn the user.
    """
    if is_terminal_state(state):
        return state

    moved = movement_system(state, ACTION_DIRECTIONS[action])
    if moved is state:
        return replace(state, message=WALL_MESSAGE)

    moved = win_system(replace(moved, message=None))
    if moved.win:
        moved = replace(moved, message=CONGRATULATIONS_MESSAGE)
    return moved
