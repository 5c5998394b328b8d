"""Depth-first auto-solver.

The solver drives the ordinary movement system; it keeps no visited set of
its own. Exploration state lives entirely in the live route
(``State.route`` and ``State.trail_index``) and ``State.backtracked``:

1. Scan :data:`maze_puzzle.directions.PRIORITY_ORDER` (DOWN, RIGHT, UP,
    LEFT) for the first neighbour that is not a wall and is neither on the
    trail nor backtracked, and step onto it.
2. With no such neighbour, retreat to the second-to-last trail element.
    Stepping back onto the trail trims the dead end into ``backtracked``.
3. A dead end at the start means every reachable cell has been exhausted:
    the maze is unsolvable.

Each iteration moves a cell from unknown to trail, or from trail to
backtracked, so the loop ends after at most twice the number of open cells.
"""

import logging
from dataclasses import replace
from typing import Generator, Optional, Tuple

from maze_puzzle.directions import PRIORITY_ORDER, Direction, direction_of
from maze_puzzle.errors import TrailInvariantError
from maze_puzzle.state import State, reset_state
from maze_puzzle.systems.movement import can_move, movement_system
from maze_puzzle.systems.terminal import win_system
from maze_puzzle.types import SolveOutcome
from maze_puzzle.utils.terminal import is_end_reached
from maze_puzzle.utils.trail import (
    is_backtracked,
    is_on_trail,
    previous_trail_position,
)

logger = logging.getLogger(__name__)

UNSOLVABLE_MESSAGE = "The autosolver failed to solve this maze."
SOLVED_MESSAGE = "The autosolver successfully found the end of the maze."


def next_unexplored_direction(state: State) -> Optional[Direction]:
    """First direction in priority order leading to an unexplored open cell."""
    for direction in PRIORITY_ORDER:
        if not can_move(state, direction):
            continue
        target = state.live.moved_in(direction)
        if is_on_trail(state, target) or is_backtracked(state, target):
            continue
        return direction
    return None


def retreat_direction(state: State) -> Direction:
    """Direction from the live position back to the previous trail element.

    Raises:
        TrailInvariantError: If the previous trail element is missing or not
            adjacent to the live position.
    """
    parent = previous_trail_position(state)
    if parent is None:
        raise TrailInvariantError(f"No trail element to retreat to from {state.live}")
    try:
        return direction_of(state.live, parent)
    except ValueError as exc:
        raise TrailInvariantError(
            f"Cannot retreat from {state.live} to {parent}"
        ) from exc


def iter_solve(state: State) -> Generator[State, None, None]:
    """Yield every state of a solve, starting with the reset state.

    The final yielded state has ``win`` set if the END cell was reached; if
    not, the maze is unsolvable from the start.
    """
    state = reset_state(state)
    yield state

    while not is_end_reached(state):
        direction = next_unexplored_direction(state)
        if direction is None:
            if state.live == state.start:
                logger.info("Auto-solve exhausted the start after %d moves", state.turn)
                yield replace(state, message=UNSOLVABLE_MESSAGE)
                return
            direction = retreat_direction(state)
            logger.debug("Retreating %s from %s", direction, state.live)
        else:
            logger.debug("Advancing %s from %s", direction, state.live)

        moved = movement_system(state, direction)
        if moved is state:
            raise TrailInvariantError(f"Solver move {direction} from {state.live} blocked")
        state = moved
        yield state

    logger.info("Auto-solve reached the end after %d moves", state.turn)
    yield replace(win_system(state), message=SOLVED_MESSAGE)


def auto_solve(state: State) -> Tuple[State, SolveOutcome]:
    """Run the auto-solver to completion.

    Args:
        state (State): Any state of the maze; it is reset before solving.

    Returns:
        Tuple[State, SolveOutcome]: The final state (trail and backtracked
        fully updated) and whether the END cell was reached.
    """
    final = state
    for final in iter_solve(state):
        pass
    outcome = SolveOutcome.REACHED_END if final.win else SolveOutcome.UNSOLVABLE
    return final, outcome
