"""Terminal condition system.

Keeps ``state.win`` equal to whether the live position is on the END cell.
The reducer short-circuits movement once it is set; the ``Maze`` facade keeps
walking, so leaving END clears the flag again.
"""

from dataclasses import replace

from maze_puzzle.state import State
from maze_puzzle.utils.terminal import is_end_reached


def win_system(state: State) -> State:
    """Set or clear the ``win`` flag from the live position (idempotent)."""
    won = is_end_reached(state)
    if won == state.win:
        return state
    return replace(state, win=won)
