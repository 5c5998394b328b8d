"""Terminal condition helper predicates."""

from maze_puzzle.state import State
from maze_puzzle.types import Cell


def is_end_reached(state: State) -> bool:
    """Return True if the live position is the END cell."""
    return state.grid.cell_at(state.live) == Cell.END


def is_terminal_state(state: State) -> bool:
    """Return True if the state already records a win."""
    return state.win
