"""Trail lookup helpers.

Read-only queries over the live route. Lookups go through
``State.trail_index`` and the head of ``State.route``, so each one is
independent of the trail length.
"""

from typing import Optional

from maze_puzzle.components import Position
from maze_puzzle.state import State


def last_index_of(state: State, pos: Position) -> Optional[int]:
    """Return the index of ``pos`` in the trail (start is 0), or ``None``."""
    return state.trail_index.get(pos)


def previous_trail_position(state: State) -> Optional[Position]:
    """Second-to-last trail element (the cell the live route came from)."""
    rest = state.route.rest
    if not rest:
        return None
    return rest.first


def is_on_trail(state: State, pos: Position) -> bool:
    return pos in state.trail_index


def is_backtracked(state: State, pos: Position) -> bool:
    return pos in state.backtracked
