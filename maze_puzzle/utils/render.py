"""Tile classification shared by the renderers.

Each grid position maps to exactly one :class:`TileType`, using the
precedence live > start > trail > backtracked > cell classification.
"""

from enum import StrEnum, auto

from maze_puzzle.components import Position
from maze_puzzle.state import State
from maze_puzzle.types import Cell
from maze_puzzle.utils.trail import is_backtracked, is_on_trail


class TileType(StrEnum):
    LIVE = auto()
    START = auto()
    TRAIL = auto()
    BACKTRACKED = auto()
    PATH = auto()
    WALL = auto()
    END = auto()


CELL_TILE_TYPES = {
    Cell.PATH: TileType.PATH,
    Cell.WALL: TileType.WALL,
    Cell.START: TileType.START,
    Cell.END: TileType.END,
}


def tile_type(state: State, pos: Position) -> TileType:
    """Return the tile type displayed at ``pos``."""
    if pos == state.live:
        return TileType.LIVE
    if pos == state.start:
        return TileType.START
    if is_on_trail(state, pos):
        return TileType.TRAIL
    if is_backtracked(state, pos):
        return TileType.BACKTRACKED
    return CELL_TILE_TYPES[state.grid.cell_at(pos)]


def background_tile_type(state: State, pos: Position) -> TileType:
    """Tile type ignoring the live marker (what lies underneath it)."""
    if pos == state.start:
        return TileType.START
    if is_on_trail(state, pos):
        return TileType.TRAIL
    if is_backtracked(state, pos):
        return TileType.BACKTRACKED
    return CELL_TILE_TYPES[state.grid.cell_at(pos)]
