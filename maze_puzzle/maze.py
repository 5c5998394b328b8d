"""Mutable maze facade for controllers and views.

:class:`Maze` owns the current immutable :class:`maze_puzzle.state.State`
and replaces it with whatever the systems return. It is exclusively owned by
a single caller; there is no internal locking and no state shared between
instances.
"""

import logging
import os
from typing import List, Optional, Tuple, Union

from maze_puzzle.components import Position
from maze_puzzle.directions import Direction
from maze_puzzle.grid import Grid
from maze_puzzle.levels.loader import load_maze_file
from maze_puzzle.solver import auto_solve
from maze_puzzle.state import State, create_state, reset_state
from maze_puzzle.systems.movement import movement_system
from maze_puzzle.systems.terminal import win_system
from maze_puzzle.types import Cell, CharGrid, MoveOutcome, SolveOutcome
from maze_puzzle.utils.maze import generate_maze
from maze_puzzle.utils.terminal import is_end_reached
from maze_puzzle.utils.trail import is_on_trail

logger = logging.getLogger(__name__)


class Maze:
    """A maze plus the live position and trail of whoever is walking it."""

    def __init__(self, rows: CharGrid, seed: Optional[int] = None) -> None:
        """Create a maze from a validated character grid."""
        self.state: State = create_state(Grid.from_rows(rows), seed=seed)

    @classmethod
    def generate(cls, size: int, seed: Optional[int] = None) -> "Maze":
        """Generate a random solvable ``size x size`` maze."""
        return cls(generate_maze(size, seed=seed), seed=seed)

    @classmethod
    def from_file(cls, path: Union[str, "os.PathLike[str]"]) -> "Maze":
        """Load a maze from the text format (see :mod:`maze_puzzle.levels.loader`)."""
        return cls(load_maze_file(path))

    # -------- Queries --------

    @property
    def height(self) -> int:
        return self.state.height

    @property
    def width(self) -> int:
        return self.state.width

    @property
    def live_position(self) -> Position:
        return self.state.live

    @property
    def start_position(self) -> Position:
        return self.state.start

    @property
    def trail(self) -> Tuple[Position, ...]:
        """Positions on the live route, start first."""
        return tuple(self.state.trail)

    @property
    def backtracked(self) -> frozenset[Position]:
        return frozenset(self.state.backtracked)

    def cell_at(self, pos: Position) -> Cell:
        return self.state.grid.cell_at(pos)

    def is_live(self, pos: Position) -> bool:
        return self.state.live == pos

    def is_start(self, pos: Position) -> bool:
        return self.state.start == pos

    def was_visited(self, pos: Position) -> bool:
        return is_on_trail(self.state, pos)

    def was_backtracked(self, pos: Position) -> bool:
        return pos in self.state.backtracked

    def end_reached(self) -> bool:
        return is_end_reached(self.state)

    def to_rows(self) -> List[str]:
        return self.state.grid.to_rows()

    # -------- Mutation --------

    def attempt_move(self, direction: Direction) -> MoveOutcome:
        """Move the live position one step.

        Returns:
            MoveOutcome: ``BLOCKED`` (nothing changed) if a wall is in the way.
        """
        moved = movement_system(self.state, direction)
        if moved is self.state:
            logger.debug("Move %s from %s blocked by wall", direction, self.state.live)
            return MoveOutcome.BLOCKED
        self.state = win_system(moved)
        return MoveOutcome.MOVED

    def auto_solve(self) -> SolveOutcome:
        """Reset, then solve depth-first; the trail is left for rendering."""
        self.state, outcome = auto_solve(self.state)
        return outcome

    def reset(self) -> None:
        self.state = reset_state(self.state)
