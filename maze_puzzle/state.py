"""Core immutable traversal ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a maze
and the progress made through it at a single point in time. All systems are
pure functions that take a previous ``State`` plus inputs (e.g. a
``Direction``) and return a *new* ``State``; no mutation happens in-place.
The mutable :class:`maze_puzzle.maze.Maze` facade simply swaps its current
``State`` for the one returned by the systems.

Design notes:

* The live route is stored as a persistent linked list (``route``, live
    position first) plus a persistent map from each route position to its
    index in start-first order (``trail_index``). Stepping forward conses one
    cell; looping back pops cells off the front. Both are O(1) per cell, and
    membership is a map lookup.
* ``trail`` is the start-first view of ``route`` as a ``PVector``. It always
    starts with ``start`` and always ends with ``live``. Building it walks the
    whole route, so hot paths use ``route`` and ``trail_index`` instead.
* ``backtracked`` is a persistent set of positions abandoned when the live
    route looped back past them. It never intersects the trail.
* ``win`` is True exactly when the live position is the END cell, as
    maintained by ``win_system``. The reducer short-circuits movement once won.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from pyrsistent import PList, PSet, PVector, plist, pmap, pset, pvector
from pyrsistent.typing import PMap

from maze_puzzle.components import Position
from maze_puzzle.grid import Grid
from maze_puzzle.types import Cell


@dataclass(frozen=True)
class State:
    """Immutable maze traversal state.

    Attributes:
        grid (Grid): The immutable cell grid.
        start (Position): START cell; fixed for the maze's lifetime.
        end (Position): END cell.
        live (Position): Current position of the user or solver.
        route (PList[Position]): Positions on the live route, ``live`` first
            and ``start`` last.
        trail_index (PMap[Position, int]): Index of every route position in
            start-first order.
        backtracked (PSet[Position]): Positions once on the trail, since
            abandoned.
        turn (int): Number of successful moves since the last reset.
        win (bool): True while ``live`` is the END cell.
        message (str | None): Optional informational message.
        seed (int | None): Seed the grid was generated with, if any.
    """

    grid: Grid
    start: Position
    end: Position
    live: Position
    route: PList[Position] = plist()
    trail_index: PMap[Position, int] = pmap()
    backtracked: PSet[Position] = pset()

    turn: int = 0
    win: bool = False
    message: Optional[str] = None

    seed: Optional[int] = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def trail(self) -> PVector[Position]:
        """Positions on the live route from ``start`` to ``live``, in visiting order."""
        return pvector(reversed(list(self.route)))

    @property
    def trail_length(self) -> int:
        return len(self.trail_index)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        The grid is reported as its character rows and positions as
        ``[row, col]`` pairs so the result can be dumped as JSON.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields.
        """
        description: PMap[str, Any] = pmap(
            {
                "grid": self.grid.to_rows(),
                "start": [self.start.row, self.start.col],
                "end": [self.end.row, self.end.col],
                "live": [self.live.row, self.live.col],
                "trail": [[p.row, p.col] for p in self.trail],
            }
        )
        if self.backtracked:
            description = description.set(
                "backtracked",
                sorted([p.row, p.col] for p in self.backtracked),
            )
        for field in ("turn", "win", "message", "seed"):
            value = getattr(self, field)
            if value:
                description = description.set(field, value)
        return description


def create_state(grid: Grid, seed: Optional[int] = None) -> State:
    """Build the initial state for ``grid``.

    The live position starts on the START cell and the trail holds only that
    cell.
    """
    start = grid.find(Cell.START)
    return State(
        grid=grid,
        start=start,
        end=grid.find(Cell.END),
        live=start,
        route=plist([start]),
        trail_index=pmap({start: 0}),
        seed=seed,
    )


def reset_state(state: State) -> State:
    """Return to the start: trail is ``[start]``, nothing backtracked."""
    return replace(
        state,
        live=state.start,
        route=plist([state.start]),
        trail_index=pmap({state.start: 0}),
        backtracked=pset(),
        turn=0,
        win=False,
        message=None,
    )
