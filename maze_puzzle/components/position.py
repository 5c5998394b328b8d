"""Position component.

Immutable zero-based grid coordinates. Validity is relative to a grid's
bounds and is not checked here.
"""

from dataclasses import dataclass

from maze_puzzle.types import DIRECTION_DELTAS, Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def moved_in(self, direction: Direction) -> "Position":
        """Return the neighbouring position one step in ``direction``."""
        drow, dcol = DIRECTION_DELTAS[direction]
        return Position(self.row + drow, self.col + dcol)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
