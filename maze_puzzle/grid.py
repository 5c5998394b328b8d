"""Immutable cell grid.

A :class:`Grid` is built from an already validated character grid (see
:mod:`maze_puzzle.levels.loader` and :mod:`maze_puzzle.utils.maze`). No
re-validation of the maze invariants happens here; only the character
vocabulary is checked because an unknown character has no ``Cell``.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from maze_puzzle.components import Position
from maze_puzzle.types import Cell, CharGrid

CHAR_TO_CELL: Dict[str, Cell] = {
    "#": Cell.WALL,
    " ": Cell.PATH,
    ".": Cell.PATH,
    "S": Cell.START,
    "E": Cell.END,
}

CELL_TO_CHAR: Dict[Cell, str] = {
    Cell.WALL: "#",
    Cell.PATH: " ",
    Cell.START: "S",
    Cell.END: "E",
}


def cell_from_char(char: str) -> Cell:
    """Map a maze file character to its ``Cell``."""
    try:
        return CHAR_TO_CELL[char]
    except KeyError:
        raise ValueError(f"Invalid maze component: {char!r}") from None


@dataclass(frozen=True)
class Grid:
    """Rectangular grid of cells.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        cells: ``cells[row][col]`` classification.
    """

    height: int
    width: int
    cells: Tuple[Tuple[Cell, ...], ...]

    @classmethod
    def from_rows(cls, rows: CharGrid) -> "Grid":
        """Parse a validated character grid."""
        cells = tuple(tuple(cell_from_char(char) for char in row) for row in rows)
        height = len(cells)
        width = len(cells[0]) if cells else 0
        return cls(height=height, width=width, cells=cells)

    def to_rows(self) -> List[str]:
        """Character representation (paths are written as spaces)."""
        return ["".join(CELL_TO_CHAR[cell] for cell in row) for row in self.cells]

    def cell_at(self, pos: Position) -> Cell:
        self._check_bounds(pos)
        return self.cells[pos.row][pos.col]

    def is_wall(self, pos: Position) -> bool:
        return self.cell_at(pos) == Cell.WALL

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield Position(row, col)

    def find(self, cell: Cell) -> Position:
        """Return the first position holding ``cell``.

        Raises:
            ValueError: If no such cell exists.
        """
        for pos in self.positions():
            if self.cells[pos.row][pos.col] == cell:
                return pos
        raise ValueError(f"Grid has no {cell} cell")

    # -------- Internal helpers --------

    def _check_bounds(self, pos: Position) -> None:
        if not (0 <= pos.row < self.height and 0 <= pos.col < self.width):
            raise IndexError(
                f"Out of bounds: {pos} for grid {self.height}x{self.width}"
            )
