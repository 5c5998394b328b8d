"""Maze text format loader.

Format::

    <height> <width>
    <height lines of exactly <width> characters from "#", ".", " ", "S", "E">

Both dimensions are odd and in [5, 999]. Every border cell is ``#`` and there
is exactly one ``S`` and one ``E``. Checks run in file order and the first
violation raises the matching :class:`maze_puzzle.errors.MazeLoadError`.
"""

import logging
import os
import re
from typing import List, Tuple, Union

from maze_puzzle.errors import (
    EmptyMazeFileError,
    InvalidDimensionsError,
    InvalidMazeCharacterError,
    MalformedDimensionsError,
    MazeFileNotFoundError,
    MazeMalformedError,
    MazeSizeMismatchError,
)
from maze_puzzle.grid import CHAR_TO_CELL
from maze_puzzle.types import CharGrid
from maze_puzzle.utils.maze import MAX_SIZE, MIN_SIZE

logger = logging.getLogger(__name__)

VALID_CHARS = frozenset(CHAR_TO_CELL)

# ASCII digits with an optional sign; rejects "0_5" and non-ASCII digits.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_dimensions(line: str, filename: str) -> Tuple[int, int]:
    """Extract ``(height, width)`` from the first line of a maze file."""
    tokens = line.split(" ")
    if len(tokens) != 2 or not tokens[0] or not tokens[1]:
        raise MalformedDimensionsError(
            "First line must contain dimensions separated by a single space", filename
        )
    if not all(INTEGER_PATTERN.fullmatch(token) for token in tokens):
        raise MalformedDimensionsError("Dimensions must be valid numbers", filename)
    height, width = int(tokens[0]), int(tokens[1])

    for dimension in (height, width):
        if dimension < MIN_SIZE or dimension > MAX_SIZE:
            raise InvalidDimensionsError(
                f"Height and width must be between {MIN_SIZE} and {MAX_SIZE} (inclusive)",
                filename,
            )
        if dimension % 2 != 1:
            raise InvalidDimensionsError("Dimensions must be odd", filename)
    return height, width


def validate_maze_rows(rows: CharGrid, width: int, filename: str) -> None:
    """Check row widths, characters, border walls and start/end markers."""
    height = len(rows)
    start_found = False
    end_found = False
    for row, line in enumerate(rows):
        if len(line) != width:
            raise MazeSizeMismatchError(
                "Maze contains a row that doesn't match the given width", filename
            )
        for col, char in enumerate(line):
            if char not in VALID_CHARS:
                raise InvalidMazeCharacterError(
                    f"Invalid maze character found: {char!r}", filename
                )
            at_edge = row in (0, height - 1) or col in (0, width - 1)
            if at_edge and char != "#":
                raise MazeMalformedError("Invalid character at edge of maze", filename)
            if char == "S":
                if start_found:
                    raise MazeMalformedError("Multiple start points found", filename)
                start_found = True
            elif char == "E":
                if end_found:
                    raise MazeMalformedError("Multiple end points found", filename)
                end_found = True

    if not start_found or not end_found:
        raise MazeMalformedError("Missing start and/or end point", filename)


def parse_maze_text(text: str, filename: str = "<string>") -> List[str]:
    """Parse and validate the maze text format.

    Returns:
        List[str]: The validated character rows.

    Raises:
        MazeLoadError: The first violation found, see the module docstring.
    """
    lines = text.splitlines()
    if not lines:
        raise EmptyMazeFileError("File is empty", filename)

    height, width = parse_dimensions(lines[0], filename)
    rows = lines[1:]
    if len(rows) != height:
        raise MazeSizeMismatchError(
            "Number of maze rows doesn't match specified height", filename
        )
    validate_maze_rows(rows, width, filename)
    return rows


def load_maze_file(path: Union[str, "os.PathLike[str]"]) -> List[str]:
    """Read and validate a maze file."""
    filename = os.fspath(path)
    try:
        with open(filename, encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise MazeFileNotFoundError("File could not be found", filename) from exc
    rows = parse_maze_text(text, filename)
    logger.info("Loaded %dx%d maze from %s", len(rows), len(rows[0]), filename)
    return rows


def dump_maze(rows: CharGrid) -> str:
    """Serialize character rows to the maze text format."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    return "\n".join([f"{height} {width}", *rows]) + "\n"
