"""Exception hierarchy.

Loader failures all derive from :class:`MazeLoadError` and carry the name of
the offending file; their message reads ``"<message> (filename: <name>)"``.
Blocked moves and unsolvable mazes are *not* errors: they are reported as
:class:`maze_puzzle.types.MoveOutcome` / ``SolveOutcome`` values.
"""

from typing import Optional


class MazeLoadError(Exception):
    """Base class for problems reading a maze description."""

    def __init__(self, message: str, filename: Optional[str] = None) -> None:
        self.filename = filename
        if filename is not None:
            message = f"{message} (filename: {filename})"
        super().__init__(message)


class MazeFileNotFoundError(MazeLoadError, FileNotFoundError):
    """The maze file does not exist or could not be read."""


class EmptyMazeFileError(MazeLoadError, ValueError):
    """The maze file has no lines."""


class MalformedDimensionsError(MazeLoadError, ValueError):
    """The first line is not two integers separated by a single space."""


class InvalidDimensionsError(MazeLoadError, ValueError):
    """A dimension is out of range or even."""


class MazeSizeMismatchError(MazeLoadError):
    """The grid does not match the dimensions given on the first line."""


class InvalidMazeCharacterError(MazeLoadError, ValueError):
    """The grid contains a character outside the maze vocabulary."""


class MazeMalformedError(MazeLoadError):
    """Border walls or start/end markers are wrong."""


class TrailInvariantError(RuntimeError):
    """The trail no longer describes a connected route (internal bug)."""
