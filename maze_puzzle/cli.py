"""Console controller and launcher.

``maze-puzzle [FILE] [--size N] [--seed S] [--ascii] [--gui] [--verbose]``

Without FILE a maze of ``--size`` is generated. The read-evaluate loop reads
``W``/``A``/``S``/``D`` to move or ``solve`` to run the auto-solver, and ends
once the END cell is reached or input runs out.
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from maze_puzzle.config import DEFAULT_SIZE, GameConfig
from maze_puzzle.directions import Direction
from maze_puzzle.errors import MazeLoadError
from maze_puzzle.maze import Maze
from maze_puzzle.renderer.text import TextRenderer
from maze_puzzle.solver import SOLVED_MESSAGE, UNSOLVABLE_MESSAGE
from maze_puzzle.step import CONGRATULATIONS_MESSAGE, WALL_MESSAGE
from maze_puzzle.types import MoveOutcome, SolveOutcome

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[str, Direction] = {
    "W": Direction.UP,
    "A": Direction.LEFT,
    "S": Direction.DOWN,
    "D": Direction.RIGHT,
}

SOLVE_COMMAND = "solve"
PROMPT = "Enter a direction to move (W, A, S or D) or type solve to autosolve: "
INVALID_DIRECTION_MESSAGE = "Invalid direction, please try again."
GUI_HINT = "Launch the graphical version with: streamlit run app.py"


def parse_direction(text: str) -> Direction:
    """Map a single WASD key (any case) to a direction.

    Raises:
        ValueError: If ``text`` is not exactly one of the WASD keys.
    """
    key = text.strip().upper()
    if len(key) != 1 or key not in KEY_DIRECTIONS:
        raise ValueError(f"Invalid direction: {text!r}")
    return KEY_DIRECTIONS[key]


class TextController:
    """Read-evaluate loop driving a :class:`Maze` from text input."""

    def __init__(
        self,
        maze: Maze,
        renderer: TextRenderer,
        source: str = "auto-generated maze",
        input_fn: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
    ):
        self.maze = maze
        self.renderer = renderer
        self.source = source
        self.input_fn = input_fn or input
        self.out = out or sys.stdout
        self.completed = False

    def show(self) -> None:
        print(self.renderer.render(self.maze.state), file=self.out)

    def say(self, message: str) -> None:
        print(message, file=self.out)

    def handle(self, line: str) -> None:
        """Apply one line of user input."""
        if line.strip().lower() == SOLVE_COMMAND:
            outcome = self.maze.auto_solve()
            self.show()
            if outcome == SolveOutcome.REACHED_END:
                self.say(SOLVED_MESSAGE)
                self.completed = True
            else:
                self.say(UNSOLVABLE_MESSAGE)
            return

        try:
            direction = parse_direction(line)
        except ValueError:
            self.say(INVALID_DIRECTION_MESSAGE)
            return

        if self.maze.attempt_move(direction) == MoveOutcome.BLOCKED:
            self.say(WALL_MESSAGE)
            return
        self.show()
        if self.maze.end_reached():
            self.say(CONGRATULATIONS_MESSAGE)
            self.completed = True

    def run(self) -> None:
        self.say(f"\nNow viewing: {self.source}\n")
        self.show()
        while not self.completed:
            try:
                line = self.input_fn(PROMPT)
            except EOFError:
                logger.debug("Input closed before the maze was completed")
                break
            self.handle(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-puzzle", description="Walk or auto-solve a maze in the console"
    )
    parser.add_argument("file", nargs="?", help="Maze file to load (generated if omitted)")
    parser.add_argument(
        "--size", type=int, default=DEFAULT_SIZE, help="Side length of a generated maze"
    )
    parser.add_argument("--seed", type=int, default=None, help="Generator seed")
    parser.add_argument(
        "--ascii", action="store_true", help="Use plain ASCII glyphs instead of emoji"
    )
    parser.add_argument(
        "--gui", action="store_true", help="Print how to start the graphical app"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.gui:
        print(GUI_HINT)
        return 0

    try:
        config = GameConfig(
            size=args.size,
            seed=args.seed,
            glyph_set="ascii" if args.ascii else "emoji",
        )
        if args.file:
            maze = Maze.from_file(args.file)
            source = args.file
        else:
            maze = Maze.generate(config.size, seed=config.seed)
            source = "auto-generated maze"
    except (MazeLoadError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    TextController(maze, TextRenderer(config.glyph_set), source=source).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
