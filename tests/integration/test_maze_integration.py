from maze_puzzle.components import Position
from maze_puzzle.directions import Direction
from maze_puzzle.maze import Maze
from maze_puzzle.types import Cell, MoveOutcome, SolveOutcome
from tests.test_utils import (
    BRANCH_ROWS,
    OPEN_ROOM_ROWS,
    SNAKE_ROWS,
    WALLED_OFF_ROWS,
    positions,
)


def test_new_maze_queries() -> None:
    maze = Maze(BRANCH_ROWS)
    assert maze.height == 7
    assert maze.width == 7
    assert maze.live_position == Position(1, 1)
    assert maze.start_position == Position(1, 1)
    assert maze.trail == (Position(1, 1),)
    assert maze.backtracked == frozenset()
    assert maze.is_live(Position(1, 1))
    assert maze.is_start(Position(1, 1))
    assert maze.was_visited(Position(1, 1))
    assert not maze.end_reached()
    assert maze.cell_at(Position(0, 0)) == Cell.WALL
    assert maze.cell_at(Position(1, 5)) == Cell.END


def test_attempt_move() -> None:
    maze = Maze(BRANCH_ROWS)
    assert maze.attempt_move(Direction.UP) == MoveOutcome.BLOCKED
    assert maze.trail == (Position(1, 1),)
    assert maze.attempt_move(Direction.DOWN) == MoveOutcome.MOVED
    assert maze.is_live(Position(2, 1))
    assert maze.attempt_move(Direction.UP) == MoveOutcome.MOVED
    assert maze.was_backtracked(Position(2, 1))
    assert not maze.was_visited(Position(2, 1))


def test_attempt_move_reaches_end() -> None:
    maze = Maze(OPEN_ROOM_ROWS)
    for _ in range(4):
        assert maze.attempt_move(Direction.RIGHT) == MoveOutcome.MOVED
    assert maze.end_reached()
    assert maze.state.win


def test_auto_solve_and_reset() -> None:
    maze = Maze(BRANCH_ROWS)
    assert maze.auto_solve() == SolveOutcome.REACHED_END
    assert maze.end_reached()
    assert maze.trail == tuple(positions((1, 1), (1, 2), (1, 3), (1, 4), (1, 5)))
    maze.reset()
    assert maze.live_position == maze.start_position
    assert maze.trail == (maze.start_position,)
    assert maze.backtracked == frozenset()


def test_auto_solve_unsolvable() -> None:
    maze = Maze(WALLED_OFF_ROWS)
    assert maze.auto_solve() == SolveOutcome.UNSOLVABLE
    assert not maze.end_reached()
    assert maze.live_position == maze.start_position


def test_generate() -> None:
    maze = Maze.generate(9, seed=5)
    assert maze.height == 9
    assert maze.start_position == Position(1, 1)
    assert maze.cell_at(Position(7, 7)) == Cell.END
    assert maze.state.seed == 5
    assert maze.to_rows() == Maze.generate(9, seed=5).to_rows()
    assert maze.auto_solve() == SolveOutcome.REACHED_END


def test_instances_are_independent() -> None:
    first = Maze(BRANCH_ROWS)
    second = Maze(BRANCH_ROWS)
    first.attempt_move(Direction.RIGHT)
    assert second.live_position == Position(1, 1)


def test_leaving_end_clears_win() -> None:
    maze = Maze(SNAKE_ROWS)
    assert maze.auto_solve() == SolveOutcome.REACHED_END
    assert maze.state.win
    assert maze.attempt_move(Direction.LEFT) == MoveOutcome.MOVED
    assert not maze.end_reached()
    assert not maze.state.win
    assert "win" not in maze.state.description
    assert maze.attempt_move(Direction.RIGHT) == MoveOutcome.MOVED
    assert maze.state.win
