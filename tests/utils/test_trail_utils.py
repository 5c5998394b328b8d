from maze_puzzle.components import Position
from maze_puzzle.directions import Direction
from maze_puzzle.utils.trail import (
    is_backtracked,
    is_on_trail,
    last_index_of,
    previous_trail_position,
)
from tests.test_utils import BRANCH_ROWS, make_state, move_all


def test_last_index_of() -> None:
    state = move_all(make_state(BRANCH_ROWS), [Direction.RIGHT, Direction.RIGHT])
    assert last_index_of(state, Position(1, 1)) == 0
    assert last_index_of(state, Position(1, 3)) == 2
    assert last_index_of(state, Position(2, 1)) is None


def test_last_index_of_after_loop_back() -> None:
    state = move_all(
        make_state(BRANCH_ROWS), [Direction.RIGHT, Direction.RIGHT, Direction.LEFT]
    )
    assert last_index_of(state, Position(1, 2)) == 1
    assert last_index_of(state, Position(1, 3)) is None
    state = move_all(state, [Direction.RIGHT])
    assert last_index_of(state, Position(1, 3)) == 2


def test_previous_trail_position() -> None:
    state = make_state(BRANCH_ROWS)
    assert previous_trail_position(state) is None
    state = move_all(state, [Direction.DOWN])
    assert previous_trail_position(state) == Position(1, 1)


def test_membership_queries() -> None:
    state = move_all(make_state(BRANCH_ROWS), [Direction.DOWN, Direction.UP])
    assert is_on_trail(state, Position(1, 1))
    assert not is_on_trail(state, Position(2, 1))
    assert is_backtracked(state, Position(2, 1))
    assert not is_backtracked(state, Position(1, 1))
