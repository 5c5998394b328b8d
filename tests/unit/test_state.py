from dataclasses import replace

import pytest

from maze_puzzle.components import Position
from maze_puzzle.config import DEFAULT_CONFIG, GameConfig
from maze_puzzle.directions import Direction
from maze_puzzle.state import reset_state
from tests.test_utils import BRANCH_ROWS, SNAKE_ROWS, make_state, move_all


def test_initial_state() -> None:
    state = make_state(SNAKE_ROWS)
    assert state.start == Position(1, 1)
    assert state.end == Position(5, 5)
    assert state.live == state.start
    assert list(state.trail) == [state.start]
    assert not state.backtracked
    assert state.width == 7
    assert state.height == 7


def test_description_of_initial_state_is_sparse() -> None:
    description = make_state(SNAKE_ROWS).description
    assert description["grid"] == SNAKE_ROWS
    assert description["live"] == [1, 1]
    assert description["trail"] == [[1, 1]]
    for absent in ("backtracked", "turn", "win", "message", "seed"):
        assert absent not in description


def test_description_after_moves() -> None:
    state = move_all(make_state(BRANCH_ROWS), [Direction.DOWN, Direction.UP])
    state = replace(state, seed=9)
    description = state.description
    assert description["backtracked"] == [[2, 1]]
    assert description["turn"] == 2
    assert description["seed"] == 9


def test_reset_state_keeps_grid_and_seed() -> None:
    state = move_all(make_state(BRANCH_ROWS), [Direction.DOWN, Direction.UP])
    state = replace(state, seed=4, message="hello")
    fresh = reset_state(state)
    assert fresh.grid is state.grid
    assert fresh.seed == 4
    assert fresh.live == fresh.start
    assert list(fresh.trail) == [fresh.start]
    assert not fresh.backtracked
    assert fresh.turn == 0
    assert fresh.message is None


def test_default_config() -> None:
    assert DEFAULT_CONFIG.size == 11
    assert DEFAULT_CONFIG.glyph_set == "emoji"
    assert replace(DEFAULT_CONFIG, seed=3).seed == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 8},
        {"size": 3},
        {"glyph_set": "braille"},
        {"resolution": 0},
        {"max_steps": 0},
    ],
)
def test_invalid_config(kwargs) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)
