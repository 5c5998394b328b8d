import random
from typing import List

import pytest

from maze_puzzle.components import Position
from maze_puzzle.grid import Grid
from maze_puzzle.levels.loader import dump_maze, parse_maze_text
from maze_puzzle.utils.maze import (
    FILLER_PATH,
    MAIN_PATH,
    WALL,
    bfs_path,
    carve_path,
    generate_maze,
    maze_nodes,
    validate_size,
)
from tests.test_utils import SNAKE_ROWS, WALLED_OFF_ROWS, assert_valid_maze_rows

SIZES = [5, 7, 9, 11, 15, 21, 31]
SEEDS = list(range(8))


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("seed", SEEDS)
def test_generated_maze_invariants(size: int, seed: int) -> None:
    rows = generate_maze(size, seed=seed)
    assert_valid_maze_rows(rows, size)
    assert rows[1][1] == "S"
    assert rows[size - 2][size - 2] == "E"


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("seed", SEEDS)
def test_generated_maze_passes_loader_validation(size: int, seed: int) -> None:
    rows = generate_maze(size, seed=seed)
    assert parse_maze_text(dump_maze(rows)) == rows


@pytest.mark.parametrize("seed", SEEDS)
def test_every_node_is_open_and_lattice_corners_are_walls(seed: int) -> None:
    size = 15
    rows = generate_maze(size, seed=seed)
    for row in range(1, size - 1):
        for col in range(1, size - 1):
            if row % 2 == 1 and col % 2 == 1:
                assert rows[row][col] != "#"
            if row % 2 == 0 and col % 2 == 0:
                assert rows[row][col] == "#"


@pytest.mark.parametrize("seed", SEEDS)
def test_start_connected_to_end(seed: int) -> None:
    rows = generate_maze(21, seed=seed)
    grid = Grid.from_rows(rows)
    path = bfs_path(grid, Position(1, 1), Position(19, 19))
    assert path[0] == Position(1, 1)
    assert path[-1] == Position(19, 19)


def test_same_seed_same_maze() -> None:
    assert generate_maze(25, seed=42) == generate_maze(25, seed=42)


def test_injected_rng_is_used() -> None:
    assert generate_maze(25, rng=random.Random(7)) == generate_maze(25, seed=7)


def test_different_seeds_usually_differ() -> None:
    mazes = {tuple(generate_maze(21, seed=seed)) for seed in range(10)}
    assert len(mazes) > 1


@pytest.mark.parametrize("size", [-1, 0, 3, 4, 6, 10, 1000, 1001])
def test_invalid_sizes_rejected(size: int) -> None:
    with pytest.raises(ValueError):
        validate_size(size)
    with pytest.raises(ValueError):
        generate_maze(size, seed=0)


@pytest.mark.parametrize("size", [5, 999])
def test_size_bounds_accepted(size: int) -> None:
    validate_size(size)


def test_maze_nodes() -> None:
    assert maze_nodes(3) == [
        Position(0, 0),
        Position(0, 2),
        Position(2, 0),
        Position(2, 2),
    ]


def _blank_cells(inner_size: int) -> dict:
    return {
        Position(row, col): WALL
        for row in range(inner_size)
        for col in range(inner_size)
    }


def test_carve_path_stops_when_stuck() -> None:
    # 3x3 interior: the lattice has four nodes, the walk from the origin can
    # visit all of them at most once.
    cells = _blank_cells(3)
    reached = carve_path(cells, Position(0, 0), MAIN_PATH, Position(2, 2), random.Random(1))
    opened: List[Position] = [pos for pos, cell in cells.items() if cell == MAIN_PATH]
    assert Position(0, 0) in opened
    assert cells[Position(1, 1)] == WALL
    assert reached == (cells[Position(2, 2)] == MAIN_PATH)


def test_carve_path_merges_into_other_class() -> None:
    cells = _blank_cells(3)
    for pos in (Position(0, 0), Position(0, 1), Position(0, 2)):
        cells[pos] = MAIN_PATH
    # Only move from (2, 0) is the merge into (0, 0); (2, 2) is not a wall.
    cells[Position(2, 2)] = "x"
    reached = carve_path(cells, Position(2, 0), FILLER_PATH, Position(2, 2), random.Random(0))
    assert not reached
    assert cells[Position(1, 0)] == FILLER_PATH
    assert cells[Position(0, 0)] == FILLER_PATH
    assert cells[Position(2, 0)] == FILLER_PATH


def test_bfs_path_on_fixed_grids() -> None:
    grid = Grid.from_rows(SNAKE_ROWS)
    assert len(bfs_path(grid, Position(1, 1), Position(5, 5))) == 17
    walled = Grid.from_rows(WALLED_OFF_ROWS)
    assert bfs_path(walled, Position(1, 1), Position(1, 5)) == []
    assert bfs_path(walled, Position(1, 1), Position(1, 1)) == [Position(1, 1)]
