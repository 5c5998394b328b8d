"""Randomized braid-maze generator and grid search helpers.

The interior of an ``size x size`` maze (border excluded) is modelled as a
lattice of *nodes* at even (row, col) offsets; the odd cell between two
adjacent nodes is the wall or opening joining them. Paths are carved two
cells at a time and tagged with a *path class*:

* ``MAIN_PATH`` paths grow from the start node until one reaches the end node.
* ``FILLER_PATH`` paths then start from random leftover wall nodes and run
    until they join a main path or get stuck.

Filler paths that join the main network create loops, so the result is a
braid maze rather than a perfect one. Path-class markers are replaced by open
cells before the grid is returned.
"""

import logging
import random
from collections import deque
from typing import Dict, List, Optional

from maze_puzzle.components import Position
from maze_puzzle.directions import DIRECTION_DELTAS, Direction
from maze_puzzle.grid import Grid

logger = logging.getLogger(__name__)

MIN_SIZE = 5
MAX_SIZE = 999

WALL = "#"
SPACE = " "
START = "S"
END = "E"
MAIN_PATH = "a"
FILLER_PATH = "b"
OUT_OF_BOUNDS = "!"

PATH_CLASSES = (MAIN_PATH, FILLER_PATH)

# Interior cells keyed by position; absent keys are outside the interior.
CellMap = Dict[Position, str]


def validate_size(size: int) -> None:
    """Raise ``ValueError`` unless ``size`` is odd and within range."""
    if size < MIN_SIZE or size > MAX_SIZE or size % 2 != 1:
        raise ValueError(
            f"Invalid size {size}: must be odd and between {MIN_SIZE} and {MAX_SIZE}"
        )


def maze_nodes(inner_size: int) -> List[Position]:
    """All node positions (even coordinates) of the interior, row-major."""
    count = (inner_size + 1) // 2
    return [Position(i * 2, j * 2) for i in range(count) for j in range(count)]


def nodes_of_class(cells: CellMap, nodes: List[Position], cell: str) -> List[Position]:
    return [node for node in nodes if cells[node] == cell]


def carve_path(
    cells: CellMap,
    origin: Position,
    path_class: str,
    end: Position,
    rng: random.Random,
) -> bool:
    """Carve a random path from ``origin`` until it merges or gets stuck.

    A direction is a continuation candidate if the node two cells away is
    still a wall, and a merge candidate if that node belongs to a path of a
    different class. Candidates are pooled and one is picked uniformly.
    Picking a merge candidate ends the path after joining.

    Returns:
        bool: True if the path opened the ``end`` node.
    """
    reached_end = False
    cells[origin] = path_class
    pos = origin
    while True:
        candidates: List[tuple[Direction, bool]] = []
        for direction in DIRECTION_DELTAS:
            far_cell = cells.get(pos.moved_in(direction).moved_in(direction), OUT_OF_BOUNDS)
            merge = far_cell in PATH_CLASSES and far_cell != path_class
            if far_cell == WALL or merge:
                candidates.append((direction, merge))

        if not candidates:
            return reached_end

        direction, merge = rng.choice(candidates)
        link = pos.moved_in(direction)
        far = link.moved_in(direction)
        cells[link] = path_class
        cells[far] = path_class
        if far == end:
            reached_end = True
        if merge:
            return reached_end
        pos = far


def _pop_random_wall_node(
    cells: CellMap, walls: List[Position], rng: random.Random
) -> Optional[Position]:
    """Uniformly pick a node that is still a wall, discarding stale entries."""
    while walls:
        index = rng.randrange(len(walls))
        node = walls[index]
        walls[index] = walls[-1]
        walls.pop()
        if cells[node] == WALL:
            return node
    return None


def populate(cells: CellMap, inner_size: int, rng: random.Random) -> None:
    """Carve main paths until solvable, then fill every leftover wall node."""
    nodes = maze_nodes(inner_size)
    start = Position(0, 0)
    end = Position(inner_size - 1, inner_size - 1)

    cells[start] = MAIN_PATH
    solvable = False
    passes = 0
    while not solvable:
        passes += 1
        for node in nodes_of_class(cells, nodes, MAIN_PATH):
            if carve_path(cells, node, MAIN_PATH, end, rng):
                solvable = True
                break
    logger.debug("Main route reached the end after %d pass(es)", passes)

    walls = nodes_of_class(cells, nodes, WALL)
    fillers = 0
    while (node := _pop_random_wall_node(cells, walls, rng)) is not None:
        carve_path(cells, node, FILLER_PATH, end, rng)
        fillers += 1
    logger.debug("Carved %d filler path(s)", fillers)

    for pos, cell in cells.items():
        if cell in PATH_CLASSES:
            cells[pos] = SPACE
    cells[start] = START
    cells[end] = END


def surround(cells: CellMap, inner_size: int) -> List[str]:
    """Render the interior with a one-cell wall border."""
    size = inner_size + 2
    rows: List[str] = [WALL * size]
    for row in range(inner_size):
        inner = "".join(cells[Position(row, col)] for col in range(inner_size))
        rows.append(WALL + inner + WALL)
    rows.append(WALL * size)
    return rows


def generate_maze(
    size: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Generate a solvable ``size x size`` maze as character rows.

    START is placed at (1, 1) and END at (size - 2, size - 2).

    Args:
        size: Odd side length in [5, 999], border included.
        seed: Seed for a fresh ``random.Random`` when ``rng`` is not given.
        rng: Random source to draw every carving choice from.

    Raises:
        ValueError: If ``size`` is even or out of range.
    """
    validate_size(size)
    if rng is None:
        rng = random.Random(seed)
    inner_size = size - 2
    cells: CellMap = {
        Position(row, col): WALL
        for row in range(inner_size)
        for col in range(inner_size)
    }
    populate(cells, inner_size, rng)
    logger.info("Generated %dx%d maze (seed=%s)", size, size, seed)
    return surround(cells, inner_size)


def bfs_path(grid: Grid, start: Position, goal: Position) -> List[Position]:
    """Finds the shortest path from start to goal using BFS.
    Only traverses non-wall cells.
    Returns the path as a list of positions (including both start and goal), or [] if unreachable.
    """
    if start == goal:
        return [start]
    queue: deque[Position] = deque([start])
    prev: Dict[Position, Position] = {}
    visited: set[Position] = {start}

    while queue:
        pos = queue.popleft()
        for direction in DIRECTION_DELTAS:
            np = pos.moved_in(direction)
            if np in visited or grid.is_wall(np):
                continue
            prev[np] = pos
            queue.append(np)
            visited.add(np)
            if np == goal:
                # Early exit
                queue.clear()
                break

    # Reconstruct path
    path: List[Position] = []
    if goal in visited:
        p = goal
        while p != start:
            path.append(p)
            p = prev[p]
        path.append(start)
        path.reverse()
    return path
