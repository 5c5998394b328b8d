import pytest

from maze_puzzle.components import Position
from maze_puzzle.directions import Direction
from maze_puzzle.renderer.text import (
    ASCII_GLYPHS,
    EMOJI_GLYPHS,
    TextRenderer,
    render_text,
)
from maze_puzzle.renderer.texture import (
    DEFAULT_COLOR_MAP,
    TextureRenderer,
    cell_size_for,
    render,
)
from maze_puzzle.solver import auto_solve
from maze_puzzle.utils.render import TileType, background_tile_type, tile_type
from tests.test_utils import BRANCH_ROWS, SNAKE_ROWS, make_state, move_all


def test_initial_ascii_render() -> None:
    text = render_text(make_state(SNAKE_ROWS), ASCII_GLYPHS)
    assert text.split("\n") == [
        "#######",
        "#@    #",
        "##### #",
        "#     #",
        "# #####",
        "#    E#",
        "#######",
    ]


def test_solved_ascii_render_shows_trail_and_backtracked() -> None:
    state, _ = auto_solve(make_state(BRANCH_ROWS))
    lines = TextRenderer("ascii").render(state).split("\n")
    assert lines[1] == "#S+++@#"
    assert lines[2] == "#x#####"
    assert lines[3] == "#x#####"


def test_emoji_render_has_one_glyph_per_cell() -> None:
    state = move_all(make_state(SNAKE_ROWS), [Direction.RIGHT])
    lines = render_text(state, EMOJI_GLYPHS).split("\n")
    assert len(lines) == 7
    assert lines[1].startswith(
        EMOJI_GLYPHS[TileType.WALL] + EMOJI_GLYPHS[TileType.START] + EMOJI_GLYPHS[TileType.LIVE]
    )


def test_unknown_glyph_set() -> None:
    with pytest.raises(ValueError):
        TextRenderer("braille")


def test_tile_precedence() -> None:
    state = move_all(make_state(BRANCH_ROWS), [Direction.DOWN, Direction.UP, Direction.RIGHT])
    assert tile_type(state, Position(1, 2)) == TileType.LIVE
    assert background_tile_type(state, Position(1, 2)) == TileType.TRAIL
    assert tile_type(state, Position(1, 1)) == TileType.START
    assert tile_type(state, Position(2, 1)) == TileType.BACKTRACKED
    assert tile_type(state, Position(1, 3)) == TileType.PATH
    assert tile_type(state, Position(1, 5)) == TileType.END
    assert tile_type(state, Position(0, 0)) == TileType.WALL


def test_texture_size() -> None:
    state = make_state(SNAKE_ROWS)
    assert cell_size_for(state, 70) == 10
    assert render(state, resolution=70).size == (70, 70)
    assert render(state, resolution=64).size == (63, 63)
    assert render(state, resolution=3).size == (7, 7)


def test_texture_colors() -> None:
    state = move_all(make_state(SNAKE_ROWS), [Direction.RIGHT])
    img = TextureRenderer(resolution=70).render(state)
    assert img.mode == "RGBA"
    assert img.getpixel((5, 5)) == DEFAULT_COLOR_MAP[TileType.WALL]
    assert img.getpixel((15, 15)) == DEFAULT_COLOR_MAP[TileType.START]
    # live disc drawn over the trail tile at (1, 2)
    assert img.getpixel((25, 15)) == DEFAULT_COLOR_MAP[TileType.LIVE]
    assert img.getpixel((20, 10)) == DEFAULT_COLOR_MAP[TileType.TRAIL]
    assert img.getpixel((35, 15)) == DEFAULT_COLOR_MAP[TileType.PATH]
    assert img.getpixel((55, 55)) == DEFAULT_COLOR_MAP[TileType.END]
