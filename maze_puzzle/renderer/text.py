"""Console text renderer."""

from typing import Dict

from maze_puzzle.components import Position
from maze_puzzle.state import State
from maze_puzzle.utils.render import TileType, tile_type

GlyphSet = Dict[TileType, str]

EMOJI_GLYPHS: GlyphSet = {
    TileType.PATH: "⬜️",
    TileType.WALL: "⬛",
    TileType.START: "🏁",
    TileType.END: "🏠",
    TileType.LIVE: "👤",
    TileType.TRAIL: "🟦",
    TileType.BACKTRACKED: "🟥",
}

ASCII_GLYPHS: GlyphSet = {
    TileType.PATH: " ",
    TileType.WALL: "#",
    TileType.START: "S",
    TileType.END: "E",
    TileType.LIVE: "@",
    TileType.TRAIL: "+",
    TileType.BACKTRACKED: "x",
}

GLYPH_SET_REGISTRY: Dict[str, GlyphSet] = {
    "emoji": EMOJI_GLYPHS,
    "ascii": ASCII_GLYPHS,
}
"""Name to glyph set mapping used by configuration and the CLI."""

DEFAULT_GLYPH_SET = "emoji"


def render_text(state: State, glyphs: GlyphSet = EMOJI_GLYPHS) -> str:
    """Render the maze as newline-separated rows of glyphs."""
    return "\n".join(
        "".join(
            glyphs[tile_type(state, Position(row, col))] for col in range(state.width)
        )
        for row in range(state.height)
    )


class TextRenderer:
    glyphs: GlyphSet

    def __init__(self, glyph_set: str = DEFAULT_GLYPH_SET):
        if glyph_set not in GLYPH_SET_REGISTRY:
            raise ValueError(f"Unknown glyph set: {glyph_set}")
        self.glyphs = GLYPH_SET_REGISTRY[glyph_set]

    def render(self, state: State) -> str:
        return render_text(state, self.glyphs)
