"""Pillow texture renderer.

Draws one flat-coloured square tile per cell. The live position is drawn as a
disc on top of whatever lies underneath it, so the trail stays visible under
the walker. Tile size is ``resolution // width`` pixels.
"""

from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from maze_puzzle.components import Position
from maze_puzzle.state import State
from maze_puzzle.utils.render import TileType, background_tile_type

DEFAULT_RESOLUTION = 640

Color = Tuple[int, int, int, int]
ColorMap = Dict[TileType, Color]

DEFAULT_COLOR_MAP: ColorMap = {
    TileType.PATH: (240, 240, 240, 255),
    TileType.WALL: (40, 40, 48, 255),
    TileType.START: (46, 160, 67, 255),
    TileType.END: (230, 160, 20, 255),
    TileType.LIVE: (130, 60, 200, 255),
    TileType.TRAIL: (70, 130, 230, 255),
    TileType.BACKTRACKED: (220, 70, 70, 255),
}


def cell_size_for(state: State, resolution: int) -> int:
    return max(1, resolution // state.width)


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    color_map: Optional[ColorMap] = None,
) -> Image.Image:
    """Render ``state`` to an RGBA image.

    Args:
        state (State): State to draw.
        resolution (int): Target image width in pixels; height is scaled.
        color_map (ColorMap | None): Colour per tile type.

    Returns:
        Image.Image: ``(width * cell, height * cell)`` RGBA image.
    """
    colors = color_map or DEFAULT_COLOR_MAP
    cell_size = cell_size_for(state, resolution)
    img = Image.new(
        "RGBA", (state.width * cell_size, state.height * cell_size), colors[TileType.WALL]
    )
    draw = ImageDraw.Draw(img)

    for pos in state.grid.positions():
        x0, y0 = pos.col * cell_size, pos.row * cell_size
        tile = background_tile_type(state, pos)
        if tile == TileType.WALL:
            continue
        draw.rectangle(
            (x0, y0, x0 + cell_size - 1, y0 + cell_size - 1), fill=colors[tile]
        )

    _draw_live(draw, state.live, cell_size, colors[TileType.LIVE])
    return img


def _draw_live(
    draw: ImageDraw.ImageDraw, pos: Position, cell_size: int, color: Color
) -> None:
    inset = cell_size // 5
    x0, y0 = pos.col * cell_size, pos.row * cell_size
    draw.ellipse(
        (x0 + inset, y0 + inset, x0 + cell_size - 1 - inset, y0 + cell_size - 1 - inset),
        fill=color,
    )


class TextureRenderer:
    resolution: int
    color_map: ColorMap

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        color_map: Optional[ColorMap] = None,
    ):
        self.resolution = resolution
        self.color_map = color_map or DEFAULT_COLOR_MAP

    def render(self, state: State) -> Image.Image:
        return render(state, resolution=self.resolution, color_map=self.color_map)
