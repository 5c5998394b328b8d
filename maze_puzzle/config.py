"""Game configuration.

``GameConfig`` gathers the knobs shared by the console controller, the
Gymnasium environment and the Streamlit app. Instances are immutable; derive
variants with :func:`dataclasses.replace`.
"""

from dataclasses import dataclass
from typing import Optional

from maze_puzzle.renderer.text import DEFAULT_GLYPH_SET, GLYPH_SET_REGISTRY
from maze_puzzle.renderer.texture import DEFAULT_RESOLUTION
from maze_puzzle.utils.maze import validate_size

DEFAULT_SIZE = 11
DEFAULT_MAX_STEPS = 10_000


@dataclass(frozen=True)
class GameConfig:
    """Settings for building and presenting a maze.

    Attributes:
        size (int): Side length of generated mazes (odd, 5..999).
        seed (int | None): Generator seed; ``None`` draws a fresh one.
        glyph_set (str): Console glyph set name (see ``GLYPH_SET_REGISTRY``).
        resolution (int): Rendered image width in pixels.
        max_steps (int): Episode length limit for the Gymnasium environment.
    """

    size: int = DEFAULT_SIZE
    seed: Optional[int] = None
    glyph_set: str = DEFAULT_GLYPH_SET
    resolution: int = DEFAULT_RESOLUTION
    max_steps: int = DEFAULT_MAX_STEPS

    def __post_init__(self) -> None:
        validate_size(self.size)
        if self.glyph_set not in GLYPH_SET_REGISTRY:
            raise ValueError(f"Unknown glyph set: {self.glyph_set}")
        if self.resolution <= 0:
            raise ValueError("Resolution must be positive")
        if self.max_steps <= 0:
            raise ValueError("max_steps must be positive")


DEFAULT_CONFIG = GameConfig()
