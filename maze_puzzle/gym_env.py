"""Gymnasium environment wrapper for the maze puzzle.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (trail progress and maze config). Reward is ``1.0`` on the
step that reaches the END cell and ``0.0`` otherwise. ``terminated`` is
``True`` on win, ``truncated`` once ``max_steps`` actions have been taken.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"status": {...}, "config": {...}}}``

Usage:

``env = MazeEnv(config=GameConfig(size=15, seed=3))``

Customization hooks:
    * ``initial_state_fn``: Callable ``(config) -> State`` building each episode.
    * ``render_resolution`` comes from ``GameConfig.resolution``.

The environment is purposely *not* vectorized; wrap externally if needed.
"""

from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from maze_puzzle.actions import Action, GymAction
from maze_puzzle.config import DEFAULT_CONFIG, GameConfig
from maze_puzzle.grid import Grid
from maze_puzzle.renderer.texture import TextureRenderer
from maze_puzzle.state import State, create_state
from maze_puzzle.step import step
from maze_puzzle.utils.maze import bfs_path, generate_maze

ObsType = Dict[str, Any]


def generate_state(config: GameConfig) -> State:
    """Default episode builder: a freshly generated maze."""
    return create_state(
        Grid.from_rows(generate_maze(config.size, seed=config.seed)), seed=config.seed
    )


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (phase and trail progress)."""
    return {
        "phase": "win" if state.win else "ongoing",
        "turn": int(state.turn),
        "live": [state.live.row, state.live.col],
        "trail_length": state.trail_length,
        "backtracked_count": len(state.backtracked),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (seed, dimensions, optimal route length)."""
    return {
        "seed": state.seed if state.seed is not None else -1,
        "width": state.width,
        "height": state.height,
        "shortest_path_length": len(bfs_path(state.grid, state.start, state.end)),
    }


class MazeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the maze puzzle.

    The action space is ``Discrete(len(GymAction))`` covering the four moves;
    see :mod:`maze_puzzle.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        render_mode: str = "texture",
        initial_state_fn: Callable[[GameConfig], State] = generate_state,
    ):
        """Create a new environment instance.

        Arguments:
            config: Maze size, seed, resolution and step limit.
            render_mode: "texture" to return PIL image frames, "human" to open window.
            initial_state_fn: Callable returning the initial ``State`` of an episode.
        """
        self.config = config
        self._initial_state_fn = initial_state_fn
        self._render_mode = render_mode
        self._texture_renderer = TextureRenderer(resolution=config.resolution)

        self.state: Optional[State] = None
        self.steps_taken: int = 0
        self._config_info: Dict[str, Any] = {}

        obs, _ = self.reset()
        image_shape = obs["image"].shape

        text_space_short = spaces.Text(max_length=32)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0, high=255, shape=image_shape, dtype=np.uint8
                ),
                "info": spaces.Dict(
                    {
                        "status": spaces.Dict(
                            {
                                "phase": text_space_short,  # "win" / "ongoing"
                                "turn": int_box(0, 1_000_000_000),
                                "live": spaces.Box(
                                    low=0, high=1_000, shape=(2,), dtype=np.int64
                                ),
                                "trail_length": int_box(1, 1_000_000),
                                "backtracked_count": int_box(0, 1_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "seed": int_box(-1, 2**62),  # -1 when unseeded
                                "width": int_box(5, 999),
                                "height": int_box(5, 999),
                                "shortest_path_length": int_box(0, 1_000_000),
                            }
                        ),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Overrides the configured generator seed for this episode.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        config = self.config if seed is None else replace(self.config, seed=seed)
        self.state = self._initial_state_fn(config)
        self.steps_taken = 0
        self._config_info = env_config_observation_dict(self.state)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = Action[GymAction(int(action)).name]

        was_won = self.state.win
        self.state = step(self.state, step_action)
        self.steps_taken += 1
        reward = 1.0 if self.state.win and not was_won else 0.0
        terminated = self.state.win
        truncated = not terminated and self.steps_taken >= self.config.max_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._texture_renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "status": env_status_observation_dict(self.state),
            "config": self._config_info,
        }

    def _get_obs(self) -> ObsType:
        """Internal helper constructing the full observation."""
        assert self.state is not None
        img = self._texture_renderer.render(self.state)
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
