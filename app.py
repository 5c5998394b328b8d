from dataclasses import replace
from typing import Dict, Optional

import streamlit as st
from pyrsistent import thaw

from maze_puzzle.config import DEFAULT_CONFIG, GameConfig
from maze_puzzle.directions import Direction
from maze_puzzle.maze import Maze
from maze_puzzle.renderer.texture import TextureRenderer
from maze_puzzle.solver import SOLVED_MESSAGE, UNSOLVABLE_MESSAGE
from maze_puzzle.step import WALL_MESSAGE
from maze_puzzle.types import MoveOutcome, SolveOutcome

KEY_DIRECTIONS: Dict[str, Direction] = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

st.set_page_config(layout="wide", page_title="Maze Puzzle")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_config() -> None:
    if "game_config" not in st.session_state:
        st.session_state["game_config"] = replace(DEFAULT_CONFIG, seed=0)
        st.session_state["seed_counter"] = 0


def get_config_from_widgets() -> GameConfig:
    game_config: GameConfig = st.session_state["game_config"]

    st.subheader("Maze")
    size: int = st.slider("Maze size", 5, 61, game_config.size, step=2, key="size")
    seed: int = int(
        st.number_input(
            "Seed", min_value=0, value=game_config.seed or 0, step=1, key="seed"
        )
    )
    resolution: int = st.slider(
        "Resolution", 160, 1280, game_config.resolution, step=32, key="resolution"
    )
    return replace(game_config, size=size, seed=seed, resolution=resolution)


def make_maze(config: GameConfig) -> Maze:
    maze = Maze.generate(config.size, seed=config.seed)
    st.session_state["maze"] = maze
    st.session_state["renderer"] = TextureRenderer(resolution=config.resolution)
    st.session_state["notice"] = None
    return maze


def get_keyboard_direction() -> Optional[Direction]:
    value: str = (
        st.text_input(
            "control",
            label_visibility="collapsed",
            key="maze_key_input",
            placeholder="Type: WASD to move, then Enter",
        )
        or ""
    )
    prev_value: str = st.session_state.get("maze_key_input_prev", "")
    st.session_state["maze_key_input_prev"] = value
    if value and value != prev_value:
        return KEY_DIRECTIONS.get(value[-1].lower())
    return None


def do_move(maze: Maze, direction: Direction) -> None:
    if maze.end_reached():
        return
    if maze.attempt_move(direction) == MoveOutcome.BLOCKED:
        st.session_state["notice"] = WALL_MESSAGE
    else:
        st.session_state["notice"] = None


def do_solve(maze: Maze) -> None:
    outcome = maze.auto_solve()
    st.session_state["notice"] = (
        SOLVED_MESSAGE if outcome == SolveOutcome.REACHED_END else UNSOLVABLE_MESSAGE
    )


# --------- Main App ---------
set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: GameConfig = get_config_from_widgets()

    if st.button("🔄 Generate Maze", key="save_config_btn", use_container_width=True):
        st.session_state["seed_counter"] = 0
        st.session_state["game_config"] = config
        make_maze(config)
    st.divider()

with tab_game:
    if "maze" not in st.session_state:
        make_maze(st.session_state["game_config"])

    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        if st.button("🔄 New Maze", key="generate_btn", use_container_width=True):
            st.session_state["seed_counter"] += 1
            current: GameConfig = st.session_state["game_config"]
            make_maze(
                replace(current, seed=(current.seed or 0) + st.session_state["seed_counter"])
            )

        maze: Maze = st.session_state["maze"]
        st.divider()

        direction = get_keyboard_direction()
        if direction is not None:
            do_move(maze, direction)

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                do_move(maze, Direction.UP)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                do_move(maze, Direction.LEFT)
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                do_move(maze, Direction.DOWN)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                do_move(maze, Direction.RIGHT)

        solve_btn, reset_btn = st.columns([1, 1])
        with solve_btn:
            if st.button("🧭 Solve", key="solve_btn", use_container_width=True):
                do_solve(maze)
        with reset_btn:
            if st.button("⏮️ Reset", key="reset_btn", use_container_width=True):
                maze.reset()
                st.session_state["notice"] = None

    with left_col:
        st.info(f"**Moves:** {maze.state.turn}", icon="👣")
        st.info(f"**Trail:** {maze.state.trail_length} cells", icon="🟦")
        st.info(f"**Backtracked:** {len(maze.backtracked)} cells", icon="🟥")
        notice: Optional[str] = st.session_state.get("notice")
        if notice:
            st.warning(notice)

    with middle_col:
        if maze.end_reached():
            st.success("🎉 **Congratulations, you reached the end of the maze!** 🎉")
        renderer: TextureRenderer = st.session_state["renderer"]
        st.image(renderer.render(maze.state), use_container_width=True)

with tab_state:
    st.json(thaw(st.session_state["maze"].state.description), expanded=1)
