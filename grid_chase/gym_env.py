"""Gymnasium environment wrapper for Grid Chase.

Each environment step is a one-key path followed by turn resolution, so the
agent is rewarded ``+1`` when the single move lands on the target and the
episode terminates on the first move that does not.

Observation schema:

``{"grid": np.ndarray(rows, cols) of int8 cell codes, "score": np.int64}``

Cell codes follow the declaration order of :class:`grid_chase.types.Cell`
(see :data:`CELL_CODES`).

Usage:

``env = GridChaseEnv(render_mode="texture")``
"""

import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from grid_chase.actions import ACTION_KEYS, Action, GymAction
from grid_chase.config import DEFAULT_CONFIG, GameConfig
from grid_chase.position import Position
from grid_chase.renderer.texture import DEFAULT_RESOLUTION, TextureRenderer
from grid_chase.state import State
from grid_chase.step import initialize, step
from grid_chase.types import Cell

ObsType = Dict[str, Any]

CELL_CODES: Dict[Cell, int] = {cell: code for code, cell in enumerate(Cell)}


def grid_observation(state: State) -> np.ndarray:
    """Encode the grid as an ``int8`` array of cell codes."""
    return np.array(
        [[CELL_CODES[cell] for cell in row] for row in state.grid], dtype=np.int8
    )


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of ``state_info`` (score, phase, turn, positions)."""
    return {
        "score": int(state.score),
        "phase": str(state.phase),
        "turn": int(state.turn),
        "monster": (state.monster.row, state.monster.col),
        "target": (state.target.row, state.target.col),
    }


class GridChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Grid Chase.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_chase.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        config: GameConfig = DEFAULT_CONFIG,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open a window.
            render_resolution: Width (pixels) of rendered image; height is scaled.
            config: Board dimensions; ``reveal_delay`` and ``glyphs`` are unused here.
        """
        self.config = config
        self.state: Optional[State] = None
        self._render_mode = render_mode
        self._texture_renderer = TextureRenderer(resolution=render_resolution)

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=len(Cell) - 1,
                    shape=(config.rows, config.cols),
                    dtype=np.int8,
                ),
                "score": spaces.Box(
                    low=np.array(0, dtype=np.int64),
                    high=np.array(1_000_000_000, dtype=np.int64),
                    shape=(),
                    dtype=np.int64,
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode with freshly drawn monster and target positions.

        Arguments:
            seed: Seeds ``self.np_random`` (placement and respawns).
            options: Gymnasium options (unused).

        Returns:
            Observation dict and info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        rows, cols = self.config.rows, self.config.cols
        monster = Position(
            int(self.np_random.integers(rows)), int(self.np_random.integers(cols))
        )
        target = Position(
            int(self.np_random.integers(rows)), int(self.np_random.integers(cols))
        )
        self.state = initialize(monster, target, self.config)
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
        move = Action[GymAction(int(action)).name]

        if self.state.game_over:
            return self._get_obs(), 0.0, True, False, self._get_info()

        prev_score = self.state.score
        rng = random.Random(int(self.np_random.integers(2**31 - 1)))
        self.state = step(self.state, ACTION_KEYS[move], rng)
        reward = float(self.state.score - prev_score)
        return self._get_obs(), reward, self.state.game_over, False, self._get_info()

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

    def state_info(self) -> Dict[str, Any]:
        assert self.state is not None
        return env_status_observation_dict(self.state)

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {
            "grid": grid_observation(self.state),
            "score": np.int64(self.state.score),
        }

    def _get_info(self) -> Dict[str, object]:
        return self.state_info()
