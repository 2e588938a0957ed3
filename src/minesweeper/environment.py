"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the game controller so that
automated players can drive the rules engine.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .cell import CellState, MISTAKE_OBSERVATION
from .controller import GameController, GameState


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = wrongly flagged cell (after game over)
        - 0-8 = exposed cell with adjacent mine count
        - 9 = exposed or detonated mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i % cols, i // cols);
        action rows * cols + i flags the same cell.

    Rewards:
        - +10 for winning the game
        - -10 for hitting a mine
        - +1 for an action that changed the board
        - -0.1 for an action that changed nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.controller = GameController.from_config(self.config)

        self.observation_space = spaces.Box(
            low=MISTAKE_OBSERVATION,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.controller = GameController.from_config(
            self.config, rng=self.np_random
        )
        self._steps = 0
        return self.controller.board.to_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, x, y = self._decode_action(int(action))
        self._steps += 1

        before = self.controller.board
        if is_flag:
            state = self.controller.flag(x, y)
        else:
            state = self.controller.reveal(x, y)
        changed = self.controller.board is not before

        observation = self.controller.board.to_observation()
        reward = self._calculate_reward(state, changed)
        terminated = self.controller.is_terminal

        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert an action index to (is_flag, x, y)."""
        is_flag, index = divmod(action, self.config.total_cells)
        y, x = divmod(index, self.config.cols)
        return bool(is_flag), x, y

    @staticmethod
    def _calculate_reward(state: GameState, changed: bool) -> float:
        if state == GameState.WON:
            return 10.0
        if state == GameState.LOST:
            return -10.0
        return 1.0 if changed else -0.1

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.controller.board
        return {
            "steps": self._steps,
            "moves": self.controller.moves,
            "exposed": board.count_state(CellState.EXPOSED),
            "flags": board.flag_count,
            "remaining_mines": self.controller.remaining_mines,
            "game_state": self.controller.state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        symbols = {-1: ".", -2: "F", -3: "X", 0: " ", 9: "*"}
        lines = []
        for row in self.controller.board.to_observation():
            lines.append(" ".join(symbols.get(int(val), str(val)) for val in row))
        return "\n".join(lines)

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Hidden cells can be revealed or flagged; flagged cells can only
        be unflagged. Nothing is valid once the game is over.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.controller.is_terminal:
            return mask
        total = self.config.total_cells
        for x, y, cell in self.controller.board.cells():
            index = y * self.config.cols + x
            if cell.is_hidden:
                mask[index] = True
                mask[total + index] = True
            elif cell.is_flagged:
                mask[total + index] = True
        return mask
