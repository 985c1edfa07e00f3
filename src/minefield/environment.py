"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the game's read/query API and a
plain-text renderer shared with the terminal client.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import (
    FLAGGED_CODE,
    HIDDEN_CODE,
    MARKED_CODE,
    REVEALED_MINE_CODE,
    Visibility,
)
from .config import BoardConfig
from .game import Game
from .generator import BoardGenerator
from .state import Phase


# ============================================================================
# Text Rendering
# ============================================================================

_SYMBOLS = {
    HIDDEN_CODE: ".",
    FLAGGED_CODE: "F",
    MARKED_CODE: "?",
    REVEALED_MINE_CODE: "*",
    0: " ",
}

_REVEALABLE = (Visibility.HIDDEN, Visibility.MARKED)


def render_ansi(game: Game) -> str:
    """Render the player-visible board as ASCII text."""
    obs = game.snapshot()
    rows, cols = game.dimensions
    lines = []
    for row in range(rows):
        row_str = ""
        for col in range(cols):
            val = int(obs[row, col])
            row_str += _SYMBOLS.get(val, str(val)) + " "
        lines.append(row_str)
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = marked cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals cell (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
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
        self.game = Game(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=MARKED_CODE,
            high=REVEALED_MINE_CODE,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._obs = self._blank_observation()

    def _blank_observation(self) -> np.ndarray:
        return np.full(
            (self.config.rows, self.config.cols), HIDDEN_CODE, dtype=np.int8
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = Game(
            self.config,
            marks=self.game.mark_option,
            generator=BoardGenerator(seed=board_seed),
        )
        self._steps = 0
        self._obs = self._blank_observation()

        return self._obs.copy(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        self._sync_observation()

        terminated = self.game.is_over
        truncated = False

        return self._obs.copy(), reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.cols)

    def _sync_observation(self) -> None:
        """Apply only the cells the game reports as changed."""
        for row, col in self.game.drain_changed():
            self._obs[row, col] = self.game.observe(row, col)

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Calculate reward for revealing a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if self.game.is_over:
            return -0.1
        if self.game.cell_at(row, col).visibility not in _REVEALABLE:
            return -0.1

        phase = self.game.reveal(row, col)

        if phase == Phase.WON:
            return 10.0
        if phase == Phase.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.game.revealed_count,
            "safe_revealed": self.game.safe_revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.game.phase.name,
            "flags_remaining": self.game.flags_remaining,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.game)
        if self.render_mode == "human":
            print(render_ansi(self.game))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        if self.game.is_over:
            return np.zeros(self.action_space.n, dtype=bool)
        flat = self._obs.flatten()
        return (flat == HIDDEN_CODE) | (flat == MARKED_CODE)
