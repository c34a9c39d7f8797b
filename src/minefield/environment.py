"""
Gymnasium environment wrapper for the minefield rule engine.

Actions are the abstract player commands, so agents steer a cursor
exactly as a human player would.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .cell import CellState
from .commands import Command, CommandProcessor
from .console import render
from .state import GameState, GameStatus


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for cursor-driven Minesweeper.

    Observation:
        Dict with
        - "board": 2D array (-1 hidden, -2 flagged, 0-8 count, 9 mine)
        - "cursor": flat index of the selected cell

    Actions:
        Discrete action space with one action per Command.

    Rewards:
        - +1 for every cell a reveal uncovers
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a command that changed nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 20x20 at 15% mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.processor = CommandProcessor()
        self.state = GameState.new_game(
            self.config, random.Random(self.config.seed)
        )

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=-2,
                    high=9,
                    shape=(self.config.height, self.config.width),
                    dtype=np.int8,
                ),
                "cursor": spaces.Discrete(self.config.size),
            }
        )
        self.action_space = spaces.Discrete(len(Command))

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        Start a new game on a freshly generated board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(2**31)))
        self.state = GameState.new_game(self.config, rng)
        self._steps = 0
        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, Any], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Apply one command.

        Args:
            action: Command value.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        command = Command(int(action))
        self._steps += 1

        hidden_before = self.state.hidden_remaining
        changed = self.processor.apply(self.state, command)
        reward = self._calculate_reward(
            changed, hidden_before - self.state.hidden_remaining
        )

        terminated = not self.state.is_playing
        return (
            self._get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def _calculate_reward(self, changed: bool, uncovered: int) -> float:
        if self.state.status == GameStatus.LOST:
            return -10.0
        if not changed:
            return -0.1
        reward = float(uncovered)
        if self.state.status == GameStatus.WON:
            reward += 10.0
        return reward

    def _get_observation(self) -> Dict[str, Any]:
        return {
            "board": self.state.get_observation(),
            "cursor": self.state.cursor,
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.state.board.count(CellState.REVEALED),
            "flags_remaining": self.state.flags_remaining,
            "game_state": self.state.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render(self.state.snapshot())
        if self.render_mode == "human":
            print(render(self.state.snapshot()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Quitting is never offered.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for command in self.processor.available_commands(self.state):
            if command != Command.QUIT:
                mask[command.value] = True
        return mask
