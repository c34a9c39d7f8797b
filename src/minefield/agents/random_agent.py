"""
Random agent.

Serves as a baseline by selecting random valid commands.
"""
from typing import Any, Dict, Optional

import numpy as np

from ..commands import Command
from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects commands uniformly at random.

    This provides a baseline for comparing other agents.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility.
        """
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: Dict[str, Any],
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid command.

        Args:
            observation: Dict with "board" array and "cursor" index.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random command value from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions)[0]

        if len(valid_indices) == 0:
            # Nothing left to do
            return Command.QUIT.value

        return int(self.rng.choice(valid_indices))
