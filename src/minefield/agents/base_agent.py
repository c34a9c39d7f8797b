"""
Base agent interface for automated play.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import numpy as np

from ..commands import Command


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    All agents must implement the select_action method to choose
    the next command based on the current observation.
    """

    num_actions = len(Command)

    @abstractmethod
    def select_action(
        self,
        observation: Dict[str, Any],
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: Dict with "board" array and "cursor" index.
            valid_actions: Optional mask of valid actions.

        Returns:
            Command value.
        """
        pass

    def get_valid_actions_from_obs(
        self, observation: Dict[str, Any]
    ) -> np.ndarray:
        """
        Estimate valid actions from the observation alone.

        Every move and flag is allowed; revealing is allowed while the
        cursor sits on a hidden or flagged cell.
        """
        mask = np.ones(self.num_actions, dtype=bool)
        mask[Command.QUIT.value] = False
        board = observation["board"].flatten()
        if board[observation["cursor"]] >= 0:
            mask[Command.REVEAL.value] = False
            mask[Command.TOGGLE_FLAG.value] = False
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
