"""
Agent evaluation over many games.
"""
from typing import Dict, Optional

from .agents.base_agent import BaseAgent
from .board import BoardConfig
from .environment import MinesweeperEnv


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate agents over many games.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 1000,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum commands per episode.
            seed: Seed for the first episode's board.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        losses = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                valid_actions = env.get_action_mask()
                action = agent.select_action(observation, valid_actions)

                observation, reward, terminated, truncated, info = env.step(
                    action
                )

                total_reward += reward
                total_steps += 1

                if terminated or truncated:
                    break

            if info["game_state"] == "WON":
                wins += 1
            elif info["game_state"] == "LOST":
                losses += 1
            total_revealed += info["revealed"]

        return {
            "win_rate": wins / self.num_episodes,
            "loss_rate": losses / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }
