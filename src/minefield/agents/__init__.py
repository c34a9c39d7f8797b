"""
Agents that play through the Gymnasium environment.

- RandomAgent: Baseline random command selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
