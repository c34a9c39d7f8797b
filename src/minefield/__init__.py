"""
Minefield rule engine.

Provides the board model, cascading reveal and the command-driven
state machine of a Minesweeper-style game.
"""
from .adjacency import neighbors, to_coords, to_index
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    ConfigurationError,
    generate_board,
    place_mines,
    BEGINNER,
    INTERMEDIATE,
    CLASSIC,
)
from .reveal import reveal
from .state import CellView, GameSnapshot, GameState, GameStatus
from .commands import Command, CommandProcessor
from .environment import MinesweeperEnv

__all__ = [
    "neighbors",
    "to_coords",
    "to_index",
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "generate_board",
    "place_mines",
    "BEGINNER",
    "INTERMEDIATE",
    "CLASSIC",
    "reveal",
    "CellView",
    "GameSnapshot",
    "GameState",
    "GameStatus",
    "Command",
    "CommandProcessor",
    "MinesweeperEnv",
]
