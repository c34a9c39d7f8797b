"""
Game state for a single minefield game.

The state is created once per game and only mutated by the
command processor.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
import random
from typing import Optional, Tuple

import numpy as np

from .adjacency import to_coords
from .board import Board, BoardConfig, generate_board
from .cell import Cell, CellState


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


# ============================================================================
# Read-only Snapshot
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What a renderer may know about a cell.

    ``adjacent_mines`` and ``is_mine`` are None unless the cell is
    revealed.
    """

    state: CellState
    adjacent_mines: Optional[int] = None
    is_mine: Optional[bool] = None


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of a game, sufficient to draw it."""

    width: int
    height: int
    cells: Tuple[CellView, ...]
    cursor: int
    flags_remaining: int
    status: GameStatus

    @property
    def cursor_position(self) -> Tuple[int, int]:
        return to_coords(self.cursor, self.width)


# ============================================================================
# Game State
# ============================================================================

@dataclass
class GameState:
    """
    Everything that changes during a game.

    Attributes:
        board: The owned grid of cells.
        mine_count: Number of mines on the board.
        cursor: Index of the selected cell.
        status: Overall game status.
        flags_remaining: Flags still available to place.
        hidden_remaining: Number of cells not yet revealed.
    """

    board: Board
    mine_count: int = -1
    cursor: int = 0
    status: GameStatus = GameStatus.PLAYING
    flags_remaining: int = field(default=-1)
    hidden_remaining: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.mine_count < 0:
            self.mine_count = self.board.mine_count
        if self.flags_remaining < 0:
            self.flags_remaining = self.mine_count
        if self.hidden_remaining < 0:
            self.hidden_remaining = len(self.board)

    @classmethod
    def new_game(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "GameState":
        """Generate a board from ``config`` and wrap it in a fresh state."""
        return cls(generate_board(config, rng), mine_count=config.mine_count)

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    @property
    def current_cell(self) -> Cell:
        """Cell under the cursor."""
        return self.board[self.cursor]

    def snapshot(self) -> GameSnapshot:
        """Build a read-only view for renderers."""
        views = []
        for cell in self.board:
            if cell.is_revealed:
                views.append(
                    CellView(cell.state, cell.adjacent_mines, cell.is_mine)
                )
            else:
                views.append(CellView(cell.state))
        return GameSnapshot(
            width=self.width,
            height=self.height,
            cells=tuple(views),
            cursor=self.cursor,
            flags_remaining=self.flags_remaining,
            status=self.status,
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.array(
            [cell.to_observation() for cell in self.board], dtype=np.int8
        )
        return obs.reshape(self.height, self.width)
