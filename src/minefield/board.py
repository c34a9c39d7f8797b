"""
Board module for the minefield rule engine.

Holds the board configuration, the owned grid of cells and the
generator that places mines and computes adjacent-mine counts.
"""
import logging
import math
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from .adjacency import neighbors, to_index
from .cell import Cell, CellState

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when no valid game can be built from a configuration."""


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_ratio: Fraction of cells holding a mine, in [0, 1).
        seed: Optional seed for mine placement.
    """

    width: int = 20
    height: int = 20
    mine_ratio: float = 0.15
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if not 0 <= self.mine_ratio < 1:
            raise ConfigurationError(
                f"Mine ratio must be in [0, 1), got {self.mine_ratio}"
            )
        if self.mine_count > self.size:
            raise ConfigurationError(f"Too many mines (max {self.size})")

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def mine_count(self) -> int:
        """Number of mines, floor(width * height * mine_ratio)."""
        return math.floor(self.size * self.mine_ratio)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 0.125)
INTERMEDIATE = BoardConfig(16, 16, 0.15625)
CLASSIC = BoardConfig(20, 20, 0.15)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Fixed-size grid of cells addressed by row-major index.

    The board owns its cells; components that need the grid receive
    the board itself.
    """

    width: int
    height: int
    cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [Cell() for _ in range(self.width * self.height)]
        if len(self.cells) != self.width * self.height:
            raise ValueError("Cell count does not match board dimensions")

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Cell:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell index {index} out of range")
        return self.cells[index]

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at ``(row, col)``."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"position ({row}, {col}) out of range")
        return self.cells[to_index(row, col, self.width)]

    def neighbors(self, index: int) -> List[int]:
        """Indices of the cells adjacent to ``index``."""
        return neighbors(index, self.width, self.height)

    def count(self, state: CellState) -> int:
        """Number of cells currently in ``state``."""
        return sum(1 for cell in self.cells if cell.state == state)

    @property
    def mine_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_mine)

    def mine_indices(self) -> List[int]:
        return [i for i, cell in enumerate(self.cells) if cell.is_mine]


# ============================================================================
# Generation
# ============================================================================

def place_mines(board: Board, mine_indices: Iterable[int]) -> None:
    """
    Mark the given cells as mines and update adjacent-mine counts.

    Every neighbor of a mine has its count incremented, including
    neighbors that are mines themselves.

    Args:
        board: Freshly created board.
        mine_indices: Distinct indices to mine.
    """
    for mine in mine_indices:
        cell = board[mine]
        if cell.is_mine:
            raise ValueError(f"cell {mine} is already a mine")
        cell.is_mine = True
        for neighbor in board.neighbors(mine):
            board[neighbor].adjacent_mines += 1


def generate_board(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> Board:
    """
    Build the initial board for a game.

    Mines are drawn uniformly at random without replacement. This is
    the only place randomness is consumed.

    Args:
        config: Validated board configuration.
        rng: Source of randomness; seeded from ``config.seed`` if omitted.

    Returns:
        Board with mines placed and all cells hidden.
    """
    rng = rng or random.Random(config.seed)
    board = Board(config.width, config.height)
    place_mines(board, rng.sample(range(config.size), config.mine_count))
    logger.debug(
        "Generated %dx%d board with %d mines",
        config.width, config.height, config.mine_count,
    )
    return board
