"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Board,
    BoardConfig,
    Cell,
    CommandProcessor,
    GameState,
    place_mines,
)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def processor() -> CommandProcessor:
    """Create a command processor."""
    return CommandProcessor()


@pytest.fixture
def make_state():
    """Factory building a game with mines at fixed indices."""
    def _make_state(width: int, height: int, mines=()) -> GameState:
        board = Board(width, height)
        place_mines(board, mines)
        return GameState(board)
    return _make_state


@pytest.fixture
def seeded_game() -> GameState:
    """Create a 9x9 game with 10 mines from a fixed seed."""
    return GameState.new_game(BoardConfig(9, 9, 0.125), random.Random(42))


@pytest.fixture
def empty_game(make_state) -> GameState:
    """Create a 5x5 game with no mines for cascade testing."""
    return make_state(5, 5)


@pytest.fixture
def corner_mine_game(make_state) -> GameState:
    """
    Create a 4x4 game with mines at indices 0 and 15.

    Layout (M = mine):
        M 1 0 0
        1 1 0 0
        0 0 1 1
        0 0 1 M
    """
    return make_state(4, 4, mines=[0, 15])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
