"""
Cascading reveal ("flood fill") over the board.
"""
from typing import Set

from .board import Board


def reveal(board: Board, start: int) -> Set[int]:
    """
    Reveal ``start`` and cascade through connected zero cells.

    Uses an explicit worklist so large boards cannot exhaust the call
    stack. A cell already revealed is skipped, which bounds the walk to
    one visit per cell and makes a repeated call a no-op. Expansion
    stops at cells with a non-zero adjacent-mine count.

    Mine status is not consulted, and flagged cells are revealed like
    hidden ones.

    Args:
        board: Board to mutate.
        start: Index of the first cell to reveal.

    Returns:
        Indices that transitioned to revealed.
    """
    revealed = set()
    worklist = [start]
    while worklist:
        index = worklist.pop()
        cell = board[index]
        if not cell.reveal():
            continue
        revealed.add(index)
        if cell.adjacent_mines == 0:
            worklist.extend(board.neighbors(index))
    return revealed
