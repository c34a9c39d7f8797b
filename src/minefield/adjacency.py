"""
Grid adjacency helpers.

Cells are addressed by a row-major index ``row * width + col``.
"""
from typing import List, Tuple


def to_index(row: int, col: int, width: int) -> int:
    return row * width + col


def to_coords(index: int, width: int) -> Tuple[int, int]:
    """Convert a flat index to ``(row, col)``."""
    return divmod(index, width)


def neighbors(index: int, width: int, height: int) -> List[int]:
    """
    Get the indices of the cells touching ``index``.

    Up to eight compass directions are considered; directions that
    would cross an edge of the grid are dropped, so there is no
    wraparound.

    Args:
        index: Flat index of the center cell.
        width: Number of columns.
        height: Number of rows.

    Returns:
        Neighbor indices in row-major order.

    Raises:
        IndexError: If ``index`` is outside the grid.
    """
    if not 0 <= index < width * height:
        raise IndexError(f"cell index {index} out of range")

    row, col = to_coords(index, width)
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < height and 0 <= new_col < width:
                result.append(to_index(new_row, new_col, width))
    return result
