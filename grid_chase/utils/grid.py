"""Grid construction and bounds-checked cell access.

All helpers are pure: writes return a new persistent grid and leave the input
untouched.
"""

from typing import List

from pyrsistent import pvector

from grid_chase.errors import OutOfBoundsError
from grid_chase.position import Position
from grid_chase.types import Cell, Grid


def empty_grid(rows: int, cols: int) -> Grid:
    """Return a ``rows`` x ``cols`` grid filled with ``Cell.EMPTY``."""
    return pvector(pvector([Cell.EMPTY] * cols) for _ in range(rows))


def grid_size(grid: Grid) -> tuple[int, int]:
    """Return ``(rows, cols)`` of ``grid``."""
    return len(grid), (len(grid[0]) if len(grid) > 0 else 0)


def is_in_bounds(grid: Grid, pos: Position) -> bool:
    """Return True if ``pos`` lies within the grid rectangle."""
    rows, cols = grid_size(grid)
    return 0 <= pos.row < rows and 0 <= pos.col < cols


def check_bounds(grid: Grid, pos: Position) -> None:
    """Raise ``OutOfBoundsError`` if ``pos`` is outside ``grid``."""
    if not is_in_bounds(grid, pos):
        rows, cols = grid_size(grid)
        raise OutOfBoundsError(pos.row, pos.col, rows, cols)


def cell_at(grid: Grid, pos: Position) -> Cell:
    check_bounds(grid, pos)
    return grid[pos.row][pos.col]


def set_cell(grid: Grid, pos: Position, cell: Cell) -> Grid:
    """Return a copy of ``grid`` with ``pos`` set to ``cell``."""
    check_bounds(grid, pos)
    return grid.set(pos.row, grid[pos.row].set(pos.col, cell))


def positions_of(grid: Grid, cell: Cell) -> List[Position]:
    """Linear row-major scan for every position holding ``cell``."""
    return [
        Position(row, col)
        for row, cells in enumerate(grid)
        for col, value in enumerate(cells)
        if value == cell
    ]


def empty_positions(grid: Grid) -> List[Position]:
    return positions_of(grid, Cell.EMPTY)


def count_cells(grid: Grid, cell: Cell) -> int:
    return sum(1 for cells in grid for value in cells if value == cell)
