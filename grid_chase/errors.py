"""Exceptions raised by the engine."""


class GridChaseError(Exception):
    """Base class for fatal game errors."""


class OutOfBoundsError(GridChaseError, IndexError):
    """A position lies outside the ``rows`` x ``cols`` grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Location {(row, col)} out of area. "
            f"Please enter a location inside {rows}x{cols}"
        )


class NoEmptyCellError(GridChaseError, RuntimeError):
    """The target cannot respawn because every cell is occupied."""
