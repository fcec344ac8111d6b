"""Glyph mapping for text rendering."""

from typing import List, Mapping

from grid_chase.config import DEFAULT_GLYPHS
from grid_chase.state import State
from grid_chase.types import Cell


def glyph_for(cell: Cell, glyphs: Mapping[Cell, str] = DEFAULT_GLYPHS) -> str:
    """Return the display glyph for ``cell``.

    Raises:
        KeyError: If ``glyphs`` has no entry for ``cell``.
    """
    return glyphs[cell]


def render_rows(
    state: State, hidden: bool = False, glyphs: Mapping[Cell, str] = DEFAULT_GLYPHS
) -> List[List[str]]:
    """Resolve every grid cell to its glyph.

    Args:
        state (State): State to draw. Only ``state.grid`` is read.
        hidden (bool): Draw every cell as ``Cell.EMPTY`` to mask the board.
        glyphs (Mapping[Cell, str]): Glyph table.

    Returns:
        List[List[str]]: One list of glyphs per grid row.
    """
    return [
        [glyph_for(Cell.EMPTY if hidden else cell, glyphs) for cell in row]
        for row in state.grid
    ]


def score_line(state: State) -> str:
    return f"SCORE: {state.score}"


def render_text(
    state: State, hidden: bool = False, glyphs: Mapping[Cell, str] = DEFAULT_GLYPHS
) -> str:
    """Plain multi-line dump of the board and score (handy for logs)."""
    lines = [
        "".join(f" {glyph} " for glyph in row)
        for row in render_rows(state, hidden, glyphs)
    ]
    lines.append(score_line(state))
    return "\n".join(lines)
