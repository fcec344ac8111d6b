"""Capture system.

Reconciles the grid after the monster finished its path on the target cell:
the score goes up by exactly one, the start cell and the old target cell are
cleared and the monster is drawn at its new position. Respawning the target
is left to :mod:`grid_chase.systems.respawn`.
"""

from dataclasses import replace

from grid_chase.position import Position
from grid_chase.state import State
from grid_chase.types import Cell
from grid_chase.utils.grid import set_cell


def is_capture(state: State) -> bool:
    return state.monster == state.target


def capture_system(state: State, origin: Position) -> State:
    """Apply capture bookkeeping if the monster stands on the target.

    Args:
        state (State): State after the input path was applied.
        origin (Position): Monster position at the start of the turn.

    Returns:
        State: Unchanged if there is no capture, otherwise a state with the
        score bumped and the grid reconciled.
    """
    if not is_capture(state):
        return state

    grid = set_cell(state.grid, origin, Cell.EMPTY)
    grid = set_cell(grid, state.target, Cell.EMPTY)
    grid = set_cell(grid, state.monster, Cell.MONSTER)
    return replace(state, grid=grid, score=state.score + 1)
