"""Target respawn system.

After a capture the target moves to a cell drawn uniformly from every cell
that is currently empty. The candidate list is rebuilt from a fresh row-major
scan on each call.
"""

import random
from dataclasses import replace
from typing import Optional

from grid_chase.errors import NoEmptyCellError
from grid_chase.state import State
from grid_chase.types import Cell
from grid_chase.utils.grid import empty_positions, set_cell


def turn_rng(state: State) -> random.Random:
    """Return the RNG used for this turn.

    Seeded states derive a deterministic generator from ``(seed, turn)`` so a
    replay with the same inputs respawns targets identically.
    """
    if state.seed is None:
        return random.Random()
    return random.Random(hash((state.seed, state.turn)))


def respawn_system(state: State, rng: Optional[random.Random] = None) -> State:
    """Place a new target on a uniformly chosen empty cell.

    Raises:
        NoEmptyCellError: If the grid has no empty cell left.
    """
    candidates = empty_positions(state.grid)
    if not candidates:
        raise NoEmptyCellError(
            f"No empty cell left on {state.rows}x{state.cols} grid to respawn target"
        )
    if rng is None:
        rng = turn_rng(state)
    new_target = rng.choice(candidates)
    return replace(
        state,
        grid=set_cell(state.grid, new_target, Cell.TARGET),
        target=new_target,
    )
