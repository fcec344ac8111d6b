"""Game over system."""

from dataclasses import replace

from grid_chase.state import State
from grid_chase.types import Cell, Phase
from grid_chase.utils.grid import set_cell

GAME_OVER_MESSAGE = "GAME OVER :("


def miss_system(state: State) -> State:
    """Leave a footprint where the monster ended up and end the game.

    The footprint is written at the monster's final position of the turn, not
    at the cell it started from; the start cell keeps its monster marker.
    Idempotent on an already finished game.
    """
    if state.phase == Phase.GAME_OVER:
        return state
    return replace(
        state,
        grid=set_cell(state.grid, state.monster, Cell.FOOTPRINT),
        phase=Phase.GAME_OVER,
        message=GAME_OVER_MESSAGE,
    )
