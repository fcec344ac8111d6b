"""Single-step monster movement.

A move only changes ``State.monster``. Grid cells are left alone until the
turn resolves, so a path can wander over the target or its own start cell
without disturbing the board.
"""

from dataclasses import replace
from typing import Dict, Tuple

from grid_chase.actions import Action
from grid_chase.position import Position
from grid_chase.state import State

ACTION_DELTA: Dict[Action, Tuple[int, int]] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}
"""Row / column deltas for each action."""


def can_move(state: State, action: Action) -> bool:
    """Return True if ``action`` keeps the monster on the grid."""
    pos = state.monster
    if action == Action.UP:
        return pos.row > 0
    if action == Action.DOWN:
        return pos.row < state.rows - 1
    if action == Action.LEFT:
        return pos.col > 0
    if action == Action.RIGHT:
        return pos.col < state.cols - 1
    raise ValueError(f"Action is not valid: {action!r}")


def next_position(pos: Position, action: Action) -> Position:
    drow, dcol = ACTION_DELTA[action]
    return Position(pos.row + drow, pos.col + dcol)


def attempt_move(state: State, action: Action) -> State:
    """Move the monster one cell if allowed.

    Blocked moves are dropped silently and return the same ``State`` object.
    """
    if not can_move(state, action):
        return state
    return replace(state, monster=next_position(state.monster, action))
