# tests/unit/test_moves.py

import pytest
from typing import Tuple

from grid_chase.actions import Action, MOVE_ACTIONS
from grid_chase.moves import attempt_move, can_move, next_position
from grid_chase.position import Position
from grid_chase.state import State
from tests.test_utils import make_chase_state


@pytest.mark.parametrize(
    "start, action, expected",
    [
        # interior, all actions
        ((2, 2), Action.UP, True),
        ((2, 2), Action.DOWN, True),
        ((2, 2), Action.LEFT, True),
        ((2, 2), Action.RIGHT, True),
        # top-left corner
        ((0, 0), Action.UP, False),
        ((0, 0), Action.LEFT, False),
        ((0, 0), Action.DOWN, True),
        ((0, 0), Action.RIGHT, True),
        # bottom-right corner
        ((5, 5), Action.DOWN, False),
        ((5, 5), Action.RIGHT, False),
        ((5, 5), Action.UP, True),
        ((5, 5), Action.LEFT, True),
        # edges
        ((0, 3), Action.UP, False),
        ((5, 3), Action.DOWN, False),
        ((3, 0), Action.LEFT, False),
        ((3, 5), Action.RIGHT, False),
    ],
)
def test_can_move(start: Tuple[int, int], action: Action, expected: bool) -> None:
    state = make_chase_state(monster=start, target=(4, 1))
    assert can_move(state, action) is expected


@pytest.mark.parametrize(
    "action, expected",
    [
        (Action.UP, (1, 2)),
        (Action.DOWN, (3, 2)),
        (Action.LEFT, (2, 1)),
        (Action.RIGHT, (2, 3)),
    ],
)
def test_attempt_move_updates_monster_only(
    action: Action, expected: Tuple[int, int]
) -> None:
    state = make_chase_state(monster=(2, 2), target=(5, 5))
    moved: State = attempt_move(state, action)
    assert moved.monster == Position(*expected)
    # Grid is only reconciled when the turn resolves
    assert moved.grid == state.grid
    assert moved.target == state.target
    assert moved.score == state.score


@pytest.mark.parametrize("action", MOVE_ACTIONS)
def test_blocked_move_leaves_state_unchanged(action: Action) -> None:
    state = make_chase_state(monster=(0, 0), target=(0, 0), rows=1, cols=1)
    assert attempt_move(state, action) is state


def test_next_position_ignores_bounds() -> None:
    assert next_position(Position(0, 0), Action.UP) == Position(-1, 0)
    assert next_position(Position(0, 0), Action.LEFT) == Position(0, -1)


def test_single_row_grid_only_moves_horizontally() -> None:
    state = make_chase_state(monster=(0, 1), target=(0, 0), rows=1, cols=3)
    assert not can_move(state, Action.UP)
    assert not can_move(state, Action.DOWN)
    assert can_move(state, Action.LEFT)
    assert can_move(state, Action.RIGHT)
