"""State reducers and turn orchestration.

This module wires the movement helpers and the resolution systems into the
operations a turn is made of. Every function here is pure: it returns a *new*
:class:`grid_chase.state.State` and never touches I/O.

Turn flow:

1. :func:`initialize` places monster and target on an empty grid.
2. :func:`apply_input_path` walks the monster along the typed path, one
    cell per recognized key; blocked steps are dropped.
3. :func:`resolve_turn` compares the final monster position with the
    target and either scores and respawns the target (capture) or leaves a
    footprint and ends the game (miss).

:func:`step` runs 2 and 3 back to back for callers that do not need the
intermediate state.
"""

import logging
import random
from dataclasses import replace
from typing import Callable, Optional

from grid_chase.actions import UNRECOGNIZED_COMMAND, parse_path
from grid_chase.config import DEFAULT_CONFIG, GameConfig
from grid_chase.moves import attempt_move
from grid_chase.position import Position
from grid_chase.state import State
from grid_chase.systems.capture import capture_system, is_capture
from grid_chase.systems.respawn import respawn_system
from grid_chase.systems.terminal import miss_system
from grid_chase.types import Cell, Phase
from grid_chase.utils.grid import check_bounds, empty_grid, set_cell

logger = logging.getLogger(__name__)


def random_position(
    rows: int, cols: int, rng: Optional[random.Random] = None
) -> Position:
    """Draw a position uniformly, each axis independently."""
    rng = rng or random.Random()
    return Position(rng.randrange(rows), rng.randrange(cols))


def initialize(
    monster: Position, target: Position, config: GameConfig = DEFAULT_CONFIG
) -> State:
    """Build the starting state.

    Monster and target are placed in that order, so if both land on the same
    cell the cell shows the target.

    Args:
        monster (Position): Starting monster position.
        target (Position): Starting target position.
        config (GameConfig): Board dimensions and RNG seed.

    Returns:
        State: A state in ``Phase.AWAITING_INPUT``.

    Raises:
        OutOfBoundsError: If either position is outside the grid.
    """
    grid = empty_grid(config.rows, config.cols)
    check_bounds(grid, monster)
    check_bounds(grid, target)

    grid = set_cell(grid, monster, Cell.MONSTER)
    grid = set_cell(grid, target, Cell.TARGET)
    return State(
        rows=config.rows,
        cols=config.cols,
        grid=grid,
        monster=monster,
        target=target,
        phase=Phase.AWAITING_INPUT,
        seed=config.seed,
    )


def apply_input_path(
    state: State,
    text: str,
    on_unrecognized: Optional[Callable[[str], None]] = None,
) -> State:
    """Walk the monster along a typed path.

    Each recognized character moves the monster one cell; moves that would
    leave the grid are skipped and later characters still apply. Unrecognized
    characters are reported through ``on_unrecognized`` and otherwise ignored.

    Args:
        state (State): Current state.
        text (str): Raw input line.
        on_unrecognized (Callable[[str], None] | None): Called once per rejected
            character with the offending character.

    Returns:
        State: State in ``Phase.RESOLVING``, or ``state`` itself if the game
        is already over.
    """
    if state.phase == Phase.GAME_OVER:
        return state

    actions, unrecognized = parse_path(text)
    for char in unrecognized:
        logger.warning("%s (%r)", UNRECOGNIZED_COMMAND, char)
        if on_unrecognized is not None:
            on_unrecognized(char)

    for action in actions:
        state = attempt_move(state, action)

    return replace(
        state,
        phase=Phase.RESOLVING,
        message=UNRECOGNIZED_COMMAND if unrecognized else None,
    )


def resolve_turn(
    state: State, origin: Position, rng: Optional[random.Random] = None
) -> State:
    """Settle the turn after the full path was applied.

    Args:
        state (State): State after :func:`apply_input_path`.
        origin (Position): Monster position before the path was applied.
        rng (random.Random | None): Respawn RNG; derived from the state seed
            when omitted.

    Returns:
        State: ``Phase.AWAITING_INPUT`` after a capture, ``Phase.GAME_OVER``
        after a miss. A finished game is returned unchanged.

    Raises:
        NoEmptyCellError: If a capture leaves no empty cell for the target.
    """
    if state.phase == Phase.GAME_OVER:
        return state

    if is_capture(state):
        state = capture_system(state, origin)
        state = respawn_system(state, rng)
        state = replace(state, phase=Phase.AWAITING_INPUT, message=None)
        logger.info("Capture on turn %d, score %d", state.turn, state.score)
    else:
        state = miss_system(state)
        logger.info("Miss on turn %d, final score %d", state.turn, state.score)

    return replace(state, turn=state.turn + 1)


def step(
    state: State,
    text: str,
    rng: Optional[random.Random] = None,
    on_unrecognized: Optional[Callable[[str], None]] = None,
) -> State:
    """Apply a typed path and resolve the turn in one go."""
    origin = state.monster
    state = apply_input_path(state, text, on_unrecognized=on_unrecognized)
    return resolve_turn(state, origin, rng)
