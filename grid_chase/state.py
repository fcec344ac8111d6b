"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole board at a single point of a turn. Reducers in :mod:`grid_chase.step`
and :mod:`grid_chase.systems` are pure functions that take a previous
``State`` plus inputs and return a *new* ``State``; no mutation happens
in-place.

Design notes:

* ``grid`` is a persistent vector of rows (``pyrsistent.PVector``). Writes go
    through :func:`grid_chase.utils.grid.set_cell` which returns a new grid.
* ``monster`` moves step by step while a path is applied, but the grid cells
    are only reconciled once the turn resolves. Between turns the monster cell
    always holds ``Cell.MONSTER``.
* ``phase`` drives the turn state machine. Reducers short-circuit on
    ``Phase.GAME_OVER``.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_chase.position import Position
from grid_chase.types import Grid, Phase


@dataclass(frozen=True)
class State:
    """Immutable game snapshot.

    Attributes:
        rows (int): Grid height in cells.
        cols (int): Grid width in cells.
        grid (Grid): ``grid[row][col]`` cell contents.
        monster (Position): Current monster position (may run ahead of the grid
            while a path is being applied).
        target (Position): Current target position.
        score (int): Number of captures so far.
        turn (int): Number of resolved turns (0-based).
        phase (Phase): Turn state machine position.
        message (str | None): Last informational / terminal message.
        seed (int | None): Base RNG seed for target respawns.
    """

    rows: int
    cols: int
    grid: Grid
    monster: Position
    target: Position

    # Status
    score: int = 0
    turn: int = 0
    phase: Phase = Phase.INITIALIZING
    message: Optional[str] = None

    # RNG
    seed: Optional[int] = None

    @property
    def game_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-``None`` fields.

        The grid is rendered as a tuple of row tuples of cell names so the
        result is easy to dump while debugging.

        Returns:
            PMap[str, Any]: Field name to value for every field that is set.
        """
        description: PMap[str, Any] = pmap()
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if name == "grid":
                value = tuple(tuple(str(cell) for cell in row) for row in value)
            elif value is None:
                continue
            description = description.set(name, value)
        return description

