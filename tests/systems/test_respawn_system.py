import random
from collections import Counter
from dataclasses import replace

import pytest

from grid_chase.errors import NoEmptyCellError
from grid_chase.position import Position
from grid_chase.state import State
from grid_chase.systems.capture import capture_system
from grid_chase.systems.respawn import respawn_system, turn_rng
from grid_chase.types import Cell
from tests.test_utils import cells_of, make_chase_state


def _captured(
    monster: tuple[int, int] = (2, 2),
    target: tuple[int, int] = (2, 3),
    rows: int = 6,
    cols: int = 6,
    seed: int | None = None,
) -> State:
    """Board right after the monster walked from ``monster`` onto ``target``."""
    state = make_chase_state(
        monster=monster, target=target, rows=rows, cols=cols, seed=seed
    )
    state = replace(state, monster=Position(*target))
    return capture_system(state, Position(*monster))


def test_respawn_places_single_target_on_empty_cell() -> None:
    state = _captured()
    respawned = respawn_system(state, random.Random(7))
    assert len(cells_of(respawned.grid, Cell.TARGET)) == 1
    assert cells_of(respawned.grid, Cell.TARGET) == [
        (respawned.target.row, respawned.target.col)
    ]
    assert respawned.target != respawned.monster
    assert cells_of(respawned.grid, Cell.MONSTER) == [(2, 3)]


def test_respawn_only_picks_empty_cells() -> None:
    # 1x3 board: monster and footprint leave exactly one empty cell
    state = make_chase_state(
        monster=(0, 0),
        target=(0, 0),
        rows=1,
        cols=3,
        extra_cells=[((0, 0), Cell.MONSTER), ((0, 1), Cell.FOOTPRINT)],
    )
    for seed in range(10):
        respawned = respawn_system(state, random.Random(seed))
        assert respawned.target == Position(0, 2)


def test_respawn_is_uniform_over_empty_cells() -> None:
    state = _captured(monster=(0, 0), target=(0, 1), rows=2, cols=2)
    assert cells_of(state.grid, Cell.MONSTER) == [(0, 1)]
    rng = random.Random(1234)
    counts = Counter(respawn_system(state, rng).target for _ in range(3000))
    assert set(counts) == {Position(0, 0), Position(0, 1), Position(1, 0)}
    for count in counts.values():
        assert 850 < count < 1150


def test_respawn_without_empty_cell_is_fatal() -> None:
    state = make_chase_state(monster=(0, 0), target=(0, 0), rows=1, cols=1)
    state = capture_system(state, Position(0, 0))
    with pytest.raises(NoEmptyCellError):
        respawn_system(state, random.Random(0))


def test_seeded_respawn_is_deterministic() -> None:
    state = _captured(seed=42)
    first = respawn_system(state)
    second = respawn_system(state)
    assert first.target == second.target


def test_turn_rng_varies_with_turn() -> None:
    state = _captured(seed=42)
    draws = {
        turn_rng(replace(state, turn=turn)).random() for turn in range(5)
    }
    assert len(draws) == 5
