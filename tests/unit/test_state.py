from dataclasses import FrozenInstanceError, replace

import pytest

from grid_chase.types import Phase
from tests.test_utils import make_chase_state


def test_state_is_frozen() -> None:
    state = make_chase_state(monster=(0, 0), target=(1, 1))
    with pytest.raises(FrozenInstanceError):
        state.score = 5  # type: ignore[misc]


def test_description_is_sparse() -> None:
    state = make_chase_state(monster=(0, 0), target=(0, 1), rows=1, cols=2)
    description = state.description
    assert "message" not in description
    assert "seed" not in description
    assert description["grid"] == (("monster", "target"),)
    assert description["score"] == 0
    assert description["phase"] == Phase.AWAITING_INPUT


def test_game_over_property() -> None:
    state = make_chase_state(monster=(0, 0), target=(1, 1))
    assert not state.game_over
    assert replace(state, phase=Phase.GAME_OVER).game_over
