import pytest

from grid_chase.config import (
    COLS,
    DEFAULT_CONFIG,
    DEFAULT_GLYPHS,
    REVEAL_DELAY_SECONDS,
    ROWS,
    GameConfig,
)
from grid_chase.types import Cell


def test_default_config() -> None:
    assert (DEFAULT_CONFIG.rows, DEFAULT_CONFIG.cols) == (ROWS, COLS) == (6, 6)
    assert DEFAULT_CONFIG.reveal_delay == REVEAL_DELAY_SECONDS == 1.0
    assert DEFAULT_CONFIG.seed is None
    assert set(DEFAULT_CONFIG.glyphs) == set(Cell)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rows": 0},
        {"cols": 0},
        {"reveal_delay": -0.5},
        {"glyphs": {Cell.MONSTER: "M"}},
    ],
)
def test_invalid_config_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        GameConfig(**kwargs)  # type: ignore[arg-type]


def test_glyphs_are_frozen() -> None:
    glyphs = dict(DEFAULT_GLYPHS)
    config = GameConfig(glyphs=glyphs)
    glyphs[Cell.EMPTY] = "."
    assert config.glyphs[Cell.EMPTY] == DEFAULT_GLYPHS[Cell.EMPTY]
