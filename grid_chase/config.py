"""Game configuration.

``GameConfig`` bundles the fixed board dimensions, the reveal delay and the
glyph table. The process uses :data:`DEFAULT_CONFIG`; nothing reads flags,
environment variables or files. Tests and the Gymnasium wrapper pass their own
instance to :func:`grid_chase.step.initialize` instead.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_chase.types import Cell

ROWS = 6
COLS = 6
REVEAL_DELAY_SECONDS = 1.0

DEFAULT_GLYPHS: PMap[Cell, str] = pmap(
    {
        Cell.MONSTER: "🐸",
        Cell.TARGET: "🍎",
        Cell.FOOTPRINT: "🐾",
        Cell.EMPTY: "⚪",
    }
)


@dataclass(frozen=True)
class GameConfig:
    """Static game settings.

    Attributes:
        rows: Grid height in cells.
        cols: Grid width in cells.
        reveal_delay: Seconds the true board stays visible before it is masked.
        glyphs: Display glyph for every ``Cell`` kind.
        seed: Base RNG seed for target respawns; ``None`` for unseeded play.
    """

    rows: int = ROWS
    cols: int = COLS
    reveal_delay: float = REVEAL_DELAY_SECONDS
    glyphs: Mapping[Cell, str] = field(default_factory=lambda: DEFAULT_GLYPHS)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Grid must be at least 1x1, got {self.rows}x{self.cols}"
            )
        if self.reveal_delay < 0:
            raise ValueError(f"Reveal delay must be >= 0, got {self.reveal_delay}")
        missing = [cell for cell in Cell if cell not in self.glyphs]
        if missing:
            raise ValueError(f"Glyph table is missing cells: {missing}")
        object.__setattr__(self, "glyphs", pmap(self.glyphs))


DEFAULT_CONFIG = GameConfig()
