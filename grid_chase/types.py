"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from typing import Callable, Optional

from pyrsistent.typing import PVector


class Cell(StrEnum):
    """Contents of a single grid cell."""

    MONSTER = auto()
    TARGET = auto()
    FOOTPRINT = auto()
    EMPTY = auto()


class Phase(StrEnum):
    """Turn state machine.

    ``INITIALIZING`` -> ``AWAITING_INPUT`` once the board is placed;
    ``AWAITING_INPUT`` -> ``RESOLVING`` after an input path is consumed;
    ``RESOLVING`` -> ``AWAITING_INPUT`` on capture or ``GAME_OVER`` on a miss.
    ``GAME_OVER`` is terminal.
    """

    INITIALIZING = auto()
    AWAITING_INPUT = auto()
    RESOLVING = auto()
    GAME_OVER = auto()


Grid = PVector[PVector[Cell]]

# Reads one raw line from the player; ``None`` when the stream is closed.
ReadLineFn = Callable[[], Optional[str]]
SleepFn = Callable[[float], None]
