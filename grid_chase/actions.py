"""Action enumerations and path parsing.

Defines the human readable :class:`Action` (string enum) used internally, the
stable integer :class:`GymAction` mapping for Gymnasium compatibility and the
keyboard bindings used to read a typed path.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, List, Optional, Tuple


class Action(StrEnum):
    """Single-step monster moves."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
}
"""Path character to action mapping. Matching is case sensitive."""


ACTION_KEYS: Dict[Action, str] = {action: key for key, action in KEY_BINDINGS.items()}
"""Inverse of ``KEY_BINDINGS``; used to express single actions as paths."""


UNRECOGNIZED_COMMAND = "Unrecognized command!"


def key_to_action(key: str) -> Optional[Action]:
    return KEY_BINDINGS.get(key)


def parse_path(text: str) -> Tuple[List[Action], List[str]]:
    """Split a raw input line into recognized actions and rejected characters.

    Surrounding whitespace is trimmed first; every remaining character is
    looked up independently, so ``"dxd"`` yields two ``RIGHT`` actions and one
    rejected ``"x"``.

    Args:
        text (str): Raw line read from the player.

    Returns:
        Tuple[List[Action], List[str]]: Actions in input order and the
        unrecognized characters in input order.
    """
    actions: List[Action] = []
    unrecognized: List[str] = []
    for char in text.strip():
        action = key_to_action(char)
        if action is None:
            unrecognized.append(char)
        else:
            actions.append(action)
    return actions, unrecognized