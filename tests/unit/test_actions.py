import pytest

from grid_chase.actions import (
    ACTION_KEYS,
    Action,
    GymAction,
    KEY_BINDINGS,
    key_to_action,
    parse_path,
)


def test_key_bindings() -> None:
    assert KEY_BINDINGS == {
        "w": Action.UP,
        "s": Action.DOWN,
        "a": Action.LEFT,
        "d": Action.RIGHT,
    }
    assert key_to_action("x") is None
    # Bindings are case sensitive
    assert key_to_action("W") is None


def test_action_keys_inverse() -> None:
    for key, action in KEY_BINDINGS.items():
        assert ACTION_KEYS[action] == key


def test_gym_action_names_match_actions() -> None:
    assert [a.name for a in GymAction] == [a.name for a in Action]
    assert GymAction.UP == 0


@pytest.mark.parametrize(
    "text, actions, unrecognized",
    [
        ("", [], []),
        ("wasd", [Action.UP, Action.LEFT, Action.DOWN, Action.RIGHT], []),
        ("  dd\n", [Action.RIGHT, Action.RIGHT], []),
        ("qzx", [], ["q", "z", "x"]),
        ("dxd", [Action.RIGHT, Action.RIGHT], ["x"]),
        ("w s", [Action.UP, Action.DOWN], [" "]),
        ("WASD", [], ["W", "A", "S", "D"]),
    ],
)
def test_parse_path(text: str, actions: list[Action], unrecognized: list[str]) -> None:
    assert parse_path(text) == (actions, unrecognized)
