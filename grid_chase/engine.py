"""Stateful game driver.

:class:`GameEngine` owns the current :class:`grid_chase.state.State` and
drives the pure reducers from :mod:`grid_chase.step` against a display
surface and an input source. A full turn is:

    render(hidden=False) -> sleep(reveal_delay) -> render(hidden=True)
    -> read one line -> apply path -> resolve turn

A capture loops back to the next turn; a miss renders the revealed board,
prints the game over message and stops reading input.
"""

import logging
import random
import time
from typing import Optional

from grid_chase.actions import UNRECOGNIZED_COMMAND, Action
from grid_chase.config import DEFAULT_CONFIG, GameConfig
from grid_chase.interfaces import Display, InputSource
from grid_chase.moves import attempt_move, can_move
from grid_chase.position import Position
from grid_chase.renderer.text import render_rows, score_line
from grid_chase.state import State
from grid_chase.step import apply_input_path, initialize, resolve_turn
from grid_chase.types import Phase, SleepFn

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-player turn loop around an immutable ``State``.

    Attributes:
        state: Current snapshot; replaced (never mutated) on every transition.
            ``None`` until :meth:`initialize` is called.
        config: Static settings (dimensions, delay, glyphs, seed).
        display: Surface the board is drawn on.
        input_source: Where the typed path comes from.
    """

    state: Optional[State]
    config: GameConfig
    display: Display
    input_source: InputSource

    def __init__(
        self,
        display: Display,
        input_source: InputSource,
        config: GameConfig = DEFAULT_CONFIG,
        sleep: SleepFn = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.display = display
        self.input_source = input_source
        self.config = config
        self._sleep = sleep
        self._rng = rng
        self.state = None

    @property
    def phase(self) -> Phase:
        assert self.state is not None
        return self.state.phase

    @property
    def score(self) -> int:
        assert self.state is not None
        return self.state.score

    @property
    def game_over(self) -> bool:
        assert self.state is not None
        return self.state.game_over

    def initialize(self, monster: Position, target: Position) -> State:
        """Place monster and target on a fresh grid.

        Raises:
            OutOfBoundsError: If either position lies outside the grid.
        """
        self.state = initialize(monster, target, self.config)
        logger.info("New game: monster at %s, target at %s", monster, target)
        return self.state

    def render(self, hidden: bool = False) -> None:
        """Draw the board (masked when ``hidden``) and the score line."""
        assert self.state is not None
        self.display.draw(
            render_rows(self.state, hidden, self.config.glyphs),
            score_line(self.state),
        )

    def can_move(self, action: Action) -> bool:
        assert self.state is not None
        return can_move(self.state, action)

    def attempt_move(self, action: Action) -> State:
        assert self.state is not None
        self.state = attempt_move(self.state, action)
        return self.state

    def apply_input_path(self, text: str) -> State:
        assert self.state is not None
        self.state = apply_input_path(
            self.state, text, on_unrecognized=self._report_unrecognized
        )
        return self.state

    def resolve_turn(self, origin: Position) -> State:
        """Settle the turn; on a miss, reveal the board and announce game over."""
        assert self.state is not None
        self.state = resolve_turn(self.state, origin, self._rng)
        if self.state.game_over:
            self.render(hidden=False)
            if self.state.message:
                self.display.show_message(self.state.message)
        return self.state

    def play_turn(self) -> Optional[State]:
        """Run one full turn.

        Returns:
            Optional[State]: The resolved state, or ``None`` if the input
            stream closed before a path was read (the turn is not resolved).
        """
        assert self.state is not None
        if self.state.game_over:
            return self.state

        self.render(hidden=False)
        self._sleep(self.config.reveal_delay)
        self.render(hidden=True)

        text = self.input_source.read_line()
        if text is None:
            logger.info("Input closed; leaving turn %d unresolved", self.state.turn)
            return None

        origin = self.state.monster
        self.apply_input_path(text)
        return self.resolve_turn(origin)

    def run(self) -> State:
        """Play turns until the game is over or input runs out."""
        assert self.state is not None
        while not self.state.game_over:
            if self.play_turn() is None:
                break
        return self.state

    def _report_unrecognized(self, char: str) -> None:
        self.display.show_message(UNRECOGNIZED_COMMAND)
