"""Console entry point.

Run with ``python -m grid_chase`` or the ``grid-chase`` script. Monster and
target start on independently drawn random cells of the default 6x6 board.
"""

import logging
import random
import sys
from typing import Optional

from rich.console import Console

from grid_chase.config import DEFAULT_CONFIG, GameConfig
from grid_chase.engine import GameEngine
from grid_chase.errors import GridChaseError
from grid_chase.renderer.console import ConsoleDisplay, ConsoleInput
from grid_chase.step import random_position

logger = logging.getLogger(__name__)


def main(
    config: GameConfig = DEFAULT_CONFIG, console: Optional[Console] = None
) -> int:
    """Play one game on the terminal and return the process exit status."""
    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s"
    )
    console = console or Console(highlight=False)
    engine = GameEngine(
        display=ConsoleDisplay(console),
        input_source=ConsoleInput(console),
        config=config,
    )

    rng = random.Random(config.seed)
    monster = random_position(config.rows, config.cols, rng)
    target = random_position(config.rows, config.cols, rng)
    try:
        engine.initialize(monster, target)
        engine.run()
    except GridChaseError as e:
        logger.critical("Fatal error: %s", e)
        console.print(f"Error: {e}", markup=False)
        return 1
    except KeyboardInterrupt:
        console.print()
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
